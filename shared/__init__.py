"""
Code shared by the gateway and the directory services.
"""
