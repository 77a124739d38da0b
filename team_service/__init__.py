"""
Team Directory - owner of record for team data.
"""
