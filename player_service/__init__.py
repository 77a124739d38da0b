"""
Player Directory - owner of record for player data.
"""
