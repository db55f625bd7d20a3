"""
Couche infrastructure : persistance SQLite du catalogue et des reglages.
"""
