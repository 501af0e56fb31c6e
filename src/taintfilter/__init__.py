"""
Filters for tainted values in contexts that have no escape syntax:
numeric literals, CSS colors and URLs.
"""
