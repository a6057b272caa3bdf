"""
In-game scene package.
"""
