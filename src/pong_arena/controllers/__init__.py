"""
Controllers that steer CPU-driven entities.
"""
