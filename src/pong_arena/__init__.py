"""
Pong Arena: a Pong variant simulated in percentage-of-arena coordinates.
"""
