"""
Scenes for Pong Arena, auto-discovered at startup.
"""
