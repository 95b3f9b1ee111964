"""
Scenes for Pong Duel, discovered by the mini-arcade-core scene registry.
"""
