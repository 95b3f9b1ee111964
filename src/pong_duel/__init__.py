"""
Pong Duel: a player-vs-CPU paddle game on mini-arcade-core.
"""

__version__ = "0.1.0"
