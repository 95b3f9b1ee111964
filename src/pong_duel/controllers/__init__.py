"""
Paddle controllers for Pong Duel.
"""
