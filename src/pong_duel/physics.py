"""
Ball physics for Pong Duel: movement, wall bounces and paddle hits.

Every function here works on a single tick with per-tick velocities; no
delta time is involved.
"""

from __future__ import annotations

from typing import Literal, Optional

from pong_duel.entities import Ball, Paddle

Side = Literal["PLAYER", "AI"]


def overlaps(ball: Ball, paddle: Paddle) -> bool:
    """
    Check whether the ball's bounding box intersects the paddle.

    Touching edges do not count as an overlap.

    :param ball: The ball.
    :type ball: Ball

    :param paddle: The paddle.
    :type paddle: Paddle

    :return: True if both axes overlap.
    :rtype: bool
    """
    return (
        ball.left < paddle.right
        and ball.right > paddle.left
        and ball.bottom > paddle.top
        and ball.top < paddle.bottom
    )


def collide_point(ball: Ball, paddle: Paddle) -> float:
    """
    Normalized offset of the ball from the paddle center.

    -1.0 is the top edge, 0.0 the center and +1.0 the bottom edge. Hits on
    the ball's rim past the paddle ends fall slightly outside that range.

    :param ball: The ball.
    :type ball: Ball

    :param paddle: The paddle that was hit.
    :type paddle: Paddle

    :return: Offset scaled by half the paddle height.
    :rtype: float
    """
    half = paddle.size.height / 2
    return (ball.position.y - paddle.center_y) / half


def integrate(ball: Ball):
    """Advance the ball by one tick of its velocity."""
    ball.position.x += ball.velocity.vx
    ball.position.y += ball.velocity.vy


def bounce_walls(ball: Ball, surface_height: float) -> bool:
    """
    Keep the ball between the top and bottom walls.

    The ball is put back on the wall it crossed and its vertical velocity
    is flipped.

    :return: True if the ball bounced.
    :rtype: bool
    """
    bounced = False
    if ball.top < 0:
        ball.position.y = ball.radius
        ball.velocity.vy = -ball.velocity.vy
        bounced = True
    if ball.bottom > surface_height:
        ball.position.y = surface_height - ball.radius
        ball.velocity.vy = -ball.velocity.vy
        bounced = True
    return bounced


def deflect(ball: Ball, paddle: Paddle, side: Side) -> bool:
    """
    Bounce the ball off a paddle if they overlap.

    The ball is moved out of the paddle's face, its horizontal direction is
    reversed and its vertical speed is set from where it struck the paddle.

    :param ball: The ball.
    :type ball: Ball

    :param paddle: The paddle to test.
    :type paddle: Paddle

    :param side: Which side the paddle guards.
    :type side: Side

    :return: True if the ball was deflected.
    :rtype: bool
    """
    if not overlaps(ball, paddle):
        return False

    if side == "PLAYER":
        ball.position.x = paddle.right + ball.radius
    else:
        ball.position.x = paddle.left - ball.radius

    ball.velocity.vx = -ball.velocity.vx
    ball.velocity.vy = ball.speed * collide_point(ball, paddle)
    return True


def detect_goal(ball: Ball, surface_width: float) -> Optional[Side]:
    """
    Find out who scored, if anyone.

    :return: "AI" when the ball left through the player's wall, "PLAYER"
        when it left through the AI's wall, None otherwise.
    :rtype: Optional[Side]
    """
    if ball.left < 0:
        return "AI"
    if ball.right > surface_width:
        return "PLAYER"
    return None
