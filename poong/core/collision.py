"""
Collision detection system for Poong
"""

from poong.core.entities import Ball
from poong.core.entities import Paddle


def clamp(value: float, low: float, high: float) -> float:
    """Clamps a value into [low, high]"""
    return max(low, min(high, value))


def circle_rect_collision(
    cx: float, cy: float, radius: float, rect: tuple[float, float, float, float]
) -> bool:
    """Detects overlap between a circle and an axis-aligned rectangle"""
    x, y, width, height = rect

    # Closest point on the rectangle to the circle center
    closest_x = clamp(cx, x, x + width)
    closest_y = clamp(cy, y, y + height)

    dx = cx - closest_x
    dy = cy - closest_y
    return dx * dx + dy * dy <= radius * radius


def bounce_angle(ball_y: float, paddle: Paddle, max_bounce_angle: float) -> float:
    """
    Reflection angle (radians) for a ball hitting ``paddle`` at height ``ball_y``.

    The hit offset from the paddle center is normalized to [-1, 1] and scaled
    by ``max_bounce_angle``, so a dead-center hit returns horizontally.
    """
    relative_intersect = (ball_y - paddle.center_y) / (paddle.height / 2)
    relative_intersect = clamp(relative_intersect, -1.0, 1.0)
    return relative_intersect * max_bounce_angle


class CollisionDetector:
    """Main collision manager"""

    def __init__(
        self,
        max_bounce_angle: float,
        speed_increment: float,
        max_speed: float | None = None,
    ) -> None:
        self.max_bounce_angle = max_bounce_angle
        self.speed_increment = speed_increment
        self.max_speed = max_speed

    def check_ball_walls(self, ball: Ball, field_height: float) -> str:
        """Checks collisions with top and bottom walls. Returns the collision type."""
        if ball.position.y - ball.radius <= 0:
            ball.position.y = ball.radius
            ball.bounce_vertical()
            return "top"
        elif ball.position.y + ball.radius >= field_height:
            ball.position.y = field_height - ball.radius
            ball.bounce_vertical()
            return "bottom"

        return "none"

    def check_goal(self, ball: Ball, field_width: float) -> str:
        """Checks whether the ball left the field through a goal line"""
        if ball.position.x - ball.radius <= 0:
            return "left_goal"
        elif ball.position.x + ball.radius >= field_width:
            return "right_goal"

        return "none"

    def check_ball_paddle(self, ball: Ball, paddle: Paddle, direction: int) -> bool:
        """
        Checks and handles ball-paddle collision.

        Args:
            ball: Ball to test and bounce
            paddle: Paddle to test against
            direction: +1 if the paddle sends the ball to the right, -1 to the left

        Returns:
            bool: True if the ball was hit
        """
        if not circle_rect_collision(
            ball.position.x, ball.position.y, ball.radius, paddle.get_rect()
        ):
            return False

        self.separate_ball_from_paddle(ball, paddle, direction)
        self.apply_paddle_bounce(ball, paddle, direction)
        return True

    def separate_ball_from_paddle(self, ball: Ball, paddle: Paddle, direction: int) -> None:
        """Places the ball tangent to the paddle face it is returned from"""
        if direction > 0:
            ball.position.x = paddle.position.x + paddle.width + ball.radius
        else:
            ball.position.x = paddle.position.x - ball.radius

    def apply_paddle_bounce(self, ball: Ball, paddle: Paddle, direction: int) -> None:
        """Speeds the ball up and sends it back with an angle set by the hit offset"""
        angle = bounce_angle(ball.position.y, paddle, self.max_bounce_angle)

        ball.speed += self.speed_increment
        if self.max_speed is not None:
            ball.speed = min(ball.speed, self.max_speed)

        ball.launch(direction, angle)
