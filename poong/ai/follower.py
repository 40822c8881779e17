"""
Scripted opponent for Poong
"""

from poong.core.entities import Paddle


class FollowBallOpponent:
    """Opponent that follows the ball vertically at a bounded rate

    The paddle never snaps to the ball: it moves at most ``speed`` units per
    tick, so fast vertical ball movement can beat it. Within ``dead_zone`` of
    the ball it holds still to avoid jitter.
    """

    def __init__(self, speed: float, dead_zone: float):
        self.speed = speed
        self.dead_zone = dead_zone

    def get_delta(self, paddle: Paddle, ball_y: float) -> float:
        """Returns the vertical displacement for this tick (before clamping)"""
        delta = ball_y - paddle.center_y
        if abs(delta) <= self.dead_zone:
            return 0.0
        return self.speed if delta > 0 else -self.speed
