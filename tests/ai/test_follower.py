"""
Unit tests for the scripted opponent
"""

import pytest

from poong.ai.follower import FollowBallOpponent
from poong.core.entities import Paddle


@pytest.fixture
def paddle() -> Paddle:
    # Center at y=250
    return Paddle(766.0, 200.0, 2, width=14.0, height=100.0, field_height=500.0)


class TestFollowBallOpponent:
    """Test bounded-rate tracking"""

    @pytest.mark.parametrize(
        "ball_y,expected",
        [
            (400.0, 4.0),
            (100.0, -4.0),
            (258.0, 0.0),
            (242.0, 0.0),
            (250.0, 0.0),
            (258.5, 4.0),
        ],
    )
    def test_get_delta(self, paddle: Paddle, ball_y: float, expected: float):
        opponent = FollowBallOpponent(speed=4.0, dead_zone=8.0)
        assert opponent.get_delta(paddle, ball_y) == expected

    def test_never_snaps(self, paddle: Paddle):
        """A far-away ball still only moves the paddle by the tracking speed"""
        opponent = FollowBallOpponent(speed=4.0, dead_zone=8.0)
        assert abs(opponent.get_delta(paddle, 10_000.0)) == 4.0

    def test_can_be_outrun(self, paddle: Paddle):
        """A ball moving faster than the tracking speed opens a gap"""
        opponent = FollowBallOpponent(speed=4.0, dead_zone=8.0)
        ball_y = 250.0
        for _ in range(20):
            ball_y += 6.0
            paddle.move_by(opponent.get_delta(paddle, ball_y))
        assert ball_y - paddle.center_y > 30.0
