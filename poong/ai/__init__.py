"""
Opponent controllers for Poong
"""

from poong.ai.follower import FollowBallOpponent

__all__ = ["FollowBallOpponent"]
