"""
Core module of Poong game
"""

from poong.core.entities import Ball
from poong.core.entities import GameSnapshot
from poong.core.entities import Paddle
from poong.core.entities import PaddleIntent
from poong.core.entities import PlayerInput
from poong.core.entities import RunState
from poong.core.entities import Vector2D

__all__ = [
    "Ball",
    "Paddle",
    "PaddleIntent",
    "PlayerInput",
    "RunState",
    "GameSnapshot",
    "Vector2D",
]
