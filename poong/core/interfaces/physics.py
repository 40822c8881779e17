"""
Physics backend protocol - defines interface for physics engines
"""

from typing import Any
from typing import Protocol

from poong.core.entities import Ball
from poong.core.entities import Paddle
from poong.core.entities import PlayerInput


class PhysicsBackend(Protocol):
    """
    Protocol for physics engine implementations.

    This allows swapping physics implementations (swept collisions, etc.)
    without changing the run-state logic.
    """

    # Game objects
    ball: Ball
    player: Paddle
    opponent: Paddle
    score: list[int]

    # Field dimensions
    field_width: float
    field_height: float

    def reset_game(self) -> None:
        """
        Reset the game to initial state.

        Zeroes the score, centers both paddles and leaves the ball at rest
        in the middle of the field.
        """
        ...

    def serve_ball(self, direction: int = 0, angle: float | None = None) -> None:
        """
        Serve the ball from the field center.

        Args:
            direction: -1 for left, 1 for right, 0 for random
            angle: Optional specific angle in radians
        """
        ...

    def update(self, player_input: PlayerInput | None = None) -> dict[str, Any]:
        """
        Advance the simulation by one fixed tick.

        Args:
            player_input: Normalized player input for this tick

        Returns:
            Dictionary with events that occurred:
            {
                "wall_bounces": [...],
                "paddle_hits": [...],
                "goals": [...]
            }
        """
        ...
