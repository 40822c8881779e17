"""
Physics system for Poong
"""

import math
from typing import Any

import numpy as np

from poong.ai.follower import FollowBallOpponent
from poong.core.collision import CollisionDetector
from poong.core.entities import Ball
from poong.core.entities import Paddle
from poong.core.entities import PlayerInput
from poong.utils.config import GameConfig
from poong.utils.config import game_config

# Horizontal ball directions
RIGHT = 1
LEFT = -1

# Ids reported in paddle_hits and goals events
PLAYER_ID = 1
OPPONENT_ID = 2


class PhysicsEngine:
    """Main physics engine

    Owns both paddles, the ball and the score, and advances them by exactly
    one fixed tick per call to :meth:`update`. The player paddle is on the
    left, the opponent paddle on the right.
    """

    def __init__(self, config: GameConfig | None = None, rng: np.random.Generator | None = None):
        self.config = config if config is not None else game_config
        self._validate_geometry()

        self.field_width = float(self.config.FIELD_WIDTH)
        self.field_height = float(self.config.FIELD_HEIGHT)
        self.rng = rng if rng is not None else np.random.default_rng()

        self.collision_detector = CollisionDetector(
            max_bounce_angle=math.radians(self.config.MAX_BOUNCE_ANGLE),
            speed_increment=self.config.BALL_SPEED_INCREMENT,
            max_speed=self.config.MAX_BALL_SPEED,
        )
        self.opponent_controller = FollowBallOpponent(
            self.config.OPPONENT_SPEED, self.config.OPPONENT_DEAD_ZONE
        )

        # Game state
        self.reset_paddles()
        self.ball = Ball(
            self.field_width / 2, self.field_height / 2, radius=self.config.BALL_RADIUS
        )
        self.center_ball()
        self.score: list[int] = [0, 0]

    def _validate_geometry(self) -> None:
        """Rejects configurations whose paddle clamp range would be empty"""
        config = self.config
        dimensions = {
            "FIELD_WIDTH": config.FIELD_WIDTH,
            "FIELD_HEIGHT": config.FIELD_HEIGHT,
            "PADDLE_WIDTH": config.PADDLE_WIDTH,
            "PADDLE_HEIGHT": config.PADDLE_HEIGHT,
            "BALL_RADIUS": config.BALL_RADIUS,
        }
        for name, value in dimensions.items():
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

        if config.PADDLE_HEIGHT > config.FIELD_HEIGHT:
            raise ValueError(
                f"PADDLE_HEIGHT ({config.PADDLE_HEIGHT}) must not exceed "
                f"FIELD_HEIGHT ({config.FIELD_HEIGHT})"
            )

    def reset_paddles(self) -> None:
        """Resets paddles to their initial, vertically centered position"""
        config = self.config
        y = self.field_height / 2 - config.PADDLE_HEIGHT / 2

        self.player = Paddle(
            config.PADDLE_MARGIN,
            y,
            PLAYER_ID,
            width=config.PADDLE_WIDTH,
            height=config.PADDLE_HEIGHT,
            field_height=self.field_height,
        )
        self.opponent = Paddle(
            self.field_width - config.PADDLE_MARGIN - config.PADDLE_WIDTH,
            y,
            OPPONENT_ID,
            width=config.PADDLE_WIDTH,
            height=config.PADDLE_HEIGHT,
            field_height=self.field_height,
        )

    def center_ball(self) -> None:
        """Puts the ball back to the field center, at rest, with the base speed"""
        self.ball.position.x = self.field_width / 2
        self.ball.position.y = self.field_height / 2
        self.ball.speed = self.config.BALL_SPEED
        self.ball.stop()

    def serve_ball(self, direction: int = 0, angle: float | None = None) -> None:
        """
        Serves the ball from the field center.

        Args:
            direction: 1 to the right, -1 to the left, 0 for random
            angle: Optional launch angle in radians, random within the serve range otherwise
        """
        if direction == 0:
            direction = int(self.rng.choice([LEFT, RIGHT]))
        if angle is None:
            max_angle = math.radians(self.config.SERVE_ANGLE)
            angle = float(self.rng.uniform(-max_angle, max_angle))

        self.center_ball()
        self.ball.launch(direction, angle)

    def reset_score(self) -> None:
        self.score = [0, 0]

    def update(self, player_input: PlayerInput | None = None) -> dict[str, list]:
        """Advances the simulation by one tick and returns what happened"""
        events: dict[str, list] = {
            "wall_bounces": [],
            "paddle_hits": [],
            "goals": [],
        }
        player_input = PlayerInput.coerce(player_input)

        # Paddles first: collisions below use the clamped positions
        self.player.move_by(player_input.resolve_delta(self.player, self.config.PADDLE_SPEED))
        self.opponent.move_by(
            self.opponent_controller.get_delta(self.opponent, self.ball.position.y)
        )

        self.ball.update()

        wall_collision = self.collision_detector.check_ball_walls(self.ball, self.field_height)
        if wall_collision != "none":
            events["wall_bounces"].append(wall_collision)

        # At most one paddle can return the ball in a given tick
        hitter = None
        if self.collision_detector.check_ball_paddle(self.ball, self.player, RIGHT):
            hitter = self.player
        elif self.collision_detector.check_ball_paddle(self.ball, self.opponent, LEFT):
            hitter = self.opponent
        if hitter is not None:
            events["paddle_hits"].append({"player": hitter.player_id, "speed": self.ball.speed})

        goal = self.collision_detector.check_goal(self.ball, self.field_width)
        if goal == "left_goal":
            self.score[1] += 1  # Point for the opponent
            events["goals"].append({"player": self.opponent.player_id, "score": self.score.copy()})
            self.serve_ball(RIGHT)
        elif goal == "right_goal":
            self.score[0] += 1  # Point for the player
            events["goals"].append({"player": self.player.player_id, "score": self.score.copy()})
            self.serve_ball(LEFT)

        return events

    def get_game_state(self) -> dict[str, Any]:
        """Returns the complete game state"""
        return {
            "ball_position": self.ball.position.to_tuple(),
            "ball_velocity": self.ball.velocity.to_tuple(),
            "ball_speed": self.ball.speed,
            "player_position": self.player.position.to_tuple(),
            "opponent_position": self.opponent.position.to_tuple(),
            "paddle_size": (self.player.width, self.player.height),
            "score": self.score.copy(),
            "field_bounds": (0, self.field_width, 0, self.field_height),
        }

    def reset_game(self) -> None:
        """Resets the game to zero, with the ball at rest until the next serve"""
        self.reset_score()
        self.reset_paddles()
        self.center_ball()
