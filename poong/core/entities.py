"""
Poong game entities: ball, paddles, player input and state snapshots
"""

import math
from dataclasses import asdict
from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np

from poong.utils.config import game_config


class RunState(Enum):
    """Top-level engine mode gating whether a step has any effect"""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


class PaddleIntent(Enum):
    """Discrete paddle command for one tick"""

    UP = "up"
    DOWN = "down"
    NONE = "none"


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        self.x += other.x
        self.y += other.y
        return self

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


class Ball:
    """Game ball

    ``speed`` is the single source of truth for the velocity magnitude; the
    velocity components are always derived from it and an angle.
    """

    def __init__(
        self,
        x: float,
        y: float,
        vx: float = 0.0,
        vy: float = 0.0,
        radius: float | None = None,
    ):
        self.position = Vector2D(x, y)
        self.velocity = Vector2D(vx, vy)
        self.speed = math.hypot(vx, vy)
        self.radius = radius if radius is not None else game_config.BALL_RADIUS

    def update(self) -> None:
        """Advances the ball by one tick (explicit Euler step)"""
        self.position += self.velocity

    def launch(self, direction: int, angle: float) -> None:
        """Sets the velocity from the current speed, a horizontal direction and an angle"""
        self.velocity = Vector2D(
            direction * abs(self.speed * math.cos(angle)), self.speed * math.sin(angle)
        )

    def stop(self) -> None:
        """Keeps the ball still until the next serve"""
        self.velocity = Vector2D(0.0, 0.0)

    def bounce_vertical(self) -> None:
        """Vertical bounce (top/bottom walls)"""
        self.velocity.y = -self.velocity.y


class Paddle:
    """Player or opponent paddle

    The paddle only moves vertically; ``position.x`` is fixed at creation.
    """

    def __init__(
        self,
        x: float,
        y: float,
        player_id: int,
        width: float | None = None,
        height: float | None = None,
        field_height: float | None = None,
    ):
        self.position = Vector2D(x, y)
        self.player_id = player_id
        self.width = width if width is not None else game_config.PADDLE_WIDTH
        self.height = height if height is not None else game_config.PADDLE_HEIGHT

        field_height = field_height if field_height is not None else game_config.FIELD_HEIGHT
        self.min_y = 0.0
        self.max_y = field_height - self.height
        self.constrain_position()

    @property
    def center_y(self) -> float:
        return self.position.y + self.height / 2

    def constrain_position(self) -> None:
        """Ensures the paddle stays within its movement bounds"""
        self.position.y = max(self.min_y, min(self.max_y, self.position.y))

    def move_by(self, dy: float) -> None:
        """Moves the paddle vertically with constraints"""
        self.position.y += dy
        self.constrain_position()

    def center_on(self, y: float) -> None:
        """Centers the paddle on a vertical coordinate with constraints"""
        self.position.y = y - self.height / 2
        self.constrain_position()

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle properties (x, y, width, height)"""
        return (self.position.x, self.position.y, self.width, self.height)


@dataclass
class PlayerInput:
    """Normalized player input for a single tick

    ``target_y`` is an absolute pointer position; when set it takes
    precedence over the discrete ``intent``.
    """

    intent: PaddleIntent = PaddleIntent.NONE
    target_y: float | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.intent, PaddleIntent):
            self.intent = _parse_intent(self.intent)
        if not _is_finite_number(self.target_y):
            self.target_y = None
        elif self.target_y is not None:
            self.target_y = float(self.target_y)

    @classmethod
    def coerce(cls, value: Any) -> "PlayerInput":
        """Normalizes anything an input source hands over; unknown values become a no-op"""
        if isinstance(value, PlayerInput):
            return value
        if isinstance(value, (PaddleIntent, str)):
            return cls(intent=_parse_intent(value))
        if _is_finite_number(value) and value is not None:
            return cls(target_y=float(value))
        return cls()

    def resolve_delta(self, paddle: Paddle, speed: float) -> float:
        """Returns the vertical displacement this input asks of ``paddle`` (before clamping)"""
        if self.target_y is not None:
            return self.target_y - paddle.height / 2 - paddle.position.y
        if self.intent == PaddleIntent.UP:
            return -speed
        if self.intent == PaddleIntent.DOWN:
            return speed
        return 0.0


def _parse_intent(value: Any) -> PaddleIntent:
    if isinstance(value, PaddleIntent):
        return value
    if isinstance(value, str):
        try:
            return PaddleIntent(value.strip().lower())
        except ValueError:
            return PaddleIntent.NONE
    return PaddleIntent.NONE


def _is_finite_number(value: Any) -> bool:
    """None counts as valid (absent); bools, complex and non-finite numbers do not"""
    if value is None:
        return True
    if isinstance(value, (bool, complex, np.complexfloating)):
        return False
    if not isinstance(value, (int, float, np.number)):
        return False
    try:
        # Ints beyond the float range overflow
        return math.isfinite(float(value))
    except (OverflowError, TypeError):
        return False


@dataclass(frozen=True)
class PaddleSnapshot:
    """Read-only view of a paddle"""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_paddle(cls, paddle: Paddle) -> "PaddleSnapshot":
        return cls(paddle.position.x, paddle.position.y, paddle.width, paddle.height)


@dataclass(frozen=True)
class BallSnapshot:
    """Read-only view of the ball"""

    x: float
    y: float
    radius: float
    vx: float
    vy: float
    speed: float

    @classmethod
    def from_ball(cls, ball: Ball) -> "BallSnapshot":
        return cls(
            ball.position.x,
            ball.position.y,
            ball.radius,
            ball.velocity.x,
            ball.velocity.y,
            ball.speed,
        )


@dataclass(frozen=True)
class GameSnapshot:
    """Complete point-in-time game state for presentation adapters"""

    player: PaddleSnapshot
    opponent: PaddleSnapshot
    ball: BallSnapshot
    score: tuple[int, int]  # (player, opponent)
    run_state: RunState
    field_size: tuple[float, float]
    tick: int = 0

    @property
    def player_score(self) -> int:
        return self.score[0]

    @property
    def opponent_score(self) -> int:
        return self.score[1]

    def to_dict(self) -> dict[str, Any]:
        """Plain dictionary copy of the snapshot"""
        data = asdict(self)
        data["run_state"] = self.run_state.value
        return data
