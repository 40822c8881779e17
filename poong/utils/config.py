"""
Poong game configuration with Pydantic validation
"""

import json
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import model_validator


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation

    Speeds are expressed in field units per tick, one tick being one frame.
    """

    # Allow mutation for compatibility with existing code
    model_config = {"validate_assignment": True}

    # Field dimensions
    FIELD_WIDTH: int = Field(default=800, gt=0, description="Field width in pixels")
    FIELD_HEIGHT: int = Field(default=500, gt=0, description="Field height in pixels")

    # Ball physics
    BALL_RADIUS: float = Field(default=8.0, gt=0, description="Ball radius in pixels")
    BALL_SPEED: float = Field(default=5.0, gt=0, description="Serve speed per tick")
    BALL_SPEED_INCREMENT: float = Field(default=0.3, ge=0, description="Speed added per hit")
    MAX_BALL_SPEED: float | None = Field(
        default=None, gt=0, description="Optional speed cap, None keeps the ramp unbounded"
    )
    SERVE_ANGLE: float = Field(
        default=30.0, ge=0, lt=90, description="Max serve angle from horizontal (degrees)"
    )
    MAX_BOUNCE_ANGLE: float = Field(
        default=60.0, ge=0, lt=90, description="Bounce angle at the paddle edge (degrees)"
    )

    # Paddles
    PADDLE_WIDTH: float = Field(default=14.0, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: float = Field(default=100.0, gt=0, description="Paddle height in pixels")
    PADDLE_MARGIN: float = Field(default=20.0, ge=0, description="Paddle margin from edge")
    PADDLE_SPEED: float = Field(default=6.0, gt=0, description="Player paddle speed per tick")

    # Opponent
    OPPONENT_SPEED: float = Field(default=4.0, gt=0, description="Opponent tracking speed")
    OPPONENT_DEAD_ZONE: float = Field(default=8.0, ge=0, description="Opponent tracking slack")

    # Display
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(12, 18, 28), description="RGB color")
    BALL_COLOR: tuple[int, int, int] = Field(default=(0, 225, 168), description="RGB color")
    PADDLE_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")

    @model_validator(mode="after")
    def validate_field_dimensions(self) -> "GameConfig":
        """Validate field is large enough for game elements"""
        if self.PADDLE_HEIGHT > self.FIELD_HEIGHT:
            raise ValueError(
                f"PADDLE_HEIGHT ({self.PADDLE_HEIGHT}) must not exceed "
                f"FIELD_HEIGHT ({self.FIELD_HEIGHT})"
            )

        if 2 * self.BALL_RADIUS > self.FIELD_HEIGHT:
            raise ValueError("Ball diameter must fit inside FIELD_HEIGHT")

        min_width = 2 * (self.PADDLE_MARGIN + self.PADDLE_WIDTH) + 2 * self.BALL_RADIUS
        if self.FIELD_WIDTH <= min_width:
            raise ValueError(f"FIELD_WIDTH must be greater than {min_width} pixels")

        if self.MAX_BALL_SPEED is not None and self.MAX_BALL_SPEED < self.BALL_SPEED:
            raise ValueError(
                f"BALL_SPEED ({self.BALL_SPEED}) must not exceed "
                f"MAX_BALL_SPEED ({self.MAX_BALL_SPEED})"
            )

        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "poong_config.json") -> None:
        """Save configuration to a JSON file"""
        with open(Path(filepath), "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "poong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        defaults = GameConfig()
        for field_name in type(self).model_fields:
            object.__setattr__(self, field_name, getattr(defaults, field_name))


# Global configuration instance with validation
game_config = GameConfig()


def load_config_from_file(filepath: str = "poong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        return False
    except Exception as e:
        print(f"Error loading config: {e}")
        return False

    # Bypass per-field validation: the loaded model is already consistent as a whole
    for field_name in type(game_config).model_fields:
        object.__setattr__(game_config, field_name, getattr(loaded_config, field_name))
    return True


def _change_values(obj: BaseModel, **kwargs: Any) -> dict[str, Any]:
    """Helper to change config values temporarily"""
    old_values: dict[str, Any] = {}
    for name, new_value in kwargs.items():
        old_values[name] = getattr(obj, name)
        object.__setattr__(obj, name, new_value)
    return old_values


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    # Fields depend on each other, so validate the combination up front
    validated = GameConfig(**{**game_config.model_dump(), **kwargs})
    old_values = _change_values(game_config, **{name: getattr(validated, name) for name in kwargs})
    try:
        yield
    finally:
        _change_values(game_config, **old_values)
