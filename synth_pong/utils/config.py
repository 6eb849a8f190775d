"""
Synth Pong game configuration with Pydantic validation
"""

import json
import math
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import model_validator

Color = tuple[int, int, int]


class GameConfig(BaseModel):
    """Board geometry, ball/paddle physics and display settings"""

    # Allow mutation so UI controls can tweak values at runtime
    model_config = {"validate_assignment": True}

    # Board dimensions
    FIELD_WIDTH: int = Field(default=800, gt=0, description="Board width in pixels")
    FIELD_HEIGHT: int = Field(default=500, gt=0, description="Board height in pixels")

    # Paddles
    PADDLE_WIDTH: float = Field(default=12.0, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: float = Field(default=100.0, gt=0, description="Paddle height in pixels")
    PADDLE_MARGIN: float = Field(default=10.0, ge=0, description="Paddle margin from edge")

    # Ball physics, all speeds expressed in pixels per frame
    BALL_SIZE: float = Field(default=14.0, gt=0, description="Ball diameter in pixels")
    MAX_BALL_SPEED: float = Field(default=12.0, gt=0, description="Maximum ball speed")
    BALL_SPEED: float = Field(default=5.0, gt=0, description="Serve speed")
    BALL_SPEED_INCREMENT: float = Field(default=0.3, ge=0, description="Speed gain per hit")
    MAX_BOUNCE_ANGLE: float = Field(
        default=math.pi / 3, gt=0, lt=math.pi / 2, description="Deflection at paddle tips"
    )
    SERVE_ANGLE_SPREAD: float = Field(
        default=math.pi / 8, ge=0, lt=math.pi / 2, description="Serve angle half-range"
    )

    # Right paddle controller
    AI_SPEED: float = Field(default=6.0, description="AI paddle speed, tunable at runtime")
    AI_DAMPING: float = Field(default=0.6, gt=0, description="AI speed damping factor")
    AI_DEAD_ZONE: float = Field(default=10.0, ge=0, description="AI tracking tolerance")

    # Gameplay
    WIN_SCORE: int = Field(default=10, gt=0, description="Points needed to win")

    # Display
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    BACKGROUND_COLOR: Color = Field(default=(11, 16, 32), description="RGB color")
    NET_COLOR: Color = Field(default=(40, 44, 60), description="RGB color")
    LEFT_PADDLE_COLOR: Color = Field(default=(57, 161, 255), description="RGB color")
    RIGHT_PADDLE_COLOR: Color = Field(default=(255, 140, 66), description="RGB color")
    BALL_COLOR: Color = Field(default=(255, 255, 255), description="RGB color")
    TEXT_COLOR: Color = Field(default=(230, 230, 230), description="RGB color")

    @model_validator(mode="after")
    def validate_consistency(self) -> "GameConfig":
        """Validate speed limits and that the board fits both paddles and the ball"""
        if self.BALL_SPEED > self.MAX_BALL_SPEED:
            raise ValueError(
                f"BALL_SPEED ({self.BALL_SPEED}) must not exceed MAX_BALL_SPEED "
                f"({self.MAX_BALL_SPEED})"
            )

        min_width = 2 * (self.PADDLE_MARGIN + self.PADDLE_WIDTH) + 4 * self.BALL_SIZE
        if self.FIELD_WIDTH < min_width:
            raise ValueError(f"FIELD_WIDTH must be at least {min_width} pixels")

        min_height = max(self.PADDLE_HEIGHT, self.BALL_SIZE) + 1
        if self.FIELD_HEIGHT < min_height:
            raise ValueError(f"FIELD_HEIGHT must be at least {min_height} pixels")

        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "synth_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        with open(Path(filepath), "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "synth_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        self.copy_from(GameConfig())

    def copy_from(self, other: "GameConfig") -> None:
        """Take every field of an already validated config at once"""
        # Field-by-field assignment would run the cross-field checks on
        # half-updated values
        self.__dict__.update({name: getattr(other, name) for name in type(self).model_fields})


class AudioConfig(BaseModel):
    """Sound effect synthesis settings"""

    model_config = {"validate_assignment": True}

    SFX_ENABLED: bool = Field(default=True, description="Play sound effects")
    SFX_VOLUME: float = Field(default=0.5, ge=0.0, le=1.0, description="Master volume")
    SAMPLE_RATE: int = Field(default=44100, gt=0, description="Mixer sample rate in Hz")
    ATTACK: float = Field(default=0.01, gt=0, description="Envelope attack time in seconds")
    PEAK_GAIN: float = Field(default=0.6, gt=0, le=1.0, description="Envelope peak gain")
    RELEASE_TAIL: float = Field(default=0.02, ge=0, description="Silence after each tone")


# Global configuration instances with validation
game_config = GameConfig()
audio_config = AudioConfig()


def load_config_from_file(filepath: str = "synth_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        return False
    except (ValueError, OSError) as e:
        print(f"Error loading config: {e}")
        return False

    game_config.copy_from(loaded_config)
    return True


def _change_values(obj: BaseModel, **kwargs: Any) -> dict[str, Any]:
    """Helper to change config values temporarily"""
    old_values: dict[str, Any] = {}
    for name, new_value in kwargs.items():
        old_values[name] = getattr(obj, name)
        setattr(obj, name, new_value)
    return old_values


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values = _change_values(game_config, **kwargs)
    try:
        yield
    finally:
        # Reverse order keeps cross-field checks satisfied while restoring
        _change_values(game_config, **dict(reversed(old_values.items())))


@contextmanager
def audio_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify audio config (with validation)"""
    old_values = _change_values(audio_config, **kwargs)
    try:
        yield
    finally:
        # Reverse order keeps cross-field checks satisfied while restoring
        _change_values(audio_config, **dict(reversed(old_values.items())))
