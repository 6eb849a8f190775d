"""
Synth Pong game entities: ball, paddles, score and the shared game state
"""

from dataclasses import dataclass
from dataclasses import field
from enum import Enum

import numpy as np

from synth_pong.utils.config import Color
from synth_pong.utils.config import game_config


class Side(Enum):
    """Board side, used for paddles, goals and serve directions"""

    LEFT = "left"
    RIGHT = "right"

    @property
    def direction(self) -> int:
        """Horizontal sign of a ball travelling towards this side"""
        return -1 if self is Side.LEFT else 1

    @property
    def opponent(self) -> "Side":
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


class GameEvent(Enum):
    """Events emitted by a physics/scoring step, consumed by the audio layer"""

    WALL = "wall"
    PADDLE = "paddle"
    SCORE = "score"
    WIN = "win"


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        self.x += other.x
        self.y += other.y
        return self

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)


class Paddle:
    """Player paddle, x is fixed and only y moves"""

    def __init__(
        self,
        x: float,
        y: float,
        side: Side,
        width: float | None = None,
        height: float | None = None,
        color: Color | None = None,
    ):
        self.position = Vector2D(x, y)
        self.side = side
        self.width = width if width is not None else game_config.PADDLE_WIDTH
        self.height = height if height is not None else game_config.PADDLE_HEIGHT
        if color is None:
            color = (
                game_config.LEFT_PADDLE_COLOR
                if side is Side.LEFT
                else game_config.RIGHT_PADDLE_COLOR
            )
        self.color = color

    @property
    def center_y(self) -> float:
        return self.position.y + self.height / 2

    @property
    def facing_edge(self) -> float:
        """x coordinate of the edge the ball bounces off"""
        if self.side is Side.LEFT:
            return self.position.x + self.width
        return self.position.x

    def clamp(self, field_height: float) -> None:
        """Keeps the paddle fully inside the board"""
        if self.position.y < 0:
            self.position.y = 0.0
        if self.position.y + self.height > field_height:
            self.position.y = field_height - self.height

    def center_on(self, y: float, field_height: float) -> None:
        """Centers the paddle vertically on y, then clamps it"""
        self.position.y = y - self.height / 2
        self.clamp(field_height)

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle properties (x, y, width, height)"""
        return (self.position.x, self.position.y, self.width, self.height)


class Ball:
    """Game ball, position is the top-left corner of its bounding square"""

    def __init__(self, x: float, y: float, size: float | None = None, speed: float | None = None):
        self.position = Vector2D(x, y)
        self.velocity = Vector2D(0.0, 0.0)
        self.size = size if size is not None else game_config.BALL_SIZE
        # Scalar speed; only grows on paddle hits until the next serve
        self.speed = speed if speed is not None else game_config.BALL_SPEED

    @property
    def center(self) -> Vector2D:
        half = self.size / 2
        return Vector2D(self.position.x + half, self.position.y + half)

    def update(self) -> None:
        """Advances the ball by one frame"""
        self.position += self.velocity

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision square properties (x, y, width, height)"""
        return (self.position.x, self.position.y, self.size, self.size)


@dataclass
class Score:
    """Points of both players"""

    left: int = 0
    right: int = 0

    def award(self, side: Side) -> int:
        """Adds a point to the given side and returns its new total"""
        if side is Side.LEFT:
            self.left += 1
            return self.left
        self.right += 1
        return self.right

    def reset(self) -> None:
        self.left = 0
        self.right = 0

    def to_tuple(self) -> tuple[int, int]:
        return (self.left, self.right)


@dataclass
class GameState:
    """Complete mutable game state, owned by a single GameEngine"""

    ball: Ball
    left_paddle: Paddle
    right_paddle: Paddle
    score: Score = field(default_factory=Score)
    running: bool = False
    # Set when a game is won, cleared once the player acknowledges it
    end_message: str | None = None

    @property
    def paddles(self) -> tuple[Paddle, Paddle]:
        return (self.left_paddle, self.right_paddle)


def create_game_state(field_width: float, field_height: float) -> GameState:
    """Builds the default board: centered paddles and a centered ball at rest"""
    paddle_y = field_height / 2 - game_config.PADDLE_HEIGHT / 2
    left = Paddle(game_config.PADDLE_MARGIN, paddle_y, Side.LEFT)
    right = Paddle(
        field_width - game_config.PADDLE_WIDTH - game_config.PADDLE_MARGIN, paddle_y, Side.RIGHT
    )

    size = game_config.BALL_SIZE
    ball = Ball(field_width / 2 - size / 2, field_height / 2 - size / 2, size)
    return GameState(ball=ball, left_paddle=left, right_paddle=right)
