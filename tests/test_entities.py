"""
Tests for Synth Pong game entities
"""

from synth_pong.core.entities import Ball
from synth_pong.core.entities import GameState
from synth_pong.core.entities import Paddle
from synth_pong.core.entities import Score
from synth_pong.core.entities import Side
from synth_pong.core.entities import Vector2D
from synth_pong.core.entities import create_game_state
from synth_pong.utils.config import game_config


class TestVector2D:
    """Tests for Vector2D class"""

    def test_addition(self) -> None:
        result = Vector2D(1.0, 2.0) + Vector2D(3.0, 4.0)
        assert result.x == 4.0
        assert result.y == 6.0

    def test_in_place_addition_mutates(self) -> None:
        """Test that += updates the vector itself"""
        v = Vector2D(1.0, 1.0)
        alias = v
        v += Vector2D(2.0, -3.0)
        assert alias.to_tuple() == (3.0, -2.0)

    def test_magnitude(self) -> None:
        assert Vector2D(3.0, 4.0).magnitude() == 5.0
        assert Vector2D(0.0, 0.0).magnitude() == 0.0

    def test_copy_is_independent(self) -> None:
        v = Vector2D(1.0, 2.0)
        c = v.copy()
        c.x = 10.0
        assert v.x == 1.0


class TestSide:
    """Tests for Side helpers"""

    def test_direction(self) -> None:
        assert Side.LEFT.direction == -1
        assert Side.RIGHT.direction == 1

    def test_opponent(self) -> None:
        assert Side.LEFT.opponent is Side.RIGHT
        assert Side.RIGHT.opponent is Side.LEFT


class TestPaddle:
    """Tests for Paddle class"""

    def test_default_geometry_and_colors(self) -> None:
        left = Paddle(10, 200, Side.LEFT)
        right = Paddle(778, 200, Side.RIGHT)
        assert left.width == game_config.PADDLE_WIDTH
        assert left.height == game_config.PADDLE_HEIGHT
        assert left.color == game_config.LEFT_PADDLE_COLOR
        assert right.color == game_config.RIGHT_PADDLE_COLOR

    def test_facing_edge(self) -> None:
        """Left paddle faces right with its right edge, right paddle with its left edge"""
        left = Paddle(10, 200, Side.LEFT, width=12)
        right = Paddle(778, 200, Side.RIGHT, width=12)
        assert left.facing_edge == 22
        assert right.facing_edge == 778

    def test_clamp_top(self) -> None:
        paddle = Paddle(10, -30, Side.LEFT, height=100)
        paddle.clamp(500)
        assert paddle.position.y == 0

    def test_clamp_bottom(self) -> None:
        paddle = Paddle(10, 450, Side.LEFT, height=100)
        paddle.clamp(500)
        assert paddle.position.y == 400

    def test_center_on(self) -> None:
        paddle = Paddle(10, 0, Side.LEFT, height=100)
        paddle.center_on(250, 500)
        assert paddle.position.y == 200
        assert paddle.center_y == 250

    def test_center_on_is_clamped(self) -> None:
        paddle = Paddle(10, 0, Side.LEFT, height=100)
        paddle.center_on(10_000, 500)
        assert paddle.position.y == 400
        paddle.center_on(-10_000, 500)
        assert paddle.position.y == 0


class TestBall:
    """Tests for Ball class"""

    def test_defaults(self) -> None:
        ball = Ball(0, 0)
        assert ball.size == game_config.BALL_SIZE
        assert ball.speed == game_config.BALL_SPEED
        assert ball.velocity.to_tuple() == (0.0, 0.0)

    def test_center(self) -> None:
        ball = Ball(100, 50, size=14)
        assert ball.center.to_tuple() == (107, 57)

    def test_update_applies_velocity(self) -> None:
        ball = Ball(100, 50)
        ball.velocity = Vector2D(3.0, -2.0)
        ball.update()
        assert ball.position.to_tuple() == (103.0, 48.0)


class TestScore:
    """Tests for Score class"""

    def test_award_is_independent(self) -> None:
        score = Score()
        assert score.award(Side.LEFT) == 1
        assert score.award(Side.LEFT) == 2
        assert score.award(Side.RIGHT) == 1
        assert score.to_tuple() == (2, 1)

    def test_reset(self) -> None:
        score = Score(4, 7)
        score.reset()
        assert score.to_tuple() == (0, 0)


class TestGameState:
    """Tests for the default board layout"""

    def test_create_game_state(self) -> None:
        state = create_game_state(800, 500)

        assert isinstance(state, GameState)
        assert state.running is False
        assert state.end_message is None
        assert state.score.to_tuple() == (0, 0)

        assert state.left_paddle.side is Side.LEFT
        assert state.left_paddle.position.x == game_config.PADDLE_MARGIN
        assert state.right_paddle.position.x == (
            800 - game_config.PADDLE_WIDTH - game_config.PADDLE_MARGIN
        )
        for paddle in state.paddles:
            assert paddle.center_y == 250

        assert state.ball.center.to_tuple() == (400, 250)
