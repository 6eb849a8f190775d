"""
Unit tests for the game engine: round lifecycle, scoring and controls
"""

import pytest

from synth_pong.core.entities import GameEvent
from synth_pong.core.entities import Vector2D
from synth_pong.core.game_engine import GameEngine
from synth_pong.utils.config import game_config
from synth_pong.utils.config import game_config_tmp


def paddle_rest_y() -> float:
    return game_config.FIELD_HEIGHT / 2 - game_config.PADDLE_HEIGHT / 2


class TestLifecycle:
    """Test start, pause and reset"""

    def test_initial_state(self, engine: GameEngine) -> None:
        assert engine.running is False
        assert engine.scores == (0, 0)
        assert engine.end_message is None
        assert engine.ai_speed == game_config.AI_SPEED
        assert engine.state.ball.velocity.x < 0, "First serve goes to the left"

    def test_paused_update_does_nothing(self, engine: GameEngine) -> None:
        position = engine.state.ball.position.copy()
        right_y = engine.state.right_paddle.position.y
        engine.state.ball.position.y = 20

        assert engine.update() == []
        assert engine.state.ball.position.x == position.x
        assert engine.state.right_paddle.position.y == right_y

    def test_start(self, engine: GameEngine) -> None:
        engine.start()
        assert engine.running is True
        engine.start()
        assert engine.running is True

    def test_toggle_pause(self, engine: GameEngine) -> None:
        engine.toggle_pause()
        assert engine.running is True
        engine.toggle_pause()
        assert engine.running is False

    def test_running_update_moves_ball(self, engine: GameEngine) -> None:
        engine.start()
        before = engine.state.ball.position.copy()
        engine.update()
        assert engine.state.ball.position != before

    def test_reset(self, engine: GameEngine) -> None:
        """Reset at any point zeroes scores, centers paddles, pauses and serves left"""
        engine.start()
        engine.state.score.left = 4
        engine.state.score.right = 7
        engine.state.left_paddle.position.y = 0
        engine.state.right_paddle.position.y = 400
        engine.state.ball.position = Vector2D(100, 100)

        engine.reset()

        assert engine.scores == (0, 0)
        assert engine.running is False
        assert engine.state.left_paddle.position.y == paddle_rest_y()
        assert engine.state.right_paddle.position.y == paddle_rest_y()
        assert engine.state.ball.center.to_tuple() == (400, 250)
        assert engine.state.ball.velocity.x < 0
        assert engine.state.ball.speed == game_config.BALL_SPEED


class TestScoring:
    """Test goals and re-serves"""

    def test_exit_right_scores_left(self, engine: GameEngine) -> None:
        engine.start()
        # Above the right paddle so it cannot be returned
        engine.state.ball.position = Vector2D(900, 20)
        engine.state.ball.velocity = Vector2D(5, 0)

        events = engine.update()

        assert GameEvent.SCORE in events
        assert engine.scores == (1, 0)
        assert engine.running is True
        assert engine.state.ball.velocity.x < 0
        assert engine.state.ball.speed == game_config.BALL_SPEED

    def test_exit_left_scores_right(self, engine: GameEngine) -> None:
        """Ball at rest moved past the left bound: right scores, ball re-serves rightwards"""
        engine.start()
        engine.move_player_paddle(0)
        engine.state.ball.velocity = Vector2D(0, 0)
        engine.state.ball.position.x = -50

        events = engine.update()

        assert events == [GameEvent.SCORE]
        assert engine.scores == (0, 1)
        assert engine.state.ball.velocity.x > 0
        assert engine.state.ball.center.to_tuple() == (400, 250)


class TestWin:
    """Test the end of a game"""

    def test_left_wins(self, engine: GameEngine) -> None:
        engine.start()
        engine.state.score.left = game_config.WIN_SCORE - 1
        engine.state.score.right = 3
        engine.state.left_paddle.position.y = 0
        engine.state.ball.position = Vector2D(900, 20)
        engine.state.ball.velocity = Vector2D(5, 0)

        events = engine.update()

        assert events[-2:] == [GameEvent.SCORE, GameEvent.WIN]
        assert engine.running is False
        assert engine.end_message == "You win!"
        assert engine.scores == (0, 0)
        assert engine.state.left_paddle.position.y == paddle_rest_y()
        # Next serve goes away from the winner
        assert engine.state.ball.velocity.x > 0

    def test_right_wins(self, engine: GameEngine) -> None:
        engine.start()
        engine.move_player_paddle(0)
        engine.state.score.right = game_config.WIN_SCORE - 1
        engine.state.ball.position = Vector2D(-50, 243)
        engine.state.ball.velocity = Vector2D(-5, 0)

        events = engine.update()

        assert GameEvent.WIN in events
        assert engine.end_message == "Right (AI) wins!"
        assert engine.scores == (0, 0)
        assert engine.state.ball.velocity.x < 0

    def test_game_stays_paused_after_win(self, engine: GameEngine) -> None:
        with game_config_tmp(WIN_SCORE=1):
            engine.start()
            engine.state.ball.position = Vector2D(900, 20)
            engine.update()

            assert engine.update() == []
            assert engine.end_message == "You win!"

    def test_acknowledge_end(self, engine: GameEngine) -> None:
        engine.state.end_message = "You win!"
        engine.acknowledge_end()
        assert engine.end_message is None
        assert engine.running is False

    def test_start_dismisses_message(self, engine: GameEngine) -> None:
        engine.state.end_message = "You win!"
        engine.start()
        assert engine.end_message is None
        assert engine.running is True

    def test_reset_keeps_message(self, engine: GameEngine) -> None:
        engine.state.end_message = "Right (AI) wins!"
        engine.reset()
        assert engine.end_message == "Right (AI) wins!"


class TestControls:
    """Test inputs coming from outside the frame loop"""

    def test_move_player_paddle(self, engine: GameEngine) -> None:
        engine.move_player_paddle(120)
        assert engine.state.left_paddle.position.y == 70

    @pytest.mark.parametrize("pointer_y,expected", [(-100, 0.0), (10_000, 400.0)])
    def test_move_player_paddle_is_clamped(
        self, engine: GameEngine, pointer_y: float, expected: float
    ) -> None:
        engine.move_player_paddle(pointer_y)
        assert engine.state.left_paddle.position.y == expected

    def test_player_paddle_moves_while_paused(self, engine: GameEngine) -> None:
        engine.move_player_paddle(60)
        assert engine.running is False
        assert engine.state.left_paddle.position.y == 10

    def test_ai_speed_coercion(self, engine: GameEngine) -> None:
        engine.ai_speed = "3.5"
        assert engine.ai_speed == 3.5
        engine.ai_speed = 40
        assert engine.ai_speed == 40.0

    def test_ai_speed_rejects_non_numeric(self, engine: GameEngine) -> None:
        with pytest.raises(ValueError):
            engine.ai_speed = "fast"

    def test_ai_moves_only_while_running(self, engine: GameEngine) -> None:
        engine.state.ball.position = Vector2D(600, 20)
        engine.state.ball.velocity = Vector2D(0, 0)
        start_y = engine.state.right_paddle.position.y

        engine.update()
        assert engine.state.right_paddle.position.y == start_y

        engine.start()
        engine.update()
        assert engine.state.right_paddle.position.y == pytest.approx(
            start_y - engine.ai_speed * game_config.AI_DAMPING
        )

    def test_get_game_state(self, engine: GameEngine) -> None:
        snapshot = engine.get_game_state()
        assert snapshot["score"] == (0, 0)
        assert snapshot["running"] is False
        assert snapshot["end_message"] is None
        assert snapshot["ball_speed"] == game_config.BALL_SPEED
        assert snapshot["field_bounds"] == (0, 800, 0, 500)
