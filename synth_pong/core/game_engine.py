"""
Synth Pong main game engine
"""

import random
from typing import Any

from synth_pong.ai.follow_ball import FollowBallAI
from synth_pong.core.entities import GameEvent
from synth_pong.core.entities import GameState
from synth_pong.core.entities import Side
from synth_pong.core.entities import create_game_state
from synth_pong.core.physics import PhysicsEngine
from synth_pong.core.scoring import detect_goal
from synth_pong.core.scoring import has_won
from synth_pong.core.scoring import winner_message
from synth_pong.utils.config import game_config


class GameEngine:
    """
    Single owner of the game state.

    Input callbacks (pointer moves, start/pause/reset) and the frame loop
    all go through this object, so the state always has one writer at a
    time even though they interleave between frames.
    """

    def __init__(
        self,
        field_width: float | None = None,
        field_height: float | None = None,
        rng: random.Random | None = None,
        ai: FollowBallAI | None = None,
    ):
        self.field_width = field_width or game_config.FIELD_WIDTH
        self.field_height = field_height or game_config.FIELD_HEIGHT
        self.physics_engine = PhysicsEngine(self.field_width, self.field_height, rng)
        self.ai = ai or FollowBallAI("Right AI")
        self._ai_speed = float(game_config.AI_SPEED)

        self.state: GameState = create_game_state(self.field_width, self.field_height)
        self.physics_engine.serve_ball(self.state.ball, Side.LEFT)

    @property
    def running(self) -> bool:
        return self.state.running

    @property
    def scores(self) -> tuple[int, int]:
        return self.state.score.to_tuple()

    @property
    def end_message(self) -> str | None:
        return self.state.end_message

    @property
    def ai_speed(self) -> float:
        return self._ai_speed

    @ai_speed.setter
    def ai_speed(self, value: Any) -> None:
        # Numeric coercion only, any range is accepted
        self._ai_speed = float(value)

    def start(self) -> None:
        """Starts (or resumes) play and dismisses any end-of-game message"""
        self.state.end_message = None
        if not self.state.running:
            self.state.running = True

    def toggle_pause(self) -> None:
        """Pauses / resumes the game"""
        self.state.running = not self.state.running

    def reset(self) -> None:
        """Resets scores and positions, serves towards the left and stays paused"""
        self._reset_board(Side.LEFT)

    def acknowledge_end(self) -> None:
        """Clears the end-of-game message once the player has seen it"""
        self.state.end_message = None

    def move_player_paddle(self, pointer_y: float) -> None:
        """Centers the human (left) paddle on the pointer's vertical position"""
        self.state.left_paddle.center_on(float(pointer_y), self.field_height)

    def update(self) -> list[GameEvent]:
        """
        Runs one frame of game logic.

        Returns:
            Events emitted during the frame, in order. Empty when paused.
        """
        state = self.state
        if not state.running:
            return []

        events = self.physics_engine.step(state)

        scorer = detect_goal(state.ball, self.field_width)
        if scorer is not None:
            state.score.award(scorer)
            events.append(GameEvent.SCORE)
            if has_won(state.score, scorer):
                self._end_game(scorer)
                events.append(GameEvent.WIN)
                return events
            self.physics_engine.serve_ball(state.ball, scorer)

        self.ai.update(state.right_paddle, state.ball, self._ai_speed, self.field_height)
        return events

    def _end_game(self, winner: Side) -> None:
        """Stops play, records the winner message and resets the board"""
        self.state.running = False
        self.state.end_message = winner_message(winner)
        self._reset_board(winner.opponent)

    def _reset_board(self, serve_towards: Side) -> None:
        state = self.state
        state.score.reset()
        for paddle in state.paddles:
            paddle.center_on(self.field_height / 2, self.field_height)
        self.physics_engine.serve_ball(state.ball, serve_towards)
        state.running = False

    def get_game_state(self) -> dict[str, Any]:
        """Returns a snapshot of the state for display collaborators"""
        state = self.state
        return {
            "ball_position": state.ball.position.to_tuple(),
            "ball_velocity": state.ball.velocity.to_tuple(),
            "ball_speed": state.ball.speed,
            "left_paddle_position": state.left_paddle.position.to_tuple(),
            "right_paddle_position": state.right_paddle.position.to_tuple(),
            "score": state.score.to_tuple(),
            "running": state.running,
            "end_message": state.end_message,
            "field_bounds": (0, self.field_width, 0, self.field_height),
        }
