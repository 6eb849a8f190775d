"""
Scoring rules: goal detection, win threshold and end-of-game messages
"""

from synth_pong.core.entities import Ball
from synth_pong.core.entities import Score
from synth_pong.core.entities import Side
from synth_pong.utils.config import game_config

WINNER_MESSAGES = {
    Side.LEFT: "You win!",
    Side.RIGHT: "Right (AI) wins!",
}


def detect_goal(ball: Ball, field_width: float) -> Side | None:
    """Returns the side that scores when the ball has fully left the board"""
    if ball.position.x + ball.size < 0:
        return Side.RIGHT
    if ball.position.x > field_width:
        return Side.LEFT
    return None


def has_won(score: Score, side: Side) -> bool:
    """Checks whether the given side reached the winning score"""
    points = score.left if side is Side.LEFT else score.right
    return points >= game_config.WIN_SCORE


def winner_message(side: Side) -> str:
    return WINNER_MESSAGES[side]
