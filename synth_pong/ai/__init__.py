"""
Paddle controllers for Synth Pong
"""

from synth_pong.ai.follow_ball import FollowBallAI

__all__ = ["FollowBallAI"]
