"""
Utility module of the Synth Pong game
"""

from synth_pong.utils.config import AudioConfig
from synth_pong.utils.config import GameConfig
from synth_pong.utils.config import audio_config
from synth_pong.utils.config import game_config

__all__ = ["game_config", "audio_config", "GameConfig", "AudioConfig"]
