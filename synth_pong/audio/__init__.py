"""
Synthesized sound effects for Synth Pong
"""

from synth_pong.audio.tones import ToneRequest
from synth_pong.audio.tones import Waveform
from synth_pong.audio.tones import synthesize_tone

__all__ = ["ToneRequest", "Waveform", "synthesize_tone"]
