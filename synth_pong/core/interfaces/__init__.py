"""
Protocols for the collaborators driven by the game core
"""

from synth_pong.core.interfaces.audio import AudioBackend
from synth_pong.core.interfaces.renderer import RendererProtocol

__all__ = ["AudioBackend", "RendererProtocol"]
