"""
Audio backend protocol - defines interface for sound output
"""

from typing import Protocol

from synth_pong.audio.tones import ToneRequest


class AudioBackend(Protocol):
    """
    Protocol for sound output implementations.

    The core only emits tone requests; playback state lives in the backend.
    Implementations must return immediately and must not raise when audio
    is disabled or unavailable.
    """

    enabled: bool

    @property
    def volume(self) -> float:
        """Master volume scalar in [0, 1]"""
        ...

    def set_volume(self, volume: float) -> None:
        """
        Set the master volume.

        Args:
            volume: Scalar in [0, 1], out-of-range values are clamped
        """
        ...

    def play(self, request: ToneRequest) -> None:
        """
        Start a tone without waiting for it to finish.

        Args:
            request: Frequency, waveform, duration and start offset
        """
        ...
