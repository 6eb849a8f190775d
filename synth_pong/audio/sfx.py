"""
Sound effects for game events
"""

from collections.abc import Iterable

from synth_pong.audio.tones import ToneRequest
from synth_pong.audio.tones import Waveform
from synth_pong.core.entities import GameEvent
from synth_pong.core.interfaces.audio import AudioBackend

# Sequences are requested all at once with start offsets, so they overlap
# freely with anything already playing.
SFX_TONES: dict[GameEvent, tuple[ToneRequest, ...]] = {
    GameEvent.WALL: (ToneRequest(440, Waveform.SINE, 0.07),),
    GameEvent.PADDLE: (ToneRequest(880, Waveform.SAWTOOTH, 0.06),),
    GameEvent.SCORE: (
        ToneRequest(660, Waveform.TRIANGLE, 0.12, 0.0),
        ToneRequest(880, Waveform.TRIANGLE, 0.12, 0.12),
    ),
    GameEvent.WIN: (
        ToneRequest(880, Waveform.SAWTOOTH, 0.1, 0.0),
        ToneRequest(990, Waveform.SAWTOOTH, 0.1, 0.11),
        ToneRequest(1320, Waveform.SAWTOOTH, 0.18, 0.22),
    ),
}

VOLUME_STEP = 0.1


class SoundEffects:
    """Turns game events into tone requests on an audio backend"""

    def __init__(self, backend: AudioBackend):
        self.backend = backend

    @property
    def enabled(self) -> bool:
        return self.backend.enabled

    @property
    def volume(self) -> float:
        return self.backend.volume

    def toggle(self) -> bool:
        """Switches sound effects on/off, returns the new state"""
        self.backend.enabled = not self.backend.enabled
        return self.backend.enabled

    def adjust_volume(self, delta: float) -> float:
        self.backend.set_volume(self.backend.volume + delta)
        return self.backend.volume

    def dispatch(self, events: Iterable[GameEvent]) -> None:
        """Requests the tones of every event, in order, without waiting"""
        for event in events:
            for request in SFX_TONES[event]:
                self.backend.play(request)
