"""
Tone synthesis with numpy
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np
import numpy.typing as npt

from synth_pong.utils.config import audio_config

# Envelope floor values of the exponential ramps
ENVELOPE_START = 0.0001
ENVELOPE_END = 0.001


class Waveform(Enum):
    """Oscillator shapes"""

    SINE = "sine"
    SQUARE = "square"
    SAWTOOTH = "sawtooth"
    TRIANGLE = "triangle"


@dataclass(frozen=True)
class ToneRequest:
    """A short tone: frequency in Hz, duration and start offset in seconds"""

    frequency: float
    waveform: Waveform = Waveform.SINE
    duration: float = 0.08
    delay: float = 0.0


def oscillator(waveform: Waveform, frequency: float, t: npt.NDArray[np.float64]) -> np.ndarray:
    """Returns one oscillator sample per time value, in [-1, 1]"""
    phase = frequency * t
    if waveform is Waveform.SINE:
        return np.sin(2 * np.pi * phase)
    if waveform is Waveform.SQUARE:
        return np.where(np.sin(2 * np.pi * phase) >= 0, 1.0, -1.0)
    saw = 2.0 * (phase - np.floor(phase + 0.5))
    if waveform is Waveform.SAWTOOTH:
        return saw
    return 2.0 * np.abs(saw) - 1.0


def envelope(
    n_samples: int, sample_rate: int, duration: float, peak: float, attack: float
) -> np.ndarray:
    """Exponential attack up to peak, then exponential decay until duration"""
    t = np.arange(n_samples) / sample_rate
    attack = min(attack, duration)

    rise = ENVELOPE_START * (peak / ENVELOPE_START) ** np.minimum(t / attack, 1.0)
    decay_time = max(duration - attack, 1e-9)
    fall = peak * (ENVELOPE_END / peak) ** np.clip((t - attack) / decay_time, 0.0, 1.0)
    return np.where(t < attack, rise, fall)


def synthesize_tone(
    request: ToneRequest,
    sample_rate: int | None = None,
    peak: float | None = None,
    attack: float | None = None,
    release_tail: float | None = None,
) -> np.ndarray:
    """
    Render a tone request into a mono float32 buffer.

    The buffer starts with ``request.delay`` seconds of silence so that a
    sequence of tones can be started at once and still sound in order; the
    mixer's clock does the scheduling.
    """
    sample_rate = sample_rate or audio_config.SAMPLE_RATE
    peak = peak if peak is not None else audio_config.PEAK_GAIN
    attack = attack if attack is not None else audio_config.ATTACK
    release_tail = release_tail if release_tail is not None else audio_config.RELEASE_TAIL

    n_delay = int(round(request.delay * sample_rate))
    n_tone = int(round(request.duration * sample_rate))
    n_tail = int(round(release_tail * sample_rate))

    t = np.arange(n_tone) / sample_rate
    tone = oscillator(request.waveform, request.frequency, t)
    tone = tone * envelope(n_tone, sample_rate, request.duration, peak, attack)

    buffer = np.zeros(n_delay + n_tone + n_tail, dtype=np.float32)
    buffer[n_delay : n_delay + n_tone] = tone
    return buffer


def to_pcm16(buffer: np.ndarray, channels: int = 1) -> np.ndarray:
    """Converts a float buffer to signed 16-bit samples laid out for the mixer"""
    samples = (np.clip(buffer, -1.0, 1.0) * 32767).astype(np.int16)
    if channels > 1:
        samples = np.repeat(samples[:, np.newaxis], channels, axis=1)
    return np.ascontiguousarray(samples)
