"""
pygame mixer backend for synthesized tones
"""

import pygame
import pygame.sndarray

from synth_pong.audio.tones import ToneRequest
from synth_pong.audio.tones import synthesize_tone
from synth_pong.audio.tones import to_pcm16
from synth_pong.utils.config import audio_config

MIXER_CHANNELS = 16


class PygameAudioBackend:
    """
    Fire-and-forget tone playback through pygame.mixer.

    The mixer is opened lazily on the first request. If it cannot be opened
    the backend reports it once and every later request is a silent no-op.
    """

    def __init__(self, enabled: bool | None = None, volume: float | None = None):
        self.enabled = audio_config.SFX_ENABLED if enabled is None else enabled
        self._volume = 0.0
        self.set_volume(audio_config.SFX_VOLUME if volume is None else volume)
        self.available = True
        self._sounds: dict[ToneRequest, pygame.mixer.Sound] = {}

    @property
    def volume(self) -> float:
        return self._volume

    def set_volume(self, volume: float) -> None:
        self._volume = max(0.0, min(1.0, float(volume)))

    def _ensure_mixer(self) -> bool:
        """Opens the mixer if needed, returns False if audio is unavailable"""
        if not self.available:
            return False
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=audio_config.SAMPLE_RATE, size=-16, buffer=512)
            if pygame.mixer.get_num_channels() < MIXER_CHANNELS:
                pygame.mixer.set_num_channels(MIXER_CHANNELS)
        except pygame.error as e:
            self._disable(e)
            return False
        return True

    def _disable(self, error: Exception) -> None:
        print(f"Sound effects unavailable: {error}")
        self.available = False
        self._sounds.clear()

    def _get_sound(self, request: ToneRequest) -> pygame.mixer.Sound:
        sound = self._sounds.get(request)
        if sound is None:
            frequency, _, channels = pygame.mixer.get_init()
            buffer = synthesize_tone(request, sample_rate=frequency)
            sound = pygame.sndarray.make_sound(to_pcm16(buffer, channels))
            self._sounds[request] = sound
        return sound

    def play(self, request: ToneRequest) -> None:
        """Starts a tone on any free channel and returns immediately"""
        if not self.enabled or not self._ensure_mixer():
            return

        try:
            channel = self._get_sound(request).play()
            # Cached sounds are shared, so volume is applied per playback
            if channel is not None:
                channel.set_volume(self._volume)
        except pygame.error as e:
            self._disable(e)

    def close(self) -> None:
        """Releases cached sounds and the mixer"""
        self._sounds.clear()
        if pygame.mixer.get_init():
            pygame.mixer.quit()


class NullAudioBackend:
    """Backend for headless runs: accepts requests and plays nothing"""

    def __init__(self) -> None:
        self.enabled = False
        self._volume = 0.0

    @property
    def volume(self) -> float:
        return self._volume

    def set_volume(self, volume: float) -> None:
        self._volume = max(0.0, min(1.0, float(volume)))

    def play(self, request: ToneRequest) -> None:
        pass

    def close(self) -> None:
        pass
