"""
Run the game core without a window or sound card and print what happens
"""

import random
from collections import Counter

from synth_pong.audio.pygame_backend import NullAudioBackend
from synth_pong.audio.sfx import SoundEffects
from synth_pong.core.entities import GameEvent
from synth_pong.core.game_engine import GameEngine


def run_headless(frames: int = 5000, seed: int = 7) -> Counter:
    """Let the AI play against a pointer that always follows the ball"""
    engine = GameEngine(rng=random.Random(seed))
    sound_effects = SoundEffects(NullAudioBackend())
    counts: Counter = Counter()

    engine.start()
    for _ in range(frames):
        engine.move_player_paddle(engine.state.ball.center.y)
        events = engine.update()
        sound_effects.dispatch(events)
        counts.update(events)

        if GameEvent.WIN in events:
            print(engine.end_message)
            engine.start()

    return counts


if __name__ == "__main__":
    counts = run_headless()
    for event, count in counts.items():
        print(f"{event.value}: {count}")
