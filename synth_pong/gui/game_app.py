"""
Main game application with PyGame GUI
"""

import sys
import traceback

import pygame

from synth_pong.audio.pygame_backend import PygameAudioBackend
from synth_pong.audio.sfx import VOLUME_STEP
from synth_pong.audio.sfx import SoundEffects
from synth_pong.core.entities import GameEvent
from synth_pong.core.game_engine import GameEngine
from synth_pong.core.interfaces.renderer import RendererProtocol
from synth_pong.gui.human_player import InputManager
from synth_pong.gui.human_player import pointer_to_board_y
from synth_pong.gui.pygame_renderer import PygameRenderer

AI_SPEED_STEP = 1.0
AI_SPEED_RANGE = (1.0, 12.0)


class PongApp:
    """Main application: routes input, drives the frame loop and plays sounds"""

    def __init__(
        self,
        game_engine: GameEngine | None = None,
        renderer: RendererProtocol | None = None,
        sound_effects: SoundEffects | None = None,
    ) -> None:
        self.game_engine = game_engine or GameEngine()
        self.renderer = renderer or PygameRenderer(
            int(self.game_engine.field_width), int(self.game_engine.field_height)
        )
        self.sound_effects = sound_effects or SoundEffects(PygameAudioBackend())
        self.input_manager = InputManager()
        self.running = True

    def handle_event(self, event: pygame.event.Event) -> None:
        """Apply one input event to the game immediately"""
        pointer_y = pointer_to_board_y(event, self.game_engine.field_height)
        if pointer_y is not None:
            self.game_engine.move_player_paddle(pointer_y)
            return

        action = self.input_manager.handle_event(event)
        if action is None:
            return

        if action == "quit":
            self.running = False
        elif self.game_engine.end_message and action in ("acknowledge", "start", "pause"):
            # The first key or click after a win only dismisses the message
            self.game_engine.acknowledge_end()
        elif action == "start":
            self.game_engine.start()
        elif action == "pause":
            self.game_engine.toggle_pause()
        elif action == "reset":
            self.game_engine.reset()
        elif action == "toggle_sfx":
            enabled = self.sound_effects.toggle()
            print(f"Sound effects {'on' if enabled else 'off'}")
        elif action == "volume_down":
            self.sound_effects.adjust_volume(-VOLUME_STEP)
        elif action == "volume_up":
            self.sound_effects.adjust_volume(VOLUME_STEP)
        elif action == "ai_slower":
            self.set_ai_speed(self.game_engine.ai_speed - AI_SPEED_STEP)
        elif action == "ai_faster":
            self.set_ai_speed(self.game_engine.ai_speed + AI_SPEED_STEP)

    def set_ai_speed(self, value: float) -> None:
        """Sets the AI speed within the range offered by the controls"""
        low, high = AI_SPEED_RANGE
        self.game_engine.ai_speed = max(low, min(high, value))

    def status(self) -> dict[str, str]:
        """Labels shown in the status bar"""
        return {
            "Sound": "on" if self.sound_effects.enabled else "off",
            "Volume": f"{self.sound_effects.volume:.1f}",
            "AI speed": f"{self.game_engine.ai_speed:g}",
        }

    def update(self) -> None:
        """Run the game step, then hand its events to the sound effects"""
        events = self.game_engine.update()
        if events:
            self.sound_effects.dispatch(events)
        if GameEvent.WIN in events:
            print(f"Game over: {self.game_engine.end_message}")

    def render(self) -> None:
        """Render the current state"""
        self.renderer.render_frame(self.game_engine.state, self.status())
        self.renderer.present()

    def step(self, events: list[pygame.event.Event]) -> None:
        """One frame: input, game logic (if running), then drawing"""
        for event in events:
            self.handle_event(event)
        self.update()
        self.render()

    def run(self) -> None:
        """Main application loop"""
        print("Starting Synth Pong...")

        try:
            while self.running:
                self.step(pygame.event.get())
                # Wait for the next frame
                self.renderer.update()

        except Exception as e:
            print(f"Error during execution: {e}")
            traceback.print_exc()

        finally:
            self.cleanup()

    def cleanup(self) -> None:
        """Clean up resources"""
        print("Cleaning up resources...")
        backend = self.sound_effects.backend
        if hasattr(backend, "close"):
            backend.close()
        self.renderer.cleanup()
        print("Synth Pong closed properly.")


def main() -> None:
    """Main entry point"""
    try:
        app = PongApp()
        app.run()
    except KeyboardInterrupt:
        print("\nUser interruption")
    finally:
        pygame.quit()
        sys.exit(0)


if __name__ == "__main__":
    main()
