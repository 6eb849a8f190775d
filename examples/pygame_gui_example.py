"""
Simple Synth Pong game example with graphical interface
"""

import sys

try:
    from synth_pong.gui.game_app import PongApp
except ImportError as e:
    print(f"Error: Unable to import required modules: {e}")
    print("Make sure pygame is installed: pip install pygame")
    sys.exit(1)


def run_simple_game(ai_speed: float = 4.0) -> None:
    """Launch a game against a slower AI paddle"""
    print("Launching a Synth Pong game...")

    app = PongApp()
    app.set_ai_speed(ai_speed)

    # Optional: serve right away instead of waiting for ENTER
    # app.game_engine.start()

    app.run()


if __name__ == "__main__":
    run_simple_game()
