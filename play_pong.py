#!/usr/bin/env python3
"""
Main script to launch Synth Pong with PyGame graphical interface
"""

import importlib.util
import sys

try:
    from synth_pong.gui.game_app import main
    from synth_pong.utils.config import load_config_from_file

except ImportError as e:
    print(f"Import error: {e}")
    print()
    print("Checking dependencies:")
    for package in ("pygame", "numpy", "pydantic"):
        if importlib.util.find_spec(package) is not None:
            print(f"✓ {package} is installed")
        else:
            print(f"✗ {package} is not installed - pip install {package}")
    sys.exit(1)

if __name__ == "__main__":
    print("=== SYNTH PONG ===")
    print("Pong with synthesized sound effects")
    print()

    if load_config_from_file():
        print("Loaded settings from synth_pong_config.json")

    print("CONTROLS:")
    print("  Mouse / touch: Move the left paddle")
    print("  ENTER or S: Start")
    print("  SPACE or P: Pause / resume")
    print("  R: Reset")
    print("  M: Sound effects on/off")
    print("  - / =: Volume down / up")
    print("  [ / ]: AI speed down / up")
    print("  ESC: Quit")
    print()

    main()
