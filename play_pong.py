#!/usr/bin/env python3
"""
Main script to launch Poong with PyGame graphical interface
"""

from poong.gui.game_app import main

if __name__ == "__main__":
    print("=== POONG ===")
    print()
    print("CONTROLS:")
    print("  Mouse or Up/Down arrows: move your paddle (left)")
    print("  ENTER: Start")
    print("  P or SPACE: Pause / resume")
    print("  R: Reset")
    print("  ESC: Quit")
    print()

    main()
