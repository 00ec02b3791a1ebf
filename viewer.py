#!/usr/bin/env python3
"""
Cube Viewer - Main Entry Point
Fly around a coloured cube with WASD, the mouse and the scroll wheel.
"""

import argparse
import sys

from config import ViewerConfig


def parse_args(argv=None):
    """Command-line overrides for the default viewer settings."""
    parser = argparse.ArgumentParser(description="Free-fly cube viewer")
    parser.add_argument("--speed", type=float,
                        help="Movement speed in world units per second (default: 2.5)")
    parser.add_argument("--sensitivity", type=float,
                        help="Mouse look sensitivity in degrees per pixel (default: 0.04)")
    parser.add_argument("--fov", type=float,
                        help="Initial field of view in degrees, 1-45 (default: 45)")
    parser.add_argument("--poll-keys", action="store_true",
                        help="Move continuously while keys are held instead of once per key event")
    parser.add_argument("--seed", type=int,
                        help="Seed for the random face colours")
    args = parser.parse_args(argv)

    try:
        config = ViewerConfig.from_args(args)
    except ValueError as e:
        parser.error(str(e))
    return config


def main():
    """Main entry point."""
    config = parse_args()

    # Qt is imported after argument parsing so --help works without a display
    from PyQt5.QtWidgets import QApplication
    from main_window import MainWindow

    print("\n" + "="*60)
    print("CUBE VIEWER")
    print("="*60)

    app = QApplication(sys.argv[:1])
    window = MainWindow(config)
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
