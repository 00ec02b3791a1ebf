"""
Main Window Module
Main application window that owns the camera, input router and GL widget.
"""

from PyQt5.QtWidgets import QMainWindow

from gl_widget import GLWidget
from input_router import InputRouter
from render_loop import FrameTiming


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, config):
        super().__init__()
        self.setWindowTitle("Cube Viewer")
        self.resize(800, 600)

        self.config = config
        self.camera = config.make_camera()
        self.timing = FrameTiming()
        self.input_router = InputRouter(
            self.camera,
            self.timing,
            key_mode=config.key_mode,
            key_time_scale=config.key_time_scale,
            scroll_scale=config.scroll_scale,
        )

        self.gl_widget = GLWidget(self.camera, self.input_router, self.timing, config)
        self.setCentralWidget(self.gl_widget)

        self.print_controls()

    def print_controls(self):
        """Print control information to console."""
        mode = "hold to move" if self.config.key_mode == 'poll' else "each key press moves"
        print("\n" + "="*60)
        print("CONTROLS:")
        print("="*60)
        print("Mouse:")
        print("  Move               : Look around")
        print("  Mouse Wheel        : Zoom in/out")
        print("\nKeyboard:")
        print(f"  W / S              : Move forward/back ({mode})")
        print("  A / D              : Strafe left/right")
        print("="*60 + "\n")

    def showEvent(self, event):
        super().showEvent(event)
        self.gl_widget.setFocus()

    def closeEvent(self, event):
        self.gl_widget.cleanup()
        super().closeEvent(event)
