"""
Input Router Module
Translates host input events into camera commands.

Host event handlers post events into a FIFO channel; the render loop drains
the channel once per frame on the GUI thread.
"""

from collections import deque
from dataclasses import dataclass

from camera import CameraMovement


KEY_BINDINGS = {
    'w': CameraMovement.FORWARD,
    's': CameraMovement.BACKWARD,
    'a': CameraMovement.LEFT,
    'd': CameraMovement.RIGHT,
}

KEY_MODES = ('impulse', 'poll')


@dataclass(frozen=True)
class KeyDown:
    key: str


@dataclass(frozen=True)
class KeyUp:
    key: str


@dataclass(frozen=True)
class PointerMove:
    dx: float
    dy: float


@dataclass(frozen=True)
class Wheel:
    delta_y: float


class InputRouter:
    """Routes keyboard, pointer and wheel events to a Camera.

    In 'impulse' mode each key-down delivery moves the camera once, scaled by
    the current frame's delta time. In 'poll' mode key-down/key-up track held
    keys and process_frame() moves once per held key per frame.
    """

    def __init__(self, camera, timing, key_mode='impulse',
                 key_time_scale=0.001, scroll_scale=0.01, bindings=None):
        if key_mode not in KEY_MODES:
            raise ValueError(f"Unknown key mode: {key_mode!r}")

        self.camera = camera
        self.timing = timing
        self.key_mode = key_mode
        self.key_time_scale = key_time_scale
        self.scroll_scale = scroll_scale
        self.bindings = dict(KEY_BINDINGS if bindings is None else bindings)

        self.pending = deque()
        self.keys_pressed = set()

        self._handlers = {
            KeyDown: self._on_key_down,
            KeyUp: self._on_key_up,
            PointerMove: self._on_pointer_move,
            Wheel: self._on_wheel,
        }

    def post(self, event):
        """Queue an event for the next frame."""
        self.pending.append(event)

    def handle(self, event):
        """Dispatch one event immediately. Unknown events are ignored."""
        handler = self._handlers.get(type(event))
        if handler is not None:
            handler(event)

    def release_keys(self):
        """Queue a KeyUp for every bound key, e.g. when the window loses focus."""
        for key in self.bindings:
            self.post(KeyUp(key))

    def process_frame(self):
        """Drain queued events in arrival order, then apply held keys."""
        while self.pending:
            self.handle(self.pending.popleft())

        if self.key_mode == 'poll':
            for key in sorted(self.keys_pressed):
                self._move(self.bindings[key])

    def _frame_delta(self):
        return self.timing.delta_time * self.key_time_scale

    def _move(self, direction):
        self.camera.process_keyboard_movement(direction, self._frame_delta())

    def _on_key_down(self, event):
        key = event.key.lower()
        if key not in self.bindings:
            return
        if self.key_mode == 'poll':
            self.keys_pressed.add(key)
        else:
            self._move(self.bindings[key])

    def _on_key_up(self, event):
        self.keys_pressed.discard(event.key.lower())

    def _on_pointer_move(self, event):
        self.camera.process_mouse_movement(event.dx, event.dy)

    def _on_wheel(self, event):
        self.camera.process_mouse_scroll(event.delta_y * self.scroll_scale)
