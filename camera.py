"""
Camera Module
Free-fly camera driven by keyboard, mouse and scroll input.

Orientation is stored as two Euler angles (yaw, pitch) and the front/right/up
basis is derived from them.
"""

import math
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from transforms import look_at, normalize, perspective


PITCH_LIMIT = 89.0
MIN_ZOOM = 1.0
MAX_ZOOM = 45.0


class CameraMovement(Enum):
    """Directions accepted by Camera.process_keyboard_movement."""
    FORWARD = 'forward'
    BACKWARD = 'backward'
    LEFT = 'left'
    RIGHT = 'right'


def _vec3(values):
    return np.array(values, dtype=np.float64).reshape(3)


@dataclass
class OrientationState:
    """Position, angles, basis and tuning values owned by a Camera."""
    position: np.ndarray
    world_up: np.ndarray
    yaw: float = -90.0
    pitch: float = 0.0
    zoom: float = MAX_ZOOM
    movement_speed: float = 2.5
    mouse_sensitivity: float = 0.1
    scroll_sensitivity: float = 1.0
    front: np.ndarray = field(default_factory=lambda: _vec3((0.0, 0.0, -1.0)))
    right: np.ndarray = field(default_factory=lambda: _vec3((1.0, 0.0, 0.0)))
    up: np.ndarray = field(default_factory=lambda: _vec3((0.0, 1.0, 0.0)))


class Camera:
    """Free-fly camera.

    The basis vectors are written only by _update_vectors(), which runs after
    every orientation change, so front/right/up always match yaw/pitch.
    """

    def __init__(self, position=(0.0, 0.0, 3.0), world_up=(0.0, 1.0, 0.0),
                 yaw=-90.0, pitch=0.0, zoom=MAX_ZOOM, movement_speed=2.5,
                 mouse_sensitivity=0.1, scroll_sensitivity=1.0):
        self._state = OrientationState(
            position=_vec3(position),
            world_up=_vec3(world_up),
            yaw=float(yaw),
            pitch=_clamp(float(pitch), -PITCH_LIMIT, PITCH_LIMIT),
            zoom=_clamp(float(zoom), MIN_ZOOM, MAX_ZOOM),
            movement_speed=float(movement_speed),
            mouse_sensitivity=float(mouse_sensitivity),
            scroll_sensitivity=float(scroll_sensitivity),
        )
        self._update_vectors()

    # Read-only views of the state
    @property
    def position(self):
        return self._state.position.copy()

    @property
    def world_up(self):
        return self._state.world_up.copy()

    @property
    def front(self):
        return self._state.front.copy()

    @property
    def right(self):
        return self._state.right.copy()

    @property
    def up(self):
        return self._state.up.copy()

    @property
    def yaw(self):
        return self._state.yaw

    @property
    def pitch(self):
        return self._state.pitch

    @property
    def zoom(self):
        return self._state.zoom

    # Tunables
    @property
    def movement_speed(self):
        return self._state.movement_speed

    @movement_speed.setter
    def movement_speed(self, value):
        self._state.movement_speed = float(value)

    @property
    def mouse_sensitivity(self):
        return self._state.mouse_sensitivity

    @mouse_sensitivity.setter
    def mouse_sensitivity(self, value):
        self._state.mouse_sensitivity = float(value)

    @property
    def scroll_sensitivity(self):
        return self._state.scroll_sensitivity

    @scroll_sensitivity.setter
    def scroll_sensitivity(self, value):
        self._state.scroll_sensitivity = float(value)

    def process_keyboard_movement(self, direction, delta_time):
        """Move along front/right by movement_speed * delta_time."""
        state = self._state
        velocity = state.movement_speed * delta_time

        if direction == CameraMovement.FORWARD:
            state.position = state.position + state.front * velocity
        elif direction == CameraMovement.BACKWARD:
            state.position = state.position - state.front * velocity
        elif direction == CameraMovement.LEFT:
            state.position = state.position - state.right * velocity
        elif direction == CameraMovement.RIGHT:
            state.position = state.position + state.right * velocity

    def process_mouse_movement(self, delta_x, delta_y):
        """Rotate by a pointer delta. Moving the pointer up tilts the view up."""
        state = self._state
        state.yaw += delta_x * state.mouse_sensitivity
        state.pitch -= delta_y * state.mouse_sensitivity
        state.pitch = _clamp(state.pitch, -PITCH_LIMIT, PITCH_LIMIT)
        self._update_vectors()

    def process_mouse_scroll(self, delta_y):
        """Narrow or widen the field of view."""
        state = self._state
        state.zoom -= delta_y * state.scroll_sensitivity
        state.zoom = _clamp(state.zoom, MIN_ZOOM, MAX_ZOOM)

    def get_view_matrix(self):
        """Look-at matrix from position towards position + front."""
        state = self._state
        return look_at(state.position, state.position + state.front, state.up)

    def get_projection_matrix(self, aspect, near, far):
        """Perspective matrix using zoom as the vertical field of view."""
        return perspective(self._state.zoom, aspect, near, far)

    def _update_vectors(self):
        state = self._state
        yaw = math.radians(state.yaw)
        pitch = math.radians(state.pitch)

        front = _vec3((
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        ))
        state.front = normalize(front)
        state.right = normalize(np.cross(state.front, state.world_up))
        state.up = normalize(np.cross(state.right, state.front))

    def __repr__(self):
        x, y, z = self._state.position
        return (f"Camera(position=({x:.2f}, {y:.2f}, {z:.2f}), "
                f"yaw={self.yaw:.1f}, pitch={self.pitch:.1f}, zoom={self.zoom:.1f})")


def _clamp(value, low, high):
    return max(low, min(high, value))
