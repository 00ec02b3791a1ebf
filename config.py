"""
Config Module
Viewer settings with validated defaults and command-line overrides.
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple

import numpy as np

from camera import Camera
from input_router import KEY_MODES


@dataclass
class ViewerConfig:
    """Camera start state, tuning values and render settings."""
    camera_position: Tuple[float, float, float] = (0.0, 0.0, 3.0)
    world_up: Tuple[float, float, float] = (0.0, 1.0, 0.0)
    yaw: float = -90.0
    pitch: float = 0.0
    zoom: float = 45.0
    movement_speed: float = 2.5
    mouse_sensitivity: float = 0.04
    scroll_sensitivity: float = 1.0

    # Wheel deltas are multiplied by scroll_scale before reaching the camera
    scroll_scale: float = 0.01
    # Frame clock is in milliseconds, movement speed is per second
    key_time_scale: float = 0.001
    key_mode: str = 'impulse'

    near_plane: float = 0.1
    far_plane: float = 100.0
    clear_color: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)
    color_seed: Optional[int] = None

    def __post_init__(self):
        self.validate()

    def validate(self):
        """Raise ValueError on settings the viewer cannot run with."""
        if self.near_plane <= 0:
            raise ValueError(f"near_plane must be positive, got {self.near_plane}")
        if self.far_plane <= self.near_plane:
            raise ValueError(
                f"far_plane ({self.far_plane}) must be greater than near_plane ({self.near_plane})")
        if self.key_mode not in KEY_MODES:
            raise ValueError(f"key_mode must be one of {KEY_MODES}, got {self.key_mode!r}")
        for name in ('movement_speed', 'mouse_sensitivity', 'scroll_sensitivity'):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative, got {getattr(self, name)}")
        if len(self.camera_position) != 3 or len(self.world_up) != 3:
            raise ValueError("camera_position and world_up must have three components")
        if np.linalg.norm(self.world_up) == 0:
            raise ValueError("world_up must not be a zero vector")

    @classmethod
    def from_args(cls, args):
        """Build a config from parsed command-line arguments (None means default)."""
        overrides = {}
        if getattr(args, 'speed', None) is not None:
            overrides['movement_speed'] = args.speed
        if getattr(args, 'sensitivity', None) is not None:
            overrides['mouse_sensitivity'] = args.sensitivity
        if getattr(args, 'fov', None) is not None:
            overrides['zoom'] = args.fov
        if getattr(args, 'poll_keys', False):
            overrides['key_mode'] = 'poll'
        if getattr(args, 'seed', None) is not None:
            overrides['color_seed'] = args.seed
        return replace(cls(), **overrides)

    def make_camera(self):
        """Create the Camera described by this config."""
        return Camera(
            position=self.camera_position,
            world_up=self.world_up,
            yaw=self.yaw,
            pitch=self.pitch,
            zoom=self.zoom,
            movement_speed=self.movement_speed,
            mouse_sensitivity=self.mouse_sensitivity,
            scroll_sensitivity=self.scroll_sensitivity,
        )
