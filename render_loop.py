"""
Render Loop Module
Per-frame driver: timing, surface sizing, uniforms and the draw call.

The loop is a two-state machine over a host frame scheduler. After start()
there is always exactly one callback pending; every frame requests the next
one before returning.
"""

from enum import Enum

import numpy as np


CUBE_VERTEX_COUNT = 36


class LoopState(Enum):
    IDLE = 'idle'
    SCHEDULED = 'scheduled'


class FrameTiming:
    """Timestamp of the previous frame and the delta for the current one."""

    def __init__(self, last_frame=0.0):
        self.last_frame = last_frame
        self.delta_time = 0.0

    def tick(self, timestamp):
        self.delta_time = timestamp - self.last_frame
        self.last_frame = timestamp
        return self.delta_time


class Surface:
    """Drawing surface whose backing resolution follows its container.

    Subclasses provide container_size(), apply_viewport() and clear().
    """

    def __init__(self):
        self.width = 0
        self.height = 0

    def container_size(self):
        """Displayed size in pixels. Override in a subclass."""
        raise NotImplementedError

    def apply_viewport(self, width, height):
        """Set the drawable viewport. Override in a subclass."""
        raise NotImplementedError

    def clear(self, color):
        """Clear colour and depth, enable depth testing. Override in a subclass."""
        raise NotImplementedError

    def fit_to_container(self):
        """Match the backing size to the displayed size. Returns True if it changed."""
        width, height = self.container_size()
        changed = (width, height) != (self.width, self.height)
        if changed:
            self.width, self.height = width, height
        self.apply_viewport(self.width, self.height)
        return changed

    @property
    def aspect(self):
        if self.width > 0 and self.height > 0:
            return self.width / self.height
        return 1.0


class RenderLoop:
    """Draws the cube once per display refresh."""

    def __init__(self, camera, surface, program, geometry, scheduler, timing,
                 input_router=None, near_plane=0.1, far_plane=100.0,
                 clear_color=(0.0, 0.0, 0.0, 1.0), vertex_count=CUBE_VERTEX_COUNT):
        self.camera = camera
        self.surface = surface
        self.program = program
        self.geometry = geometry
        self.scheduler = scheduler
        self.timing = timing
        self.input_router = input_router
        self.near_plane = near_plane
        self.far_plane = far_plane
        self.clear_color = clear_color
        self.vertex_count = vertex_count

        self.model = np.identity(4, dtype=np.float32)
        self.state = LoopState.IDLE
        self.frame_count = 0

    def start(self):
        """Schedule the first frame. Calling start() again does nothing."""
        if self.state == LoopState.SCHEDULED:
            return
        self._schedule()

    def frame(self, timestamp):
        """Scheduler callback: advance time, apply input, draw, reschedule."""
        self.surface.fit_to_container()
        self.timing.tick(timestamp)

        if self.input_router is not None:
            self.input_router.process_frame()

        self.draw()
        self.frame_count += 1
        self._schedule()

    def draw(self):
        self.surface.clear(self.clear_color)

        self.program.use()
        self.geometry.bind()

        projection = self.camera.get_projection_matrix(
            self.surface.aspect, self.near_plane, self.far_plane)
        view = self.camera.get_view_matrix()

        self.program.set_mat4('projection', projection)
        self.program.set_mat4('view', view)
        self.program.set_mat4('model', self.model)

        self.geometry.draw(self.vertex_count)
        self.program.unuse()

    def _schedule(self):
        self.scheduler.request_frame(self.frame)
        self.state = LoopState.SCHEDULED
