"""
GL Widget Module
OpenGL widget hosting the cube render loop and forwarding Qt input to the camera.
"""

from PyQt5.QtCore import Qt, QElapsedTimer
from PyQt5.QtOpenGL import QGLWidget, QGLFormat
from OpenGL.GL import *

from cube_mesh import CUBE_POSITIONS, face_colors
from input_router import KeyDown, KeyUp, PointerMove, Wheel
from render_loop import RenderLoop, Surface
from shader_manager import ShaderProgram
from shaders import CUBE_VERTEX_SHADER, CUBE_FRAGMENT_SHADER
from vbo_renderer import CubeGeometry


class WidgetSurface(Surface):
    """Surface backed by a QGLWidget's drawable."""

    def __init__(self, widget):
        super().__init__()
        self.widget = widget

    def container_size(self):
        ratio = self.widget.devicePixelRatioF()
        return int(self.widget.width() * ratio), int(self.widget.height() * ratio)

    def apply_viewport(self, width, height):
        glViewport(0, 0, width, height)

    def clear(self, color):
        glEnable(GL_DEPTH_TEST)
        glClearColor(*color)
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)


class WidgetFrameScheduler:
    """Frame scheduler on top of QGLWidget repaints.

    request_frame() stores the callback and asks Qt for a repaint; paintGL
    fires it with the widget clock in milliseconds. With a swap interval of 1
    repaints are paced by the display refresh.
    """

    def __init__(self, widget):
        self.widget = widget
        self.pending = None
        self.clock = QElapsedTimer()
        self.clock.start()

    def request_frame(self, callback):
        self.pending = callback
        self.widget.update()

    def fire(self):
        """Run the pending callback. Returns False if none was pending."""
        callback, self.pending = self.pending, None
        if callback is None:
            return False
        callback(self.clock.nsecsElapsed() / 1e6)
        return True


class GLWidget(QGLWidget):
    """OpenGL widget for the cube viewer."""

    def __init__(self, camera, input_router, timing, config, parent=None):
        fmt = QGLFormat()
        fmt.setVersion(3, 3)
        fmt.setProfile(QGLFormat.CoreProfile)
        fmt.setSwapInterval(1)
        super().__init__(fmt, parent)

        self.camera = camera
        self.input_router = input_router
        self.timing = timing
        self.config = config

        self.program = None
        self.geometry = None
        self.render_loop = None
        self.scheduler = WidgetFrameScheduler(self)

        self.last_pos = None

        self.setMinimumSize(800, 600)
        self.setFocusPolicy(Qt.StrongFocus)
        self.setMouseTracking(True)

    def initializeGL(self):
        self.program = ShaderProgram(CUBE_VERTEX_SHADER, CUBE_FRAGMENT_SHADER, name='cube')
        self.geometry = CubeGeometry(self.program, CUBE_POSITIONS,
                                     face_colors(self.config.color_seed))

        self.render_loop = RenderLoop(
            camera=self.camera,
            surface=WidgetSurface(self),
            program=self.program,
            geometry=self.geometry,
            scheduler=self.scheduler,
            timing=self.timing,
            input_router=self.input_router,
            near_plane=self.config.near_plane,
            far_plane=self.config.far_plane,
            clear_color=self.config.clear_color,
        )
        self.render_loop.start()
        print(f"✓ OpenGL {glGetString(GL_VERSION).decode(errors='replace')}")

    def paintGL(self):
        if self.render_loop is None:
            return
        self.scheduler.fire()

    def cleanup(self):
        """Release GL resources."""
        if self.program is None:
            return
        self.makeCurrent()
        self.geometry.cleanup()
        self.program.cleanup()
        self.doneCurrent()
        self.program = None
        self.geometry = None

    def mouseMoveEvent(self, event):
        if self.last_pos is not None:
            dx = event.x() - self.last_pos.x()
            dy = event.y() - self.last_pos.y()
            self.input_router.post(PointerMove(dx, dy))
        self.last_pos = event.pos()

    def leaveEvent(self, event):
        # Re-entering elsewhere must not register as one large jump
        self.last_pos = None
        super().leaveEvent(event)

    def focusOutEvent(self, event):
        # Key releases are not delivered while another widget has focus
        self.input_router.release_keys()
        super().focusOutEvent(event)

    def wheelEvent(self, event):
        # Qt reports positive when scrolling away from the user
        self.input_router.post(Wheel(-event.angleDelta().y()))
        event.accept()

    def keyPressEvent(self, event):
        key = event.text().lower()
        if key in self.input_router.bindings:
            self.input_router.post(KeyDown(key))
            event.accept()
        else:
            super().keyPressEvent(event)

    def keyReleaseEvent(self, event):
        key = event.text().lower()
        if key in self.input_router.bindings:
            if not event.isAutoRepeat():
                self.input_router.post(KeyUp(key))
            event.accept()
        else:
            super().keyReleaseEvent(event)
