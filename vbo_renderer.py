"""
VBO Renderer Module
Uploads the cube's vertex streams and issues the draw call.
"""

import numpy as np
import ctypes
from OpenGL.GL import *


class CubeGeometry:
    """VAO with separate position and colour buffers."""

    def __init__(self, program, positions, colors):
        """Create VAO/VBOs bound to the program's a_pos and a_color attributes."""
        self.vao = None
        self.position_vbo = None
        self.color_vbo = None
        self.vertex_count = 0

        self._create_buffers(program, positions, colors)

    def _create_buffers(self, program, positions, colors):
        """Create the vertex array and one buffer per attribute."""
        positions = np.ascontiguousarray(positions, dtype=np.float32)
        colors = np.ascontiguousarray(colors, dtype=np.float32)

        if len(positions) == 0:
            print("⚠️ No vertex data to create VBOs")
            return

        self.vao = glGenVertexArrays(1)
        glBindVertexArray(self.vao)

        self.position_vbo = self._upload(program.get_attrib_location('a_pos'), positions)
        self.color_vbo = self._upload(program.get_attrib_location('a_color'), colors)

        # Unbind
        glBindVertexArray(0)
        glBindBuffer(GL_ARRAY_BUFFER, 0)

        self.vertex_count = len(positions) // 3
        print(f"✓ Created VBOs: {self.vertex_count} vertices")

    def _upload(self, location, data):
        """Upload a tightly packed vec3 stream to the given attribute."""
        vbo = glGenBuffers(1)
        glBindBuffer(GL_ARRAY_BUFFER, vbo)
        glBufferData(GL_ARRAY_BUFFER, data.nbytes, data, GL_STATIC_DRAW)

        if location == -1:
            print("⚠️ Vertex attribute not active in shader, buffer left unbound")
            return vbo

        glEnableVertexAttribArray(location)
        glVertexAttribPointer(location, 3, GL_FLOAT, GL_FALSE, 0, ctypes.c_void_p(0))
        return vbo

    def bind(self):
        """Bind the VAO for drawing."""
        if self.vao:
            glBindVertexArray(self.vao)

    def draw(self, count=None):
        """Draw count vertices as triangles (all of them by default)."""
        count = self.vertex_count if count is None else count
        if self.vao and count > 0:
            glDrawArrays(GL_TRIANGLES, 0, count)

    def cleanup(self):
        """Delete buffers."""
        if self.position_vbo:
            glDeleteBuffers(1, [self.position_vbo])
        if self.color_vbo:
            glDeleteBuffers(1, [self.color_vbo])
        if self.vao:
            glDeleteVertexArrays(1, [self.vao])
