"""
Shader Manager Module
Handles GLSL shader compilation, linking, and uniform management.
"""

from OpenGL.GL import *
from OpenGL.GL.shaders import compileProgram, compileShader
import numpy as np


class ShaderProgram:
    """Manages a GLSL shader program."""

    def __init__(self, vertex_src, fragment_src, name='program'):
        """Compile and link shaders from source text."""
        self.name = name
        self.program_id = None
        self.uniform_locations = {}

        self._compile_and_link(vertex_src, fragment_src)

        print(f"✓ Shader program '{name}' linked")

    def _compile_and_link(self, vertex_src, fragment_src):
        """Compile shaders and link program."""
        try:
            vertex_shader = compileShader(vertex_src, GL_VERTEX_SHADER)
            fragment_shader = compileShader(fragment_src, GL_FRAGMENT_SHADER)

            # Validation needs a bound VAO on core profiles, which does not exist yet
            self.program_id = compileProgram(vertex_shader, fragment_shader, validate=False)

            # Clean up individual shaders (they're now part of the program)
            glDeleteShader(vertex_shader)
            glDeleteShader(fragment_shader)

        except Exception as e:
            print(f"✗ Shader compilation error in '{self.name}':")
            print(str(e))
            raise

    def use(self):
        """Activate this shader program."""
        if self.program_id:
            glUseProgram(self.program_id)

    def unuse(self):
        """Deactivate shader program."""
        glUseProgram(0)

    def get_uniform_location(self, name):
        """Get uniform location (cached)."""
        if name not in self.uniform_locations:
            self.uniform_locations[name] = glGetUniformLocation(self.program_id, name)
        return self.uniform_locations[name]

    def get_attrib_location(self, name):
        """Get vertex attribute location (-1 if the attribute is unused)."""
        return glGetAttribLocation(self.program_id, name)

    def set_mat4(self, name, matrix):
        """Set mat4 uniform from a row-major matrix."""
        loc = self.get_uniform_location(name)
        if loc != -1:
            mat = np.ascontiguousarray(matrix, dtype=np.float32)
            glUniformMatrix4fv(loc, 1, GL_TRUE, mat)

    def cleanup(self):
        """Delete shader program."""
        if self.program_id:
            glDeleteProgram(self.program_id)
            self.program_id = None
