"""
Cube Mesh Module
Static unit cube: 36 vertex positions (12 triangles) and one random colour per face.
"""

import numpy as np


CUBE_POSITIONS = np.array([
    # back
    -0.5, -0.5, -0.5,
     0.5, -0.5, -0.5,
     0.5,  0.5, -0.5,
     0.5,  0.5, -0.5,
    -0.5,  0.5, -0.5,
    -0.5, -0.5, -0.5,
    # front
    -0.5, -0.5,  0.5,
     0.5, -0.5,  0.5,
     0.5,  0.5,  0.5,
     0.5,  0.5,  0.5,
    -0.5,  0.5,  0.5,
    -0.5, -0.5,  0.5,
    # left
    -0.5,  0.5,  0.5,
    -0.5,  0.5, -0.5,
    -0.5, -0.5, -0.5,
    -0.5, -0.5, -0.5,
    -0.5, -0.5,  0.5,
    -0.5,  0.5,  0.5,
    # right
     0.5,  0.5,  0.5,
     0.5,  0.5, -0.5,
     0.5, -0.5, -0.5,
     0.5, -0.5, -0.5,
     0.5, -0.5,  0.5,
     0.5,  0.5,  0.5,
    # bottom
    -0.5, -0.5, -0.5,
     0.5, -0.5, -0.5,
     0.5, -0.5,  0.5,
     0.5, -0.5,  0.5,
    -0.5, -0.5,  0.5,
    -0.5, -0.5, -0.5,
    # top
    -0.5,  0.5, -0.5,
     0.5,  0.5, -0.5,
     0.5,  0.5,  0.5,
     0.5,  0.5,  0.5,
    -0.5,  0.5,  0.5,
    -0.5,  0.5, -0.5,
], dtype=np.float32)

VERTICES_PER_FACE = 6
FACE_COUNT = len(CUBE_POSITIONS) // (3 * VERTICES_PER_FACE)


def face_colors(seed=None):
    """Random RGB per face, repeated for each of the face's six vertices."""
    rng = np.random.default_rng(seed)
    colors = rng.random((FACE_COUNT, 3), dtype=np.float32)
    return np.repeat(colors, VERTICES_PER_FACE, axis=0).ravel()
