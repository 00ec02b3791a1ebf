"""
Transforms Module
Vector and matrix helpers for the camera and projection.

Matrices are row-major numpy arrays in math convention (M @ v).
"""

import math

import numpy as np


def normalize(v):
    """Return v scaled to unit length (zero vectors are returned unchanged)."""
    v = np.asarray(v, dtype=np.float64)
    length = np.linalg.norm(v)
    if length == 0:
        return v.copy()
    return v / length


def look_at(eye, center, up):
    """Build a right-handed view matrix looking from eye towards center."""
    eye = np.asarray(eye, dtype=np.float64)
    f = normalize(np.asarray(center, dtype=np.float64) - eye)
    s = normalize(np.cross(f, up))
    u = np.cross(s, f)

    result = np.identity(4, dtype=np.float32)
    result[0, 0:3] = s
    result[1, 0:3] = u
    result[2, 0:3] = -f
    result[0, 3] = -np.dot(s, eye)
    result[1, 3] = -np.dot(u, eye)
    result[2, 3] = np.dot(f, eye)
    return result


def perspective(fovy, aspect, near, far):
    """Perspective projection, fovy in degrees (same contract as gluPerspective)."""
    f = 1.0 / math.tan(math.radians(fovy) / 2.0)
    result = np.zeros((4, 4), dtype=np.float32)
    result[0, 0] = f / aspect
    result[1, 1] = f
    result[2, 2] = (far + near) / (near - far)
    result[2, 3] = (2.0 * far * near) / (near - far)
    result[3, 2] = -1.0
    return result
