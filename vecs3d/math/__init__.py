"""
Математический суб‑пакет: Vec3.
"""

from vecs3d.math.vec3 import Vec3

__all__ = ["Vec3"]
