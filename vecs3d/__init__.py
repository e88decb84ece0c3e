"""
vecs3d – трёхмерный вектор (float32) для графики, физики и геометрии.
"""

from vecs3d.utils import logger, Config
from vecs3d.math import Vec3

__version__ = "1.0.0"

__all__ = [
    "Vec3",
    "Config",
    "logger",
]
