# vecs3d/math/vec3.py
"""
Трёхмерный вектор (float32) на базе NumPy.

Значение неизменяемое: все операции возвращают новый объект.
Деление на ровно 0.0 (``scalar_div`` и ``normalize``) возвращает ``None``,
а не бросает исключение. NaN/inf распространяются по правилам IEEE‑754.
"""

import numbers
from typing import Optional, Tuple

import numpy as np

from vecs3d.utils.config import Config
from vecs3d.utils.logger import logger

REAL = np.float32


def _require_vec3(value) -> None:
    if not isinstance(value, Vec3):
        raise TypeError(f"expected Vec3, got {type(value).__name__}")


def _require_real(value) -> None:
    if not isinstance(value, numbers.Real):
        raise TypeError(f"expected a real scalar, got {type(value).__name__}")


def _dot32(a: np.ndarray, b: np.ndarray) -> np.float32:
    # слева направо в float32, без BLAS (sdot копит сумму точнее)
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


class Vec3:
    """Неизменяемый вектор‑3 (float32)."""

    __slots__ = ("_v",)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        with np.errstate(over="ignore"):
            v = np.array([x, y, z], dtype=REAL)
        v.flags.writeable = False
        self._v = v

    @classmethod
    def _from_array(cls, arr: np.ndarray) -> "Vec3":
        obj = cls.__new__(cls)
        v = np.asarray(arr, dtype=REAL).copy()
        v.flags.writeable = False
        obj._v = v
        return obj

    # -----------------------------------------------------------------
    # компоненты (только чтение)
    # -----------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    # -----------------------------------------------------------------
    # арифметика
    # -----------------------------------------------------------------
    def add(self, other: "Vec3") -> "Vec3":
        """Покомпонентная сумма."""
        _require_vec3(other)
        with np.errstate(over="ignore", invalid="ignore"):
            return Vec3._from_array(self._v + other._v)

    def sub(self, other: "Vec3") -> "Vec3":
        """Покомпонентная разность."""
        _require_vec3(other)
        with np.errstate(over="ignore", invalid="ignore"):
            return Vec3._from_array(self._v - other._v)

    def scalar_mul(self, n: float) -> "Vec3":
        _require_real(n)
        with np.errstate(over="ignore", invalid="ignore"):
            return Vec3._from_array(self._v * REAL(n))

    def scalar_div(self, n: float) -> Optional["Vec3"]:
        """
        Деление на скаляр. Если ``n`` ровно 0.0 (без эпсилона, -0.0 тоже),
        результата нет – возвращается ``None``.
        """
        _require_real(n)
        with np.errstate(over="ignore", under="ignore"):
            n = REAL(n)
        if n == 0.0:
            logger.debug(f"[Vec3] Division of {self!r} by zero – no result.")
            return None
        with np.errstate(over="ignore", invalid="ignore", under="ignore"):
            return Vec3._from_array(self._v / n)

    def magnitude(self) -> float:
        """Евклидова длина: sqrt(x² + y² + z²)."""
        with np.errstate(over="ignore", invalid="ignore", under="ignore"):
            return float(np.sqrt(_dot32(self._v, self._v)))

    def normalize(self) -> Optional["Vec3"]:
        """Единичный вектор того же направления; у нулевого вектора – ``None``."""
        return self.scalar_div(self.magnitude())

    def dot_product(self, other: "Vec3") -> float:
        """Скалярное произведение."""
        _require_vec3(other)
        with np.errstate(over="ignore", invalid="ignore", under="ignore"):
            return float(_dot32(self._v, other._v))

    def cross_product(self, other: "Vec3") -> "Vec3":
        """
        Векторное произведение (правило правой руки), через определитель:

            | i  j  k  |
            | x  y  z  | = (y*z' - y'*z)i - (x*z' - x'*z)j + (x*y' - x'*y)k
            | x' y' z' |
        """
        _require_vec3(other)
        with np.errstate(over="ignore", invalid="ignore", under="ignore"):
            return Vec3._from_array(np.cross(self._v, other._v))

    def invert(self) -> "Vec3":
        return self.scalar_mul(-1.0)

    # -----------------------------------------------------------------
    # операторы
    # -----------------------------------------------------------------
    def __add__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, n):
        if not isinstance(n, numbers.Real):
            return NotImplemented
        return self.scalar_mul(n)

    __rmul__ = __mul__

    def __neg__(self):
        return self.invert()

    # -----------------------------------------------------------------
    # сравнение
    # -----------------------------------------------------------------
    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def __hash__(self):
        return hash(self.to_tuple())

    def partial_cmp(self, other: "Vec3") -> Optional[int]:
        """
        Лексикографическое сравнение (x, y, z): -1, 0 или 1.
        Если первая несовпавшая пара неупорядочена (NaN) – ``None``.
        """
        for a, b in zip(self._v, other._v):
            if a < b:
                return -1
            if a > b:
                return 1
            if a != b:
                return None
        return 0

    def __lt__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.partial_cmp(other) == -1

    def __le__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.partial_cmp(other) in (-1, 0)

    def __gt__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.partial_cmp(other) == 1

    def __ge__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.partial_cmp(other) in (0, 1)

    def isclose(self, other: "Vec3", rel_tol: Optional[float] = None,
                abs_tol: Optional[float] = None) -> bool:
        """Приближённое равенство; допуски по умолчанию берутся из Config."""
        _require_vec3(other)
        cfg = Config()
        rtol = cfg["rel_tol"] if rel_tol is None else rel_tol
        atol = cfg["abs_tol"] if abs_tol is None else abs_tol
        return bool(np.allclose(self._v, other._v, rtol=rtol, atol=atol))

    # -----------------------------------------------------------------
    # представление и приведение
    # -----------------------------------------------------------------
    def as_np(self) -> np.ndarray:
        """Возврат копии 3‑элементного массива float32."""
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __repr__(self) -> str:
        return f"Vec3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"
