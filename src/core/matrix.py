# core/matrix.py
import math
from typing import Iterable

import numpy as np

from core.errors import MatrixSizeError, NonInvertibleMatrixError
from core.utils import EPSILON
from core.vector import Tuple


class Matrix:
    """
    A square 2x2, 3x3 or 4x4 matrix stored row-major.

    Matrices are immutable values; every combinator returns a new Matrix.
    Transforms compose right-to-left: in ``A * B * p`` the point is
    transformed by B first.
    """
    __slots__ = ("size", "_m")

    def __init__(self, elements: Iterable[float]):
        m = np.array(list(elements), dtype=np.float64).ravel()
        size = int(round(math.sqrt(m.size)))
        if size not in (2, 3, 4) or size * size != m.size:
            raise MatrixSizeError(f"expected 4, 9 or 16 elements, got {m.size}")
        m = m.reshape(size, size)
        m.setflags(write=False)
        self.size = size
        self._m = m

    @classmethod
    def from_rows(cls, rows) -> "Matrix":
        return cls([value for row in rows for value in row])

    @classmethod
    def _wrap(cls, array: np.ndarray) -> "Matrix":
        return cls(array.ravel())

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------
    @classmethod
    def identity(cls, size: int = 4) -> "Matrix":
        return cls(np.identity(size).ravel())

    @classmethod
    def translation(cls, x: float, y: float, z: float) -> "Matrix":
        return cls([
            1, 0, 0, x,
            0, 1, 0, y,
            0, 0, 1, z,
            0, 0, 0, 1,
        ])

    @classmethod
    def scaling(cls, x: float, y: float, z: float) -> "Matrix":
        return cls([
            x, 0, 0, 0,
            0, y, 0, 0,
            0, 0, z, 0,
            0, 0, 0, 1,
        ])

    @classmethod
    def rotation_x(cls, r: float) -> "Matrix":
        c, s = math.cos(r), math.sin(r)
        return cls([
            1, 0, 0, 0,
            0, c, -s, 0,
            0, s, c, 0,
            0, 0, 0, 1,
        ])

    @classmethod
    def rotation_y(cls, r: float) -> "Matrix":
        c, s = math.cos(r), math.sin(r)
        return cls([
            c, 0, s, 0,
            0, 1, 0, 0,
            -s, 0, c, 0,
            0, 0, 0, 1,
        ])

    @classmethod
    def rotation_z(cls, r: float) -> "Matrix":
        c, s = math.cos(r), math.sin(r)
        return cls([
            c, -s, 0, 0,
            s, c, 0, 0,
            0, 0, 1, 0,
            0, 0, 0, 1,
        ])

    @classmethod
    def shearing(cls, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> "Matrix":
        return cls([
            1, xy, xz, 0,
            yx, 1, yz, 0,
            zx, zy, 1, 0,
            0, 0, 0, 1,
        ])

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------
    def at(self, row: int, col: int) -> float:
        return float(self._m[row, col])

    def __getitem__(self, index) -> float:
        row, col = index
        return self.at(row, col)

    def __reduce__(self):
        return (Matrix, (self._m.ravel().tolist(),))

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def __mul__(self, other):
        if isinstance(other, Matrix):
            if other.size != self.size:
                raise MatrixSizeError(f"cannot multiply {self.size}x{self.size} by {other.size}x{other.size}")
            return Matrix._wrap(self._m @ other._m)
        if isinstance(other, Tuple):
            if self.size != 4:
                raise MatrixSizeError("only 4x4 matrices transform tuples")
            x, y, z, w = self._m @ np.array((other.x, other.y, other.z, other.w))
            return Tuple(x, y, z, w)
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.size == other.size and bool(np.all(np.abs(self._m - other._m) < EPSILON))

    __hash__ = None

    def transpose(self) -> "Matrix":
        return Matrix._wrap(self._m.T)

    def submatrix(self, row: int, col: int) -> "Matrix":
        """
        Returns a copy of this matrix with the given row and column removed.
        """
        if self.size == 2:
            raise MatrixSizeError("a 2x2 matrix has no submatrix")
        m = np.delete(np.delete(self._m, row, axis=0), col, axis=1)
        return Matrix._wrap(m)

    def determinant(self) -> float:
        if self.size == 2:
            m = self._m
            return float(m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0])
        return sum(self.at(0, col) * self.cofactor(0, col) for col in range(self.size))

    def minor(self, row: int, col: int) -> float:
        if self.size == 2:
            return self.at(1 - row, 1 - col)
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return minor if (row + col) % 2 == 0 else -minor

    def is_invertible(self) -> bool:
        return abs(self.determinant()) >= EPSILON

    def inverse(self) -> "Matrix":
        """
        Inverts the matrix by cofactor expansion.

        Raises:
            NonInvertibleMatrixError: if the determinant is within EPSILON of zero.
        """
        det = self.determinant()
        if abs(det) < EPSILON:
            raise NonInvertibleMatrixError(det)
        n = self.size
        # Writing cofactor(row, col) into [col, row] transposes as we go.
        inv = np.empty((n, n), dtype=np.float64)
        for row in range(n):
            for col in range(n):
                inv[col, row] = self.cofactor(row, col) / det
        return Matrix._wrap(inv)

    def __repr__(self) -> str:
        rows = ", ".join("[" + ", ".join(f"{v:g}" for v in row) + "]" for row in self._m)
        return f"Matrix([{rows}])"


IDENTITY = Matrix.identity()
