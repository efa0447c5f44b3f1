# core/errors.py


class RayTracerError(Exception):
    """Base class for all errors raised by the ray tracer."""


class MatrixSizeError(RayTracerError, ValueError):
    """A matrix was built from a number of elements that is not 4, 9 or 16."""


class NonInvertibleMatrixError(RayTracerError, ValueError):
    """The determinant of a matrix is too close to zero to invert it."""

    def __init__(self, determinant: float):
        super().__init__(f"matrix is not invertible (determinant={determinant!r})")
        self.determinant = determinant


class ZeroLengthVectorError(RayTracerError, ZeroDivisionError):
    """A tuple with zero magnitude cannot be normalized."""


class SceneFrozenError(RayTracerError, RuntimeError):
    """A scene member was mutated after the scene was frozen for rendering."""
