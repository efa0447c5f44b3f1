# core/transformations.py
from core.matrix import Matrix
from core.vector import Tuple


def view_transform(from_point: Tuple, to: Tuple, up: Tuple) -> Matrix:
    """
    Builds the world-to-camera matrix for an eye at ``from_point`` looking
    at ``to`` with ``up`` roughly pointing upwards.
    """
    forward = (to - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix([
        left.x, left.y, left.z, 0,
        true_up.x, true_up.y, true_up.z, 0,
        -forward.x, -forward.y, -forward.z, 0,
        0, 0, 0, 1,
    ])
    return orientation * Matrix.translation(-from_point.x, -from_point.y, -from_point.z)


def chain(*transforms: Matrix) -> Matrix:
    """
    Composes transforms in the order they are applied, so
    ``chain(rotate, scale, translate)`` equals ``translate * scale * rotate``.
    """
    result = Matrix.identity()
    for transform in transforms:
        result = transform * result
    return result
