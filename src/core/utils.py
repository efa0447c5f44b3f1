# core/utils.py
EPSILON = 0.00001


def equal(a: float, b: float) -> bool:
    """
    Approximate float comparison shared by tuples, colors and matrices.
    """
    return abs(a - b) < EPSILON


def reflect(v, n):
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)
