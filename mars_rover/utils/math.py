"""Integer helpers used by the movement code.

Python's ``%`` already yields a non-negative remainder for a positive divisor;
these wrappers add the operand checks so a float or bool coordinate fails
loudly instead of silently drifting off the integer grid.
"""

from numbers import Integral


def check_int(value: int, name: str) -> int:
    """Return ``value`` as a plain ``int``.

    Any integral type is accepted (e.g. ``numpy.int64`` read back from an
    observation); bools are rejected.

    Raises:
        TypeError: If ``value`` is not integral.
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return int(value)


def add(a: int, b: int) -> int:
    """Return ``a + b`` for two integers."""
    return check_int(a, "a") + check_int(b, "b")


def sub(minuend: int, subtrahend: int) -> int:
    """Return ``minuend - subtrahend`` for two integers."""
    return check_int(minuend, "minuend") - check_int(subtrahend, "subtrahend")


def modulus(dividend: int, divisor: int) -> int:
    """Mathematical modulo: result always lies in ``[0, divisor)``.

    ``modulus(7, 5) == 2`` and ``modulus(-1, 5) == 4``.

    Raises:
        TypeError: If an operand is not an int.
        ValueError: If ``divisor`` is not strictly positive.
    """
    dividend = check_int(dividend, "dividend")
    divisor = check_int(divisor, "divisor")
    if divisor <= 0:
        raise ValueError(f"divisor must be positive, got {divisor}")
    return ((dividend % divisor) + divisor) % divisor


def wrap_grid_position(value: int, bound: int) -> int:
    """Wrap a single coordinate onto ``[0, bound)`` (toroidal edges).

    Used for both axes; the caller passes the width for ``x`` and the height
    for ``y``. ``wrap_grid_position(5, 5) == 0`` and
    ``wrap_grid_position(-1, 4) == 3``.
    """
    return modulus(value, bound)
