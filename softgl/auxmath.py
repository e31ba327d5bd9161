"""Numeric helpers: tolerant comparisons, binary GCD, range mapping and lerp."""

from __future__ import annotations

import math
import sys

K_E = math.e
K_LOG2E = 1.44269504088896340736
K_LOG10E = 0.434294481903251827651
K_LN2 = 0.693147180559945309417
K_LN10 = 2.30258509299404568402
K_PI = math.pi
K_PI_2 = math.pi / 2
K_PI_4 = math.pi / 4
K_2_PI = 2 * math.pi
K_SQRT2 = math.sqrt(2.0)
K_SQRT2_2 = 0.707106781186547524401

K_EPS = 1e-15
K_FEPS = 1e-6
K_FLOAT_EPS = 2.0**-23
K_DBL_EPS = sys.float_info.epsilon


def is_zero(value: float, eps: float = K_EPS) -> bool:
    """Return True when ``value`` lies within ``eps`` of zero."""
    return abs(value) <= eps


def abs_equal(a: float, b: float, eps: float = K_EPS) -> bool:
    """Compare two values with an absolute tolerance."""
    return abs(a - b) <= eps


def rel_equal(a: float, b: float, precision: float = K_DBL_EPS) -> bool:
    """Compare two values with a tolerance relative to the larger magnitude."""
    return abs(a - b) <= precision * max(abs(a), abs(b))


def less_than(a: float, b: float, eps: float = K_DBL_EPS) -> bool:
    """True when ``a`` is smaller than ``b`` by more than ``eps``."""
    return a < b - eps


def greater_than(a: float, b: float, eps: float = K_DBL_EPS) -> bool:
    """True when ``a`` is larger than ``b`` by more than ``eps``."""
    return a > b + eps


def less_than_equal(a: float, b: float, eps: float = K_DBL_EPS) -> bool:
    """True unless ``a`` is clearly greater than ``b``."""
    return not greater_than(a, b, eps)


def greater_than_equal(a: float, b: float, eps: float = K_DBL_EPS) -> bool:
    """True unless ``a`` is clearly less than ``b``."""
    return not less_than(a, b, eps)


def _trailing_zeros(n: int) -> int:
    return (n & -n).bit_length() - 1


def binary_gcd(a: int, b: int) -> int:
    """Greatest common divisor of ``|a|`` and ``|b|`` by the binary algorithm."""
    a, b = abs(a), abs(b)
    if b == 0:
        return a
    if a == 0:
        return b

    a_zeros = _trailing_zeros(a)
    b_zeros = _trailing_zeros(b)
    a >>= a_zeros
    b >>= b_zeros
    shift = min(a_zeros, b_zeros)

    while a != b:
        if a > b:
            a -= b
            a >>= _trailing_zeros(a)
        else:
            b -= a
            b >>= _trailing_zeros(b)
    return a << shift


def round_away_from_zero(x: float, epsilon: float) -> int:
    """Round away from zero, treating values within ``epsilon`` of an integer as that integer."""
    if abs(x) < epsilon:
        return 0
    if x > 0:
        return math.ceil(x - epsilon)
    return math.floor(x + epsilon)


def mapped_value(val: float, omin: float, omax: float, nmin: float, nmax: float) -> float:
    """Map ``val`` from the range ``[omin, omax]`` onto ``[nmin, nmax]``."""
    dist1 = float(omax - omin)
    dist2 = nmax - nmin
    dist_val = val - omin
    return (dist_val * dist2) / dist1 + nmin


def to_percent(val: float, omin: float, omax: float) -> float:
    """Express ``val`` as a percentage of the range ``[omin, omax]``."""
    return mapped_value(val, omin, omax, 0, 100)


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation, exact at ``t == 1`` and monotonic in ``t``."""
    if (a <= 0 and b >= 0) or (a >= 0 and b <= 0):
        return t * b + (1 - t) * a
    if t == 1:
        return b
    x = a + t * (b - a)
    if (t > 1) == (b > a):
        return max(b, x)
    return min(b, x)