#!/usr/bin/env python3
"""
Scalar helper functions.

These are small, fast functions for the mappings used throughout the app.
"""
import math


def clamp(x: float, a: float, b: float) -> float:
    """Clamp x to the inclusive range [a, b]."""
    return max(a, min(b, x))


def linear(a1: float, a2: float, b1: float, b2: float, a: float) -> float:
    """
    Map a from the range [a1, a2] onto [b1, b2] along the line through both endpoints.

    Values outside [a1, a2] are extrapolated, not clamped.
    """
    return (b2 - b1) / (a2 - a1) * (a - a1) + b1


def round_symmetric(x: float) -> float:
    """Round half away from zero, so -2.5 -> -3 and 2.5 -> 3."""
    return math.copysign(math.floor(abs(x) + 0.5), x)


def round_to_interval(x: float, interval: float) -> float:
    """Round x to the nearest multiple of interval."""
    if interval <= 0:
        return x
    return round_symmetric(x / interval) * interval
