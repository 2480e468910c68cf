"""Pure math utilities - no external dependencies."""

from __future__ import annotations


def ease_in_out_cubic(t: float) -> float:
    """Cubic ease-in-out: acceleration until halfway, then deceleration."""
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    if t < 0.5:
        return 4.0 * t * t * t
    else:
        p = 2.0 * t - 2.0
        return 1.0 + 0.5 * p * p * p


def split_by_weights(total: float, weights: tuple) -> list:
    """Split a length proportionally to weights, like a weighted row/column."""
    s = sum(weights)
    if s <= 0:
        return [0.0 for _ in weights]
    return [total * w / s for w in weights]
