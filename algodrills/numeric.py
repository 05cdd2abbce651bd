"""Linear interpolation and a fixed-step descent to a local minimum."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

DX = 0.00003


def lerp(a: Any, b: Any, t: float) -> Any:
    """Blend ``a`` and ``b``: ``t`` of 0 gives ``a`` and 1 gives ``b``."""
    return a * (1 - t) + b * t


@dataclass(frozen=True)
class Interpolator:
    """Interpolates between two values with a configurable blending function."""

    blend: Callable[[Any, Any, float], Any] = lerp

    def value(self, a: Any, b: Any, t: float) -> Any:
        """Return the blend of ``a`` and ``b`` at ``t``."""
        return self.blend(a, b, t)


def derivative(f: Callable[[float], float], x: float) -> float:
    """Estimate the slope of ``f`` at ``x`` with a forward difference."""
    return (f(x + DX) - f(x)) / DX


def gradient_descent(f: Callable[[float], float], start: float, step: float) -> float:
    """Walk downhill from ``start`` in fixed steps until the direction reverses.

    The position after the first reversing step is returned. The walk does
    not end on a function that keeps falling in one direction.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    x = start
    previous = 0
    while True:
        direction = 1 if derivative(f, x) > 0 else -1
        x -= direction * step
        if previous * direction < 0:
            return x
        previous = direction