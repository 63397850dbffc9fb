"""Uniform-grid sampling of an evaluator for curve rendering.

``generate`` walks ``x`` from ``lo`` in fixed steps by repeated addition
(``x += step``), the same accumulation the scanner uses. Because of
floating-point drift the last emitted ``x`` may fall short of ``hi`` by less
than one step; the grid is not snapped to the endpoint.
"""

from __future__ import annotations

import math
from typing import Iterable, NamedTuple, Sequence

import numpy as np

from .function_catalog import Evaluator

__all__ = ["SamplePoint", "as_arrays", "generate"]


class SamplePoint(NamedTuple):
    """One sampled ``(x, f(x))`` pair."""

    x: float
    y: float


def _check_step(step: float) -> float:
    step = float(step)
    if not math.isfinite(step) or step <= 0:
        raise ValueError(f"step must be a finite value > 0, got {step!r}")
    return step


def generate(f: Evaluator, lo: float, hi: float, step: float) -> list[SamplePoint]:
    """Sample ``f`` at ``lo, lo + step, ...`` up to the last ``x <= hi``.

    Parameters
    ----------
    f : callable
        Pure evaluator ``float -> float``.
    lo, hi : float
        Inclusive sampling bounds, ``lo <= hi``.
    step : float
        Grid spacing, ``> 0``.

    Returns
    -------
    list[SamplePoint]
        Points in strictly increasing ``x`` order; never empty.

    Raises
    ------
    ValueError
        If ``step`` is not positive, a bound is not finite, or ``lo > hi``.
    """
    step = _check_step(step)
    lo = float(lo)
    hi = float(hi)
    if not (math.isfinite(lo) and math.isfinite(hi)):
        raise ValueError(f"sampling bounds must be finite, got lo={lo!r}, hi={hi!r}")
    if lo > hi:
        raise ValueError(f"lo must be <= hi, got lo={lo!r}, hi={hi!r}")

    points: list[SamplePoint] = []
    x = lo
    while x <= hi:
        points.append(SamplePoint(x, f(x)))
        x = advance(x, step)
    return points


def advance(x: float, step: float) -> float:
    """Return ``x + step``, refusing steps lost to floating-point rounding."""
    nxt = x + step
    if nxt <= x:
        raise ValueError(f"step {step!r} is too small to advance from x={x!r}")
    return nxt


def as_arrays(points: Iterable[SamplePoint]) -> tuple[np.ndarray, np.ndarray]:
    """Split a point sequence into ``(xs, ys)`` float arrays."""
    pts: Sequence[SamplePoint] = tuple(points)
    if not pts:
        return np.empty(0, dtype=float), np.empty(0, dtype=float)
    data = np.asarray(pts, dtype=float)
    return data[:, 0].copy(), data[:, 1].copy()
