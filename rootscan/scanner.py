"""Fixed-step sign-change scanner.

Purpose
-------
Locate the first sign change of ``f`` to the right of a start point and
estimate the root inside that bracket by a single linear interpolation.

Algorithm
---------
1. Sample ``f(start)``; it opens the trail.
2. Advance ``x`` by ``step`` (repeated addition) while ``x <= start + range``,
   appending every sample to the trail.
3. When ``f(x_prev) * f(x) < 0`` return
   ``x - step + step * (0 - f(x_prev)) / (f(x) - f(x_prev))``.
4. If the range is exhausted, return no root.

Important gotchas
-----------------
- The sign test is strict. A sample that evaluates to exactly ``0.0`` never
  opens a bracket with its neighbours; such a root is reported only if a later
  pair of samples crosses zero.
- Only the first bracket is reported even when more roots lie in range.
- The interpolation is evaluated in NumPy float64 arithmetic with division
  and overflow warnings silenced, so a degenerate denominator yields
  ``inf``/``nan`` rather than raising. Such roots are logged at WARNING and
  returned as-is (see :attr:`ScanResult.numeric_anomaly`).
- Evaluator exceptions (e.g. domain errors) propagate to the caller.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .function_catalog import Evaluator
from .sampling import SamplePoint, _check_step, advance

__all__ = ["ScanResult", "interpolate_root", "scan"]

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class ScanResult:
    """Outcome of one :func:`scan` pass.

    Parameters
    ----------
    root : float or None
        Interpolated root of the first sign change, or ``None`` when no sign
        change was found in range.
    trail : tuple[SamplePoint, ...]
        Every sample taken, in increasing ``x`` order. Never empty.
    """

    root: Optional[float]
    trail: tuple[SamplePoint, ...]

    @property
    def found(self) -> bool:
        return self.root is not None

    @property
    def bracket(self) -> Optional[tuple[SamplePoint, SamplePoint]]:
        """The two samples straddling the root, when one was found."""
        if self.root is None or len(self.trail) < 2:
            return None
        return self.trail[-2], self.trail[-1]

    @property
    def numeric_anomaly(self) -> bool:
        """True when a bracket was found but the interpolation is not finite."""
        return self.root is not None and not math.isfinite(self.root)


def interpolate_root(x: float, step: float, last_value: float, value: float) -> float:
    """Linear zero-crossing estimate between ``(x - step, last_value)`` and ``(x, value)``."""
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        x64 = np.float64(x)
        step64 = np.float64(step)
        last64 = np.float64(last_value)
        root = x64 - step64 + step64 * (np.float64(0.0) - last64) / (np.float64(value) - last64)
    return float(root)


def scan(
    f: Evaluator,
    start: float = 0.0,
    step: float = 0.1,
    scan_range: float = 10.0,
) -> ScanResult:
    """Walk ``[start, start + scan_range]`` in fixed steps and return the first root.

    Parameters
    ----------
    f : callable
        Pure evaluator ``float -> float``.
    start : float, default=0.0
        First sample position.
    step : float, default=0.1
        Distance between samples, ``> 0``.
    scan_range : float, default=10.0
        Width of the scanned interval, ``>= 0``.

    Returns
    -------
    ScanResult

    Raises
    ------
    ValueError
        If ``step <= 0`` or ``scan_range < 0``.
    """
    step = _check_step(step)
    start = float(start)
    scan_range = float(scan_range)
    if not math.isfinite(start):
        raise ValueError(f"start must be finite, got {start!r}")
    if not math.isfinite(scan_range) or scan_range < 0:
        raise ValueError(f"scan_range must be a finite value >= 0, got {scan_range!r}")

    x = start
    last_value = f(x)
    trail = [SamplePoint(x, last_value)]
    stop = start + scan_range

    x = advance(x, step)
    while x <= stop:
        value = f(x)
        trail.append(SamplePoint(x, value))

        if last_value * value < 0:
            root = interpolate_root(x, step, last_value, value)
            if not math.isfinite(root):
                logger.warning(
                    "scan: degenerate interpolation between x=%r and x=%r gave root=%r",
                    x - step, x, root,
                )
            else:
                logger.debug("scan: root=%r after %d samples", root, len(trail))
            return ScanResult(root=root, trail=tuple(trail))

        last_value = value
        x = advance(x, step)

    logger.debug("scan: no sign change in [%r, %r] (%d samples)", start, stop, len(trail))
    return ScanResult(root=None, trail=tuple(trail))
