"""Named point series handed to the rendering boundary.

Purpose
-------
Compose the curve samples, the scan trail and the solution point into
immutable :class:`PlotSeries` records, together with the axis bounds, the two
reference guide lines and the status text. Every plot/solve action builds a
fresh :class:`PlotAssembly`; nothing here is retained between actions.

Series roles
------------
- ``curve``: background samples of ``f`` over the display domain.
- ``trail``: every point visited by the scanner, in visit order.
- ``solution``: a single ``(root, f(root))`` point, present only when a root
  was found.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Sequence

from .function_catalog import Evaluator
from .sampling import SamplePoint

__all__ = [
    "AxisBounds",
    "GuideLine",
    "NO_SOLUTION_TEXT",
    "PlotAssembly",
    "PlotSeries",
    "SERIES_STYLES",
    "SeriesRole",
    "assemble",
    "default_guides",
    "plot_only",
    "status_text",
]

NO_SOLUTION_TEXT = "No solution found"


class SeriesRole(str, enum.Enum):
    CURVE = "curve"
    TRAIL = "trail"
    SOLUTION = "solution"


#: Default display style per role: (name, color, mode).
SERIES_STYLES: dict[SeriesRole, dict[str, Optional[str]]] = {
    SeriesRole.CURVE: {"name": "f(x)", "color": None, "mode": "lines"},
    SeriesRole.TRAIL: {"name": "Steps", "color": "yellow", "mode": "lines+markers"},
    SeriesRole.SOLUTION: {"name": "Solution", "color": "red", "mode": "markers"},
}


@dataclass(frozen=True)
class PlotSeries:
    """Immutable record of one named point series.

    Parameters
    ----------
    name : str
        Legend label.
    role : SeriesRole
        Which part of the chart this series is.
    points : tuple[SamplePoint, ...]
        Ordered points.
    color : str or None
        Display color hint, ``None`` for the renderer default.
    mode : str
        Plotly-style drawing mode (``"lines"``, ``"markers"``, ``"lines+markers"``).
    """

    name: str
    role: SeriesRole
    points: tuple[SamplePoint, ...]
    color: Optional[str] = None
    mode: str = "lines"

    @property
    def xs(self) -> tuple[float, ...]:
        return tuple(p.x for p in self.points)

    @property
    def ys(self) -> tuple[float, ...]:
        return tuple(p.y for p in self.points)

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class AxisBounds:
    """Fixed axis ranges and titles for one chart."""

    x_range: tuple[float, float] = (-10.0, 10.0)
    y_range: tuple[float, float] = (-10.0, 10.0)
    x_title: str = "x"
    y_title: str = "f(x)"


@dataclass(frozen=True)
class GuideLine:
    """Reference line drawn across the whole chart.

    ``orientation`` is ``"horizontal"`` (``y = position``) or ``"vertical"``
    (``x = position``).
    """

    orientation: str
    position: float = 0.0
    color: str = "gray"
    dash: str = "dash"

    def __post_init__(self) -> None:
        if self.orientation not in ("horizontal", "vertical"):
            raise ValueError(
                f"orientation must be 'horizontal' or 'vertical', got {self.orientation!r}"
            )


def default_guides() -> tuple[GuideLine, ...]:
    """The ``y = 0`` and ``x = 0`` guide lines."""
    return (GuideLine("horizontal", 0.0), GuideLine("vertical", 0.0))


@dataclass(frozen=True)
class PlotAssembly:
    """Everything one ``render(series, axes, guides)`` call needs, plus status."""

    series: tuple[PlotSeries, ...]
    axes: AxisBounds = field(default_factory=AxisBounds)
    guides: tuple[GuideLine, ...] = field(default_factory=default_guides)
    status: str = ""

    def by_role(self, role: SeriesRole) -> Optional[PlotSeries]:
        for series in self.series:
            if series.role is role:
                return series
        return None


def status_text(root: Optional[float]) -> str:
    """One-line status: the literal root value, or the no-solution message."""
    if root is None:
        return NO_SOLUTION_TEXT
    return f"Solution: {root!r}"


def _series(role: SeriesRole, points: Sequence[SamplePoint], name: Optional[str] = None) -> PlotSeries:
    style = SERIES_STYLES[role]
    return PlotSeries(
        name=name if name is not None else str(style["name"]),
        role=role,
        points=tuple(points),
        color=style["color"],
        mode=str(style["mode"]),
    )


def plot_only(
    curve: Sequence[SamplePoint],
    *,
    curve_name: str = "f(x)",
    axes: Optional[AxisBounds] = None,
) -> PlotAssembly:
    """Assembly for a plain plot action: the curve, axes and guides."""
    return PlotAssembly(
        series=(_series(SeriesRole.CURVE, curve, curve_name),),
        axes=axes if axes is not None else AxisBounds(),
    )


def assemble(
    curve: Sequence[SamplePoint],
    trail: Sequence[SamplePoint],
    root: Optional[float],
    f: Evaluator,
    *,
    curve_name: str = "f(x)",
    axes: Optional[AxisBounds] = None,
) -> PlotAssembly:
    """Compose curve, scan trail and solution point into a :class:`PlotAssembly`.

    The curve series is always present. The trail series is added when
    ``trail`` is non-empty; its points are re-evaluated through ``f``. The
    solution series holds exactly ``(root, f(root))`` and is added only when
    ``root`` is not ``None``.
    """
    series = [_series(SeriesRole.CURVE, curve, curve_name)]
    if trail:
        series.append(_series(SeriesRole.TRAIL, [SamplePoint(p.x, f(p.x)) for p in trail]))
    if root is not None:
        series.append(_series(SeriesRole.SOLUTION, [SamplePoint(root, f(root))]))
    return PlotAssembly(
        series=tuple(series),
        axes=axes if axes is not None else AxisBounds(),
        status=status_text(root),
    )
