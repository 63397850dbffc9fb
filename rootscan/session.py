"""Plot and solve actions.

Purpose
-------
``RootFinderSession`` wires the catalog, the sampler, the scanner and the plot
data assembler into the two user-facing actions of the root finder:

- ``plot(name)``: draw the selected function over the display domain.
- ``solve(name)``: draw the function, scan for its first root and draw the
  scan trail and solution point.

Each action builds its data from scratch and hands it to the renderer in a
single ``render`` call. The session keeps only its settings and renderer.

Examples
--------
>>> from rootscan.rendering import RecordingRenderer
>>> session = RootFinderSession(RecordingRenderer())
>>> session.solve("x^2 - 4").assembly.status  # doctest: +SKIP
'Solution: 2.0...'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from .function_catalog import CatalogFunction, resolve_function
from .input_convert import to_float
from .plot_data import AxisBounds, PlotAssembly, assemble, plot_only
from .rendering import PlotlyRenderer, Renderer
from .sampling import SamplePoint, generate
from .scanner import ScanResult, scan

__all__ = ["RootFinderSession", "SolveOutcome", "SolverSettings"]

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


def _float_pair(value: Any, name: str) -> tuple[float, float]:
    try:
        lo, hi = value
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a (min, max) pair, got {value!r}") from exc
    lo_f, hi_f = to_float(lo), to_float(hi)
    if lo_f >= hi_f:
        raise ValueError(f"{name} must satisfy min < max, got {value!r}")
    return lo_f, hi_f


@dataclass(frozen=True)
class SolverSettings:
    """Numeric constants for one session.

    Parameters
    ----------
    start : float, default=0.0
        First scanned position.
    step : float, default=0.1
        Scan step.
    scan_range : float, default=10.0
        Width of the scanned interval.
    display_domain : tuple[float, float], default=(-10, 10)
        Curve sampling domain, also used as the x-axis range.
    display_step : float, default=0.1
        Curve sampling step.
    y_range : tuple[float, float], default=(-10, 10)
        y-axis range.

    Values may be given as numbers or numeric/SymPy strings (``"pi/4"``).
    """

    start: float = 0.0
    step: float = 0.1
    scan_range: float = 10.0
    display_domain: tuple[float, float] = (-10.0, 10.0)
    display_step: float = 0.1
    y_range: tuple[float, float] = (-10.0, 10.0)

    def __post_init__(self) -> None:
        start = to_float(self.start)
        step = to_float(self.step)
        scan_range = to_float(self.scan_range)
        display_step = to_float(self.display_step)
        if step <= 0:
            raise ValueError(f"step must be > 0, got {self.step!r}")
        if display_step <= 0:
            raise ValueError(f"display_step must be > 0, got {self.display_step!r}")
        if scan_range < 0:
            raise ValueError(f"scan_range must be >= 0, got {self.scan_range!r}")
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "step", step)
        object.__setattr__(self, "scan_range", scan_range)
        object.__setattr__(self, "display_step", display_step)
        object.__setattr__(self, "display_domain", _float_pair(self.display_domain, "display_domain"))
        object.__setattr__(self, "y_range", _float_pair(self.y_range, "y_range"))

    @property
    def axes(self) -> AxisBounds:
        return AxisBounds(x_range=self.display_domain, y_range=self.y_range)


@dataclass(frozen=True)
class SolveOutcome:
    """Result of one solve action."""

    function: CatalogFunction
    scan: ScanResult
    assembly: PlotAssembly

    @property
    def root(self) -> Optional[float]:
        return self.scan.root

    @property
    def status(self) -> str:
        return self.assembly.status


class RootFinderSession:
    """Runs plot/solve actions against one renderer.

    Parameters
    ----------
    renderer : Renderer, optional
        Rendering boundary; defaults to a new :class:`PlotlyRenderer`.
    settings : SolverSettings, optional
        Numeric constants; defaults reproduce ``start=0, step=0.1, range=10``
        over a ``[-10, 10]`` display.
    """

    def __init__(
        self,
        renderer: Optional[Renderer] = None,
        settings: Optional[SolverSettings] = None,
    ) -> None:
        self.renderer: Renderer = renderer if renderer is not None else PlotlyRenderer()
        self.settings = settings if settings is not None else SolverSettings()

    def _curve(self, function: CatalogFunction) -> list[SamplePoint]:
        lo, hi = self.settings.display_domain
        return generate(function.evaluator, lo, hi, self.settings.display_step)

    def _render(self, assembly: PlotAssembly) -> None:
        self.renderer.render(assembly.series, assembly.axes, assembly.guides)

    def plot(self, name: Union[str, CatalogFunction]) -> PlotAssembly:
        """Draw the selected function over the display domain.

        Raises
        ------
        UnknownFunction
            If ``name`` is not in the catalog. Nothing is rendered.
        """
        function = resolve_function(name)
        assembly = plot_only(
            self._curve(function),
            curve_name=function.label,
            axes=self.settings.axes,
        )
        self._render(assembly)
        logger.info("plot(%s): %d curve points", function.identifier, len(assembly.series[0]))
        return assembly

    def solve(self, name: Union[str, CatalogFunction] = CatalogFunction.X2_MINUS_4) -> SolveOutcome:
        """Scan the selected function for its first root and draw the result.

        Raises
        ------
        UnknownFunction
            If ``name`` is not in the catalog. Nothing is rendered.
        """
        function = resolve_function(name)
        f = function.evaluator
        settings = self.settings
        curve = self._curve(function)
        result = scan(f, settings.start, settings.step, settings.scan_range)
        assembly = assemble(
            curve,
            result.trail,
            result.root,
            f,
            curve_name=function.label,
            axes=settings.axes,
        )
        self._render(assembly)
        logger.info(
            "solve(%s): root=%r trail=%d", function.identifier, result.root, len(result.trail)
        )
        return SolveOutcome(function=function, scan=result, assembly=assembly)
