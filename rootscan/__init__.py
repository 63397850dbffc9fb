"""Top-level public API for the ``rootscan`` package.

``rootscan`` finds the first sign change of a one-variable function by fixed-step
scanning, estimates the root by linear interpolation, and prepares the curve,
scan trail and solution point for plotting:

>>> from rootscan import resolve, scan
>>> result = scan(resolve("x^2 - 4"), start=0.0, step=0.1, scan_range=10.0)
>>> result.found
True

For notebook use, :class:`RootFinderPanel` (in :mod:`rootscan.panel`) wraps the
same pipeline in a small widget; it is imported lazily so the numeric core does
not require ipywidgets.
"""

from .function_catalog import (
    CatalogFunction,
    CatalogLookup,
    Evaluator,
    UnknownFunction,
    lookup,
    resolve,
    resolve_function,
    selector_options,
    supported_functions,
)
from .input_convert import to_float
from .numpify import CompiledFunction, numpify, numpify_cached
from .plot_data import (
    AxisBounds,
    GuideLine,
    PlotAssembly,
    PlotSeries,
    SeriesRole,
    assemble,
    plot_only,
    status_text,
)
from .rendering import PlotlyRenderer, RecordingRenderer, Renderer
from .sampling import SamplePoint, as_arrays, generate
from .scanner import ScanResult, scan
from .session import RootFinderSession, SolveOutcome, SolverSettings


def __getattr__(name: str):
    if name == "RootFinderPanel":
        from .panel import RootFinderPanel

        return RootFinderPanel
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
