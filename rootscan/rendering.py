"""Rendering boundary for assembled plot data.

A renderer receives the complete chart on every call and replaces whatever it
showed before; there are no incremental updates.

- :class:`Renderer` is the contract (``render(series, axes, guides)``).
- :class:`PlotlyRenderer` draws onto a Plotly ``Figure`` or ``FigureWidget``.
- :class:`RecordingRenderer` only remembers the last call.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol, Sequence, runtime_checkable

import plotly.graph_objects as go

from .plot_data import AxisBounds, GuideLine, PlotSeries
from .sampling import as_arrays

__all__ = ["PlotlyRenderer", "RecordingRenderer", "Renderer"]

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


@runtime_checkable
class Renderer(Protocol):
    """Contract for rendering engines."""

    def render(
        self,
        series: Sequence[PlotSeries],
        axes: AxisBounds,
        guides: Sequence[GuideLine],
    ) -> None: ...


class PlotlyRenderer:
    """Plotly backend; each render replaces all traces and shapes.

    Parameters
    ----------
    figure : plotly.graph_objects.Figure or FigureWidget, optional
        Target figure. A new ``go.Figure`` is created when omitted.
    title : str, optional
        Chart title.
    """

    def __init__(self, figure: Optional[Any] = None, *, title: str = "Function plot") -> None:
        self.fig = figure if figure is not None else go.Figure()
        self.fig.update_layout(title=title, showlegend=True, margin=dict(l=40, r=20, t=40, b=40))
        self.fig.update_xaxes(showgrid=True)
        self.fig.update_yaxes(showgrid=True)

    @staticmethod
    def _trace_for(series: PlotSeries) -> go.Scatter:
        xs, ys = as_arrays(series.points)
        trace = go.Scatter(x=xs, y=ys, mode=series.mode, name=series.name, meta={"role": series.role.value})
        if series.color is not None:
            trace.line.color = series.color
            trace.marker.color = series.color
        return trace

    @staticmethod
    def _shape_for(guide: GuideLine, axes: AxisBounds) -> dict[str, Any]:
        line = dict(color=guide.color, dash=guide.dash, width=1)
        if guide.orientation == "horizontal":
            x0, x1 = axes.x_range
            return dict(type="line", x0=x0, x1=x1, y0=guide.position, y1=guide.position, line=line, layer="below")
        y0, y1 = axes.y_range
        return dict(type="line", x0=guide.position, x1=guide.position, y0=y0, y1=y1, line=line, layer="below")

    def render(
        self,
        series: Sequence[PlotSeries],
        axes: AxisBounds,
        guides: Sequence[GuideLine],
    ) -> None:
        traces = [self._trace_for(s) for s in series]
        shapes = [self._shape_for(g, axes) for g in guides]
        with self.fig.batch_update():
            self.fig.data = ()
            for trace in traces:
                self.fig.add_trace(trace)
            self.fig.layout.shapes = shapes
            self.fig.layout.xaxis.range = list(axes.x_range)
            self.fig.layout.yaxis.range = list(axes.y_range)
            self.fig.layout.xaxis.title.text = axes.x_title
            self.fig.layout.yaxis.title.text = axes.y_title
        logger.debug("PlotlyRenderer: rendered %d series, %d guides", len(traces), len(shapes))


class RecordingRenderer:
    """Renderer that stores the last ``render`` call; useful headless and in tests."""

    def __init__(self) -> None:
        self.calls = 0
        self.series: tuple[PlotSeries, ...] = ()
        self.axes: Optional[AxisBounds] = None
        self.guides: tuple[GuideLine, ...] = ()

    def render(
        self,
        series: Sequence[PlotSeries],
        axes: AxisBounds,
        guides: Sequence[GuideLine],
    ) -> None:
        self.calls += 1
        self.series = tuple(series)
        self.axes = axes
        self.guides = tuple(guides)
