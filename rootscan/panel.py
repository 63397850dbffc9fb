"""Notebook panel for the root finder.

This module builds the ipywidgets tree that drives a :class:`RootFinderSession`:
a function selector, Plot and Solve buttons, a status label and a Plotly
``FigureWidget``.

Construction has no display side effects; the panel is shown when it is the
last expression of a cell or passed to ``display``.

Examples
--------
>>> from rootscan.panel import RootFinderPanel
>>> panel = RootFinderPanel()  # doctest: +SKIP
>>> panel  # doctest: +SKIP
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import ipywidgets as widgets
import plotly.graph_objects as go
from IPython.display import display

from .function_catalog import UnknownFunction, selector_options
from .rendering import PlotlyRenderer
from .session import RootFinderSession, SolverSettings

__all__ = ["RootFinderPanel"]

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

#: Errors reported in the status label instead of escaping the click handler.
_USER_FACING_ERRORS = (UnknownFunction, ValueError, ArithmeticError)


class RootFinderPanel:
    """Interactive plot/solve panel.

    Parameters
    ----------
    settings : SolverSettings, optional
        Numeric constants forwarded to the session.
    figure : plotly FigureWidget, optional
        Figure to draw into. A new ``go.FigureWidget`` is created when omitted.
    """

    def __init__(
        self,
        settings: Optional[SolverSettings] = None,
        *,
        figure: Optional[Any] = None,
    ) -> None:
        self.figure_widget = figure if figure is not None else go.FigureWidget()
        self.session = RootFinderSession(
            PlotlyRenderer(self.figure_widget, title="Function plot"),
            settings,
        )

        options = selector_options()
        self.selector = widgets.Dropdown(
            options=options,
            value=options[0][1],
            description="f(x):",
            layout=widgets.Layout(width="280px"),
        )
        self.plot_button = widgets.Button(
            description="Plot", button_style="", layout=widgets.Layout(margin="0 0 0 8px")
        )
        self.solve_button = widgets.Button(
            description="Solve", button_style="primary", layout=widgets.Layout(margin="0 0 0 8px")
        )
        self.status_label = widgets.Label(value="")

        self.plot_button.on_click(self._on_plot_clicked)
        self.solve_button.on_click(self._on_solve_clicked)

        controls = widgets.HBox(
            [self.selector, self.plot_button, self.solve_button],
            layout=widgets.Layout(align_items="center"),
        )
        self.widget = widgets.VBox([controls, self.status_label, self.figure_widget])

    def _report_error(self, action: str, exc: Exception) -> None:
        logger.warning("%s(%r) failed: %s", action, self.selector.value, exc)
        self.status_label.value = f"Error: {exc}"

    def _on_plot_clicked(self, _button: Any = None) -> None:
        try:
            self.session.plot(self.selector.value)
        except _USER_FACING_ERRORS as exc:
            self._report_error("plot", exc)
            return
        self.status_label.value = ""

    def _on_solve_clicked(self, _button: Any = None) -> None:
        try:
            outcome = self.session.solve(self.selector.value)
        except _USER_FACING_ERRORS as exc:
            self._report_error("solve", exc)
            return
        self.status_label.value = outcome.status

    def _ipython_display_(self, **kwargs: Any) -> None:
        display(self.widget)
