from __future__ import annotations

import logging
import sys
import warnings
from unittest.mock import patch

import ipywidgets as widgets

from rootscan.panel import RootFinderPanel
from rootscan.session import SolverSettings


def test_panel_construction_is_display_side_effect_free() -> None:
    module = sys.modules[RootFinderPanel.__module__]
    with patch.object(module, "display") as mocked_display:
        panel = RootFinderPanel()

    mocked_display.assert_not_called()
    assert isinstance(panel.widget, widgets.VBox)
    assert panel.selector.value == "x^2 - 4"
    assert panel.status_label.value == ""


def test_ipython_display_shows_root_widget() -> None:
    panel = RootFinderPanel()
    module = sys.modules[RootFinderPanel.__module__]

    with patch.object(module, "display") as mocked_display:
        panel._ipython_display_()

    mocked_display.assert_called_once_with(panel.widget)


def test_solve_click_updates_status_and_figure() -> None:
    panel = RootFinderPanel()
    panel.selector.value = "e^x - 2"

    panel.solve_button.click()

    assert panel.status_label.value.startswith("Solution: 0.69")
    assert [trace.name for trace in panel.figure_widget.data] == ["f5(x) = e^x - 2", "Steps", "Solution"]


def test_plot_click_draws_curve_and_clears_status() -> None:
    panel = RootFinderPanel()
    panel.status_label.value = "stale"

    panel.plot_button.click()

    assert panel.status_label.value == ""
    assert len(panel.figure_widget.data) == 1


def test_solve_click_without_root_shows_message() -> None:
    panel = RootFinderPanel(SolverSettings(scan_range=1))

    panel._on_solve_clicked()

    assert panel.status_label.value == "No solution found"


def test_unknown_selection_is_reported_in_status(caplog) -> None:
    panel = RootFinderPanel()
    panel.selector.options = [("tan", "tan(x)")]
    panel.selector.value = "tan(x)"

    with caplog.at_level(logging.WARNING, logger="rootscan.panel"):
        panel._on_solve_clicked()

    assert panel.status_label.value.startswith("Error: Unknown function 'tan(x)'")
    assert "solve('tan(x)') failed" in caplog.text


def test_panel_layouts_use_only_known_traits() -> None:
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        panel = RootFinderPanel()

    assert not [w for w in caught if "unrecognized arguments" in str(w.message)]

    controls = panel.widget.children[0]
    assert "gap" not in controls.layout.keys
    assert panel.plot_button.layout.margin == "0 0 0 8px"
    assert panel.solve_button.layout.margin == "0 0 0 8px"
