from __future__ import annotations

import dataclasses

import pytest

from rootscan.plot_data import (
    NO_SOLUTION_TEXT,
    AxisBounds,
    GuideLine,
    PlotAssembly,
    SeriesRole,
    assemble,
    default_guides,
    plot_only,
    status_text,
)
from rootscan.sampling import SamplePoint, generate
from rootscan.scanner import scan


def test_assemble_with_root_has_three_series(square_minus_four) -> None:
    f = square_minus_four
    curve = generate(f, -10, 10, 0.1)
    result = scan(f, 0, 0.1, 10)

    assembly = assemble(curve, result.trail, result.root, f, curve_name="f(x) = x^2 - 4")

    assert [s.role for s in assembly.series] == [SeriesRole.CURVE, SeriesRole.TRAIL, SeriesRole.SOLUTION]
    curve_series, trail_series, solution_series = assembly.series
    assert curve_series.name == "f(x) = x^2 - 4"
    assert curve_series.points == tuple(curve)
    assert trail_series.points == result.trail
    assert trail_series.color == "yellow"
    assert solution_series.points == (SamplePoint(result.root, f(result.root)),)
    assert solution_series.color == "red"
    assert assembly.status == f"Solution: {result.root!r}"


def test_assemble_without_root_omits_solution(square_minus_four) -> None:
    f = square_minus_four
    result = scan(f, 0, 0.1, 1)

    assembly = assemble(generate(f, -1, 1, 0.5), result.trail, result.root, f)

    assert assembly.by_role(SeriesRole.SOLUTION) is None
    assert assembly.by_role(SeriesRole.TRAIL) is not None
    assert assembly.status == NO_SOLUTION_TEXT


def test_assemble_with_empty_trail_keeps_curve_only() -> None:
    f = lambda x: x  # noqa: E731
    assembly = assemble([SamplePoint(0.0, 0.0)], [], None, f)

    assert [s.role for s in assembly.series] == [SeriesRole.CURVE]


def test_assemble_reevaluates_trail_points_with_f() -> None:
    trail = [SamplePoint(1.0, 999.0)]

    assembly = assemble([], trail, None, lambda x: 2 * x)

    assert assembly.by_role(SeriesRole.TRAIL).points == (SamplePoint(1.0, 2.0),)


def test_assemble_does_not_mutate_inputs(square_minus_four) -> None:
    curve = generate(square_minus_four, 0, 1, 0.5)
    trail = list(curve)
    before = (list(curve), list(trail))

    assemble(curve, trail, 0.5, square_minus_four)

    assert (curve, trail) == before


def test_assemble_is_deterministic(square_minus_four) -> None:
    f = square_minus_four
    args = (generate(f, -2, 2, 0.5), scan(f, 0, 0.1, 10).trail, 2.0, f)

    assert assemble(*args) == assemble(*args)


def test_default_axes_and_guides() -> None:
    assembly = plot_only([SamplePoint(0.0, 1.0)])

    assert assembly.axes == AxisBounds(x_range=(-10.0, 10.0), y_range=(-10.0, 10.0))
    assert assembly.guides == default_guides()
    assert {(g.orientation, g.position) for g in assembly.guides} == {("horizontal", 0.0), ("vertical", 0.0)}
    assert assembly.status == ""


def test_guide_line_rejects_unknown_orientation() -> None:
    with pytest.raises(ValueError, match="orientation"):
        GuideLine("diagonal")


def test_status_text() -> None:
    assert status_text(None) == "No solution found"
    assert status_text(1.5) == "Solution: 1.5"
    assert status_text(float("nan")) == "Solution: nan"


def test_assembly_is_immutable() -> None:
    assembly = PlotAssembly(series=())
    with pytest.raises(dataclasses.FrozenInstanceError):
        assembly.status = "changed"  # type: ignore[misc]
