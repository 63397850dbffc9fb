from __future__ import annotations

import math

import pytest

from rootscan.function_catalog import (
    CatalogFunction,
    CatalogLookup,
    UnknownFunction,
    lookup,
    resolve,
    resolve_function,
    selector_options,
    supported_functions,
)

CLOSED_FORMS = {
    "x^2 - 4": lambda x: x * x - 4,
    "x^3 - 2x - 5": lambda x: x**3 - 2 * x - 5,
    "sin(x) - 0.5": lambda x: math.sin(x) - 0.5,
    "cos(x) - x": lambda x: math.cos(x) - x,
    "e^x - 2": lambda x: math.exp(x) - 2,
}


def test_resolve_example_value() -> None:
    assert resolve("x^2 - 4")(3) == 5.0


@pytest.mark.parametrize("identifier", sorted(CLOSED_FORMS))
def test_resolve_matches_closed_form(identifier: str) -> None:
    f = resolve(identifier)
    expected = CLOSED_FORMS[identifier]

    for x in (-3.0, -0.5, 0.0, 0.7, 2.0, 4.25):
        assert f(x) == pytest.approx(expected(x), rel=1e-12, abs=1e-12)


def test_catalog_is_closed_and_ordered() -> None:
    assert [m.identifier for m in supported_functions()] == list(CLOSED_FORMS)
    assert selector_options()[0] == ("f1(x) = x^2 - 4", "x^2 - 4")
    assert len(selector_options()) == len(CatalogFunction)


@pytest.mark.parametrize(
    "alias",
    ["x^2 - 4", "x^2-4", "f1(x) = x^2 - 4", "X2_MINUS_4", "x2_minus_4", CatalogFunction.X2_MINUS_4],
)
def test_resolve_function_accepts_aliases(alias) -> None:
    assert resolve_function(alias) is CatalogFunction.X2_MINUS_4


def test_resolve_unknown_raises_without_default() -> None:
    with pytest.raises(UnknownFunction) as excinfo:
        resolve("unsupported")

    err = excinfo.value
    assert isinstance(err, LookupError)
    assert err.name == "unsupported"
    assert "x^2 - 4" in err.supported
    assert "unsupported" in str(err)


def test_resolve_rejects_non_string_names() -> None:
    with pytest.raises(UnknownFunction):
        resolve(42)  # type: ignore[arg-type]


def test_lookup_returns_explicit_result() -> None:
    hit = lookup("cos(x) - x")
    miss = lookup("tan(x)")

    assert isinstance(hit, CatalogLookup)
    assert hit.ok and hit.error is None
    assert hit.function is CatalogFunction.COS_MINUS_X
    assert hit.unwrap()(0.0) == 1.0

    assert not miss.ok
    assert miss.evaluator is None
    assert isinstance(miss.error, UnknownFunction)
    with pytest.raises(UnknownFunction):
        miss.unwrap()


def test_evaluators_are_deterministic() -> None:
    f = resolve("sin(x) - 0.5")
    assert f(1.234) == f(1.234)


def test_unwrap_without_function_or_error_raises_unknown_function() -> None:
    bare = CatalogLookup(name="tan(x)")

    assert not bare.ok
    with pytest.raises(UnknownFunction, match="tan"):
        bare.unwrap()
