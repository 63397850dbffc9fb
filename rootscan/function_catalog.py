"""Closed catalog of scannable functions.

Purpose
-------
Map a symbolic function identifier (``"x^2 - 4"``, ``"e^x - 2"``, ...) to a pure
numeric evaluator ``f: R -> R``. The set of supported functions is a fixed
:class:`enum.Enum`; there is no fallback entry, so an identifier outside the
enum can only surface as :class:`UnknownFunction`.

Each entry stores its SymPy expression and compiles it on first use through
:func:`rootscan.numpify.numpify_cached`.

Two lookup styles are provided:

- :func:`resolve` raises :class:`UnknownFunction` for unmatched names.
- :func:`lookup` returns a :class:`CatalogLookup` record that carries either the
  evaluator or the error, for callers that prefer to branch on a value.

Examples
--------
>>> resolve("x^2 - 4")(3)
5.0
>>> lookup("tan(x)").ok
False
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Optional, Union

import sympy as sp

from .numpify import numpify_cached

__all__ = [
    "CatalogFunction",
    "CatalogLookup",
    "Evaluator",
    "UnknownFunction",
    "X",
    "lookup",
    "resolve",
    "resolve_function",
    "selector_options",
    "supported_functions",
]

Evaluator = Callable[[float], float]

#: Independent variable shared by all catalog expressions.
X = sp.Symbol("x", real=True)


class UnknownFunction(LookupError):
    """Raised when a function identifier is not part of the catalog."""

    def __init__(self, name: object, supported: tuple[str, ...]) -> None:
        self.name = name
        self.supported = supported
        super().__init__(
            f"Unknown function {name!r}. Supported: {', '.join(supported)}"
        )


class CatalogFunction(enum.Enum):
    """Supported functions, keyed by their identifier."""

    X2_MINUS_4 = "x^2 - 4"
    X3_MINUS_2X_MINUS_5 = "x^3 - 2x - 5"
    SIN_MINUS_HALF = "sin(x) - 0.5"
    COS_MINUS_X = "cos(x) - x"
    EXP_MINUS_2 = "e^x - 2"

    @property
    def identifier(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Selector text, e.g. ``"f1(x) = x^2 - 4"``."""
        return _LABELS[self]

    @property
    def expression(self) -> sp.Expr:
        return _EXPRESSIONS[self]

    @property
    def evaluator(self) -> Evaluator:
        return numpify_cached(self.expression, var=X)


_EXPRESSIONS: dict[CatalogFunction, sp.Expr] = {
    CatalogFunction.X2_MINUS_4: X**2 - 4,
    CatalogFunction.X3_MINUS_2X_MINUS_5: X**3 - 2 * X - 5,
    CatalogFunction.SIN_MINUS_HALF: sp.sin(X) - sp.Rational(1, 2),
    CatalogFunction.COS_MINUS_X: sp.cos(X) - X,
    CatalogFunction.EXP_MINUS_2: sp.exp(X) - 2,
}

_LABELS: dict[CatalogFunction, str] = {
    CatalogFunction.X2_MINUS_4: "f1(x) = x^2 - 4",
    CatalogFunction.X3_MINUS_2X_MINUS_5: "f2(x) = x^3 - 2*x - 5",
    CatalogFunction.SIN_MINUS_HALF: "f3(x) = sin(x) - 0.5",
    CatalogFunction.COS_MINUS_X: "f4(x) = cos(x) - x",
    CatalogFunction.EXP_MINUS_2: "f5(x) = e^x - 2",
}


def _normalize_name(name: str) -> str:
    return "".join(name.split()).lower()


def _build_index() -> dict[str, CatalogFunction]:
    index: dict[str, CatalogFunction] = {}
    for member in CatalogFunction:
        for alias in (member.identifier, member.label, member.name):
            index[_normalize_name(alias)] = member
    return index


_INDEX = _build_index()


def supported_functions() -> tuple[CatalogFunction, ...]:
    """Return catalog entries in selector order."""
    return tuple(CatalogFunction)


def selector_options() -> list[tuple[str, str]]:
    """Return ``(label, identifier)`` pairs suitable for a dropdown."""
    return [(member.label, member.identifier) for member in CatalogFunction]


def _find(name: Union[str, CatalogFunction]) -> Optional[CatalogFunction]:
    if isinstance(name, CatalogFunction):
        return name
    if not isinstance(name, str):
        return None
    return _INDEX.get(_normalize_name(name))


def resolve_function(name: Union[str, CatalogFunction]) -> CatalogFunction:
    """Return the catalog entry for ``name`` or raise :class:`UnknownFunction`.

    ``name`` may be a :class:`CatalogFunction`, its identifier, its selector
    label, or its member name. Whitespace and case are ignored.
    """
    member = _find(name)
    if member is None:
        raise UnknownFunction(name, tuple(m.identifier for m in CatalogFunction))
    return member


def resolve(name: Union[str, CatalogFunction]) -> Evaluator:
    """Return the evaluator for ``name``.

    Raises
    ------
    UnknownFunction
        If ``name`` does not match any catalog entry.
    """
    return resolve_function(name).evaluator


@dataclass(frozen=True)
class CatalogLookup:
    """Outcome of :func:`lookup`: either a catalog entry or the lookup error."""

    name: object
    function: Optional[CatalogFunction] = None
    error: Optional[UnknownFunction] = None

    @property
    def ok(self) -> bool:
        return self.function is not None

    @property
    def evaluator(self) -> Optional[Evaluator]:
        return self.function.evaluator if self.function is not None else None

    def unwrap(self) -> Evaluator:
        """Return the evaluator, raising the carried error on a miss."""
        if self.function is not None:
            return self.function.evaluator
        if self.error is not None:
            raise self.error
        raise UnknownFunction(self.name, tuple(m.identifier for m in CatalogFunction))


def lookup(name: Union[str, CatalogFunction]) -> CatalogLookup:
    """Resolve ``name`` without raising for unknown identifiers."""
    try:
        member = resolve_function(name)
    except UnknownFunction as exc:
        return CatalogLookup(name=name, error=exc)
    return CatalogLookup(name=name, function=member)
