"""
numpify: Compile single-variable SymPy expressions to NumPy callables
=====================================================================

Purpose
-------
Turn a SymPy expression in one variable into a plain Python function that
evaluates with NumPy. The catalog of scannable functions is stored
symbolically; this module provides the numeric side used by sampling and
scanning.

The compiled callable accepts either a scalar or an array:

- scalars (``int``, ``float``, NumPy scalars) evaluate to a Python ``float``,
- arrays evaluate element-wise and return an ``ndarray`` of the same shape.

Public API
----------
- :func:`numpify`
- :func:`numpify_cached`
- :class:`CompiledFunction`

Examples
--------
>>> import numpy as np
>>> import sympy as sp
>>> x = sp.Symbol("x")
>>> f = numpify(x**2 - 4, var=x)
>>> f(3)
5.0
>>> f(np.array([0.0, 2.0]))
array([-4.,  0.])

Logging
-------
This module uses Python's standard :mod:`logging` library and is silent by
default. Compile timings are emitted at ``DEBUG`` level:

>>> import logging
>>> logging.getLogger("rootscan.numpify").setLevel(logging.DEBUG)  # doctest: +SKIP
"""

from __future__ import annotations

from functools import lru_cache
import builtins
import keyword

import logging
import time
import textwrap
from typing import Any, Callable, Dict, cast

import numpy as np
import sympy as sp
from sympy.printing.numpy import NumPyPrinter


__all__ = [
    "numpify",
    "numpify_cached",
    "CompiledFunction",
]


logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class CompiledFunction:
    """Compiled SymPy->NumPy callable of one variable."""

    __slots__ = ("_fn", "symbolic", "var", "arg_name", "source")

    def __init__(
        self,
        fn: Callable[[Any], Any],
        symbolic: sp.Basic,
        var: sp.Symbol,
        arg_name: str,
        source: str,
    ) -> None:
        self._fn = fn
        self.symbolic = symbolic
        self.var = var
        self.arg_name = arg_name
        self.source = source

    def __call__(self, x: Any) -> Any:
        result = self._fn(x)
        if np.ndim(result) == 0:
            return float(result)
        return result

    def __repr__(self) -> str:
        return f"CompiledFunction({self.symbolic!r}, var={self.arg_name})"


def numpify(expr: Any, *, var: sp.Symbol, cache: bool = True) -> CompiledFunction:
    """Compile a SymPy expression into a NumPy-evaluable function of ``var``.

    By default this uses the same LRU-backed cache as :func:`numpify_cached`.
    Pass ``cache=False`` to force a fresh compile.
    """
    if cache:
        return numpify_cached(expr, var=var)
    return _numpify_uncached(expr, var=var)


def _arg_name_for(var: sp.Symbol) -> str:
    name = var.name
    if name.isidentifier() and not keyword.iskeyword(name) and name not in _RESERVED_NAMES:
        return name
    cleaned = "".join(ch if (ch == "_" or ch.isalnum()) else "_" for ch in name)
    if not cleaned or cleaned[0].isdigit():
        cleaned = f"_{cleaned}"
    while keyword.iskeyword(cleaned) or cleaned in _RESERVED_NAMES:
        cleaned = f"{cleaned}_"
    return cleaned


_RESERVED_NAMES = set(dir(builtins)) | {"numpy", "np"}


def _numpify_uncached(expr: Any, *, var: sp.Symbol) -> CompiledFunction:
    """Compile a SymPy expression into a NumPy-evaluable Python function (uncached).

    Parameters
    ----------
    expr:
        A SymPy expression or anything convertible via :func:`sympy.sympify`.
    var:
        The single symbol used as the positional argument of the compiled function.

    Returns
    -------
    CompiledFunction
        A generated callable wrapper with expression metadata and source text.

    Raises
    ------
    TypeError
        If ``expr`` is not SymPy-compatible or ``var`` is not a Symbol.
    ValueError
        If ``expr`` contains free symbols other than ``var``.

    Notes
    -----
    This function uses ``exec`` to define the generated function. Avoid calling it on
    untrusted expressions.
    """
    try:
        expr_sym = sp.sympify(expr)
    except Exception as e:
        raise TypeError(f"numpify expects a SymPy-compatible expression, got {type(expr)}") from e
    if not isinstance(expr_sym, sp.Basic):
        raise TypeError(f"numpify expects a SymPy expression, got {type(expr_sym)}")
    if not isinstance(var, sp.Symbol):
        raise TypeError(f"var must be a SymPy Symbol, got {type(var)}")
    expr = cast(sp.Basic, expr_sym)

    unbound = {s.name for s in expr.free_symbols} - {var.name}
    if unbound:
        raise ValueError(
            "Expression contains unbound symbols: "
            f"{', '.join(sorted(unbound))}. Only {var.name} may appear."
        )

    log_debug = logger.isEnabledFor(logging.DEBUG)
    t_total0: float | None = time.perf_counter() if log_debug else None

    arg_name = _arg_name_for(var)
    expr_codegen = expr.xreplace({var: sp.Symbol(arg_name)})

    printer = NumPyPrinter(settings={"user_functions": {}})
    expr_code = printer.doprint(expr_codegen)

    lines = [f"def _generated({arg_name}):"]
    if expr.free_symbols:
        lines.append(f"    return {expr_code}")
    else:
        # Constants still broadcast to the argument's shape.
        lines.append(f"    return ({expr_code}) + numpy.zeros(numpy.shape({arg_name}))")
    src = "\n".join(lines)

    glb: Dict[str, Any] = {"numpy": np}
    loc: Dict[str, Any] = {}
    exec(src, glb, loc)
    fn = cast(Callable[[Any], Any], loc["_generated"])

    fn.__doc__ = textwrap.dedent(
        f"""
        Auto-generated NumPy function from SymPy expression.

        expr: {repr(expr)}
        var: {arg_name}

        Source:
        {src}
        """
    ).strip()

    if log_debug:
        t_total_s = (time.perf_counter() - t_total0) if t_total0 is not None else 0.0
        logger.debug("numpify: compiled %r in %.2f ms", expr, 1000.0 * t_total_s)

    return CompiledFunction(fn=fn, symbolic=expr, var=var, arg_name=arg_name, source=src)


# ---------------------------------------------------------------------------
# Cached compilation
# ---------------------------------------------------------------------------

_NUMPIFY_CACHE_MAXSIZE = 64


@lru_cache(maxsize=_NUMPIFY_CACHE_MAXSIZE)
def _numpify_cached_impl(expr: sp.Basic, var: sp.Symbol) -> CompiledFunction:
    """Compile an expression on cache misses for :func:`numpify_cached`."""
    logger.debug("numpify_cached: cache MISS (var=%s)", var.name)
    return _numpify_uncached(expr, var=var)


def numpify_cached(expr: Any, *, var: sp.Symbol) -> CompiledFunction:
    """Cached version of :func:`numpify`.

    The cache key is the sympified expression plus ``var``. Call
    ``numpify_cached.cache_clear()`` to drop compiled callables.
    """
    try:
        expr_sym = sp.sympify(expr)
    except Exception as e:
        raise TypeError(f"numpify_cached expects a SymPy-compatible expression, got {type(expr)}") from e
    if not isinstance(expr_sym, sp.Basic):
        raise TypeError(f"numpify_cached expects a SymPy expression, got {type(expr_sym)}")
    if not isinstance(var, sp.Symbol):
        raise TypeError(f"var must be a SymPy Symbol, got {type(var)}")
    return _numpify_cached_impl(expr_sym, var)


# Expose cache controls on the public wrapper.
numpify_cached.cache_info = _numpify_cached_impl.cache_info  # type: ignore[attr-defined]
numpify_cached.cache_clear = _numpify_cached_impl.cache_clear  # type: ignore[attr-defined]
