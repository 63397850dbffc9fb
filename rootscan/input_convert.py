# === SECTION: to_float [id: to_float]===
from __future__ import annotations

from typing import Any

import sympy as sp


def to_float(obj: Any) -> float:
    """
    Convert `obj` to a real float.

    Rules:
    - If `obj` is a number: cast via float(obj). Bools are rejected.
    - If `obj` is a SymPy expression: evaluate numerically.
    - If `obj` is a string:
        1) try float(s)
        2) else parse as a SymPy expression (e.g. "pi/4"), then evaluate.

    A value with a non-zero imaginary part is rejected rather than truncated.

    Raises
    ------
    ValueError
        If conversion fails or the value is not real.
    """
    if isinstance(obj, bool):
        raise ValueError(f"Could not convert {obj!r} to float: booleans are not numbers here.")

    if isinstance(obj, (int, float)):
        return float(obj)

    if isinstance(obj, complex):
        return _real_part_or_fail(obj, obj)

    if isinstance(obj, str):
        s = obj.strip()
        if s == "":
            raise ValueError("Cannot convert empty string to float.")
        try:
            return float(s)
        except ValueError:
            pass
        try:
            expr = sp.sympify(s)
        except Exception as e:
            raise ValueError(f"Could not convert {obj!r} to float (neither directly nor via SymPy).") from e
        return _evaluate_symbolic(expr, obj)

    if isinstance(obj, sp.Basic):
        return _evaluate_symbolic(obj, obj)

    # Fallback: NumPy scalars and anything else exposing __float__
    try:
        return float(obj)
    except Exception as e:
        raise ValueError(f"Could not convert {obj!r} to float.") from e


def _evaluate_symbolic(expr: sp.Basic, original: Any) -> float:
    if expr.free_symbols:
        names = ", ".join(sorted(s.name for s in expr.free_symbols))
        raise ValueError(f"Could not convert {original!r} to float: free symbols {names}.")
    try:
        value = complex(expr.evalf())
    except Exception as e:
        raise ValueError(f"Could not convert {original!r} to float.") from e
    return _real_part_or_fail(value, original)


def _real_part_or_fail(value: complex, original: Any) -> float:
    if value.imag != 0:
        raise ValueError(
            f"Could not convert non-real {original!r} to float: imaginary part is non-zero."
        )
    return float(value.real)

# === END OF SECTION: to_float [id: to_float]===
