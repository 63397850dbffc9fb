from __future__ import annotations

import math

import numpy as np
import pytest
import sympy as sp

from rootscan.input_convert import to_float


def test_to_float_accepts_numbers_and_numeric_strings() -> None:
    assert to_float(3) == 3.0
    assert to_float(0.1) == 0.1
    assert to_float(" -2.5 ") == -2.5
    assert to_float(np.float64(1.25)) == 1.25


def test_to_float_evaluates_sympy_strings_and_expressions() -> None:
    assert to_float("pi/4") == pytest.approx(math.pi / 4)
    assert to_float(sp.sqrt(16)) == 4.0


def test_to_float_rejects_bool_and_empty_string() -> None:
    with pytest.raises(ValueError, match="booleans"):
        to_float(True)
    with pytest.raises(ValueError, match="empty string"):
        to_float("   ")


def test_to_float_rejects_nonreal_values() -> None:
    with pytest.raises(ValueError, match="imaginary part is non-zero"):
        to_float(1 + 2j)
    with pytest.raises(ValueError, match="imaginary part is non-zero"):
        to_float("sqrt(-1)")


def test_to_float_rejects_free_symbols_and_garbage() -> None:
    with pytest.raises(ValueError, match="free symbols"):
        to_float("x + 1")
    with pytest.raises(ValueError, match="Could not convert"):
        to_float("1 +* 2")
    with pytest.raises(ValueError, match="Could not convert"):
        to_float(object())
