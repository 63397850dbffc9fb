from __future__ import annotations

import sys
from pathlib import Path

import pytest

_START = Path(__file__).resolve().parent
_repo_root = _START
while _repo_root != _repo_root.parent and not (_repo_root / "rootscan" / "__init__.py").exists():
    _repo_root = _repo_root.parent

sys.path.insert(0, str(_repo_root))

from rootscan.numpify import numpify_cached  # noqa: E402


@pytest.fixture
def square_minus_four():
    """Plain-Python ``x**2 - 4`` evaluator, independent of the catalog."""
    return lambda x: x * x - 4


@pytest.fixture(autouse=True)
def _fresh_numpify_cache():
    yield
    numpify_cached.cache_clear()
