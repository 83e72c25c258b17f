# tests/box_chart/conftest.py
"""Pytest configuration and shared sample sets for box_chart tests."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    # Ensure boxwhisker package is importable when running tests from repo root.
    repo_root = Path(__file__).resolve().parents[2]
    src_dir = repo_root / "src"
    if src_dir.exists() and str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture
def skewed_samples():
    """Ten samples with one far outlier: 1..9 and 100 (deliberately unsorted)."""
    return [7, 100, 3, 1, 9, 5, 2, 8, 4, 6]


@pytest.fixture
def sorted_skewed_samples(skewed_samples):
    return sorted(skewed_samples)
