"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessgrid.core.square import Square, all_combinations


@pytest.fixture
def squares() -> list[Square]:
    """A freshly generated list of all 64 squares."""
    return list(all_combinations())
