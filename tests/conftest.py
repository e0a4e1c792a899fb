"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from checkie.core.board import Board


@pytest.fixture
def initial_board() -> Board:
    """Standard starting position."""
    return Board.initial()
