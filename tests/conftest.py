"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessmachine.core.board import Board


@pytest.fixture
def start_board() -> Board:
    """A fresh standard starting position."""
    return Board.starting_position()


@pytest.fixture
def rooks_only() -> Board:
    """Kings and rooks on their home squares, all castling rights intact."""
    return Board.from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
