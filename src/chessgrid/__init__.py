"""Chessgrid — strongly typed chessboard coordinates."""

from chessgrid.core import (
    BOARD_SIZE,
    SQUARE_COUNT,
    BitBoard,
    File,
    Rank,
    Square,
    all_combinations,
    all_files,
    all_ranks,
    parse_square,
)

__version__ = "0.1.0"

__all__ = [
    "BOARD_SIZE",
    "SQUARE_COUNT",
    "BitBoard",
    "File",
    "Rank",
    "Square",
    "all_combinations",
    "all_files",
    "all_ranks",
    "parse_square",
]
