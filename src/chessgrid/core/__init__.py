"""Core coordinate layer — pure board geometry with zero external dependencies.

Quick start::

    from chessgrid.core import File, all_combinations

    for square in all_combinations():
        if square.file is File.A:
            print(square)   # a1, a2, ..., a8
"""

from chessgrid.core.bitboard import (
    EMPTY,
    FULL,
    BitBoard,
    file_mask,
    rank_mask,
    square_mask,
)
from chessgrid.core.enums import (
    BOARD_SIZE,
    SQUARE_COUNT,
    File,
    Rank,
    all_files,
    all_ranks,
)
from chessgrid.core.square import (
    Square,
    all_combinations,
    parse_square,
    square_distance,
)

__all__ = [
    # Enums / constants
    "BOARD_SIZE",
    "SQUARE_COUNT",
    "File",
    "Rank",
    "all_files",
    "all_ranks",
    # Squares
    "Square",
    "all_combinations",
    "parse_square",
    "square_distance",
    # Bitboards
    "EMPTY",
    "FULL",
    "BitBoard",
    "file_mask",
    "rank_mask",
    "square_mask",
]
