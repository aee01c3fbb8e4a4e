"""Square value object and the 64-square cross-product.

Square order (Little-Endian Rank-File mapping), fixed for the whole package:
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63

``all_combinations()`` yields squares in exactly this order: rank-major,
file-minor, starting at a1 and ending at h8.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Iterator
from dataclasses import dataclass

from chessgrid.core.enums import (
    BOARD_SIZE,
    SQUARE_COUNT,
    File,
    Rank,
    all_files,
    all_ranks,
)

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable (file, rank) pair. Every combination is a legal square."""

    file: File
    rank: Rank

    def __post_init__(self) -> None:
        if not isinstance(self.file, File):
            raise TypeError(f"Invalid square file: {self.file!r}")
        if not isinstance(self.rank, Rank):
            raise TypeError(f"Invalid square rank: {self.rank!r}")

    def __iter__(self) -> Iterator[File | Rank]:
        yield self.file
        yield self.rank

    # ── Conversions ──────────────────────────────────────────────────────

    @property
    def index(self) -> int:
        """Position in ``all_combinations()``, 0 (a1) to 63 (h8)."""
        return self.rank.index * BOARD_SIZE + self.file.index

    @property
    def name(self) -> str:
        """Algebraic name, e.g. ``'e4'``."""
        return f"{self.file.char}{self.rank.char}"

    @classmethod
    def from_index(cls, index: int) -> Square:
        if isinstance(index, bool):
            raise TypeError(f"Invalid square index: {index!r}")
        index = operator.index(index)
        if not 0 <= index < SQUARE_COUNT:
            raise ValueError(f"Invalid square index: {index!r}")
        return _SQUARES[index]

    @classmethod
    def parse(cls, name: str) -> Square:
        """Parse an algebraic name such as ``'e4'`` or ``'E4'``."""
        if len(name) != 2:
            _LOGGER.debug("Rejected square name %r", name)
            raise ValueError(f"Invalid square name: {name!r}")
        try:
            file = File.from_char(name[0])
            rank = Rank.from_char(name[1])
        except ValueError as exc:
            raise ValueError(f"Invalid square name: {name!r}") from exc
        return cls(file, rank)

    # ── Arithmetic ───────────────────────────────────────────────────────

    def offset(self, file_delta: int, rank_delta: int) -> Square | None:
        """Square shifted by the given deltas, or ``None`` if off the board."""
        file = self.file.offset(file_delta)
        rank = self.rank.offset(rank_delta)
        if file is None or rank is None:
            return None
        return Square(file, rank)

    def __str__(self) -> str:
        return self.name


def all_combinations() -> Iterator[Square]:
    """Every square once, rank-major then file-minor (a1, b1, ..., h8)."""
    for rank in all_ranks():
        for file in all_files():
            yield Square(file, rank)


_SQUARES: tuple[Square, ...] = tuple(all_combinations())


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → Square(File.E, Rank.FOUR)."""
    return Square.parse(name)


def square_distance(a: Square, b: Square) -> int:
    """Chebyshev distance: number of king moves between ``a`` and ``b``."""
    return max(abs(a.file.index - b.file.index), abs(a.rank.index - b.rank.index))


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = _SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = _SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = _SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = _SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = _SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = _SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = _SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = _SQUARES[56:64]
