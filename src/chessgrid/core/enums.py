"""Board coordinate enumerations: files and ranks."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import Enum

_LOGGER = logging.getLogger(__name__)

BOARD_SIZE = 8
SQUARE_COUNT = BOARD_SIZE * BOARD_SIZE


class File(Enum):
    """Board column, ``A`` (queenside edge) to ``H`` (kingside edge).

    ``File.A`` never equals ``0`` or ``"a"``.
    """

    A = "a"
    B = "b"
    C = "c"
    D = "d"
    E = "e"
    F = "f"
    G = "g"
    H = "h"

    @property
    def index(self) -> int:
        """Zero-based column, 0 for ``A`` through 7 for ``H``."""
        return _FILE_INDEX[self]

    @property
    def char(self) -> str:
        return self.value

    def offset(self, delta: int) -> File | None:
        """File ``delta`` columns away, or ``None`` past the board edge."""
        target = self.index + delta
        if 0 <= target < BOARD_SIZE:
            return _FILES[target]
        return None

    @classmethod
    def from_char(cls, char: str) -> File:
        """Parse ``'a'``-``'h'`` (either case)."""
        if len(char) == 1:
            lowered = char.lower()
            for file in _FILES:
                if file.value == lowered:
                    return file
        _LOGGER.debug("Rejected file character %r", char)
        raise ValueError(f"Invalid file: {char!r}")

    def __str__(self) -> str:
        return self.value


class Rank(Enum):
    """Board row, ``ONE`` (White's back rank) to ``EIGHT`` (Black's)."""

    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8

    @property
    def index(self) -> int:
        """Zero-based row, 0 for ``ONE`` through 7 for ``EIGHT``."""
        return self.value - 1

    @property
    def char(self) -> str:
        return str(self.value)

    def offset(self, delta: int) -> Rank | None:
        """Rank ``delta`` rows away, or ``None`` past the board edge."""
        target = self.index + delta
        if 0 <= target < BOARD_SIZE:
            return _RANKS[target]
        return None

    @classmethod
    def from_char(cls, char: str) -> Rank:
        """Parse ``'1'``-``'8'``."""
        if len(char) == 1 and char in "12345678":
            return _RANKS[int(char) - 1]
        _LOGGER.debug("Rejected rank character %r", char)
        raise ValueError(f"Invalid rank: {char!r}")

    def __str__(self) -> str:
        return self.char


_FILES: tuple[File, ...] = tuple(File)
_RANKS: tuple[Rank, ...] = tuple(Rank)
_FILE_INDEX: dict[File, int] = {file: i for i, file in enumerate(_FILES)}


def all_files() -> Iterator[File]:
    """Files ``A`` through ``H``, a fresh iterator on every call."""
    return iter(_FILES)


def all_ranks() -> Iterator[Rank]:
    """Ranks ``ONE`` through ``EIGHT``, a fresh iterator on every call."""
    return iter(_RANKS)
