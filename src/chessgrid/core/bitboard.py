"""64-bit square sets. Bit 0 is a1, bit 63 is h8."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from chessgrid.core.enums import BOARD_SIZE, File, Rank
from chessgrid.core.square import Square

_FULL = (1 << 64) - 1
_FILE_A = 0x0101010101010101
_RANK_1 = 0x00000000000000FF


def file_mask(file: File) -> int:
    """All eight squares of ``file``, e.g. ``0x0101010101010101`` for A."""
    return _FILE_A << file.index


def rank_mask(rank: Rank) -> int:
    """All eight squares of ``rank``, e.g. ``0xFF`` for ONE."""
    return _RANK_1 << (BOARD_SIZE * rank.index)


def square_mask(square: Square) -> int:
    return file_mask(square.file) & rank_mask(square.rank)


@dataclass(frozen=True, slots=True)
class BitBoard:
    """Immutable set of squares backed by a single 64-bit integer."""

    bits: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.bits <= _FULL:
            raise ValueError(f"Bitboard out of 64-bit range: {self.bits:#x}")

    @classmethod
    def from_squares(cls, squares: Iterable[Square]) -> BitBoard:
        bits = 0
        for square in squares:
            bits |= square_mask(square)
        return cls(bits)

    @classmethod
    def of_file(cls, file: File) -> BitBoard:
        return cls(file_mask(file))

    @classmethod
    def of_rank(cls, rank: Rank) -> BitBoard:
        return cls(rank_mask(rank))

    # -- Set algebra ---------------------------------------------------------

    def __and__(self, other: BitBoard) -> BitBoard:
        if not isinstance(other, BitBoard):
            return NotImplemented
        return BitBoard(self.bits & other.bits)

    def __or__(self, other: BitBoard) -> BitBoard:
        if not isinstance(other, BitBoard):
            return NotImplemented
        return BitBoard(self.bits | other.bits)

    def __xor__(self, other: BitBoard) -> BitBoard:
        if not isinstance(other, BitBoard):
            return NotImplemented
        return BitBoard(self.bits ^ other.bits)

    def __invert__(self) -> BitBoard:
        return BitBoard(~self.bits & _FULL)

    # -- Container protocol --------------------------------------------------

    def __contains__(self, square: Square) -> bool:
        if not isinstance(square, Square):
            return False
        return bool(self.bits & square_mask(square))

    def __iter__(self) -> Iterator[Square]:
        bits = self.bits
        while bits:
            lsb = bits & -bits
            yield Square.from_index(lsb.bit_length() - 1)
            bits ^= lsb

    def __len__(self) -> int:
        return self.bits.bit_count()

    def __bool__(self) -> bool:
        return self.bits != 0

    # -- Display -------------------------------------------------------------

    def __str__(self) -> str:
        lines = []
        for rank in reversed(tuple(Rank)):
            row = self.bits >> (BOARD_SIZE * rank.index)
            cells = " ".join(
                "X" if row >> file.index & 1 else "." for file in File
            )
            lines.append(f"{cells} {rank.char}")
        lines.append("a b c d e f g h")
        return "\n".join(lines)


EMPTY = BitBoard()
FULL = BitBoard(_FULL)
