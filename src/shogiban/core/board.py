"""Board — immutable 9x9 piece placement.

Layout (row-major, as written in the notation)::

    row 0 = rank 1 (top) ... row 8 = rank 9 (bottom)
    col 0 = file 9 (left) ... col 8 = file 1 (right)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TypeAlias

from shogiban.core.piece import Piece

BOARD_SIZE = 9

FILES: tuple[int, ...] = tuple(range(BOARD_SIZE, 0, -1))
RANKS: tuple[int, ...] = tuple(range(1, BOARD_SIZE + 1))

Row: TypeAlias = tuple[Piece | None, ...]


def file_of(col: int) -> int:
    """File number 9–1 for column index 0–8."""
    return BOARD_SIZE - col


def rank_of(row: int) -> int:
    """Rank number 1–9 for row index 0–8."""
    return row + 1


class Board:
    """Read-only grid of ``Piece | None``."""

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Iterable[Piece | None]]) -> None:
        grid = tuple(tuple(row) for row in rows)
        if len(grid) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in grid):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}")
        self._rows: tuple[Row, ...] = grid

    @classmethod
    def empty(cls) -> Board:
        return cls([None] * BOARD_SIZE for _ in range(BOARD_SIZE))

    # -- Element access -----------------------------------------------------

    def __getitem__(self, row: int) -> Row:
        return self._rows[row]

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    def __len__(self) -> int:
        return BOARD_SIZE

    def occupied(self) -> Iterator[tuple[int, int, Piece]]:
        """Yield ``(row, col, piece)`` for every non-empty cell."""
        for r, row in enumerate(self._rows):
            for c, piece in enumerate(row):
                if piece is not None:
                    yield r, c, piece

    def piece_count(self) -> int:
        return sum(1 for _ in self.occupied())

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        lines = [" ".join(str(f) for f in FILES)]
        for r, row in enumerate(self._rows):
            cells = [p.symbol if p else "・" for p in row]
            lines.append(f"{''.join(cells)} {rank_of(r)}")
        return "\n".join(lines)
