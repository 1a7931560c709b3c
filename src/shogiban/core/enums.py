"""Core enumerations for the shogi domain."""

from __future__ import annotations

from enum import IntEnum


class Player(IntEnum):
    """Side owning a piece."""

    SENTE = 0  # first mover
    GOTE = 1  # second mover

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """The eight shogi piece kinds."""

    PAWN = 1
    BISHOP = 2
    ROOK = 3
    LANCE = 4
    KNIGHT = 5
    SILVER = 6
    GOLD = 7
    KING = 8
