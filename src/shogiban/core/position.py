"""Parsed shogi position: board plus both hands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from shogiban.core.board import Board
from shogiban.core.enums import PieceType, Player

Hand: TypeAlias = tuple[PieceType, ...]


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable result of parsing one notation block."""

    board: Board
    sente_hand: Hand
    gote_hand: Hand

    def hand(self, player: Player) -> Hand:
        """Pieces in hand for *player*."""
        return self.sente_hand if player == Player.SENTE else self.gote_hand
