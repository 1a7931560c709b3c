"""Core domain layer — shogi notation parsing with zero external dependencies.

Quick start::

    from shogiban.core import parse_position

    pos = parse_position(source)
    print(pos.board)
    print(pos.gote_hand, pos.sente_hand)
"""

from shogiban.core.board import BOARD_SIZE, FILES, RANKS, Board, file_of, rank_of
from shogiban.core.enums import PieceType, Player
from shogiban.core.errors import (
    MalformedNotation,
    NotationError,
    UnknownPieceColor,
    UnknownPieceType,
)
from shogiban.core.notation import (
    LAYOUT,
    NotationLayout,
    parse_hand,
    parse_position,
    parse_row,
    split_lines,
)
from shogiban.core.piece import (
    Piece,
    hand_symbol,
    parse_piece,
    parse_piece_type,
    piece_symbol,
)
from shogiban.core.position import Hand, Position

__all__ = [
    # Enums
    "PieceType",
    "Player",
    # Errors
    "NotationError",
    "UnknownPieceType",
    "UnknownPieceColor",
    "MalformedNotation",
    # Domain objects
    "BOARD_SIZE",
    "FILES",
    "RANKS",
    "Board",
    "file_of",
    "rank_of",
    "Hand",
    "Piece",
    "Position",
    # Piece codec
    "hand_symbol",
    "parse_piece",
    "parse_piece_type",
    "piece_symbol",
    # Notation
    "LAYOUT",
    "NotationLayout",
    "parse_hand",
    "parse_position",
    "parse_row",
    "split_lines",
]
