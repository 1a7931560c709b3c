"""Piece value object and the notation codec for single cells."""

from __future__ import annotations

from dataclasses import dataclass

from shogiban.core.enums import PieceType, Player
from shogiban.core.errors import MalformedNotation, UnknownPieceColor, UnknownPieceType

# Notation letter ↔ PieceType (letters are matched case-insensitively)
_TYPE_LETTERS: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "l": PieceType.LANCE,
    "n": PieceType.KNIGHT,
    "s": PieceType.SILVER,
    "g": PieceType.GOLD,
    "k": PieceType.KING,
}

_OWNER_LETTERS: dict[str, Player] = {
    "s": Player.SENTE,
    "g": Player.GOTE,
}

_EMPTY_MARKER = " "

# (PieceType, promoted) → kanji glyph
_SYMBOLS: dict[tuple[PieceType, bool], str] = {
    (PieceType.KING, False): "王",
    (PieceType.ROOK, False): "飛",
    (PieceType.BISHOP, False): "角",
    (PieceType.GOLD, False): "金",
    (PieceType.SILVER, False): "銀",
    (PieceType.KNIGHT, False): "桂",
    (PieceType.LANCE, False): "香",
    (PieceType.PAWN, False): "歩",
    # Kings never promote in play; the notation still allows "K".
    (PieceType.KING, True): "玉",
    (PieceType.ROOK, True): "龍",
    (PieceType.BISHOP, True): "馬",
    (PieceType.GOLD, True): "金",
    (PieceType.SILVER, True): "全",
    (PieceType.KNIGHT, True): "圭",
    (PieceType.LANCE, True): "杏",
    (PieceType.PAWN, True): "と",
}

_MISSING_SYMBOLS = [
    (piece_type, promoted)
    for piece_type in PieceType
    for promoted in (False, True)
    if (piece_type, promoted) not in _SYMBOLS
]
if _MISSING_SYMBOLS:
    raise RuntimeError(f"Piece symbol table is incomplete: {_MISSING_SYMBOLS}")


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a piece on the board."""

    piece_type: PieceType
    promoted: bool
    owner: Player

    @property
    def symbol(self) -> str:
        """Kanji glyph, e.g. 飛 or 龍."""
        return piece_symbol(self)


def parse_piece_type(char: str) -> PieceType:
    """Decode a single type letter, e.g. ``'R'`` → ``PieceType.ROOK``."""
    try:
        return _TYPE_LETTERS[char.lower()]
    except KeyError:
        raise UnknownPieceType(char) from None


def parse_piece(token: str) -> Piece | None:
    """Decode a two-character cell token such as ``"sp"`` or ``"gR"``.

    The first character is the owner (``s``/``g``), a space marks an empty
    cell.  An uppercase type letter means the piece is promoted.
    """
    if len(token) != 2:
        raise MalformedNotation(
            f"Piece token must be exactly two characters: {token!r}", token=token
        )

    owner_char, type_char = token
    if owner_char == _EMPTY_MARKER:
        return None
    try:
        owner = _OWNER_LETTERS[owner_char]
    except KeyError:
        raise UnknownPieceColor(owner_char) from None

    piece_type = parse_piece_type(type_char.lower())
    promoted = type_char.upper() == type_char
    return Piece(piece_type, promoted, owner)


def piece_symbol(piece: Piece) -> str:
    """Display glyph for *piece*; total over every type/promotion pair."""
    return _SYMBOLS[(piece.piece_type, piece.promoted)]


def hand_symbol(piece_type: PieceType) -> str:
    """Glyph for a piece held in hand.

    Hand entries are shown as unpromoted sente pieces whichever hand holds
    them.
    """
    return piece_symbol(Piece(piece_type, False, Player.SENTE))
