"""Qt-free projection of a :class:`Position` into drawable cells."""

from __future__ import annotations

from dataclasses import dataclass

from shogiban.core.board import FILES, file_of, rank_of
from shogiban.core.enums import PieceType, Player
from shogiban.core.piece import Piece, hand_symbol
from shogiban.core.position import Hand, Position
from shogiban.ui.i18n import t

_KANJI_RANKS = "一二三四五六七八九"


@dataclass(frozen=True, slots=True)
class DiagramCell:
    """One grid cell: a piece square (bordered) or a coordinate label."""

    text: str = ""
    bordered: bool = False
    accent: bool = False  # promoted piece other than the king
    rotated: bool = False  # gote piece, drawn upside down


@dataclass(frozen=True, slots=True)
class BoardDiagram:
    """Header row, nine body rows and the two hand captions."""

    header: tuple[DiagramCell, ...]
    rows: tuple[tuple[DiagramCell, ...], ...]
    gote_caption: str
    sente_caption: str

    @property
    def column_count(self) -> int:
        return len(self.header)

    @property
    def row_count(self) -> int:
        return len(self.rows) + 1


def hand_text(hand: Hand) -> str:
    """Space-separated glyphs, or the locale's placeholder for an empty hand."""
    if not hand:
        return t().empty_hand
    return " ".join(hand_symbol(piece_type) for piece_type in hand)


def piece_cell(piece: Piece | None) -> DiagramCell:
    if piece is None:
        return DiagramCell(bordered=True)
    return DiagramCell(
        text=piece.symbol,
        bordered=True,
        accent=piece.promoted and piece.piece_type != PieceType.KING,
        rotated=piece.owner == Player.GOTE,
    )


def build_diagram(position: Position) -> BoardDiagram:
    """Lay out *position* the way it is drawn: files 9→1, ranks 1→9."""
    strings = t()
    header = tuple(DiagramCell(str(f)) for f in FILES) + (DiagramCell(),)
    rows = tuple(
        tuple(piece_cell(piece) for piece in row) + (DiagramCell(str(rank_of(r))),)
        for r, row in enumerate(position.board)
    )
    return BoardDiagram(
        header=header,
        rows=rows,
        gote_caption=f"{strings.gote_hand}: {hand_text(position.gote_hand)}",
        sente_caption=f"{strings.sente_hand}: {hand_text(position.sente_hand)}",
    )


def cell_coordinates(row: int, col: int) -> str:
    """Human label for a board cell, e.g. ``(0, 0)`` → ``"9一"``."""
    return f"{file_of(col)}{_KANJI_RANKS[rank_of(row) - 1]}"

