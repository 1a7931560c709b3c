"""Shogi block notation parsing.

A block is exactly eleven lines::

    <gote hand>                  e.g. "pp" or empty
    <row>  x9                    nine "|"-separated cells, rank 1 first
    <sente hand>

Cells are blank (empty square) or ``<owner><letter>`` where the owner is
``s``/``g`` and an uppercase letter marks a promoted piece.  Columns run
from file 9 on the left to file 1 on the right.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from shogiban.core.board import BOARD_SIZE, Board, Row
from shogiban.core.errors import MalformedNotation, NotationError
from shogiban.core.piece import parse_piece, parse_piece_type
from shogiban.core.position import Hand, Position

_LOGGER = logging.getLogger(__name__)

_LINE_BREAK_RE = re.compile(r"\r?\n")

_T = TypeVar("_T")


@dataclass(frozen=True, slots=True)
class NotationLayout:
    """Which line of a block holds what (0-based line indices)."""

    gote_hand_line: int = 0
    board_lines: range = range(1, 1 + BOARD_SIZE)
    sente_hand_line: int = BOARD_SIZE + 1
    cell_separator: str = "|"

    @property
    def line_count(self) -> int:
        return max(self.gote_hand_line, self.board_lines[-1], self.sente_hand_line) + 1


LAYOUT = NotationLayout()


def split_lines(source: str) -> list[str]:
    """Split on ``\\n`` and ``\\r\\n`` line endings."""
    return _LINE_BREAK_RE.split(source)


def parse_hand(text: str) -> Hand:
    """Parse a hand line: one type letter per character, whitespace trimmed.

    Errors are located by the 1-based character column within *text*.
    """
    offset = len(text) - len(text.lstrip())
    hand = []
    for idx, ch in enumerate(text.strip()):
        try:
            hand.append(parse_piece_type(ch))
        except NotationError as exc:
            exc.locate(column=offset + idx + 1)
            raise
    return tuple(hand)


def parse_row(text: str, separator: str = LAYOUT.cell_separator) -> Row:
    """Parse one board row into nine cells (``None`` for empty squares)."""
    tokens = [token.strip() for token in text.split(separator)]
    if len(tokens) != BOARD_SIZE:
        raise MalformedNotation(
            f"Board row must have {BOARD_SIZE} cells, found {len(tokens)}"
        )

    cells = []
    for col, token in enumerate(tokens):
        if len(token) < 2:
            cells.append(None)
            continue
        try:
            # Only the owner and type letters are read.
            cells.append(parse_piece(token[:2]))
        except NotationError as exc:
            exc.locate(column=col + 1)
            raise
    return tuple(cells)


def parse_position(source: str, layout: NotationLayout = LAYOUT) -> Position:
    """Parse a full notation block into a :class:`Position`."""
    lines = split_lines(source)

    if len(lines) < layout.line_count:
        raise MalformedNotation(
            f"Expected {layout.line_count} lines, found {len(lines)}",
            line=len(lines) + 1,
        )
    for extra_idx in range(layout.line_count, len(lines)):
        if lines[extra_idx].strip():
            raise MalformedNotation(
                f"Unexpected content after the last notation line: "
                f"{lines[extra_idx]!r}",
                line=extra_idx + 1,
            )

    gote_hand = _parse_line(parse_hand, lines, layout.gote_hand_line)
    sente_hand = _parse_line(parse_hand, lines, layout.sente_hand_line)
    board = Board(
        _parse_line(parse_row, lines, idx, layout.cell_separator)
        for idx in layout.board_lines
    )

    position = Position(board, sente_hand, gote_hand)
    _LOGGER.debug(
        "Parsed shogi position: %d pieces on board, %d/%d in hand (sente/gote)",
        board.piece_count(),
        len(sente_hand),
        len(gote_hand),
    )
    return position


def _parse_line(
    parser: Callable[..., _T], lines: list[str], idx: int, *args: str
) -> _T:
    try:
        return parser(lines[idx], *args)
    except NotationError as exc:
        exc.locate(line=idx + 1)
        raise
