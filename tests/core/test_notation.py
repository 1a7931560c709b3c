"""Tests for the block notation parser."""

from collections.abc import Callable

import pytest

from shogiban.core.enums import PieceType, Player
from shogiban.core.errors import MalformedNotation, UnknownPieceColor, UnknownPieceType
from shogiban.core.notation import (
    LAYOUT,
    NotationLayout,
    parse_hand,
    parse_position,
    parse_row,
    split_lines,
)
from shogiban.core.piece import Piece

BlockFactory = Callable[..., str]

EMPTY_ROW = "  |  |  |  |  |  |  |  |  "

STARTING_BLOCK = "\n".join(
    [
        "",
        "gl|gn|gs|gg|gk|gg|gs|gn|gl",
        "  |gr|  |  |  |  |  |gb|  ",
        "gp|gp|gp|gp|gp|gp|gp|gp|gp",
        EMPTY_ROW,
        EMPTY_ROW,
        EMPTY_ROW,
        "sp|sp|sp|sp|sp|sp|sp|sp|sp",
        "  |sb|  |  |  |  |  |sr|  ",
        "sl|sn|ss|sg|sk|sg|ss|sn|sl",
        "",
    ]
)


class TestLayout:
    def test_default_layout(self) -> None:
        assert LAYOUT.gote_hand_line == 0
        assert LAYOUT.board_lines == range(1, 10)
        assert LAYOUT.sente_hand_line == 10
        assert LAYOUT.cell_separator == "|"
        assert LAYOUT.line_count == 11

    def test_custom_layout_swaps_hands(self, block_factory: BlockFactory) -> None:
        layout = NotationLayout(gote_hand_line=10, sente_hand_line=0)
        pos = parse_position(block_factory(gote_hand="p", sente_hand="r"), layout)
        assert pos.sente_hand == (PieceType.PAWN,)
        assert pos.gote_hand == (PieceType.ROOK,)


class TestSplitLines:
    def test_bare_and_crlf_line_endings(self) -> None:
        assert split_lines("a\nb\r\nc") == ["a", "b", "c"]

    def test_trailing_newline_gives_empty_line(self) -> None:
        assert split_lines("a\n") == ["a", ""]


class TestParseHand:
    def test_empty(self) -> None:
        assert parse_hand("") == ()
        assert parse_hand("   ") == ()

    def test_order_and_case(self) -> None:
        assert parse_hand(" pPb ") == (PieceType.PAWN, PieceType.PAWN, PieceType.BISHOP)

    def test_inner_space_is_rejected(self) -> None:
        with pytest.raises(UnknownPieceType) as info:
            parse_hand("p p")
        assert info.value.column == 2

    def test_error_column_counts_leading_whitespace(self) -> None:
        with pytest.raises(UnknownPieceType) as info:
            parse_hand(" pq")
        assert info.value.column == 3
        assert info.value.token == "q"


class TestParseRow:
    def test_empty_row(self) -> None:
        assert parse_row(EMPTY_ROW) == (None,) * 9

    def test_tokens_are_trimmed(self) -> None:
        row = parse_row(" sp |  |  |  |  |  |  |  | gR ")
        assert row[0] == Piece(PieceType.PAWN, False, Player.SENTE)
        assert row[8] == Piece(PieceType.ROOK, True, Player.GOTE)

    def test_single_character_token_is_empty(self) -> None:
        assert parse_row("s|g| | | | | | | ") == (None,) * 9

    @pytest.mark.parametrize("text", ["  |  |  ", EMPTY_ROW + "|  ", ""])
    def test_wrong_cell_count_raises(self, text: str) -> None:
        with pytest.raises(MalformedNotation, match="9 cells"):
            parse_row(text)

    def test_codec_error_gets_column(self) -> None:
        with pytest.raises(UnknownPieceColor) as info:
            parse_row("  |  |xp|  |  |  |  |  |  ")
        assert info.value.column == 3

    def test_long_token_reads_first_two_characters(self) -> None:
        row = parse_row("spx|  |  |  |  |  |  |  |gBq")
        assert row[0] == Piece(PieceType.PAWN, False, Player.SENTE)
        assert row[8] == Piece(PieceType.BISHOP, True, Player.GOTE)


class TestParsePosition:
    def test_empty_board_with_gote_pawn(self) -> None:
        source = "\n".join(["p", *[EMPTY_ROW] * 9, ""])
        pos = parse_position(source)
        assert all(cell is None for row in pos.board for cell in row)
        assert pos.gote_hand == (PieceType.PAWN,)
        assert pos.sente_hand == ()

    def test_single_promoted_king(self, block_factory: BlockFactory) -> None:
        pos = parse_position(block_factory(["sK|  |  |  |  |  |  |  |  "]))
        assert pos.board[0][0] == Piece(PieceType.KING, True, Player.SENTE)
        assert list(pos.board.occupied()) == [
            (0, 0, Piece(PieceType.KING, True, Player.SENTE))
        ]

    def test_starting_position(self) -> None:
        pos = parse_position(STARTING_BLOCK)
        assert pos.board.piece_count() == 40
        assert pos.board[0][4] == Piece(PieceType.KING, False, Player.GOTE)
        assert pos.board[8][4] == Piece(PieceType.KING, False, Player.SENTE)
        # Sente rook stands on 2h: file 2 is the eighth column.
        assert pos.board[7][7] == Piece(PieceType.ROOK, False, Player.SENTE)
        assert pos.board[1][1] == Piece(PieceType.ROOK, False, Player.GOTE)

    def test_crlf_block(self) -> None:
        pos = parse_position(STARTING_BLOCK.replace("\n", "\r\n"))
        assert pos.board.piece_count() == 40

    def test_hands(self, block_factory: BlockFactory) -> None:
        pos = parse_position(block_factory(gote_hand=" bP ", sente_hand="ggs"))
        assert pos.gote_hand == (PieceType.BISHOP, PieceType.PAWN)
        assert pos.sente_hand == (PieceType.GOLD, PieceType.GOLD, PieceType.SILVER)

    def test_trailing_blank_lines_are_ignored(self, block_factory: BlockFactory) -> None:
        pos = parse_position(block_factory(sente_hand="p") + "\n  \n")
        assert pos.sente_hand == (PieceType.PAWN,)

    def test_ten_lines_raise_malformed(self) -> None:
        source = "\n".join(["p", *[EMPTY_ROW] * 9])
        with pytest.raises(MalformedNotation, match="Expected 11 lines, found 10") as info:
            parse_position(source)
        assert info.value.line == 11

    def test_empty_source_raises_malformed(self) -> None:
        with pytest.raises(MalformedNotation):
            parse_position("")

    def test_extra_content_raises_malformed(self, block_factory: BlockFactory) -> None:
        with pytest.raises(MalformedNotation) as info:
            parse_position(block_factory() + "\nsp")
        assert info.value.line == 12

    def test_short_row_names_its_line(self, block_factory: BlockFactory) -> None:
        with pytest.raises(MalformedNotation, match="found 8") as info:
            parse_position(block_factory([EMPTY_ROW, "  |  |  |  |  |  |  |  "]))
        assert info.value.line == 3
        assert info.value.column is None

    def test_unknown_type_on_board_is_located(self, block_factory: BlockFactory) -> None:
        with pytest.raises(UnknownPieceType) as info:
            parse_position(block_factory([EMPTY_ROW, EMPTY_ROW, "  |sx|  |  |  |  |  |  |  "]))
        assert info.value.line == 4
        assert info.value.column == 2
        assert "(line 4, column 2)" in str(info.value)

    def test_unknown_type_in_hands_is_located(self, block_factory: BlockFactory) -> None:
        with pytest.raises(UnknownPieceType) as info:
            parse_position(block_factory(gote_hand="px"))
        assert info.value.line == 1
        assert info.value.column == 2

        with pytest.raises(UnknownPieceType) as info:
            parse_position(block_factory(sente_hand="q"))
        assert info.value.line == 11
        assert info.value.column == 1

    def test_unknown_color_aborts_parse(self, block_factory: BlockFactory) -> None:
        with pytest.raises(UnknownPieceColor):
            parse_position(block_factory(["kp|  |  |  |  |  |  |  |  "]))

    def test_oversized_token_is_truncated(self) -> None:
        source = "\n".join(["", "spx|  |  |  |  |  |  |  |  ", *[EMPTY_ROW] * 8, ""])
        pos = parse_position(source)
        assert pos.board[0][0] == Piece(PieceType.PAWN, False, Player.SENTE)
        assert pos.board.piece_count() == 1

    def test_oversized_token_with_bad_owner_is_located(
        self, block_factory: BlockFactory
    ) -> None:
        with pytest.raises(UnknownPieceColor) as info:
            parse_position(block_factory(["  |  |  |  |  |  |  |  |xpq"]))
        assert info.value.line == 2
        assert info.value.column == 9
