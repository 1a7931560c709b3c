"""Tests for BoardScene drawing."""

from __future__ import annotations

from collections.abc import Callable

from shogiban.core.notation import parse_position
from shogiban.ui.board.board_scene import BoardScene
from shogiban.ui.diagram import build_diagram
from shogiban.ui.styles.theme import BoardTheme

BlockFactory = Callable[..., str]


def _scene(source: str) -> BoardScene:
    scene = BoardScene()
    scene.set_diagram(build_diagram(parse_position(source)))
    return scene


def test_empty_scene_has_no_items(qapp: object) -> None:
    scene = BoardScene()
    assert scene.items() == []
    assert scene.sceneRect().isEmpty()


def test_grid_size_and_labels(qapp: object, block_factory: BlockFactory) -> None:
    scene = _scene(block_factory())
    t = scene.tile_size
    assert scene.sceneRect().width() == 10 * t
    assert scene.sceneRect().height() == 10 * t

    header = scene.text_at(0, 0)
    assert header is not None and header.text() == "9"
    rank = scene.text_at(9, 9)
    assert rank is not None and rank.text() == "9"


def test_label_cells_are_not_bordered(qapp: object, block_factory: BlockFactory) -> None:
    scene = _scene(block_factory())
    assert scene.cell_at(0, 0) is None
    assert scene.cell_at(1, 9) is None
    assert scene.cell_at(1, 0) is not None
    assert scene.cell_at(9, 8) is not None


def test_cell_tooltip_names_square(qapp: object, block_factory: BlockFactory) -> None:
    scene = _scene(block_factory())
    cell = scene.cell_at(1, 0)
    assert cell is not None
    assert cell.toolTip() == "9一"


def test_gote_piece_is_rotated(qapp: object, block_factory: BlockFactory) -> None:
    scene = _scene(block_factory(["gk|sk|  |  |  |  |  |  |  "]))
    gote = scene.text_at(1, 0)
    sente = scene.text_at(1, 1)
    assert gote is not None and sente is not None
    assert gote.rotation() == 180
    assert sente.rotation() == 0


def test_promoted_piece_uses_accent(qapp: object, block_factory: BlockFactory) -> None:
    theme = BoardTheme.default()
    scene = _scene(block_factory(["sP|sK|sp|  |  |  |  |  |  "]))

    tokin, king, pawn = (scene.text_at(1, col) for col in range(3))
    assert tokin is not None and king is not None and pawn is not None
    assert tokin.text() == "と"
    assert tokin.brush().color() == theme.accent_text
    assert king.brush().color() == theme.piece_text
    assert pawn.brush().color() == theme.piece_text


def test_set_tile_size_rescales(qapp: object, block_factory: BlockFactory) -> None:
    scene = _scene(block_factory())
    scene.set_tile_size(50)
    assert scene.tile_size == 50
    assert scene.sceneRect().width() == 500


def test_set_theme_redraws_cells(qapp: object, block_factory: BlockFactory) -> None:
    scene = _scene(block_factory())
    dark = BoardTheme.dark()
    scene.set_theme(dark)
    cell = scene.cell_at(1, 0)
    assert cell is not None
    assert cell.brush().color() == dark.cell_fill
