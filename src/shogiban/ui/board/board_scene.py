"""BoardScene — QGraphicsScene that draws a shogi diagram."""

from __future__ import annotations

from PyQt6.QtCore import QObject, Qt
from PyQt6.QtGui import QBrush, QFont, QPen
from PyQt6.QtWidgets import QGraphicsRectItem, QGraphicsScene, QGraphicsSimpleTextItem

from shogiban.ui.diagram import BoardDiagram, DiagramCell, cell_coordinates
from shogiban.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the header row, piece cells, rank labels and glyphs.

    Grid coordinates are ``(grid_row, grid_col)``: row 0 is the file header,
    rows 1–9 are ranks 1–9; column 9 holds the rank labels.
    """

    TILE = 36  # px per cell
    _GLYPH_RATIO = 0.62
    _LABEL_RATIO = 0.38

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._tile = self.TILE
        self._diagram: BoardDiagram | None = None

        self._cell_items: dict[tuple[int, int], QGraphicsRectItem] = {}
        self._text_items: dict[tuple[int, int], QGraphicsSimpleTextItem] = {}

    # ── Public API ───────────────────────────────────────────────────────

    def set_diagram(self, diagram: BoardDiagram) -> None:
        """Replace the displayed diagram (full redraw)."""
        self._diagram = diagram
        self._redraw()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._redraw()

    def set_tile_size(self, size: int) -> None:
        self._tile = max(12, size)
        self._redraw()

    @property
    def tile_size(self) -> int:
        return self._tile

    def text_at(self, grid_row: int, grid_col: int) -> QGraphicsSimpleTextItem | None:
        return self._text_items.get((grid_row, grid_col))

    def cell_at(self, grid_row: int, grid_col: int) -> QGraphicsRectItem | None:
        return self._cell_items.get((grid_row, grid_col))

    # ── Drawing ──────────────────────────────────────────────────────────

    def _redraw(self) -> None:
        self.clear()
        self._cell_items.clear()
        self._text_items.clear()

        if self._diagram is None:
            self.setSceneRect(0, 0, 0, 0)
            return

        t = self._tile
        self.setBackgroundBrush(QBrush(self._theme.background))

        grid = (self._diagram.header,) + self._diagram.rows
        for grid_row, cells in enumerate(grid):
            for grid_col, cell in enumerate(cells):
                self._draw_cell(grid_row, grid_col, cell)

        self.setSceneRect(
            0, 0, self._diagram.column_count * t, self._diagram.row_count * t
        )

    def _draw_cell(self, grid_row: int, grid_col: int, cell: DiagramCell) -> None:
        t = self._tile
        x, y = grid_col * t, grid_row * t

        if cell.bordered:
            rect = QGraphicsRectItem(x, y, t, t)
            rect.setBrush(QBrush(self._theme.cell_fill))
            rect.setPen(QPen(self._theme.cell_border, 1))
            rect.setZValue(0)
            rect.setToolTip(cell_coordinates(grid_row - 1, grid_col))
            self.addItem(rect)
            self._cell_items[(grid_row, grid_col)] = rect

        if not cell.text:
            return

        font = QFont()
        if cell.bordered:
            font.setPixelSize(max(8, int(t * self._GLYPH_RATIO)))
            color = self._theme.accent_text if cell.accent else self._theme.piece_text
        else:
            font.setPixelSize(max(7, int(t * self._LABEL_RATIO)))
            color = self._theme.label_text

        txt = QGraphicsSimpleTextItem(cell.text)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPen(QPen(Qt.PenStyle.NoPen))

        bounds = txt.boundingRect()
        txt.setPos(x + (t - bounds.width()) / 2, y + (t - bounds.height()) / 2)
        if cell.rotated:
            txt.setTransformOriginPoint(bounds.center())
            txt.setRotation(180)
        txt.setZValue(1)
        self.addItem(txt)
        self._text_items[(grid_row, grid_col)] = txt
