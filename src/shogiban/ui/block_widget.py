"""Widgets placed into a document in place of a ``shogi`` block."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from shogiban.core.errors import NotationError
from shogiban.core.position import Position
from shogiban.ui.board.board_view import BoardView
from shogiban.ui.diagram import build_diagram
from shogiban.ui.i18n import t
from shogiban.ui.styles.theme import BoardTheme


class ShogiBlockWidget(QWidget):
    """Board flanked by the gote hand caption above and sente below."""

    def __init__(
        self,
        position: Position,
        parent: QWidget | None = None,
        *,
        theme: BoardTheme | None = None,
        tile_size: int | None = None,
    ) -> None:
        super().__init__(parent)
        self._position = position

        self._gote_label = self._caption()
        self._board_view = BoardView(self)
        self._sente_label = self._caption()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 8, 0, 8)
        layout.setSpacing(4)
        layout.addWidget(self._gote_label, alignment=Qt.AlignmentFlag.AlignHCenter)
        layout.addWidget(self._board_view, alignment=Qt.AlignmentFlag.AlignHCenter)
        layout.addWidget(self._sente_label, alignment=Qt.AlignmentFlag.AlignHCenter)

        scene = self._board_view.board_scene
        if theme is not None:
            scene.set_theme(theme)
        if tile_size is not None:
            scene.set_tile_size(tile_size)
        self.retranslate_ui()

    @property
    def position(self) -> Position:
        return self._position

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def gote_caption(self) -> str:
        return self._gote_label.text()

    @property
    def sente_caption(self) -> str:
        return self._sente_label.text()

    def set_theme(self, theme: BoardTheme) -> None:
        self._board_view.board_scene.set_theme(theme)

    def retranslate_ui(self) -> None:
        """Rebuild the diagram so captions follow the active locale."""
        diagram = build_diagram(self._position)
        self._gote_label.setText(diagram.gote_caption)
        self._sente_label.setText(diagram.sente_caption)
        self._board_view.board_scene.set_diagram(diagram)

    @staticmethod
    def _caption() -> QLabel:
        label = QLabel()
        label.setObjectName("handCaption")
        return label


class NotationErrorWidget(QLabel):
    """Shown in place of a board when its notation fails to parse."""

    def __init__(self, error: NotationError, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.error = error
        self.setObjectName("notationError")
        self.setWordWrap(True)
        self.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        self.setText(t().block_error.format(msg=self.error))
