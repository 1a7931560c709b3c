"""Visual theme constants and QSS styles for Shogiban."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the shogi diagram."""

    background: QColor  # board area behind the cells
    cell_fill: QColor  # piece squares
    cell_border: QColor
    piece_text: QColor
    accent_text: QColor  # promoted pieces
    label_text: QColor  # file / rank numbers

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            background=QColor(0, 0, 0, 0),
            cell_fill=QColor(240, 217, 160),  # kaya wood
            cell_border=QColor(40, 40, 40),
            piece_text=QColor(20, 20, 20),
            accent_text=QColor(200, 30, 30),  # red
            label_text=QColor(90, 90, 90),
        )

    @classmethod
    def dark(cls) -> BoardTheme:
        return cls(
            background=QColor(0, 0, 0, 0),
            cell_fill=QColor(60, 60, 60),
            cell_border=QColor(200, 200, 200),
            piece_text=QColor(230, 230, 230),
            accent_text=QColor(255, 110, 110),
            label_text=QColor(160, 160, 160),
        )


THEMES: dict[str, BoardTheme] = {
    "Classic": BoardTheme.default(),
    "Dark": BoardTheme.dark(),
}


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QScrollArea, QScrollArea > QWidget > QWidget {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Noto Sans CJK JP", "Hiragino Sans", "Yu Gothic", sans-serif;
}

QLabel#handCaption {
    font-size: 12px;
}

QLabel#notationError {
    color: #ff8080;
    background: #3a2424;
    border: 1px solid #7a3a3a;
    border-radius: 4px;
    padding: 6px 10px;
    font-family: "Adwaita Mono", "Consolas", monospace;
}

QGraphicsView {
    background: transparent;
    border: none;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
