"""DocumentWindow — renders every ``shogi`` block of a document."""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtGui import QAction, QActionGroup
from PyQt6.QtWidgets import (
    QFileDialog,
    QLabel,
    QMainWindow,
    QMessageBox,
    QScrollArea,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from shogiban.core.errors import NotationError
from shogiban.host.document import iter_code_blocks
from shogiban.host.registry import BlockContext, CodeBlockRegistry
from shogiban.plugin import ShogiPlugin
from shogiban.settings import AppSettings
from shogiban.ui.block_widget import NotationErrorWidget, ShogiBlockWidget
from shogiban.ui.i18n import LANGUAGES, set_language, t
from shogiban.ui.styles.theme import THEMES, BoardTheme

_LOGGER = logging.getLogger(__name__)


class DocumentWindow(QMainWindow):
    """Main application window for Shogiban."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setMinimumSize(420, 480)
        self.resize(640, 800)

        self._settings = settings if settings is not None else AppSettings()
        self._registry = CodeBlockRegistry()
        self._plugin = ShogiPlugin(self._settings)
        self._plugin.onload(self._registry)

        self._document_path: Path | None = None
        self._board_count = 0
        self._error_count = 0

        self._setup_ui()
        self._setup_menu()
        self._apply_settings()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._scroll = QScrollArea()
        self._scroll.setWidgetResizable(True)
        self.setCentralWidget(self._scroll)

        self._content = QWidget()
        self._blocks_layout = QVBoxLayout(self._content)
        self._blocks_layout.setContentsMargins(12, 12, 12, 12)
        self._blocks_layout.setSpacing(12)
        self._blocks_layout.addStretch(1)
        self._scroll.setWidget(self._content)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel(t().status_ready)
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        s = t()

        # File menu
        self._menu_file = menu_bar.addMenu(s.menu_file)
        assert self._menu_file is not None

        self._act_open = QAction(s.menu_open, self)
        self._act_open.setShortcut("Ctrl+O")
        self._act_open.triggered.connect(self._on_open)
        self._menu_file.addAction(self._act_open)

        self._act_reload = QAction(s.menu_reload, self)
        self._act_reload.setShortcut("F5")
        self._act_reload.triggered.connect(self._on_reload)
        self._menu_file.addAction(self._act_reload)

        self._menu_file.addSeparator()

        self._act_quit = QAction(s.menu_quit, self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_file.addAction(self._act_quit)

        # View menu
        self._menu_view = menu_bar.addMenu(s.menu_view)
        assert self._menu_view is not None

        self._menu_theme = self._menu_view.addMenu(s.menu_theme)
        assert self._menu_theme is not None
        self._theme_group = QActionGroup(self)
        for name in THEMES:
            action = QAction(name, self)
            action.setCheckable(True)
            action.setChecked(name == self._settings.board_theme)
            action.triggered.connect(lambda _checked, n=name: self.set_board_theme(n))
            self._theme_group.addAction(action)
            self._menu_theme.addAction(action)

        self._menu_language = self._menu_view.addMenu(s.menu_language)
        assert self._menu_language is not None
        self._language_group = QActionGroup(self)
        for language in LANGUAGES:
            action = QAction(language, self)
            action.setCheckable(True)
            action.setChecked(language == self._settings.language)
            action.triggered.connect(
                lambda _checked, lang=language: self.set_language(lang)
            )
            self._language_group.addAction(action)
            self._menu_language.addAction(action)

    # ── Document handling ────────────────────────────────────────────────

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def registry(self) -> CodeBlockRegistry:
        return self._registry

    @property
    def document_path(self) -> Path | None:
        return self._document_path

    @property
    def board_count(self) -> int:
        return self._board_count

    @property
    def error_count(self) -> int:
        return self._error_count

    def load_document(self, path: Path) -> None:
        """Read *path* and render its blocks. I/O errors propagate."""
        text = path.read_text(encoding="utf-8")
        self._document_path = path
        self.render_document(text, path)

    def render_document(self, text: str, source_path: Path | None = None) -> None:
        """Replace the displayed blocks with those found in *text*."""
        self._clear_blocks()

        for block in iter_code_blocks(text):
            container = QWidget()
            context = BlockContext(source_path, block.line)
            try:
                handled = self._registry.process(block, container, context)
            except NotationError as exc:
                _LOGGER.warning(
                    "Cannot render %s block at %s line %d: %s",
                    block.language,
                    source_path or "<memory>",
                    block.line,
                    exc,
                )
                self._add_block_widget(NotationErrorWidget(exc))
                self._error_count += 1
                continue
            if not handled:
                continue
            self._add_block_widget(container)
            self._board_count += 1

        self._update_status()

    def _add_block_widget(self, widget: QWidget) -> None:
        # Keep the trailing stretch last.
        self._blocks_layout.insertWidget(self._blocks_layout.count() - 1, widget)

    def _clear_blocks(self) -> None:
        while self._blocks_layout.count() > 1:
            item = self._blocks_layout.takeAt(0)
            assert item is not None
            widget = item.widget()
            if widget is not None:
                widget.setParent(None)
                widget.deleteLater()
        self._board_count = 0
        self._error_count = 0

    def block_widgets(self) -> list[ShogiBlockWidget]:
        return self._content.findChildren(ShogiBlockWidget)

    def error_widgets(self) -> list[NotationErrorWidget]:
        return self._content.findChildren(NotationErrorWidget)

    def _on_open(self) -> None:
        file_path, _ = QFileDialog.getOpenFileName(
            self, t().open_title, "", t().open_filter
        )
        if not file_path:
            return
        self.open_path(Path(file_path))

    def _on_reload(self) -> None:
        if self._document_path is not None:
            self.open_path(self._document_path)

    def open_path(self, path: Path) -> None:
        """Load *path*, reporting read failures in a message box."""
        try:
            self.load_document(path)
        except (OSError, UnicodeDecodeError) as exc:
            _LOGGER.warning("Failed to open %s: %s", path, exc)
            QMessageBox.warning(self, t().open_title, t().open_failed.format(exc=exc))

    # ── Settings ─────────────────────────────────────────────────────────

    def set_board_theme(self, name: str) -> None:
        self._settings.board_theme = name
        self._apply_settings()

    def set_language(self, language: str) -> None:
        self._settings.language = language
        self._apply_settings()

    def _apply_settings(self) -> None:
        s = self._settings

        # Language must come first so all retranslate calls use the new locale
        set_language(s.language)
        self.retranslate_ui()

        theme = THEMES.get(s.board_theme, BoardTheme.default())
        for widget in self.block_widgets():
            widget.set_theme(theme)

    def retranslate_ui(self) -> None:
        """Update all translatable strings when the locale changes."""
        s = t()
        self.setWindowTitle(self._window_title())
        self._menu_file.setTitle(s.menu_file)
        self._act_open.setText(s.menu_open)
        self._act_reload.setText(s.menu_reload)
        self._act_quit.setText(s.menu_quit)
        self._menu_view.setTitle(s.menu_view)
        self._menu_theme.setTitle(s.menu_theme)
        self._menu_language.setTitle(s.menu_language)
        for widget in self.block_widgets():
            widget.retranslate_ui()
        for error_widget in self.error_widgets():
            error_widget.retranslate_ui()
        self._update_status()

    def _window_title(self) -> str:
        if self._document_path is None:
            return t().window_title
        return f"{self._document_path.name} — {t().window_title}"

    def _update_status(self) -> None:
        s = t()
        self.setWindowTitle(self._window_title())
        if self._document_path is None and not self._board_count + self._error_count:
            self._status_label.setText(s.status_ready)
            return
        name = self._document_path.name if self._document_path else "-"
        if not self._board_count + self._error_count:
            self._status_label.setText(s.status_no_blocks.format(name=name))
            return
        self._status_label.setText(
            s.status_loaded.format(
                name=name, boards=self._board_count, errors=self._error_count
            )
        )
