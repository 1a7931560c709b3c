"""The ``shogi`` code block processor."""

from __future__ import annotations

import logging

from PyQt6.QtWidgets import QVBoxLayout, QWidget

from shogiban.core.notation import parse_position
from shogiban.host.registry import BlockContext, CodeBlockRegistry
from shogiban.settings import AppSettings
from shogiban.ui.block_widget import ShogiBlockWidget
from shogiban.ui.styles.theme import THEMES, BoardTheme

_LOGGER = logging.getLogger(__name__)

SHOGI_LANGUAGE = "shogi"


class ShogiPlugin:
    """Registers the ``shogi`` block handler with a host registry."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings if settings is not None else AppSettings()

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def onload(self, registry: CodeBlockRegistry) -> None:
        registry.register(SHOGI_LANGUAGE, self.draw_shogi_board)

    def onunload(self, registry: CodeBlockRegistry) -> None:
        registry.unregister(SHOGI_LANGUAGE)

    def draw_shogi_board(self, source: str, el: QWidget, ctx: BlockContext) -> None:
        """Parse *source* and append the rendered board to *el*.

        Raises :class:`~shogiban.core.errors.NotationError` without touching
        *el* when the notation is invalid.
        """
        position = parse_position(source)

        layout = el.layout()
        if layout is None:
            layout = QVBoxLayout(el)
            layout.setContentsMargins(0, 0, 0, 0)

        widget = ShogiBlockWidget(
            position,
            el,
            theme=THEMES.get(self._settings.board_theme, BoardTheme.default()),
            tile_size=self._settings.tile_size,
        )
        layout.addWidget(widget)
        _LOGGER.debug(
            "Rendered shogi block from %s line %d",
            ctx.source_path or "<memory>",
            ctx.line,
        )
