"""Registry of named code-block processors."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeAlias

from shogiban.host.document import CodeBlock

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BlockContext:
    """Where a block came from."""

    source_path: Path | None = None
    line: int = 0


# (raw block text, attachment point, context) -> None
BlockHandler: TypeAlias = Callable[[str, Any, BlockContext], None]


class CodeBlockRegistry:
    """Maps block languages to handlers that populate an attachment point.

    Handlers run synchronously and must finish populating the container
    before returning.  Exceptions raised by a handler propagate to the
    caller of :meth:`process`.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, BlockHandler] = {}

    def register(self, language: str, handler: BlockHandler) -> None:
        key = language.lower()
        if key in self._handlers:
            raise ValueError(f"A handler is already registered for {language!r}")
        self._handlers[key] = handler
        _LOGGER.debug("Registered code block handler for %r", key)

    def unregister(self, language: str) -> None:
        if self._handlers.pop(language.lower(), None) is not None:
            _LOGGER.debug("Unregistered code block handler for %r", language)

    def handler_for(self, language: str) -> BlockHandler | None:
        return self._handlers.get(language.lower())

    @property
    def languages(self) -> list[str]:
        return sorted(self._handlers)

    def process(
        self,
        block: CodeBlock,
        container: Any,
        context: BlockContext | None = None,
    ) -> bool:
        """Run the handler for *block*; return ``False`` if none is registered."""
        handler = self.handler_for(block.language)
        if handler is None:
            return False
        if context is None:
            context = BlockContext(line=block.line)
        handler(block.source, container, context)
        return True
