"""Host glue: finding code blocks in documents and dispatching them."""

from shogiban.host.document import CodeBlock, iter_code_blocks
from shogiban.host.registry import BlockContext, BlockHandler, CodeBlockRegistry

__all__ = [
    "BlockContext",
    "BlockHandler",
    "CodeBlock",
    "CodeBlockRegistry",
    "iter_code_blocks",
]
