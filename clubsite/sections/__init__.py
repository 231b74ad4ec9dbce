"""Block registry and section rendering."""

from .context import PageContext, RenderContext
from .diagnostics import NullDiagnostics, RenderDiagnostics
from .registry import BlockRegistry, BlockSpec, block_registry
from .renderer import BLOCK_KIND_FIELDS, RenderedSection, SectionRenderer, resolve_block_kind

__all__ = [
    "PageContext",
    "RenderContext",
    "RenderDiagnostics",
    "NullDiagnostics",
    "BlockRegistry",
    "BlockSpec",
    "block_registry",
    "BLOCK_KIND_FIELDS",
    "RenderedSection",
    "SectionRenderer",
    "resolve_block_kind",
]
