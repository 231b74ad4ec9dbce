"""
Section renderer for clubsite.

Turns the ordered, untyped block list of a page into rendered HTML sections.
Every block is validated and rendered on its own: a malformed, foreign or
failing block is skipped and reported, and the remaining blocks still render.
"""

import json
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional, TYPE_CHECKING

from pydantic import ValidationError

from ..config import config
from .context import PageContext, RenderContext
from .diagnostics import NullDiagnostics, RenderDiagnostics
from .registry import BlockRegistry, block_registry

if TYPE_CHECKING:
    from ..content.base import ContentSource


# Field names that may carry a block's kind, in priority order
BLOCK_KIND_FIELDS = ["blockType", "block_type", "type"]


@dataclass(frozen=True)
class RenderedSection:
    """
    One successfully rendered block.
    """
    kind: str
    index: int
    html: str


def resolve_block_kind(block: Mapping[str, Any]) -> Optional[str]:
    """
    Read the kind of a raw block from the first field holding a non-empty string.

    Returns:
        The kind, or None if no field names one
    """
    for field in BLOCK_KIND_FIELDS:
        value = block.get(field)
        if isinstance(value, str) and value:
            return value
    return None


def default_diagnostics_factory() -> Callable[[], RenderDiagnostics]:
    """Choose logging diagnostics in development and silent ones in production."""
    return RenderDiagnostics if config.is_development else NullDiagnostics


def _serialize(block: Any) -> str:
    try:
        return json.dumps(block, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return repr(block)


class SectionRenderer:
    """
    Renders page sections through a block registry.
    """
    
    def __init__(self, registry: Optional[BlockRegistry] = None,
                 diagnostics_factory: Optional[Callable[[], RenderDiagnostics]] = None,
                 content_source: Optional["ContentSource"] = None):
        """
        Initialize the section renderer.
        
        Args:
            registry: Block registry to dispatch through (defaults to the global one)
            diagnostics_factory: Builds the diagnostics for each render pass
                (defaults to the configured environment's choice)
            content_source: Passed to renderers that load related content
        """
        self.registry = registry or block_registry
        self.diagnostics_factory = diagnostics_factory or default_diagnostics_factory()
        self.content_source = content_source

    def render(self, sections: Any, tenant_code: str,
               page: Optional[PageContext] = None) -> List[RenderedSection]:
        """
        Render an ordered list of raw blocks.
        
        Args:
            sections: The raw block list (None, non-lists and empty lists render nothing)
            tenant_code: Only kinds prefixed by '<tenant_code>.' are rendered
            page: Where the sections are rendered
            
        Returns:
            The rendered sections in input order
        """
        if not isinstance(sections, list) or not sections:
            return []

        page = page or PageContext()
        diagnostics = self.diagnostics_factory()
        prefix = f"{tenant_code}."
        rendered: List[RenderedSection] = []

        for index, block in enumerate(sections):
            if not isinstance(block, Mapping):
                diagnostics.warn_once(
                    f"invalid-section-{index}",
                    f"Invalid section at index {index}: expected an object, got {type(block).__name__}",
                )
                continue

            kind = resolve_block_kind(block)
            if kind is None:
                diagnostics.warn_once(
                    f"missing-blocktype-{index}",
                    f"Section at index {index} has no block type",
                )
                continue

            if not kind.startswith(prefix):
                diagnostics.warn_once(
                    f"tenant-mismatch-{kind}",
                    f"Block type '{kind}' does not belong to tenant '{tenant_code}'",
                )
                continue

            spec = self.registry.get(kind)
            if spec is None:
                diagnostics.warn_once(
                    f"no-renderer-{kind}",
                    f"No renderer registered for block type '{kind}'",
                )
                continue

            context = RenderContext(page=page, section_index=index, content_source=self.content_source)
            try:
                parsed = self.registry.parse(kind, block)
                html = spec.render(parsed, context)
            except ValidationError as e:
                diagnostics.error(f"Invalid fields in section {index} ({kind}): {e}; block: {_serialize(block)}")
                continue
            except Exception as e:
                diagnostics.error(f"Error rendering section {index} ({kind}): {e}; block: {_serialize(block)}")
                continue

            if html:
                rendered.append(RenderedSection(kind=kind, index=index, html=html))

        return rendered

    def render_html(self, sections: Any, tenant_code: str, page: Optional[PageContext] = None) -> str:
        """Render the sections and join them into one HTML string."""
        return "\n".join(section.html for section in self.render(sections, tenant_code, page))
