"""
Rendering context threaded from the page into each block renderer.
"""

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..content.base import ContentSource


# Pages whose leading sections are rendered with reduced padding
COMPACT_PAGES = {"about"}
COMPACT_SECTION_LIMIT = 5


@dataclass(frozen=True)
class PageContext:
    """
    Where a list of sections is being rendered.
    """
    page_slug: Optional[str] = None
    is_homepage: bool = False


@dataclass(frozen=True)
class RenderContext:
    """
    What a single block renderer knows about its surroundings.
    """
    page: PageContext
    section_index: int
    content_source: Optional["ContentSource"] = None

    @property
    def compact(self) -> bool:
        """Whether this block sits among the leading sections of a compact page."""
        return self.page.page_slug in COMPACT_PAGES and self.section_index < COMPACT_SECTION_LIMIT

    @property
    def padding_class(self) -> str:
        return "py-4" if self.compact else "py-20"
