"""
Block registry for clubsite.

This module maps every namespaced block kind to the model that parses its raw
fields and the function that renders it. The default registry is built once at
import and is treated as read-only by the section renderer.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Type

from ..models import (
    ContentBlock,
    CtaBlock,
    FormBlock,
    HeroBlock,
    ImageGalleryBlock,
    ImageTextBlock,
    NewsGridBlock,
    ProgramDetailBlock,
    ProgramsGridBlock,
    QuoteBlock,
    RichTextBlock,
    SloganBlock,
    SponsorsBlock,
    UnknownBlock,
    WelcomeBlock,
)
from .context import RenderContext
from .cta import render_cta
from .form import render_form
from .grids import render_image_gallery, render_news_grid, render_programs_grid, render_sponsors
from .hero import render_hero
from .program_detail import render_program_detail
from .text import render_image_text, render_quote, render_rich_text, render_slogan, render_welcome


DEFAULT_TENANT = "kallitechnia"

BlockRenderFn = Callable[[Any, RenderContext], Optional[str]]


@dataclass(frozen=True)
class BlockSpec:
    """
    How one block kind is parsed and rendered.
    """
    kind: str
    model: Type[ContentBlock]
    render: BlockRenderFn
    description: str = ""


class BlockRegistry:
    """
    Registry of all block kinds the site knows how to render.
    """
    
    def __init__(self, tenant_code: str = DEFAULT_TENANT):
        """Initialize the registry with the default block kinds of a tenant."""
        self.tenant_code = tenant_code
        self._specs: Dict[str, BlockSpec] = {}
        self._register_default_renderers()

    def _register_default_renderers(self):
        """Register the block kinds used by the club site."""
        defaults = [
            ("hero", HeroBlock, render_hero, "Page header with optional background image"),
            ("welcome", WelcomeBlock, render_welcome, "Founder's welcome with portrait"),
            ("programsGrid", ProgramsGridBlock, render_programs_grid, "Grid of program cards"),
            ("imageGallery", ImageGalleryBlock, render_image_gallery, "Captioned photo gallery"),
            ("newsGrid", NewsGridBlock, render_news_grid, "Latest news cards"),
            ("sponsors", SponsorsBlock, render_sponsors, "Sponsor logos"),
            ("cta", CtaBlock, render_cta, "Call-to-action banner"),
            ("ctaBanner", CtaBlock, render_cta, "Call-to-action banner"),
            ("richText", RichTextBlock, render_rich_text, "Formatted free text"),
            ("quote", QuoteBlock, render_quote, "Highlighted quotation"),
            ("slogan", SloganBlock, render_slogan, "Comma-separated slogan lines"),
            ("imageText", ImageTextBlock, render_image_text, "Image beside paragraphs"),
            ("programDetail", ProgramDetailBlock, render_program_detail, "Program schedule and coach"),
            ("form", FormBlock, render_form, "CMS-defined form"),
        ]
        for name, model, render, description in defaults:
            self.register(BlockSpec(
                kind=f"{self.tenant_code}.{name}",
                model=model,
                render=render,
                description=description,
            ))

    def register(self, spec: BlockSpec) -> None:
        """
        Register a block kind.
        
        Args:
            spec: The block specification to register
            
        Raises:
            ValueError: If the kind is not namespaced as '<tenant>.<name>'
        """
        if "." not in spec.kind:
            raise ValueError(f"Block kind '{spec.kind}' must be namespaced as '<tenant>.<name>'")
        self._specs[spec.kind] = spec

    def get(self, kind: str) -> Optional[BlockSpec]:
        """
        Get the specification of a block kind.
        
        Args:
            kind: The full namespaced kind
            
        Returns:
            The block specification, or None if not registered
        """
        return self._specs.get(kind)

    def list_kinds(self) -> List[str]:
        """Get all registered kinds."""
        return list(self._specs.keys())

    def parse(self, kind: str, raw: Mapping[str, Any]) -> ContentBlock:
        """
        Parse a raw block into its model.
        
        Unregistered kinds parse to UnknownBlock.
        
        Raises:
            pydantic.ValidationError: If the fields do not fit the kind's model
        """
        spec = self.get(kind)
        if spec is None:
            return UnknownBlock(kind=kind, raw=dict(raw))
        fields = {key: value for key, value in raw.items() if key != "kind"}
        return spec.model.model_validate({**fields, "kind": kind})

    def __contains__(self, kind: str) -> bool:
        return kind in self._specs

    def __len__(self) -> int:
        return len(self._specs)


# Global registry instance
block_registry = BlockRegistry()
