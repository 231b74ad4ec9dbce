"""
Hero renderer: a photo header on the homepage, a gradient header elsewhere.
"""

from typing import Optional

from ..media import extract_image_url, sanitize_link
from ..models import HeroBlock
from ..richtext import extract_text
from .context import RenderContext
from .markup import heading, image, link_button, paragraph, section


HERO_IMAGE_ALT = "Προπόνηση γυμναστικής"


def render_hero(block: HeroBlock, context: RenderContext) -> Optional[str]:
    title = extract_text(block.title)
    subtitle = extract_text(block.subtitle)
    background = extract_image_url(block.background_image)
    cta_url = sanitize_link(block.cta_url)

    parts = []
    if title:
        parts.append(heading(1, title, "hero-title"))
    if subtitle:
        parts.append(paragraph(subtitle, "hero-subtitle"))

    if background:
        if block.cta_label and cta_url:
            parts.append(link_button(block.cta_label, cta_url, "btn btn-secondary"))
        body = (
            f'<div class="hero-media">{image(background, HERO_IMAGE_ALT, lazy=False)}</div>'
            f'<div class="container"><div class="hero-content">{"".join(parts)}</div></div>'
        )
        return section(body, "hero hero-image", block.block_name)

    body = f'<div class="container"><div class="hero-content text-center">{"".join(parts)}</div></div>'
    return section(body, "hero hero-gradient", block.block_name)
