"""
Call-to-action banner renderer.
"""

from typing import Optional

from ..media import sanitize_link
from ..models import CtaBlock
from ..richtext import extract_text
from .context import RenderContext
from .markup import heading, link_button, paragraph, section


def render_cta(block: CtaBlock, context: RenderContext) -> Optional[str]:
    parts = []
    if block.title:
        parts.append(heading(2, block.title))
    description = extract_text(block.description)
    if description:
        parts.append(paragraph(description, "lead"))
    url = sanitize_link(block.button_url)
    if block.button_label and url:
        parts.append(link_button(block.button_label, url, "btn btn-light"))

    # The banner is kept even when empty so the page rhythm does not shift
    body = f'<div class="container"><div class="cta-banner text-center">{"".join(parts)}</div></div>'
    return section(body, "py-20 cta", block.block_name)
