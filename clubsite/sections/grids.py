"""
Renderers for the card grids: programs, gallery, news and sponsors.
"""

from typing import Optional

from ..media import extract_image_url, sanitize_link
from ..models import ImageGalleryBlock, NewsGridBlock, ProgramsGridBlock, SponsorsBlock
from ..richtext import extract_text
from .context import RenderContext
from .markup import esc, heading, image, link_button, paragraph, section


DEFAULT_PROGRAM_BUTTON_LABEL = "Μάθετε Περισσότερα"
DEFAULT_NEWS_BUTTON_LABEL = "Όλα τα Νέα"
DEFAULT_NEWS_BUTTON_URL = "/news"
DEFAULT_READ_MORE_LABEL = "Διαβάστε περισσότερα"
SPONSOR_PLACEHOLDER_COUNT = 6


def _header(title: Optional[str], subtitle: Optional[str]) -> str:
    if not title and not subtitle:
        return ""
    parts = []
    if title:
        parts.append(heading(2, title))
    if subtitle:
        parts.append(paragraph(subtitle, "subtitle"))
    return f'<div class="section-header text-center">{"".join(parts)}</div>'


def _grid(title: Optional[str], subtitle: Optional[str], cards, css_class: str, footer: str = "") -> str:
    return (
        f'<div class="container">{_header(title, subtitle)}'
        f'<div class="grid {css_class}">{"".join(cards)}</div>{footer}</div>'
    )


def sponsor_placeholder_name(index: int) -> str:
    return f"Χορηγός {index + 1}"


def render_programs_grid(block: ProgramsGridBlock, context: RenderContext) -> Optional[str]:
    if not block.programs:
        return None

    cards = []
    for program in block.programs:
        title = program.title or ""
        parts = []
        picture = extract_image_url(program.image)
        if picture:
            parts.append(f'<div class="card-image">{image(picture, program.image_alt or title)}</div>')
        body = [heading(3, title)] if title else []
        description = extract_text(program.description)
        if description:
            body.append(paragraph(description))
        url = sanitize_link(program.button_url)
        if url:
            body.append(link_button(program.button_label or DEFAULT_PROGRAM_BUTTON_LABEL, url, "btn btn-primary"))
        parts.append(f'<div class="card-body">{"".join(body)}</div>')
        cards.append(f'<article class="card program-card">{"".join(parts)}</article>')

    return section(_grid(block.title, block.subtitle, cards, "grid-4"), "py-20 programs-grid", block.block_name)


def render_image_gallery(block: ImageGalleryBlock, context: RenderContext) -> Optional[str]:
    if not block.images:
        return None

    figures = []
    for item in block.images:
        picture = extract_image_url(item.image)
        if not picture:
            continue
        caption_parts = []
        if item.title:
            caption_parts.append(heading(3, item.title))
        description = extract_text(item.description)
        if description:
            caption_parts.append(paragraph(description))
        caption = f'<figcaption>{"".join(caption_parts)}</figcaption>' if caption_parts else ""
        figures.append(f'<figure class="gallery-item">{image(picture, item.image_alt or item.title or "")}{caption}</figure>')

    if not figures:
        return None
    return section(_grid(block.title, block.subtitle, figures, "grid-3"), "py-20 image-gallery", block.block_name)


def render_news_grid(block: NewsGridBlock, context: RenderContext) -> Optional[str]:
    if not block.news_items:
        return None

    button_url = sanitize_link(block.button_url or DEFAULT_NEWS_BUTTON_URL)
    cards = []
    for item in block.news_items:
        parts = []
        picture = extract_image_url(item.image)
        if picture:
            parts.append(f'<div class="card-image">{image(picture, item.image_alt or item.title or "")}</div>')
        body = []
        if item.date:
            body.append(f'<time class="news-date">{esc(item.date)}</time>')
        if item.title:
            body.append(heading(3, item.title))
        excerpt = extract_text(item.excerpt)
        if excerpt:
            body.append(paragraph(excerpt))
        read_more_url = sanitize_link(item.read_more_url) or button_url
        if read_more_url:
            body.append(link_button(item.read_more_label or DEFAULT_READ_MORE_LABEL, read_more_url, "read-more"))
        parts.append(f'<div class="card-body">{"".join(body)}</div>')
        cards.append(f'<article class="card news-card">{"".join(parts)}</article>')

    footer = ""
    if button_url:
        label = block.button_label or DEFAULT_NEWS_BUTTON_LABEL
        footer = f'<div class="text-center">{link_button(label, button_url, "btn btn-primary")}</div>'
    return section(_grid(block.title, block.subtitle, cards, "grid-3", footer), "py-20 news-grid", block.block_name)


def render_sponsors(block: SponsorsBlock, context: RenderContext) -> Optional[str]:
    tiles = []
    if block.sponsors:
        for index, sponsor in enumerate(block.sponsors):
            name = sponsor.name or sponsor_placeholder_name(index)
            logo = extract_image_url(sponsor.logo)
            inner = image(logo, name, "object-contain") if logo else f'<span>{esc(name)}</span>'
            tiles.append(f'<div class="sponsor">{inner}</div>')
    else:
        # No sponsors configured yet, keep the grid shape with named placeholders
        for index in range(SPONSOR_PLACEHOLDER_COUNT):
            tiles.append(f'<div class="sponsor placeholder"><span>{esc(sponsor_placeholder_name(index))}</span></div>')

    return section(_grid(block.title, block.subtitle, tiles, "grid-6"), "py-20 sponsors", block.block_name)
