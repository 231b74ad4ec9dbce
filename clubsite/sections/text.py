"""
Renderers for the text-led blocks: welcome, rich text, quote, slogan and image+text.
"""

from typing import Optional

from ..media import extract_image_url
from ..models import ImageTextBlock, QuoteBlock, RichTextBlock, SloganBlock, WelcomeBlock
from ..richtext import extract_paragraphs, extract_text, render_document
from .context import RenderContext
from .markup import esc, heading, image, paragraph, section


DEFAULT_WELCOME_IMAGE = (
    "https://hebbkx1anhila5yf.public.blob.vercel-storage.com/"
    "IMG_6321-EPivdvbOD9wX1IPMd2dA4e3aZlVtiE.jpeg"
)
WELCOME_IMAGE_ALT = "Ελένη Δαρδαμάνη - Ιδρύτρια"


def render_welcome(block: WelcomeBlock, context: RenderContext) -> Optional[str]:
    portrait = extract_image_url(block.image) or DEFAULT_WELCOME_IMAGE
    text_parts = []
    if block.title:
        text_parts.append(heading(2, block.title))
    for text in extract_paragraphs(block.paragraphs):
        text_parts.append(paragraph(text, "lead"))

    body = (
        '<div class="container"><div class="grid grid-2">'
        f'<div class="welcome-image">{image(portrait, WELCOME_IMAGE_ALT)}</div>'
        f'<div class="welcome-text">{"".join(text_parts)}</div>'
        '</div></div>'
    )
    return section(body, "py-20 welcome", block.block_name)


def render_rich_text(block: RichTextBlock, context: RenderContext) -> Optional[str]:
    content = render_document(block.content)
    if not content:
        return None

    header = ""
    if block.title:
        subtitle = paragraph(block.subtitle, "subtitle") if block.subtitle else ""
        header = f'<div class="section-header">{heading(2, block.title)}{subtitle}</div>'

    body = f'<div class="container">{header}<div class="prose">{content}</div></div>'
    return section(body, f"{context.padding_class} rich-text", block.block_name)


def render_quote(block: QuoteBlock, context: RenderContext) -> Optional[str]:
    text = extract_text(block.text)
    if not text:
        return None

    body = f'<div class="container text-center"><blockquote>{paragraph(text, "quote")}</blockquote></div>'
    return section(body, f"{context.padding_class} quote", block.block_name)


def render_slogan(block: SloganBlock, context: RenderContext) -> Optional[str]:
    text = extract_text(block.text)
    if not text:
        return None

    # Each comma-separated phrase goes on its own line
    lines = "<br>".join(esc(part.strip()) for part in text.split(","))
    body = f'<div class="container text-center"><p class="slogan">{lines}</p></div>'
    return section(body, f"{context.padding_class} slogan", block.block_name)


def render_image_text(block: ImageTextBlock, context: RenderContext) -> Optional[str]:
    title = block.title or ""
    paragraphs = extract_paragraphs(block.content)
    if not title and not paragraphs:
        return None

    picture = extract_image_url(block.image)
    text_parts = [heading(2, title)] if title else []
    text_parts.extend(paragraph(text, "lead") for text in paragraphs)
    text_column = f'<div class="image-text-text">{"".join(text_parts)}</div>'

    columns = [text_column]
    if picture:
        image_column = f'<div class="image-text-image">{image(picture, block.image_alt or title)}</div>'
        if block.image_position == "right":
            columns.append(image_column)
        else:
            columns.insert(0, image_column)

    body = f'<div class="container"><div class="grid grid-2">{"".join(columns)}</div></div>'
    return section(body, f"{context.padding_class} image-text", block.block_name)
