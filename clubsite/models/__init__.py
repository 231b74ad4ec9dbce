"""Data models for clubsite."""

from .richtext import TextNode, ElementNode, RootNode, RichTextDocument
from .cms import (
    Tenant,
    Homepage,
    Page,
    Post,
    PostList,
    FormOption,
    FormField,
    FormDefinition,
    FormSubmissionResult,
)
from .blocks import (
    ContentBlock,
    UnknownBlock,
    HeroBlock,
    WelcomeBlock,
    ProgramsGridBlock,
    ImageGalleryBlock,
    NewsGridBlock,
    SponsorsBlock,
    CtaBlock,
    RichTextBlock,
    QuoteBlock,
    SloganBlock,
    ImageTextBlock,
    ProgramDetailBlock,
    FormBlock,
    SectionBlock,
)

__all__ = [
    "TextNode",
    "ElementNode",
    "RootNode",
    "RichTextDocument",
    "Tenant",
    "Homepage",
    "Page",
    "Post",
    "PostList",
    "FormOption",
    "FormField",
    "FormDefinition",
    "FormSubmissionResult",
    "ContentBlock",
    "UnknownBlock",
    "HeroBlock",
    "WelcomeBlock",
    "ProgramsGridBlock",
    "ImageGalleryBlock",
    "NewsGridBlock",
    "SponsorsBlock",
    "CtaBlock",
    "RichTextBlock",
    "QuoteBlock",
    "SloganBlock",
    "ImageTextBlock",
    "ProgramDetailBlock",
    "FormBlock",
    "SectionBlock",
]
