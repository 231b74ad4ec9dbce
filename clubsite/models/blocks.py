"""
Content block models for clubsite.

Raw CMS blocks are untyped mappings discriminated by a namespaced kind string
("<tenant>.<blockName>"). Each known block name has a model here; the block
registry parses raw mappings into these models before rendering. Kinds with no
model parse to ``UnknownBlock``.
"""

from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from .coerce import loose_text, valid_items


class BlockModel(BaseModel):
    """
    Base for all block and block-item models: camelCase on the wire, extras ignored.

    Text fields (annotated ``Optional[str]``) take numbers as their string form
    and fall back to None for any other non-string value.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _loose_text_fields(cls, value: Any, info: ValidationInfo) -> Any:
        field = cls.model_fields.get(info.field_name)
        if field is None or field.annotation != Optional[str]:
            return value
        return loose_text(value)


class ContentBlock(BlockModel):
    """
    Common base of every parsed content block.
    """
    
    kind: str = Field(
        default="",
        description="The namespaced block kind, e.g. 'kallitechnia.hero'"
    )

    @property
    def block_name(self) -> str:
        """The kind without its tenant prefix."""
        return self.kind.split('.', 1)[-1]


class UnknownBlock(ContentBlock):
    """
    A block whose kind has no registered renderer.
    """
    
    raw: Dict[str, Any] = Field(
        default_factory=dict,
        description="The raw fields of the block, kept for diagnostics"
    )


# Block items

class ProgramCard(BlockModel):
    title: Optional[str] = None
    description: Optional[Any] = None
    image: Optional[Any] = None
    image_alt: Optional[str] = None
    button_label: Optional[str] = None
    button_url: Optional[str] = None


class GalleryItem(BlockModel):
    image: Optional[Any] = None
    image_alt: Optional[str] = None
    title: Optional[str] = None
    description: Optional[Any] = None


class NewsItem(BlockModel):
    title: Optional[str] = None
    date: Optional[str] = None
    excerpt: Optional[Any] = None
    image: Optional[Any] = None
    image_alt: Optional[str] = None
    read_more_label: Optional[str] = None
    read_more_url: Optional[str] = None


class Sponsor(BlockModel):
    logo: Optional[Any] = None
    name: Optional[str] = None


class ScheduleSlot(BlockModel):
    day: Optional[str] = None
    time: Optional[str] = None
    level: Optional[str] = None


# Blocks

class HeroBlock(ContentBlock):
    """Full-width page header, with a background image on the homepage."""
    title: Optional[Any] = None
    subtitle: Optional[Any] = None
    background_image: Optional[Any] = None
    cta_label: Optional[str] = None
    cta_url: Optional[str] = None


class WelcomeBlock(ContentBlock):
    """Founder's welcome: portrait plus a few paragraphs."""
    image: Optional[Any] = None
    title: Optional[str] = None
    paragraphs: Optional[Any] = None


class ProgramsGridBlock(ContentBlock):
    """Cards linking to the club's training programs."""
    title: Optional[str] = None
    subtitle: Optional[str] = None
    programs: List[ProgramCard] = Field(default_factory=list)

    @field_validator("programs", mode="before")
    @classmethod
    def _programs_list(cls, value: Any) -> List[ProgramCard]:
        return valid_items(ProgramCard, value)


class ImageGalleryBlock(ContentBlock):
    """Grid of captioned photos."""
    title: Optional[str] = None
    subtitle: Optional[str] = None
    images: List[GalleryItem] = Field(default_factory=list)

    @field_validator("images", mode="before")
    @classmethod
    def _images_list(cls, value: Any) -> List[GalleryItem]:
        return valid_items(GalleryItem, value)


class NewsGridBlock(ContentBlock):
    """Latest news cards with a link to the news index."""
    title: Optional[str] = None
    subtitle: Optional[str] = None
    button_label: Optional[str] = None
    button_url: Optional[str] = None
    news_items: List[NewsItem] = Field(default_factory=list)

    @field_validator("news_items", mode="before")
    @classmethod
    def _news_items_list(cls, value: Any) -> List[NewsItem]:
        return valid_items(NewsItem, value)


class SponsorsBlock(ContentBlock):
    """Sponsor logos; placeholders when none are configured."""
    title: Optional[str] = None
    subtitle: Optional[str] = None
    sponsors: List[Sponsor] = Field(default_factory=list)

    @field_validator("sponsors", mode="before")
    @classmethod
    def _sponsors_list(cls, value: Any) -> List[Sponsor]:
        return valid_items(Sponsor, value)


class CtaBlock(ContentBlock):
    """Call-to-action banner."""
    title: Optional[str] = None
    description: Optional[Any] = None
    button_label: Optional[str] = None
    button_url: Optional[str] = None


class RichTextBlock(ContentBlock):
    """Free-form formatted text under an optional heading."""
    title: Optional[str] = None
    subtitle: Optional[str] = None
    content: Optional[Any] = None


class QuoteBlock(ContentBlock):
    text: Optional[Any] = None


class SloganBlock(ContentBlock):
    text: Optional[Any] = None


class ImageTextBlock(ContentBlock):
    """Image beside a column of paragraphs."""
    title: Optional[str] = None
    content: Optional[Any] = None
    image: Optional[Any] = None
    image_alt: Optional[str] = None
    image_position: Optional[str] = "left"


class ProgramDetailBlock(ContentBlock):
    """Full description of one program: schedule, coach and downloadable timetable."""
    title: Optional[str] = None
    image: Optional[Any] = None
    image_position: Optional[str] = "left"
    description: Optional[Any] = None
    schedule: List[ScheduleSlot] = Field(default_factory=list)
    coach_name: Optional[str] = None
    coach_photo: Optional[Any] = None
    coach_studies: Optional[str] = None
    coach_bio: Optional[Any] = None
    additional_info: Optional[Any] = None
    download_label: Optional[str] = None
    download_url: Optional[Any] = None

    @field_validator("schedule", mode="before")
    @classmethod
    def _schedule_list(cls, value: Any) -> List[ScheduleSlot]:
        return valid_items(ScheduleSlot, value)


class FormBlock(ContentBlock):
    """A CMS-defined form, either populated in place or referenced by slug/id."""
    form: Optional[Any] = None
    title: Optional[str] = None
    description: Optional[Any] = None


SectionBlock = Union[
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
    UnknownBlock,
]
