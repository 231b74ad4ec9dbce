"""
CMS record models for clubsite.

These mirror the records returned by the headless CMS REST API. Only the fields
the site reads are modelled; anything else in the payload is ignored.
"""

from typing import Any, Dict, List, Literal, Optional, get_args
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .coerce import loose_text, valid_items


class CMSRecord(BaseModel):
    """
    Base for records read from the CMS: camelCase on the wire, ids as strings.
    """
    
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    @field_validator("id", mode="before", check_fields=False)
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(int(value))
        return value


class Tenant(CMSRecord):
    """
    The organization whose content is being served.
    """
    
    id: str = Field(..., description="CMS identifier of the tenant")
    code: str = Field(..., description="Short code used to namespace block kinds")
    name: str = Field(default="", description="Display name")


class Homepage(CMSRecord):
    """
    The homepage record of a tenant.
    """
    
    id: str = Field(..., description="CMS identifier")
    sections: List[Any] = Field(default_factory=list, description="Ordered raw content blocks")
    status: str = Field(default="published", description="'draft' or 'published'")

    @field_validator("sections", mode="before")
    @classmethod
    def _sections_list(cls, value: Any) -> Any:
        return value if isinstance(value, list) else []


class Page(Homepage):
    """
    A content page addressed by slug.
    """
    
    title: str = Field(default="", description="Page title")
    slug: str = Field(default="", description="URL slug")


class Post(CMSRecord):
    """
    A news post.
    """
    
    id: str = Field(..., description="CMS identifier")
    title: str = Field(default="", description="Post title")
    slug: str = Field(default="", description="URL slug")
    excerpt: Optional[Any] = Field(default=None, description="Short summary (string or rich text)")
    content: Optional[Any] = Field(default=None, description="Body as a structured document")
    published_at: Optional[str] = Field(default=None, description="ISO timestamp of publication")
    featured_image: Optional[Any] = Field(default=None, description="Media reference for the cover image")
    status: str = Field(default="published", description="'draft' or 'published'")


class PostList(CMSRecord):
    """
    A page of posts in the CMS pagination envelope.
    """
    
    docs: List[Post] = Field(default_factory=list)
    total_docs: int = 0
    limit: int = 10
    total_pages: int = 0
    page: int = 1
    paging_counter: int = 0
    has_prev_page: bool = False
    has_next_page: bool = False
    prev_page: Optional[int] = None
    next_page: Optional[int] = None

    @classmethod
    def empty(cls, limit: int = 10, page: int = 1) -> "PostList":
        """An empty result used when the CMS cannot be reached."""
        return cls(limit=limit, page=page)


class FormOption(BaseModel):
    label: str = ""
    value: str = ""

    @field_validator("label", "value", mode="before")
    @classmethod
    def _text(cls, value: Any) -> Any:
        return loose_text(value, "")


FieldType = Literal["text", "email", "tel", "textarea", "number", "select", "checkbox"]
FIELD_TYPES = get_args(FieldType)


class FormField(CMSRecord):
    """
    One input of a CMS-defined form.
    """
    
    type: FieldType = Field(default="text", description="Input type")
    label: str = Field(default="", description="Human-readable label")
    name: str = Field(..., description="Submission key")
    required: bool = Field(default=False, description="Whether a value must be supplied")
    placeholder: Optional[str] = Field(default=None, description="Placeholder text")
    options: List[FormOption] = Field(default_factory=list, description="Choices for select fields")

    @field_validator("type", mode="before")
    @classmethod
    def _known_type(cls, value: Any) -> Any:
        # Input types the site has no widget for are shown as text inputs
        return value if value in FIELD_TYPES else "text"

    @field_validator("label", mode="before")
    @classmethod
    def _label_text(cls, value: Any) -> Any:
        return loose_text(value, "")

    @field_validator("placeholder", mode="before")
    @classmethod
    def _placeholder_text(cls, value: Any) -> Any:
        return loose_text(value)

    @field_validator("options", mode="before")
    @classmethod
    def _options_list(cls, value: Any) -> List[FormOption]:
        return valid_items(FormOption, value)


class FormDefinition(CMSRecord):
    """
    A form definition as served by the CMS.
    """
    
    id: str = Field(default="", description="CMS identifier")
    name: str = Field(default="", description="Form name")
    slug: str = Field(default="", description="Form slug used for submission")
    fields: List[FormField] = Field(default_factory=list, description="Ordered inputs")
    success_message: Optional[str] = Field(default=None, description="Message shown after submission")
    redirect_url: Optional[str] = Field(default=None, description="Where to send the visitor afterwards")
    status: str = Field(default="active", description="'active' or 'inactive'")

    @field_validator("fields", mode="before")
    @classmethod
    def _fields_list(cls, value: Any) -> List[FormField]:
        # Fields the site cannot render, such as one without a name, are left out
        return valid_items(FormField, value)

    @property
    def is_active(self) -> bool:
        return self.status == "active"


class FormSubmissionResult(CMSRecord):
    """
    Outcome of a form submission.
    """
    
    success: bool = Field(..., description="Whether the CMS accepted the submission")
    message: Optional[str] = Field(default=None, description="Message for the visitor")
    redirect_url: Optional[str] = Field(default=None, description="Optional follow-up URL")
    errors: Optional[Dict[str, str]] = Field(default=None, description="Per-field error messages")
