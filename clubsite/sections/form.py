"""
Form renderer.

A form block either carries the populated form definition (fetched by the CMS
at depth 2) or only a reference to it by slug or id, in which case the
definition is loaded through the content source. Inactive or unavailable forms
render nothing.
"""

from typing import Any, Optional, Union
import logging

from pydantic import ValidationError

from ..models import FormBlock, FormDefinition, FormField
from ..richtext import render_document
from .context import RenderContext
from .markup import esc, heading, section


SUBMIT_LABEL = "Submit"
SELECT_PLACEHOLDER = "Select an option"


def form_reference(value: Any) -> Optional[Union[str, int]]:
    """The slug or id a form block points at, if any."""
    if isinstance(value, (str, int)) and not isinstance(value, bool):
        return value or None
    if isinstance(value, dict):
        for key in ("slug", "id", "_id"):
            if value.get(key):
                return value[key]
    return None


def resolve_form(block: FormBlock, context: RenderContext) -> Optional[FormDefinition]:
    """Use the populated form when present, otherwise fetch it by reference."""
    if isinstance(block.form, dict) and isinstance(block.form.get("fields"), list):
        try:
            return FormDefinition.model_validate(block.form)
        except ValidationError as e:
            logging.warning(f"Populated form could not be read: {e.error_count()} error(s)")
            return None

    reference = form_reference(block.form)
    if reference is None:
        logging.debug("Form block has no form reference")
        return None
    if context.content_source is None:
        logging.warning(f"No content source available to load form '{reference}'")
        return None
    return context.content_source.get_form(reference)


def _label(field: FormField, field_id: str) -> str:
    required = '<span class="required">*</span>' if field.required else ""
    return f'<label for="{field_id}">{esc(field.label)}{required}</label>'


def render_field(field: FormField) -> str:
    field_id = f"field-{esc(field.name)}"
    name = esc(field.name)
    required = " required" if field.required else ""
    placeholder = f' placeholder="{esc(field.placeholder)}"' if field.placeholder else ""

    if field.type == "textarea":
        control = f'<textarea id="{field_id}" name="{name}"{placeholder}{required}></textarea>'
    elif field.type == "select":
        options = [f'<option value="">{esc(field.placeholder or SELECT_PLACEHOLDER)}</option>']
        options.extend(
            f'<option value="{esc(option.value)}">{esc(option.label)}</option>' for option in field.options
        )
        control = f'<select id="{field_id}" name="{name}"{required}>{"".join(options)}</select>'
    elif field.type == "checkbox":
        control = f'<input id="{field_id}" name="{name}" type="checkbox" value="true"{required}>'
        return f'<div class="form-field form-check">{control}{_label(field, field_id)}</div>'
    else:
        control = f'<input id="{field_id}" name="{name}" type="{field.type}"{placeholder}{required}>'

    return f'<div class="form-field">{_label(field, field_id)}{control}</div>'


def render_form(block: FormBlock, context: RenderContext) -> Optional[str]:
    form = resolve_form(block, context)
    if form is None or not form.is_active:
        return None

    parts = []
    if block.title:
        parts.append(heading(2, block.title, "text-center"))
    description = render_document(block.description)
    if description:
        parts.append(f'<div class="form-description">{description}</div>')

    fields = "".join(render_field(field) for field in form.fields)
    action = f"/api/forms/{esc(form.slug or form.id)}"
    parts.append(
        f'<form method="post" action="{action}" class="cms-form" data-form-slug="{esc(form.slug)}">'
        f'{fields}<button type="submit" class="btn btn-primary">{SUBMIT_LABEL}</button></form>'
    )

    body = f'<div class="container narrow">{"".join(parts)}</div>'
    return section(body, "py-20 form", block.block_name)
