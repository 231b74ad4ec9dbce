"""
Lenient coercion helpers shared by the CMS and block models.

CMS editors can leave almost anything in a field. These helpers let a model
absorb a bad value at the level of the single field or list item instead of
rejecting the whole record.
"""

from typing import Any, List, Optional, Type, TypeVar
import logging

from pydantic import BaseModel, ValidationError


ModelT = TypeVar("ModelT", bound=BaseModel)


def loose_text(value: Any, default: Optional[str] = None) -> Optional[str]:
    """
    Coerce a scalar into text.

    Strings pass through, numbers become their string form and anything else
    becomes ``default``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return default


def valid_items(model: Type[ModelT], value: Any) -> List[ModelT]:
    """
    Validate each list item against ``model``, dropping the ones that fail.

    A non-list collapses to an empty list.
    """
    if not isinstance(value, list):
        return []

    items = []
    for item in value:
        if isinstance(item, model):
            items.append(item)
            continue
        if not isinstance(item, dict):
            continue
        try:
            items.append(model.model_validate(item))
        except ValidationError as e:
            logging.debug(f"Dropping invalid {model.__name__}: {e.error_count()} error(s)")
    return items
