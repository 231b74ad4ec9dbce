"""
Server-side validation of form submissions.
"""

import re
from typing import Any, Dict, Mapping

from .models import FormDefinition


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _is_blank(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def coerce_values(form: FormDefinition, values: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Keep only the form's own fields and normalize checkbox values to booleans.
    
    HTML checkboxes submit "true"/"on" when ticked and nothing otherwise.
    """
    coerced: Dict[str, Any] = {}
    for field in form.fields:
        value = values.get(field.name)
        if field.type == "checkbox":
            if isinstance(value, str):
                value = value.strip().lower() in ("true", "on", "1", "yes")
            else:
                value = bool(value)
        elif value is None:
            value = ""
        coerced[field.name] = value
    return coerced


def validate_submission(form: FormDefinition, values: Mapping[str, Any]) -> Dict[str, str]:
    """
    Validate submitted values against a form definition.
    
    Args:
        form: The form definition
        values: Submitted values keyed by field name
        
    Returns:
        Error messages keyed by field name; empty when the submission is valid
    """
    errors: Dict[str, str] = {}
    for field in form.fields:
        value = values.get(field.name)
        if field.required and _is_blank(value):
            errors[field.name] = f"{field.label} is required"
            continue
        if field.type == "email" and isinstance(value, str) and value and not EMAIL_PATTERN.match(value):
            errors[field.name] = f"{field.label} must be a valid email"
    return errors
