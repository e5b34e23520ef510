"""
Required-Presence Stage.

A field is required when it carries the required attribute (legacy empty
value or canonical "required"), the "required" class, or sits in a container
with the "required" class.
"""
import logging
from typing import List

from formgate.config.constants import REQUIRED_CLASS, STATUS_MISSING_REQUIRED
from formgate.models.feedback import ErrorField, FeedbackResult
from formgate.models.form_field import FormField
from formgate.presentation.document import FormDocument

logger = logging.getLogger(__name__)


def is_required(form_field: FormField, document: FormDocument) -> bool:
    return (
        form_field.has_required_attribute
        or form_field.has_required_class
        or REQUIRED_CLASS in document.parent_classes(form_field.field_id)
    )


def is_missing(form_field: FormField) -> bool:
    """Checkboxes are missing when unchecked; everything else when blank."""
    if form_field.is_checkbox:
        return not form_field.checked
    return not form_field.value.strip()


def check_required(
    fields: List[FormField],
    document: FormDocument,
    feedback: FeedbackResult,
) -> bool:
    """
    Record every required field that is missing.

    Returns:
        True when no field failed.
    """
    passed = True
    for index, form_field in enumerate(fields):
        if is_required(form_field, document) and is_missing(form_field):
            logger.debug("Required field '%s' is missing (index %d)", form_field.field_id, index)
            feedback.record(index, STATUS_MISSING_REQUIRED, ErrorField(form_field.field_id))
            passed = False
    return passed
