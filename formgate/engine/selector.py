"""
Field Selector - ordered list of fields subject to validation.

The position of a field in the returned list is its scan index, which is the
key used in FeedbackResult.error_fields. Indices are per-scan: callers
correlate errors by field id, never by index.
"""
import logging
from typing import List

from formgate.config.constants import UNSELECTABLE_KINDS
from formgate.models.form_field import FormField
from formgate.presentation.document import FormDocument

logger = logging.getLogger(__name__)


def select_fields(document: FormDocument, target: str) -> List[FormField]:
    """
    Resolve *target* to the fields to validate.

    A target that is itself an <input> control is validated alone, whatever
    its kind. Otherwise the target is treated as a container and every
    input (except hidden/submit/reset), select and textarea below it is
    collected in document order.

    Args:
        document: Document holding the fields.
        target: Field id or container id.

    Returns:
        Ordered list of fields; empty when the target matches nothing.
    """
    form_field = document.get_field(target)
    if form_field is not None and form_field.is_input:
        return [form_field]

    if not document.has_container(target):
        logger.warning("Validation target '%s' is not a container or input", target)
        return []

    return [
        f for f in document.iter_fields(target)
        if f.kind not in UNSELECTABLE_KINDS
    ]
