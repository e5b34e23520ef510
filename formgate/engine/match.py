"""
Match Stage - cross-field equality (e.g. password confirmation).
"""
import logging
from typing import List

from formgate.config.constants import STATUS_MISMATCH
from formgate.models.feedback import ErrorField, FeedbackResult
from formgate.models.form_field import FormField
from formgate.presentation.document import FormDocument

logger = logging.getLogger(__name__)


def check_match(
    fields: List[FormField],
    document: FormDocument,
    feedback: FeedbackResult,
) -> bool:
    """
    Compare each field declaring a match target with that target.

    The target is looked up in the whole document, not only among the
    selected fields. Unknown targets and fields without one pass.

    Returns:
        True when no pair differed.
    """
    passed = True
    for index, form_field in enumerate(fields):
        other = document.get_field(form_field.match_field)
        if other is None:
            continue
        if form_field.value != other.value:
            logger.debug(
                "Field '%s' does not match '%s' (index %d)",
                form_field.field_id, other.field_id, index,
            )
            feedback.record(
                index,
                STATUS_MISMATCH,
                ErrorField(form_field.field_id, other.field_id),
            )
            passed = False
    return passed
