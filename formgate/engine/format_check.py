"""
Format Stage - pattern resolution, telephone normalization and Luhn checksum.

Pattern resolution order:
    1. Explicit pattern declared on the field (verbatim)
    2. Built-in pattern for the declared kind (email, number, password, tel)
    3. Latin-1 fallback for every other kind

Telephone values are stripped to digits and written back to the document
before matching. Credit-card fields are additionally checked with the Luhn
checksum; both failures record status "invalid" at the field's scan index.
"""
import logging
import re
from typing import List, Optional

import numpy as np

from formgate.config.constants import (
    DEFAULT_PATTERN,
    FORMAT_EXEMPT_KINDS,
    KIND_PATTERNS,
    KIND_TEL,
    STATUS_INVALID,
)
from formgate.models.feedback import ErrorField, FeedbackResult
from formgate.models.form_field import FormField
from formgate.presentation.document import FormDocument

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"[^0-9]")


def strip_non_digits(value: str) -> str:
    return _NON_DIGITS.sub("", value)


def resolve_pattern(form_field: FormField) -> str:
    """Explicit pattern first, then the kind's built-in pattern, then Latin-1."""
    if form_field.has_explicit_pattern:
        return form_field.pattern
    return KIND_PATTERNS.get(form_field.kind, DEFAULT_PATTERN)


def matches_pattern(value: str, pattern: str) -> bool:
    """
    True when *value* fully matches *pattern*.

    A pattern that does not compile never matches.
    """
    try:
        compiled = re.compile(pattern)
    except re.error as e:
        logger.warning("Invalid format pattern '%s': %s", pattern, e)
        return False
    return compiled.fullmatch(value) is not None


def luhn_checksum_valid(number: str) -> bool:
    """
    Luhn mod-10 check over the digits of *number*.

    Digits are right-aligned: the digit at index i is doubled when
    i % 2 == len(digits) % 2, doubled values above 9 lose 9, and the total
    must be a multiple of 10. A value without digits passes.
    """
    digits = np.array([int(c) for c in strip_non_digits(number)], dtype=np.int64)
    doubled = np.arange(digits.size) % 2 == digits.size % 2
    digits = np.where(doubled, digits * 2, digits)
    digits = np.where(digits > 9, digits - 9, digits)
    return int(digits.sum()) % 10 == 0


def normalize_value(form_field: FormField, document: FormDocument) -> str:
    """Telephone values are reduced to digits and written back; others pass through."""
    if form_field.kind == KIND_TEL and not form_field.has_explicit_pattern:
        stripped = strip_non_digits(form_field.value)
        document.set_value(form_field.field_id, stripped)
        return stripped
    return form_field.value


def format_error(form_field: FormField, document: FormDocument) -> Optional[str]:
    """
    Run the pattern and Luhn checks for one field.

    Returns:
        A short reason when the field fails, else None.
    """
    reason: Optional[str] = None
    value = form_field.value

    if form_field.kind not in FORMAT_EXEMPT_KINDS and value:
        value = normalize_value(form_field, document)
        pattern = resolve_pattern(form_field)
        if not matches_pattern(value, pattern):
            reason = f"pattern {pattern!r}"

    if form_field.is_credit_card and not luhn_checksum_valid(value):
        reason = "luhn checksum"

    return reason


def check_format(
    fields: List[FormField],
    document: FormDocument,
    feedback: FeedbackResult,
) -> bool:
    """
    Record every field whose value is malformed.

    Returns:
        True when no field failed.
    """
    passed = True
    for index, form_field in enumerate(fields):
        reason = format_error(form_field, document)
        if reason is not None:
            logger.debug("Field '%s' failed %s (index %d)", form_field.field_id, reason, index)
            feedback.record(index, STATUS_INVALID, ErrorField(form_field.field_id))
            passed = False
    return passed
