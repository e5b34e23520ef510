"""
Constants used across the validation engine.
Statuses, field kinds, CSS class names, built-in patterns and messages.
"""
from typing import Dict, FrozenSet, Tuple

# =============================================================================
# Feedback statuses (closed enum)
# =============================================================================
STATUS_VALID: str = "valid"
STATUS_MISSING_REQUIRED: str = "missingRequiredFields"
STATUS_INVALID: str = "invalid"
STATUS_MISMATCH: str = "mismatch"

STATUSES: Tuple[str, ...] = (
    STATUS_VALID,
    STATUS_MISSING_REQUIRED,
    STATUS_INVALID,
    STATUS_MISMATCH,
)

# =============================================================================
# Output shapes
# =============================================================================
RETURN_DATA: str = "data"
RETURN_HTML: str = "html"

# =============================================================================
# Field kinds
# =============================================================================
KIND_TEXT: str = "text"
KIND_EMAIL: str = "email"
KIND_NUMBER: str = "number"
KIND_PASSWORD: str = "password"
KIND_TEL: str = "tel"
KIND_CHECKBOX: str = "checkbox"
KIND_RADIO: str = "radio"
KIND_FILE: str = "file"
KIND_SELECT: str = "select"
KIND_TEXTAREA: str = "textarea"
KIND_HIDDEN: str = "hidden"
KIND_SUBMIT: str = "submit"
KIND_RESET: str = "reset"

# Kinds rendered by their own element rather than <input>
NON_INPUT_KINDS: FrozenSet[str] = frozenset({KIND_SELECT, KIND_TEXTAREA})

# Controls that carry no user value; never collected from a container
UNSELECTABLE_KINDS: FrozenSet[str] = frozenset({KIND_HIDDEN, KIND_SUBMIT, KIND_RESET})

# Controls skipped by the format stage
FORMAT_EXEMPT_KINDS: FrozenSet[str] = frozenset(
    {KIND_SELECT, KIND_TEXTAREA, KIND_CHECKBOX, KIND_RADIO, KIND_FILE}
)

# =============================================================================
# Required markers
# =============================================================================
# Attribute values that mark a field required: legacy empty form and
# canonical explicit form.
REQUIRED_ATTRIBUTE_VALUES: FrozenSet[str] = frozenset({"", "required"})
REQUIRED_CLASS: str = "required"
CREDIT_CARD_CLASS: str = "credit-card-number"

# =============================================================================
# Built-in format patterns (matched against the whole value)
# =============================================================================
EMAIL_PATTERN: str = (
    r"^([a-zA-Z0-9_\-\.]+)@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.)"
    r"|(([a-zA-Z0-9\-]+\.)+))([a-zA-Z]{2,4}|[0-9]{1,3})(\]?)$"
)
NUMBER_PATTERN: str = r"\b[0-9]+\b"
PASSWORD_PATTERN: str = r"^[\x00-\x7F]+$"
TEL_PATTERN: str = r"^[0-9]{10,25}$"
DEFAULT_PATTERN: str = r"^[\x00-\xFF]+$"

KIND_PATTERNS: Dict[str, str] = {
    KIND_EMAIL: EMAIL_PATTERN,
    KIND_NUMBER: NUMBER_PATTERN,
    KIND_PASSWORD: PASSWORD_PATTERN,
    KIND_TEL: TEL_PATTERN,
}

# =============================================================================
# Presentation class names
# =============================================================================
PANEL_CLASS: str = "validate"
PANEL_FAILED_CLASS: str = "failed"
MESSAGE_CLASS: str = "message"
ERROR_LIST_CLASS: str = "error-fields"
FIELD_FAILED_CLASS: str = "validate-failed"
LABEL_SEPARATOR: str = "/"

# status → class added to each implicated field's container
FIELD_ERROR_CLASSES: Dict[str, str] = {
    STATUS_MISSING_REQUIRED: "validate-error-required",
    STATUS_INVALID: "validate-error-invalid",
    STATUS_MISMATCH: "validate-error-match",
}

# status → class added to the error panel
PANEL_STATUS_CLASSES: Dict[str, str] = {
    STATUS_MISSING_REQUIRED: "required-fields",
    STATUS_INVALID: "format",
    STATUS_MISMATCH: "match",
}

ALL_FIELD_MARKING_CLASSES: FrozenSet[str] = frozenset(
    {FIELD_FAILED_CLASS, *FIELD_ERROR_CLASSES.values()}
)

# =============================================================================
# Default user-facing messages
# =============================================================================
DEFAULT_REQUIRED_MESSAGE: str = (
    "At least one required field is missing. "
    "Please make sure you've filled out every field."
)
DEFAULT_FORMAT_MESSAGE: str = "One or more fields are not in the expected format."
DEFAULT_MATCH_MESSAGE: str = "Fields that must match do not match."

# =============================================================================
# Cleanup scopes
# =============================================================================
CLEANUP_ALL: str = "all"          # remove the whole panel
CLEANUP_FIELDS: str = "fields"    # remove only the error list
