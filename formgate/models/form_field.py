"""
FormField - a single validatable input control.
"""
from dataclasses import dataclass, field
from typing import Optional, Set

from formgate.config.constants import (
    CREDIT_CARD_CLASS,
    KIND_CHECKBOX,
    KIND_TEXT,
    NON_INPUT_KINDS,
    REQUIRED_ATTRIBUTE_VALUES,
    REQUIRED_CLASS,
)


@dataclass
class FormField:
    """Attributes of one control as read from the document."""

    field_id: str
    kind: str = KIND_TEXT
    value: str = ""
    checked: bool = False
    pattern: Optional[str] = None
    required: Optional[str] = None      # raw attribute value, None when absent
    classes: Set[str] = field(default_factory=set)
    match_field: Optional[str] = None
    label: Optional[str] = None

    @property
    def is_input(self) -> bool:
        """True for controls rendered as <input> (not select/textarea)."""
        return self.kind not in NON_INPUT_KINDS

    @property
    def is_checkbox(self) -> bool:
        return self.kind == KIND_CHECKBOX

    @property
    def has_required_attribute(self) -> bool:
        return self.required in REQUIRED_ATTRIBUTE_VALUES

    @property
    def has_required_class(self) -> bool:
        return REQUIRED_CLASS in self.classes

    @property
    def is_credit_card(self) -> bool:
        return CREDIT_CARD_CLASS in self.classes

    @property
    def has_explicit_pattern(self) -> bool:
        return bool(self.pattern)

    @classmethod
    def from_dict(cls, data: dict) -> "FormField":
        return cls(
            field_id=data["id"],
            kind=data.get("kind") or KIND_TEXT,
            value=data.get("value", ""),
            checked=bool(data.get("checked", False)),
            pattern=data.get("pattern"),
            required=data.get("required"),
            classes=set(data.get("classes", [])),
            match_field=data.get("match"),
            label=data.get("label"),
        )

    def to_dict(self) -> dict:
        return {
            "node": "field",
            "id": self.field_id,
            "kind": self.kind,
            "value": self.value,
            "checked": self.checked,
            "pattern": self.pattern,
            "required": self.required,
            "classes": sorted(self.classes),
            "match": self.match_field,
            "label": self.label,
        }

    def __repr__(self) -> str:
        return f"FormField('{self.field_id}', {self.kind}, value={self.value!r})"
