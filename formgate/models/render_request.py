"""
RenderRequest - ephemeral hand-off from the fail handler to the markup builder.
"""
from dataclasses import dataclass, field
from typing import Dict, List

from formgate.config.constants import STATUS_MISMATCH
from formgate.models.feedback import ErrorField, FeedbackResult


@dataclass(frozen=True)
class RenderRequest:
    """Status tag plus the error-field mapping it produced."""

    status: str
    fields: Dict[int, ErrorField] = field(default_factory=dict)

    @classmethod
    def from_feedback(cls, feedback: FeedbackResult) -> "RenderRequest":
        return cls(status=feedback.status, fields=dict(feedback.error_fields))

    def implicated_ids(self) -> List[str]:
        """Field ids in implication order; mismatch entries contribute both ids."""
        ids: List[str] = []
        for error in self.fields.values():
            ids.append(error.field_id)
            if self.status == STATUS_MISMATCH and error.match_field_id is not None:
                ids.append(error.match_field_id)
        return ids
