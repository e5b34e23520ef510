"""
FeedbackResult - structured outcome of one validation run.

Created fresh per invocation and populated by whichever stage fails first.
Only the failing stage's status survives: recording a failure overwrites the
status, and error entries are keyed by the field's scan index.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional

from formgate.config.constants import STATUS_VALID


@dataclass(frozen=True)
class ErrorField:
    """One implicated field; match_field_id is only set for mismatch entries."""

    field_id: str
    match_field_id: Optional[str] = None

    def to_dict(self) -> dict:
        data = {"id": self.field_id}
        if self.match_field_id is not None:
            data["matchId"] = self.match_field_id
        return data


@dataclass
class FeedbackResult:
    """Success flag, status tag and scan-index → ErrorField mapping."""

    success: bool = True
    status: str = STATUS_VALID
    error_fields: Dict[int, ErrorField] = field(default_factory=dict)

    def record(self, index: int, status: str, error: ErrorField) -> None:
        """Mark the run failed with *status* and store *error* at *index*."""
        self.success = False
        self.status = status
        self.error_fields[index] = error

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "status": self.status,
            "errorFields": {
                str(index): error.to_dict()
                for index, error in self.error_fields.items()
            },
        }
