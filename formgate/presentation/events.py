"""
SubmitEvent - the triggering event handle whose default action can be cancelled.
"""
from dataclasses import dataclass


@dataclass
class SubmitEvent:
    """Minimal form-submission event."""

    target_id: str = ""
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True
