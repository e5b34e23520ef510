"""
ValidationRun - explicit per-invocation context threaded through every stage.
"""
from dataclasses import dataclass, field
from typing import Any, List

from formgate.models.feedback import FeedbackResult
from formgate.models.form_field import FormField
from formgate.models.options import ValidatorOptions
from formgate.presentation.document import FormDocument
from formgate.presentation.renderer import PanelRenderer


@dataclass
class ValidationRun:
    """Everything one validate() call reads and writes."""

    target: str
    document: FormDocument
    options: ValidatorOptions
    renderer: PanelRenderer
    event: Any = None                   # anything with prevent_default()
    fields: List[FormField] = field(default_factory=list)
    feedback: FeedbackResult = field(default_factory=FeedbackResult)

    @property
    def messaging_target(self) -> str:
        """Container receiving the error panel; the validation target by default."""
        return self.options.messaging_target or self.target
