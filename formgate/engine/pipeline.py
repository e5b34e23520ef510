"""
Pipeline Orchestrator - main entry point for form validation.

Full pipeline (mode "init"):
    1. Field selection
    2. Required-presence stage
    3. Format stage (patterns + Luhn)
    4. Match stage
    5. Cleanup of rendered feedback when every stage passed

A stage only runs when every earlier stage passed. Any other mode runs
exactly one operation against a fresh FeedbackResult.
"""
import logging
from enum import Enum
from functools import partial
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from formgate.engine.format_check import check_format
from formgate.engine.match import check_match
from formgate.engine.metrics import record_stage_failure, record_validation, timed_stage
from formgate.engine.reporting import build_markup, cleanup, handle_failure
from formgate.engine.required import check_required
from formgate.engine.run import ValidationRun
from formgate.engine.selector import select_fields
from formgate.models.feedback import FeedbackResult
from formgate.models.options import ValidatorOptions, resolve_options
from formgate.models.render_request import RenderRequest
from formgate.presentation.document import FormDocument
from formgate.presentation.renderer import PanelRenderer

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    """Operations selectable through the ``mode`` option."""

    FULL_PIPELINE = "init"
    REQUIRED = "required"
    FORMAT = "format"
    MATCH = "match"
    FAIL = "fail"
    MARKUP = "markup"
    CLEANUP = "cleanup"


class ConfigurationError(Exception):
    """Raised when an option value cannot be dispatched on."""

    def __init__(self, option: str, value: Any) -> None:
        self.option = option
        self.value = value
        super().__init__(f"Invalid value for option '{option}': {value!r}")


# Rule stages in pipeline order
STAGES: Dict[str, Callable[..., bool]] = {
    Mode.REQUIRED.value: check_required,
    Mode.FORMAT.value: check_format,
    Mode.MATCH.value: check_match,
}


def parse_mode(value: Any) -> Mode:
    try:
        return Mode(value)
    except ValueError:
        raise ConfigurationError("mode", value) from None


def run_stage(run: ValidationRun, stage: str) -> bool:
    """Run one rule stage; on failure count it and invoke the fail handler."""
    with timed_stage(stage):
        passed = STAGES[stage](run.fields, run.document, run.feedback)

    if not passed:
        record_stage_failure(stage)
        logger.info(
            "Stage '%s' failed for '%s': %s",
            stage, run.target, run.feedback.status,
        )
        handle_failure(run)
    return passed


def run_full_pipeline(run: ValidationRun) -> None:
    for stage in STAGES:
        if not run_stage(run, stage):
            return
    cleanup(run)


def render_current(run: ValidationRun) -> None:
    build_markup(run, RenderRequest.from_feedback(run.feedback))


MODE_HANDLERS: Dict[Mode, Callable[[ValidationRun], Any]] = {
    Mode.FULL_PIPELINE: run_full_pipeline,
    Mode.REQUIRED: partial(run_stage, stage=Mode.REQUIRED.value),
    Mode.FORMAT: partial(run_stage, stage=Mode.FORMAT.value),
    Mode.MATCH: partial(run_stage, stage=Mode.MATCH.value),
    Mode.FAIL: handle_failure,
    Mode.MARKUP: render_current,
    Mode.CLEANUP: cleanup,
}


def validate(
    target: str,
    document: FormDocument,
    options: Union[Mapping[str, Any], ValidatorOptions, None] = None,
    renderer: Optional[PanelRenderer] = None,
    event: Any = None,
) -> FeedbackResult:
    """
    Validate the fields under *target*.

    Args:
        target: Id of a single input field or of a container.
        document: Document holding the fields.
        options: Partial options merged over the defaults.
        renderer: Presentation collaborator. Defaults to a PanelRenderer
                  bound to *document*.
        event: Triggering event; required when stop_on_fail is set.

    Returns:
        The FeedbackResult of this run.

    Raises:
        ConfigurationError: If the mode option names no known operation.
    """
    resolved = resolve_options(options)
    mode = parse_mode(resolved.mode)

    run = ValidationRun(
        target=target,
        document=document,
        options=resolved,
        renderer=renderer if renderer is not None else PanelRenderer(document),
        event=event,
    )
    run.fields = select_fields(document, target)
    logger.debug("Selected %d field(s) under '%s'", len(run.fields), target)

    MODE_HANDLERS[mode](run)

    record_validation(mode.value, run.feedback.status)
    logger.info(
        "Validation of '%s' (%s): %s",
        target, mode.value, run.feedback.status,
    )
    return run.feedback


def failing_field_ids(feedback: FeedbackResult) -> List[str]:
    """Ids of the implicated fields, in scan order."""
    return [error.field_id for error in feedback.error_fields.values()]
