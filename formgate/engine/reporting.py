"""
Feedback Reporting - fail handler, markup builder and cleanup.

The fail handler runs whenever a stage records a failure:
    1. Cancel the triggering event (stop_on_fail)
    2. In html mode: drop the previous error list, then rebuild the markup
"""
import logging
from typing import List

from formgate.config.constants import (
    ALL_FIELD_MARKING_CLASSES,
    CLEANUP_ALL,
    CLEANUP_FIELDS,
    FIELD_ERROR_CLASSES,
    FIELD_FAILED_CLASS,
    LABEL_SEPARATOR,
    PANEL_STATUS_CLASSES,
    RETURN_HTML,
    STATUS_INVALID,
    STATUS_MISMATCH,
    STATUS_MISSING_REQUIRED,
)
from formgate.engine.run import ValidationRun
from formgate.models.options import ValidatorOptions
from formgate.models.render_request import RenderRequest
from formgate.presentation.renderer import PanelRenderer

logger = logging.getLogger(__name__)


def handle_failure(run: ValidationRun) -> None:
    """
    React to a failed stage.

    With stop_on_fail the event's default action is cancelled; a missing
    event is a caller error and propagates as-is.
    """
    if run.options.stop_on_fail:
        run.event.prevent_default()

    if run.options.return_type == RETURN_HTML:
        cleanup(run, CLEANUP_FIELDS)
        build_markup(run, RenderRequest.from_feedback(run.feedback))


def message_for(options: ValidatorOptions, status: str) -> str:
    messages = {
        STATUS_MISSING_REQUIRED: options.required_message,
        STATUS_INVALID: options.format_message,
        STATUS_MISMATCH: options.match_message,
    }
    return messages.get(status, "")


def build_error_labels(request: RenderRequest, renderer: PanelRenderer) -> List[str]:
    """One label per error entry; mismatch entries read 'Label/MatchLabel'."""
    labels: List[str] = []
    for error in request.fields.values():
        label = renderer.label_for(error.field_id)
        if request.status == STATUS_MISMATCH:
            label = f"{label}{LABEL_SEPARATOR}{renderer.label_for(error.match_field_id)}"
        labels.append(label)
    return labels


def build_markup(run: ValidationRun, request: RenderRequest) -> None:
    """
    Surface *request* through the renderer.

    Ensures the panel exists under the messaging target, marks each
    implicated field's container, sets the panel status and message and,
    with list_fields, the ordered error list.
    """
    renderer = run.renderer
    target = run.messaging_target
    renderer.ensure_panel(target)

    error_class = FIELD_ERROR_CLASSES.get(request.status)
    if error_class is not None:
        for field_id in request.implicated_ids():
            renderer.mark_field(field_id, (FIELD_FAILED_CLASS, error_class))
        renderer.set_panel_status(target, PANEL_STATUS_CLASSES[request.status])
        renderer.set_message(target, message_for(run.options, request.status))

    if run.options.list_fields:
        renderer.set_error_list(target, build_error_labels(request, renderer))

    logger.debug("Rendered '%s' feedback under '%s'", request.status, target)


def cleanup(run: ValidationRun, scope: str = CLEANUP_ALL) -> None:
    """
    Remove rendered feedback.

    Scope "all" drops the whole panel, "fields" only its error list. Both
    clear the error classes from every selected field's container.
    """
    renderer = run.renderer
    if scope == CLEANUP_ALL:
        renderer.remove_panel(run.messaging_target)
    elif scope == CLEANUP_FIELDS:
        renderer.remove_error_list(run.messaging_target)
    else:
        raise ValueError(f"Unknown cleanup scope: {scope}")

    for form_field in run.fields:
        renderer.unmark_field(form_field.field_id, ALL_FIELD_MARKING_CLASSES)
