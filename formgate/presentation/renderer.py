"""
Panel Renderer - presentation collaborator over a FormDocument.

Creates and removes the error panel under a container, toggles error classes
on field containers, sets the panel message and error list, and renders the
panel as HTML:

    <div class="validate failed required-fields">
      <p class="message">…</p>
      <ul class="error-fields"><li>Email</li></ul>
    </div>
"""
import html
import logging
from typing import Iterable, List, Optional

from formgate.config.constants import (
    ERROR_LIST_CLASS,
    MESSAGE_CLASS,
    PANEL_CLASS,
    PANEL_FAILED_CLASS,
)
from formgate.presentation.document import ErrorPanel, FormDocument

logger = logging.getLogger(__name__)


class PanelRenderer:
    """Applies render requests to an in-memory document."""

    def __init__(self, document: FormDocument) -> None:
        self.document = document

    # ------------------------------------------------------------------
    # Panel
    # ------------------------------------------------------------------

    def find_panel(self, container_id: str) -> Optional[ErrorPanel]:
        return self.document.panels.get(container_id)

    def ensure_panel(self, container_id: str) -> ErrorPanel:
        """Return the panel under *container_id*, creating an empty one if absent."""
        panel = self.document.panels.get(container_id)
        if panel is None:
            panel = ErrorPanel(classes={PANEL_CLASS})
            self.document.panels[container_id] = panel
            logger.debug("Created error panel under '%s'", container_id)
        return panel

    def remove_panel(self, container_id: str) -> None:
        if self.document.panels.pop(container_id, None) is not None:
            logger.debug("Removed error panel under '%s'", container_id)

    def set_panel_status(self, container_id: str, status_class: str) -> None:
        """Replace any previous status class with *status_class*."""
        panel = self.ensure_panel(container_id)
        panel.classes = {PANEL_CLASS, PANEL_FAILED_CLASS, status_class}

    def set_message(self, container_id: str, message: str) -> None:
        self.ensure_panel(container_id).message = message

    def set_error_list(self, container_id: str, labels: Iterable[str]) -> None:
        self.ensure_panel(container_id).error_list = list(labels)

    def remove_error_list(self, container_id: str) -> None:
        panel = self.document.panels.get(container_id)
        if panel is not None:
            panel.error_list = None

    # ------------------------------------------------------------------
    # Field containers
    # ------------------------------------------------------------------

    def mark_field(self, field_id: str, classes: Iterable[str]) -> None:
        """Add *classes* to the container holding *field_id*."""
        parent = self.document.parent_id(field_id)
        if parent is None:
            logger.warning("Cannot mark unknown field '%s'", field_id)
            return
        self.document.add_container_classes(parent, classes)

    def unmark_field(self, field_id: str, classes: Iterable[str]) -> None:
        parent = self.document.parent_id(field_id)
        if parent is not None:
            self.document.remove_container_classes(parent, classes)

    def label_for(self, field_id: Optional[str]) -> str:
        return self.document.label_for(field_id)

    # ------------------------------------------------------------------
    # HTML
    # ------------------------------------------------------------------

    def to_html(self, container_id: str) -> str:
        """Render the panel under *container_id*; empty string when absent."""
        panel = self.document.panels.get(container_id)
        if panel is None:
            return ""

        # panel class first, the rest sorted for stable output
        classes: List[str] = [PANEL_CLASS] + sorted(panel.classes - {PANEL_CLASS})
        parts = [
            f'<div class="{" ".join(classes)}">',
            f'<p class="{MESSAGE_CLASS}">{html.escape(panel.message)}</p>',
        ]
        if panel.error_list is not None:
            items = "".join(f"<li>{html.escape(label)}</li>" for label in panel.error_list)
            parts.append(f'<ul class="{ERROR_LIST_CLASS}">{items}</ul>')
        parts.append("</div>")
        return "".join(parts)
