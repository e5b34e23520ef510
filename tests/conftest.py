"""
Shared test fixtures for the form validation test suite.
"""
import copy

import pytest

from formgate.engine.run import ValidationRun
from formgate.engine.selector import select_fields
from formgate.models.options import resolve_options
from formgate.presentation.document import FormDocument
from formgate.presentation.renderer import PanelRenderer


# ==========================================================================
# Form documents
# ==========================================================================

@pytest.fixture
def signup_form_dict():
    """A sign-up form where every field passes every stage."""
    return {
        "id": "signup",
        "classes": [],
        "children": [
            {
                "node": "container",
                "id": "row-name",
                "classes": ["required"],
                "children": [
                    {"node": "field", "id": "name", "kind": "text", "value": "Ada Lovelace", "label": "Full name"},
                ],
            },
            {
                "node": "container",
                "id": "row-email",
                "classes": [],
                "children": [
                    {
                        "node": "field",
                        "id": "email",
                        "kind": "email",
                        "value": "ada@example.com",
                        "required": "required",
                        "label": "Email",
                    },
                ],
            },
            {
                "node": "container",
                "id": "row-phone",
                "classes": [],
                "children": [
                    {"node": "field", "id": "phone", "kind": "tel", "value": "(555) 010-2030", "label": "Phone"},
                ],
            },
            {
                "node": "container",
                "id": "row-password",
                "classes": ["required"],
                "children": [
                    {"node": "field", "id": "password", "kind": "password", "value": "s3cret!", "label": "Password"},
                    {
                        "node": "field",
                        "id": "password-confirm",
                        "kind": "password",
                        "value": "s3cret!",
                        "match": "password",
                        "label": "Confirm password",
                    },
                ],
            },
            {
                "node": "container",
                "id": "row-terms",
                "classes": [],
                "children": [
                    {
                        "node": "field",
                        "id": "terms",
                        "kind": "checkbox",
                        "value": "yes",
                        "checked": True,
                        "required": "",
                        "label": "Accept terms",
                    },
                ],
            },
            {"node": "field", "id": "csrf", "kind": "hidden", "value": "token"},
            {"node": "field", "id": "submit", "kind": "submit", "value": "Sign up"},
        ],
    }


@pytest.fixture
def signup_document(signup_form_dict):
    return FormDocument.from_dict(copy.deepcopy(signup_form_dict))


@pytest.fixture
def make_document():
    """
    Factory: wrap each field dict in its own row container ("row-<id>").

    row_classes maps a field id to the classes of its row.
    """
    def _make(*fields, row_classes=None):
        row_classes = row_classes or {}
        children = [
            {
                "node": "container",
                "id": f"row-{f['id']}",
                "classes": row_classes.get(f["id"], []),
                "children": [{"node": "field", **f}],
            }
            for f in fields
        ]
        return FormDocument.from_dict({"id": "form", "classes": [], "children": children})

    return _make


@pytest.fixture
def make_run():
    """Factory: a ValidationRun over a document with the given options."""
    def _make(document, target=None, options=None, event=None):
        target = target or document.root_id
        run = ValidationRun(
            target=target,
            document=document,
            options=resolve_options(options),
            renderer=PanelRenderer(document),
            event=event,
        )
        run.fields = select_fields(document, target)
        return run

    return _make
