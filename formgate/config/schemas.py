"""
JSON Schemas for form documents and feedback output.

Two schemas:
1. FORM_DOCUMENT_SCHEMA - nested containers and fields loaded into a FormDocument
2. FEEDBACK_RESULT_SCHEMA - wire shape of FeedbackResult.to_dict()
"""
from formgate.config.constants import STATUSES

# =============================================================================
# 1. Form Document Schema
# =============================================================================
FORM_DOCUMENT_SCHEMA: dict = {
    "$ref": "#/$defs/container",
    "$defs": {
        "classes": {
            "type": "array",
            "items": {"type": "string"},
            "uniqueItems": True,
        },
        "field": {
            "type": "object",
            "additionalProperties": False,
            "required": ["node", "id"],
            "properties": {
                "node": {"const": "field"},
                "id": {"type": "string", "minLength": 1},
                "kind": {
                    "type": "string",
                    "description": "text | email | number | password | tel | checkbox | radio | file | select | textarea | hidden | submit | reset | other",
                },
                "value": {"type": "string"},
                "checked": {"type": "boolean"},
                "pattern": {"type": ["string", "null"]},
                "required": {
                    "type": ["string", "null"],
                    "description": "Raw value of the required attribute; null when absent",
                },
                "classes": {"$ref": "#/$defs/classes"},
                "match": {
                    "type": ["string", "null"],
                    "description": "Id of the field whose value this one must equal",
                },
                "label": {"type": ["string", "null"]},
            },
        },
        "container": {
            "type": "object",
            "additionalProperties": False,
            "required": ["id", "children"],
            "properties": {
                "node": {"const": "container"},
                "id": {"type": "string", "minLength": 1},
                "classes": {"$ref": "#/$defs/classes"},
                "children": {
                    "type": "array",
                    "items": {
                        "anyOf": [
                            {"$ref": "#/$defs/field"},
                            {"$ref": "#/$defs/container"},
                        ],
                    },
                },
            },
        },
    },
}


# =============================================================================
# 2. Feedback Result Schema
# =============================================================================
FEEDBACK_RESULT_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": ["success", "status", "errorFields"],
    "properties": {
        "success": {"type": "boolean"},
        "status": {"type": "string", "enum": list(STATUSES)},
        "errorFields": {
            "type": "object",
            "patternProperties": {
                "^[0-9]+$": {
                    "type": "object",
                    "additionalProperties": False,
                    "required": ["id"],
                    "properties": {
                        "id": {"type": "string"},
                        "matchId": {"type": "string"},
                    },
                },
            },
            "additionalProperties": False,
        },
    },
}
