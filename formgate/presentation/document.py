"""
FormDocument - in-memory document of nested containers and fields.

Implements the field-access side the engine needs: field lookup, document
order traversal of a container, container classes, value write-back and
label lookup. Error panels are stored per container so any renderer bound to
the same document sees the same panels.

Input format (validated against FORM_DOCUMENT_SCHEMA):
    {
        "id": "signup",
        "classes": [],
        "children": [
            {"id": "row-email", "classes": ["required"], "children": [
                {"node": "field", "id": "email", "kind": "email", "value": "", "label": "Email"}
            ]}
        ]
    }
"""
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Set, Union

from jsonschema import ValidationError, validate

from formgate.config.schemas import FORM_DOCUMENT_SCHEMA
from formgate.models.form_field import FormField

logger = logging.getLogger(__name__)


class DocumentError(Exception):
    """Raised when a form document is malformed."""

    def __init__(self, errors: List[str]) -> None:
        self.errors = errors
        super().__init__(f"Invalid form document: {errors}")


@dataclass
class Container:
    """A grouping element; children are node ids in document order."""

    container_id: str
    classes: Set[str] = field(default_factory=set)
    parent_id: Optional[str] = None
    children: List[str] = field(default_factory=list)


@dataclass
class ErrorPanel:
    """Rendered feedback block living under one container."""

    classes: Set[str] = field(default_factory=set)
    message: str = ""
    error_list: Optional[List[str]] = None


class FormDocument:
    """Nested containers and uniquely identified fields."""

    def __init__(self, root_id: str, root_classes: Optional[Set[str]] = None) -> None:
        self.root_id = root_id
        self._containers: Dict[str, Container] = {
            root_id: Container(root_id, set(root_classes or ()))
        }
        self._fields: Dict[str, FormField] = {}
        self._parents: Dict[str, str] = {}
        self.panels: Dict[str, ErrorPanel] = {}

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict) -> "FormDocument":
        """Build a document from its dict form, validating the schema first."""
        try:
            validate(instance=data, schema=FORM_DOCUMENT_SCHEMA)
        except ValidationError as e:
            raise DocumentError([f"Schema violation: {e.message}"]) from e

        document = cls(data["id"], set(data.get("classes", [])))
        errors: List[str] = []
        document._load_children(data["id"], data.get("children", []), errors)
        if errors:
            raise DocumentError(errors)
        return document

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "FormDocument":
        with open(path, encoding="utf-8") as f:
            return cls.from_dict(json.load(f))

    def _load_children(self, parent_id: str, nodes: List[dict], errors: List[str]) -> None:
        for node in nodes:
            node_id = node["id"]
            if node_id in self._fields or node_id in self._containers:
                errors.append(f"Duplicate id: {node_id}")
                continue

            if node.get("node") == "field":
                self.add_field(FormField.from_dict(node), parent_id)
            else:
                self.add_container(node_id, parent_id, set(node.get("classes", [])))
                self._load_children(node_id, node.get("children", []), errors)

    def add_container(self, container_id: str, parent_id: str, classes: Optional[Set[str]] = None) -> Container:
        container = Container(container_id, set(classes or ()), parent_id)
        self._containers[container_id] = container
        self._containers[parent_id].children.append(container_id)
        return container

    def add_field(self, form_field: FormField, parent_id: str) -> FormField:
        self._fields[form_field.field_id] = form_field
        self._parents[form_field.field_id] = parent_id
        self._containers[parent_id].children.append(form_field.field_id)
        return form_field

    # ------------------------------------------------------------------
    # Field access
    # ------------------------------------------------------------------

    def get_field(self, field_id: Optional[str]) -> Optional[FormField]:
        if field_id is None:
            return None
        return self._fields.get(field_id)

    def has_container(self, container_id: str) -> bool:
        return container_id in self._containers

    def iter_fields(self, container_id: str) -> Iterator[FormField]:
        """Yield every field under *container_id* in document order."""
        for child_id in self._containers[container_id].children:
            if child_id in self._fields:
                yield self._fields[child_id]
            else:
                yield from self.iter_fields(child_id)

    def parent_id(self, field_id: str) -> Optional[str]:
        return self._parents.get(field_id)

    def parent_classes(self, field_id: str) -> Set[str]:
        parent = self._parents.get(field_id)
        if parent is None:
            return set()
        return self._containers[parent].classes

    def set_value(self, field_id: str, value: str) -> None:
        self._fields[field_id].value = value

    def label_for(self, field_id: Optional[str]) -> str:
        """Label text for a field; empty when the field or its label is missing."""
        form_field = self.get_field(field_id)
        if form_field is None or form_field.label is None:
            return ""
        return form_field.label

    # ------------------------------------------------------------------
    # Container classes
    # ------------------------------------------------------------------

    def container_classes(self, container_id: str) -> Set[str]:
        return self._containers[container_id].classes

    def add_container_classes(self, container_id: str, classes) -> None:
        self._containers[container_id].classes.update(classes)

    def remove_container_classes(self, container_id: str, classes) -> None:
        self._containers[container_id].classes.difference_update(classes)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> dict:
        return self._container_to_dict(self.root_id)

    def _container_to_dict(self, container_id: str) -> dict:
        container = self._containers[container_id]
        children = []
        for child_id in container.children:
            if child_id in self._fields:
                children.append(self._fields[child_id].to_dict())
            else:
                child = self._container_to_dict(child_id)
                child["node"] = "container"
                children.append(child)
        return {
            "id": container.container_id,
            "classes": sorted(container.classes),
            "children": children,
        }

    def __repr__(self) -> str:
        return f"FormDocument('{self.root_id}', fields={len(self._fields)})"
