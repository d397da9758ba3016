"""Forms connectors module."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol


class SubmissionProtocol(Protocol):
    """Read-only view of a form submission as provided by the host."""

    @property
    def form_data(self) -> Mapping[str, Any]:
        """Submitted values keyed by form field handle."""

    @property
    def form_handle(self) -> str:
        """Handle of the form owning the submission."""

    @property
    def id(self) -> str:
        """Submission identifier."""


@dataclass(frozen=True)
class Submission:
    """Form submission data for connector processing."""

    id: str
    form_handle: str
    form_data: Mapping[str, Any] = field(default_factory=dict)


@dataclass
class ContactData:
    """Contact data for marketing service integration."""

    email: str
    first_name: Any = None
    last_name: Any = None
    field_values: list[dict[str, Any]] = field(default_factory=list)

    def as_payload(self) -> dict:
        """Render the contact as an ActiveCampaign contact body."""
        contact = {"email": self.email}
        if self.first_name is not None:
            contact["firstName"] = self.first_name
        if self.last_name is not None:
            contact["lastName"] = self.last_name
        if self.field_values:
            contact["fieldValues"] = list(self.field_values)
        return {"contact": contact}


@dataclass(frozen=True)
class FieldDescriptor:
    """Declarative description of a connector setting rendered by the host."""

    handle: str
    type: str
    display: str
    instructions: str | None = None
    default: str | None = None
    required: bool = False
    width: int | None = None
    fields: tuple["FieldDescriptor", ...] = ()

    def as_dict(self) -> dict:
        """Render the descriptor in the host fieldset format."""
        definition = {"type": self.type, "display": self.display}
        if self.instructions:
            definition["instructions"] = self.instructions
        if self.default is not None:
            definition["default"] = self.default
        if self.required:
            definition["validate"] = "required"
        if self.width is not None:
            definition["width"] = self.width
        if self.fields:
            definition["fields"] = [sub_field.as_dict() for sub_field in self.fields]
        return {"handle": self.handle, "field": definition}
