from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from .model import Field


class Command:
    """Marker base class for all commands (intents)."""
    pass


@dataclass
class SelectFieldType(Command):
    """Open a creating session for a fresh field of this type."""
    type: str


@dataclass
class SelectField(Command):
    """Open an updating session on an existing field."""
    field: Field


@dataclass
class SubmitField(Command):
    field: Field


@dataclass
class DeleteField(Command):
    field_id: str


@dataclass
class CancelFieldEdit(Command):
    """Drop the in-progress field."""


@dataclass
class ChangeFieldsOrder(Command):
    """Overwrite matching fields in place; positions never move."""
    fields: List[Field] = field(default_factory=list)


@dataclass
class ReplaceFields(Command):
    """Host-side override of the whole field list."""
    fields: List[Field] = field(default_factory=list)


@dataclass
class UpdateDraftMeta(Command):
    title: Optional[str] = None
    description: Optional[str] = None
    button_text: Optional[str] = None
    number_of_pages: Optional[int] = None
