from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Optional


DEFAULT_TITLE = "Form Title"
DEFAULT_DESCRIPTION = ""
DEFAULT_BUTTON_TEXT = "Send"
DEFAULT_NUMBER_OF_PAGES = 1

FORM_CONTENT_TYPE = "form"


class Mode(Enum):
    NONE = auto()
    CREATING = auto()
    UPDATING = auto()


@dataclass
class Field:
    id: str
    type: str
    content_type: str = FORM_CONTENT_TYPE
    payload: Dict[str, Any] = field(default_factory=dict)  # opaque, copied through

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Field":
        """Build from the host's dict shape (``_id`` or ``id``, ``contentType``, ``type``)."""
        rest = dict(data)
        fid = rest.pop("_id", None)
        if fid is None:
            fid = rest.pop("id", None)
        else:
            rest.pop("id", None)
        if fid is None:
            raise ValueError("Field is missing an id.")
        ftype = rest.pop("type", "")
        content_type = rest.pop("contentType", FORM_CONTENT_TYPE)
        return cls(id=str(fid), type=ftype, content_type=content_type, payload=rest)

    def to_dict(self) -> Dict[str, Any]:
        out = dict(self.payload)
        out.update({"_id": self.id, "contentType": self.content_type, "type": self.type})
        return out


@dataclass
class FormDefinition:
    """Inbound form template; None means 'not set'."""
    title: Optional[str] = None
    description: Optional[str] = None
    button_text: Optional[str] = None
    number_of_pages: Optional[int] = None


@dataclass
class FormData:
    """Persisted form as the host knows it. Also the shape of save payloads."""
    title: str = DEFAULT_TITLE
    description: str = DEFAULT_DESCRIPTION
    button_text: str = DEFAULT_BUTTON_TEXT
    fields: List[Field] = field(default_factory=list)
    type: str = ""
    number_of_pages: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "title": self.title,
            "description": self.description,
            "buttonText": self.button_text,
            "fields": [f.to_dict() for f in self.fields],
            "type": self.type,
        }
        if self.number_of_pages is not None:
            out["numberOfPages"] = self.number_of_pages
        return out


@dataclass
class Draft:
    title: str = DEFAULT_TITLE
    description: str = DEFAULT_DESCRIPTION
    button_text: str = DEFAULT_BUTTON_TEXT
    number_of_pages: int = DEFAULT_NUMBER_OF_PAGES
    fields: List[Field] = field(default_factory=list)
    current_page: int = 1  # preview context only
    form_type: str = ""

    def field_ids(self) -> List[str]:
        return [f.id for f in self.fields]

    def find_index(self, field_id: str) -> int:
        """Position of the field with this id, or -1."""
        for i, f in enumerate(self.fields):
            if f.id == field_id:
                return i
        return -1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fields": [f.to_dict() for f in self.fields],
            "title": self.title,
            "description": self.description,
            "buttonText": self.button_text,
            "numberOfPages": self.number_of_pages,
            "currentPage": self.current_page,
            "type": self.form_type,
        }


@dataclass
class ComposerState:
    draft: Draft = field(default_factory=Draft)
    mode: Mode = Mode.NONE
    editing: Optional[Field] = None  # present iff mode != NONE

    @property
    def has_session(self) -> bool:
        return self.editing is not None


def initial_state(
    form: Optional[FormDefinition] = None,
    fields: Optional[List[Field]] = None,
    form_data: Optional[FormData] = None,
    form_type: str = "",
    defaults: Optional[Dict[str, Any]] = None,
) -> ComposerState:
    """
    Build the starting state for a composer.

    Persisted ``form_data.fields`` win over the default ``fields`` list, even
    when empty. Metadata falls back to ``defaults`` (the ``draft`` config
    section) and then to the built-in constants; only None counts as missing.
    """
    d = defaults or {}
    form = form or FormDefinition()

    if form_data is not None:
        initial_fields = list(form_data.fields or [])
    elif fields is not None:
        initial_fields = list(fields)
    else:
        initial_fields = []

    draft = Draft(
        title=_first_set(form.title, d.get("title"), DEFAULT_TITLE),
        description=_first_set(form.description, d.get("description"), DEFAULT_DESCRIPTION),
        button_text=_first_set(form.button_text, d.get("button_text"), DEFAULT_BUTTON_TEXT),
        number_of_pages=normalize_pages(_first_set(form.number_of_pages, d.get("number_of_pages"), DEFAULT_NUMBER_OF_PAGES)),
        fields=initial_fields,
        current_page=1,
        form_type=form_type or "",
    )
    return ComposerState(draft=draft)


def _first_set(*values: Any) -> Any:
    for v in values:
        if v is not None:
            return v
    return None


def normalize_pages(value: Any) -> int:
    """Page count as an int >= 1; integral floats and digit strings are accepted."""
    if isinstance(value, bool):
        raise ValueError(f"Number of pages must be an integer, got: {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"Number of pages must be a whole number, got: {value!r}")
        n = int(value)
    else:
        try:
            n = int(value)
        except (TypeError, ValueError):
            raise ValueError(f"Number of pages must be an integer, got: {value!r}") from None
    if n < 1:
        raise ValueError("Minimum number of pages is 1")
    return n
