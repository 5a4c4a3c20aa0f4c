from __future__ import annotations
from typing import Callable, Optional, Set
import copy
import logging
import uuid

from .model import (
    ComposerState, Field, Mode,
    FORM_CONTENT_TYPE, normalize_pages,
)
from .commands import (
    Command, SelectFieldType, SelectField, SubmitField, DeleteField,
    CancelFieldEdit, ChangeFieldsOrder, ReplaceFields, UpdateDraftMeta,
)


logger = logging.getLogger(__name__)

TEMP_ID_PREFIX = "tempId"

IdFactory = Callable[[], str]


def reduce(
    state: ComposerState,
    cmd: Command,
    id_factory: Optional[IdFactory] = None,
    content_type: str = FORM_CONTENT_TYPE,
) -> ComposerState:
    """
    Pure state transformer. Never mutates the input state.
    Raises ValueError when the caller breaks a contract (duplicate id on
    create, bad page count); soft anomalies are no-ops.
    """
    s = copy.deepcopy(state)
    draft = s.draft

    # --- Selection: open a session (replaces any open one) ---
    if isinstance(cmd, SelectFieldType):
        new_id = _unique_id(set(draft.field_ids()), id_factory or new_temp_id)
        _open_session(s, Mode.CREATING, Field(id=new_id, type=cmd.type, content_type=content_type))
        return s

    if isinstance(cmd, SelectField):
        _open_session(s, Mode.UPDATING, copy.deepcopy(cmd.field))
        return s

    # --- Submit ---
    if isinstance(cmd, SubmitField):
        submitted = copy.deepcopy(cmd.field)
        if s.mode == Mode.CREATING:
            if draft.find_index(submitted.id) != -1:
                raise ValueError(f"Field id already in use: {submitted.id}")
            draft.fields.append(submitted)
        elif s.mode == Mode.UPDATING:
            idx = draft.find_index(submitted.id)
            if idx != -1:
                draft.fields[idx] = submitted
            else:
                logger.debug("[composer] update for missing field %s dropped", submitted.id)
        _close_session(s)
        return s

    # --- Delete / cancel ---
    if isinstance(cmd, DeleteField):
        idx = draft.find_index(cmd.field_id)
        if idx != -1:
            del draft.fields[idx]
        _close_session(s)
        return s

    if isinstance(cmd, CancelFieldEdit):
        _close_session(s)
        return s

    # --- Bulk patch at fixed positions ---
    if isinstance(cmd, ChangeFieldsOrder):
        for f in cmd.fields:
            idx = draft.find_index(f.id)
            if idx != -1:
                draft.fields[idx] = copy.deepcopy(f)
        return s

    if isinstance(cmd, ReplaceFields):
        draft.fields = copy.deepcopy(list(cmd.fields or []))
        return s

    # --- Metadata ---
    if isinstance(cmd, UpdateDraftMeta):
        if cmd.number_of_pages is not None:
            draft.number_of_pages = normalize_pages(cmd.number_of_pages)
        if cmd.title is not None:
            draft.title = cmd.title
        if cmd.description is not None:
            draft.description = cmd.description
        if cmd.button_text is not None:
            draft.button_text = cmd.button_text
        return s

    # Unhandled command → no-op
    return s


# ----- helpers -----

def new_temp_id(prefix: str = TEMP_ID_PREFIX) -> str:
    return f"{prefix}{uuid.uuid4().hex}"


def _unique_id(taken: Set[str], factory: IdFactory) -> str:
    candidate = factory()
    while candidate in taken:
        candidate = factory()
    return candidate


def _open_session(s: ComposerState, mode: Mode, f: Field) -> None:
    if s.editing is not None:
        logger.debug("[composer] discarding open %s session on %s", s.mode.name, s.editing.id)
    s.mode = mode
    s.editing = f


def _close_session(s: ComposerState) -> None:
    s.mode = Mode.NONE
    s.editing = None
