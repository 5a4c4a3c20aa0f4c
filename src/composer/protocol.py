from __future__ import annotations
from typing import Protocol, Optional, Any, Dict, List

from .model import Draft, FormData


class PaletteProtocol(Protocol):
    """
    Minimal contract the composer needs from a field-type palette.

    Implementations must provide:
      - resolve_token(token) -> type_id | None
      - choices(form_type) -> list of type ids offered for that form type
      - get_spec(type_id) -> dict with at least a 'label' key
    """
    def resolve_token(self, token: str) -> Optional[str]: ...
    def choices(self, form_type: str = "") -> List[str]: ...
    def get_spec(self, type_id: str) -> Dict[str, Any]: ...


class HostListener(Protocol):
    """
    Observer interface for the host container.

    on_doc_change receives a snapshot of the draft after submit, reorder and
    metadata edits. save_form receives the payload once per readiness edge.
    Return values are ignored.
    """
    def on_doc_change(self, draft: Draft) -> None: ...
    def save_form(self, payload: FormData) -> None: ...
