from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, List, Optional, Tuple
import copy
import logging

from .model import (
    ComposerState, Draft, Field, FormData, FormDefinition,
    initial_state,
)
from .commands import (
    SelectFieldType, SelectField, SubmitField, DeleteField, CancelFieldEdit,
    ChangeFieldsOrder, ReplaceFields, UpdateDraftMeta,
)
from .config import DEFAULT_CONFIG
from .protocol import HostListener, PaletteProtocol
from .reducer import new_temp_id
from .store import Store, DocChangeListener


logger = logging.getLogger(__name__)

SaveHandler = Callable[[FormData], None]


@dataclass
class HostProps:
    """What the host hands the composer on every update."""
    is_ready_to_save: bool = False
    form_data: Optional[FormData] = None


class Composer:
    """
    Controller around one Store plus the host synchronisation state.

    The host calls update() whenever its props change; the composer compares
    them with what it saw last time to decide whether to replace the field
    list (new form_data object) and whether to save (readiness went
    False -> True). Everything else goes through the command methods.
    """

    def __init__(
        self,
        store: Store,
        props: Optional[HostProps] = None,
        save_form: Optional[SaveHandler] = None,
        palette: Optional[PaletteProtocol] = None,
        hide_optional_fields: bool = False,
    ):
        self.store = store
        self.palette = palette
        self.hide_optional_fields = hide_optional_fields
        self._save_form = save_form
        props = props or HostProps()
        # the first props seen count as "last observed": nothing fires on mount
        self._last_ready = bool(props.is_ready_to_save)
        self._last_form_data = props.form_data

    @classmethod
    def create(
        cls,
        form: Optional[FormDefinition] = None,
        fields: Optional[List[Field]] = None,
        form_data: Optional[FormData] = None,
        form_type: str = "",
        is_ready_to_save: bool = False,
        hide_optional_fields: bool = False,
        listener: Optional[HostListener] = None,
        on_doc_change: Optional[DocChangeListener] = None,
        save_form: Optional[SaveHandler] = None,
        palette: Optional[PaletteProtocol] = None,
        config: Optional[Dict[str, Any]] = None,
    ) -> "Composer":
        cfg = config or DEFAULT_CONFIG
        field_cfg = cfg.get("fields", {})
        prefix = field_cfg.get("temp_id_prefix", "tempId")

        state = initial_state(
            form=form,
            fields=fields,
            form_data=form_data,
            form_type=form_type,
            defaults=cfg.get("draft", {}),
        )
        store = Store(
            state=state,
            id_factory=lambda: new_temp_id(prefix),
            content_type=field_cfg.get("content_type", "form"),
        )
        if listener is not None:
            store.subscribe(listener.on_doc_change)
            if save_form is None:
                save_form = listener.save_form
        if on_doc_change is not None:
            store.subscribe(on_doc_change)

        return cls(
            store,
            props=HostProps(is_ready_to_save=is_ready_to_save, form_data=form_data),
            save_form=save_form,
            palette=palette,
            hide_optional_fields=hide_optional_fields,
        )

    # ----- derived state -----

    @property
    def state(self) -> ComposerState:
        return self.store.state

    @property
    def draft(self) -> Draft:
        return self.store.state.draft

    @property
    def fields(self) -> List[Field]:
        return self.store.state.draft.fields

    @property
    def optional_fields_visible(self) -> bool:
        return not self.hide_optional_fields

    def field_choices(self) -> List[str]:
        if self.palette is None:
            return []
        return self.palette.choices(self.draft.form_type)

    def field_choice_labels(self) -> List[Tuple[str, str]]:
        """(type_id, label) pairs for the palette surface, in palette order."""
        if self.palette is None:
            return []
        return [
            (tid, self.palette.get_spec(tid).get("label") or tid)
            for tid in self.palette.choices(self.draft.form_type)
        ]

    # ----- commands -----

    def choose(self, token: str) -> ComposerState:
        """Resolve a palette token (alias, id or label) and open a creating session."""
        type_id = self.palette.resolve_token(token) if self.palette else token
        if not type_id:
            raise ValueError(f"Unknown field type: {token}")
        return self.select_type(type_id)

    def select_type(self, field_type: str) -> ComposerState:
        return self.store.apply(SelectFieldType(field_type))

    def select_field(self, f: Field) -> ComposerState:
        return self.store.apply(SelectField(f))

    def submit(self, f: Field) -> ComposerState:
        return self.store.apply(SubmitField(f))

    def delete(self, field_id: str) -> ComposerState:
        return self.store.apply(DeleteField(field_id))

    def cancel(self) -> ComposerState:
        return self.store.apply(CancelFieldEdit())

    def change_fields_order(self, fields: List[Field]) -> ComposerState:
        return self.store.apply(ChangeFieldsOrder(list(fields)))

    def update_meta(self, **changes: Any) -> ComposerState:
        return self.store.apply(UpdateDraftMeta(**changes))

    # ----- host synchronisation -----

    def update(self, props: HostProps) -> None:
        """Feed new host props: replace fields on a new form_data, save on a readiness edge."""
        if props.form_data is not None and props.form_data is not self._last_form_data:
            logger.debug("[composer] host supplied new form data; replacing fields")
            self.store.apply(ReplaceFields(list(props.form_data.fields or [])))
        self._last_form_data = props.form_data

        ready = bool(props.is_ready_to_save)
        edge = ready and not self._last_ready
        self._last_ready = ready
        if edge:
            self._trigger_save()

    def build_save_payload(self) -> FormData:
        if self._last_form_data is not None:
            return replace(self._last_form_data)
        d = self.draft
        return FormData(
            title=d.title,
            description=d.description,
            button_text=d.button_text,
            fields=copy.deepcopy(d.fields),
            type=d.form_type,
        )

    def _trigger_save(self) -> None:
        payload = self.build_save_payload()
        logger.debug("[composer] readiness edge; saving %d field(s)", len(payload.fields or []))
        if self._save_form is None:
            logger.warning("[composer] readiness edge with no save handler attached")
            return
        try:
            self._save_form(payload)
        except Exception:
            logger.exception("[composer] save handler failed")
