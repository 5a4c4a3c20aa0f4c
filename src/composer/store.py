from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple, Type
import copy
import logging

from .model import ComposerState, Draft, FORM_CONTENT_TYPE
from .commands import Command, SubmitField, ChangeFieldsOrder, UpdateDraftMeta
from .reducer import reduce, IdFactory


logger = logging.getLogger(__name__)

DocChangeListener = Callable[[Draft], None]

# Commands whose result is reported to the host. Deletion and cancel stay local.
NOTIFYING_COMMANDS: Tuple[Type[Command], ...] = (SubmitField, ChangeFieldsOrder, UpdateDraftMeta)


@dataclass
class Store:
    """
    Small wrapper around the pure reducer that owns the composer state and
    fans change notifications out to subscribers.

    Usage:
        store = Store(state=initial_state(...))
        store.subscribe(host.on_doc_change)
        store.apply(SelectFieldType("input"))
    """
    state: ComposerState = field(default_factory=ComposerState)
    id_factory: Optional[IdFactory] = None
    content_type: str = FORM_CONTENT_TYPE
    _listeners: List[DocChangeListener] = field(default_factory=list)

    def apply(self, cmd: Command) -> ComposerState:
        logger.debug("[composer] apply %s", type(cmd).__name__)
        self.state = reduce(self.state, cmd, id_factory=self.id_factory, content_type=self.content_type)
        if isinstance(cmd, NOTIFYING_COMMANDS):
            self._emit()
        return self.state

    def subscribe(self, listener: DocChangeListener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _emit(self) -> None:
        for listener in list(self._listeners):
            # each listener gets its own snapshot so none can reach into the store
            snapshot = copy.deepcopy(self.state.draft)
            try:
                listener(snapshot)
            except Exception:
                logger.exception("[composer] doc change listener %r failed", listener)
