"""
Public API for the composer package.

Import from here everywhere else, so you can refactor internals freely:
    from composer import (
        ComposerState, Draft, Field, FormData, FormDefinition, Mode,
        SelectFieldType, SelectField, SubmitField, DeleteField,
        CancelFieldEdit, ChangeFieldsOrder, ReplaceFields, UpdateDraftMeta,
        HostListener, PaletteProtocol, reduce, Store, Composer, HostProps,
        load_config
    )
"""
from .model import (
    ComposerState, Draft, Field, FormData, FormDefinition, Mode,
    initial_state,
)
from .commands import (
    Command,
    SelectFieldType, SelectField, SubmitField, DeleteField, CancelFieldEdit,
    ChangeFieldsOrder, ReplaceFields, UpdateDraftMeta,
)
from .protocol import HostListener, PaletteProtocol
from .reducer import reduce, new_temp_id
from .store import Store
from .host import Composer, HostProps
from .config import DEFAULT_CONFIG, load_config

__all__ = [
    # model
    "ComposerState", "Draft", "Field", "FormData", "FormDefinition", "Mode",
    "initial_state",
    # commands
    "Command",
    "SelectFieldType", "SelectField", "SubmitField", "DeleteField", "CancelFieldEdit",
    "ChangeFieldsOrder", "ReplaceFields", "UpdateDraftMeta",
    # protocol & reducer & store & controller
    "HostListener", "PaletteProtocol", "reduce", "new_temp_id", "Store",
    "Composer", "HostProps",
    # config
    "DEFAULT_CONFIG", "load_config",
]
