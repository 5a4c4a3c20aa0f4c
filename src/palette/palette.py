from __future__ import annotations
from typing import Dict, Any, Optional, Iterable, List
from pathlib import Path

from composer.protocol import PaletteProtocol
from .specs import BUILTIN_FIELD_TYPES
from .loader import load_plugin_specs

def _lc(x: Any) -> str:
    return str(x).strip().lower()

class FieldPalette(PaletteProtocol):
    """
    Concrete palette with:
      - Built-in field types
      - Optional YAML plugin overrides/extensions
      - Optional extra_specs dict injection (for tests)
    """

    def __init__(self, plugins_dir: Optional[str | Path] = None, extra_specs: Optional[Dict[str, Dict[str, Any]]] = None):
        self._specs: Dict[str, Dict[str, Any]] = {}
        self._aliases: Dict[str, str] = {}

        # 1) built-ins
        for tid, spec in BUILTIN_FIELD_TYPES.items():
            self._register_spec(tid, spec)

        # 2) caller-provided extra specs (override/extend)
        if extra_specs:
            for tid, spec in extra_specs.items():
                self._register_spec(tid, spec)

        # 3) YAML plugins (override/extend)
        for tid, spec in load_plugin_specs(plugins_dir).items():
            self._register_spec(tid, spec)

        self._rebuild_alias_index()

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "FieldPalette":
        return cls(plugins_dir=config.get("palette", {}).get("plugins_dir"))

    # ----- Protocol methods -----

    def resolve_token(self, token: str) -> Optional[str]:
        if not token:
            return None
        return self._aliases.get(_lc(token))

    def choices(self, form_type: str = "") -> List[str]:
        out = []
        for tid, spec in self._specs.items():
            allowed = spec["form_types"]
            if not allowed or form_type in allowed:
                out.append(tid)
        return out

    def get_spec(self, type_id: str) -> Dict[str, Any]:
        return self._specs.get(type_id, {})

    # ----- internal plumbing -----

    def _register_spec(self, type_id: str, spec: Dict[str, Any]) -> None:
        spec = dict(spec)
        spec.pop("type_id", None)
        spec.setdefault("label", type_id)
        spec.setdefault("aliases", [])
        spec.setdefault("form_types", [])
        if isinstance(spec["form_types"], str):
            spec["form_types"] = [spec["form_types"]]
        self._specs[type_id] = spec

    def _rebuild_alias_index(self) -> None:
        self._aliases.clear()
        for tid, spec in self._specs.items():
            tokens: Iterable[str] = [tid, spec.get("label", "")] + list(spec.get("aliases", []))
            for t in tokens:
                if not t:
                    continue
                self._aliases.setdefault(_lc(t), tid)  # first writer wins
