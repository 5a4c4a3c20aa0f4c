from __future__ import annotations
from typing import Any, Dict, Iterator, List, Optional
from pathlib import Path
import logging

import yaml


logger = logging.getLogger(__name__)


def load_plugin_specs(path: Optional[str | Path]) -> Dict[str, Dict[str, Any]]:
    """
    Read extra field types from every ``*.yaml`` file in a directory.

    A file holds either one field type (a mapping with ``type_id``) or a
    ``components:`` list of them. Returns {type_id: spec}; a missing directory
    yields nothing. Malformed documents raise ValueError naming the file.
    """
    specs: Dict[str, Dict[str, Any]] = {}
    if not path:
        return specs
    plugin_dir = Path(path)
    if not plugin_dir.is_dir():
        logger.warning("[palette] plugin dir not found: %s", plugin_dir)
        return specs

    for yml in sorted(plugin_dir.glob("*.yaml")):
        for spec in _field_types_in(yml):
            spec = _checked(yml, spec)
            specs[spec["type_id"]] = spec
        logger.debug("[palette] loaded %s", yml.name)
    return specs


def _field_types_in(yml: Path) -> Iterator[Dict[str, Any]]:
    doc = yaml.safe_load(yml.read_text(encoding="utf-8"))
    if doc is None:
        return
    if not isinstance(doc, dict):
        raise ValueError(f"{yml}: expected a mapping, got {type(doc).__name__}")
    if "components" not in doc:
        yield doc
        return
    entries = doc["components"]
    if not isinstance(entries, list):
        raise ValueError(f"{yml}: 'components' must be a list")
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(f"{yml}: components[{i}] must be a mapping")
        yield entry


def _checked(yml: Path, spec: Dict[str, Any]) -> Dict[str, Any]:
    tid = spec.get("type_id")
    if not tid or not isinstance(tid, str):
        raise ValueError(f"{yml}: field type missing 'type_id'")
    aliases = spec.get("aliases", [])
    if not isinstance(aliases, list) or not all(isinstance(a, str) for a in aliases):
        raise ValueError(f"{yml}: '{tid}' aliases must be a list of strings")
    form_types: Any = spec.get("form_types", [])
    if isinstance(form_types, str):
        form_types = [form_types]
    if not isinstance(form_types, list) or not all(isinstance(t, str) for t in form_types):
        raise ValueError(f"{yml}: '{tid}' form_types must be a string or a list of strings")
    out: Dict[str, Any] = dict(spec)
    out["aliases"] = list(aliases)
    out["form_types"] = list(form_types)
    return out
