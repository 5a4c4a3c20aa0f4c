from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Optional
import copy
import logging

import yaml


logger = logging.getLogger(__name__)


DEFAULT_CONFIG: Dict[str, Any] = {
    "draft": {
        "title": "Form Title",
        "description": "",
        "button_text": "Send",
        "number_of_pages": 1,
    },
    "fields": {
        "temp_id_prefix": "tempId",
        "content_type": "form",
    },
    "palette": {
        "plugins_dir": None,
    },
}


def load_config(path: Optional[str | Path] = None) -> Dict[str, Any]:
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    if not path:
        return cfg
    p = Path(path)
    if not p.exists():
        logger.warning("[config] config not found: %s (using defaults)", p)
        return cfg
    with p.open("r", encoding="utf-8") as f:
        user = yaml.safe_load(f) or {}
    if not isinstance(user, dict):
        raise ValueError(f"{p}: top level of the config must be a mapping")
    # shallow merge per section
    for k, v in user.items():
        if isinstance(v, dict) and k in cfg and isinstance(cfg[k], dict):
            cfg[k].update(v)
        else:
            cfg[k] = v
    return cfg
