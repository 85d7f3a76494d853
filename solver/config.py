from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULTS: Dict[str, Any] = {
    "input": "sudoku_boards.txt",
    "show": False,
    "show_candidates": False,
    "show_steps": False,
    "max_boards": None,
    "progress": False,
    "log_level": "WARNING",
    "json": False,
}


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return DotDict(data)


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


def resolve_config(path: Optional[str | Path] = None, **overrides) -> DotDict:
    """defaults < YAML file < explicit overrides (None means 'not given')."""
    cfg = DotDict(DEFAULTS)
    if path is not None:
        cfg.update(load_yaml(path))
    cfg = merge_overrides(cfg, **overrides)
    # logging only accepts upper-case level names
    cfg.log_level = str(cfg.log_level).upper()
    return cfg
