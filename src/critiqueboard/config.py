"""Configuration management for critiqueboard."""

import copy
import os
from pathlib import Path
from typing import Any

import yaml


DEFAULT_CONFIG = {
    "analyses_path": "~/.critiqueboard/analyses",
    "claude_model": "claude-sonnet-4-20250514",
    "merge": {"strategy": "weighted", "weighted_threshold": 0.6, "jaccard_threshold": 0.7, "max_points": 10},
    "analysis": {"point_count": 10, "max_tokens": 1000},
    "themes": {
        "count": 4,
        "colors": ["light_green", "light_blue", "light_yellow", "light_pink", "violet", "light_gray"],
    },
}


def _find_config_file() -> Path | None:
    """Look for config.yaml in standard locations."""
    candidates = [
        Path.cwd() / "config" / "config.yaml",
        Path.cwd() / "config.yaml",
        Path.home() / ".critiqueboard" / "config.yaml",
    ]
    for p in candidates:
        if p.exists():
            return p
    return None


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration, merging defaults with file and env vars."""
    cfg = copy.deepcopy(DEFAULT_CONFIG)

    path = Path(config_path) if config_path else _find_config_file()
    if path and path.exists():
        with open(path) as f:
            file_cfg = yaml.safe_load(f) or {}
        _deep_merge(cfg, file_cfg)

    # Env overrides
    if api_key := os.environ.get("ANTHROPIC_API_KEY"):
        cfg["claude_api_key"] = api_key

    cfg["analyses_path"] = str(Path(cfg["analyses_path"]).expanduser().resolve())

    return cfg


def _deep_merge(base: dict, override: dict) -> None:
    """Merge override into base in-place."""
    for k, v in override.items():
        if k in base and isinstance(base[k], dict) and isinstance(v, dict):
            _deep_merge(base[k], v)
        else:
            base[k] = v
