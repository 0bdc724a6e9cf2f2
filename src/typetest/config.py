from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict

import yaml

DEFAULT_PASSAGE = (
    "Solid's overall approach to reactivity is to wrap any reactive computation in a function, "
    "and rerun that function when its dependencies update. The Solid JSX compiler also wraps most "
    "JSX expressions (code in braces) with a function, so they automatically update (and trigger "
    "corresponding DOM updates) when their dependencies change."
)

DEFAULT_CONFIG: Dict[str, Any] = {
    "challenge": {
        "passage": DEFAULT_PASSAGE,
    },
    "keys": {
        "word_delete_modifier": "alt",
    },
    "display": {
        "fullscreen": False,
        "window_size": [1280, 720],
        "font_size": 36,
        "width_ratio": 0.65,
        "word_gap": 16,
        "line_gap": 12,
    },
    "colors": {
        "background": [248, 248, 248],
        "default": [156, 163, 175],
        "correct": [34, 197, 94],
        "incorrect": [248, 113, 113],
        "cursor": [107, 33, 168],
    },
    "logging": {
        "level": "INFO",
    },
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if (
            key in merged
            and isinstance(merged[key], dict)
            and isinstance(value, dict)
        ):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _candidate_config_paths() -> list[Path]:
    env_path = os.environ.get("TYPETEST_CONFIG")
    paths = []
    if env_path:
        paths.append(Path(env_path))
    paths.extend([
        Path("config.yaml"),
        Path("/etc/typetest/config.yaml"),
    ])
    return paths


def load_config() -> Dict[str, Any]:
    config = dict(DEFAULT_CONFIG)
    for path in _candidate_config_paths():
        if path.exists():
            with path.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
            if isinstance(data, dict):
                config = _deep_merge(config, data)
            break
    return config
