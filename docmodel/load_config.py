"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from docmodel.deep_merge import deep_merge
from docmodel.errors import ConfigurationError

DEFAULT_CONFIG: dict[str, Any] = {
    "groups": [],
    "search_directories": [],
    "assembly_extensions": [".dll", ".exe"],
    "documentation_extension": ".xml",
    "fallback_extensions": [".winmd"],
    "topics": [],
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if not p.exists():
            msg = f"Configuration file [{p}] not found"
            raise ConfigurationError(msg)
        try:
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            msg = f"Configuration file [{p}] is not valid YAML: {exc}"
            raise ConfigurationError(msg) from exc
        if not isinstance(user_config, dict):
            msg = f"Configuration file [{p}] must contain a mapping"
            raise ConfigurationError(msg)
        config = deep_merge(config, user_config)
    return config
