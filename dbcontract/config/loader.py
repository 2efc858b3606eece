"""YAML loader for the config subsystem.

The helper consumes one YAML file, validates it via models.py and returns a
typed object to the caller. Sections missing from the file fall back to the
model defaults so an empty file is a valid config.
"""
from __future__ import annotations

from pathlib import Path
from typing import Mapping

import yaml

from .models import ClientConfig

_DEFAULT_CONFIG_PATH = Path("config") / "client.yml"


def _read_yaml(path: Path) -> Mapping:
    """Read a YAML file and return a mapping (empty dict if file is blank)."""

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"YAML root must be a mapping in {path}")
    return data


def load_client_config(path: Path | str = _DEFAULT_CONFIG_PATH) -> ClientConfig:
    """Load client.yml (``logging`` and ``store`` sections)."""

    data = _read_yaml(Path(path))
    return ClientConfig.model_validate(data)
