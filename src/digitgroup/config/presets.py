"""Preset file discovery and loading.

Walk-up finder locates digitgroup.toml, similar to how git finds .git/.
The CLI's --config flag overrides discovery. Each ``[presets.<name>]`` table
is validated as a GroupingConfig and merged over the built-in presets.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from digitgroup.config.models import BUILTIN_PRESETS, GroupingConfig, PresetsConfig
from digitgroup.domain.errors import InvalidConfig

CONFIG_FILENAME = "digitgroup.toml"

logger = logging.getLogger(__name__)


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for digitgroup.toml.

    Returns the path to the config file, or None if not found.
    """
    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise InvalidConfig(msg) from exc
    except OSError as exc:
        msg = f"Cannot read preset file {path}: {exc}"
        raise InvalidConfig(msg) from exc


def load_presets(path: Path | None = None, cwd: Path | None = None) -> PresetsConfig:
    """Load presets from a TOML file on top of the built-ins.

    If *path* is None, uses find_config(*cwd*) to discover the file.
    Returns the built-in presets if no file is found. A file table may
    reuse a built-in name to replace that preset.
    """
    if path is None:
        path = find_config(cwd)

    if path is None:
        logger.debug("No preset file found from %s", cwd or Path.cwd())
        return PresetsConfig()

    data = _read_toml(path)
    tables = data.get("presets", {})
    if not isinstance(tables, dict):
        msg = f"[presets] in {path} must be a table"
        raise InvalidConfig(msg)

    presets = dict(BUILTIN_PRESETS)
    for name, table in tables.items():
        if not isinstance(table, dict):
            msg = f"[presets.{name}] in {path} must be a table"
            raise InvalidConfig(msg)
        try:
            presets[name] = GroupingConfig.model_validate(table)
        except InvalidConfig as exc:
            msg = f"[presets.{name}] in {path}: {exc}"
            raise InvalidConfig(msg) from exc
        logger.debug("Loaded preset %s from %s", name, path)

    return PresetsConfig(presets=presets)
