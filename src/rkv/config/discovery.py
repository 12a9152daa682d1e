"""Config file discovery, loading, and saving.

The config lives at ``~/.rkv/config.json``. The ``RKV_CONFIG`` env var
and the ``--config`` CLI flag point elsewhere.

A file that exists but cannot be parsed is reported as ``corrupt`` and
treated like a missing one: defaults apply, and the caller surfaces a
notice instead of failing.
"""

from __future__ import annotations

import json
import os
from enum import StrEnum
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from rkv.config.models import RkvConfig

CONFIG_DIRNAME = ".rkv"
CONFIG_FILENAME = "config.json"
CONFIG_ENV_VAR = "RKV_CONFIG"

logger = structlog.get_logger(__name__)


class ConfigStatus(StrEnum):
    """Outcome of reading the config file."""

    LOADED = "loaded"
    MISSING = "missing"
    CORRUPT = "corrupt"


def default_config_path() -> Path:
    """``~/.rkv/config.json``."""
    return Path.home() / CONFIG_DIRNAME / CONFIG_FILENAME


def find_config(explicit: str | Path | None = None) -> Path:
    """Return the config path to use.

    Priority: *explicit* (``--config``), ``RKV_CONFIG``, then the default
    location. The returned path may not exist yet.
    """
    if explicit:
        return Path(explicit).expanduser()
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return default_config_path()


def read_config_file(path: Path) -> tuple[dict[str, Any], ConfigStatus]:
    """Read and validate the raw config at *path*.

    Returns ``(data, status)`` where *data* uses snake_case field names
    and only holds keys present in the file.
    """
    if not path.is_file():
        return {}, ConfigStatus.MISSING

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            msg = "top-level JSON value must be an object"
            raise TypeError(msg)
        config = RkvConfig.model_validate(raw)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, TypeError, ValidationError) as exc:
        logger.warning("config.corrupt", path=str(path), error=str(exc))
        return {}, ConfigStatus.CORRUPT

    data = config.model_dump(exclude_unset=True, mode="json")
    return data, ConfigStatus.LOADED


def save_config(config: RkvConfig, path: Path | None = None) -> Path:
    """Write *config* as JSON, creating the parent directory. Returns the path."""
    target = path or find_config()
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(config.to_json() + "\n", encoding="utf-8")
    logger.debug("config.saved", path=str(target))
    return target
