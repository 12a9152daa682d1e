"""Unified settings — CLI flags, env vars, and the JSON config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``RKV_*`` prefix (``RKV_JOURNAL__VAULT_NAME=...``)
  3. JSON file    — ``~/.rkv/config.json`` (or ``--config`` / ``RKV_CONFIG``)
  4. Code defaults — baked into :class:`RkvConfig`

Uses Pydantic Settings v2 with a custom :class:`JsonConfigSettingsSource`
fed by :func:`rkv.config.discovery.read_config_file`. The resulting object
is frozen and threaded explicitly through every call; there is no
process-wide config.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from rkv.config.discovery import ConfigStatus, find_config, read_config_file
from rkv.config.models import RkvConfig

ENV_PREFIX = "RKV_"


class JsonConfigSettingsSource(PydanticBaseSettingsSource):
    """Supply the ``journal`` section from an already-read JSON config."""

    def __init__(self, settings_cls: type[BaseSettings], data: dict[str, Any] | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {"journal": data} if data else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full config data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for the config data during construction.
_tls = threading.local()


class RkvSettings(BaseSettings):
    """Unified settings for the rkv CLI.

    Stored in ``click.Context.obj`` (via AppContext) at the CLI root level.

    Attributes:
        config_path: Config file that was (or would be) read.
        config_status: Whether that file loaded, was missing, or was corrupt.
        journal: The persisted journal configuration.
    """

    model_config = {
        "frozen": True,
        "env_prefix": ENV_PREFIX,
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    config_status: ConfigStatus = ConfigStatus.MISSING

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_interact: bool = False

    journal: RkvConfig = Field(default_factory=RkvConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the JSON source between env vars and defaults."""
        data = getattr(_tls, "config_data", None)
        return (
            init_settings,
            env_settings,
            JsonConfigSettingsSource(settings_cls, data),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | Path | None = None,
        **cli_flags: Any,
    ) -> RkvSettings:
        """Construct settings from a CLI invocation.

        Locates the config file (explicit *config_path*, ``RKV_CONFIG``,
        or ``~/.rkv/config.json``), reads it once, and merges CLI flags
        as highest-priority overrides.

        Raises:
            click.ClickException: An ``RKV_*`` variable holds an invalid value.
        """
        path = find_config(config_path)
        data, status = read_config_file(path)

        _tls.config_data = data
        try:
            return cls(config_path=path, config_status=status, **cli_flags)
        except ValidationError as exc:
            import click

            # The file was validated on read, so the bad value came from the environment.
            problems = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            )
            msg = f"Invalid {ENV_PREFIX}* environment setting: {problems}"
            raise click.ClickException(msg) from exc
        finally:
            _tls.config_data = None
