"""Pydantic configuration models with code-baked defaults.

The persisted file (``~/.rkv/config.json``) uses camelCase keys so
journals set up by earlier releases keep loading. Python code uses the
snake_case field names.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_VAULT_NAME = "RKV-Journal"

# Characters that break Obsidian URIs or common filesystems.
INVALID_VAULT_NAME_CHARS = frozenset('<>:"|?*')


class EditorKind(StrEnum):
    """Editors rkv knows how to hand an entry to."""

    OBSIDIAN = "obsidian"
    CODE = "code"
    VIM = "vim"


def default_vault_path() -> Path:
    return Path.home() / "Google Drive" / DEFAULT_VAULT_NAME


def validate_vault_name(name: str) -> str | None:
    """Return an error message for an unusable vault name, else None."""
    if not name or not name.strip():
        return "Vault name cannot be empty."
    if any(ch in INVALID_VAULT_NAME_CHARS for ch in name):
        return 'Vault name cannot contain: < > : " | ? *'
    return None


class RkvConfig(BaseModel):
    """Persisted journal configuration."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    vault_path: Path = Field(default_factory=default_vault_path)
    vault_name: str = DEFAULT_VAULT_NAME
    editor: EditorKind = EditorKind.OBSIDIAN
    default_extension: str = ".md"

    @field_validator("vault_path", mode="before")
    @classmethod
    def _expand_home(cls, value: object) -> object:
        if isinstance(value, str | Path):
            return Path(value).expanduser()
        return value

    @field_validator("vault_name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        error = validate_vault_name(value)
        if error:
            raise ValueError(error)
        return value.strip()

    def to_json(self) -> str:
        """Serialize with the persisted camelCase keys."""
        return self.model_dump_json(by_alias=True, indent=2)
