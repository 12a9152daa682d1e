"""Template lookup with per-vault override support.

Entry templates live in ``<vault>/.templates/<key>.md``; packaged defaults
ship in ``rkv/templates/``. Lookup is a Jinja2 ``ChoiceLoader`` with the
vault loader before the package loader, so a vault override always wins.
Jinja2 only locates and reads the files here. Token substitution happens
in :func:`rkv.domain.templates.render`.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader

TEMPLATE_DIRNAME = ".templates"
TEMPLATE_SUFFIX = ".md"


@dataclass(frozen=True)
class TemplateSource:
    """A located template.

    Attributes:
        key: Template key (file stem), e.g. ``daily-morning``.
        text: Raw template text.
        origin: ``"vault"`` for an override, ``"default"`` for packaged.
        filename: Where the text was read from.
    """

    key: str
    text: str
    origin: str
    filename: str


def template_dir(vault_root: Path) -> Path:
    return vault_root / TEMPLATE_DIRNAME


def _package_loader() -> PackageLoader:
    return PackageLoader("rkv", "templates")


def _choice_loader(vault_root: Path | None) -> ChoiceLoader:
    """Vault overrides first, then packaged defaults."""
    loaders: list[BaseLoader] = []
    if vault_root is not None:
        loaders.append(FileSystemLoader(str(template_dir(vault_root))))
    loaders.append(_package_loader())
    return ChoiceLoader(loaders)


def load_template(key: str, *, vault_root: Path | None = None) -> TemplateSource:
    """Locate the template for *key*.

    Raises:
        jinja2.TemplateNotFound: Neither the vault nor the package has it.
        OSError: The template exists but cannot be opened.
        UnicodeDecodeError: The template is not UTF-8 text.
    """
    loader = _choice_loader(vault_root)
    env = Environment(loader=loader, keep_trailing_newline=True)
    name = f"{key}{TEMPLATE_SUFFIX}"
    text, filename, _uptodate = loader.get_source(env, name)
    origin = "default"
    if vault_root is not None and filename:
        if Path(filename).resolve().is_relative_to(template_dir(vault_root).resolve()):
            origin = "vault"
    return TemplateSource(key=key, text=text, origin=origin, filename=filename or name)


def list_default_templates() -> list[str]:
    """File names of all packaged templates."""
    return sorted(
        name for name in _package_loader().list_templates() if name.endswith(TEMPLATE_SUFFIX)
    )


def install_default_templates(vault_root: Path) -> list[str]:
    """Copy packaged templates into the vault without overwriting.

    Returns the file names that were copied.
    """
    loader = _package_loader()
    env = Environment(loader=loader, keep_trailing_newline=True)
    target = template_dir(vault_root)
    target.mkdir(parents=True, exist_ok=True)

    copied: list[str] = []
    for name in list_default_templates():
        dest = target / name
        if dest.exists():
            continue
        text, _filename, _uptodate = loader.get_source(env, name)
        dest.write_text(text, encoding="utf-8")
        copied.append(name)
    return copied
