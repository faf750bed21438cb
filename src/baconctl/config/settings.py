"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``BACONCTL_*`` prefix
  3. TOML file    — ``baconctl.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from baconctl.config.discovery import find_config
from baconctl.config.models import OutputConfig, SearchConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``baconctl.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class BaconSettings(BaseSettings):
    """Unified settings for the baconctl CLI, frozen after construction.

    Attributes:
        config_path: The TOML file actually used, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "BACONCTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    search: SearchConfig = Field(default_factory=SearchConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        reference: str | None = None,
        list_path: bool | None = None,
        **cli_flags: Any,
    ) -> BaconSettings:
        """Construct settings from a CLI invocation.

        Uses the explicit *config_path* when given, else walks up from
        *start* (default: cwd). Only flags that are set are forwarded: an
        omitted flag arrives as False or None and must not mask an env var
        or config value. ``reference`` and ``list_path`` override fields
        inside their TOML sections.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if not p.is_file():
                msg = f"Config file not found: {config_path}"
                raise click.ClickException(msg)
            toml_path = p
        else:
            toml_path = find_config(start)

        overrides = {name: value for name, value in cli_flags.items() if value}

        _tls.toml_path = toml_path
        try:
            settings = cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None

        if reference is not None:
            search = settings.search.model_copy(update={"reference_actor": reference})
            settings = settings.model_copy(update={"search": search})
        if list_path:
            output = settings.output.model_copy(update={"list_path": True})
            settings = settings.model_copy(update={"output": output})
        return settings
