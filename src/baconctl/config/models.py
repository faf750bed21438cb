"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, baconctl.toml only contains
overrides. An empty (or absent) file means "Kevin Bacon, plain output".
"""

from __future__ import annotations

from pydantic import BaseModel


class SearchConfig(BaseModel):
    """[search] section."""

    model_config = {"frozen": True}

    reference_actor: str = "Kevin Bacon"
    exit_token: str = "exit"


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    list_path: bool = False
    color: bool = False

