"""
Assembler configuration models.

Parses the [assembler] section from a TOML settings file and provides
typed configuration for document generation.

Example capsules.toml:

    [assembler]
    strict_instance_ids = true
    theme = "ocean"

    [[assembler.scripts]]
    src = "https://unpkg.com/react@18/umd/react.development.js"
    crossorigin = true
"""

from __future__ import annotations

import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from capsule_studio.errors import ConfigError


class RuntimeScript(BaseModel):
    """An external script loaded before the inline bundle."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    src: str
    crossorigin: bool = False


DEFAULT_RUNTIME_SCRIPTS: list[RuntimeScript] = [
    RuntimeScript(src="https://unpkg.com/react@18/umd/react.production.min.js", crossorigin=True),
    RuntimeScript(
        src="https://unpkg.com/react-dom@18/umd/react-dom.production.min.js", crossorigin=True
    ),
    RuntimeScript(src="https://unpkg.com/@babel/standalone/babel.min.js"),
    RuntimeScript(src="https://cdn.tailwindcss.com"),
]


class AssemblerSettings(BaseModel):
    """Complete assembler configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    scripts: list[RuntimeScript] = Field(
        default_factory=lambda: list(DEFAULT_RUNTIME_SCRIPTS),
        description="Runtime scripts, in load order",
    )
    script_type: str = Field(
        default="text/babel", description="Type attribute of the inline bundle script"
    )
    strict_instance_ids: bool = Field(
        default=True, description="Fail assembly on duplicate instance ids"
    )
    theme: str | None = Field(
        default=None, description="Theme preset whose CSS variables are inlined"
    )


def load_assembler_settings(toml_path: Path) -> AssemblerSettings:
    """
    Load assembler settings from a TOML file.

    Args:
        toml_path: Path to the settings file

    Returns:
        AssemblerSettings with parsed values, or defaults when the file or
        the [assembler] table is missing

    Raises:
        ConfigError: If the file is not valid TOML or the table has bad values
    """
    if not toml_path.exists():
        return AssemblerSettings()

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {toml_path}: {e}") from e

    assembler_data = data.get("assembler", {})
    if not assembler_data:
        return AssemblerSettings()

    try:
        return AssemblerSettings.model_validate(assembler_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid [assembler] settings in {toml_path}: {e}") from e
