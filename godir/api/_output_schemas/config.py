"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema


class ConfigListOutput(BaseOutputSchema):
    """Output schema for the config list command.

    Output structure:
    - errors: list[str] - list of error messages, empty list if no errors
    - warnings: list[str] - list of warning messages, empty list if no warnings
    - content: dict[str, Any] - the persisted config ("directories" and "excludes"), empty on error
    - config_path: str - path to the configuration file
    """

    content: dict[str, Any] = Field(..., description="Persisted config, empty dict on error")
    config_path: str = Field(..., description="Path to the configuration file")


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""

    version: str = Field(..., description="Package version string")
    full_version: str = Field(..., description="Version string as printed by --version")
