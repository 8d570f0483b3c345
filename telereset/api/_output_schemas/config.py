"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command.

    Output structure:
    - errors: list[str] - list of error messages, empty list if no errors
    - warnings: list[str] - list of warning messages, empty list if no warnings
    - section: str - the section name, empty string for the whole configuration
    - content: dict[str, Any] - the section (or whole) config dict, empty on error
    - config_path: str - path to the configuration file
    - exists: bool - whether the file exists (defaults are shown otherwise)
    """

    section: str = Field(..., description="Section name, empty string for the whole configuration")
    content: dict[str, Any] = Field(..., description="Configuration dict for the section, or all sections")
    config_path: str = Field(..., description="Path to the configuration file")
    exists: bool = Field(..., description="Whether the configuration file exists")


class ConfigPathOutput(BaseOutputSchema):
    """Output schema for config path command."""

    config_path: str = Field(..., description="Path to the configuration file")
    home_dir: str = Field(..., description="telereset home directory")
    exists: bool = Field(..., description="Whether the configuration file exists")


class ConfigInitOutput(BaseOutputSchema):
    """Output schema for config init command."""

    config_path: str = Field(..., description="Path to the configuration file")
    content: dict[str, Any] = Field(..., description="Configuration written, empty on error")
    overwritten: bool = Field(..., description="Whether an existing file was replaced")


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""

    version: str = Field(..., description="Package version string")


register_output_schema("config", "show", ConfigShowOutput)
register_output_schema("config", "path", ConfigPathOutput)
register_output_schema("config", "init", ConfigInitOutput)
register_output_schema("config", "version", ConfigVersionOutput)
