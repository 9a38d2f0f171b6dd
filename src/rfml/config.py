"""Configuration management for rfml."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field, field_validator

from .constants import CONFIG_FILENAME, UPLOAD_FUNCTIONS, UPLOAD_NAMESPACE


class ParserConfig(BaseModel):
    """Configuration for RFML parsing."""

    default_redirect: bool = Field(
        default=True, description="Redirect flag for steps without a redirect directive"
    )


class UploadsConfig(BaseModel):
    """Configuration for uploadable-file detection."""

    namespace: str = Field(default=UPLOAD_NAMESPACE, description="Template object name")
    functions: list[str] = Field(
        default_factory=lambda: list(UPLOAD_FUNCTIONS),
        description="Function names that trigger a file upload",
    )

    @field_validator("functions")
    @classmethod
    def strip_function_names(cls, value: list[str]) -> list[str]:
        """Drop blank names and surrounding whitespace."""
        return [name.strip() for name in value if name.strip()]


class RfmlConfig(BaseModel):
    """Root configuration for rfml."""

    parser: ParserConfig = Field(default_factory=ParserConfig)
    uploads: UploadsConfig = Field(default_factory=UploadsConfig)


def load_config(config_dir: Path) -> RfmlConfig:
    """Load config from rfml.toml.

    Args:
        config_dir: Directory containing rfml.toml

    Returns:
        Loaded configuration, or defaults if rfml.toml doesn't exist
    """
    config_path = config_dir / CONFIG_FILENAME
    if not config_path.exists():
        return RfmlConfig()
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return RfmlConfig.model_validate(data)


def write_config_template(config_dir: Path) -> Path:
    """Write default rfml.toml template.

    Args:
        config_dir: Directory to write rfml.toml into

    Returns:
        Path to the written config file
    """
    config_path = config_dir / CONFIG_FILENAME
    template = {
        "parser": {"default_redirect": True},
        # Template calls like {{ file.download(./path) }} mark steps needing an upload
        "uploads": {"namespace": UPLOAD_NAMESPACE, "functions": list(UPLOAD_FUNCTIONS)},
    }
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
