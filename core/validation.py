"""
Pydantic models for configuration validation.

Provides schema validation and type checking for the sharecode-cli config file.
"""

import os
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, field_validator, ConfigDict

from .exceptions import ConfigurationError
from .languages import lookup_category

DEFAULT_SHARED_ROOT = "~/program/shared-code"


class SharecodeConfig(BaseModel):
    """Root configuration for sharecode-cli."""
    model_config = ConfigDict(extra='forbid')

    shared_root: str = Field(DEFAULT_SHARED_ROOT, description="Root of the shared-code repository")
    directories: Dict[str, str] = Field(default_factory=dict, description="Per-language sub-directory overrides")
    copy_command: Optional[List[str]] = Field(None, description="Copy command argv, source and '.' are appended")

    # Scanner options
    follow_symlinks: bool = Field(True, description="Descend into symlinked directories")
    max_depth: Optional[int] = Field(None, ge=0, description="Deepest level below the project root to scan")

    @field_validator('shared_root')
    @classmethod
    def validate_shared_root(cls, v):
        if not v.strip():
            raise ValueError("shared_root must not be empty")
        return v

    @field_validator('directories')
    @classmethod
    def validate_directory_keys(cls, v):
        """Ensure every override names a known language."""
        unknown = [k for k in v if lookup_category(k) is None]
        if unknown:
            raise ValueError(f"Unknown language(s) in directories: {', '.join(sorted(unknown))}")
        empty = [k for k, d in v.items() if not d.strip()]
        if empty:
            raise ValueError(f"Empty directory name for: {', '.join(sorted(empty))}")
        return v

    @field_validator('copy_command')
    @classmethod
    def validate_copy_command(cls, v):
        if v is not None and not v:
            raise ValueError("copy_command must name a program")
        return v


class ConfigValidator:
    """Loads a YAML config file and validates it."""

    def validate_data(self, data: dict) -> SharecodeConfig:
        """
        Validate already-parsed config data.

        Raises:
            ConfigurationError: If config is invalid (includes all validation errors)
        """
        from pydantic import ValidationError as PydanticValidationError

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config must be a mapping, got {type(data).__name__}"
            )

        try:
            return SharecodeConfig(**data)
        except PydanticValidationError as e:
            errors = []
            for error in e.errors():
                loc = " -> ".join(str(l) for l in error['loc'])
                errors.append(f"{loc}: {error['msg']}")
            raise ConfigurationError(
                "Configuration validation failed",
                context={"errors": errors}
            )

    def validate_config_file(self, config_path: str) -> SharecodeConfig:
        """
        Validate config file and return parsed configuration.

        Raises:
            ConfigurationError: If the file is missing, isn't YAML, or is invalid
        """
        import yaml

        if not os.path.isfile(config_path):
            raise ConfigurationError(f"Config file not found: {config_path}")

        try:
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse YAML: {e}")
        except OSError as e:
            raise ConfigurationError(f"Failed to read {config_path}: {e}")

        return self.validate_data(data)
