"""
Configuration for OBJ export operations.

This module provides the export configuration dataclass, with validation,
defaults, and JSON serialization capabilities.
"""

import json
import logging
from typing import Dict, Any, Optional
from dataclasses import dataclass, field, asdict, fields

# Set up logging
logger = logging.getLogger(__name__)

DEFAULT_TOOL_NAME = "objwriter"


@dataclass
class ObjExportConfig:
    """
    Configuration for writing meshes to an OBJ file.

    ``export_uv`` and ``export_normals`` select which optional channels are
    written and, with them, the layout of every face record. The header
    comment is built from ``tool_name`` and ``tool_version``.
    """
    export_uv: bool = True
    export_normals: bool = True

    # Header comment
    tool_name: str = DEFAULT_TOOL_NAME
    tool_version: Optional[str] = None

    # Optional parameters (stored as dict)
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.validate()

    def validate(self) -> None:
        """
        Validate configuration parameters.

        Raises:
            ValueError: If configuration is invalid
        """
        for name in ('export_uv', 'export_normals'):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(f"{name} must be a boolean, got {type(value).__name__}")

        if not isinstance(self.tool_name, str) or not self.tool_name:
            raise ValueError("tool_name must be a non-empty string")

        if any(ch.isspace() for ch in self.tool_name):
            raise ValueError(f"tool_name cannot contain whitespace, got '{self.tool_name}'")

        if self.tool_version is not None:
            if not isinstance(self.tool_version, str) or not self.tool_version:
                raise ValueError("tool_version must be a non-empty string or None")
            if '\n' in self.tool_version or '\r' in self.tool_version:
                raise ValueError("tool_version cannot contain line breaks")

    @property
    def version_string(self) -> str:
        """Version written in the header, defaulting to the package version."""
        if self.tool_version is not None:
            return self.tool_version
        from objwriter import __version__
        return __version__

    def header_line(self) -> str:
        """Get the header comment line (without the line break)."""
        return f"# {self.tool_name} {self.version_string}"

    def as_dict(self) -> Dict[str, Any]:
        """
        Get configuration as a dictionary.

        Returns:
            Dictionary representation of configuration
        """
        result = asdict(self)
        # Remove extra if empty
        if not result['extra']:
            del result['extra']
        return result

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'ObjExportConfig':
        """
        Create configuration from a dictionary.

        Args:
            config_dict: Dictionary of configuration parameters

        Returns:
            New ObjExportConfig instance
        """
        field_names = [f.name for f in fields(cls)]
        known_params = {k: v for k, v in config_dict.items() if k in field_names}
        extra_params = {k: v for k, v in config_dict.items() if k not in known_params}

        config = cls(**known_params)
        config.extra.update(extra_params)
        return config


class ConfigManager:
    """
    Manager for creating, reading and writing export configurations.
    """

    @classmethod
    def get_default_config(cls) -> ObjExportConfig:
        """Get the default configuration."""
        return ObjExportConfig()

    @classmethod
    def create_config(cls, base: Optional[ObjExportConfig] = None, **kwargs) -> ObjExportConfig:
        """
        Create configuration with default values and overrides.

        Args:
            base: Configuration to start from (defaults if None)
            **kwargs: Configuration overrides

        Returns:
            ObjExportConfig with specified values
        """
        config_dict = (base or cls.get_default_config()).as_dict()
        extra = config_dict.pop('extra', {})
        config_dict.update(extra)
        config_dict.update(kwargs)
        return ObjExportConfig.from_dict(config_dict)

    @classmethod
    def load_config(cls, config_file: str) -> ObjExportConfig:
        """
        Load configuration from a JSON file.

        Args:
            config_file: Path to configuration file

        Returns:
            ObjExportConfig loaded from file

        Raises:
            IOError: If file cannot be read or holds an invalid configuration
        """
        try:
            with open(config_file, 'r') as f:
                config_dict = json.load(f)

            if not isinstance(config_dict, dict):
                raise ValueError("configuration must be a JSON object")

            return ObjExportConfig.from_dict(config_dict)

        except (OSError, ValueError, TypeError) as e:
            raise IOError(f"Failed to load configuration from {config_file}: {e}")

    @classmethod
    def save_config(cls, config: ObjExportConfig, config_file: str) -> None:
        """
        Save configuration to a JSON file.

        Args:
            config: ObjExportConfig to save
            config_file: Path to configuration file

        Raises:
            IOError: If file cannot be written
        """
        try:
            with open(config_file, 'w') as f:
                json.dump(config.as_dict(), f, indent=2)
            logger.debug(f"Saved export configuration to {config_file}")

        except (OSError, TypeError) as e:
            raise IOError(f"Failed to save configuration to {config_file}: {e}")
