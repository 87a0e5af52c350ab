"""
Configuration class for game master parsing and API generation.

This module provides the ApiConfig dataclass that holds all settings of a
generation run. Configurations can be built in code or loaded from a YAML file
with ApiConfig.from_yaml().
"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from pogo_api.utils.data.constants import (
    ASSETS_BASE_URL,
    DEFAULT_GAME_MASTER_URL,
    DEFAULT_LANGUAGES,
)


@dataclass
class ApiConfig:
    """
    Configuration for a game master parsing and API generation run.

    All reusable components (loaders, parser, generator) accept an ApiConfig
    instance for dependency injection.

    Example:
        config = ApiConfig(
            project_root=Path("/path/to/project"),
            languages=["English", "German"],
            ...
        )
    """

    # ============================================================================
    # Project Root Configuration
    # ============================================================================

    project_root: Path

    # ============================================================================
    # Game Master Configuration
    # ============================================================================

    game_master_file: str = ""  # Will be set in __post_init__ if empty
    game_master_url: str = DEFAULT_GAME_MASTER_URL
    download_timeout: int = 30

    # Group creature entries by species before folding, so the base does not depend on record order
    merge_orphan_variants: bool = False

    # ============================================================================
    # Translation Configuration
    # ============================================================================

    translations_dir: str = ""  # Will be set in __post_init__ if empty
    languages: list[str] = field(default_factory=lambda: list(DEFAULT_LANGUAGES))

    # ============================================================================
    # Output Configuration
    # ============================================================================

    output_dir: str = ""  # Will be set in __post_init__ if empty
    output_name: str = "pokedex"
    assets_base_url: str = ASSETS_BASE_URL

    # ============================================================================
    # Logging Configuration
    # ============================================================================

    logging_level: str = "INFO"
    logging_format: str = "text"
    logging_log_dir: str = ""  # Will be set in __post_init__ if empty
    logging_max_log_size_mb: int = 10
    logging_backup_count: int = 5
    logging_console_colors: bool = True
    logging_clear_on_run: bool = False

    def __post_init__(self):
        """Set default paths based on project_root if not provided and validate configuration.

        Raises:
            ValueError: If configuration validation fails
            TypeError: If configuration types are incorrect
        """
        if isinstance(self.project_root, str):
            self.project_root = Path(self.project_root)

        self._validate_required_fields()

        if not self.game_master_file:
            self.game_master_file = str(self.project_root / "data" / "game_master.json")

        if not self.translations_dir:
            self.translations_dir = str(self.project_root / "data" / "translations")

        if not self.output_dir:
            self.output_dir = str(self.project_root / "api")

        if not self.logging_log_dir:
            self.logging_log_dir = str(self.project_root / "logs")

        self._validate_configuration()

    @classmethod
    def from_yaml(cls, path: Path) -> "ApiConfig":
        """Load a configuration from a YAML file.

        Relative paths are resolved against the directory of the YAML file
        when ``project_root`` is not given.

        Args:
            path (Path): Path to the YAML configuration file

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file does not contain a mapping or has unknown keys

        Returns:
            ApiConfig: The loaded configuration
        """
        with open(path, "r", encoding="utf-8") as f:
            data: Any = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Configuration file {path} must contain a mapping")

        known_fields = {f.name for f in fields(cls)}
        unknown = set(data) - known_fields
        if unknown:
            raise ValueError(f"Unknown configuration keys in {path}: {', '.join(sorted(unknown))}")

        data.setdefault("project_root", str(Path(path).resolve().parent))
        data["project_root"] = Path(data["project_root"])
        return cls(**data)

    def _validate_required_fields(self) -> None:
        """Validate that all required fields are populated.

        Raises:
            ValueError: If required fields are missing or invalid
            TypeError: If field types are incorrect
        """
        if not isinstance(self.project_root, Path):
            raise TypeError(
                f"project_root must be a Path object, got {type(self.project_root).__name__}"
            )

        if not isinstance(self.languages, list):
            raise TypeError(f"languages must be a list, got {type(self.languages).__name__}")

        if not self.languages:
            raise ValueError("languages cannot be empty")

        if not self.output_name or not self.output_name.strip():
            raise ValueError("output_name cannot be empty")

    def _validate_configuration(self) -> None:
        """Validate configuration values and ranges.

        Raises:
            ValueError: If configuration values are invalid
        """
        valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.logging_level.upper() not in valid_log_levels:
            raise ValueError(
                f"logging_level must be one of {valid_log_levels}, got '{self.logging_level}'"
            )

        valid_log_formats = ["text", "json"]
        if self.logging_format not in valid_log_formats:
            raise ValueError(
                f"logging_format must be one of {valid_log_formats}, got '{self.logging_format}'"
            )

        if self.logging_max_log_size_mb <= 0:
            raise ValueError(
                f"logging_max_log_size_mb must be positive, got {self.logging_max_log_size_mb}"
            )

        if self.logging_backup_count < 0:
            raise ValueError(
                f"logging_backup_count must be non-negative, got {self.logging_backup_count}"
            )

        if self.download_timeout <= 0:
            raise ValueError(f"download_timeout must be positive, got {self.download_timeout}")

        if not self.game_master_url.startswith(("http://", "https://")):
            raise ValueError(
                f"game_master_url must start with http:// or https://, got '{self.game_master_url}'"
            )

        if "{dex_nr" not in self.assets_base_url or "{asset_bundle_id" not in self.assets_base_url:
            raise ValueError(
                "assets_base_url must contain {dex_nr} and {asset_bundle_id} placeholders, "
                f"got '{self.assets_base_url}'"
            )
