"""Configuration manager for loading and validating .cursecov.yml"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError

from cursecov.domain.config import AppConfig, CoverageConfig, PatternsConfig
from cursecov.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".cursecov.yml"


class ConfigManager:
    """Manages configuration from .cursecov.yml and environment variables

    Configuration priority (lowest first):
    1. Default values (defined in Pydantic models)
    2. .cursecov.yml file (searched from current directory upwards)
    3. Environment variables (CURSECOV_*)
    4. CLI arguments (passed as overrides)
    """

    DEFAULT_CONFIG = {
        "patterns": {
            "include": ["**/*.js", "**/*.ts"],
            "ignore": [],
        },
        "coverage": {
            "min_coverage": 30.0,
        },
    }

    ENV_OVERRIDES = {
        "CURSECOV_INCLUDE_PATTERN": ("patterns", "include"),
        "CURSECOV_IGNORE_PATTERN": ("patterns", "ignore"),
        "CURSECOV_MIN_COVERAGE": ("coverage", "min_coverage"),
    }

    def __init__(
        self,
        config_path: Optional[Path] = None,
        overrides: Optional[Dict[str, Dict[str, Any]]] = None,
    ):
        """Initialize config manager

        Args:
            config_path: Path to .cursecov.yml (searches from current dir if None)
            overrides: Section-keyed values from the CLI; None values are skipped

        Raises:
            ConfigurationError: If the config file is unreadable or validation fails
        """
        if isinstance(config_path, str):
            config_path = Path(config_path)
        self.config_path = config_path or self._find_config_file()
        self.overrides = overrides or {}
        try:
            self.config: AppConfig = self._load_config()
        except ValidationError as e:
            errors = []
            for error in e.errors():
                field = ".".join(str(x) for x in error["loc"])
                msg = error["msg"]
                errors.append(f"  - {field}: {msg}")
            raise ConfigurationError(
                "Configuration validation failed:\n" + "\n".join(errors)
            ) from e

    def _find_config_file(self) -> Optional[Path]:
        """Find .cursecov.yml starting from current directory

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        for parent in [current] + list(current.parents):
            config_file = parent / CONFIG_FILE_NAME
            if config_file.is_file():
                logger.info(f"Found config file: {config_file}")
                return config_file
        logger.debug(f"No {CONFIG_FILE_NAME} found, using defaults")
        return None

    def _load_config(self) -> AppConfig:
        """Merge all configuration sources and validate with Pydantic

        Returns:
            Validated AppConfig instance

        Raises:
            ValidationError: If configuration is invalid
            ConfigurationError: If the config file cannot be read or parsed
        """
        config_dict = copy.deepcopy(self.DEFAULT_CONFIG)

        if self.config_path:
            config_dict = self._merge_config(config_dict, self._read_config_file())

        config_dict = self._apply_env_overrides(config_dict)
        config_dict = self._merge_config(
            config_dict,
            {
                section: {key: value for key, value in values.items() if value is not None}
                for section, values in self.overrides.items()
            },
        )

        return AppConfig(**config_dict)

    def _read_config_file(self) -> Dict[str, Any]:
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                file_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load config from {self.config_path}: {e}") from e

        if not isinstance(file_config, dict):
            raise ConfigurationError(
                f"Config file {self.config_path} must contain a mapping at the top level"
            )
        logger.info(f"Loaded configuration from {self.config_path}")
        return file_config

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge configuration dictionaries

        Args:
            base: Base configuration
            override: Override configuration

        Returns:
            Merged configuration
        """
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_config(result[key], value)
            else:
                result[key] = value
        return result

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        for env_name, (section, key) in self.ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value is None:
                continue
            logger.debug(f"Applying {env_name} override")
            if isinstance(config.get(section), dict):
                config[section][key] = value
            else:
                config[section] = {key: value}
        return config

    def get_patterns_config(self) -> PatternsConfig:
        """Get file patterns configuration

        Returns:
            Patterns configuration model
        """
        return self.config.patterns

    def get_coverage_config(self) -> CoverageConfig:
        """Get coverage gate configuration

        Returns:
            Coverage configuration model
        """
        return self.config.coverage

    def get_include_patterns(self) -> List[str]:
        return self.config.patterns.include

    def get_ignore_patterns(self) -> List[str]:
        return self.config.patterns.ignore

    def get_min_coverage(self) -> float:
        return self.config.coverage.min_coverage
