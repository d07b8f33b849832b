"""Configuration models with Pydantic validation."""

from cursecov.domain.config.app import AppConfig
from cursecov.domain.config.coverage import CoverageConfig
from cursecov.domain.config.patterns import PatternsConfig

__all__ = [
    "AppConfig",
    "CoverageConfig",
    "PatternsConfig",
]
