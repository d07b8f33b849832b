"""Main application configuration model."""

from pydantic import BaseModel, ConfigDict, Field

from cursecov.domain.config.coverage import CoverageConfig
from cursecov.domain.config.patterns import PatternsConfig


class AppConfig(BaseModel):
    """Main application configuration.

    Root model aggregating all configuration sections. Validation happens at
    load time so a bad threshold fails before any source file is read.

    Attributes:
        patterns: File selection configuration
        coverage: Coverage gate configuration
    """

    patterns: PatternsConfig = Field(default_factory=PatternsConfig)
    coverage: CoverageConfig = Field(default_factory=CoverageConfig)

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "patterns": {
                    "include": ["src/**/*.ts", "src/**/*.tsx"],
                    "ignore": ["src/generated/**"],
                },
                "coverage": {
                    "min_coverage": 30.0,
                },
            }
        },
    )
