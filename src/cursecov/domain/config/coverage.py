"""Coverage threshold configuration model."""

from pydantic import BaseModel, ConfigDict, field_validator


class CoverageConfig(BaseModel):
    """Configuration for the coverage gate.

    Attributes:
        min_coverage: Minimum percentage of comments that need curse words (0-100)
    """

    min_coverage: float = 30.0

    model_config = ConfigDict(extra="forbid")

    @field_validator("min_coverage")
    @classmethod
    def _check_range(cls, value: float) -> float:
        # NaN fails both comparisons
        if not 0.0 <= value <= 100.0:
            raise ValueError("Min coverage must be between 0 and 100")
        return value
