"""File patterns configuration model."""

from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


def split_patterns(value: str) -> List[str]:
    """Split a comma-separated pattern string

    Entries are trimmed and empty entries dropped, so "" yields no patterns.
    """
    return [pattern.strip() for pattern in value.split(",") if pattern.strip()]


class PatternsConfig(BaseModel):
    """Configuration for file selection.

    Attributes:
        include: Glob patterns of files to analyze
        ignore: Glob patterns of files to leave out
    """

    include: List[str] = Field(default_factory=lambda: ["**/*.js", "**/*.ts"])
    ignore: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    @field_validator("include", "ignore", mode="before")
    @classmethod
    def _split_string(cls, value: Union[str, List[str], None]):
        if value is None:
            return []
        if isinstance(value, str):
            return split_patterns(value)
        if isinstance(value, list):
            # Non-string entries are left for type validation to reject
            return [
                pattern.strip() if isinstance(pattern, str) else pattern
                for pattern in value
                if not isinstance(pattern, str) or pattern.strip()
            ]
        return value
