"""Analysis models - per-file counts and the aggregated coverage report"""

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

EPSILON = 0.0001


def coverage(curse_count: int, total_count: int) -> int:
    """Percentage of cursed comments, floored

    The epsilon keeps a zero-comment file at 0% instead of dividing by zero.

    Args:
        curse_count: Number of comments containing a curse word
        total_count: Number of comments

    Returns:
        Coverage percentage in [0, 100]
    """
    return math.floor(100 * curse_count / (total_count + EPSILON))


@dataclass
class FileCountAnalysis:
    """Comment counts for a single file"""

    path: Path
    comment_count: int = 0
    curse_comment_count: int = 0

    def __post_init__(self):
        """Validate counts"""
        if self.comment_count < 0 or self.curse_comment_count < 0:
            raise ValueError("Comment counts must be >= 0")
        if self.curse_comment_count > self.comment_count:
            raise ValueError("Curse comment count cannot exceed comment count")

    @property
    def coverage(self) -> int:
        """Curse coverage of this file"""
        return coverage(self.curse_comment_count, self.comment_count)


@dataclass
class CoverageReport:
    """Per-file analyses plus the total coverage across all of them"""

    files: List[FileCountAnalysis] = field(default_factory=list)

    def __post_init__(self):
        self.files = sorted(self.files, key=lambda analysis: str(analysis.path))

    @property
    def comment_count(self) -> int:
        return sum(analysis.comment_count for analysis in self.files)

    @property
    def curse_comment_count(self) -> int:
        return sum(analysis.curse_comment_count for analysis in self.files)

    @property
    def coverage(self) -> int:
        """Total coverage, weighted by comment volume"""
        return coverage(self.curse_comment_count, self.comment_count)


@dataclass
class GateResult:
    """Outcome of comparing a report against the minimum coverage"""

    coverage: int
    min_coverage: float
    message: Optional[str] = None  # Failure message if below threshold

    @property
    def passed(self) -> bool:
        return self.message is None
