"""Coverage service - orchestrates the curse word coverage analysis"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from cursecov.application.comment_extractor import CommentExtractor
from cursecov.domain.models.analysis import CoverageReport, FileCountAnalysis, GateResult
from cursecov.domain.vocabulary import DEFAULT_MATCHER, CurseWordMatcher
from cursecov.infrastructure.file_resolver import FileResolver

logger = logging.getLogger(__name__)


class CoverageService:
    """Service computing curse word coverage over a set of files"""

    def __init__(
        self,
        extractor: Optional[CommentExtractor] = None,
        matcher: Optional[CurseWordMatcher] = None,
        resolver: Optional[FileResolver] = None,
    ):
        """Initialize coverage service

        Args:
            extractor: Comment extractor (a new CommentExtractor if None)
            matcher: Curse word matcher (the shared default if None)
            resolver: File resolver (a new FileResolver if None)
        """
        self.extractor = extractor or CommentExtractor()
        self.matcher = matcher or DEFAULT_MATCHER
        self.resolver = resolver or FileResolver()

    def analyze_file(self, path: Path) -> FileCountAnalysis:
        """Count comments and cursed comments of a single file"""
        comments = self.extractor.extract(path)
        curse_count = sum(1 for comment in comments if self.matcher.matches(comment.text))
        return FileCountAnalysis(
            path=path,
            comment_count=len(comments),
            curse_comment_count=curse_count,
        )

    def aggregate(self, files: Iterable[Path]) -> CoverageReport:
        """Analyze every file and build the coverage report

        The first extraction error aborts the whole aggregation.

        Args:
            files: Files to analyze

        Returns:
            Coverage report with one entry per file
        """
        analyses = [self.analyze_file(path) for path in sorted(files, key=str)]
        report = CoverageReport(files=analyses)
        logger.info(
            f"Analyzed {len(analyses)} files: {report.curse_comment_count}/"
            f"{report.comment_count} comments contain curse words"
        )
        return report

    def run(self, include_patterns: Iterable[str], ignore_patterns: Iterable[str]) -> CoverageReport:
        """Resolve files from glob patterns and aggregate their coverage"""
        files = self.resolver.resolve(include_patterns, ignore_patterns)
        return self.aggregate(files)

    def check(self, report: CoverageReport, min_coverage: float) -> GateResult:
        """Compare total coverage against the minimum

        Args:
            report: Coverage report
            min_coverage: Minimum coverage percentage

        Returns:
            Gate result; message is set when coverage is insufficient
        """
        actual = report.coverage
        if actual >= min_coverage:
            return GateResult(coverage=actual, min_coverage=min_coverage)
        return GateResult(
            coverage=actual,
            min_coverage=min_coverage,
            message=(
                f"Insufficient curse word coverage: expected {min_coverage:g}% "
                f"but was {actual}%."
            ),
        )
