"""Tests for CoverageService"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from cursecov.application.coverage_service import CoverageService
from cursecov.domain.errors import DialectError, ParseError
from cursecov.domain.models.analysis import CoverageReport, FileCountAnalysis
from cursecov.domain.models.comment import Comment


def _extractor(comments_by_path):
    extractor = MagicMock()
    extractor.extract.side_effect = lambda path: [Comment(text=t) for t in comments_by_path[str(path)]]
    return extractor


class TestAnalyzeFile:
    """Tests for per-file analysis"""

    def test_counts_comments_and_curses(self):
        extractor = _extractor({"a.js": [" the dumbass declaration", " plain", " fucking shit"]})
        service = CoverageService(extractor=extractor)

        analysis = service.analyze_file(Path("a.js"))

        assert analysis == FileCountAnalysis(path=Path("a.js"), comment_count=3, curse_comment_count=2)

    def test_file_without_comments(self):
        service = CoverageService(extractor=_extractor({"a.js": []}))
        analysis = service.analyze_file(Path("a.js"))
        assert analysis.comment_count == 0
        assert analysis.coverage == 0


class TestAggregate:
    """Tests for CoverageService.aggregate"""

    def test_two_files_total_is_49(self):
        """Test that 2 of 4 comments across two files gives 49%"""
        extractor = _extractor(
            {
                "a.js": [" this is a fucking console log", " hello"],
                "foo/b.js": [" the crap part", " clean"],
            }
        )
        report = CoverageService(extractor=extractor).aggregate([Path("foo/b.js"), Path("a.js")])

        assert report.comment_count == 4
        assert report.curse_comment_count == 2
        assert report.coverage == 49
        assert [str(analysis.path) for analysis in report.files] == ["a.js", "foo/b.js"]

    def test_no_files(self):
        report = CoverageService(extractor=MagicMock()).aggregate([])
        assert report.files == []
        assert report.coverage == 0

    def test_first_error_aborts(self):
        """Test that an extraction error aborts without a partial report"""
        extractor = MagicMock()
        extractor.extract.side_effect = [
            [Comment(text=" fuck")],
            ParseError("b.js: Syntax error"),
            [Comment(text=" never reached")],
        ]
        service = CoverageService(extractor=extractor)

        with pytest.raises(ParseError, match="b.js"):
            service.aggregate([Path("a.js"), Path("b.js"), Path("c.js")])
        assert extractor.extract.call_count == 2

    def test_dialect_error_is_fatal(self):
        extractor = MagicMock()
        extractor.extract.side_effect = DialectError("Unsupported file extension '.txt'")
        with pytest.raises(DialectError):
            CoverageService(extractor=extractor).aggregate([Path("notes.txt")])


class TestRun:
    """Tests for CoverageService.run"""

    def test_run_resolves_then_aggregates(self):
        resolver = MagicMock()
        resolver.resolve.return_value = {Path("a.js")}
        extractor = _extractor({"a.js": [" shit"]})
        service = CoverageService(extractor=extractor, resolver=resolver)

        report = service.run(["**/*.js"], ["vendor/**"])

        resolver.resolve.assert_called_once_with(["**/*.js"], ["vendor/**"])
        assert report.curse_comment_count == 1

    def test_run_on_real_files(self, tmp_path, monkeypatch):
        (tmp_path / "foo").mkdir()
        (tmp_path / "hello.js").write_text(
            "// this is a fucking console log\nconsole.log('hello world')", encoding="utf-8"
        )
        (tmp_path / "foo" / "hello2.js").write_text(
            "// this is the dumbass declaration\nconst foo = 12;\n\n"
            "// then it prints the value\nconsole.log(foo);",
            encoding="utf-8",
        )
        (tmp_path / "hello3.txt").write_text("This fucking text file", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        report = CoverageService().run(["**/*.js", "**/*.ts"], [])

        assert [str(analysis.path) for analysis in report.files] == ["foo/hello2.js", "hello.js"]
        assert report.comment_count == 3
        assert report.curse_comment_count == 2
        assert report.coverage == 66


class TestCheck:
    """Tests for the coverage gate"""

    def _report(self, curse, total):
        return CoverageReport(
            files=[FileCountAnalysis(path=Path("a.js"), comment_count=total, curse_comment_count=curse)]
        )

    def test_passes_at_threshold(self):
        result = CoverageService(extractor=MagicMock()).check(self._report(2, 4), 49)
        assert result.passed
        assert result.message is None

    def test_fails_below_threshold(self):
        result = CoverageService(extractor=MagicMock()).check(self._report(2, 4), 50)
        assert not result.passed
        assert result.message == "Insufficient curse word coverage: expected 50% but was 49%."

    def test_passes_default_threshold(self):
        assert CoverageService(extractor=MagicMock()).check(self._report(2, 4), 30.0).passed

    def test_zero_comments_fail_positive_threshold(self):
        result = CoverageService(extractor=MagicMock()).check(self._report(0, 0), 30.0)
        assert result.message == "Insufficient curse word coverage: expected 30% but was 0%."

    def test_zero_threshold_always_passes(self):
        assert CoverageService(extractor=MagicMock()).check(self._report(0, 0), 0.0).passed

    def test_fractional_threshold_in_message(self):
        result = CoverageService(extractor=MagicMock()).check(self._report(0, 1), 12.5)
        assert "expected 12.5% but was 0%." in result.message
