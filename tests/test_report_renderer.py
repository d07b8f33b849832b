"""Tests for the report renderer"""

from pathlib import Path

from cursecov.application.report_renderer import MAX_PATH_WIDTH, elide_path, render_report
from cursecov.domain.models.analysis import CoverageReport, FileCountAnalysis


class TestElidePath:
    """Tests for elide_path"""

    def test_short_path_unchanged(self):
        assert elide_path("foo/hello2.js") == "foo/hello2.js"

    def test_long_path_elided_to_width(self):
        path = "packages/" + "very-long-directory-name/" * 4 + "index.js"
        elided = elide_path(path)
        assert len(elided) == MAX_PATH_WIDTH
        assert "..." in elided
        assert elided.startswith("packages/")
        assert elided.endswith("/index.js")


class TestRenderReport:
    """Tests for render_report"""

    def test_table_rows_and_total(self):
        report = CoverageReport(
            files=[
                FileCountAnalysis(path=Path("hello.js"), comment_count=1, curse_comment_count=1),
                FileCountAnalysis(path=Path("foo/hello2.js"), comment_count=2, curse_comment_count=1),
            ]
        )

        lines = render_report(report).splitlines()

        assert lines[0].split(" | ") == ["file         ", "# curse", "# total", " %"]
        assert set(lines[1]) <= {"-", "+"}
        assert lines[2].startswith("foo/hello2.js")
        assert lines[2].split(" | ")[1:] == ["      1", "      2", "49"]
        assert lines[3].startswith("hello.js")
        assert lines[-1] == "Total curse coverage: 66%"

    def test_empty_report(self):
        output = render_report(CoverageReport())
        assert output.splitlines()[0].startswith("file")
        assert output.endswith("Total curse coverage: 0%")
