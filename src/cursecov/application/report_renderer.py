"""Plain text table rendering of a coverage report"""

from typing import List

from cursecov.domain.models.analysis import CoverageReport

MAX_PATH_WIDTH = 48
ELLIPSIS = "..."


def elide_path(path: str, width: int = MAX_PATH_WIDTH) -> str:
    """Shorten a path to `width` characters, keeping its head and tail"""
    if len(path) <= width:
        return path
    keep = width - len(ELLIPSIS)
    head = keep // 3
    tail = keep - head
    return path[:head] + ELLIPSIS + path[-tail:]


def render_report(report: CoverageReport) -> str:
    """Render the report as a table followed by the total coverage line"""
    rows: List[tuple] = [("file", "# curse", "# total", "%")]
    for analysis in report.files:
        rows.append(
            (
                elide_path(str(analysis.path)),
                str(analysis.curse_comment_count),
                str(analysis.comment_count),
                str(analysis.coverage),
            )
        )

    widths = [max(len(row[column]) for row in rows) for column in range(4)]
    separator = "-+-".join("-" * width for width in widths)

    lines = []
    for index, row in enumerate(rows):
        cells = [row[0].ljust(widths[0])] + [
            cell.rjust(width) for cell, width in zip(row[1:], widths[1:])
        ]
        lines.append(" | ".join(cells).rstrip())
        if index == 0:
            lines.append(separator)

    lines.append("")
    lines.append(f"Total curse coverage: {report.coverage}%")
    return "\n".join(lines)
