"""Report rendering.

``render`` returns structured lines so callers decide how and where to print
them; ``MatchPrinter`` is a thin helper that prints them to a rich console.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from rich.console import Console
from rich.markup import escape

from pii_scan.aggregator import MatchAggregator
from pii_scan.enums import Confidence, LineKind
from pii_scan.formatting import pluralize
from pii_scan.models import MatchReport, ReportLine, RuleMatch
from pii_scan.settings import ScanSettings

VALUES_INDENT = "    "
SHOW_ALL_HINT = "Use --show-all to view them"


def is_visible(match: RuleMatch, *, show_all: bool = False) -> bool:
    """Low-confidence matches are hidden unless ``show_all`` is set."""
    return show_all or match.confidence != Confidence.LOW


def render(
    reports: Sequence[MatchReport],
    *,
    show_values: bool = False,
    show_all: bool = False,
) -> list[ReportLine]:
    """Render match reports into ordered report lines.

    Each visible report yields a match line. With ``show_values``, reports that
    carry values add an indented, comma-joined values line and a blank line.
    When low-confidence matches were hidden, a closing summary line says how
    many.
    """
    lines: list[ReportLine] = []
    suppressed = 0
    for report in reports:
        if not is_visible(report, show_all=show_all):
            suppressed += 1
            continue

        lines.append(ReportLine(kind=LineKind.MATCH, identifier=report.identifier, text=report.description))
        if show_values and report.values:
            lines.append(ReportLine(kind=LineKind.VALUES, text=VALUES_INDENT + ", ".join(report.values)))
            lines.append(ReportLine(kind=LineKind.BLANK))

    if suppressed:
        lines.append(ReportLine(kind=LineKind.SUMMARY, text=summary_text(suppressed)))
    return lines


def summary_text(suppressed: int) -> str:
    return f"Also found {pluralize(suppressed, 'low confidence match')}. {SHOW_ALL_HINT}"


def format_report(
    matches: Iterable[RuleMatch],
    *,
    settings: ScanSettings | None = None,
    show_values: bool | None = None,
    show_all: bool | None = None,
    row_noun: str | None = None,
    max_values: int | None = None,
) -> list[ReportLine]:
    """Aggregate raw matches and render them in one step.

    Options left as ``None`` are taken from ``settings``, which defaults to
    ``ScanSettings()`` and so honours the ``PII_SCAN_*`` environment variables.
    """
    settings = settings or ScanSettings()
    show_values = settings.show_values if show_values is None else show_values
    show_all = settings.show_all if show_all is None else show_all
    row_noun = settings.row_noun if row_noun is None else row_noun
    max_values = settings.max_values if max_values is None else max_values

    reports = MatchAggregator(max_values=max_values).aggregate(matches, row_noun=row_noun, show_values=show_values)
    return render(reports, show_values=show_values, show_all=show_all)


def markup(line: ReportLine) -> str:
    """Rich markup for a report line, with the column identifier in yellow."""
    if line.identifier is not None:
        return f"[yellow]{escape(line.identifier + ':')}[/yellow] {escape(line.text)}"
    return escape(line.text)


class MatchPrinter:
    """Prints report lines to a rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(highlight=False)

    def print_lines(self, lines: Iterable[ReportLine]) -> None:
        for line in lines:
            self._console.print(markup(line), highlight=False, emoji=False, soft_wrap=True)
