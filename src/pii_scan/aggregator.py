"""Match aggregation: value deduplication, capping and low-confidence partitioning."""

from __future__ import annotations

import re
from collections.abc import Iterable

from pii_scan.enums import Confidence
from pii_scan.formatting import describe
from pii_scan.models import MatchReport, RuleMatch

MAX_VALUES = 50

_WHITESPACE = re.compile(r"\s+")


def unique_values(values: Iterable[str]) -> list[str]:
    """Drop exact duplicates, keeping the first occurrence of each value."""
    return list(dict.fromkeys(values))


def low_confidence(matches: Iterable[RuleMatch]) -> list[RuleMatch]:
    """Return only the low-confidence matches."""
    return [match for match in matches if match.confidence == Confidence.LOW]


class MatchAggregator:
    """Builds match reports with bounded, deterministic value lists."""

    def __init__(self, *, max_values: int = MAX_VALUES) -> None:
        if max_values < 1:
            msg = f"max_values must be positive, got {max_values}"
            raise ValueError(msg)
        self._max_values = max_values

    @property
    def max_values(self) -> int:
        return self._max_values

    def aggregate_values(self, values: Iterable[str]) -> list[str]:
        """Collapse whitespace, deduplicate, cap and sort matched values.

        The cap applies before sorting, so the first ``max_values`` distinct
        values seen are the ones kept.
        """
        collapsed = (_WHITESPACE.sub(" ", value) for value in values)
        return sorted(unique_values(collapsed)[: self._max_values])

    def aggregate(
        self,
        matches: Iterable[RuleMatch],
        *,
        row_noun: str = "row",
        show_values: bool = True,
    ) -> list[MatchReport]:
        reports = []
        for match in matches:
            values = self.aggregate_values(match.matched_data) if show_values else []
            reports.append(
                MatchReport(
                    **match.model_dump(include=set(RuleMatch.model_fields)),
                    description=describe(match, row_noun),
                    values=tuple(values),
                )
            )
        return reports


def aggregate(
    matches: Iterable[RuleMatch],
    *,
    row_noun: str = "row",
    show_values: bool = True,
    max_values: int = MAX_VALUES,
) -> list[MatchReport]:
    """Turn raw matches into reports (see ``MatchAggregator.aggregate``)."""
    return MatchAggregator(max_values=max_values).aggregate(matches, row_noun=row_noun, show_values=show_values)
