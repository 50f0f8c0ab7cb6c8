"""Pluralization and match descriptions."""

from __future__ import annotations

from pii_scan.enums import Confidence, MatchType
from pii_scan.models import RuleMatch


def pluralize(count: int, singular: str) -> str:
    """Format ``count`` with ``singular`` pluralized when count is not 1.

    >>> pluralize(2, "index")
    '2 indices'
    >>> pluralize(3, "low confidence match")
    '3 low confidence matches'
    """
    noun = singular
    if count != 1:
        if singular == "index":
            noun = "indices"
        elif singular.endswith("ch"):
            noun = f"{singular}es"
        else:
            noun = f"{singular}s"
    return f"{count} {noun}"


def describe(match: RuleMatch, row_noun: str = "row") -> str:
    """Describe a match in one line.

    Keys are structural rather than sampled, so a ``key`` row noun omits the
    count and confidence detail.
    """
    if match.match_type == MatchType.NAME:
        return f"possible {match.display_name} (name match)"

    if row_noun == "key":
        return f"found {match.display_name}"

    detail = pluralize(match.line_count, row_noun)
    if match.confidence == Confidence.LOW:
        detail = f"{detail}, low confidence"
    return f"found {match.display_name} ({detail})"
