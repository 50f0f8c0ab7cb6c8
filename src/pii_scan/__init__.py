"""pii-scan: rule-based detection of columns holding personal data."""

from __future__ import annotations

from pii_scan.aggregator import MatchAggregator, aggregate, low_confidence
from pii_scan.enums import Confidence, LineKind, MatchType, RuleKind
from pii_scan.exceptions import PIIScanError, RuleDefinitionError
from pii_scan.formatting import describe, pluralize
from pii_scan.matcher import RuleMatcher, build_matcher, evaluate_column, evaluate_table
from pii_scan.models import MatchReport, ReportLine, RuleMatch
from pii_scan.report import MatchPrinter, format_report, render
from pii_scan.rules import DEFAULT_CATALOG, RuleCatalog, load_catalog, load_rules

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CATALOG",
    "Confidence",
    "LineKind",
    "MatchAggregator",
    "MatchPrinter",
    "MatchReport",
    "MatchType",
    "PIIScanError",
    "ReportLine",
    "RuleCatalog",
    "RuleDefinitionError",
    "RuleKind",
    "RuleMatch",
    "RuleMatcher",
    "aggregate",
    "build_matcher",
    "describe",
    "evaluate_column",
    "evaluate_table",
    "format_report",
    "load_catalog",
    "load_rules",
    "low_confidence",
    "pluralize",
    "render",
]
