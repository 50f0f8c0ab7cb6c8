"""Rule matcher: turns column identifiers and sampled values into rule matches.

Each column is evaluated independently by four passes (name, multi-name,
regex, token). Only the multi-name pass looks beyond the column itself, at
the full set of column identifiers of the table.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping, Sequence

from pii_scan.enums import Confidence, MatchType
from pii_scan.models import MultiNameRule, RegexRule, RuleMatch, TokenRule, normalize_identifier
from pii_scan.rules.catalog import DEFAULT_CATALOG, RuleCatalog
from pii_scan.rules.loader import load_rules
from pii_scan.settings import ScanSettings

logger = logging.getLogger(__name__)

# A value match is high confidence only when strictly more than this fraction of values matched
CONFIDENCE_THRESHOLD = 0.5

# "//user:password@" in URLs, plain or URL-encoded
_URL_CREDENTIALS = re.compile(r"(?://|%2F%2F)\S+(?::|%3A)\S+(?:@|%40)", re.IGNORECASE)


def strip_url_credentials(value: str) -> str:
    """Remove credentials embedded in URL-like values so they are not mistaken for emails."""
    return _URL_CREDENTIALS.sub("", value)


def classify_confidence(matched: int, inspected: int, threshold: float = CONFIDENCE_THRESHOLD) -> Confidence:
    """Classify a value match by the fraction of inspected values that matched."""
    if inspected <= 0:
        return Confidence.LOW
    return Confidence.HIGH if matched / inspected > threshold else Confidence.LOW


def qualify_identifier(identifier: str, table: str | None = None) -> str:
    """Prefix a column identifier with its table name, if any."""
    return f"{table}.{identifier}" if table else identifier


class RuleMatcher:
    """Evaluates every rule of a catalog against columns and their values."""

    def __init__(
        self,
        catalog: RuleCatalog | None = None,
        *,
        confidence_threshold: float = CONFIDENCE_THRESHOLD,
    ) -> None:
        if not 0.0 <= confidence_threshold < 1.0:
            msg = f"confidence_threshold must be in [0, 1), got {confidence_threshold}"
            raise ValueError(msg)
        self._catalog = catalog if catalog is not None else DEFAULT_CATALOG
        self._threshold = confidence_threshold

    @property
    def catalog(self) -> RuleCatalog:
        return self._catalog

    @property
    def confidence_threshold(self) -> float:
        return self._threshold

    def evaluate_column(
        self,
        identifier: str,
        values: Iterable[str] = (),
        column_set: Iterable[str] = (),
        *,
        table: str | None = None,
    ) -> list[RuleMatch]:
        """Evaluate one column against every rule.

        ``column_set`` holds the identifiers of all columns in the same table and
        is only used by multi-name rules. A multi-name match is attributed to the
        first column of the set that takes part in it, so evaluating every column
        of a table yields that match once. A column missing from ``column_set``
        is treated as its first member.
        """
        qualified = qualify_identifier(identifier, table)
        columns = list(column_set)
        if identifier not in columns:
            columns.insert(0, identifier)

        matches = self.match_name_rules(identifier, table=table)
        matches.extend(m for m in self.match_multi_name_rules(columns, table=table) if m.identifier == qualified)
        matches.extend(self.evaluate_values(identifier, values, table=table))
        return matches

    def evaluate_values(
        self,
        identifier: str,
        values: Iterable[str],
        *,
        table: str | None = None,
    ) -> list[RuleMatch]:
        """Run only the value passes (regex and token rules)."""
        sample = list(values)
        if not sample:
            return []
        qualified = qualify_identifier(identifier, table)
        return [*self.match_regex_rules(qualified, sample), *self.match_token_rules(qualified, sample)]

    def evaluate_table(
        self,
        columns: Mapping[str, Sequence[str]],
        *,
        table: str | None = None,
    ) -> list[RuleMatch]:
        """Evaluate every column of a table, given as identifier -> sampled values."""
        column_set = list(columns)
        matches: list[RuleMatch] = []
        for identifier, values in columns.items():
            matches.extend(self.evaluate_column(identifier, values, column_set, table=table))
        return matches

    def match_name_rules(self, identifier: str, *, table: str | None = None) -> list[RuleMatch]:
        normalized = normalize_identifier(identifier)
        if not normalized:
            return []

        matches = []
        for rule in self._catalog.name_rules:
            if normalized in rule.column_names:
                matches.append(self._name_match(rule.name, rule.display_name, qualify_identifier(identifier, table)))
        return matches

    def match_multi_name_rules(self, column_set: Iterable[str], *, table: str | None = None) -> list[RuleMatch]:
        """Match rules that need several correlated columns, across the whole column set."""
        normalized = [(column, normalize_identifier(column)) for column in column_set]

        matches = []
        for rule in self._catalog.multi_name_rules:
            if not all(any(norm in group for _, norm in normalized) for group in rule.column_names):
                continue
            representative = next(column for column, norm in normalized if _in_any_group(norm, rule))
            matches.append(self._name_match(rule.name, rule.display_name, qualify_identifier(representative, table)))
        return matches

    def match_regex_rules(self, identifier: str, values: Sequence[str]) -> list[RuleMatch]:
        if not values:
            return []

        cleaned = [strip_url_credentials(value) for value in values]
        matches = []
        for rule in self._catalog.regex_rules:
            matched_data: list[str] = []
            hits = 0
            for value in cleaned:
                found = [m.group(0) for m in rule.pattern.finditer(value)]
                if found:
                    hits += 1
                    matched_data.extend(found)
            if hits:
                matches.append(self._value_match(rule, identifier, matched_data, hits, len(values)))
        return matches

    def match_token_rules(self, identifier: str, values: Sequence[str]) -> list[RuleMatch]:
        if not values:
            return []

        matches = []
        for rule in self._catalog.token_rules:
            # whole-value test on the stripped, lowercased value; matched values keep their original text
            matched_data =[value for value in values if value.strip().lower() in rule.tokens]
            if matched_data:
                matches.append(self._value_match(rule, identifier, matched_data, len(matched_data), len(values)))
        return matches

    def _name_match(self, rule_name: str, display_name: str, identifier: str) -> RuleMatch:
        logger.debug("Rule '%s' matched column name '%s'", rule_name, identifier)
        return RuleMatch(
            rule_name=rule_name,
            display_name=display_name,
            identifier=identifier,
            match_type=MatchType.NAME,
            confidence=Confidence.HIGH,
        )

    def _value_match(
        self,
        rule: RegexRule | TokenRule,
        identifier: str,
        matched_data: list[str],
        hits: int,
        inspected: int,
    ) -> RuleMatch:
        confidence = classify_confidence(hits, inspected, self._threshold)
        logger.debug(
            "Rule '%s' matched %d/%d values of '%s' (%s confidence)",
            rule.name,
            hits,
            inspected,
            identifier,
            confidence,
        )
        return RuleMatch(
            rule_name=rule.name,
            display_name=rule.display_name,
            identifier=identifier,
            match_type=MatchType.VALUE,
            confidence=confidence,
            matched_data=tuple(matched_data),
            line_count=inspected,
        )


def _in_any_group(normalized: str, rule: MultiNameRule) -> bool:
    return any(normalized in group for group in rule.column_names)


def build_matcher(settings: ScanSettings | None = None) -> RuleMatcher:
    """Build a matcher from settings, merging the optional YAML rules file into the default catalog."""
    settings = settings or ScanSettings()
    catalog = DEFAULT_CATALOG
    if settings.rules_file is not None:
        catalog = catalog.extend(load_rules(settings.rules_file))
    return RuleMatcher(catalog, confidence_threshold=settings.confidence_threshold)


_DEFAULT_MATCHER = RuleMatcher()


def evaluate_column(
    identifier: str,
    values: Iterable[str] = (),
    column_set: Iterable[str] = (),
    *,
    table: str | None = None,
) -> list[RuleMatch]:
    """Evaluate one column with the default catalog and threshold."""
    return _DEFAULT_MATCHER.evaluate_column(identifier, values, column_set, table=table)


def evaluate_table(columns: Mapping[str, Sequence[str]], *, table: str | None = None) -> list[RuleMatch]:
    """Evaluate every column of a table with the default catalog and threshold."""
    return _DEFAULT_MATCHER.evaluate_table(columns, table=table)
