"""Closed value sets used across rules, matches and reports."""

from enum import StrEnum


class RuleKind(StrEnum):
    """The four kinds of detection rules."""

    NAME = "name"
    MULTI_NAME = "multi_name"
    REGEX = "regex"
    TOKEN = "token"


class MatchType(StrEnum):
    """What triggered a match: the column identifier or its values."""

    NAME = "name"
    VALUE = "value"


class Confidence(StrEnum):
    """Strength of evidence for a match."""

    HIGH = "high"
    LOW = "low"


class LineKind(StrEnum):
    """Kinds of rendered report lines."""

    MATCH = "match"
    VALUES = "values"
    BLANK = "blank"
    SUMMARY = "summary"
