"""pii-scan exceptions."""

from __future__ import annotations


class PIIScanError(Exception):
    """Base exception for all pii-scan errors."""


class RuleDefinitionError(PIIScanError, ValueError):
    """A rule is malformed: bad pattern, empty synonym set, duplicate name or invalid YAML entry."""

    def __init__(self, message: str, rule_name: str | None = None):
        super().__init__(message)
        self.rule_name = rule_name
