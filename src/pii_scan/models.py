"""Pydantic V2 models for detection rules, rule matches and report lines.

Rules form a closed tagged union discriminated on ``kind``; each kind carries
its own payload and is evaluated by its own pass in the matcher.
"""

from __future__ import annotations

import re
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pii_scan.enums import Confidence, LineKind, MatchType

_NON_ALNUM = re.compile(r"[\W_]+")


def normalize_identifier(identifier: str) -> str:
    """Lowercase a column identifier and drop every non-alphanumeric character.

    ``last_name``, ``lastName`` and ``LAST-NAME`` all normalize to ``lastname``.
    """
    return _NON_ALNUM.sub("", identifier.lower())


def _normalize_names(value: Any) -> frozenset[str]:
    if isinstance(value, str):
        msg = "expected a list of column names, got a string"
        raise ValueError(msg)  # noqa: TRY004
    names = frozenset(normalize_identifier(str(v)) for v in value)
    if "" in names:
        msg = "column names must contain at least one alphanumeric character"
        raise ValueError(msg)
    return names


class NameRule(BaseModel):
    """Flags a column whose normalized identifier is one of ``column_names``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["name"] = "name"
    name: str = Field(min_length=1)
    display_name: str = Field(min_length=1)
    column_names: frozenset[str] = Field(min_length=1)

    @field_validator("column_names", mode="before")
    @classmethod
    def _normalize(cls, value: Any) -> frozenset[str]:
        return _normalize_names(value)


class MultiNameRule(BaseModel):
    """Flags a column set holding one column per synonym group (e.g. latitude + longitude)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["multi_name"] = "multi_name"
    name: str = Field(min_length=1)
    display_name: str = Field(min_length=1)
    column_names: tuple[frozenset[str], ...] = Field(min_length=2)

    @field_validator("column_names", mode="before")
    @classmethod
    def _normalize(cls, value: Any) -> tuple[frozenset[str], ...]:
        if isinstance(value, str):
            msg = "expected a list of column name groups, got a string"
            raise ValueError(msg)  # noqa: TRY004
        groups = tuple(_normalize_names(group) for group in value)
        if any(not group for group in groups):
            msg = "every column name group needs at least one name"
            raise ValueError(msg)
        return groups


class RegexRule(BaseModel):
    """Flags values containing a substring matching ``pattern``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["regex"] = "regex"
    name: str = Field(min_length=1)
    display_name: str = Field(min_length=1)
    pattern: re.Pattern[str]


class TokenRule(BaseModel):
    """Flags values that, lowercased, are members of ``tokens``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["token"] = "token"
    name: str = Field(min_length=1)
    display_name: str = Field(min_length=1)
    tokens: frozenset[str] = Field(min_length=1)

    @field_validator("tokens", mode="before")
    @classmethod
    def _lowercase(cls, value: Any) -> frozenset[str]:
        if isinstance(value, str):
            msg = "expected a list of tokens, got a string"
            raise ValueError(msg)  # noqa: TRY004
        return frozenset(str(v).strip().lower() for v in value)


Rule = Annotated[NameRule | MultiNameRule | RegexRule | TokenRule, Field(discriminator="kind")]


class RuleMatch(BaseModel):
    """Evidence that one rule fired against one column."""

    model_config = ConfigDict(frozen=True)

    rule_name: str
    display_name: str
    identifier: str
    match_type: MatchType
    confidence: Confidence
    matched_data: tuple[str, ...] = ()
    line_count: int = Field(default=0, ge=0, description="Number of values inspected")


class MatchReport(RuleMatch):
    """A rule match with its rendered description and aggregated values."""

    description: str
    values: tuple[str, ...] = ()


class ReportLine(BaseModel):
    """One line of rendered report output."""

    model_config = ConfigDict(frozen=True)

    kind: LineKind
    text: str = ""
    identifier: str | None = None

    def plain(self) -> str:
        """Render the line without any styling."""
        if self.identifier is not None:
            return f"{self.identifier}: {self.text}"
        return self.text
