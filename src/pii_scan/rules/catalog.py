"""Read-only rule catalog grouped by rule kind."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pii_scan.enums import RuleKind
from pii_scan.exceptions import RuleDefinitionError
from pii_scan.models import MultiNameRule, NameRule, RegexRule, Rule, TokenRule
from pii_scan.rules.defaults import MULTI_NAME_RULES, NAME_RULES, REGEX_RULES, TOKEN_RULES


def _check_unique(kind: RuleKind, rules: tuple[Rule, ...]) -> None:
    seen: set[str] = set()
    for rule in rules:
        if rule.name in seen:
            msg = f"Duplicate {kind} rule: {rule.name}"
            raise RuleDefinitionError(msg, rule_name=rule.name)
        seen.add(rule.name)


class RuleCatalog:
    """Immutable collection of detection rules.

    Rule names are unique within a kind. The same name may appear under
    several kinds (``phone`` is both a name rule and a regex rule).
    """

    def __init__(
        self,
        name_rules: Iterable[NameRule] = (),
        multi_name_rules: Iterable[MultiNameRule] = (),
        regex_rules: Iterable[RegexRule] = (),
        token_rules: Iterable[TokenRule] = (),
    ) -> None:
        self._rules: dict[RuleKind, tuple[Rule, ...]] = {
            RuleKind.NAME: tuple(name_rules),
            RuleKind.MULTI_NAME: tuple(multi_name_rules),
            RuleKind.REGEX: tuple(regex_rules),
            RuleKind.TOKEN: tuple(token_rules),
        }
        for kind, rules in self._rules.items():
            for rule in rules:
                if rule.kind != kind:
                    msg = f"Rule {rule.name} is a {rule.kind} rule, not a {kind} rule"
                    raise RuleDefinitionError(msg, rule_name=rule.name)
            _check_unique(kind, rules)

    @classmethod
    def from_rules(cls, rules: Iterable[Rule]) -> RuleCatalog:
        """Build a catalog from rules of mixed kinds, keeping their relative order."""
        grouped: dict[RuleKind, list[Rule]] = {kind: [] for kind in RuleKind}
        for rule in rules:
            grouped[RuleKind(rule.kind)].append(rule)
        return cls(
            name_rules=grouped[RuleKind.NAME],  # type: ignore[arg-type]
            multi_name_rules=grouped[RuleKind.MULTI_NAME],  # type: ignore[arg-type]
            regex_rules=grouped[RuleKind.REGEX],  # type: ignore[arg-type]
            token_rules=grouped[RuleKind.TOKEN],  # type: ignore[arg-type]
        )

    @property
    def name_rules(self) -> tuple[NameRule, ...]:
        return self._rules[RuleKind.NAME]  # type: ignore[return-value]

    @property
    def multi_name_rules(self) -> tuple[MultiNameRule, ...]:
        return self._rules[RuleKind.MULTI_NAME]  # type: ignore[return-value]

    @property
    def regex_rules(self) -> tuple[RegexRule, ...]:
        return self._rules[RuleKind.REGEX]  # type: ignore[return-value]

    @property
    def token_rules(self) -> tuple[TokenRule, ...]:
        return self._rules[RuleKind.TOKEN]  # type: ignore[return-value]

    def rules(self) -> Iterator[Rule]:
        """Iterate over every rule, grouped by kind."""
        for rules in self._rules.values():
            yield from rules

    def get(self, kind: RuleKind | str, name: str) -> Rule | None:
        """Look up a rule by kind and stable name."""
        for rule in self._rules[RuleKind(kind)]:
            if rule.name == name:
                return rule
        return None

    def extend(self, rules: Iterable[Rule]) -> RuleCatalog:
        """Return a new catalog with ``rules`` appended after the existing ones."""
        return RuleCatalog.from_rules([*self.rules(), *rules])

    def __len__(self) -> int:
        return sum(len(rules) for rules in self._rules.values())

    def __repr__(self) -> str:
        counts = ", ".join(f"{kind}={len(rules)}" for kind, rules in self._rules.items())
        return f"RuleCatalog({counts})"


DEFAULT_CATALOG = RuleCatalog(
    name_rules=NAME_RULES,
    multi_name_rules=MULTI_NAME_RULES,
    regex_rules=REGEX_RULES,
    token_rules=TOKEN_RULES,
)
