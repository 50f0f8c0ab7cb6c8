"""Load extra detection rules from YAML files.

A rules file is a mapping with a ``rules`` list. Each entry names its
``kind`` and carries that kind's payload::

    rules:
      - kind: name
        name: national_id
        display_name: national IDs
        column_names: [national_id, nin]
      - kind: regex
        name: iban
        display_name: IBANs
        pattern: '\\b[A-Z]{2}\\d{2}[A-Z0-9]{11,30}\\b'
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import TypeAdapter, ValidationError

from pii_scan.exceptions import RuleDefinitionError
from pii_scan.models import Rule
from pii_scan.rules.catalog import DEFAULT_CATALOG, RuleCatalog

logger = logging.getLogger(__name__)

_RULE_ADAPTER: TypeAdapter[Rule] = TypeAdapter(Rule)


def parse_rule(data: Mapping[str, Any]) -> Rule:
    """Validate one rule definition.

    Raises:
        RuleDefinitionError: If the definition is not a mapping, has an unknown
            kind, or its payload is invalid (including patterns that fail to compile).
    """
    if not isinstance(data, Mapping):
        msg = f"Rule definition must be a mapping, got {type(data).__name__}"
        raise RuleDefinitionError(msg)

    name = data.get("name")
    try:
        return _RULE_ADAPTER.validate_python(dict(data))
    except ValidationError as exc:
        msg = f"Invalid rule definition {name or '<unnamed>'}: {exc}"
        raise RuleDefinitionError(msg, rule_name=name) from exc


def load_rules(path: str | Path) -> list[Rule]:
    """Load rule definitions from a YAML file.

    Raises:
        FileNotFoundError: If the rules file does not exist.
        RuleDefinitionError: If the file or any rule in it is malformed.
    """
    file_path = Path(path)
    if not file_path.exists():
        msg = f"Rules file not found: {file_path}"
        raise FileNotFoundError(msg)

    with file_path.open() as f:
        raw: Any = yaml.safe_load(f)

    if raw is None:
        logger.warning("Rules file %s is empty", file_path)
        return []
    if not isinstance(raw, dict):
        msg = f"Rules file must be a YAML mapping: {file_path}"
        raise RuleDefinitionError(msg)

    entries = raw.get("rules", [])
    if not isinstance(entries, list):
        msg = f"'rules' must be a list: {file_path}"
        raise RuleDefinitionError(msg)
    if not entries:
        logger.warning("Rules file %s declares no rules", file_path)

    rules = [parse_rule(entry) for entry in entries]
    logger.info("Loaded %d rules from %s", len(rules), file_path)
    return rules


def load_catalog(path: str | Path, *, base: RuleCatalog = DEFAULT_CATALOG) -> RuleCatalog:
    """Extend ``base`` with the rules declared in a YAML file."""
    return base.extend(load_rules(path))
