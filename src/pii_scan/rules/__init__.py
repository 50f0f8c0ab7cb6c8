"""Detection rule catalog and YAML rule loading."""

from pii_scan.rules.catalog import DEFAULT_CATALOG, RuleCatalog
from pii_scan.rules.loader import load_catalog, load_rules, parse_rule

__all__ = ["DEFAULT_CATALOG", "RuleCatalog", "load_catalog", "load_rules", "parse_rule"]
