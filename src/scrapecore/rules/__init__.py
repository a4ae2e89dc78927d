"""Domain to extraction rule lookup."""

from .predefined import PREDEFINED_RULES
from .resolver import DomainRuleTable, RuleResolver, build_rule_table, load_rules_file, url_domain

__all__ = [
    "PREDEFINED_RULES",
    "DomainRuleTable",
    "RuleResolver",
    "build_rule_table",
    "load_rules_file",
    "url_domain",
]
