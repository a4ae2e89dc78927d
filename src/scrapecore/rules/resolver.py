"""
Domain rule table and resolver.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Mapping, Optional, Tuple
from urllib.parse import urlparse

import structlog
import yaml

from ..config.config import RulesConfig
from ..extractor.models import Rule
from .predefined import PREDEFINED_RULES

logger = structlog.get_logger(__name__)


def url_domain(url: str) -> str:
    """Return the lower-cased host of ``url``, or ``url`` itself when it has none."""
    try:
        hostname = urlparse(url).hostname
    except ValueError:
        return url
    return hostname or url


@dataclass(frozen=True)
class DomainRuleTable:
    """Ordered, immutable mapping of domain substrings to rules."""

    entries: Tuple[Tuple[str, Rule], ...] = ()

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> DomainRuleTable:
        """Build a table from ``(domain, rule string)`` pairs, keeping their order.

        A domain listed twice keeps its first position and rule.
        """
        seen = set()
        entries: List[Tuple[str, Rule]] = []
        for domain, raw_rule in pairs:
            domain = domain.strip().lower()
            if not domain:
                raise ValueError("rule domains must not be empty")
            if domain in seen:
                continue
            rule = Rule.parse(raw_rule)
            if not rule.is_set:
                raise ValueError(f"rule for {domain!r} is empty")
            seen.add(domain)
            entries.append((domain, rule))
        return cls(tuple(entries))

    def __iter__(self) -> Iterator[Tuple[str, Rule]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


def load_rules_file(path: Path) -> List[Tuple[str, str]]:
    """Read a YAML mapping of domain to rule string, preserving file order."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return []
    if not isinstance(data, Mapping):
        raise ValueError(f"rules file {path} must contain a mapping of domain to rule")
    return [(str(domain), str(rule)) for domain, rule in data.items()]


def build_rule_table(config: Optional[RulesConfig] = None) -> DomainRuleTable:
    """Assemble the table: configured extras, then the rules file, then the predefined rules."""
    config = config or RulesConfig()
    pairs: List[Tuple[str, str]] = list(config.extra.items())
    if config.rules_file is not None:
        pairs.extend(load_rules_file(config.rules_file))
    if config.use_predefined:
        pairs.extend(PREDEFINED_RULES)

    table = DomainRuleTable.from_pairs(pairs)
    logger.debug("Domain rule table built", entries=len(table), custom=len(config.extra))
    return table


class RuleResolver:
    """Maps a URL to the predefined rule of its domain."""

    def __init__(self, table: DomainRuleTable) -> None:
        self.table = table

    def resolve(self, url: str) -> Rule:
        """Return the rule of the first table entry contained in the URL's host.

        Table order decides between overlapping domains such as
        ``example.com`` and ``sub.example.com``.
        """
        domain = url_domain(url)
        for entry_domain, rule in self.table:
            if entry_domain in domain:
                return rule
        return Rule.unset()
