"""
Data models for extraction requests and rules.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

ALTERNATE_READABILITY_SENTINEL = "ra"


class RuleKind(Enum):
    """Extraction strategy selected for a page."""

    UNSET = "unset"
    SELECTOR = "selector"
    ALTERNATE_READABILITY = "alternate_readability"


@dataclass(slots=True, frozen=True)
class Rule:
    """A resolved extraction rule.

    ``selector`` is only meaningful for ``RuleKind.SELECTOR``.
    """

    kind: RuleKind
    selector: str = ""

    def __post_init__(self) -> None:
        """Validate the rule."""
        if self.kind is RuleKind.SELECTOR and not self.selector.strip():
            raise ValueError("Selector rules require a non-empty selector")
        if self.kind is not RuleKind.SELECTOR and self.selector:
            raise ValueError(f"{self.kind.value} rules do not take a selector")

    @classmethod
    def unset(cls) -> Rule:
        return cls(RuleKind.UNSET)

    @classmethod
    def css(cls, selector: str) -> Rule:
        return cls(RuleKind.SELECTOR, selector)

    @classmethod
    def alternate_readability(cls) -> Rule:
        return cls(RuleKind.ALTERNATE_READABILITY)

    @classmethod
    def parse(cls, raw: str | None) -> Rule:
        """Turn a user- or table-supplied rule string into a Rule.

        Surrounding whitespace is ignored when classifying the string: an empty
        or blank string leaves the rule unset and ``"ra"`` (possibly padded)
        selects the alternate readability engine. Any other string becomes a
        CSS selector, stored unstripped.
        """
        if raw is None or not raw.strip():
            return cls.unset()
        if raw.strip() == ALTERNATE_READABILITY_SENTINEL:
            return cls.alternate_readability()
        return cls.css(raw)

    @property
    def is_set(self) -> bool:
        return self.kind is not RuleKind.UNSET

    def __str__(self) -> str:
        if self.kind is RuleKind.SELECTOR:
            return self.selector
        if self.kind is RuleKind.ALTERNATE_READABILITY:
            return ALTERNATE_READABILITY_SENTINEL
        return ""


@dataclass(slots=True, frozen=True)
class ExtractionRequest:
    """Parameters of a single extraction call."""

    url: str
    rules: str = ""
    user_agent: str = ""
    cookie: str = ""
    allow_self_signed_certificates: bool = False
    use_proxy: bool = False

    @property
    def explicit_rule(self) -> Rule:
        """The rule requested by the caller, unset when none was given."""
        return Rule.parse(self.rules)
