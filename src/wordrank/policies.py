"""Named scoring policies.

A policy is a scoring function with a name and a description, so it can be
picked by name from the CLI or a config file. Policies are declared with the
``@policy`` decorator, or built from a declarative ``PolicySpec``:

    @policy("shortest", description="Prefer short words")
    def shortest(word: str) -> int:
        return -len(word)

    PolicySpec(bonus={"e": 2}, penalty={"z": 3}).build("vowels")
"""

from __future__ import annotations

import logging
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import PolicyError
from .ranking.scoring import (
    ScoringFunction,
    character_points,
    combined_score,
    score,
    score_with_bonus,
)

_REGISTRY: dict[str, ScoringPolicy] = {}
BUILTIN_POLICIES = frozenset({"base", "bonus", "combined", "demo"})


class ScoringPolicy:
    """A registered scoring function with its metadata."""

    def __init__(self, name: str, description: str, func: ScoringFunction):
        self.name = name
        self.description = description
        self.func = func

    def __call__(self, word: str) -> int:
        return self.func(word)

    def __repr__(self) -> str:
        return f"ScoringPolicy(name={self.name!r})"


def register(scoring_policy: ScoringPolicy) -> ScoringPolicy:
    """Add a policy to the registry, replacing any policy of the same name."""
    if scoring_policy.name in _REGISTRY:
        logging.warning("[wordrank] Replacing scoring policy '%s'", scoring_policy.name)
    _REGISTRY[scoring_policy.name] = scoring_policy
    return scoring_policy


def unregister(name: str) -> None:
    _REGISTRY.pop(name, None)


def policy(name: str, description: str = ""):
    """Decorator to declare a scoring function as a named policy.

    Args:
        name: Unique policy name (e.g., "base", "combined")
        description: Human-readable description. Defaults to the docstring.
    """

    def wrapper(func: Callable[[str], int]):
        p = ScoringPolicy(
            name=name,
            description=description or (func.__doc__ or "").strip(),
            func=func,
        )
        register(p)
        func.__wordrank_policy__ = p  # type: ignore[attr-defined]
        return func

    return wrapper


def get_policy(name: str) -> ScoringPolicy:
    """Look up a registered policy by name."""
    try:
        return _REGISTRY[name]
    except KeyError:
        raise PolicyError(name, available_policies()) from None


def available_policies() -> list[str]:
    return sorted(_REGISTRY)


class PolicySpec(BaseModel):
    """Declarative policy: optional base score plus per-character rules.

    Each bonus rule adds its points when the character occurs in the word;
    each penalty rule subtracts them.
    """

    model_config = ConfigDict(extra="forbid")

    description: str = ""
    base: bool = True
    bonus: dict[str, int] = Field(default_factory=dict)
    penalty: dict[str, int] = Field(default_factory=dict)

    @field_validator("bonus", "penalty")
    @classmethod
    def _single_characters(cls, rules: dict[str, int]) -> dict[str, int]:
        for char in rules:
            if len(char) != 1:
                raise ValueError(f"rule key must be a single character, got {char!r}")
        return rules

    def build(self, name: str) -> ScoringPolicy:
        """Compose the scoring function this spec describes."""
        bonuses = [character_points(c, p) for c, p in self.bonus.items()]
        penalties = [character_points(c, p) for c, p in self.penalty.items()]
        use_base = self.base

        def composed(word: str) -> int:
            total = score(word) if use_base else 0
            total += sum(b(word) for b in bonuses)
            total -= sum(p(word) for p in penalties)
            return total

        composed.__name__ = name
        return ScoringPolicy(
            name=name,
            description=self.description or f"Policy '{name}' from configuration",
            func=composed,
        )


# Built-in policies

policy("base", description="Characters other than 'a'")(score)
policy("bonus", description="Base score, +5 for words containing 'c'")(score_with_bonus)
policy(
    "combined",
    description="Base score, +5 for words containing 'c', -7 for words containing 's'",
)(combined_score)

_demo_bonus = character_points("r", 5)
_demo_penalty = character_points("j", 7)


@policy("demo", description="Base score, +5 for words containing 'r', -7 for words containing 'j'")
def demo_score(word: str) -> int:
    return score(word) + _demo_bonus(word) - _demo_penalty(word)


__all__ = [
    "BUILTIN_POLICIES",
    "ScoringPolicy",
    "PolicySpec",
    "policy",
    "register",
    "unregister",
    "get_policy",
    "available_policies",
    "demo_score",
]
