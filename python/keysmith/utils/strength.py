"""
Password strength heuristics.

The score is a simple display heuristic, not a security measure:

- Length: 2 points per character, max 40
- Variety: 10 points each for lowercase, uppercase, digit and
  non-alphanumeric characters, max 40
- Uniqueness: unique characters * 20 / length, max 20
"""

import math
import string
from enum import Enum
from typing import Mapping, NamedTuple, Optional

from ..config import PasswordConfig
from .charsets import CharacterClass, filter_alphabet, resolve_alphabets


ALPHANUMERIC = set(string.ascii_letters + string.digits)


class StrengthLabel(Enum):
    """Coarse strength bracket for a score."""

    WEAK = "Weak"
    FAIR = "Fair"
    GOOD = "Good"
    STRONG = "Strong"

    @classmethod
    def from_score(cls, value: int) -> "StrengthLabel":
        if value < 25:
            return cls.WEAK
        if value < 50:
            return cls.FAIR
        if value < 75:
            return cls.GOOD
        return cls.STRONG


class StrengthResult(NamedTuple):
    """Score (0-100) and its label."""
    value: int
    label: StrengthLabel


def score_password(password: str) -> StrengthResult:
    """
    Score a password.

    Args:
        password: Password to score

    Returns:
        StrengthResult with a value in [0, 100]
    """
    if not password:
        return StrengthResult(0, StrengthLabel.WEAK)

    length = len(password)
    strength = min(length * 2, 40)

    # Case checks match any cased letter, not just ASCII
    has_lower = password != password.upper()
    has_upper = password != password.lower()
    has_digit = any(c in string.digits for c in password)
    has_special = any(c not in ALPHANUMERIC for c in password)

    strength += 10 * sum((has_lower, has_upper, has_digit, has_special))

    unique_chars = len(set(password))
    strength += min(unique_chars * 20 // length, 20)

    value = max(0, min(strength, 100))
    return StrengthResult(value, StrengthLabel.from_score(value))


def entropy_bits(password: str) -> float:
    """
    Heuristic entropy: log2(distinct_chars ** length).

    Uses the number of distinct characters actually present as the pool
    size, so it underestimates passwords drawn from a larger alphabet.
    """
    if not password:
        return 0.0

    distinct = len(set(password))
    return len(password) * math.log2(distinct)


def theoretical_entropy_bits(config: PasswordConfig,
                             alphabets: Optional[Mapping[CharacterClass, str]] = None) -> float:
    """
    Entropy of a password drawn uniformly from the configuration's pool.

    Args:
        config: Generation options
        alphabets: Per-class alphabet overrides

    Returns:
        length * log2(pool size), or 0.0 if the pool is empty or the
        length is not positive
    """
    resolved = resolve_alphabets(alphabets)
    pool_size = sum(
        len(filter_alphabet(resolved[char_class], config.exclude_similar, config.exclude_ambiguous))
        for char_class in config.enabled_classes()
    )

    if pool_size == 0 or config.length < 1:
        return 0.0

    return config.length * math.log2(pool_size)
