"""
Character classes and exclusion sets used to build password pools.
"""

from enum import Enum
from typing import Dict, Mapping, Optional


class CharacterClass(Enum):
    """A named, fixed alphabet. Iteration order is the pool order."""

    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    NUMBERS = "numbers"
    SYMBOLS = "symbols"

    @property
    def alphabet(self) -> str:
        return DEFAULT_ALPHABETS[self]


DEFAULT_ALPHABETS: Dict[CharacterClass, str] = {
    CharacterClass.UPPERCASE: "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    CharacterClass.LOWERCASE: "abcdefghijklmnopqrstuvwxyz",
    CharacterClass.NUMBERS: "0123456789",
    CharacterClass.SYMBOLS: "!@#$%^&*()_+-=[]{}|;:,.<>?",
}

# Visually similar characters
SIMILAR_CHARS = frozenset("il1Lo0O")

# Punctuation that is easy to misread or mistype
AMBIGUOUS_CHARS = frozenset("{}[]()|`~;:,.<>")


def filter_alphabet(alphabet: str,
                    exclude_similar: bool = False,
                    exclude_ambiguous: bool = False) -> str:
    """
    Remove excluded characters from an alphabet.

    Args:
        alphabet: Characters to filter
        exclude_similar: Drop characters in SIMILAR_CHARS
        exclude_ambiguous: Drop characters in AMBIGUOUS_CHARS

    Returns:
        The remaining characters, in their original order
    """
    excluded = set()
    if exclude_similar:
        excluded |= SIMILAR_CHARS
    if exclude_ambiguous:
        excluded |= AMBIGUOUS_CHARS

    return ''.join(c for c in alphabet if c not in excluded)


def resolve_alphabets(overrides: Optional[Mapping[CharacterClass, str]] = None) -> Dict[CharacterClass, str]:
    """Merge alphabet overrides over the defaults."""
    alphabets = dict(DEFAULT_ALPHABETS)
    if overrides:
        alphabets.update(overrides)
    return alphabets
