"""
Password generation configuration.
"""

from typing import List, NamedTuple

from .utils.charsets import CharacterClass


class PasswordConfig(NamedTuple):
    """
    Immutable set of options for one generation request.

    Validation is done by the generator, not here, so any combination of
    values can be represented.
    """
    length: int = 16
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True
    exclude_similar: bool = False
    exclude_ambiguous: bool = False
    # Advisory only, the generator does not read it
    entropy_level: int = 50

    def enabled_classes(self) -> List[CharacterClass]:
        """Character classes switched on, in pool order."""
        flags = {
            CharacterClass.UPPERCASE: self.include_uppercase,
            CharacterClass.LOWERCASE: self.include_lowercase,
            CharacterClass.NUMBERS: self.include_numbers,
            CharacterClass.SYMBOLS: self.include_symbols,
        }
        return [char_class for char_class in CharacterClass if flags[char_class]]

    def describe(self) -> str:
        """
        Get human-readable description of the configuration.

        Returns:
            Enabled classes and active exclusions, e.g.
            "uppercase, numbers (excluding similar chars)"
        """
        info = ", ".join(c.value for c in self.enabled_classes()) or "no character classes"

        exclusions = []
        if self.exclude_similar:
            exclusions.append("similar")
        if self.exclude_ambiguous:
            exclusions.append("ambiguous")
        if exclusions:
            info += f" (excluding {' and '.join(exclusions)} chars)"

        return info


# Default configuration instance
DEFAULT_CONFIG = PasswordConfig()
