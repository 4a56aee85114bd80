"""
Secure password generation utilities.
"""

import logging
import secrets
from typing import List, Mapping, Optional, Tuple

from ..config import PasswordConfig, DEFAULT_CONFIG
from ..exceptions import EmptyPoolError, InvalidLengthError, NoClassSelectedError
from .charsets import CharacterClass, filter_alphabet, resolve_alphabets


logger = logging.getLogger(__name__)


class PasswordGenerator:
    """Generate passwords that honour a PasswordConfig."""

    def __init__(self,
                 rng=None,
                 alphabets: Optional[Mapping[CharacterClass, str]] = None):
        """
        Initialize password generator.

        Args:
            rng: Random source exposing randrange(n). Defaults to a new
                secrets.SystemRandom backed by the OS CSPRNG.
            alphabets: Per-class alphabet overrides; classes not given use
                the built-in alphabets
        """
        self.rng = rng if rng is not None else secrets.SystemRandom()
        self.alphabets = resolve_alphabets(alphabets)

    def generate(self, config: Optional[PasswordConfig] = None) -> str:
        """
        Generate a password.

        One character is drawn from every enabled class that still has
        characters after filtering, the rest comes from the combined pool,
        and the result is shuffled.

        Args:
            config: Generation options (defaults to DEFAULT_CONFIG)

        Returns:
            Generated password string. Its length is
            max(config.length, number of guaranteed characters).

        Raises:
            InvalidLengthError: config.length is less than 1
            NoClassSelectedError: no character class is enabled
            EmptyPoolError: exclusions removed every enabled character
        """
        cfg = config or DEFAULT_CONFIG
        self._validate(cfg)

        pool, chars = self._build_pool(cfg)

        if not pool:
            raise EmptyPoolError("No characters left in the pool after applying exclusions")

        # Guaranteed characters are never truncated, even past cfg.length
        remaining = cfg.length - len(chars)
        for _ in range(remaining):
            chars.append(self._choice(pool))

        logger.debug("Generated %d characters from a pool of %d", len(chars), len(pool))

        self._shuffle(chars)
        return ''.join(chars)

    def _validate(self, config: PasswordConfig) -> None:
        if config.length < 1:
            raise InvalidLengthError("Password length must be at least 1")

        if not config.enabled_classes():
            raise NoClassSelectedError("At least one character set must be selected")

    def _filtered(self, config: PasswordConfig, char_class: CharacterClass) -> str:
        return filter_alphabet(
            self.alphabets[char_class],
            exclude_similar=config.exclude_similar,
            exclude_ambiguous=config.exclude_ambiguous,
        )

    def _build_pool(self, config: PasswordConfig) -> Tuple[str, List[str]]:
        """
        Build the combined pool and draw the guaranteed characters.

        Returns:
            (combined pool, list with one character per non-empty class)
        """
        pool = []
        chars: List[str] = []

        for char_class in config.enabled_classes():
            alphabet = self._filtered(config, char_class)
            pool.append(alphabet)

            if alphabet:
                chars.append(self._choice(alphabet))
            else:
                logger.warning("All %s characters were excluded, skipping the class", char_class.value)

        return ''.join(pool), chars

    def _choice(self, characters: str) -> str:
        return characters[self.rng.randrange(len(characters))]

    def _shuffle(self, chars: List[str]) -> None:
        """Fisher-Yates shuffle in place using the generator's random source."""
        for i in range(len(chars) - 1, 0, -1):
            j = self.rng.randrange(i + 1)
            chars[i], chars[j] = chars[j], chars[i]


def generate_password(config: Optional[PasswordConfig] = None, rng=None) -> str:
    """
    Convenience function to generate a password.

    Args:
        config: Generation options (defaults to DEFAULT_CONFIG)
        rng: Optional random source, see PasswordGenerator

    Returns:
        Generated password string
    """
    generator = PasswordGenerator(rng=rng)

    return generator.generate(config)
