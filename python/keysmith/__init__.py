"""
Keysmith - constrained random password generation and strength estimation.
"""

from .config import PasswordConfig, DEFAULT_CONFIG
from .exceptions import (
    KeysmithException,
    ConfigError,
    InvalidLengthError,
    NoClassSelectedError,
    EmptyPoolError,
    ClipboardError,
)
from .utils.charsets import CharacterClass
from .utils.password_generator import PasswordGenerator, generate_password
from .utils.strength import (
    StrengthLabel,
    StrengthResult,
    score_password,
    entropy_bits,
    theoretical_entropy_bits,
)

__all__ = [
    'PasswordConfig',
    'DEFAULT_CONFIG',
    'KeysmithException',
    'ConfigError',
    'InvalidLengthError',
    'NoClassSelectedError',
    'EmptyPoolError',
    'ClipboardError',
    'CharacterClass',
    'PasswordGenerator',
    'generate_password',
    'StrengthLabel',
    'StrengthResult',
    'score_password',
    'entropy_bits',
    'theoretical_entropy_bits',
]
