import logging
from dataclasses import dataclass
from enum import StrEnum

from .exc import ConfigurationError

__all__ = (
    "LOWERCASE_CHARSET",
    "UPPERCASE_CHARSET",
    "DIGIT_CHARSET",
    "SPECIAL_CHARSET",
    "CharClass",
    "PasswordSpecification",
    "build_charset",
    "check_password_specification",
    "classify",
)

logger = logging.getLogger(__name__)

LOWERCASE_CHARSET = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE_CHARSET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGIT_CHARSET = "0123456789"
# Changing this set changes entropy estimates, keep it stable.
SPECIAL_CHARSET = "!@#$%^&*?(){}[]<>-_=+"


class CharClass(StrEnum):
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    DIGIT = "digit"
    SPECIAL = "special"

    @property
    def charset(self) -> str:
        return _CHARSETS[self]


_CHARSETS: dict[CharClass, str] = {
    CharClass.LOWERCASE: LOWERCASE_CHARSET,
    CharClass.UPPERCASE: UPPERCASE_CHARSET,
    CharClass.DIGIT: DIGIT_CHARSET,
    CharClass.SPECIAL: SPECIAL_CHARSET,
}


@dataclass(slots=True, frozen=True)
class PasswordSpecification:
    """Which character classes a password actually contains."""

    has_lowercase: bool
    has_uppercase: bool
    has_number: bool
    has_special: bool

    @property
    def present_classes(self) -> frozenset[CharClass]:
        return frozenset(
            cls
            for cls, present in (
                (CharClass.LOWERCASE, self.has_lowercase),
                (CharClass.UPPERCASE, self.has_uppercase),
                (CharClass.DIGIT, self.has_number),
                (CharClass.SPECIAL, self.has_special),
            )
            if present
        )


def classify(char: str) -> CharClass | None:
    """
    Returns the class ``char`` belongs to, or ``None`` for characters outside the
    four fixed sets (whitespace, ``~``, non-ASCII letters, ...).
    """
    for cls, charset in _CHARSETS.items():
        if char in charset:
            return cls
    return None


def check_password_specification(password: str) -> PasswordSpecification:
    present = {classify(c) for c in password}
    return PasswordSpecification(
        has_lowercase=CharClass.LOWERCASE in present,
        has_uppercase=CharClass.UPPERCASE in present,
        has_number=CharClass.DIGIT in present,
        has_special=CharClass.SPECIAL in present,
    )


def build_charset(
    include_uppercase: bool = True,
    include_numbers: bool = True,
    include_special_chars: bool = True,
) -> str:
    """
    Assembles the character universe for random generation.

    Lowercase letters are always part of it; the other classes are appended in a
    fixed order (uppercase, digits, specials) so equal options always give an
    identical charset.

    Raises:
        ConfigurationError: If the resulting charset is empty.
    """
    charset = LOWERCASE_CHARSET

    if include_uppercase:
        charset += UPPERCASE_CHARSET
    if include_numbers:
        charset += DIGIT_CHARSET
    if include_special_chars:
        charset += SPECIAL_CHARSET

    if not charset:
        raise ConfigurationError("Character set is empty, enable at least one class")

    logger.debug("built charset of %d characters", len(charset))
    return charset
