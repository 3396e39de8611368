from dataclasses import dataclass
from enum import IntEnum

from .charset import PasswordSpecification, check_password_specification
from .dictionary import contains_common_word
from .entropy import calculate_entropy

__all__ = (
    "GUESSES_PER_SECOND",
    "PasswordStrength",
    "StrengthReport",
    "assess_password",
    "check_password_strength",
)

# Offline attack against a fast hash on commodity GPUs.
GUESSES_PER_SECOND = 1e10


class PasswordStrength(IntEnum):
    WEAK = 0
    MEDIUM = 1
    STRONG = 2
    VERY_STRONG = 3

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


# Lower bound in bits of entropy for each level, strongest first.
THRESHOLDS: tuple[tuple[float, PasswordStrength], ...] = (
    (60.0, PasswordStrength.VERY_STRONG),
    (36.0, PasswordStrength.STRONG),
    (28.0, PasswordStrength.MEDIUM),
)


@dataclass(slots=True, frozen=True)
class StrengthReport:
    strength: PasswordStrength
    entropy: float
    has_common_word: bool
    specification: PasswordSpecification

    @property
    def crack_time_seconds(self) -> float:
        """Average time to brute-force the password at :data:`GUESSES_PER_SECOND`."""
        try:
            return 2**self.entropy / 2 / GUESSES_PER_SECOND
        except OverflowError:
            return float("inf")


def classify_entropy(entropy: float) -> PasswordStrength:
    for lower_bound, strength in THRESHOLDS:
        if entropy >= lower_bound:
            return strength
    return PasswordStrength.WEAK


def assess_password(password: str) -> StrengthReport:
    entropy = calculate_entropy(password)
    has_common_word = contains_common_word(password)

    strength = classify_entropy(entropy)
    if has_common_word:
        strength = min(strength, PasswordStrength.WEAK)

    return StrengthReport(
        strength=strength,
        entropy=entropy,
        has_common_word=has_common_word,
        specification=check_password_specification(password),
    )


def check_password_strength(password: str) -> PasswordStrength:
    """
    Classifies ``password`` by its estimated entropy; a password containing a
    common word is never rated above :attr:`PasswordStrength.WEAK`.
    """
    return assess_password(password).strength
