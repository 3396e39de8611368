__all__ = (
    "ApplicationError",
    "CharClass",
    "ConfigurationError",
    "InvalidInputError",
    "PasswordOptions",
    "PasswordSpecification",
    "PasswordStrength",
    "RandomSource",
    "SeededRandomSource",
    "StrengthReport",
    "SystemRandomSource",
    "assess_password",
    "balance_password",
    "build_charset",
    "calculate_entropy",
    "check_password_specification",
    "check_password_strength",
    "contains_common_word",
    "generate_from_phrase",
    "generate_password",
    "generate_random_password",
)
__version__ = "0.3.0"

from .balancer import balance_password
from .charset import (
    CharClass,
    PasswordSpecification,
    build_charset,
    check_password_specification,
)
from .dictionary import contains_common_word
from .dto import PasswordOptions
from .entropy import calculate_entropy
from .exc import ApplicationError, ConfigurationError, InvalidInputError
from .generator import generate_password, generate_random_password
from .phrase import generate_from_phrase
from .random_source import RandomSource, SeededRandomSource, SystemRandomSource
from .strength import (
    PasswordStrength,
    StrengthReport,
    assess_password,
    check_password_strength,
)
