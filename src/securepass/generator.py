import hashlib
import logging
from typing import Optional

from .balancer import balance_password
from .dto import PasswordOptions
from .exc import InvalidInputError
from .phrase import generate_from_phrase
from .random_source import RandomSource, SeededRandomSource, SystemRandomSource

__all__ = (
    "MIN_RECOMMENDED_LENGTH",
    "generate_password",
    "generate_random_password",
)

logger = logging.getLogger(__name__)

MIN_RECOMMENDED_LENGTH = 10


def generate_random_password(
    charset: str, length: int, source: Optional[RandomSource] = None
) -> str:
    """
    Draws ``length`` characters independently and uniformly from ``charset``.

    No character class coverage is guaranteed, see
    :func:`securepass.balancer.balance_password`.

    Raises:
        InvalidInputError: If ``charset`` is empty or ``length`` is less than 1.
    """
    if not charset:
        raise InvalidInputError("Character set must not be empty")
    if length < 1:
        raise InvalidInputError("Password length must be at least 1, got %d" % length)

    source = source or SystemRandomSource()
    return "".join(charset[source.randbelow(len(charset))] for _ in range(length))


def generate_password(
    options: PasswordOptions,
    source: Optional[RandomSource] = None,
    min_recommended_length: int = MIN_RECOMMENDED_LENGTH,
) -> str:
    """
    Generates a password as described by ``options``.

    With a phrase the password is derived from it and the call is deterministic,
    including balancing, which then draws from a source seeded with the derived
    password. Otherwise characters are drawn at random from ``options.charset``.

    Raises:
        ConfigurationError: If the options yield an empty charset.
        InvalidInputError: If the phrase is empty or balancing is impossible.
    """
    if options.length < min_recommended_length:
        logger.warning(
            "password length %d is less than %d and is considered weak",
            options.length,
            min_recommended_length,
        )

    if options.phrase is not None:
        password = generate_from_phrase(options.phrase, options)
        if options.with_balancing:
            seed = hashlib.sha256(password.encode("utf-8")).digest()
            password = balance_password(password, options, SeededRandomSource(seed))
        return password

    password = generate_random_password(options.charset, options.length, source)

    if options.with_balancing:
        password = balance_password(password, options, source)

    return password
