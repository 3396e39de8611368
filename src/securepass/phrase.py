import hashlib
import logging

from .charset import DIGIT_CHARSET, SPECIAL_CHARSET, CharClass, classify
from .dto import PasswordOptions
from .exc import InvalidInputError

__all__ = ("LEET_TABLE", "generate_from_phrase")

logger = logging.getLogger(__name__)

# Only lowercase letters are substituted, capitalized word initials survive.
LEET_TABLE = str.maketrans(
    {
        "a": "4",
        "e": "3",
        "i": "1",
        "o": "0",
        "s": "5",
        "t": "7",
    }
)


def _fit(body: str, size: int) -> str:
    """Repeats ``body`` cyclically or truncates it to exactly ``size`` chars."""
    if size <= 0:
        return ""
    repeats = -(-size // len(body))
    return (body * repeats)[:size]


def generate_from_phrase(phrase: str, options: PasswordOptions) -> str:
    """
    Derives a password from a human-chosen phrase.

    The output is a pure function of ``(phrase, options)``:

    1. whitespace is removed and the words are concatenated;
    2. with uppercase enabled each word starts with a capital letter, otherwise
       the whole phrase is lowercased;
    3. with numbers enabled lowercase ``a e i o s t`` become ``4 3 1 0 5 7``;
    4. a digit (numbers enabled and none present yet) and a special character
       (specials enabled) picked from the SHA-256 digest of the phrase are
       appended;
    5. the body is repeated or truncated so that body and suffix together are
       ``options.length`` characters long.

    Raises:
        InvalidInputError: If the phrase has no non-whitespace characters.
    """
    words = phrase.split()
    if not words:
        raise InvalidInputError(
            "Phrase must contain at least one non-whitespace character"
        )

    if options.include_uppercase:
        words = [word[:1].upper() + word[1:] for word in words]
    else:
        words = [word.lower() for word in words]

    body = "".join(words)

    if options.include_numbers:
        body = body.translate(LEET_TABLE)

    digest = hashlib.sha256(" ".join(phrase.split()).encode("utf-8")).digest()

    suffix = ""
    if options.include_numbers and not any(
        classify(c) is CharClass.DIGIT for c in body
    ):
        suffix += DIGIT_CHARSET[digest[1] % len(DIGIT_CHARSET)]
    if options.include_special_chars:
        suffix += SPECIAL_CHARSET[digest[0] % len(SPECIAL_CHARSET)]

    logger.debug("derived %d character body from %d word(s)", len(body), len(words))
    return (_fit(body, options.length - len(suffix)) + suffix)[: options.length]
