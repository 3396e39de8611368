import functools
import logging
from importlib import resources

__all__ = ("common_words", "contains_common_word")

logger = logging.getLogger(__name__)

DICTIONARY_RESOURCE = "dictionary.txt"


@functools.cache
def common_words() -> frozenset[str]:
    """
    Loads the packaged list of common and weak passwords on first use.

    One lowercase entry per line; blank lines and lines starting with ``#`` are
    skipped.
    """
    text = (
        resources.files("securepass")
        .joinpath("data", DICTIONARY_RESOURCE)
        .read_text(encoding="utf-8")
    )
    words = frozenset(
        line.strip().lower()
        for line in text.splitlines()
        if line.strip() and not line.lstrip().startswith("#")
    )
    logger.debug("loaded %d common words", len(words))
    return words


def contains_common_word(password: str) -> bool:
    """
    Case-insensitive substring match against :func:`common_words`.

    Short entries such as ``pass`` also match inside ordinary words (``compass``).
    """
    lowered = password.lower()
    return any(word in lowered for word in common_words())
