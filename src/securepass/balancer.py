import logging
from collections import Counter
from typing import Optional

from .charset import check_password_specification, classify
from .dto import PasswordOptions
from .exc import InvalidInputError
from .random_source import RandomSource, SystemRandomSource, choice

__all__ = ("balance_password",)

logger = logging.getLogger(__name__)


def balance_password(
    password: str,
    options: PasswordOptions,
    source: Optional[RandomSource] = None,
) -> str:
    """
    Overwrites as few characters of ``password`` as needed so that every class
    required by ``options`` appears at least once. The length never changes.

    Each missing class replaces one character at a position chosen uniformly at
    random among the positions that can be given up: not already overwritten in
    this call, and holding either a character of a class that is not required or
    one of several characters of the same required class. The new character is a
    uniform draw from the missing class's charset. A password that already covers
    every required class is returned unchanged.

    Raises:
        InvalidInputError: If ``password`` is empty or shorter than the number of
            required classes.
    """
    if not password:
        raise InvalidInputError("Cannot balance an empty password")

    required = options.required_classes
    if len(password) < len(required):
        raise InvalidInputError(
            "Password of length %d cannot hold %d required character classes"
            % (len(password), len(required))
        )

    present = check_password_specification(password).present_classes
    missing = [cls for cls in required if cls not in present]
    if not missing:
        return password

    source = source or SystemRandomSource()
    chars = list(password)
    counts = Counter(classify(c) for c in chars)
    taken: set[int] = set()

    for cls in missing:
        candidates = [
            i
            for i, c in enumerate(chars)
            if i not in taken
            and ((owner := classify(c)) not in required or counts[owner] > 1)
        ]
        # Guaranteed non-empty by the length check above.
        index = choice(source, candidates)

        counts[classify(chars[index])] -= 1
        chars[index] = choice(source, cls.charset)
        counts[cls] += 1
        taken.add(index)

    logger.debug("balanced password, %d character(s) replaced", len(missing))
    return "".join(chars)
