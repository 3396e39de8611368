import math

from .charset import check_password_specification

__all__ = ("calculate_entropy", "alphabet_size")


def alphabet_size(password: str) -> int:
    """Sum of the sizes of the character classes present in ``password``."""
    return sum(
        len(cls.charset)
        for cls in check_password_specification(password).present_classes
    )


def calculate_entropy(password: str) -> float:
    """
    Estimates the strength of ``password`` in bits as ``L * log2(R)``, where ``L``
    is the password length and ``R`` the effective alphabet size.

    The estimate assumes every character was drawn independently and uniformly
    from the classes it contains, which overrates human-chosen passwords. Returns
    ``0.0`` for an empty password or one with no recognized character class.
    """
    size = alphabet_size(password)
    if not password or size == 0:
        return 0.0
    return len(password) * math.log2(size)
