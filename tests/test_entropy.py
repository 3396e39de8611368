import math

import pytest

from securepass import calculate_entropy
from securepass.entropy import alphabet_size


def test_empty_password_has_no_entropy():
    assert calculate_entropy("") == 0.0


def test_unclassified_characters_have_no_entropy():
    assert calculate_entropy("~~ ~") == 0.0


@pytest.mark.parametrize(
    "password, size",
    [
        ("abc", 26),
        ("ABC", 26),
        ("aB", 52),
        ("a1", 36),
        ("a!", 47),
        ("aA1!", 83),
        ("1234", 10),
    ],
)
def test_alphabet_size(password, size):
    assert alphabet_size(password) == size


def test_entropy_uses_present_classes_only():
    assert calculate_entropy("abc") == pytest.approx(3 * math.log2(26))
    assert calculate_entropy("aA1!") == pytest.approx(4 * math.log2(83))


def test_entropy_grows_with_length():
    values = [calculate_entropy("aZ3" * n) for n in range(1, 20)]
    assert values == sorted(values)
    assert values[0] < values[-1]
