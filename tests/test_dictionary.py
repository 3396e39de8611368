import pytest

from securepass import contains_common_word
from securepass.dictionary import common_words


class TestCommonWords:
    def test_loaded_once_and_immutable(self):
        words = common_words()

        assert isinstance(words, frozenset)
        assert common_words() is words

    def test_entries_are_normalized(self):
        for word in common_words():
            assert word == word.strip().lower()
            assert len(word) >= 4
            assert not word.startswith("#")

    @pytest.mark.parametrize("word", ["password", "123456", "qwerty", "letmein"])
    def test_well_known_entries(self, word):
        assert word in common_words()


class TestContainsCommonWord:
    @pytest.mark.parametrize(
        "password",
        ["password", "mypassword123", "PaSsWoRd!", "xxQWERTYxx", "Summer2024"],
    )
    def test_match(self, password):
        assert contains_common_word(password) is True

    @pytest.mark.parametrize(
        "password", ["compass", "Contest!", "attempt2024", "Grassroots"]
    )
    def test_short_entries_match_inside_words(self, password):
        assert contains_common_word(password) is True

    @pytest.mark.parametrize("password", ["", "zqxjvk", "!QEa4Kta2}wg1"])
    def test_no_match(self, password):
        assert contains_common_word(password) is False
