"""Tests for the command line interface."""

import pytest
from click.testing import CliRunner

from securepass import CharClass, check_password_specification
from securepass.__main__ import cli
from securepass.charset import SPECIAL_CHARSET


@pytest.fixture
def runner():
    return CliRunner()


def lines(output: str) -> list[str]:
    return [line for line in output.splitlines() if line]


class TestGenerate:
    def test_default(self, runner):
        result = runner.invoke(cli, ["generate"])

        assert result.exit_code == 0, result.output
        (password,) = lines(result.output)
        assert len(password) == 13
        assert check_password_specification(password).present_classes == set(
            CharClass
        )

    def test_length_and_count(self, runner):
        result = runner.invoke(cli, ["generate", "-l", "16", "-n", "3"])

        assert result.exit_code == 0, result.output
        passwords = lines(result.output)
        assert len(passwords) == 3
        assert all(len(p) == 16 for p in passwords)

    def test_disable_classes(self, runner):
        result = runner.invoke(
            cli, ["generate", "-l", "30", "--no-special", "--no-uppercase"]
        )

        assert result.exit_code == 0, result.output
        (password,) = lines(result.output)
        spec = check_password_specification(password)
        assert spec.has_special is False
        assert spec.has_uppercase is False

    def test_phrase(self, runner):
        result = runner.invoke(
            cli, ["generate", "-p", "correct horse battery staple", "--no-special"]
        )

        assert result.exit_code == 0, result.output
        assert lines(result.output) == ["C0rr3c7H0r53B"]

    def test_invalid_length(self, runner):
        result = runner.invoke(cli, ["generate", "-l", "0"])

        assert result.exit_code == 2

    def test_unsatisfiable_balancing(self, runner):
        result = runner.invoke(cli, ["generate", "-l", "2"])

        assert result.exit_code == 65
        assert "cannot hold 4 required" in result.output

    def test_config_file(self, runner, tmp_path):
        config = tmp_path / "securepass.yaml"
        config.write_text("length: 20\ninclude_special_chars: false\n")

        result = runner.invoke(cli, ["-c", str(config), "generate"])

        assert result.exit_code == 0, result.output
        (password,) = lines(result.output)
        assert len(password) == 20
        assert not set(password) & set(SPECIAL_CHARSET)

    def test_flags_override_config_file(self, runner, tmp_path):
        config = tmp_path / "securepass.yaml"
        config.write_text("length: 20\n")

        result = runner.invoke(cli, ["-c", str(config), "generate", "-l", "11"])

        assert result.exit_code == 0, result.output
        assert len(lines(result.output)[0]) == 11

    def test_invalid_config_file(self, runner, tmp_path):
        config = tmp_path / "securepass.yaml"
        config.write_text("length: 0\n")

        result = runner.invoke(cli, ["-c", str(config), "generate"])

        assert result.exit_code == 1
        assert "Invalid configuration input" in result.output

    def test_malformed_config_file(self, runner, tmp_path):
        config = tmp_path / "securepass.yaml"
        config.write_text("length: [\n")

        result = runner.invoke(cli, ["-c", str(config), "generate"])

        assert result.exit_code == 1
        assert "Decoding failed for configuration file" in result.output


class TestCheck:
    def test_argument(self, runner):
        result = runner.invoke(cli, ["check", "zqxjvk"])

        assert result.exit_code == 0, result.output
        assert "Strength:    Medium" in result.output
        assert "Common word: no" in result.output

    def test_stdin(self, runner):
        result = runner.invoke(cli, ["check"], input="zqxjvkmwbyrfu\n")

        assert result.exit_code == 0, result.output
        assert "Very Strong" in result.output

    def test_common_word(self, runner):
        result = runner.invoke(cli, ["check", "mypassword123"])

        assert result.exit_code == 0, result.output
        assert "Strength:    Weak" in result.output
        assert "Common word: yes" in result.output

    def test_require(self, runner):
        result = runner.invoke(cli, ["check", "mypassword123", "--require", "strong"])

        assert result.exit_code == 65
        assert "below the required 'Strong'" in result.output

    def test_require_met(self, runner):
        result = runner.invoke(
            cli, ["check", "!QEa4Kta2}wg1", "--require", "very-strong"]
        )

        assert result.exit_code == 0, result.output


class TestBalance:
    def test_balance(self, runner):
        result = runner.invoke(cli, ["balance", "qwertyuiop"])

        assert result.exit_code == 0, result.output
        (password,) = lines(result.output)
        assert len(password) == 10
        assert check_password_specification(password).present_classes == set(
            CharClass
        )

    def test_balance_with_fewer_classes(self, runner):
        result = runner.invoke(cli, ["balance", "aB1", "--no-special"])

        assert result.exit_code == 0, result.output
        assert lines(result.output) == ["aB1"]

    def test_too_short(self, runner):
        result = runner.invoke(cli, ["balance", "aB1"])

        assert result.exit_code == 65
        assert "Error:" in result.output
