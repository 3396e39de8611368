from datetime import timedelta
from enum import StrEnum
from typing import Optional

import click
from humanize import intword, precisedelta
from rich.console import Console, Group, RenderableType
from rich.text import Text

from ...charset import CharClass
from ...strength import PasswordStrength, StrengthReport, assess_password
from ..exc import CLIError
from ..params import translate_errors

__all__ = ["check"]

SECONDS_PER_YEAR = 365.25 * 24 * 3600


class StrengthStyle(StrEnum):
    WEAK = "red"
    MEDIUM = "yellow"
    STRONG = "green"
    VERY_STRONG = "bold green"


STRENGTH_CHOICES = {s.name.lower().replace("_", "-"): s for s in PasswordStrength}


def format_crack_time(seconds: float) -> str:
    if seconds < 1:
        return "less than a second"
    if seconds >= 100 * SECONDS_PER_YEAR:
        years = seconds / SECONDS_PER_YEAR
        if years >= 1e30:
            return "longer than the age of the universe"
        return "%s years" % intword(int(years))
    return precisedelta(
        timedelta(seconds=seconds), minimum_unit="seconds", format="%0.0f"
    )


def compose_report(report: StrengthReport) -> RenderableType:
    spec = report.specification
    classes = ", ".join(c.value for c in CharClass if c in spec.present_classes)

    return Group(
        Text.assemble(
            "Strength:    ",
            (report.strength.label, StrengthStyle[report.strength.name].value),
        ),
        Text("Entropy:     %.1f bits" % report.entropy),
        Text("Classes:     %s" % (classes or "none")),
        Text.assemble(
            "Common word: ",
            ("yes", "red") if report.has_common_word else ("no", "green"),
        ),
        Text("Crack time:  %s" % format_crack_time(report.crack_time_seconds)),
    )


@click.command()
@click.argument("password", required=False)
@click.option(
    "--require",
    type=click.Choice(list(STRENGTH_CHOICES)),
    help="Exit with status 65 if the password is weaker than this level.",
)
@translate_errors
def check(password: Optional[str], require: Optional[str]) -> None:
    """
    Estimate the strength of a password.

    The password is read from standard input when omitted, which keeps it out of
    the shell history.

    Examples:

    \b
      $ securepass check 'correct horse battery staple'
    \b
      $ securepass generate | securepass check --require very-strong
    """
    if password is None:
        password = click.get_text_stream("stdin").read().rstrip("\r\n")

    report = assess_password(password)
    Console().print(compose_report(report))

    if require is not None and report.strength < STRENGTH_CHOICES[require]:
        raise CLIError(
            "Password strength %r is below the required %r"
            % (report.strength.label, STRENGTH_CHOICES[require].label),
            exit_code=65,
        )
