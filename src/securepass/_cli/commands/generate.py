from typing import Optional

import click

from ...generator import generate_password
from ..params import charset_options, get_settings, translate_errors

__all__ = ["generate"]


@click.command()
@click.option(
    "-l",
    "--length",
    type=click.IntRange(min=1),
    help="Length of the password. Defaults to the configured length.",
)
@charset_options
@click.option(
    "--balance/--no-balance",
    "with_balancing",
    default=None,
    help="Make sure every enabled character class appears at least once.",
)
@click.option(
    "-p",
    "--phrase",
    help=(
        "Derive the password from a phrase instead of drawing it at random. The "
        "same phrase and options always give the same password."
    ),
)
@click.option(
    "-n",
    "--count",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of passwords to generate.",
)
@click.pass_context
@translate_errors
def generate(
    ctx: click.Context,
    length: Optional[int],
    include_uppercase: Optional[bool],
    include_numbers: Optional[bool],
    include_special_chars: Optional[bool],
    with_balancing: Optional[bool],
    phrase: Optional[str],
    count: int,
) -> None:
    """
    Generate passwords and print one per line.

    Examples:

    \b
      # A password with the configured defaults
      $ securepass generate
    \b
      # Five 20-character passwords without special characters
      $ securepass generate -l 20 --no-special -n 5
    \b
      # A password derived from a phrase
      $ securepass generate -p "correct horse battery staple"
    """
    settings = get_settings(ctx)
    options = settings.to_options(
        length=length,
        include_uppercase=include_uppercase,
        include_numbers=include_numbers,
        include_special_chars=include_special_chars,
        with_balancing=with_balancing,
        phrase=phrase,
    )

    for _ in range(count):
        click.echo(
            generate_password(
                options, min_recommended_length=settings.min_recommended_length
            )
        )
