from typing import Optional

import click

from ...balancer import balance_password
from ..params import charset_options, get_settings, translate_errors

__all__ = ["balance"]


@click.command()
@click.argument("password")
@charset_options
@click.pass_context
@translate_errors
def balance(
    ctx: click.Context,
    password: str,
    include_uppercase: Optional[bool],
    include_numbers: Optional[bool],
    include_special_chars: Optional[bool],
) -> None:
    """
    Replace as few characters of PASSWORD as needed so that it contains every
    enabled character class, keeping its length.

    Examples:

    \b
      $ securepass balance qwertyuiop
    \b
      $ securepass balance hunter22 --no-special
    """
    options = get_settings(ctx).to_options(
        length=len(password) or None,
        include_uppercase=include_uppercase,
        include_numbers=include_numbers,
        include_special_chars=include_special_chars,
    )
    click.echo(balance_password(password, options))
