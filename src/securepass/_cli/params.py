import functools
import logging
from typing import Any, Callable, NoReturn, TypeVar

import click

from .. import _conf, exc
from .exc import CLIError

__all__ = (
    "charset_options",
    "get_settings",
    "handle_exception",
    "translate_errors",
)

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def charset_options(fn: F) -> F:
    """Adds the character class switches shared by several commands."""
    for decorator in reversed(
        (
            click.option(
                "--uppercase/--no-uppercase",
                "include_uppercase",
                default=None,
                help="Include uppercase letters.",
            ),
            click.option(
                "--numbers/--no-numbers",
                "include_numbers",
                default=None,
                help="Include digits.",
            ),
            click.option(
                "--special/--no-special",
                "include_special_chars",
                default=None,
                help="Include special characters.",
            ),
        )
    ):
        fn = decorator(fn)
    return fn


def get_settings(ctx: click.Context) -> _conf.Settings:
    if not (settings := ctx.find_object(_conf.Settings)):
        raise RuntimeError("Configuration not found")
    return settings


def raise_unexpected_exc(ex: Exception) -> NoReturn:
    logger.debug(ex, exc_info=ex)
    raise CLIError("Unexpected error: %r" % ex, exit_code=128) from ex


def handle_exception(ex: Exception) -> NoReturn:
    if isinstance(ex, CLIError):
        raise ex

    if isinstance(ex, exc.ConfigurationError):
        raise CLIError(str(ex), exit_code=78) from ex

    if isinstance(ex, exc.InvalidInputError):
        raise CLIError(str(ex), exit_code=65) from ex

    raise_unexpected_exc(ex)


def translate_errors(fn: F) -> F:
    """Turns library errors raised by a command into :class:`CLIError`."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return fn(*args, **kwargs)
        except (click.ClickException, click.Abort):
            raise
        except Exception as ex:
            handle_exception(ex)

    return wrapper  # type: ignore[return-value]
