#!/usr/bin/env python3

import logging
import pathlib

import click
import lazy_object_proxy
import pydantic

from securepass._cli.commands.balance import balance
from securepass._cli.commands.check import check
from securepass._cli.commands.generate import generate
from securepass._cli.exc import ConfigSyntaxError, ConfigValidationError
from securepass._conf import Settings
from securepass.util.model import convert_errors

ConfigOption = pathlib.Path | None


def validate_config(fn: ConfigOption) -> Settings:
    payload = {}

    if fn is not None:
        from ruamel import yaml
        from ruamel.yaml.error import YAMLError

        _loader = yaml.YAML(typ="safe")

        try:
            payload = _loader.load(fn.read_bytes()) or {}
        except YAMLError as ex:
            raise ConfigSyntaxError(
                str(ex),
                ctx=ConfigSyntaxError.Context(filename=fn),
            ) from ex

        if not isinstance(payload, dict):
            raise ConfigValidationError(
                "Configuration file must contain a mapping, got %s"
                % type(payload).__name__
            )

    try:
        res = Settings(**payload)
    except pydantic.ValidationError as ex:
        raise ConfigValidationError(str(convert_errors(ex))) from ex

    assert isinstance(res, Settings), "Expected %r, got %r" % (
        Settings.__name__,
        res,
    )
    return res


@click.group()
@click.version_option(package_name="securepass")
@click.option("-D", "--debug/--no-debug", default=False, help="Enable debug mode.")
@click.option(
    "-c",
    "--config",
    type=click.Path(
        dir_okay=False,
        exists=True,
        readable=True,
        path_type=pathlib.Path,
    ),
    help="Path to a YAML configuration file.",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, config: ConfigOption) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
    )
    ctx.obj = lazy_object_proxy.Proxy(lambda: validate_config(fn=config))


cli.add_command(generate)
cli.add_command(check)
cli.add_command(balance)


def main() -> None:
    cli(auto_envvar_prefix="SECUREPASS")


if __name__ == "__main__":
    main()
