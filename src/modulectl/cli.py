"""Root CLI group for modulectl with global flags and command registration."""

from __future__ import annotations

import click

from modulectl import __version__
from modulectl.commands import register_commands
from modulectl.commands._context import AppContext
from modulectl.config.settings import ModSettings

_EPILOG = """\
Configuration is read from the nearest modulectl.toml (or the file named
by MODULECTL_CONFIG), then overridden by MODULECTL_* environment variables
and by these flags."""


@click.group(
    invoke_without_command=True,
    epilog=_EPILOG,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(version=__version__, prog_name="modulectl")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the output path or error.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logs and HTTP requests on stderr.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Read this TOML file instead of searching for modulectl.toml.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """modulectl — module driver docs and product registration."""
    ctx.obj = AppContext(
        ModSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
