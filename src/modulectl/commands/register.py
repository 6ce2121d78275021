"""Command: register product identifiers with the product registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from modulectl.commands._base import ModCommand

if TYPE_CHECKING:
    from modulectl.commands._context import AppContext

_REGISTER_EXAMPLES = """\
  modulectl register moduware.module.led uuids.txt
  modulectl register moduware.gateway.hub uuids.txt --credentials ~/repository-user.json
  modulectl --json register moduware.module.led uuids.txt"""


@click.command("register", cls=ModCommand, examples=_REGISTER_EXAMPLES)
@click.argument("product_type")
@click.argument("uuids_file", type=click.Path(dir_okay=False))
@click.option(
    "--credentials",
    default=None,
    type=click.Path(dir_okay=False),
    help="Client credentials JSON with id and secret (default: repository-user.json).",
)
@click.pass_obj
def register(
    app: AppContext,
    product_type: str,
    uuids_file: str,
    credentials: str | None,
) -> None:
    """Register every identifier in UUIDS_FILE as PRODUCT_TYPE."""
    from modulectl.domain.products import format_progress
    from modulectl.services.register import RegisterService

    show_progress = not (app.settings.json_output or app.settings.quiet)

    def echo_progress(index: int, total: int, uuid: str, outcome: str) -> None:
        if show_progress:
            click.echo(f"{format_progress(index, total)}% {uuid} - {outcome}")

    result = RegisterService(app.settings.registry).register_products(
        product_type,
        uuids_file,
        credentials_path=credentials,
        on_result=echo_progress,
    )
    app.emit(result)
