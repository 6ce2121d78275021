"""Command: generate Markdown documentation from a driver file."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from modulectl.commands._base import ModCommand

if TYPE_CHECKING:
    from modulectl.commands._context import AppContext

_DOCS_EXAMPLES = """\
  modulectl docs moduware.module.led.driver.json
  modulectl docs led.driver.json --output docs/led.md
  modulectl docs led.driver.json -o -"""


@click.command("docs", cls=ModCommand, examples=_DOCS_EXAMPLES)
@click.argument("driver_file", type=click.Path(dir_okay=False))
@click.option(
    "-o",
    "--output",
    default=None,
    help="Output file (default: driver.md; '-' prints to stdout).",
)
@click.pass_obj
def docs(app: AppContext, driver_file: str, output: str | None) -> None:
    """Generate Markdown documentation for DRIVER_FILE."""
    from modulectl.services.docs import DocsService

    svc = DocsService(app.settings.docs)

    if output != "-":
        app.emit(svc.generate(driver_file, output))
        return

    result = svc.render_document(driver_file)
    if not result.ok or app.settings.json_output:
        app.emit(result)
        return
    # Pipe-friendly: raw document to stdout
    click.echo(result.data["content"], nl=False)
