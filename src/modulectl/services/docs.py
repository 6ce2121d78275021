"""DocsService — driver description to Markdown documentation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from modulectl.domain.docs import render
from modulectl.domain.errors import DriverError, SchemaError
from modulectl.infrastructure.filesystem import load_driver, write_document
from modulectl.services.result import ServiceResult

if TYPE_CHECKING:
    from modulectl.config.models import DocsConfig

logger = logging.getLogger(__name__)


class DocsService:
    """Load a driver file, render it, and write the document."""

    def __init__(self, config: DocsConfig) -> None:
        self._config = config

    def render_driver(self, driver_path: str | Path) -> str:
        """Load and render *driver_path*, raising DriverError on failure."""
        driver = load_driver(driver_path)
        return render(
            driver,
            drivers_list_link=self._config.drivers_list_link,
            language_tabs=self._config.language_tabs,
        )

    def render_document(self, driver_path: str | Path) -> ServiceResult:
        """Render *driver_path* without writing it.

        The document is returned in ``data["content"]``.
        """
        try:
            document = self.render_driver(driver_path)
        except DriverError as exc:
            return _driver_failure("render_docs", driver_path, exc)
        return ServiceResult(
            ok=True,
            op="render_docs",
            data={"driver": str(driver_path), "content": document, "size": len(document)},
        )

    def generate(
        self,
        driver_path: str | Path,
        output_path: str | Path | None = None,
    ) -> ServiceResult:
        """Render *driver_path* to *output_path* (default from config).

        Nothing is written when loading or rendering fails.
        """
        output = Path(output_path or self._config.output)
        try:
            document = self.render_driver(driver_path)
        except DriverError as exc:
            return _driver_failure("generate_docs", driver_path, exc)

        try:
            written = write_document(output, document)
        except OSError as exc:
            return ServiceResult.failure(
                "generate_docs", "WRITE_ERROR", f"Cannot write {output}: {exc}", path=str(output)
            )

        return ServiceResult(
            ok=True,
            op="generate_docs",
            data={
                "driver": str(driver_path),
                "output": str(written),
                "size": len(document),
            },
        )


def _driver_failure(op: str, driver_path: str | Path, exc: DriverError) -> ServiceResult:
    logger.debug("Rendering %s failed: %s", driver_path, exc)
    detail = {"path": str(driver_path)}
    if isinstance(exc, SchemaError):
        detail["field"] = exc.field
    return ServiceResult.failure(op, exc.code, str(exc), **detail)
