"""Filesystem operations for driver files, credentials, and output.

Pure models and rendering live in :mod:`modulectl.domain` (correct
dependency direction: infrastructure -> domain). This module handles
the actual file I/O and maps read/parse failures onto the driver error
taxonomy.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from modulectl.domain.driver import Driver
from modulectl.domain.errors import NotFoundError, ParseError, SchemaError
from modulectl.domain.products import ClientCredentials, normalize_identifiers

logger = logging.getLogger(__name__)

REQUIRED_DRIVER_FIELDS = ("type", "version")
REQUIRED_CREDENTIAL_FIELDS = ("id", "secret")


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------


def read_text(path: str | Path) -> str:
    """Read *path* as UTF-8, raising NotFoundError if it is not a readable file."""
    p = Path(path)
    if not p.is_file():
        raise NotFoundError(path)
    try:
        return p.read_text(encoding="utf-8")
    except OSError as exc:
        raise NotFoundError(path) from exc
    except UnicodeDecodeError as exc:
        raise ParseError(path, str(exc)) from exc


def read_json_object(path: str | Path) -> dict[str, Any]:
    """Read and parse a JSON document whose top-level value must be an object."""
    raw = read_text(path)
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ParseError(path, exc.msg) from exc
    if not isinstance(data, dict):
        raise SchemaError("top-level object", f"document {path}")
    return data


def load_driver(path: str | Path) -> Driver:
    """Load a driver description from *path*.

    Only ``type`` and ``version`` are checked here; per-command and
    per-field requirements are enforced by the renderer.
    """
    data = read_json_object(path)
    for field in REQUIRED_DRIVER_FIELDS:
        if field not in data:
            raise SchemaError(field, "driver")
    driver = _validate(Driver, data, entity="driver")
    logger.debug(
        "Loaded driver %s %s (%d commands, %d data fields)",
        driver.type,
        driver.version,
        len(driver.commands or []),
        len(driver.data or []),
    )
    return driver


def read_credentials(path: str | Path) -> ClientCredentials:
    """Load the ``{id, secret}`` client credentials record."""
    data = read_json_object(path)
    for field in REQUIRED_CREDENTIAL_FIELDS:
        if field not in data:
            raise SchemaError(field, "credentials")
    return _validate(ClientCredentials, data, entity="credentials")


def read_identifiers(path: str | Path) -> list[str]:
    """Read a newline-delimited identifier list, lower-cased, blanks skipped."""
    return normalize_identifiers(read_text(path).splitlines())


def _validate[M: BaseModel](model: type[M], data: dict[str, Any], *, entity: str) -> M:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or entity
        raise SchemaError(f"valid {location} ({first['msg']})", entity) from exc


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------


def write_document(path: str | Path, content: str) -> Path:
    """Write *content* to *path*, creating parent directories as needed."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content, encoding="utf-8")
    logger.debug("Wrote %d characters to %s", len(content), p)
    return p
