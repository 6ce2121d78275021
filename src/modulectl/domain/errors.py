"""Driver error taxonomy.

Every member aborts the current operation. Errors propagate unmodified
from the loader and renderer; only the service layer converts them into
a failed ServiceResult.
"""

from __future__ import annotations

from pathlib import Path


class DriverError(Exception):
    """Base class for all driver loading and rendering failures."""

    code = "DRIVER_ERROR"


class NotFoundError(DriverError):
    """The input path does not resolve to a readable file."""

    code = "NOT_FOUND"

    def __init__(self, path: str | Path) -> None:
        self.path = str(path)
        super().__init__(f"File {self.path} not found")


class ParseError(DriverError):
    """The input file is not well-formed JSON."""

    code = "PARSE_ERROR"

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Bad file format: can't parse {self.path}: {reason}")


class SchemaError(DriverError):
    """A required field is missing.

    Attributes:
        field: Name of the missing field.
        entity: Kind of object lacking the field (``driver``, ``command``...).
        parent: Human label of the owning object, if any
            (e.g. ``command 'SetRGB'``).
    """

    code = "SCHEMA_ERROR"

    def __init__(self, field: str, entity: str = "driver", parent: str | None = None) -> None:
        self.field = field
        self.entity = entity
        self.parent = parent
        owner = f"{entity} of {parent}" if parent else entity
        super().__init__(f"Bad file format: {owner} missing {field}")
