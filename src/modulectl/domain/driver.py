"""Driver description models.

A driver describes the remote-control surface of a hardware module:
the commands it accepts and the data fields it emits. Only ``type`` and
``version`` are required at load time; per-item required fields are
checked by the renderer so that the loader stays a thin parse step.

All models use Pydantic with frozen config for immutability.
"""

from __future__ import annotations

from pydantic import BaseModel


class _DriverModel(BaseModel):
    model_config = {"frozen": True, "extra": "ignore", "coerce_numbers_to_str": True}


class Argument(_DriverModel):
    """One positional argument of a command."""

    name: str | None = None
    description: str | None = None
    validation: str | None = None


class Command(_DriverModel):
    """One controllable operation exposed by a module."""

    name: str | None = None
    command: str | None = None
    title: str | None = None
    description: str | None = None
    arguments: list[Argument] | None = None

    @property
    def display_name(self) -> str | None:
        return self.title or self.name


class Variable(_DriverModel):
    """One named value within a data field payload.

    ``state`` enumerates the discrete values the variable may take; when
    absent the variable is unconstrained.
    """

    name: str | None = None
    title: str | None = None
    description: str | None = None
    state: dict[str, str] | None = None


class DataField(_DriverModel):
    """One category of telemetry a module emits."""

    name: str | None = None
    source: str | None = None
    title: str | None = None
    description: str | None = None
    variables: list[Variable] | None = None

    @property
    def display_name(self) -> str | None:
        return self.title or self.name


class Driver(_DriverModel):
    """Root of a driver description file."""

    type: str
    version: str
    commands: list[Command] | None = None
    data: list[DataField] | None = None
