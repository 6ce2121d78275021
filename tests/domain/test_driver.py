"""Tests for driver models and the error taxonomy."""

import pytest
from pydantic import ValidationError

from modulectl.domain.driver import Command, DataField, Driver
from modulectl.domain.errors import DriverError, NotFoundError, ParseError, SchemaError


class TestDriverModel:
    def test_minimal(self) -> None:
        driver = Driver.model_validate({"type": "moduware.module.led", "version": "1.0.0"})
        assert driver.commands is None
        assert driver.data is None

    def test_numeric_version_coerced(self) -> None:
        driver = Driver.model_validate({"type": "t", "version": 2})
        assert driver.version == "2"

    def test_unknown_keys_ignored(self) -> None:
        driver = Driver.model_validate({"type": "t", "version": "1", "author": "someone"})
        assert not hasattr(driver, "author")

    def test_requires_type(self) -> None:
        with pytest.raises(ValidationError):
            Driver.model_validate({"version": "1"})

    def test_frozen(self) -> None:
        driver = Driver(type="t", version="1")
        with pytest.raises(ValidationError):
            driver.version = "2"  # type: ignore[misc]

    def test_state_keeps_insertion_order(self) -> None:
        field = DataField.model_validate(
            {"name": "S", "variables": [{"name": "v", "state": {"b": "B", "a": "A"}}]}
        )
        assert field.variables is not None
        assert list(field.variables[0].state or {}) == ["b", "a"]

    def test_structural_equality(self) -> None:
        raw = {"type": "t", "version": "1", "commands": [{"name": "A", "command": "1"}]}
        assert Driver.model_validate(raw) == Driver.model_validate(raw)


class TestDisplayName:
    def test_title_wins(self) -> None:
        assert Command(name="SetRGB", title="Set color").display_name == "Set color"

    def test_falls_back_to_name(self) -> None:
        assert DataField(name="Status").display_name == "Status"


class TestErrors:
    def test_not_found_carries_path(self) -> None:
        exc = NotFoundError("./driver.json")
        assert exc.path == "./driver.json"
        assert str(exc) == "File ./driver.json not found"
        assert exc.code == "NOT_FOUND"

    def test_parse_error(self) -> None:
        exc = ParseError("bad.json", "Expecting value")
        assert str(exc) == "Bad file format: can't parse bad.json: Expecting value"

    def test_schema_error_message(self) -> None:
        assert str(SchemaError("version")) == "Bad file format: driver missing version"

    def test_schema_error_with_parent(self) -> None:
        exc = SchemaError("name", "argument", parent="command 'SetRGB'")
        assert str(exc) == "Bad file format: argument of command 'SetRGB' missing name"
        assert exc.field == "name"
        assert exc.entity == "argument"

    @pytest.mark.parametrize("exc_type", [NotFoundError, ParseError, SchemaError])
    def test_all_are_driver_errors(self, exc_type: type[DriverError]) -> None:
        assert issubclass(exc_type, DriverError)
