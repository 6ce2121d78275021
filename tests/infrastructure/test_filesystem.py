"""Tests for driver loading and other file I/O."""

from __future__ import annotations

from pathlib import Path

import pytest

from modulectl.domain.errors import NotFoundError, ParseError, SchemaError
from modulectl.infrastructure.filesystem import (
    load_driver,
    read_credentials,
    read_identifiers,
    write_document,
)
from tests.conftest import minimal_driver, write_json


class TestLoadDriver:
    def test_missing_path(self, tmp_path: Path) -> None:
        missing = tmp_path / "driver.json"
        with pytest.raises(NotFoundError) as exc_info:
            load_driver(missing)
        assert exc_info.value.path == str(missing)
        assert str(missing) in str(exc_info.value)

    def test_directory_is_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(NotFoundError):
            load_driver(tmp_path)

    def test_malformed_json(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad_json_driver.json"
        bad.write_text('{"type": "x", ', encoding="utf-8")
        with pytest.raises(ParseError, match="can't parse"):
            load_driver(bad)

    def test_empty_object(self, tmp_path: Path) -> None:
        path = write_json(tmp_path / "empty_object_driver.json", {})
        with pytest.raises(SchemaError) as exc_info:
            load_driver(path)
        assert exc_info.value.field == "type"

    def test_missing_version(self, tmp_path: Path) -> None:
        path = write_json(tmp_path / "driver.json", {"type": "moduware.module.led"})
        with pytest.raises(SchemaError, match="driver missing version"):
            load_driver(path)

    def test_top_level_array(self, tmp_path: Path) -> None:
        path = write_json(tmp_path / "driver.json", [minimal_driver()])
        with pytest.raises(SchemaError, match="top-level object"):
            load_driver(path)

    def test_wrong_shape(self, tmp_path: Path) -> None:
        path = write_json(tmp_path / "driver.json", minimal_driver(commands="nope"))
        with pytest.raises(SchemaError, match="commands"):
            load_driver(path)

    def test_loads_fixture(self, led_driver_file: Path) -> None:
        driver = load_driver(led_driver_file)
        assert driver.type == "moduware.module.led"
        assert driver.version == "1.2.0"
        assert [c.name for c in driver.commands or []] == ["SetRGB", "TurnOffLeds"]
        assert [d.name for d in driver.data or []] == ["StatusResponse"]

    def test_nested_fields_not_validated(self, tmp_path: Path) -> None:
        path = write_json(tmp_path / "driver.json", minimal_driver(commands=[{"title": "x"}]))
        driver = load_driver(path)
        assert driver.commands is not None
        assert driver.commands[0].name is None

    def test_accepts_str_path(self, led_driver_file: Path) -> None:
        assert load_driver(str(led_driver_file)).type == "moduware.module.led"


class TestReadCredentials:
    def test_reads_pair(self, tmp_path: Path) -> None:
        path = write_json(tmp_path / "repository-user.json", {"id": "abc", "secret": "xyz"})
        creds = read_credentials(path)
        assert creds.client_id == "abc"
        assert creds.secret == "xyz"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(NotFoundError):
            read_credentials(tmp_path / "repository-user.json")

    def test_missing_secret(self, tmp_path: Path) -> None:
        path = write_json(tmp_path / "repository-user.json", {"id": "abc"})
        with pytest.raises(SchemaError, match="credentials missing secret"):
            read_credentials(path)


class TestReadIdentifiers:
    def test_splits_and_lowercases(self, tmp_path: Path) -> None:
        path = tmp_path / "uuids.txt"
        path.write_bytes(b"AAAA-1111\r\nbbbb-2222\n\nCcCc-3333\n")
        assert read_identifiers(path) == ["aaaa-1111", "bbbb-2222", "cccc-3333"]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(NotFoundError):
            read_identifiers(tmp_path / "uuids.txt")


class TestWriteDocument:
    def test_creates_parents(self, tmp_path: Path) -> None:
        target = tmp_path / "docs" / "led" / "driver.md"
        written = write_document(target, "# Driver\n")
        assert written == target
        assert target.read_text(encoding="utf-8") == "# Driver\n"
