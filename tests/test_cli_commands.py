from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from formstate.cli.app import app
from formstate.cli.deps import reset_container


@pytest.fixture(autouse=True)
def _env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORMSTATE_ENV", "test")
    monkeypatch.setenv("FORMSTATE_LOG_LEVEL", "WARNING")
    reset_container()


def test_cli_show_settings() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["show-settings"])
    assert result.exit_code == 0
    assert "Environment:\ttest" in result.stdout


def test_cli_check_reports_missing_fields() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["check", "--name", "Jane"])
    assert result.exit_code == 1
    assert "Email is required" in result.stdout


def test_cli_check_accepts_valid_form() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["check", "--name", "Jane", "--email", "jane@example.com"])
    assert result.exit_code == 0
    assert "Form is valid" in result.stdout


def test_cli_create_prints_entity() -> None:
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["create", "--id", "42", "--name", "Jane", "--email", "jane@example.com", "--age", "34"],
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload == {
        "id": 42,
        "name": "Jane",
        "email": "jane@example.com",
        "phone": None,
        "age": 34,
        "bio": None,
    }


def test_cli_create_rejects_invalid_form() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["create", "--id", "1", "--name", "Jane", "--email", "nope"])
    assert result.exit_code == 1
    assert "must be a valid email address" in result.stdout


def test_cli_edit_updates_profile(tmp_path: Path) -> None:
    source = tmp_path / "profile.json"
    source.write_text(json.dumps({"id": 7, "name": "Sam", "email": "sam@example.com"}))

    runner = CliRunner()
    result = runner.invoke(app, ["edit", str(source), "--bio", "Drummer"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["id"] == 7
    assert payload["name"] == "Sam"
    assert payload["bio"] == "Drummer"


def test_cli_edit_rejects_malformed_profile(tmp_path: Path) -> None:
    source = tmp_path / "profile.json"
    source.write_text(json.dumps({"id": 7, "name": "", "email": "sam@example.com"}))

    runner = CliRunner()
    result = runner.invoke(app, ["edit", str(source)])

    assert result.exit_code == 1
    assert "Invalid profile" in result.stdout


def test_cli_edit_rejects_non_utf8_file(tmp_path: Path) -> None:
    source = tmp_path / "profile.json"
    source.write_bytes(b"\xff\xfe{\x00")

    runner = CliRunner()
    result = runner.invoke(app, ["edit", str(source)])

    assert result.exit_code == 1
    assert "Invalid profile" in result.stdout
    assert not isinstance(result.exception, UnicodeDecodeError)
