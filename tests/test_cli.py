"""Tests for the register-user command."""

import pytest
from fastapi import HTTPException
from typer.testing import CliRunner

from auth import cli

runner = CliRunner()


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)


def test_rejects_invalid_email() -> None:
    result = runner.invoke(cli.app, ["not-an-email", "long enough"])
    assert result.exit_code == 2
    assert "Invalid email format" in result.output


def test_rejects_short_password() -> None:
    result = runner.invoke(cli.app, ["clerk@example.org", "short"])
    assert result.exit_code == 2
    assert "at least 8 characters" in result.output


def test_registers_user(monkeypatch: pytest.MonkeyPatch) -> None:
    registered = []

    async def fake_register(email: str, password: str) -> None:
        registered.append((email, password))

    monkeypatch.setattr(cli, "_register", fake_register)
    result = runner.invoke(cli.app, ["clerk@example.org", "long enough"])

    assert result.exit_code == 0
    assert registered == [("clerk@example.org", "long enough")]
    assert "User clerk@example.org registered successfully" in result.output


def test_duplicate_user_exits_with_error(monkeypatch: pytest.MonkeyPatch) -> None:
    async def fake_register(email: str, password: str) -> None:
        raise HTTPException(status_code=409, detail="User with this email already exists")

    monkeypatch.setattr(cli, "_register", fake_register)
    result = runner.invoke(cli.app, ["clerk@example.org", "long enough"])

    assert result.exit_code == 1
    assert "User with this email already exists" in result.output
