"""
Command-line user registration.

    register-user someone@example.org 'a long password'
"""

from __future__ import annotations

import asyncio
import logging
import re

import typer
from fastapi import HTTPException

from core import config, db
from core.logging import configure_logging

from . import service

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 8

app = typer.Typer(add_completion=False)


def validate_credentials(email: str, password: str) -> None:
    if not EMAIL_PATTERN.match(email or ""):
        raise typer.BadParameter("Invalid email format", param_hint="EMAIL")
    if len(password or "") < MIN_PASSWORD_LENGTH:
        raise typer.BadParameter(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
            param_hint="PASSWORD",
        )


async def _register(email: str, password: str) -> None:
    await db.init_pool()
    try:
        user = await service.register(email=email, password=password)
        logger.info("Registered user %s (%s)", user.id, user.email)
    finally:
        await db.close_pool()


@app.command()
def main(
    email: str = typer.Argument(..., help="Login email for the new user."),
    password: str = typer.Argument(..., help="Plain password; stored as a bcrypt hash."),
) -> None:
    """Create a dashboard user."""
    configure_logging(config.log_level())
    validate_credentials(email, password)
    try:
        asyncio.run(_register(email, password))
    except HTTPException as exc:
        typer.echo(f"Error: {exc.detail}", err=True)
        raise typer.Exit(code=1) from exc
    except db.DatabaseError as exc:
        typer.echo(f"Error registering user: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(f"Success: User {email} registered successfully")


if __name__ == "__main__":
    app()
