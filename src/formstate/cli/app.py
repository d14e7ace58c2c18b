"""Typer CLI for filling and checking profile forms."""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from formstate.domain import Profile, ProfileId
from formstate.forms import FormSnapshot

from .deps import get_container

app = typer.Typer(help="formstate command-line interface")
console = Console()


def _field_options(
    name: str | None,
    email: str | None,
    phone: str | None,
    age: str | None,
    bio: str | None,
) -> dict[str, str]:
    values = {"name": name, "email": email, "phone": phone, "age": age, "bio": bio}
    return {key: value for key, value in values.items() if value is not None}


def _print_errors(snapshot: FormSnapshot) -> None:
    table = Table(title="Validation errors")
    table.add_column("Field")
    table.add_column("Message")
    for name, message in snapshot.errors.items():
        table.add_row(name, message)
    console.print(table)


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    settings = get_container().settings
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Log level:\t" + settings.log_level)
    typer.echo(f"Debug transitions:\t{settings.debug_transitions}")


@app.command("check")
def check(
    name: str | None = typer.Option(None, help="Display name"),
    email: str | None = typer.Option(None, help="Email address"),
    phone: str | None = typer.Option(None, help="Phone number"),
    age: str | None = typer.Option(None, help="Age in years"),
    bio: str | None = typer.Option(None, help="Short biography"),
) -> None:
    """Validate profile field values without creating anything."""

    session = get_container().new_profile_session()
    snapshot = session.update(_field_options(name, email, phone, age, bio))
    if not snapshot.is_valid:
        _print_errors(snapshot)
        raise typer.Exit(code=1)
    typer.echo("Form is valid")


@app.command("create")
def create(
    profile_id: int = typer.Option(..., "--id", min=0, help="Identity for the new profile"),
    name: str | None = typer.Option(None, help="Display name"),
    email: str | None = typer.Option(None, help="Email address"),
    phone: str | None = typer.Option(None, help="Phone number"),
    age: str | None = typer.Option(None, help="Age in years"),
    bio: str | None = typer.Option(None, help="Short biography"),
) -> None:
    """Fill a new profile form and print the resulting entity as JSON."""

    container = get_container()
    session = container.new_profile_session()
    snapshot = session.update(_field_options(name, email, phone, age, bio))
    if not snapshot.is_valid:
        _print_errors(snapshot)
        raise typer.Exit(code=1)

    profile = session.submit(ProfileId(profile_id), container.profile_repository.upsert)
    typer.echo(profile.model_dump_json())


@app.command("edit")
def edit(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, help="Profile JSON file"),
    name: str | None = typer.Option(None, help="Display name"),
    email: str | None = typer.Option(None, help="Email address"),
    phone: str | None = typer.Option(None, help="Phone number"),
    age: str | None = typer.Option(None, help="Age in years"),
    bio: str | None = typer.Option(None, help="Short biography"),
) -> None:
    """Load a profile from JSON, apply field changes and print the updated entity."""

    try:
        original = Profile.model_validate_json(source.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        typer.echo(f"Invalid profile in {source}: not UTF-8 text")
        raise typer.Exit(code=1) from exc
    except ValidationError as exc:
        typer.echo(f"Invalid profile in {source}: {exc.error_count()} error(s)")
        raise typer.Exit(code=1) from exc

    container = get_container()
    session = container.edit_profile_session(original)
    snapshot = session.update(_field_options(name, email, phone, age, bio))
    if not snapshot.is_valid:
        _print_errors(snapshot)
        raise typer.Exit(code=1)

    profile = session.submit(original.id, container.profile_repository.upsert)
    typer.echo(profile.model_dump_json())
