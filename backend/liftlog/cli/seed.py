"""``flask seed`` commands: load the exercise catalog and the development user."""

from __future__ import annotations

import logging
from collections.abc import Callable

import click
from flask import current_app
from flask.cli import with_appcontext
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from liftlog.core.extensions import db
from liftlog.models import ExerciseTemplate, MuscleGroup, User, Workout
from liftlog.seeds import seed_data

LOGGER = logging.getLogger(__name__)

Summary = dict[str, dict[str, int]]

#: Seeders selectable with ``--only``, in foreign-key order
SEEDERS: dict[str, Callable[..., Summary]] = {
    "catalog": seed_data.seed_catalog,
    "users": seed_data.seed_users,
}

STATUS_MODELS = (
    ("muscle_groups", MuscleGroup),
    ("exercise_templates", ExerciseTemplate),
    ("users", User),
    ("workouts", Workout),
)


def _set_verbosity(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    for name in (seed_data.__name__, __name__):
        logging.getLogger(name).setLevel(level)


def _print_counters(title: str, rows: Summary) -> None:
    click.echo(title)
    if not rows:
        click.echo("  (no changes)")
        return
    width = max(len(table) for table in rows)
    for table in sorted(rows):
        created = rows[table].get("created", 0)
        existing = rows[table].get("existing", 0)
        click.echo(f"  {table.ljust(width)}  created={created:>2}  existing={existing:>2}")


def _refuse_in_production(command: str) -> None:
    env = str(current_app.config.get("APP_ENV", "production")).strip().lower()
    if env == "production":
        raise click.UsageError(
            f"The 'flask seed {command}' command is restricted to non-production environments."
        )


def _seed(only: str | None, verbose: bool) -> Summary:
    """Run one named seeder, or all of them, converting store failures to CLI errors."""
    try:
        if only is None:
            return seed_data.run_all(db, verbose=verbose)
        return SEEDERS[only](db, verbose=verbose)
    except (SQLAlchemyError, ValueError) as exc:
        db.session.rollback()
        LOGGER.error("Seeding aborted", extra={"operation": only or "all"}, exc_info=True)
        raise click.ClickException(f"Seeding failed: {exc}") from exc


@click.group("seed")
@click.option("--verbose", is_flag=True, help="Log every seeding step.")
@click.pass_context
def seed_cli(ctx: click.Context, verbose: bool) -> None:
    """Load or inspect the seed data."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    _set_verbosity(verbose)


@seed_cli.command("run")
@click.option(
    "--only",
    type=click.Choice(sorted(SEEDERS)),
    default=None,
    help="Seed a single group instead of everything.",
)
@click.pass_context
@with_appcontext
def run_command(ctx: click.Context, only: str | None) -> None:
    """Insert missing catalog rows and the development user; safe to repeat."""
    summary = _seed(only, bool(ctx.obj.get("verbose", False)))
    _print_counters("Seed summary:", summary)


@seed_cli.command("fresh")
@click.option("--yes", is_flag=True, help="Do not ask before dropping tables.")
@click.pass_context
@with_appcontext
def fresh_command(ctx: click.Context, yes: bool) -> None:
    """Drop every table, create the schema again and seed it."""
    _refuse_in_production("fresh")
    if not yes:
        click.confirm("All workouts and catalog rows will be DROPPED. Continue?", abort=True)

    LOGGER.warning("Recreating schema", extra={"operation": "seed_fresh"})
    db.session.remove()
    db.drop_all()
    db.create_all()
    summary = _seed(None, bool(ctx.obj.get("verbose", False)))
    _print_counters("Seed summary:", summary)


@seed_cli.command("status")
@with_appcontext
def status_command() -> None:
    """Print the row count of every seeded table."""
    click.echo("Row counts:")
    width = max(len(table) for table, _ in STATUS_MODELS)
    for table, model in STATUS_MODELS:
        total = db.session.execute(select(func.count()).select_from(model)).scalar() or 0
        click.echo(f"  {table.ljust(width)}  {total:>4}")
