"""Administrative commands for the concert catalog."""
import typer

from concert_catalog.entities.enums import UserRole
from concert_catalog.repositories.country_repository import country_repository
from concert_catalog.repositories.user_repository import user_repository
from concert_catalog.utils.database import SessionLocal, create_tables
from concert_catalog.utils.logging_config import configure_logging

app = typer.Typer(help="Concert catalog administration")


@app.callback()
def main():
    configure_logging(app_name="cli")


@app.command("update-role")
def update_role(
    email: str = typer.Argument(help="Email address of the user"),
    role: str = typer.Argument(help="New role: admin, superuser or user"),
):
    """Update a user's role (admin, superuser, user)."""
    role = role.lower()
    allowed = [member.value for member in UserRole]
    if role not in allowed:
        typer.echo(f"Invalid role. Must be one of: {', '.join(allowed)}", err=True)
        raise typer.Exit(code=1)

    db = SessionLocal()
    try:
        user = user_repository.get_by_email(db, email)
        if not user:
            typer.echo(f"User with email {email} not found", err=True)
            raise typer.Exit(code=1)

        user_repository.update_role(db, user, UserRole(role))
        typer.echo(f"Successfully updated {user.name}'s role to {role} ({UserRole(role).label})")
    finally:
        db.close()


@app.command("seed-countries")
def seed_countries():
    """Insert the default country list, skipping codes that already exist."""
    db = SessionLocal()
    try:
        created = country_repository.seed_defaults(db)
        typer.echo(f"Seeded {created} countries")
    finally:
        db.close()


@app.command("init-db")
def init_db():
    """Create all tables."""
    create_tables()
    typer.echo("Database tables created")


if __name__ == "__main__":
    app()
