import pytest
from typer.testing import CliRunner

from concert_catalog import cli
from concert_catalog.entities import Country, User
from tests.conftest import make_user

runner = CliRunner()


@pytest.fixture(autouse=True)
def cli_session(monkeypatch, session_factory):
    monkeypatch.setattr(cli, "SessionLocal", session_factory)


def test_update_role(db):
    user = make_user(db, name="Jane Doe", email="jane@example.com")

    result = runner.invoke(cli.app, ["update-role", "jane@example.com", "ADMIN"])

    assert result.exit_code == 0
    assert "Successfully updated Jane Doe's role to admin" in result.output
    db.expire_all()
    assert db.get(User, user.id).role == "admin"


def test_update_role_rejects_unknown_role(db):
    user = make_user(db, email="jane@example.com")

    result = runner.invoke(cli.app, ["update-role", "jane@example.com", "owner"])

    assert result.exit_code == 1
    db.expire_all()
    assert db.get(User, user.id).role == "user"


def test_update_role_rejects_unknown_email(db):
    result = runner.invoke(cli.app, ["update-role", "ghost@example.com", "admin"])

    assert result.exit_code == 1


def test_seed_countries(db):
    result = runner.invoke(cli.app, ["seed-countries"])

    assert result.exit_code == 0
    assert "Seeded 17 countries" in result.output
    assert db.query(Country).count() == 17
