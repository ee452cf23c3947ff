import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from concert_catalog.app import app
from concert_catalog.entities import Country, Location, User
from concert_catalog.utils.database import Base, get_db


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def belgium(db):
    country = Country(name="Belgium", code="BE")
    db.add(country)
    db.commit()
    db.refresh(country)
    return country


@pytest.fixture
def netherlands(db):
    country = Country(name="Netherlands", code="NL")
    db.add(country)
    db.commit()
    db.refresh(country)
    return country


def make_location(db, country, **overrides):
    data = dict(
        name="Trix",
        source="manual",
        status="verified",
        longitude=4.44,
        latitude=51.22,
        street="Noorderlaan",
        housenr="1",
        zipcode="2030",
        city="Antwerp",
        country_id=country.id if country else None,
    )
    data.update(overrides)
    location = Location(**data)
    db.add(location)
    db.commit()
    db.refresh(location)
    return location


@pytest.fixture
def trix(db, belgium):
    return make_location(db, belgium)


@pytest.fixture
def paradiso(db, netherlands):
    return make_location(
        db, netherlands, name="Paradiso", city="Amsterdam", street="Weteringschans",
        housenr="6", zipcode="1017 SG", longitude=4.88, latitude=52.36,
    )


def make_user(db, **overrides):
    data = dict(role="user", username="jdoe", name="John Doe", email="john@example.com")
    data.update(overrides)
    user = User(**data)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
