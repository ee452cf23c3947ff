from concert_catalog.entities import Country
from concert_catalog.repositories.country_repository import DEFAULT_COUNTRIES, country_repository


def test_list_countries(client, belgium, netherlands):
    response = client.get("/api/countries")

    assert response.status_code == 200
    assert response.json()["data"] == [
        {"id": belgium.id, "name": "Belgium", "code": "BE"},
        {"id": netherlands.id, "name": "Netherlands", "code": "NL"},
    ]


def test_seed_defaults_skips_existing_codes(db, belgium):
    created = country_repository.seed_defaults(db)

    assert created == len(DEFAULT_COUNTRIES) - 1
    assert db.query(Country).count() == len(DEFAULT_COUNTRIES)
    assert country_repository.seed_defaults(db) == 0
    assert country_repository.get_by_code(db, "AT").name == "Austria"
