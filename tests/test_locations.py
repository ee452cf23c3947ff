from concert_catalog.entities import Location
from tests.conftest import make_location


def location_payload(country, **overrides):
    payload = {
        "name": "Hall",
        "longitude": 4.4,
        "latitude": 51.2,
        "street": "X",
        "housenr": "1",
        "zipcode": "2000",
        "city": "Antwerp",
        "country_id": country.id,
    }
    payload.update(overrides)
    return payload


def test_create_location_defaults_status_and_source(client, db, belgium):
    response = client.post("/api/locations", json=location_payload(belgium))

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "pending_approval"
    assert body["source"] == "manual"
    assert body["country"] == {"id": belgium.id, "name": "Belgium", "code": "BE"}
    assert "country_id" not in body
    assert "created_at" not in body

    stored = db.get(Location, body["id"])
    assert stored.status == "pending_approval"
    assert stored.source == "manual"


def test_create_location_keeps_explicit_status(client, belgium):
    response = client.post("/api/locations", json=location_payload(belgium, status="verified", source="api"))

    assert response.status_code == 201
    assert response.json()["status"] == "verified"
    assert response.json()["source"] == "api"


def test_create_location_validation(client, belgium):
    payload = location_payload(
        belgium, longitude=200, latitude=-95, housenr="12345678901", website="not a url",
    )
    del payload["city"]

    response = client.post("/api/locations", json=payload)

    assert response.status_code == 422
    errors = response.json()["errors"]
    assert set(errors) == {"longitude", "latitude", "housenr", "website", "city"}
    assert errors["city"] == ["The city field is required."]
    assert errors["website"] == ["The website field must be a valid URL."]


def test_create_location_unknown_country(client, db):
    response = client.post("/api/locations", json={
        "name": "Nowhere", "longitude": 0, "latitude": 0, "street": "A",
        "housenr": "1", "zipcode": "1", "city": "B", "country_id": 77,
    })

    assert response.status_code == 422
    assert response.json()["errors"] == {"country_id": ["The selected country id is invalid."]}
    assert db.query(Location).count() == 0


def test_show_location(client, trix):
    response = client.get(f"/api/locations/{trix.id}")

    assert response.status_code == 200
    assert response.json()["name"] == "Trix"
    assert response.json()["country"]["code"] == "BE"


def test_show_missing_location(client):
    response = client.get("/api/locations/99")

    assert response.status_code == 404
    assert response.json() == {"message": "Location not found"}


def test_update_location_partially(client, trix, netherlands):
    response = client.put(
        f"/api/locations/{trix.id}",
        json={"city": "Borgerhout", "country_id": netherlands.id, "website": "https://trix.be"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["city"] == "Borgerhout"
    assert body["website"] == "https://trix.be"
    assert body["country"]["code"] == "NL"
    assert body["name"] == "Trix"
    assert body["street"] == "Noorderlaan"
    assert body["status"] == "verified"


def test_update_location_validation(client, trix):
    response = client.put(f"/api/locations/{trix.id}", json={"latitude": 91, "country_id": 1234})

    assert response.status_code == 422
    assert set(response.json()["errors"]) == {"latitude", "country_id"}


def test_update_location_unknown_country(client, trix):
    response = client.put(f"/api/locations/{trix.id}", json={"country_id": 1234})

    assert response.status_code == 422
    assert response.json()["errors"] == {"country_id": ["The selected country id is invalid."]}


def test_delete_location(client, trix):
    location_id = trix.id

    response = client.delete(f"/api/locations/{location_id}")

    assert response.status_code == 204
    assert client.get(f"/api/locations/{location_id}").status_code == 404
    assert client.delete(f"/api/locations/{location_id}").status_code == 404


def test_search_matches_name_city_or_country(client, db, belgium, netherlands):
    make_location(db, belgium, name="Ancienne Belgique", city="Brussels")
    make_location(db, netherlands, name="Melkweg", city="Amsterdam")
    make_location(db, netherlands, name="Tivoli", city="Utrecht")

    def search(term):
        return [location["name"] for location in client.get("/api/locations", params={"search": term}).json()["data"]]

    assert search("melk") == ["Melkweg"]
    assert search("utrecht") == ["Tivoli"]
    assert search("nether") == ["Melkweg", "Tivoli"]
    assert search("belg") == ["Ancienne Belgique"]
    assert search("zzz") == []


def test_list_filters_and_sort(client, db, belgium, netherlands):
    make_location(db, belgium, name="Vooruit", city="Ghent", status="pending_approval")
    make_location(db, belgium, name="Botanique", city="Brussels")
    make_location(db, netherlands, name="Paradiso", city="Amsterdam")

    def listed(**params):
        return [location["name"] for location in client.get("/api/locations", params=params).json()["data"]]

    assert listed() == ["Botanique", "Paradiso", "Vooruit"]
    assert listed(country_id=belgium.id) == ["Botanique", "Vooruit"]
    assert listed(status="pending_approval") == ["Vooruit"]
    assert listed(country="nether") == ["Paradiso"]
    assert listed(sort="city:desc") == ["Vooruit", "Botanique", "Paradiso"]
    assert listed(sort="longitude:desc") == ["Botanique", "Paradiso", "Vooruit"]


def test_percent_in_search_is_literal(client, db, belgium):
    make_location(db, belgium, name="100% Live")
    make_location(db, belgium, name="1000 Seats")

    response = client.get("/api/locations", params={"name": "100%"})

    assert [location["name"] for location in response.json()["data"]] == ["100% Live"]


def test_create_location_reports_field_and_country_errors_together(client, db):
    response = client.post("/api/locations", json={
        "name": "Far Away", "longitude": 181, "latitude": 0, "street": "A",
        "housenr": "1", "zipcode": "1", "city": "B", "country_id": 77,
    })

    assert response.status_code == 422
    errors = response.json()["errors"]
    assert set(errors) == {"longitude", "country_id"}
    assert errors["country_id"] == ["The selected country id is invalid."]
    assert db.query(Location).count() == 0
