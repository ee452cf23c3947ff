from tests.conftest import make_user


def names(response):
    return [user["name"] for user in response.json()["data"]]


def test_list_users_sorted_by_name(client, db):
    make_user(db, username="zed", name="Zed", email="zed@example.com")
    make_user(db, username="amy", name="Amy", email="amy@example.com", role="admin")

    response = client.get("/api/users")

    assert response.status_code == 200
    assert names(response) == ["Amy", "Zed"]
    first = response.json()["data"][0]
    assert first["role"] == "admin"
    assert first["is_active"] is True
    assert "created_at" in first


def test_list_users_filters_and_sort(client, db):
    make_user(db, username="amy", name="Amy Adams", email="amy@films.org")
    make_user(db, username="bob", name="Bob Dylan", email="bob@music.org", role="superuser")
    make_user(db, username="bea", name="Bea Miller", email="bea@music.org")

    assert names(client.get("/api/users", params={"name": "dylan"})) == ["Bob Dylan"]
    assert names(client.get("/api/users", params={"email": "music"})) == ["Bea Miller", "Bob Dylan"]
    assert names(client.get("/api/users", params={"role": "superuser"})) == ["Bob Dylan"]
    assert names(client.get("/api/users", params={"sort": "email:desc"})) == ["Bob Dylan", "Bea Miller", "Amy Adams"]
    assert names(client.get("/api/users", params={"sort": "password:asc"})) == ["Amy Adams", "Bea Miller", "Bob Dylan"]


def test_show_user(client, db):
    user = make_user(db)

    response = client.get(f"/api/users/{user.id}")

    assert response.status_code == 200
    assert response.json()["email"] == "john@example.com"


def test_show_missing_user(client):
    response = client.get("/api/users/5")

    assert response.status_code == 404
    assert response.json() == {"message": "User not found"}


def test_users_are_read_only(client, db):
    user = make_user(db)

    assert client.post("/api/users", json={"name": "New"}).status_code == 405
    assert client.delete(f"/api/users/{user.id}").status_code == 405
