def test_metrics_count_requests_by_route_template(client, trix):
    client.get("/api/concerts")
    client.get(f"/api/locations/{trix.id}")

    response = client.get("/metrics")

    assert response.status_code == 200
    body = response.text
    assert "fastapi_requests_total" in body
    assert 'path="/api/concerts"' in body
    assert 'path="/api/locations/{location_id}"' in body
    assert "fastapi_requests_duration_seconds" in body


def test_unknown_paths_are_not_labelled(client):
    client.get("/no/such/page")

    assert 'path="/no/such/page"' not in client.get("/metrics").text
