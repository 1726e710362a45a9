def test_health_route(client):
    rv = client.get("/health")
    assert rv.status_code == 200
    data = rv.json()
    assert data["status"] == "ok"
    assert data["dataset"] == "local"
    assert data["dataset_available"] is True
