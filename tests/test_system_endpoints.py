def test_health_returns_ok(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_hello_greets_by_name(client):
    for name in ["Jan", "Anna"]:
        response = client.get(f"/hello/{name}")
        assert response.status_code == 200
        assert response.text == f"Hello, {name}!"
