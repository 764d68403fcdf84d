from config import APP_NAME


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["name"] == APP_NAME


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_test_db_lists_tables(client):
    response = client.get("/test-db")

    assert response.status_code == 200
    tables = response.json()
    for table in ("Owner", "Property", "Room", "Tenant", "Tenant_Name", "Payment"):
        assert table in tables


def test_malformed_body_is_bad_request(client):
    response = client.post("/Owner", json={"OwnerID": "not-a-number"})

    assert response.status_code == 400
    assert response.json()["status"] == "failure"
