from datetime import date

import pytest


@pytest.fixture
def staff(client):
    payload = {"StaffID": 7, "name": "Ravi", "role": "Plumber", "contact": "9000000007"}
    assert client.post("/Staff", json=payload).status_code == 201
    return payload


def raise_request(client, tenant_id, **overrides):
    payload = {
        "Category": "Plumbing",
        "Description": "Kitchen tap leaking",
        "TenantID": tenant_id,
        "DateRaised": "2024-02-01",
    }
    payload.update(overrides)
    return client.post("/ServiceRequest", json=payload)


def test_create_request_starts_pending(client, tenant_id):
    response = raise_request(client, tenant_id)

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Service request added successfully"

    requests = client.get("/ServiceRequest").json()
    assert len(requests) == 1
    assert requests[0]["RequestID"] == body["RequestID"]
    assert requests[0]["Status"] == "Pending"
    assert requests[0]["DateResolved"] is None


def test_create_request_validation(client, tenant_id):
    response = raise_request(client, tenant_id, Description="")

    assert response.status_code == 400
    assert response.json()["error"] == "Missing required fields"


def test_create_request_for_unknown_tenant(client, tenant_id):
    response = raise_request(client, tenant_id + 100)

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid TenantID provided"


def test_list_is_enriched_and_newest_first(client, tenant_id, staff):
    first = raise_request(client, tenant_id, DateRaised="2024-01-10").json()["RequestID"]
    second = raise_request(client, tenant_id, Category="Electrical", DateRaised="2024-03-05").json()["RequestID"]
    client.put(f"/ServiceRequest/{first}", json={"StaffID": staff["StaffID"]})

    requests = client.get("/ServiceRequest").json()

    assert [r["RequestID"] for r in requests] == [second, first]
    assigned = requests[1]
    assert assigned["TenantName"] == "Asha  Rao"
    assert assigned["RoomID"] == 5
    assert assigned["OwnerID"] == 2
    assert assigned["StaffName"] == "Ravi"
    assert assigned["StaffContact"] == "9000000007"
    assert assigned["StaffRole"] == "Plumber"
    assert requests[0]["StaffName"] is None


def test_list_filters(client, tenant_id, tenant_payload):
    other = client.post(
        "/Tenant", json=tenant_payload(firstName="Bina", phones=["2"], emails=["b@x"])
    ).json()["tenant"]["TenantID"]
    raise_request(client, tenant_id)
    raise_request(client, other)

    by_tenant = client.get("/ServiceRequest", params={"tenantId": other}).json()
    by_owner = client.get("/ServiceRequest", params={"ownerId": 2}).json()
    other_owner = client.get("/ServiceRequest", params={"ownerId": 3}).json()

    assert [r["TenantID"] for r in by_tenant] == [other]
    assert len(by_owner) == 2
    assert other_owner == []


def test_completing_request_sets_resolution_date(client, tenant_id):
    request_id = raise_request(client, tenant_id).json()["RequestID"]

    response = client.put(f"/ServiceRequest/{request_id}", json={"Status": "Completed"})

    assert response.status_code == 200
    request = client.get("/ServiceRequest").json()[0]
    assert request["Status"] == "Completed"
    assert request["DateResolved"] == date.today().isoformat()


def test_update_without_fields(client, tenant_id):
    request_id = raise_request(client, tenant_id).json()["RequestID"]

    response = client.put(f"/ServiceRequest/{request_id}", json={})

    assert response.status_code == 400
    assert response.json()["error"] == "No fields to update"


def test_explicit_null_staff_unassigns(client, tenant_id, staff):
    request_id = raise_request(client, tenant_id).json()["RequestID"]
    client.put(f"/ServiceRequest/{request_id}", json={"StaffID": staff["StaffID"]})

    response = client.put(f"/ServiceRequest/{request_id}", json={"StaffID": None})

    assert response.status_code == 200
    assert client.get("/ServiceRequest").json()[0]["StaffID"] is None


def test_update_with_unknown_staff(client, tenant_id):
    request_id = raise_request(client, tenant_id).json()["RequestID"]

    response = client.put(f"/ServiceRequest/{request_id}", json={"StaffID": 999})

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid StaffID provided"


def test_update_unknown_request(client):
    response = client.put("/ServiceRequest/77", json={"Status": "In Progress"})

    assert response.status_code == 404


def test_resolve_request(client, tenant_id, staff):
    request_id = raise_request(client, tenant_id).json()["RequestID"]

    response = client.patch(
        f"/ServiceRequest/{request_id}/resolve",
        json={"DateResolved": "2024-02-03", "StaffID": staff["StaffID"]},
    )

    assert response.status_code == 200
    request = client.get("/ServiceRequest").json()[0]
    assert request["Status"] == "Completed"
    assert request["DateResolved"] == "2024-02-03"
    assert request["StaffID"] == staff["StaffID"]


def test_resolve_requires_date(client, tenant_id):
    request_id = raise_request(client, tenant_id).json()["RequestID"]

    response = client.patch(f"/ServiceRequest/{request_id}/resolve", json={"StaffID": None})

    assert response.status_code == 400
    assert response.json()["error"] == "Resolution date is required"
    assert client.get("/ServiceRequest").json()[0]["Status"] == "Pending"
