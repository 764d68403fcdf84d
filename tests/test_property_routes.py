from database.models import Property, Room


def test_create_property(client, owner):
    response = client.post(
        "/Property",
        json={"name": "Sunrise", "location": "Pune", "TotalRooms": 4, "OwnerID": 2},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Property added successfully"
    assert client.get("/Property").json() == [
        {"PropertyID": body["PropertyID"], "name": "Sunrise", "location": "Pune", "TotalRooms": 4, "OwnerID": 2}
    ]


def test_create_property_with_unknown_owner(client):
    response = client.post(
        "/Property",
        json={"name": "Sunrise", "location": "Pune", "TotalRooms": 4, "OwnerID": 404},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid OwnerID provided"


def test_create_property_missing_fields(client, owner):
    response = client.post("/Property", json={"name": "Sunrise", "OwnerID": 2})

    assert response.status_code == 400
    assert response.json()["error"] == "Missing required fields"


def test_update_property(client, property_id):
    response = client.put(
        f"/Property/{property_id}",
        json={"name": "Lakeview", "location": "Mumbai", "TotalRooms": 12, "OwnerID": 2},
    )

    assert response.status_code == 200
    assert client.get("/Property").json()[0]["location"] == "Mumbai"


def test_update_unknown_property(client, owner):
    response = client.put(
        "/Property/99",
        json={"name": "Lakeview", "location": "Mumbai", "TotalRooms": 12, "OwnerID": 2},
    )

    assert response.status_code == 404


def test_delete_property_removes_its_rooms(client, db, property_id):
    for bed_count in (1, 2):
        client.post(
            "/Room",
            json={"BedCount": bed_count, "RentAmount": 5000, "RoomType": "Single", "PropertyID": property_id},
        )
    assert len(client.get(f"/Room/property/{property_id}").json()) == 2

    response = client.delete(f"/Property/{property_id}")

    assert response.status_code == 200
    body = response.json()
    assert body["deletedId"] == property_id
    assert body["roomsDeleted"] == 2
    assert body["propertyDeleted"] == 1
    assert client.get(f"/Room/property/{property_id}").json() == []
    assert db.query(Property).count() == 0
    assert db.query(Room).count() == 0


def test_delete_unknown_property(client):
    response = client.delete("/Property/42")

    assert response.status_code == 404
    assert response.json()["error"] == "Property not found"


def test_failed_room_delete_keeps_property(client, db, property_id, room_id, fail_bulk_delete):
    fail_bulk_delete(Room)

    response = client.delete(f"/Property/{property_id}")

    assert response.status_code == 500
    assert response.json()["error"] == "Failed to delete property"
    assert db.query(Property).count() == 1
    assert db.query(Room).count() == 1
