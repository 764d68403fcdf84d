def test_create_room_defaults_occupied_beds(client, property_id):
    response = client.post(
        "/Room",
        json={"BedCount": 2, "RentAmount": 4500.5, "RoomType": "Double", "PropertyID": property_id},
    )

    assert response.status_code == 201
    room_id = response.json()["RoomID"]
    rooms = client.get("/Room").json()
    assert rooms == [
        {
            "RoomID": room_id,
            "BedCount": 2,
            "OccupiedBeds": 0,
            "RentAmount": 4500.5,
            "RoomType": "Double",
            "PropertyID": property_id,
        }
    ]


def test_create_room_for_unknown_property(client):
    response = client.post(
        "/Room",
        json={"BedCount": 2, "RentAmount": 4500, "RoomType": "Double", "PropertyID": 77},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid PropertyID provided"


def test_rooms_by_property_only_lists_that_property(client, owner, property_id):
    other = client.post(
        "/Property",
        json={"name": "Hilltop", "location": "Ooty", "TotalRooms": 2, "OwnerID": 2},
    ).json()["PropertyID"]
    client.post("/Room", json={"BedCount": 1, "RentAmount": 1, "RoomType": "A", "PropertyID": property_id})
    client.post("/Room", json={"BedCount": 1, "RentAmount": 1, "RoomType": "B", "PropertyID": other})

    rooms = client.get(f"/Room/property/{other}").json()

    assert [r["RoomType"] for r in rooms] == ["B"]


def test_update_room(client, room_id, property_id):
    response = client.put(
        f"/Room/{room_id}",
        json={"BedCount": 4, "OccupiedBeds": 1, "RentAmount": 200, "RoomType": "Dorm", "PropertyID": property_id},
    )

    assert response.status_code == 200
    room = client.get(f"/Room/property/{property_id}").json()[0]
    assert room["OccupiedBeds"] == 1
    assert room["RoomType"] == "Dorm"


def test_update_and_delete_unknown_room(client, property_id):
    payload = {"BedCount": 4, "RentAmount": 200, "RoomType": "Dorm", "PropertyID": property_id}

    assert client.put("/Room/999", json=payload).status_code == 404
    assert client.delete("/Room/999").status_code == 404


def test_delete_room(client, room_id):
    assert client.delete(f"/Room/{room_id}").status_code == 200
    assert client.get("/Room").json() == []
