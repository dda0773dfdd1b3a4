from fastapi.testclient import TestClient
from pytest_mock import MockerFixture

from hotel.application.errors import StorageUnavailable


def _book(client: TestClient, room: str, guest: str = "Alice"):
    return client.post(
        "/bookings",
        json={
            "room": room,
            "guestName": guest,
            "checkIn": "2024-01-01",
            "checkOut": "2024-01-03",
        },
    )


def _room(client: TestClient, room_id: str) -> dict:
    rooms = client.get("/rooms").json()
    return next(room for room in rooms if room["id"] == room_id)


def test_list_rooms(client: TestClient):
    response = client.get("/rooms")

    assert response.status_code == 200
    rooms = response.json()
    assert len(rooms) == 5
    assert rooms[0] == {
        "id": "101",
        "type": "Standard Room",
        "price": 120.0,
        "available": True,
        "imageUrl": rooms[0]["imageUrl"],
    }
    assert all(room["available"] for room in rooms)


def test_booking_lifecycle(client: TestClient):
    created = _book(client, "101")
    assert created.status_code == 200
    booking_id = created.json()["insertedId"]
    assert _room(client, "101")["available"] is False

    bookings = client.get("/bookings").json()
    assert bookings == [
        {
            "_id": booking_id,
            "room": "101",
            "guestName": "Alice",
            "checkIn": "2024-01-01",
            "checkOut": "2024-01-03",
        }
    ]

    conflict = _book(client, "101", "Bob")
    assert conflict.status_code == 409
    assert "already booked" in conflict.json()["message"]
    assert len(client.get("/bookings").json()) == 1

    cancelled = client.delete(f"/bookings/{booking_id}")
    assert cancelled.status_code == 200
    assert cancelled.json() == {"deletedCount": 1}
    assert _room(client, "101")["available"] is True
    assert client.get("/bookings").json() == []

    again = client.delete(f"/bookings/{booking_id}")
    assert again.status_code == 404
    assert "message" in again.json()


def test_cancel_unknown_and_malformed_ids(client: TestClient):
    missing = client.delete(f"/bookings/{'0' * 24}")
    assert missing.status_code == 404

    malformed = client.delete("/bookings/nonexistent-id")
    assert malformed.status_code == 404
    assert "not found" in malformed.json()["message"]

    assert all(room["available"] for room in client.get("/rooms").json())


def test_booking_unknown_room_is_accepted(client: TestClient):
    response = _book(client, "999", "Carol")

    assert response.status_code == 200
    assert "999" not in [room["id"] for room in client.get("/rooms").json()]
    assert [b["room"] for b in client.get("/bookings").json()] == ["999"]


def test_malformed_booking_body_is_rejected(client: TestClient):
    response = client.post("/bookings", json={"room": "101"})

    assert response.status_code == 422
    assert _room(client, "101")["available"] is True


def test_storage_failure_maps_to_500(client: TestClient, mocker: MockerFixture):
    store = client.app.state.booking_store
    booking_id = _book(client, "301").json()["insertedId"]
    mocker.patch.object(
        store, "delete_booking", side_effect=StorageUnavailable("delete_booking timed out")
    )

    cancelled = client.delete(f"/bookings/{booking_id}")
    assert cancelled.status_code == 500
    assert cancelled.json() == {"message": "delete_booking timed out"}
    assert _room(client, "301")["available"] is False

    mocker.patch.object(
        store, "list_bookings", side_effect=StorageUnavailable("list_bookings timed out")
    )
    mocker.patch.object(
        store, "insert_booking", side_effect=StorageUnavailable("insert_booking failed")
    )

    listed = client.get("/bookings")
    assert listed.status_code == 500
    assert listed.json() == {"message": "list_bookings timed out"}

    created = _book(client, "102")
    assert created.status_code == 500
    assert _room(client, "102")["available"] is True


def test_health(client: TestClient):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_cors_preflight(client: TestClient):
    response = client.options(
        "/bookings",
        headers={
            "Origin": "http://localhost:5500",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )

    assert response.status_code == 200
    assert "POST" in response.headers["access-control-allow-methods"]
