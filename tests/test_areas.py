from decimal import Decimal

from tests.conftest import auth_header


def test_area_crud(client, admin, staff):
    headers = auth_header(admin)

    created = client.post("/api/areas", json={"name": "Block B", "address": "5 Tran Phu"}, headers=headers)
    assert created.status_code == 201
    area_id = created.json()["id"]

    updated = client.put(f"/api/areas/{area_id}", json={"description": "Riverside"}, headers=headers)
    assert updated.json()["description"] == "Riverside"
    assert updated.json()["name"] == "Block B"

    listed = client.get("/api/areas", headers=auth_header(staff)).json()
    assert [a["name"] for a in listed] == ["Block B"]

    assert client.delete(f"/api/areas/{area_id}", headers=headers).status_code == 204
    assert client.get("/api/areas", headers=headers).json() == []


def test_area_writes_are_admin_only(client, staff, tenant_user):
    assert client.post("/api/areas", json={"name": "X"}, headers=auth_header(staff)).status_code == 403
    assert client.get("/api/areas", headers=auth_header(tenant_user)).status_code == 403


def test_area_with_rooms_cannot_be_deleted(client, factory, admin):
    area = factory.area()
    factory.room("K1", area=area)

    response = client.delete(f"/api/areas/{area.id}", headers=auth_header(admin))

    assert response.status_code == 409
    assert response.json()["code"] == "CONFLICT"


def test_room_belongs_to_area(client, factory, admin):
    area = factory.area("Block C")
    headers = auth_header(admin)

    created = client.post(
        "/api/rooms",
        json={"code": "K2", "area_id": area.id, "area_size": "18.5"},
        headers=headers,
    )
    assert created.status_code == 201
    body = created.json()
    assert body["area"]["name"] == "Block C"
    assert Decimal(body["area_size"]) == Decimal("18.5")

    unknown = client.post("/api/rooms", json={"code": "K3", "area_id": 999}, headers=headers)
    assert unknown.status_code == 400
    assert unknown.json()["code"] == "INVALID_REFERENCE"
