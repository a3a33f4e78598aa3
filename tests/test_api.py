from datetime import date
from decimal import Decimal

from motel.models import Invoice, SystemLog
from motel.schemas.common.enums import InvoiceStatus, RoomStatus

from tests.conftest import PASSWORD, auth_header


def test_login_and_me(client, admin):
    response = client.post("/api/auth/login", json={"username": "admin", "password": PASSWORD})
    assert response.status_code == 200
    token = response.json()["access_token"]

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["role"] == "ADMIN"


def test_login_with_wrong_password(client, admin):
    response = client.post("/api/auth/login", json={"username": "admin", "password": "nope-nope"})
    assert response.status_code == 401


def test_requests_without_token_are_unauthorized(client):
    assert client.get("/api/rooms").status_code == 401


def test_inactive_user_is_unauthorized(client, factory):
    ghost = factory.user("ghost", active=False)
    assert client.get("/api/auth/me", headers=auth_header(ghost)).status_code == 401


def test_role_gating_for_rooms(client, admin, staff, tenant_user):
    payload = {"code": "G1", "current_price": "1200000"}

    assert client.get("/api/rooms", headers=auth_header(tenant_user)).status_code == 403
    assert client.post("/api/rooms", json=payload, headers=auth_header(staff)).status_code == 403

    created = client.post("/api/rooms", json=payload, headers=auth_header(admin))
    assert created.status_code == 201
    assert client.get("/api/rooms", headers=auth_header(staff)).json()[0]["code"] == "G1"


def test_room_detail(client, factory, staff):
    room = factory.room("G3", price="900000")
    headers = auth_header(staff)

    response = client.get(f"/api/rooms/{room.id}", headers=headers)
    assert response.status_code == 200
    assert response.json()["code"] == "G3"
    assert client.get("/api/rooms/9999", headers=headers).status_code == 404


def test_tenant_detail_is_limited_to_own_record(client, factory, staff, tenant_user):
    own = factory.tenant(full_name="Own", user=tenant_user)
    other = factory.tenant(full_name="Other")
    headers = auth_header(tenant_user)

    assert client.get(f"/api/tenants/{own.id}", headers=headers).json()["full_name"] == "Own"
    assert client.get(f"/api/tenants/{other.id}", headers=headers).status_code == 403
    assert client.get(f"/api/tenants/{other.id}", headers=auth_header(staff)).status_code == 200


def test_duplicate_room_code_conflicts(client, admin, factory):
    factory.room("G2")
    response = client.post("/api/rooms", json={"code": "G2"}, headers=auth_header(admin))
    assert response.status_code == 409
    assert response.json()["code"] == "CONFLICT"


def test_successful_mutation_is_audited(client, db, admin):
    client.post("/api/rooms", json={"code": "L1"}, headers=auth_header(admin))

    log = db.query(SystemLog).one()
    assert log.actor_id == admin.id
    assert log.action == "POST"
    assert log.entity_type == "API"
    assert log.entity_id is None
    assert log.detail == "Request to /api/rooms"


def test_rejected_and_read_requests_are_not_audited(client, db, admin, staff):
    client.get("/api/rooms", headers=auth_header(admin))
    client.post("/api/rooms", json={"code": "L2"}, headers=auth_header(staff))

    assert db.query(SystemLog).count() == 0


def test_tenant_sees_only_own_records(client, factory, tenant_user):
    own = factory.tenant(full_name="Own", user=tenant_user)
    other = factory.tenant(full_name="Other")
    own_invoice = factory.invoice(factory.room("M1"), own)
    other_invoice = factory.invoice(factory.room("M2"), other)
    headers = auth_header(tenant_user)

    tenants = client.get("/api/tenants", headers=headers).json()
    assert [t["id"] for t in tenants] == [own.id]

    invoices = client.get("/api/invoices/me", headers=headers).json()
    assert [i["id"] for i in invoices] == [own_invoice.id]

    assert client.get(f"/api/payments/invoice/{own_invoice.id}", headers=headers).status_code == 200
    assert client.get(f"/api/payments/invoice/{other_invoice.id}", headers=headers).status_code == 403
    assert client.get("/api/invoices", headers=headers).status_code == 403


def test_meter_reading_endpoint_upserts_invoice(client, db, factory, staff):
    factory.price(date(2024, 1, 1))
    room = factory.room("N1")
    factory.contract(room, factory.tenant())
    body = {"room_id": room.id, "month": 3, "year": 2024, "old_electric": 100, "new_electric": 150}

    response = client.post("/api/meter-readings", json=body, headers=auth_header(staff))

    assert response.status_code == 201
    assert Decimal(response.json()["electricity_cost"]) == Decimal("150000")
    invoice = db.query(Invoice).filter_by(room_id=room.id).one()
    assert invoice.total == Decimal("1150000")


def test_generate_endpoint_reports_counts(client, factory, staff):
    factory.contract(factory.room("N2"), factory.tenant())

    first = client.post("/api/invoices/generate", headers=auth_header(staff)).json()
    second = client.post("/api/invoices/generate", headers=auth_header(staff)).json()

    assert first["total_created"] == 2
    assert second["total_created"] == 0


def test_payment_endpoint_settles_invoice(client, db, factory, staff):
    invoice = factory.invoice(factory.room("N3"), factory.tenant(), total="1500000")
    headers = auth_header(staff)

    client.post("/api/payments", json={"invoice_id": invoice.id, "amount": "500000"}, headers=headers)
    client.post("/api/payments", json={"invoice_id": invoice.id, "amount": "1000000"}, headers=headers)

    db.refresh(invoice)
    assert invoice.status == InvoiceStatus.PAID
    assert client.post("/api/payments", json={"invoice_id": invoice.id, "amount": "0"}, headers=headers).status_code == 422


def test_status_override_requires_valid_value(client, factory, staff):
    invoice = factory.invoice(factory.room("N4"), None)
    headers = auth_header(staff)

    assert client.put(f"/api/invoices/{invoice.id}/status?status=BOGUS", headers=headers).status_code == 422
    response = client.put(f"/api/invoices/{invoice.id}/status?status=PAID", headers=headers)
    assert response.json()["status"] == "PAID"
    assert client.put("/api/invoices/999/status?status=PAID", headers=headers).status_code == 404


def test_remind_endpoint(client, factory, staff, mailer):
    invoice = factory.invoice(factory.room("N5"), factory.tenant(email="t@example.com"))
    headers = auth_header(staff)

    ok = client.post(f"/api/invoices/{invoice.id}/remind", json={"channel": "email"}, headers=headers)
    assert ok.status_code == 200
    assert ok.json() == {"message": "Email reminder sent.", "channel": "email"}
    assert len(mailer.sent) == 1

    bad = client.post(f"/api/invoices/{invoice.id}/remind", json={"channel": "pigeon"}, headers=headers)
    assert bad.status_code == 400
    assert bad.json()["message"] == "Invalid channel. Choose email or sms."


def test_remind_endpoint_rejects_missing_or_non_text_channel(client, factory, staff, mailer):
    headers = auth_header(staff)
    url = "/api/invoices/12345/remind"

    for body in ({}, {"channel": None}, {"channel": 5}):
        response = client.post(url, json=body, headers=headers)
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid channel. Choose email or sms."

    assert client.post(url, headers=headers).status_code == 400
    assert mailer.sent == []


def test_contract_lifecycle_over_http(client, factory, admin, staff):
    room = factory.room("Q1")
    tenant = factory.tenant()
    body = {"room_id": room.id, "tenant_id": tenant.id, "start_date": "2024-01-01"}

    assert client.post("/api/contracts", json=body, headers=auth_header(staff)).status_code == 403
    created = client.post("/api/contracts", json=body, headers=auth_header(admin))
    assert created.status_code == 201
    assert created.json()["room"]["code"] == "Q1"
    assert client.post("/api/contracts", json=body, headers=auth_header(admin)).status_code == 409

    ended = client.put(f"/api/contracts/{created.json()['id']}/end", headers=auth_header(admin))
    assert ended.json()["status"] == "ENDED"


def test_reports(client, factory, staff):
    occupied = factory.room("S1", status=RoomStatus.OCCUPIED)
    factory.room("S2")
    factory.invoice(occupied, None, month=6, year=2024, total="2000000", status=InvoiceStatus.PAID)
    factory.invoice(occupied, None, month=7, year=2024, total="1500000")
    headers = auth_header(staff)

    revenue = client.get("/api/reports/revenue?month=6&year=2024", headers=headers).json()
    assert Decimal(revenue["revenue"]) == Decimal("2000000")

    debt = client.get("/api/reports/debt", headers=headers).json()
    assert Decimal(debt["total_debt"]) == Decimal("1500000")
    assert debt["count"] == 1

    occupancy = client.get("/api/reports/occupancy", headers=headers).json()
    assert occupancy["total_rooms"] == 2
    assert occupancy["occupancy_rate_percent"] == 50.0

    vacant = client.get("/api/reports/vacant", headers=headers).json()
    assert vacant["vacant_rooms"] == 1


def test_support_request_flow(client, staff, tenant_user):
    created = client.post(
        "/api/support-requests",
        json={"title": "Leaking tap"},
        headers=auth_header(tenant_user),
    )
    assert created.status_code == 201
    request_id = created.json()["id"]

    updated = client.put(
        f"/api/support-requests/{request_id}",
        json={"status": "RESOLVED"},
        headers=auth_header(staff),
    )
    assert updated.json()["status"] == "RESOLVED"

    mine = client.get("/api/support-requests", headers=auth_header(tenant_user)).json()
    assert [r["id"] for r in mine] == [request_id]


def test_notifications_are_private(client, admin, tenant_user, staff):
    client.post(
        "/api/notifications",
        json={"user_id": tenant_user.id, "message": "Water off tomorrow"},
        headers=auth_header(admin),
    )

    mine = client.get("/api/notifications", headers=auth_header(tenant_user)).json()
    assert len(mine) == 1
    assert client.get("/api/notifications", headers=auth_header(staff)).json() == []

    other = client.put(f"/api/notifications/{mine[0]['id']}/read", headers=auth_header(staff))
    assert other.status_code == 404
    read = client.put(f"/api/notifications/{mine[0]['id']}/read", headers=auth_header(tenant_user))
    assert read.json()["read_flag"] is True
