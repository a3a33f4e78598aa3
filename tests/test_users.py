from motel.models import Tenant
from motel.schemas.common.enums import UserRole

from tests.conftest import PASSWORD, auth_header


def _login(client, username, password=PASSWORD):
    return client.post("/api/auth/login", json={"username": username, "password": password})


def test_register_creates_active_tenant_account(client):
    body = {"username": "newbie", "password": "hunter22", "full_name": "New Tenant", "phone": "0909"}

    response = client.post("/api/auth/register", json=body)

    assert response.status_code == 201
    assert response.json()["role"] == "TENANT"
    assert response.json()["active"] is True
    assert _login(client, "newbie", "hunter22").status_code == 200


def test_register_rejects_privileged_roles_and_taken_names(client, admin):
    body = {"username": "boss", "password": "hunter22", "full_name": "Boss", "role": "ADMIN"}
    assert client.post("/api/auth/register", json=body).status_code == 403

    taken = {"username": "admin", "password": "hunter22", "full_name": "Copy"}
    assert client.post("/api/auth/register", json=taken).status_code == 409

    missing_name = {"username": "anon", "password": "hunter22"}
    assert client.post("/api/auth/register", json=missing_name).status_code == 422


def test_update_user_keeps_password_when_blank(client, factory, admin):
    user = factory.user("clerk", UserRole.STAFF)
    headers = auth_header(admin)

    response = client.put(
        f"/api/users/{user.id}",
        json={"full_name": "Head Clerk", "phone": "0911", "password": "  "},
        headers=headers,
    )
    assert response.status_code == 200
    assert response.json()["full_name"] == "Head Clerk"
    assert _login(client, "clerk").status_code == 200

    client.put(f"/api/users/{user.id}", json={"password": "changed1"}, headers=headers)
    assert _login(client, "clerk").status_code == 401
    assert _login(client, "clerk", "changed1").status_code == 200

    short = client.put(f"/api/users/{user.id}", json={"password": "abc"}, headers=headers)
    assert short.status_code == 422


def test_lock_and_unlock(client, factory, admin):
    user = factory.user("renter")
    headers = auth_header(admin)

    locked = client.put(f"/api/users/{user.id}/lock", headers=headers)
    assert locked.json()["active"] is False
    assert _login(client, "renter").status_code == 401
    assert client.get("/api/auth/me", headers=auth_header(user)).status_code == 401

    unlocked = client.put(f"/api/users/{user.id}/unlock", headers=headers)
    assert unlocked.json()["active"] is True
    assert _login(client, "renter").status_code == 200

    assert client.put("/api/users/999/lock", headers=headers).status_code == 404


def test_user_management_is_admin_only(client, factory, staff):
    user = factory.user("someone")
    headers = auth_header(staff)

    assert client.put(f"/api/users/{user.id}/lock", headers=headers).status_code == 403
    assert client.put(f"/api/users/{user.id}", json={"full_name": "X"}, headers=headers).status_code == 403


def test_link_and_unlink_tenant(client, db, factory, admin):
    user = factory.user("linked")
    first = factory.tenant(full_name="First")
    second = factory.tenant(full_name="Second")
    headers = auth_header(admin)

    response = client.put(f"/api/users/{user.id}/tenant", json={"tenant_id": first.id}, headers=headers)
    assert response.status_code == 200
    assert response.json()["tenant_id"] == first.id

    moved = client.put(f"/api/users/{user.id}/tenant", json={"tenant_id": second.id}, headers=headers)
    assert moved.json()["tenant_id"] == second.id
    db.expire_all()
    assert db.get(Tenant, first.id).user_id is None
    assert db.get(Tenant, second.id).user_id == user.id

    cleared = client.put(f"/api/users/{user.id}/tenant", json={"tenant_id": None}, headers=headers)
    assert cleared.json()["tenant_id"] is None
    db.expire_all()
    assert db.get(Tenant, second.id).user_id is None


def test_link_rejects_bad_targets(client, factory, admin, staff):
    owner = factory.user("owner")
    taken = factory.tenant(full_name="Taken", user=owner)
    user = factory.user("other")
    headers = auth_header(admin)

    assert client.put(f"/api/users/{user.id}/tenant", json={"tenant_id": taken.id}, headers=headers).status_code == 409
    assert client.put(f"/api/users/{user.id}/tenant", json={"tenant_id": 999}, headers=headers).status_code == 400
    assert client.put(f"/api/users/{staff.id}/tenant", json={"tenant_id": taken.id}, headers=headers).status_code == 400


def test_create_tenant_account_linked_to_existing_tenant(client, factory, admin):
    tenant = factory.tenant(full_name="Walk In")
    body = {"username": "walkin", "password": "secret99", "role": "TENANT", "tenant_id": tenant.id}

    response = client.post("/api/users", json=body, headers=auth_header(admin))

    assert response.status_code == 201
    assert response.json()["tenant_id"] == tenant.id
    assert client.get("/api/tenants/me", headers={
        "Authorization": f"Bearer {_login(client, 'walkin', 'secret99').json()['access_token']}"
    }).json()["full_name"] == "Walk In"
