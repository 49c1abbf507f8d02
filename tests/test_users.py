from shop.data.models import UserModel


def test_register_and_login(client):
    resp = client.post(
        "/users/register",
        json={"username": "eve", "email": "Eve@Example.com", "password": "pw123", "name": "Eve"},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["email"] == "eve@example.com"
    assert body["role"] == "user"
    assert "password" not in body

    resp = client.post("/users/login", json={"email": "eve@example.com", "password": "pw123"})
    assert resp.status_code == 200
    assert resp.json()["id"] == body["id"]


def test_register_twice_is_rejected(client, user):
    resp = client.post("/users/register", json={"username": "ada", "email": "ada@example.com", "password": "x"})
    assert resp.status_code == 400
    assert resp.json() == {"detail": "User already exists"}


def test_register_requires_all_fields(client):
    resp = client.post("/users/register", json={"email": "a@example.com", "password": "x"})
    assert resp.status_code == 422


def test_login_with_wrong_password(client, user):
    resp = client.post("/users/login", json={"email": "ada@example.com", "password": "nope"})
    assert resp.status_code == 401
    assert resp.json() == {"detail": "Invalid email or password"}


def test_login_unknown_or_passwordless_user(client, db):
    db.add(UserModel(id="oauth", email="g@example.com", password=None))
    db.commit()
    for email in ("g@example.com", "missing@example.com"):
        resp = client.post("/users/login", json={"email": email, "password": "x"})
        assert resp.status_code == 401


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_register_with_overlong_password(client):
    resp = client.post("/users/register", json={"username": "max", "email": "max@example.com", "password": "x" * 73})
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Password must be at most 72 bytes"}


def test_login_after_gateway_create_with_mixed_case_email(client):
    created = client.post("/api/dbhandler", params={"model": "user"}, data={"email": "Mixed@Example.com", "password": "pw"})
    assert created.json()["email"] == "mixed@example.com"

    for email in ("mixed@example.com", "MIXED@example.com"):
        resp = client.post("/users/login", json={"email": email, "password": "pw"})
        assert resp.status_code == 200
        assert resp.json()["id"] == created.json()["id"]
