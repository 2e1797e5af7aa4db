from storefront.models import db


def test_login_sets_session_and_me_returns_user(client, admin_user):
    res = client.post("/api/v1/auth/login", json={"username": "admin", "password": "pass1234"})

    assert res.status_code == 200
    assert res.get_json()["user"]["isAdmin"] is True

    me = client.get("/api/v1/auth/me").get_json()
    assert me["user"]["username"] == "admin"
    assert me["user"]["role"] == "Super Admin"


def test_login_accepts_email(client, customer_user):
    res = client.post("/api/v1/auth/login", json={"username": "customer@example.com", "password": "pass1234"})

    assert res.status_code == 200
    assert res.get_json()["user"]["isAdmin"] is False


def test_login_rejects_bad_credentials(client, admin_user):
    wrong = client.post("/api/v1/auth/login", json={"username": "admin", "password": "nope"})
    empty = client.post("/api/v1/auth/login", json={"username": "admin"})

    assert wrong.status_code == 401
    assert wrong.get_json()["message"] == "Invalid username or password"
    assert empty.status_code == 400


def test_logout_clears_session(client, login, admin_user):
    login(admin_user)
    assert client.get("/api/v1/auth/me").status_code == 200

    client.post("/api/v1/auth/logout")

    assert client.get("/api/v1/auth/me").status_code == 401


def test_inactive_user_cannot_use_admin_routes(client, login, admin_user):
    admin_user.is_active = False
    db.session.commit()
    login(admin_user)

    assert client.get("/api/v1/admin/showcase-sections").status_code == 401
