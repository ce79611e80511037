from tests.conftest import ADMIN_PASSWORD, ADMIN_USERNAME


def _login(client, username=ADMIN_USERNAME, password=ADMIN_PASSWORD):
    return client.post("/api/auth/login", json={"username": username, "password": password})


def test_login_success(client, admin):
    r = _login(client)

    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["token"]
    assert body["admin"] == {"id": admin.id, "username": ADMIN_USERNAME}


def test_login_wrong_password_and_unknown_user_look_alike(client, admin):
    wrong = _login(client, password="wrongpass")
    unknown = _login(client, username="ghost")

    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json() == unknown.json() == {"message": "Tài khoản hoặc mật khẩu không đúng"}


def test_login_validation(client):
    r = client.post("/api/auth/login", json={"username": "", "password": ""})
    assert r.status_code == 400


def test_me_and_logout(client, admin, registry):
    token = _login(client).json()["token"]
    headers = {"Authorization": f"Bearer {token}"}

    me = client.get("/api/auth/me", headers=headers).json()
    assert me == {"isAuthenticated": True, "admin": {"id": admin.id, "username": ADMIN_USERNAME}}

    assert client.post("/api/auth/logout", headers=headers).json() == {"success": True}
    assert registry.resolve(token) is None
    assert client.get("/api/auth/me", headers=headers).json() == {"isAuthenticated": False}


def test_me_without_token(client):
    assert client.get("/api/auth/me").json() == {"isAuthenticated": False}


def test_logout_always_succeeds(client):
    assert client.post("/api/auth/logout").json() == {"success": True}
    r = client.post("/api/auth/logout", headers={"Authorization": "Bearer unknown"})
    assert r.status_code == 200
    assert r.json() == {"success": True}


def test_change_password_requires_login(client, admin):
    r = client.post("/api/auth/change-password", json={"currentPassword": ADMIN_PASSWORD, "newPassword": "x"})
    assert r.status_code == 401
    assert r.json()["message"] == "Chưa đăng nhập"


def test_change_password_wrong_current(client, admin_headers):
    r = client.post(
        "/api/auth/change-password",
        json={"currentPassword": "wrongpass", "newPassword": "newpass"},
        headers=admin_headers,
    )
    assert r.status_code == 400
    assert r.json()["message"] == "Mật khẩu hiện tại không đúng"


def test_change_password_success(client, admin_headers):
    r = client.post(
        "/api/auth/change-password",
        json={"currentPassword": ADMIN_PASSWORD, "newPassword": "newpass"},
        headers=admin_headers,
    )

    assert r.status_code == 200
    assert r.json() == {"success": True, "message": "Đổi mật khẩu thành công"}
    assert _login(client).status_code == 401
    assert _login(client, password="newpass").status_code == 200
