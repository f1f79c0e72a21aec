"""API tests for sign-up, sign-in, sign-out and current user."""

from sqlmodel import select

from app.models.user import User

REGISTER = "/api/v1/auth/register"


class TestRegister:

    def test_register_returns_user_without_password(self, client):
        response = client.post(REGISTER, json={"email": "bob@mail.com", "password": "secret123",
                                               "full_name": "Bob"})
        assert response.status_code == 201
        body = response.json()
        assert body["email"] == "bob@mail.com"
        assert body["full_name"] == "Bob"
        assert body["is_active"] is True
        assert "password" not in body and "hashed_password" not in body

    def test_duplicate_email_rejected(self, client):
        client.post(REGISTER, json={"email": "bob@mail.com", "password": "secret123"})
        response = client.post(REGISTER, json={"email": "bob@mail.com", "password": "secret456"})
        assert response.status_code == 400
        assert response.json()["detail"] == "User already registered"

    def test_short_password_rejected(self, client):
        response = client.post(REGISTER, json={"email": "bob@mail.com", "password": "12345"})
        assert response.status_code == 422

    def test_invalid_email_rejected(self, client):
        response = client.post(REGISTER, json={"email": "not-an-email", "password": "secret123"})
        assert response.status_code == 422


class TestLogin:

    def test_form_login_returns_bearer_token(self, client):
        client.post(REGISTER, json={"email": "bob@mail.com", "password": "secret123"})
        response = client.post("/api/v1/auth/login", data={"username": "bob@mail.com", "password": "secret123"})
        assert response.status_code == 200
        body = response.json()
        assert body["token_type"] == "bearer"
        assert body["access_token"]

    def test_wrong_password(self, client):
        client.post(REGISTER, json={"email": "bob@mail.com", "password": "secret123"})
        response = client.post("/api/v1/auth/token", json={"email": "bob@mail.com", "password": "nope-nope"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Incorrect email or password"

    def test_unknown_user(self, client):
        response = client.post("/api/v1/auth/token", json={"email": "ghost@mail.com", "password": "secret123"})
        assert response.status_code == 401


class TestCurrentUser:

    def test_me(self, client, auth_headers):
        response = client.get("/api/v1/auth/me", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["email"] == "alice@mail.com"

    def test_me_requires_token(self, client):
        response = client.get("/api/v1/auth/me")
        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    def test_me_rejects_bad_token(self, client):
        response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid or expired token"


class TestLogout:

    def test_logout_revokes_token(self, client, auth_headers):
        response = client.post("/api/v1/auth/logout", headers=auth_headers)
        assert response.status_code == 204

        response = client.get("/api/v1/auth/me", headers=auth_headers)
        assert response.status_code == 401

    def test_logout_leaves_other_sessions_alone(self, client, make_user):
        headers = make_user("carol@mail.com")
        response = client.post("/api/v1/auth/token", json={"email": "carol@mail.com", "password": "secret123"})
        other = {"Authorization": f"Bearer {response.json()['access_token']}"}

        client.post("/api/v1/auth/logout", headers=headers)

        assert client.get("/api/v1/auth/me", headers=other).status_code == 200


class TestEmailCase:

    def test_email_stored_lower_case(self, client):
        response = client.post(REGISTER, json={"email": "Bob@Mail.com", "password": "secret123"})
        assert response.status_code == 201
        assert response.json()["email"] == "bob@mail.com"

    def test_same_address_different_case_is_duplicate(self, client):
        client.post(REGISTER, json={"email": "bob@mail.com", "password": "secret123"})
        response = client.post(REGISTER, json={"email": "BOB@mail.com", "password": "secret123"})
        assert response.status_code == 400

    def test_login_ignores_case(self, client):
        client.post(REGISTER, json={"email": "Bob@mail.com", "password": "secret123"})
        response = client.post("/api/v1/auth/token", json={"email": "BOB@MAIL.COM", "password": "secret123"})
        assert response.status_code == 200


class TestInactiveAccount:

    @staticmethod
    def _deactivate(db_session, email: str) -> None:
        user = db_session.exec(select(User).where(User.email == email)).one()
        user.is_active = False
        db_session.add(user)
        db_session.commit()

    def test_inactive_user_cannot_sign_in(self, client, db_session):
        client.post(REGISTER, json={"email": "bob@mail.com", "password": "secret123"})
        self._deactivate(db_session, "bob@mail.com")

        response = client.post("/api/v1/auth/token", json={"email": "bob@mail.com", "password": "secret123"})
        assert response.status_code == 403
        assert response.json()["detail"] == "User account is inactive"

    def test_existing_token_rejected_after_deactivation(self, client, db_session, auth_headers):
        self._deactivate(db_session, "alice@mail.com")

        response = client.get("/api/v1/auth/me", headers=auth_headers)
        assert response.status_code == 403
        assert response.json()["detail"] == "User account is inactive"
