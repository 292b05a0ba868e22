"""Signup, login, logout and auth status over the JSON API."""

import sqlalchemy
from conftest import login, signup

from feedback_service.models.session import SessionRecord
from feedback_service.models.user import User
from feedback_service.routers import auth as auth_router


class TestSignup:

    def test_signup_creates_user_and_session(self, client, db):
        response = signup(client)

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "User created successfully"}
        assert client.cookies.get("session_id")

        user = db.query(User).filter(User.email == "a@x.com").one()
        assert user.username == "alice"
        assert user.created_at is not None
        assert db.query(SessionRecord).filter(SessionRecord.user_id == user.id).count() == 1

    def test_password_is_stored_hashed(self, client, db):
        signup(client)

        user = db.query(User).one()
        assert user.password != "secret123"
        assert user.password.startswith("pbkdf2:sha256")

    def test_duplicate_email_rejected(self, client, db):
        signup(client)

        response = signup(client, username="alice2")

        assert response.status_code == 400
        assert response.json() == {"error": "User already exists"}
        assert db.query(User).count() == 1

    def test_duplicate_username_rejected(self, client, db):
        signup(client)

        response = signup(client, email="other@x.com")

        assert response.status_code == 400
        assert response.json() == {"error": "User already exists"}
        assert db.query(User).count() == 1

    def test_insert_conflict_reported_as_duplicate(self, client, db, monkeypatch):
        signup(client)
        client.cookies.clear()
        # let the existence check miss so the unique constraint decides
        monkeypatch.setattr(auth_router, "or_", lambda *clauses: sqlalchemy.false())

        response = signup(client)

        assert response.status_code == 400
        assert response.json() == {"error": "User already exists"}
        assert db.query(User).count() == 1

    def test_signup_while_signed_in_drops_old_session(self, client, db):
        signup(client)
        first_token = client.cookies.get("session_id")

        signup(client, username="bob", email="b@x.com")

        assert db.get(SessionRecord, first_token) is None
        assert db.query(SessionRecord).count() == 1
        assert client.get("/api/auth/status").json() == {"authenticated": True, "username": "bob"}

    def test_missing_field_is_invalid_request(self, client):
        response = client.post("/api/signup", json={"username": "alice"})

        assert response.status_code == 422
        assert response.json()["error"] == "Invalid request"


class TestLogin:

    def test_login_after_signup(self, client):
        signup(client)
        client.cookies.clear()

        response = login(client)

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Login successful"}
        assert client.get("/api/auth/status").json() == {"authenticated": True, "username": "alice"}

    def test_wrong_password_and_unknown_email_look_the_same(self, client):
        signup(client)
        client.cookies.clear()

        wrong_password = login(client, password="wrong")
        unknown_email = login(client, email="nobody@x.com")

        assert wrong_password.status_code == 400
        assert wrong_password.status_code == unknown_email.status_code
        assert wrong_password.json() == unknown_email.json() == {"error": "Invalid credentials"}
        assert "session_id" not in client.cookies

    def test_login_replaces_previous_session(self, client, db):
        signup(client)
        first_token = client.cookies.get("session_id")

        login(client)

        assert client.cookies.get("session_id") != first_token
        assert db.get(SessionRecord, first_token) is None
        assert db.query(SessionRecord).count() == 1


class TestLogoutAndStatus:

    def test_status_when_anonymous(self, client):
        response = client.get("/api/auth/status")

        assert response.status_code == 200
        assert response.json() == {"authenticated": False}

    def test_logout_destroys_session(self, client, db):
        signup(client)
        token = client.cookies.get("session_id")

        response = client.post("/api/logout")

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert db.get(SessionRecord, token) is None
        assert client.get("/api/auth/status").json() == {"authenticated": False}

    def test_logout_without_session_is_ok(self, client):
        response = client.post("/api/logout")

        assert response.status_code == 200
        assert response.json() == {"success": True}

    def test_cookie_without_stored_session_is_anonymous(self, client, db):
        signup(client)
        db.query(SessionRecord).delete()
        db.commit()

        assert client.cookies.get("session_id")
        assert client.get("/api/auth/status").json() == {"authenticated": False}
