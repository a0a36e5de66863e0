"""
Tests for the mock auth endpoints and email confirmation.
"""

from datetime import datetime, timedelta, timezone

from inventory_api.models import User


class TestAuthStubs:
    """/api/auth"""

    def test_register_accepts_anything(self, client):
        response = client.post("/api/auth/register", json={"username": "alice", "email": "a@b.c"})
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["user"]["username"] == "alice"
        assert body["user"]["isEmailConfirmed"] is True
        assert body["token"].startswith("demo_token_")

    def test_login_accepts_anything(self, client):
        response = client.post("/api/auth/login", json={"email": "x@y.z", "password": "nope"})
        assert response.status_code == 200
        body = response.json()
        assert body["user"]["id"] == 1
        assert body["user"]["email"] == "x@y.z"

    def test_confirm_email_requires_token(self, client):
        response = client.get("/api/auth/confirm-email")
        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Token is required"}

    def test_confirm_email(self, client, db_session):
        user = User(
            username="bob",
            email="bob@example.com",
            password="hashed",
            email_confirmation_token="tok-1",
            email_confirmation_token_expiry=datetime.now(timezone.utc) + timedelta(hours=1),
        )
        db_session.add(user)
        db_session.commit()

        response = client.get(
            "/api/auth/confirm-email", params={"token": "tok-1"}, follow_redirects=False
        )
        assert response.status_code == 302
        assert response.headers["location"] == "/?emailConfirmed=true"

        db_session.expire_all()
        confirmed = db_session.get(User, user.id)
        assert confirmed.is_email_confirmed is True
        assert confirmed.email_confirmation_token is None

    def test_confirm_email_unknown_token(self, client):
        response = client.get(
            "/api/auth/confirm-email", params={"token": "nope"}, follow_redirects=False
        )
        assert response.status_code == 302
        assert response.headers["location"].startswith("/?emailConfirmed=false&error=")

    def test_confirm_email_expired_token(self, client, db_session):
        db_session.add(
            User(
                username="carol",
                email="carol@example.com",
                password="hashed",
                email_confirmation_token="tok-old",
                email_confirmation_token_expiry=datetime.now(timezone.utc) - timedelta(hours=1),
            )
        )
        db_session.commit()

        response = client.get(
            "/api/auth/confirm-email", params={"token": "tok-old"}, follow_redirects=False
        )
        assert response.status_code == 302
        assert response.headers["location"] == (
            "/?emailConfirmed=false&error=Confirmation%20token%20has%20expired"
        )
