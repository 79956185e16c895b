"""Password hashing, JWT helpers, security headers and CORS."""
from propman.core.auth import AuthenticatedCaller
from propman.core.config import settings
from propman.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from propman.db import session as db_session


class TestPasswords:

    def test_hash_and_verify(self):
        hashed = hash_password("hunter2-hunter2")
        assert hashed != "hunter2-hunter2"
        assert verify_password("hunter2-hunter2", hashed)
        assert not verify_password("wrong", hashed)


class TestTokens:

    def test_round_trip_claims(self):
        token = create_access_token(sub="a@example.com", user_id=5, role="RENTER", name="A")
        payload = decode_access_token(token)
        assert payload["sub"] == "a@example.com"
        assert payload["user_id"] == 5
        assert payload["role"] == "RENTER"
        assert payload["name"] == "A"

    def test_tampered_token_rejected(self):
        token = create_access_token(sub="a@example.com", user_id=5, role="RENTER")
        assert decode_access_token(token[:-2] + "xx") is None

    def test_expired_token_rejected(self, monkeypatch):
        monkeypatch.setattr(settings, "jwt_expiry_days", -1)
        token = create_access_token(sub="a@example.com", user_id=5, role="RENTER")
        assert decode_access_token(token) is None

    def test_wrong_secret_rejected(self, monkeypatch):
        token = create_access_token(sub="a@example.com", user_id=5, role="RENTER")
        monkeypatch.setattr(settings, "jwt_secret_key", "another-secret")
        assert decode_access_token(token) is None


def test_authenticated_caller_renter_flag():
    assert AuthenticatedCaller(user_id=1, role="RENTER").is_renter
    assert AuthenticatedCaller(user_id=1, role="renter").is_renter
    assert not AuthenticatedCaller(user_id=1, role="OWNER").is_renter


class TestHttpPolicy:

    def test_security_headers_present(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.headers.get("X-Content-Type-Options") == "nosniff"
        assert resp.headers.get("X-Frame-Options") == "DENY"
        assert resp.headers.get("X-XSS-Protection") == "1; mode=block"
        assert "strict-origin" in resp.headers.get("Referrer-Policy", "")

    def test_cors_preflight_allowed_origin(self, client):
        resp = client.options(
            "/api/favorites?propertyId=1",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "User-Id",
            },
        )
        assert resp.status_code == 200
        assert resp.headers["access-control-allow-origin"] == "http://localhost:5173"
        assert resp.headers["access-control-allow-credentials"] == "true"

    def test_cors_preflight_unknown_origin(self, client):
        resp = client.options(
            "/api/favorites?propertyId=1",
            headers={
                "Origin": "http://evil.example",
                "Access-Control-Request-Method": "POST",
            },
        )
        assert "access-control-allow-origin" not in resp.headers

    def test_root_path_is_not_served(self, client):
        assert client.get("/").status_code == 404

    def test_health_uses_in_memory_database(self, client):
        assert db_session.engine.url.database in (None, "", ":memory:")
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "db": "ok"}
