"""Unit tests for access token handling."""

from datetime import timedelta

from jose import jwt

from blog_api.kernel.identity.jwt import JWTManager


class TestJWTManager:
    """Tests for JWTManager."""

    def test_round_trip(self, jwt_manager: JWTManager):
        token = jwt_manager.create_access_token(user_id=7, email="alice@example.com")

        payload = jwt_manager.verify_access_token(token.access_token)

        assert payload is not None
        assert payload.sub == "7"
        assert payload.email == "alice@example.com"
        assert token.token_type == "bearer"
        assert token.expires_in == 30 * 60

    def test_expired_token_rejected(self, jwt_manager: JWTManager):
        token = jwt_manager.create_access_token(
            user_id=7,
            email="alice@example.com",
            expires_delta=timedelta(seconds=-10),
        )

        assert jwt_manager.verify_access_token(token.access_token) is None

    def test_wrong_secret_rejected(self, jwt_manager: JWTManager):
        other = JWTManager(secret_key="another-secret-key-for-testing-only")
        token = other.create_access_token(user_id=7, email="alice@example.com")

        assert jwt_manager.verify_access_token(token.access_token) is None

    def test_garbage_rejected(self, jwt_manager: JWTManager):
        assert jwt_manager.verify_access_token("not.a.token") is None

    def test_non_access_token_rejected(self, jwt_manager: JWTManager):
        token = jwt.encode(
            {"sub": "7", "email": "a@example.com", "type": "refresh"},
            jwt_manager.secret_key,
            algorithm=jwt_manager.algorithm,
        )

        assert jwt_manager.verify_access_token(token) is None
