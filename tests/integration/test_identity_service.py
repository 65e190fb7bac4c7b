"""Integration tests for registration and login."""

import pytest

from blog_api.kernel.identity.identity_service import IdentityService


class TestIdentityService:
    """Tests for IdentityService."""

    @pytest.mark.asyncio
    async def test_register_normalizes_email(self, db_session, jwt_manager):
        service = IdentityService(db_session, jwt_manager)

        user = await service.register_user("  Carol ", "Carol@Example.COM", "TestPassword123")

        assert user.id is not None
        assert user.name == "Carol"
        assert user.email == "carol@example.com"
        assert user.password_hash != "TestPassword123"

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, db_session, alice):
        service = IdentityService(db_session)

        with pytest.raises(ValueError, match="Email already registered"):
            await service.register_user("Other", "ALICE@example.com", "TestPassword123")

    @pytest.mark.asyncio
    async def test_authenticate_issues_token(self, db_session, alice, jwt_manager):
        service = IdentityService(db_session, jwt_manager)

        result = await service.authenticate("alice@example.com", "TestPassword123")

        assert result is not None
        user, token = result
        assert user.id == alice.id
        payload = jwt_manager.verify_access_token(token.access_token)
        assert payload.sub == str(alice.id)

    @pytest.mark.asyncio
    async def test_wrong_password(self, db_session, alice):
        result = await IdentityService(db_session).authenticate("alice@example.com", "Nope12345")

        assert result is None

    @pytest.mark.asyncio
    async def test_unknown_email(self, db_session):
        result = await IdentityService(db_session).authenticate("nobody@example.com", "x")

        assert result is None
