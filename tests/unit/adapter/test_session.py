"""Unit tests for JWTSessionResolver."""

from datetime import timedelta

import jwt
import pytest

from discuss.adapter.session import JWTSessionResolver
from discuss.config import AuthSettings
from discuss.util.jwt import create_token


@pytest.fixture
def settings():
    """Auth settings with a test secret."""
    return AuthSettings(jwt_secret="test-secret-key-0123456789abcdef0123", anonymous_user_id=0)


class TestJWTSessionResolver:
    """Tests for session resolution."""

    def test_missing_token_is_anonymous(self, settings):
        """No token should resolve to the anonymous user."""
        context = JWTSessionResolver(settings).resolve(None)

        assert context.user_id == 0
        assert context.roles == ("anonymous",)

    def test_valid_token(self, settings):
        """A valid token should carry its user id and roles."""
        token = create_token(42, ["administrator"], settings)

        context = JWTSessionResolver(settings).resolve(token)

        assert context.user_id == 42
        assert context.has_role("administrator")

    def test_token_without_roles_is_authenticated(self, settings):
        """A valid token without roles should get the authenticated role."""
        token = create_token(7, [], settings)

        context = JWTSessionResolver(settings).resolve(token)

        assert context.roles == ("authenticated",)

    def test_wrong_secret_is_anonymous(self, settings):
        """Tokens signed with another secret should be ignored."""
        token = create_token(42, [], AuthSettings(jwt_secret="other-secret-key-0123456789abcdef012"))

        context = JWTSessionResolver(settings).resolve(token)

        assert context.user_id == 0

    def test_expired_token_is_anonymous(self, settings):
        """Expired tokens should be ignored."""
        token = create_token(42, [], settings, lifetime=timedelta(days=-1))

        context = JWTSessionResolver(settings).resolve(token)

        assert context.user_id == 0

    def test_garbage_token_is_anonymous(self, settings):
        """Malformed tokens should be ignored."""
        assert JWTSessionResolver(settings).resolve("not-a-jwt").user_id == 0

    def test_token_without_user_id_is_anonymous(self, settings):
        """Signed tokens with malformed claims should be ignored."""
        token = jwt.encode(
            {"roles": ["administrator"]}, settings.jwt_secret, algorithm="HS256"
        )

        assert JWTSessionResolver(settings).resolve(token).user_id == 0
