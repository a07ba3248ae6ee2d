import pytest

from modules.auth.models import (
    AuthResult,
    Credentials,
    Identity,
    JWTPayload,
    Profile,
    Session,
    SessionKind,
    is_profile_complete,
)


class TestJWTPayload:
    def test_parse_jwt_payload(self):
        """Should parse JWT payload from dict."""
        payload = JWTPayload(
            sub="auth-123",
            email="test@example.com",
            exp=1704067200,
            iat=1704063600,
        )
        assert payload.sub == "auth-123"
        assert payload.aud == "authenticated"
        assert payload.app_metadata == {}


class TestProfile:
    def test_numeric_ids_become_strings(self):
        """Database rows with integer ids should still parse."""
        profile = Profile.model_validate({"id": 42, "auth_id": "auth-1"})
        assert profile.id == "42"

    def test_null_metadata_becomes_empty(self):
        """A NULL metadata column should read as an empty dict."""
        profile = Profile.model_validate({"id": "p1", "metadata": None})
        assert profile.metadata == {}

    def test_ignores_unknown_columns(self):
        """Extra columns on the users row should be ignored."""
        profile = Profile.model_validate({"id": "p1", "verification_level": "verified_once"})
        assert profile.id == "p1"


class TestProfileCompleteness:
    def test_absent_profile_is_incomplete(self):
        assert is_profile_complete(None) is False

    def test_setup_complete_flag(self):
        profile = Profile(id="p1", metadata={"setup_complete": True})
        assert is_profile_complete(profile) is True

    def test_home_location_counts(self):
        profile = Profile(id="p1", home_location="POINT(174.7 -36.8)")
        assert is_profile_complete(profile) is True

    def test_neither_flag_nor_location(self):
        profile = Profile(id="p1", metadata={"setup_complete": False})
        assert is_profile_complete(profile) is False

    def test_truthy_non_boolean_flag_is_not_complete(self):
        """Only a literal true flag marks setup complete."""
        profile = Profile(id="p1", metadata={"setup_complete": "yes"})
        assert is_profile_complete(profile) is False


class TestSession:
    def test_anonymous(self):
        session = Session.anonymous()
        assert session.kind is SessionKind.ANONYMOUS
        assert session.is_authenticated is False
        assert session.profile_complete is False

    def test_authenticated_without_profile(self):
        session = Session.authenticated(Identity(id="a1"))
        assert session.kind is SessionKind.AUTHENTICATED_WITHOUT_PROFILE
        assert session.is_authenticated is True

    def test_authenticated_with_profile(self):
        session = Session.authenticated(
            Identity(id="a1"),
            Profile(id="p1", metadata={"setup_complete": True}),
        )
        assert session.kind is SessionKind.AUTHENTICATED_WITH_PROFILE
        assert session.profile_complete is True

    def test_profile_requires_identity(self):
        """A profile without an identity is not a valid session."""
        with pytest.raises(Exception):
            Session(profile=Profile(id="p1"))

    def test_session_is_immutable(self):
        session = Session.anonymous()
        with pytest.raises(Exception):
            session.identity = Identity(id="a1")


class TestCredentials:
    def test_valid(self):
        credentials = Credentials(email="kia@ora.nz", password="secret1")
        assert credentials.email == "kia@ora.nz"

    def test_bad_email(self):
        with pytest.raises(Exception):
            Credentials(email="not-an-email", password="secret1")

    def test_short_password(self):
        with pytest.raises(Exception):
            Credentials(email="kia@ora.nz", password="123")


class TestAuthResult:
    def test_success_is_ok(self):
        assert AuthResult(identity=Identity(id="a1")).ok is True

    def test_failure(self):
        result = AuthResult.failure("Invalid login credentials", code="LOGIN_FAILED")
        assert result.ok is False
        assert result.error.message == "Invalid login credentials"
        assert result.error.code == "LOGIN_FAILED"
