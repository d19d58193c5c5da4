"""Tests for the in-memory authentication gateway."""

from marketplace.identity.auth.fake_adapter import FakeAuthGateway
from marketplace.identity.auth.port import credential_problem


class TestCredentialChecks:
    def test_short_password(self):
        assert credential_problem("ali@example.pk", "12345") == "Password must be at least 6 characters"

    def test_invalid_email(self):
        assert credential_problem("ali", "secret123") == "Please enter a valid email address"

    def test_usable(self):
        assert credential_problem("ali@example.pk", "secret123") is None


class TestSignUp:
    def test_sign_up_issues_token(self):
        auth = FakeAuthGateway()
        result = auth.sign_up("Ali@Example.pk", "secret123", "Ali Raza")

        assert result.success
        assert result.user.email == "ali@example.pk"
        assert auth.get_user(result.access_token) == result.user

    def test_duplicate_account(self):
        auth = FakeAuthGateway()
        auth.sign_up("ali@example.pk", "secret123")
        result = auth.sign_up("ALI@example.pk", "another1")
        assert not result.success
        assert result.error == "User already registered"

    def test_short_password_rejected_before_storing(self):
        auth = FakeAuthGateway()
        result = auth.sign_up("ali@example.pk", "123")
        assert not result.success
        assert auth.sign_in("ali@example.pk", "123").success is False


class TestSignIn:
    def test_sign_in(self):
        auth = FakeAuthGateway()
        created = auth.sign_up("ali@example.pk", "secret123")
        result = auth.sign_in("ali@example.pk", "secret123")
        assert result.success
        assert result.user.id == created.user.id

    def test_wrong_password(self):
        auth = FakeAuthGateway()
        auth.sign_up("ali@example.pk", "secret123")
        result = auth.sign_in("ali@example.pk", "wrong-password")
        assert result.error == "Invalid login credentials"

    def test_unknown_user(self):
        assert FakeAuthGateway().sign_in("nobody@example.pk", "secret123").error == "Invalid login credentials"


class TestSignOut:
    def test_token_stops_working(self):
        auth = FakeAuthGateway()
        token = auth.sign_up("ali@example.pk", "secret123").access_token
        auth.sign_out(token)
        assert auth.get_user(token) is None
