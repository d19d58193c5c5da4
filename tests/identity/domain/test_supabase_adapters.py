"""Supabase auth and storage adapters, driven through stand-in supabase clients."""

from types import SimpleNamespace

import pytest
from marketplace.identity.auth.port import AuthError
from marketplace.identity.auth.supabase_adapter import SupabaseAuthGateway
from marketplace.storage.port import StorageError
from marketplace.storage.supabase_adapter import SupabaseStorage
from supabase import AuthApiError, AuthRetryableError, StorageException

SANA = SimpleNamespace(id="user-1", email="sana@example.pk", user_metadata={"full_name": "Sana Malik"})


def _auth_response(user=SANA, token="token-1"):
    session = SimpleNamespace(access_token=token) if token else None
    return SimpleNamespace(user=user, session=session)


class StubAuth:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []
        self.admin = SimpleNamespace(sign_out=lambda jwt: self.calls.append(("sign_out", jwt)))

    def _answer(self, name, payload):
        self.calls.append((name, payload))
        if self.error:
            raise self.error
        return self.response

    def sign_up(self, credentials):
        return self._answer("sign_up", credentials)

    def sign_in_with_password(self, credentials):
        return self._answer("sign_in", credentials)

    def get_user(self, jwt):
        return self._answer("get_user", jwt)


def _gateway(auth):
    return SupabaseAuthGateway(SimpleNamespace(auth=auth))


class TestSupabaseAuth:
    def test_sign_up_passes_full_name_as_metadata(self):
        auth = StubAuth(response=_auth_response())
        result = _gateway(auth).sign_up("sana@example.pk", "secret123", full_name="Sana Malik")

        assert result.success
        assert result.user.full_name == "Sana Malik"
        assert result.access_token == "token-1"
        assert auth.calls[0][1]["options"] == {"data": {"full_name": "Sana Malik"}}

    def test_sign_up_checks_password_before_calling_the_backend(self):
        auth = StubAuth(response=_auth_response())
        result = _gateway(auth).sign_up("sana@example.pk", "123")
        assert result.error == "Password must be at least 6 characters"
        assert auth.calls == []

    def test_sign_up_waiting_for_email_confirmation_has_no_token(self):
        result = _gateway(StubAuth(response=_auth_response(token=None))).sign_up("sana@example.pk", "secret123")
        assert result.success
        assert result.access_token is None

    def test_rejected_credentials_are_reported(self):
        auth = StubAuth(error=AuthApiError("Invalid login credentials", 400, "invalid_credentials"))
        result = _gateway(auth).sign_in("sana@example.pk", "wrong-password")
        assert result.success is False
        assert result.error == "Invalid login credentials"

    def test_unreachable_backend_raises(self):
        auth = StubAuth(error=AuthRetryableError("connection refused", 0))
        with pytest.raises(AuthError):
            _gateway(auth).sign_in("sana@example.pk", "secret123")

    def test_get_user(self):
        user = _gateway(StubAuth(response=SimpleNamespace(user=SANA))).get_user("token-1")
        assert user.id == "user-1"
        assert user.email == "sana@example.pk"

    def test_expired_token_is_unknown(self):
        auth = StubAuth(error=AuthApiError("invalid JWT", 401, "bad_jwt"))
        assert _gateway(auth).get_user("expired") is None

    def test_sign_out_revokes_the_token(self):
        auth = StubAuth()
        _gateway(auth).sign_out("token-1")
        assert auth.calls == [("sign_out", "token-1")]


class StubBucket:
    def __init__(self, name, uploads, error=None):
        self.name = name
        self.uploads = uploads
        self.error = error

    def upload(self, path, data, file_options):
        if self.error:
            raise self.error
        self.uploads.append((self.name, path, data, file_options))

    def get_public_url(self, path):
        return f"https://project.supabase.co/storage/v1/object/public/{self.name}/{path}"


class StubStorage:
    def __init__(self, error=None):
        self.uploads = []
        self.error = error

    def from_(self, bucket):
        return StubBucket(bucket, self.uploads, self.error)


class TestSupabaseStorage:
    def test_upload_returns_public_url(self):
        storage = StubStorage()
        url = SupabaseStorage(SimpleNamespace(storage=storage)).upload(
            "product-images", "product-images/p1-1700000000000.jpg", b"jpeg", "image/jpeg"
        )

        assert url.endswith("/public/product-images/product-images/p1-1700000000000.jpg")
        bucket, path, data, options = storage.uploads[0]
        assert (bucket, data) == ("product-images", b"jpeg")
        assert options["content-type"] == "image/jpeg"
        assert options["upsert"] == "false"

    def test_failed_upload_raises_storage_error(self):
        storage = StubStorage(error=StorageException("The resource already exists"))
        with pytest.raises(StorageError):
            SupabaseStorage(SimpleNamespace(storage=storage)).upload("product-images", "a.jpg", b"x", "image/jpeg")
