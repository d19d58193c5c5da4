"""Supabase Auth adapter built on the supabase client."""

import structlog
from supabase import AuthApiError, Client, ClientOptions, create_client
from supabase import AuthError as SupabaseAuthError

from marketplace.identity.auth.port import AuthError, AuthGateway, AuthResult, AuthUser, credential_problem

logger = structlog.get_logger(__name__)


def _user_from(user) -> AuthUser:
    metadata = user.user_metadata or {}
    return AuthUser(id=str(user.id), email=user.email, full_name=metadata.get("full_name"))


class SupabaseAuthGateway(AuthGateway):
    def __init__(self, client: Client) -> None:
        self.client = client

    @classmethod
    def connect(cls, url: str, api_key: str) -> "SupabaseAuthGateway":
        # Tokens travel with each request; the server keeps no session of its own
        options = ClientOptions(persist_session=False, auto_refresh_token=False)
        return cls(create_client(url, api_key, options=options))

    def _authenticate(self, call, credentials: dict) -> AuthResult:
        try:
            response = call(credentials)
        except AuthApiError as exc:
            return AuthResult(success=False, error=exc.message)
        except SupabaseAuthError as exc:
            logger.error("auth_backend_failed", error=exc.message)
            raise AuthError(exc.message) from exc

        token = response.session.access_token if response.session else None
        return AuthResult(success=True, user=_user_from(response.user), access_token=token)

    def sign_up(self, email: str, password: str, full_name: str | None = None) -> AuthResult:
        problem = credential_problem(email, password)
        if problem:
            return AuthResult(success=False, error=problem)

        credentials = {"email": email, "password": password, "options": {"data": {"full_name": full_name}}}
        return self._authenticate(self.client.auth.sign_up, credentials)

    def sign_in(self, email: str, password: str) -> AuthResult:
        return self._authenticate(self.client.auth.sign_in_with_password, {"email": email, "password": password})

    def get_user(self, access_token: str) -> AuthUser | None:
        try:
            response = self.client.auth.get_user(access_token)
        except AuthApiError as exc:
            if exc.status in (401, 403):
                return None
            raise AuthError(exc.message) from exc
        except SupabaseAuthError as exc:
            logger.error("auth_backend_failed", error=exc.message)
            raise AuthError(exc.message) from exc
        return _user_from(response.user) if response else None

    def sign_out(self, access_token: str) -> None:
        try:
            self.client.auth.admin.sign_out(access_token)
        except SupabaseAuthError as exc:
            raise AuthError(exc.message) from exc
