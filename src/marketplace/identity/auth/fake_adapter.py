"""In-memory authentication for development and tests."""

import hashlib
import secrets
from uuid import uuid4

from marketplace.identity.auth.port import AuthGateway, AuthResult, AuthUser, credential_problem

INVALID_CREDENTIALS_MESSAGE = "Invalid login credentials"
DUPLICATE_USER_MESSAGE = "User already registered"


def _digest(password: str, salt: str) -> str:
    return hashlib.sha256(f"{salt}:{password}".encode()).hexdigest()


class FakeAuthGateway(AuthGateway):
    def __init__(self) -> None:
        self._users: dict[str, dict] = {}
        self._tokens: dict[str, str] = {}

    def sign_up(self, email: str, password: str, full_name: str | None = None) -> AuthResult:
        problem = credential_problem(email, password)
        if problem:
            return AuthResult(success=False, error=problem)

        key = email.strip().lower()
        if key in self._users:
            return AuthResult(success=False, error=DUPLICATE_USER_MESSAGE)

        salt = secrets.token_hex(8)
        user = AuthUser(id=str(uuid4()), email=key, full_name=full_name)
        self._users[key] = {"user": user, "salt": salt, "digest": _digest(password, salt)}
        return AuthResult(success=True, user=user, access_token=self._issue_token(user))

    def sign_in(self, email: str, password: str) -> AuthResult:
        record = self._users.get((email or "").strip().lower())
        if record is None or _digest(password or "", record["salt"]) != record["digest"]:
            return AuthResult(success=False, error=INVALID_CREDENTIALS_MESSAGE)
        return AuthResult(success=True, user=record["user"], access_token=self._issue_token(record["user"]))

    def get_user(self, access_token: str) -> AuthUser | None:
        email = self._tokens.get(access_token)
        if email is None:
            return None
        return self._users[email]["user"]

    def sign_out(self, access_token: str) -> None:
        self._tokens.pop(access_token, None)

    def _issue_token(self, user: AuthUser) -> str:
        token = secrets.token_urlsafe(24)
        self._tokens[token] = user.email
        return token
