"""Authentication port.

Sign-up, sign-in and token lookup belong to the external backend. The
marketplace only knows the user id, email and name it hands back and the
bearer token that proves who is calling.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from marketplace.shared.contact import is_valid_email

MIN_PASSWORD_LENGTH = 6


class AuthError(Exception):
    """The authentication backend could not be reached or answered unexpectedly."""


@dataclass(frozen=True)
class AuthUser:
    id: str
    email: str
    full_name: str | None = None


@dataclass(frozen=True)
class AuthResult:
    success: bool
    user: AuthUser | None = None
    access_token: str | None = None
    error: str | None = None


def credential_problem(email: str | None, password: str | None) -> str | None:
    """Checks made before the backend is called; ``None`` when the input is usable."""
    if not is_valid_email(email):
        return "Please enter a valid email address"
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        return f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
    return None


class AuthGateway(ABC):
    @abstractmethod
    def sign_up(self, email: str, password: str, full_name: str | None = None) -> AuthResult:
        ...

    @abstractmethod
    def sign_in(self, email: str, password: str) -> AuthResult:
        ...

    @abstractmethod
    def get_user(self, access_token: str) -> AuthUser | None:
        """The user a token belongs to, or ``None`` for an unknown or expired token."""
        ...

    @abstractmethod
    def sign_out(self, access_token: str) -> None:
        ...
