"""Authentication gateway factory.

``MARKETPLACE_BACKEND=supabase`` selects Supabase Auth; otherwise users live
in memory for the lifetime of the process.
"""

from marketplace.config import backend, supabase_credentials
from marketplace.identity.auth.port import AuthError, AuthGateway, AuthResult, AuthUser

_current_auth: AuthGateway | None = None


def get_auth_gateway() -> AuthGateway:
    global _current_auth
    if _current_auth is None:
        if backend() == "supabase":
            from marketplace.identity.auth.supabase_adapter import SupabaseAuthGateway

            _current_auth = SupabaseAuthGateway.connect(*supabase_credentials())
        else:
            from marketplace.identity.auth.fake_adapter import FakeAuthGateway

            _current_auth = FakeAuthGateway()
    return _current_auth


def set_auth_gateway(gateway: AuthGateway) -> None:
    global _current_auth
    _current_auth = gateway


def reset_auth_gateway() -> None:
    global _current_auth
    _current_auth = None


__all__ = [
    "AuthError",
    "AuthGateway",
    "AuthResult",
    "AuthUser",
    "get_auth_gateway",
    "reset_auth_gateway",
    "set_auth_gateway",
]
