"""Request authentication shared by every router that acts for a signed-in user."""

from fastapi import Depends, Header, HTTPException
from fastapi.concurrency import run_in_threadpool
from protean.utils.globals import current_domain

from marketplace.identity.auth import AuthUser, get_auth_gateway
from marketplace.identity.seller.seller import Seller
from marketplace.utils.logging import bind_request_context


def bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def current_user(authorization: str | None = Header(default=None)) -> AuthUser:
    token = bearer_token(authorization)
    if token is None:
        raise HTTPException(status_code=401, detail="You need to be logged in")

    user = await run_in_threadpool(get_auth_gateway().get_user, token)
    if user is None:
        raise HTTPException(status_code=401, detail="Your session has expired, please log in again")

    bind_request_context(user_id=user.id)
    return user


async def optional_user(authorization: str | None = Header(default=None)) -> AuthUser | None:
    token = bearer_token(authorization)
    return await run_in_threadpool(get_auth_gateway().get_user, token) if token else None


def current_seller(user: AuthUser = Depends(current_user)) -> Seller:
    seller = current_domain.repository_for(Seller).find_by_user(user.id)
    if seller is None:
        raise HTTPException(status_code=403, detail="Register as a seller to manage a store")
    return seller
