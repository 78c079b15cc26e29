"""Request dependencies shared by the routers."""

from fastapi import Depends, Header, Request

from ..auth import IdentityService
from ..errors import AuthError
from ..models.users import Identity
from ..store.base import RowStore


def get_store(request: Request) -> RowStore:
    """Get the row store from app state."""
    return request.app.state.store


async def get_identity(
    authorization: str | None = Header(default=None),
    store: RowStore = Depends(get_store),
) -> Identity:
    """Resolve the `Authorization: Bearer <token>` header to an identity."""
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthError("Sign in and send the access token as a Bearer header")
    return await IdentityService(store).identity_for_token(token.strip())
