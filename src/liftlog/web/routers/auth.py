"""Account routes."""

from fastapi import APIRouter, Depends

from ...auth import IdentityService
from ...models.users import AuthSession, Identity
from ...store.base import RowStore
from ..deps import get_identity, get_store
from ..schemas import Credentials, SignUpRequest

router = APIRouter(prefix="/auth", tags=["auth"])


def _token_response(session: AuthSession) -> dict:
    return {
        "access_token": session.access_token,
        "token_type": "bearer",
        "expires_at": session.expires_at.isoformat(),
        "user": session.user.to_dict(),
    }


@router.post("/signup", status_code=201)
async def signup(body: SignUpRequest, store: RowStore = Depends(get_store)):
    session = await IdentityService(store).sign_up(
        body.email, body.password, body.full_name, remember=False
    )
    return _token_response(session)


@router.post("/login")
async def login(body: Credentials, store: RowStore = Depends(get_store)):
    session = await IdentityService(store).sign_in(body.email, body.password, remember=False)
    return _token_response(session)


@router.get("/me")
async def me(identity: Identity = Depends(get_identity)):
    return {"user_id": identity.user_id, "email": identity.email}
