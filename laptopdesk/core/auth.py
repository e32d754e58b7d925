# laptopdesk/core/auth.py

from fastapi import Depends

from laptopdesk.core.cookie import cookie_scheme
from laptopdesk.core.errors import Unauthorized
from laptopdesk.core.jwt import decode_access_token
from laptopdesk.database import get_store
from laptopdesk.schemas.user import User
from laptopdesk.store import RecordStore
from laptopdesk.store.repositories import UserRepository, find_by_id


def get_current_user(
    token: str | None = Depends(cookie_scheme),
    store: RecordStore = Depends(get_store),
) -> User:
    if not token:
        raise Unauthorized("Unauthorized")

    payload = decode_access_token(token)

    if payload is None:
        raise Unauthorized("Invalid or expired token")

    user_id = payload.get("sub")

    if user_id is None:
        raise Unauthorized("Invalid token payload")

    user = find_by_id(UserRepository(store).get_all(), user_id)

    if user is None:
        raise Unauthorized("User not found")

    return user
