import logging

from fastapi import APIRouter, Depends, Request, Response

from laptopdesk.core.auth import get_current_user
from laptopdesk.core.config import settings
from laptopdesk.core.errors import Unauthorized
from laptopdesk.core.hashing import verify_password
from laptopdesk.core.jwt import create_access_token
from laptopdesk.core.rate_limiter import limiter
from laptopdesk.database import get_store
from laptopdesk.schemas.user import LoginResponse, User, UserLogin, UserResponse
from laptopdesk.store import RecordStore
from laptopdesk.store.repositories import UserRepository

router = APIRouter(prefix="/auth", tags=["Authentication"])

logger = logging.getLogger("laptopdesk")


# ---------------- LOGIN (COOKIE-BASED) ----------------
@router.post("/login", response_model=LoginResponse)
@limiter.limit("5/minute")
def login(
    request: Request,
    response: Response,
    credentials: UserLogin,
    store: RecordStore = Depends(get_store),
):
    users = UserRepository(store).get_all()
    user = next((u for u in users if u.username == credentials.username), None)

    if not user or not verify_password(credentials.password, user.password_hash):
        logger.warning(f"Failed login attempt for '{credentials.username}'")
        raise Unauthorized("Invalid credentials")

    token = create_access_token(data={"sub": user.id})

    response.set_cookie(
        key=settings.COOKIE_NAME,
        value=token,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
        path="/",
        max_age=settings.COOKIE_MAX_AGE_SECONDS,
    )

    return LoginResponse(
        success=True,
        user=UserResponse(id=user.id, username=user.username, name=user.name),
    )


# ---------------- LOGOUT ----------------
@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(key=settings.COOKIE_NAME, path="/")
    return {"message": "Logged out successfully"}


# ---------------- CURRENT USER ----------------
@router.get("/me", response_model=UserResponse)
def me(current_user: User = Depends(get_current_user)):
    return UserResponse(
        id=current_user.id,
        username=current_user.username,
        name=current_user.name,
    )
