from datetime import datetime

from pydantic import Field

from laptopdesk.schemas.base import CamelModel


class User(CamelModel):
    id: str
    username: str
    name: str
    password_hash: str
    created_at: datetime


class UserResponse(CamelModel):
    id: str
    username: str
    name: str


class UserLogin(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(CamelModel):
    success: bool
    user: UserResponse
