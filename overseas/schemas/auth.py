from pydantic import BaseModel, EmailStr
from typing import Optional
from overseas.core.constants import RoleEnum
from overseas.schemas.camel import CamelModel
from overseas.schemas.user import User


class Token(BaseModel):
    access_token: str
    token_type: str


class TokenPayload(BaseModel):
    sub: Optional[str] = None
    user_id: Optional[int] = None
    role: Optional[RoleEnum] = None
    jti: Optional[str] = None
    exp: Optional[int] = None


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class LoginResponse(BaseModel):
    """Response for the login and register endpoints."""
    token: Token
    user: User


class SessionUser(CamelModel):
    id: int
    first_name: str
    last_name: Optional[str] = None
    email: str
    phone: Optional[str] = None
    role: RoleEnum


class SessionResponse(BaseModel):
    """Current session, or ``{"user": null}`` for anonymous callers."""
    user: Optional[SessionUser] = None
