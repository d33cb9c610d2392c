from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from overseas.models.user import User
from overseas.schemas.auth import LoginRequest, LoginResponse, SessionResponse
from overseas.schemas.response import APIResponse
from overseas.schemas.user import User as UserSchema, UserCreate, UserUpdate
from overseas.services.auth import auth_service
from overseas.utils import deps

router = APIRouter()


@router.post("/login", response_model=APIResponse[LoginResponse])
def login_for_access_token(
    request: LoginRequest,
    db: Session = Depends(deps.get_db)
):
    login_data = auth_service.login(db=db, email=request.email, password=request.password)
    return APIResponse(message="Login successful", data=login_data)


@router.post("/register", response_model=APIResponse[LoginResponse], status_code=status.HTTP_201_CREATED)
async def register(
    *,
    db: Session = Depends(deps.get_transactional_db),
    user_in: UserCreate
):
    """Create a student account and sign it in."""
    login_data = await auth_service.register(db, user_in=user_in)
    return APIResponse(message="Account created successfully", data=login_data)


@router.get("/session", response_model=SessionResponse)
def get_session(current_user: Optional[User] = Depends(deps.get_optional_user)):
    """Current session for checkout prefill; anonymous callers get ``{"user": null}``."""
    return auth_service.get_session(current_user)


@router.get("/me", response_model=APIResponse[UserSchema])
def read_me(current_user: User = Depends(deps.get_current_user)):
    return APIResponse(message="Profile retrieved successfully", data=UserSchema.model_validate(current_user))


@router.put("/me", response_model=APIResponse[UserSchema])
def update_me(
    *,
    db: Session = Depends(deps.get_transactional_db),
    user_in: UserUpdate,
    current_user: User = Depends(deps.get_current_user)
):
    user = auth_service.update_profile(db, user=current_user, user_in=user_in)
    return APIResponse(message="Profile updated successfully", data=UserSchema.model_validate(user))
