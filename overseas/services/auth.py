from typing import Optional
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from overseas.core.constants import RoleEnum
from overseas.core.security import get_password_hash, verify_password, create_access_token
from overseas.crud.user import user as crud_user
from overseas.models.user import User
from overseas.schemas.auth import LoginResponse, SessionResponse, SessionUser, Token
from overseas.schemas.user import User as UserSchema, UserCreate, UserUpdate
from overseas.services.email import EmailService


class AuthService:
    def _issue_token(self, user: User) -> Token:
        access_token = create_access_token(
            data={"user_id": user.id, "role": user.role.value},
            email=user.email,
        )
        return Token(access_token=access_token, token_type="bearer")

    def login(self, db: Session, *, email: str, password: str) -> LoginResponse:
        user = crud_user.get_by_email(db, email=email)
        if not user or not verify_password(password, user.hashed_password):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Incorrect email or password",
            )

        if not user.is_active:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="User is inactive",
            )

        return LoginResponse(token=self._issue_token(user), user=UserSchema.model_validate(user))

    async def register(self, db: Session, *, user_in: UserCreate) -> LoginResponse:
        if crud_user.get_by_email(db, email=user_in.email):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="An account with this email already exists",
            )

        user = crud_user.create(
            db,
            obj_in={
                "first_name": user_in.first_name,
                "last_name": user_in.last_name,
                "email": user_in.email.lower(),
                "phone": user_in.phone,
                "hashed_password": get_password_hash(user_in.password),
                "role": RoleEnum.STUDENT,
                "is_active": True,
            },
        )

        await EmailService.send_email(
            to_email=user.email,
            subject="Welcome to BnOverseas",
            template_name="welcome.html",
            template_context={"first_name": user.first_name},
        )

        return LoginResponse(token=self._issue_token(user), user=UserSchema.model_validate(user))

    def get_session(self, user: Optional[User]) -> SessionResponse:
        if user is None:
            return SessionResponse(user=None)
        return SessionResponse(user=SessionUser.model_validate(user))

    def update_profile(self, db: Session, *, user: User, user_in: UserUpdate) -> User:
        return crud_user.update(db, db_obj=user, obj_in=user_in)


auth_service = AuthService()
