from fastapi import HTTPException, status

from overseas.core.constants import RoleEnum, ADMIN_ROLES
from overseas.models.user import User


class PermissionHelper:

    @staticmethod
    def is_admin(user: User) -> bool:
        return user.role in ADMIN_ROLES

    @staticmethod
    def is_student(user: User) -> bool:
        return user.role == RoleEnum.STUDENT

    @staticmethod
    def require_admin(user: User) -> None:
        if not PermissionHelper.is_admin(user):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Admin access required"
            )

    @staticmethod
    def require_student(user: User, action: str = "enroll in courses") -> None:
        if not PermissionHelper.is_student(user):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Only students can {action}"
            )
