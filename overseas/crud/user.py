from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from overseas.crud.base import CRUDBase
from overseas.models.user import User
from overseas.schemas.user import UserCreate, UserUpdate

class CRUDUser(CRUDBase[User, UserCreate, UserUpdate]):

    def get_by_email(self, db: Session, *, email: str) -> Optional[User]:
        return self._query(db).filter(func.lower(User.email) == email.lower()).first()

user = CRUDUser(User)
