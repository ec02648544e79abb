from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from hostelcare.models import AdminUser
from hostelcare.repositories.base_repository import BaseRepository


class AdminRepository(BaseRepository[AdminUser]):

    def __init__(self, db: Session):
        super().__init__(AdminUser, db)

    def get_by_username(self, username: str) -> Optional[AdminUser]:
        stmt = select(AdminUser).where(AdminUser.username == username)
        return self.db.execute(stmt).scalar_one_or_none()
