from typing import List, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from hostelcare.models import Allocation, AllocationStatus
from hostelcare.repositories.base_repository import BaseRepository


class AllocationRepository(BaseRepository[Allocation]):

    def __init__(self, db: Session):
        super().__init__(Allocation, db)

    def get_active_for_student(self, student_id: str, for_update: bool = False) -> Optional[Allocation]:
        stmt = select(Allocation).where(
            Allocation.student_id == student_id,
            Allocation.status == AllocationStatus.ACTIVE,
        )
        if for_update:
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_active_for_students(
        self,
        student_ids: Sequence[str],
        for_update: bool = False,
    ) -> List[Allocation]:
        stmt = (
            select(Allocation)
            .where(
                Allocation.student_id.in_(list(student_ids)),
                Allocation.status == AllocationStatus.ACTIVE,
            )
            .order_by(Allocation.allocation_id)
        )
        if for_update:
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        return list(self.db.execute(stmt).scalars())

    def count_allocated_students(self) -> int:
        stmt = select(func.count(func.distinct(Allocation.student_id))).where(
            Allocation.status == AllocationStatus.ACTIVE
        )
        return self.db.execute(stmt).scalar_one()

    def count_occupied_rooms(self) -> int:
        stmt = select(func.count(func.distinct(Allocation.room_id))).where(
            Allocation.status == AllocationStatus.ACTIVE
        )
        return self.db.execute(stmt).scalar_one()
