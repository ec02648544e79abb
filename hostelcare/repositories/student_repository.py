"""
Student repository: lookups, the admin listing and the student's own room view.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import and_, select
from sqlalchemy.orm import Session

from hostelcare.models import Allocation, AllocationStatus, Hostel, Room, Student
from hostelcare.repositories.base_repository import BaseRepository


class StudentRepository(BaseRepository[Student]):

    def __init__(self, db: Session):
        super().__init__(Student, db)

    def get_by_email(self, email: str) -> Optional[Student]:
        stmt = select(Student).where(Student.email == email)
        return self.db.execute(stmt).scalar_one_or_none()

    def exists_with_id_or_email(self, student_id: str, email: str) -> bool:
        stmt = select(Student.student_id).where(
            (Student.student_id == student_id) | (Student.email == email)
        )
        return self.db.execute(stmt).first() is not None

    def list_with_active_allocation(self) -> List[Dict[str, Any]]:
        """All students, newest first, joined with their active allocation if any."""
        stmt = (
            select(
                Student.student_id,
                Student.name,
                Student.email,
                Student.phone,
                Student.department,
                Student.year,
                Student.gender,
                Student.parent_name,
                Student.parent_phone,
                Student.date_of_birth,
                Student.address,
                Student.created_at,
                Allocation.allocation_id,
                Hostel.hostel_name,
                Room.room_number,
                Allocation.allocation_date,
                Allocation.status.label("allocation_status"),
            )
            .outerjoin(
                Allocation,
                and_(
                    Allocation.student_id == Student.student_id,
                    Allocation.status == AllocationStatus.ACTIVE,
                ),
            )
            .outerjoin(Room, Allocation.room_id == Room.room_id)
            .outerjoin(Hostel, Room.hostel_id == Hostel.hostel_id)
            .order_by(Student.created_at.desc())
        )
        return [dict(row._mapping) for row in self.db.execute(stmt)]

    def get_room_details(self, student_id: str) -> Optional[Dict[str, Any]]:
        """The student's active room joined with hostel and allocation, or None."""
        stmt = (
            select(
                Student.student_id,
                Student.name,
                Student.email,
                Student.phone,
                Student.department,
                Student.year,
                Hostel.hostel_name,
                Hostel.warden_name,
                Hostel.warden_phone,
                Room.room_id,
                Room.room_number,
                Room.floor,
                Room.capacity,
                Room.current_occupancy,
                Room.room_type,
                Room.has_attached_bathroom,
                Allocation.allocation_date,
                Allocation.academic_year,
            )
            .select_from(Allocation)
            .join(Student, Allocation.student_id == Student.student_id)
            .join(Room, Allocation.room_id == Room.room_id)
            .join(Hostel, Room.hostel_id == Hostel.hostel_id)
            .where(
                Allocation.student_id == student_id,
                Allocation.status == AllocationStatus.ACTIVE,
            )
        )
        row = self.db.execute(stmt).first()
        return dict(row._mapping) if row else None

    def list_roommates(self, student_id: str, room_id: int) -> List[Dict[str, Any]]:
        stmt = (
            select(
                Student.student_id,
                Student.name,
                Student.department,
                Student.year,
                Student.phone,
                Student.email,
            )
            .select_from(Allocation)
            .join(Student, Allocation.student_id == Student.student_id)
            .where(
                Allocation.room_id == room_id,
                Allocation.student_id != student_id,
                Allocation.status == AllocationStatus.ACTIVE,
            )
            .order_by(Student.name)
        )
        return [dict(row._mapping) for row in self.db.execute(stmt)]

    def list_swap_targets(self, student_id: str) -> List[Dict[str, Any]]:
        """Other actively allocated students of the same gender."""
        own_gender = (
            select(Student.gender)
            .where(Student.student_id == student_id)
            .scalar_subquery()
        )
        stmt = (
            select(
                Student.student_id,
                Student.name,
                Student.department,
                Student.year,
                Hostel.hostel_name,
                Room.room_number,
                Room.room_type,
            )
            .select_from(Allocation)
            .join(Student, Allocation.student_id == Student.student_id)
            .join(Room, Allocation.room_id == Room.room_id)
            .join(Hostel, Room.hostel_id == Hostel.hostel_id)
            .where(
                Allocation.student_id != student_id,
                Allocation.status == AllocationStatus.ACTIVE,
                Student.gender == own_gender,
            )
            .order_by(Hostel.hostel_name, Room.room_number)
        )
        return [dict(row._mapping) for row in self.db.execute(stmt)]
