"""
Room allocation workflow.

Invariants maintained here:
- a student holds at most one Active allocation
- a room's current_occupancy equals its number of Active allocations

Both the allocation row and the occupancy change are written in one
transaction. The occupancy increment is conditional on free capacity and the
one-active-per-student rule is backed by a partial unique index, so racing
requests cannot both succeed.
"""

from sqlalchemy.orm import Session

from hostelcare.core.exceptions import ConflictError, InvalidStateError, NotFoundError
from hostelcare.models import Allocation, AllocationStatus
from hostelcare.models.base import utcnow
from hostelcare.repositories import AllocationRepository, RoomRepository, StudentRepository
from hostelcare.services.base_service import BaseService


class AllocationService(BaseService):

    def __init__(self, db_session: Session):
        super().__init__(db_session)
        self.students = StudentRepository(db_session)
        self.rooms = RoomRepository(db_session)
        self.allocations = AllocationRepository(db_session)

    def allocate_room(self, student_id: str, room_id: int, academic_year: str) -> Allocation:
        """
        Allocate a room to a student.

        Args:
            student_id: Student to house
            room_id: Room with at least one free bed
            academic_year: e.g. "2024-2025"

        Returns:
            The new Active allocation

        Raises:
            NotFoundError: student or room does not exist
            ConflictError: student already allocated, or room full
        """
        self._logger.info(f"Allocating room {room_id} to student {student_id} for {academic_year}")

        with self.transaction(
            "allocate room",
            conflict_message="Student already has an active allocation",
        ):
            if self.students.get(student_id) is None:
                raise NotFoundError("Student", student_id)
            room = self.rooms.get(room_id, for_update=True)
            if room is None:
                raise NotFoundError("Room", room_id)

            existing = self.allocations.get_active_for_student(student_id, for_update=True)
            if existing is not None:
                raise ConflictError(
                    "Student already has an active allocation",
                    details={"allocation_id": existing.allocation_id, "room_id": existing.room_id},
                )

            if room.is_full or not self.rooms.try_increment_occupancy(room_id):
                raise ConflictError("Room is at full capacity", details={"room_id": room_id})

            allocation = self.allocations.add(
                Allocation(
                    student_id=student_id,
                    room_id=room_id,
                    academic_year=academic_year,
                    status=AllocationStatus.ACTIVE,
                )
            )

        self._logger.info(f"Allocation {allocation.allocation_id} created")
        return allocation

    def end_allocation(self, allocation_id: int) -> Allocation:
        """
        Move a student out: the allocation becomes Ended and the room frees a bed.

        Raises:
            NotFoundError: allocation does not exist
            InvalidStateError: allocation is not Active
        """
        with self.transaction("end allocation"):
            allocation = self.allocations.get(allocation_id, for_update=True)
            if allocation is None:
                raise NotFoundError("Allocation", allocation_id)
            if not allocation.is_active:
                raise InvalidStateError(
                    f"Allocation is already {allocation.status.value}",
                    details={"allocation_id": allocation_id, "status": allocation.status.value},
                )

            allocation.status = AllocationStatus.ENDED
            allocation.end_date = utcnow()
            self.db.flush()
            self.rooms.decrement_occupancy(allocation.room_id)

        self._logger.info(f"Allocation {allocation_id} ended")
        return allocation
