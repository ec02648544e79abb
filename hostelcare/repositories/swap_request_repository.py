"""
Swap request repository.

Listings join each request with both students and the rooms and hostels
captured when the request was submitted.
"""

from typing import Any, Dict, List

from sqlalchemy import case, or_, select
from sqlalchemy.orm import Session, aliased

from hostelcare.models import Hostel, Room, Student, SwapRequest, SwapStatus
from hostelcare.repositories.base_repository import BaseRepository

STATUS_ORDER = case(
    {
        SwapStatus.PENDING: 1,
        SwapStatus.APPROVED: 2,
        SwapStatus.REJECTED: 3,
    },
    value=SwapRequest.status,
    else_=4,
)


class SwapRequestRepository(BaseRepository[SwapRequest]):

    def __init__(self, db: Session):
        super().__init__(SwapRequest, db)

    def _joined_view(self, with_student_details: bool = False):
        requester = aliased(Student, name="requester")
        target = aliased(Student, name="target")
        requester_room = aliased(Room, name="requester_room")
        target_room = aliased(Room, name="target_room")
        requester_hostel = aliased(Hostel, name="requester_hostel")
        target_hostel = aliased(Hostel, name="target_hostel")

        columns = [
            SwapRequest.swap_id,
            SwapRequest.requester_id,
            SwapRequest.target_id,
            SwapRequest.requester_room_id,
            SwapRequest.target_room_id,
            SwapRequest.reason,
            SwapRequest.status,
            SwapRequest.request_date,
            SwapRequest.resolved_date,
            SwapRequest.resolved_by,
            SwapRequest.admin_remarks,
            requester.name.label("requester_name"),
            target.name.label("target_name"),
            requester_room.room_number.label("requester_room"),
            target_room.room_number.label("target_room"),
            requester_hostel.hostel_name.label("requester_hostel"),
            target_hostel.hostel_name.label("target_hostel"),
        ]
        if with_student_details:
            columns += [
                requester.department.label("requester_dept"),
                requester.year.label("requester_year"),
                target.department.label("target_dept"),
                target.year.label("target_year"),
            ]

        return (
            select(*columns)
            .join(requester, SwapRequest.requester_id == requester.student_id)
            .join(target, SwapRequest.target_id == target.student_id)
            .join(requester_room, SwapRequest.requester_room_id == requester_room.room_id)
            .join(target_room, SwapRequest.target_room_id == target_room.room_id)
            .join(requester_hostel, requester_room.hostel_id == requester_hostel.hostel_id)
            .join(target_hostel, target_room.hostel_id == target_hostel.hostel_id)
        )

    def list_for_student(self, student_id: str) -> List[Dict[str, Any]]:
        """Requests the student made or is the target of, newest first."""
        stmt = (
            self._joined_view()
            .where(or_(SwapRequest.requester_id == student_id, SwapRequest.target_id == student_id))
            .order_by(SwapRequest.request_date.desc(), SwapRequest.swap_id.desc())
        )
        return [dict(row._mapping) for row in self.db.execute(stmt)]

    def list_all(self) -> List[Dict[str, Any]]:
        """Pending first, then Approved, then Rejected; newest first within a status."""
        stmt = (
            self._joined_view(with_student_details=True)
            .order_by(STATUS_ORDER, SwapRequest.request_date.desc(), SwapRequest.swap_id.desc())
        )
        return [dict(row._mapping) for row in self.db.execute(stmt)]

    def count_pending(self) -> int:
        return self.count(SwapRequest.status == SwapStatus.PENDING)
