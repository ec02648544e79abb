from typing import Any, Dict, List

from sqlalchemy import case, select
from sqlalchemy.orm import Session

from hostelcare.models import Complaint, ComplaintStatus, Student
from hostelcare.repositories.base_repository import BaseRepository

STATUS_ORDER = case(
    {
        ComplaintStatus.PENDING: 1,
        ComplaintStatus.IN_PROGRESS: 2,
        ComplaintStatus.RESOLVED: 3,
        ComplaintStatus.CLOSED: 4,
    },
    value=Complaint.status,
    else_=5,
)

OPEN_STATUSES = (ComplaintStatus.PENDING, ComplaintStatus.IN_PROGRESS)


class ComplaintRepository(BaseRepository[Complaint]):

    def __init__(self, db: Session):
        super().__init__(Complaint, db)

    def list_for_student(self, student_id: str) -> List[Complaint]:
        stmt = (
            select(Complaint)
            .where(Complaint.student_id == student_id)
            .order_by(Complaint.complaint_date.desc(), Complaint.complaint_id.desc())
        )
        return list(self.db.execute(stmt).scalars())

    def list_all_with_student(self) -> List[Dict[str, Any]]:
        """Every complaint with its student, ordered by status then newest first."""
        stmt = (
            select(
                *Complaint.__table__.columns,
                Student.name.label("student_name"),
                Student.department,
                Student.year,
                Student.phone.label("student_phone"),
            )
            .join(Student, Complaint.student_id == Student.student_id)
            .order_by(STATUS_ORDER, Complaint.complaint_date.desc(), Complaint.complaint_id.desc())
        )
        return [dict(row._mapping) for row in self.db.execute(stmt)]

    def count_open(self) -> int:
        return self.count(Complaint.status.in_(OPEN_STATUSES))
