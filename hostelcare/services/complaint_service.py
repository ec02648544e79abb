"""
Core complaint service: filing and status changes.
"""

from typing import Optional

from sqlalchemy.orm import Session

from hostelcare.core.exceptions import NotFoundError
from hostelcare.models import Complaint, ComplaintPriority, ComplaintStatus
from hostelcare.models.base import utcnow
from hostelcare.repositories import ComplaintRepository, StudentRepository
from hostelcare.services.base_service import BaseService


class ComplaintService(BaseService):

    def __init__(self, db_session: Session):
        super().__init__(db_session)
        self.complaints = ComplaintRepository(db_session)
        self.students = StudentRepository(db_session)

    def file_complaint(
        self,
        student_id: str,
        category: str,
        subject: str,
        description: Optional[str] = None,
        priority: Optional[ComplaintPriority] = None,
    ) -> Complaint:
        """
        File a Pending complaint. Priority defaults to Medium.

        Raises:
            NotFoundError: unknown student
        """
        with self.transaction("file complaint"):
            if self.students.get(student_id) is None:
                raise NotFoundError("Student", student_id)

            complaint = self.complaints.add(
                Complaint(
                    student_id=student_id,
                    category=category,
                    subject=subject,
                    description=description,
                    priority=priority or ComplaintPriority.MEDIUM,
                    status=ComplaintStatus.PENDING,
                )
            )

        self._logger.info(f"Complaint {complaint.complaint_id} filed by {student_id}")
        return complaint

    def update_status(
        self,
        complaint_id: int,
        status: ComplaintStatus,
        admin_response: Optional[str] = None,
    ) -> Complaint:
        """
        Change a complaint's status.

        resolved_date is stamped with the current time whenever the new status
        is Resolved or Closed. Any other status leaves it as it was, so it is
        never cleared once set. The response is replaced, so a missing one clears it.

        Raises:
            NotFoundError: no such complaint
        """
        with self.transaction("update complaint"):
            complaint = self.complaints.get(complaint_id, for_update=True)
            if complaint is None:
                raise NotFoundError("Complaint", complaint_id)

            complaint.status = status
            complaint.admin_response = admin_response
            if status.sets_resolved_date:
                complaint.resolved_date = utcnow()

        self._logger.info(f"Complaint {complaint_id} moved to {status.value}")
        return complaint
