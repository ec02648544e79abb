"""
Student registration and the student-facing read views.
"""

from typing import List

from sqlalchemy.orm import Session

from hostelcare.config.security import get_password_hash
from hostelcare.core.exceptions import ConflictError
from hostelcare.models import Student
from hostelcare.repositories import ComplaintRepository, StudentRepository, SwapRequestRepository
from hostelcare.schemas.complaint import ComplaintRead
from hostelcare.schemas.student import (
    RoomDetails,
    Roommate,
    StudentCreate,
    StudentRoomResponse,
    SwapTarget,
)
from hostelcare.schemas.swap import SwapRequestView
from hostelcare.services.base_service import BaseService


class StudentService(BaseService):

    def __init__(self, db_session: Session):
        super().__init__(db_session)
        self.students = StudentRepository(db_session)
        self.complaints = ComplaintRepository(db_session)
        self.swaps = SwapRequestRepository(db_session)

    def add_student(self, request: StudentCreate) -> Student:
        """
        Register a student. The password is stored only as a salted hash.

        Raises:
            ConflictError: the student id or email is already registered
        """
        duplicate_message = "A student with this ID or email already exists"
        with self.transaction("add student", conflict_message=duplicate_message):
            if self.students.exists_with_id_or_email(request.student_id, str(request.email)):
                raise ConflictError(duplicate_message)

            data = request.model_dump(exclude={"password"})
            data["email"] = str(request.email)
            student = self.students.add(
                Student(**data, password_hash=get_password_hash(request.password))
            )

        self._logger.info(f"Student {student.student_id} added")
        return student

    def get_room(self, student_id: str) -> StudentRoomResponse:
        """The student's room and roommates; allocated=False when they have none."""
        details = self.students.get_room_details(student_id)
        if details is None:
            return StudentRoomResponse(allocated=False, message="No room allocated yet")

        roommates = self.students.list_roommates(student_id, details["room_id"])
        return StudentRoomResponse(
            allocated=True,
            room_details=RoomDetails.model_validate(details),
            roommates=[Roommate.model_validate(r) for r in roommates],
        )

    def list_swap_targets(self, student_id: str) -> List[SwapTarget]:
        return [SwapTarget.model_validate(r) for r in self.students.list_swap_targets(student_id)]

    def list_swap_requests(self, student_id: str) -> List[SwapRequestView]:
        return [SwapRequestView.model_validate(r) for r in self.swaps.list_for_student(student_id)]

    def list_complaints(self, student_id: str) -> List[ComplaintRead]:
        return [ComplaintRead.model_validate(c) for c in self.complaints.list_for_student(student_id)]
