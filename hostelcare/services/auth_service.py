"""
Credential checks for students and admins.
"""

from sqlalchemy.orm import Session

from hostelcare.config.security import verify_password
from hostelcare.core.exceptions import AuthenticationError
from hostelcare.models import AdminUser, Student
from hostelcare.repositories import AdminRepository, StudentRepository
from hostelcare.services.base_service import BaseService


class AuthService(BaseService):

    def __init__(self, db_session: Session):
        super().__init__(db_session)
        self.students = StudentRepository(db_session)
        self.admins = AdminRepository(db_session)

    def authenticate_student(self, email: str, password: str) -> Student:
        """
        Return the student whose email and password match.

        Raises:
            AuthenticationError: unknown email or wrong password; the two
                are indistinguishable to the caller
        """
        student = self.students.get_by_email(email)
        if student is None or not verify_password(password, student.password_hash):
            self._logger.info(f"Failed student login for {email}")
            raise AuthenticationError()
        self._logger.info(f"Student login: {student.student_id}")
        return student

    def authenticate_admin(self, username: str, password: str) -> AdminUser:
        admin = self.admins.get_by_username(username)
        if admin is None or not verify_password(password, admin.password_hash):
            self._logger.info(f"Failed admin login for {username}")
            raise AuthenticationError()
        self._logger.info(f"Admin login: {admin.username}")
        return admin
