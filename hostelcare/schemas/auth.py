"""
Login request and response schemas. Password hashes are never part of a response.
"""

from typing import Optional

from pydantic import Field

from hostelcare.models.enums import AdminRole
from hostelcare.schemas.common import BaseCreateSchema, BaseSchema


class StudentLoginRequest(BaseCreateSchema):
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1)


class AdminLoginRequest(BaseCreateSchema):
    username: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1)


class StudentProfile(BaseSchema):
    student_id: str
    name: str
    email: str
    department: Optional[str] = None
    year: Optional[int] = None


class AdminProfile(BaseSchema):
    admin_id: int
    username: str
    full_name: str
    role: AdminRole


class StudentLoginResponse(BaseSchema):
    success: bool = True
    student: StudentProfile


class AdminLoginResponse(BaseSchema):
    success: bool = True
    admin: AdminProfile
