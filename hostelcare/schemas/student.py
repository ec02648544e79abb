"""
Student schemas: registration, admin listing, room view and swap targets.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import EmailStr, Field

from hostelcare.models.enums import AllocationStatus, Gender, RoomType
from hostelcare.schemas.common import BaseCreateSchema, BaseSchema


class StudentCreate(BaseCreateSchema):
    student_id: str = Field(..., min_length=1, max_length=20)
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)
    phone: Optional[str] = Field(default=None, max_length=20)
    department: Optional[str] = Field(default=None, max_length=100)
    year: Optional[int] = Field(default=None, ge=1, le=6)
    gender: Gender
    parent_name: Optional[str] = Field(default=None, max_length=100)
    parent_phone: Optional[str] = Field(default=None, max_length=20)
    date_of_birth: Optional[date] = None
    address: Optional[str] = None


class StudentListItem(BaseSchema):
    """A student with their active allocation, if any."""

    student_id: str
    name: str
    email: str
    phone: Optional[str] = None
    department: Optional[str] = None
    year: Optional[int] = None
    gender: Gender
    parent_name: Optional[str] = None
    parent_phone: Optional[str] = None
    date_of_birth: Optional[date] = None
    address: Optional[str] = None
    created_at: datetime
    allocation_id: Optional[int] = None
    hostel_name: Optional[str] = None
    room_number: Optional[str] = None
    allocation_date: Optional[datetime] = None
    allocation_status: Optional[AllocationStatus] = None


class RoomDetails(BaseSchema):
    student_id: str
    name: str
    email: str
    phone: Optional[str] = None
    department: Optional[str] = None
    year: Optional[int] = None
    hostel_name: str
    warden_name: Optional[str] = None
    warden_phone: Optional[str] = None
    room_id: int
    room_number: str
    floor: int
    capacity: int
    current_occupancy: int
    room_type: RoomType
    has_attached_bathroom: bool
    allocation_date: datetime
    academic_year: str


class Roommate(BaseSchema):
    student_id: str
    name: str
    department: Optional[str] = None
    year: Optional[int] = None
    phone: Optional[str] = None
    email: str


class StudentRoomResponse(BaseSchema):
    allocated: bool
    message: Optional[str] = None
    room_details: Optional[RoomDetails] = Field(default=None, alias="roomDetails")
    roommates: Optional[List[Roommate]] = None


class SwapTarget(BaseSchema):
    student_id: str
    name: str
    department: Optional[str] = None
    year: Optional[int] = None
    hostel_name: str
    room_number: str
    room_type: RoomType
