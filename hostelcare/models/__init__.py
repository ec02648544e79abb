"""
SQLAlchemy models. Importing this package registers every table on
Base.metadata.
"""

from hostelcare.models.admin_user import AdminUser
from hostelcare.models.allocation import Allocation
from hostelcare.models.base import Base
from hostelcare.models.complaint import Complaint
from hostelcare.models.enums import (
    AdminRole,
    AllocationStatus,
    ComplaintPriority,
    ComplaintStatus,
    Gender,
    HostelGenderType,
    RoomType,
    SwapStatus,
)
from hostelcare.models.hostel import Hostel, Room
from hostelcare.models.student import Student
from hostelcare.models.swap_request import SwapRequest

__all__ = [
    "AdminRole",
    "AdminUser",
    "Allocation",
    "AllocationStatus",
    "Base",
    "Complaint",
    "ComplaintPriority",
    "ComplaintStatus",
    "Gender",
    "Hostel",
    "HostelGenderType",
    "Room",
    "RoomType",
    "Student",
    "SwapRequest",
    "SwapStatus",
]
