"""
Complaint schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from hostelcare.models.enums import ComplaintPriority, ComplaintStatus
from hostelcare.schemas.common import BaseCreateSchema, BaseSchema


class ComplaintCreate(BaseCreateSchema):
    student_id: str = Field(..., min_length=1, max_length=20)
    category: str = Field(..., min_length=1, max_length=50)
    subject: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    # None and a missing field both fall back to Medium
    priority: Optional[ComplaintPriority] = None


class ComplaintCreated(BaseSchema):
    success: bool = True
    complaint_id: int


class ComplaintStatusUpdate(BaseCreateSchema):
    complaint_id: int = Field(..., gt=0)
    status: ComplaintStatus
    admin_response: Optional[str] = None


class ComplaintRead(BaseSchema):
    complaint_id: int
    student_id: str
    category: str
    subject: str
    description: Optional[str] = None
    priority: ComplaintPriority
    status: ComplaintStatus
    complaint_date: datetime
    admin_response: Optional[str] = None
    resolved_date: Optional[datetime] = None


class AdminComplaintView(ComplaintRead):
    student_name: str
    department: Optional[str] = None
    year: Optional[int] = None
    student_phone: Optional[str] = None
