"""
Swap request schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from hostelcare.models.enums import SwapStatus
from hostelcare.schemas.common import BaseCreateSchema, BaseSchema


class SwapRequestCreate(BaseCreateSchema):
    requester_id: str = Field(..., min_length=1, max_length=20)
    target_id: str = Field(..., min_length=1, max_length=20)
    reason: Optional[str] = Field(default=None, max_length=2000)


class SwapRequestCreated(BaseSchema):
    success: bool = True
    swap_id: int


class SwapApproveRequest(BaseCreateSchema):
    swap_id: int = Field(..., gt=0)
    admin_username: str = Field(..., min_length=1, max_length=50)


class SwapRejectRequest(SwapApproveRequest):
    remarks: Optional[str] = Field(default=None, max_length=2000)


class SwapRequestView(BaseSchema):
    """
    A swap request joined with both students, their snapshotted rooms and
    hostels. Department and year are only filled in the admin listing.
    """

    swap_id: int
    requester_id: str
    target_id: str
    requester_room_id: int
    target_room_id: int
    reason: Optional[str] = None
    status: SwapStatus
    request_date: datetime
    resolved_date: Optional[datetime] = None
    resolved_by: Optional[str] = None
    admin_remarks: Optional[str] = None
    requester_name: str
    target_name: str
    requester_room: str
    target_room: str
    requester_hostel: str
    target_hostel: str
    requester_dept: Optional[str] = None
    requester_year: Optional[int] = None
    target_dept: Optional[str] = None
    target_year: Optional[int] = None
