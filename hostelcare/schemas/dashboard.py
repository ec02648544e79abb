from typing import Optional

from pydantic import Field

from hostelcare.schemas.common import BaseSchema


class DashboardStats(BaseSchema):
    """
    Admin dashboard counts. A count whose query failed is left as None and
    omitted from the response body.
    """

    total_students: Optional[int] = Field(default=None, alias="totalStudents")
    allocated_students: Optional[int] = Field(default=None, alias="allocatedStudents")
    total_rooms: Optional[int] = Field(default=None, alias="totalRooms")
    occupied_rooms: Optional[int] = Field(default=None, alias="occupiedRooms")
    pending_swaps: Optional[int] = Field(default=None, alias="pendingSwaps")
    pending_complaints: Optional[int] = Field(default=None, alias="pendingComplaints")
