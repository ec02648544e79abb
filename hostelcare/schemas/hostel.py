from typing import Optional

from hostelcare.models.enums import HostelGenderType, RoomType
from hostelcare.schemas.common import BaseSchema


class HostelSummary(BaseSchema):
    hostel_id: int
    hostel_name: str
    gender_type: HostelGenderType
    warden_name: Optional[str] = None
    warden_phone: Optional[str] = None
    total_rooms_count: int
    total_capacity: int
    total_occupied: int


class RoomView(BaseSchema):
    """A room with its hostel and remaining beds."""

    room_id: int
    hostel_id: int
    room_number: str
    floor: int
    capacity: int
    current_occupancy: int
    room_type: RoomType
    has_attached_bathroom: bool
    hostel_name: str
    gender_type: HostelGenderType
    available_beds: int
