from pydantic import Field

from hostelcare.schemas.common import BaseCreateSchema, MessageResponse


class AllocateRoomRequest(BaseCreateSchema):
    student_id: str = Field(..., min_length=1, max_length=20)
    room_id: int = Field(..., gt=0)
    academic_year: str = Field(..., min_length=4, max_length=20, examples=["2024-2025"])


class AllocateRoomResponse(MessageResponse):
    allocation_id: int


class EndAllocationRequest(BaseCreateSchema):
    allocation_id: int = Field(..., gt=0)
