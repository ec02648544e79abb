from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from hostelcare.models.base import Base, enum_column, utcnow
from hostelcare.models.enums import SwapStatus


class SwapRequest(Base):
    """
    A student's proposal to exchange rooms with another student.

    requester_room_id and target_room_id are captured at submission and
    are not updated when either student is later moved.
    """

    __tablename__ = "swap_requests"

    swap_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    requester_id: Mapped[str] = mapped_column(
        ForeignKey("students.student_id", ondelete="CASCADE"), nullable=False, index=True
    )
    target_id: Mapped[str] = mapped_column(
        ForeignKey("students.student_id", ondelete="CASCADE"), nullable=False, index=True
    )
    requester_room_id: Mapped[int] = mapped_column(ForeignKey("rooms.room_id"), nullable=False)
    target_room_id: Mapped[int] = mapped_column(ForeignKey("rooms.room_id"), nullable=False)
    reason: Mapped[Optional[str]] = mapped_column(Text)
    status: Mapped[SwapStatus] = mapped_column(
        enum_column(SwapStatus), nullable=False, default=SwapStatus.PENDING, index=True
    )
    request_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    resolved_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    resolved_by: Mapped[Optional[str]] = mapped_column(String(50))
    admin_remarks: Mapped[Optional[str]] = mapped_column(Text)
