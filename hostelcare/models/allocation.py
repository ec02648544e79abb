from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hostelcare.models.base import Base, enum_column, utcnow
from hostelcare.models.enums import AllocationStatus

_ACTIVE_ONLY = text("status = 'Active'")


class Allocation(Base):
    """
    Binding of a student to a room for an academic year.

    The partial unique index guarantees at most one Active allocation per
    student regardless of how many writers race.
    """

    __tablename__ = "allocations"
    __table_args__ = (
        Index(
            "uq_allocations_one_active_per_student",
            "student_id",
            unique=True,
            postgresql_where=_ACTIVE_ONLY,
            sqlite_where=_ACTIVE_ONLY,
        ),
        Index("ix_allocations_room_status", "room_id", "status"),
    )

    allocation_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    student_id: Mapped[str] = mapped_column(
        ForeignKey("students.student_id", ondelete="CASCADE"), nullable=False
    )
    room_id: Mapped[int] = mapped_column(ForeignKey("rooms.room_id"), nullable=False)
    academic_year: Mapped[str] = mapped_column(String(20), nullable=False)
    allocation_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    status: Mapped[AllocationStatus] = mapped_column(
        enum_column(AllocationStatus), nullable=False, default=AllocationStatus.ACTIVE
    )
    end_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))

    student: Mapped["Student"] = relationship(back_populates="allocations")
    room: Mapped["Room"] = relationship()

    @property
    def is_active(self) -> bool:
        return self.status is AllocationStatus.ACTIVE
