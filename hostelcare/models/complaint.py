from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hostelcare.models.base import Base, enum_column, utcnow
from hostelcare.models.enums import ComplaintPriority, ComplaintStatus


class Complaint(Base):
    """A student complaint. resolved_date is set on entering Resolved or Closed and never cleared."""

    __tablename__ = "complaints"

    complaint_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    student_id: Mapped[str] = mapped_column(
        ForeignKey("students.student_id", ondelete="CASCADE"), nullable=False, index=True
    )
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    subject: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    priority: Mapped[ComplaintPriority] = mapped_column(
        enum_column(ComplaintPriority), nullable=False, default=ComplaintPriority.MEDIUM
    )
    status: Mapped[ComplaintStatus] = mapped_column(
        enum_column(ComplaintStatus), nullable=False, default=ComplaintStatus.PENDING, index=True
    )
    complaint_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    admin_response: Mapped[Optional[str]] = mapped_column(Text)
    resolved_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))

    student: Mapped["Student"] = relationship(back_populates="complaints")
