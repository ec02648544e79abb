from datetime import date, datetime
from typing import List, Optional

from sqlalchemy import Date, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hostelcare.models.base import Base, enum_column, utcnow
from hostelcare.models.enums import Gender


class Student(Base):
    """A resident. The identifier is assigned by the admin who registers the student."""

    __tablename__ = "students"

    student_id: Mapped[str] = mapped_column(String(20), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(String(20))
    department: Mapped[Optional[str]] = mapped_column(String(100))
    year: Mapped[Optional[int]] = mapped_column(Integer)
    gender: Mapped[Gender] = mapped_column(enum_column(Gender), nullable=False)

    # Guardian info
    parent_name: Mapped[Optional[str]] = mapped_column(String(100))
    parent_phone: Mapped[Optional[str]] = mapped_column(String(20))

    date_of_birth: Mapped[Optional[date]] = mapped_column(Date)
    address: Mapped[Optional[str]] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    allocations: Mapped[List["Allocation"]] = relationship(back_populates="student")
    complaints: Mapped[List["Complaint"]] = relationship(back_populates="student")
