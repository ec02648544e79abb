# hostelcare/models/hostel.py
"""
Hostel and room models.

A room's current_occupancy is a denormalized count of the Active
allocations that reference it and is only changed by the allocation
workflow.
"""

from typing import List, Optional

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hostelcare.models.base import Base, enum_column
from hostelcare.models.enums import HostelGenderType, RoomType

__all__ = ["Hostel", "Room"]


class Hostel(Base):
    __tablename__ = "hostels"

    hostel_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    hostel_name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    gender_type: Mapped[HostelGenderType] = mapped_column(
        enum_column(HostelGenderType), nullable=False
    )
    warden_name: Mapped[Optional[str]] = mapped_column(String(100))
    warden_phone: Mapped[Optional[str]] = mapped_column(String(20))

    rooms: Mapped[List["Room"]] = relationship(
        back_populates="hostel",
        order_by="Room.room_number",
    )


class Room(Base):
    __tablename__ = "rooms"
    __table_args__ = (
        UniqueConstraint("hostel_id", "room_number", name="uq_rooms_hostel_room_number"),
        CheckConstraint("capacity > 0", name="ck_rooms_capacity_positive"),
        CheckConstraint(
            "current_occupancy >= 0 AND current_occupancy <= capacity",
            name="ck_rooms_occupancy_within_capacity",
        ),
    )

    room_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    hostel_id: Mapped[int] = mapped_column(
        ForeignKey("hostels.hostel_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    room_number: Mapped[str] = mapped_column(String(20), nullable=False)
    floor: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    current_occupancy: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    room_type: Mapped[RoomType] = mapped_column(
        enum_column(RoomType), nullable=False, default=RoomType.DOUBLE
    )
    has_attached_bathroom: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    hostel: Mapped[Hostel] = relationship(back_populates="rooms")

    @property
    def is_full(self) -> bool:
        return self.current_occupancy >= self.capacity
