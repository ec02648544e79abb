# hostelcare/repositories/hostel_repository.py
"""
Hostel and room repositories.

Occupancy is only ever changed through conditional UPDATE statements so the
database rejects an increment past capacity even when two transactions race.
"""

from typing import Any, Dict, List

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from hostelcare.models import Hostel, Room
from hostelcare.repositories.base_repository import BaseRepository


class HostelRepository(BaseRepository[Hostel]):

    def __init__(self, db: Session):
        super().__init__(Hostel, db)

    def list_with_room_totals(self) -> List[Dict[str, Any]]:
        """Every hostel with its room count, total beds and occupied beds."""
        stmt = (
            select(
                Hostel.hostel_id,
                Hostel.hostel_name,
                Hostel.gender_type,
                Hostel.warden_name,
                Hostel.warden_phone,
                func.count(Room.room_id).label("total_rooms_count"),
                func.coalesce(func.sum(Room.capacity), 0).label("total_capacity"),
                func.coalesce(func.sum(Room.current_occupancy), 0).label("total_occupied"),
            )
            .outerjoin(Room, Room.hostel_id == Hostel.hostel_id)
            .group_by(
                Hostel.hostel_id,
                Hostel.hostel_name,
                Hostel.gender_type,
                Hostel.warden_name,
                Hostel.warden_phone,
            )
            .order_by(Hostel.hostel_name)
        )
        return [dict(row._mapping) for row in self.db.execute(stmt)]


class RoomRepository(BaseRepository[Room]):

    def __init__(self, db: Session):
        super().__init__(Room, db)

    def _room_view(self):
        return (
            select(
                Room.room_id,
                Room.hostel_id,
                Room.room_number,
                Room.floor,
                Room.capacity,
                Room.current_occupancy,
                Room.room_type,
                Room.has_attached_bathroom,
                Hostel.hostel_name,
                Hostel.gender_type,
                (Room.capacity - Room.current_occupancy).label("available_beds"),
            )
            .join(Hostel, Room.hostel_id == Hostel.hostel_id)
        )

    def list_for_hostel(self, hostel_id: int) -> List[Dict[str, Any]]:
        stmt = (
            self._room_view()
            .where(Room.hostel_id == hostel_id)
            .order_by(Room.floor, Room.room_number)
        )
        return [dict(row._mapping) for row in self.db.execute(stmt)]

    def list_available(self) -> List[Dict[str, Any]]:
        """Rooms with at least one free bed."""
        stmt = (
            self._room_view()
            .where(Room.current_occupancy < Room.capacity)
            .order_by(Hostel.hostel_name, Room.floor, Room.room_number)
        )
        return [dict(row._mapping) for row in self.db.execute(stmt)]

    def try_increment_occupancy(self, room_id: int) -> bool:
        """
        Take one bed. Returns False when the room is already full; the
        capacity check and the increment are a single statement.
        """
        stmt = (
            update(Room)
            .where(Room.room_id == room_id, Room.current_occupancy < Room.capacity)
            .values(current_occupancy=Room.current_occupancy + 1)
            .execution_options(synchronize_session=False)
        )
        result = self.db.execute(stmt)
        self._expire(room_id)
        return result.rowcount == 1

    def decrement_occupancy(self, room_id: int) -> bool:
        stmt = (
            update(Room)
            .where(Room.room_id == room_id, Room.current_occupancy > 0)
            .values(current_occupancy=Room.current_occupancy - 1)
            .execution_options(synchronize_session=False)
        )
        result = self.db.execute(stmt)
        self._expire(room_id)
        return result.rowcount == 1

    def _expire(self, room_id: int) -> None:
        # the UPDATE bypassed the identity map
        room = self.db.identity_map.get(self.db.identity_key(Room, room_id))
        if room is not None:
            self.db.expire(room, ["current_occupancy"])
