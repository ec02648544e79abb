"""
Root test configuration and fixtures.

Every test gets its own file-backed SQLite database. Services are exercised
directly through `db_session`; routes through `client`, whose session
factory dependency is pointed at the same database.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict

# Configure settings before anything imports hostelcare
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ["PASSWORD_BCRYPT_ROUNDS"] = "4"
os.environ.pop("FIRST_ADMIN_USERNAME", None)
os.environ.pop("FIRST_ADMIN_PASSWORD", None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import func, select

from hostelcare.api.deps import get_session_factory
from hostelcare.config.database import build_engine, build_session_factory
from hostelcare.config.security import get_password_hash
from hostelcare.main import create_app
from hostelcare.models import (
    AdminRole,
    AdminUser,
    Allocation,
    AllocationStatus,
    Base,
    Gender,
    Hostel,
    HostelGenderType,
    Room,
    RoomType,
    Student,
)

TEST_PASSWORD = "secret123"


# ============================================================================
# Database fixtures
# ============================================================================


@pytest.fixture
def engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'hostelcare.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    app = create_app()
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    return TestClient(app)


# ============================================================================
# Test Data Factories
# ============================================================================


def create_student(
    session,
    student_id: str,
    name: str,
    gender: Gender = Gender.MALE,
    department: str = "Computer Science",
    year: int = 2,
    password: str = TEST_PASSWORD,
) -> Student:
    student = Student(
        student_id=student_id,
        name=name,
        email=f"{student_id.lower()}@college.edu",
        password_hash=get_password_hash(password),
        phone="9876543210",
        department=department,
        year=year,
        gender=gender,
    )
    session.add(student)
    session.flush()
    return student


def create_room(
    session,
    hostel: Hostel,
    room_number: str,
    capacity: int = 2,
    floor: int = 1,
    room_type: RoomType = RoomType.DOUBLE,
) -> Room:
    room = Room(
        hostel_id=hostel.hostel_id,
        room_number=room_number,
        floor=floor,
        capacity=capacity,
        current_occupancy=0,
        room_type=room_type,
        has_attached_bathroom=False,
    )
    session.add(room)
    session.flush()
    return room


def place_student(session, student: Student, room: Room, academic_year: str = "2024-2025") -> Allocation:
    """Seed an Active allocation and keep the room's occupancy in step."""
    allocation = Allocation(
        student_id=student.student_id,
        room_id=room.room_id,
        academic_year=academic_year,
        status=AllocationStatus.ACTIVE,
    )
    room.current_occupancy += 1
    session.add(allocation)
    session.flush()
    return allocation


def occupancy(session, room_id: int) -> int:
    return session.execute(
        select(Room.current_occupancy).where(Room.room_id == room_id)
    ).scalar_one()


def active_allocations(session, room_id: int) -> int:
    return session.execute(
        select(func.count())
        .select_from(Allocation)
        .where(Allocation.room_id == room_id, Allocation.status == AllocationStatus.ACTIVE)
    ).scalar_one()


def assert_occupancy_matches_allocations(session) -> None:
    for room_id in session.execute(select(Room.room_id)).scalars():
        assert occupancy(session, room_id) == active_allocations(session, room_id), room_id


def assert_one_active_allocation_per_student(session) -> None:
    counts = session.execute(
        select(Allocation.student_id, func.count())
        .where(Allocation.status == AllocationStatus.ACTIVE)
        .group_by(Allocation.student_id)
    ).all()
    assert all(count == 1 for _, count in counts), counts


@dataclass
class Campus:
    boys_hostel: Hostel
    girls_hostel: Hostel
    rooms: Dict[str, Room]
    students: Dict[str, Student]
    admin: AdminUser


@pytest.fixture
def campus(db_session) -> Campus:
    """
    Two hostels and five students:
    S1 in A-101, S2 and S3 in A-102 (full), S4 unallocated, S5 (female)
    in B-201. A-201 is an empty single room.
    """
    boys = Hostel(
        hostel_name="Aryabhata Hall",
        gender_type=HostelGenderType.MALE,
        warden_name="Mr. Rao",
        warden_phone="9000000001",
    )
    girls = Hostel(
        hostel_name="Bhaskara Hall",
        gender_type=HostelGenderType.FEMALE,
        warden_name="Ms. Iyer",
        warden_phone="9000000002",
    )
    db_session.add_all([boys, girls])
    db_session.flush()

    rooms = {
        "A-101": create_room(db_session, boys, "101", capacity=2, floor=1),
        "A-102": create_room(db_session, boys, "102", capacity=2, floor=1),
        "A-201": create_room(db_session, boys, "201", capacity=1, floor=2, room_type=RoomType.SINGLE),
        "B-201": create_room(db_session, girls, "201", capacity=3, floor=2, room_type=RoomType.TRIPLE),
    }
    students = {
        "S1": create_student(db_session, "S1", "Arjun"),
        "S2": create_student(db_session, "S2", "Bharat", department="Mechanical", year=3),
        "S3": create_student(db_session, "S3", "Chetan"),
        "S4": create_student(db_session, "S4", "Dev"),
        "S5": create_student(db_session, "S5", "Esha", gender=Gender.FEMALE),
    }
    place_student(db_session, students["S1"], rooms["A-101"])
    place_student(db_session, students["S2"], rooms["A-102"])
    place_student(db_session, students["S3"], rooms["A-102"])
    place_student(db_session, students["S5"], rooms["B-201"])

    admin = AdminUser(
        username="warden",
        password_hash=get_password_hash(TEST_PASSWORD),
        full_name="Chief Warden",
        role=AdminRole.ADMIN,
    )
    db_session.add(admin)
    db_session.commit()

    return Campus(boys_hostel=boys, girls_hostel=girls, rooms=rooms, students=students, admin=admin)
