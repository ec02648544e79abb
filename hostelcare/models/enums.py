"""
Database enums.

Values are stored verbatim in the database, so they double as the
strings clients send and receive.
"""

import enum


class Gender(str, enum.Enum):
    """Student gender."""
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class HostelGenderType(str, enum.Enum):
    """Which students a hostel houses."""
    MALE = "Male"
    FEMALE = "Female"
    MIXED = "Mixed"


class RoomType(str, enum.Enum):
    SINGLE = "Single"
    DOUBLE = "Double"
    TRIPLE = "Triple"
    DORMITORY = "Dormitory"


class AllocationStatus(str, enum.Enum):
    """Allocation lifecycle. Only ACTIVE counts towards room occupancy."""
    ACTIVE = "Active"
    ENDED = "Ended"
    CANCELLED = "Cancelled"


class SwapStatus(str, enum.Enum):
    """Swap request status. APPROVED and REJECTED are terminal."""
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"

    @property
    def is_resolved(self) -> bool:
        return self is not SwapStatus.PENDING


class ComplaintPriority(str, enum.Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    URGENT = "Urgent"


class ComplaintStatus(str, enum.Enum):
    """Complaint resolution status."""
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"
    CLOSED = "Closed"

    @property
    def sets_resolved_date(self) -> bool:
        return self in (ComplaintStatus.RESOLVED, ComplaintStatus.CLOSED)


class AdminRole(str, enum.Enum):
    ADMIN = "Admin"
    WARDEN = "Warden"
    SUPER_ADMIN = "Super Admin"
