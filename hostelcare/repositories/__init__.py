from hostelcare.repositories.admin_repository import AdminRepository
from hostelcare.repositories.allocation_repository import AllocationRepository
from hostelcare.repositories.base_repository import BaseRepository
from hostelcare.repositories.complaint_repository import ComplaintRepository
from hostelcare.repositories.hostel_repository import HostelRepository, RoomRepository
from hostelcare.repositories.student_repository import StudentRepository
from hostelcare.repositories.swap_request_repository import SwapRequestRepository

__all__ = [
    "AdminRepository",
    "AllocationRepository",
    "BaseRepository",
    "ComplaintRepository",
    "HostelRepository",
    "RoomRepository",
    "StudentRepository",
    "SwapRequestRepository",
]
