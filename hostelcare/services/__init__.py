from hostelcare.services.allocation_service import AllocationService
from hostelcare.services.auth_service import AuthService
from hostelcare.services.base_service import BaseService
from hostelcare.services.complaint_service import ComplaintService
from hostelcare.services.reporting_service import ReportingService
from hostelcare.services.student_service import StudentService
from hostelcare.services.swap_service import SwapService

__all__ = [
    "AllocationService",
    "AuthService",
    "BaseService",
    "ComplaintService",
    "ReportingService",
    "StudentService",
    "SwapService",
]
