"""
Admin console endpoints: listings, allocation, swap resolution, complaints,
student registration and dashboard.
"""

from typing import List

from fastapi import APIRouter, Depends

from hostelcare.api import deps
from hostelcare.schemas.allocation import (
    AllocateRoomRequest,
    AllocateRoomResponse,
    EndAllocationRequest,
)
from hostelcare.schemas.auth import AdminLoginRequest, AdminLoginResponse, AdminProfile
from hostelcare.schemas.common import MessageResponse
from hostelcare.schemas.complaint import AdminComplaintView, ComplaintStatusUpdate
from hostelcare.schemas.dashboard import DashboardStats
from hostelcare.schemas.hostel import HostelSummary, RoomView
from hostelcare.schemas.student import StudentCreate, StudentListItem
from hostelcare.schemas.swap import SwapApproveRequest, SwapRejectRequest, SwapRequestView
from hostelcare.services import (
    AllocationService,
    AuthService,
    ComplaintService,
    ReportingService,
    StudentService,
    SwapService,
)

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post("/login", response_model=AdminLoginResponse)
def admin_login(
    payload: AdminLoginRequest,
    service: AuthService = Depends(deps.get_auth_service),
) -> AdminLoginResponse:
    admin = service.authenticate_admin(payload.username, payload.password)
    return AdminLoginResponse(admin=AdminProfile.model_validate(admin))


# --- Listings -------------------------------------------------------------------

@router.get("/students", response_model=List[StudentListItem])
def list_students(service: ReportingService = Depends(deps.get_reporting_service)):
    return service.list_students()


@router.get("/hostels", response_model=List[HostelSummary])
def list_hostels(service: ReportingService = Depends(deps.get_reporting_service)):
    return service.list_hostels()


@router.get("/hostel/{hostel_id}/rooms", response_model=List[RoomView])
def list_hostel_rooms(
    hostel_id: int,
    service: ReportingService = Depends(deps.get_reporting_service),
):
    return service.list_hostel_rooms(hostel_id)


@router.get("/rooms/available", response_model=List[RoomView])
def list_available_rooms(service: ReportingService = Depends(deps.get_reporting_service)):
    return service.list_available_rooms()


@router.get("/complaints", response_model=List[AdminComplaintView])
def list_complaints(service: ReportingService = Depends(deps.get_reporting_service)):
    return service.list_complaints()


@router.get("/swap-requests", response_model=List[SwapRequestView])
def list_swap_requests(service: ReportingService = Depends(deps.get_reporting_service)):
    return service.list_swap_requests()


@router.get("/dashboard/stats", response_model=DashboardStats, response_model_exclude_none=True)
def dashboard_stats(service: ReportingService = Depends(deps.get_reporting_service)):
    return service.dashboard_stats()


# --- Allocation -----------------------------------------------------------------

@router.post("/allocate-room", response_model=AllocateRoomResponse)
def allocate_room(
    payload: AllocateRoomRequest,
    service: AllocationService = Depends(deps.get_allocation_service),
) -> AllocateRoomResponse:
    allocation = service.allocate_room(payload.student_id, payload.room_id, payload.academic_year)
    return AllocateRoomResponse(
        message="Room allocated successfully",
        allocation_id=allocation.allocation_id,
    )


@router.post("/allocation/end", response_model=MessageResponse)
def end_allocation(
    payload: EndAllocationRequest,
    service: AllocationService = Depends(deps.get_allocation_service),
) -> MessageResponse:
    service.end_allocation(payload.allocation_id)
    return MessageResponse(message="Allocation ended successfully")


# --- Swap requests --------------------------------------------------------------

@router.post("/swap/approve", response_model=MessageResponse)
def approve_swap(
    payload: SwapApproveRequest,
    service: SwapService = Depends(deps.get_swap_service),
) -> MessageResponse:
    service.approve(payload.swap_id, payload.admin_username)
    return MessageResponse(message="Room swap completed successfully")


@router.post("/swap/reject", response_model=MessageResponse)
def reject_swap(
    payload: SwapRejectRequest,
    service: SwapService = Depends(deps.get_swap_service),
) -> MessageResponse:
    service.reject(payload.swap_id, payload.admin_username, payload.remarks)
    return MessageResponse(message="Swap request rejected")


# --- Complaints & students ------------------------------------------------------

@router.post("/complaint/update", response_model=MessageResponse)
def update_complaint(
    payload: ComplaintStatusUpdate,
    service: ComplaintService = Depends(deps.get_complaint_service),
) -> MessageResponse:
    service.update_status(payload.complaint_id, payload.status, payload.admin_response)
    return MessageResponse(message="Complaint updated successfully")


@router.post("/student/add", response_model=MessageResponse)
def add_student(
    payload: StudentCreate,
    service: StudentService = Depends(deps.get_student_service),
) -> MessageResponse:
    service.add_student(payload)
    return MessageResponse(message="Student added successfully")
