"""
Student portal endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends

from hostelcare.api import deps
from hostelcare.schemas.auth import StudentLoginRequest, StudentLoginResponse, StudentProfile
from hostelcare.schemas.complaint import ComplaintCreate, ComplaintCreated, ComplaintRead
from hostelcare.schemas.student import StudentRoomResponse, SwapTarget
from hostelcare.schemas.swap import SwapRequestCreate, SwapRequestCreated, SwapRequestView
from hostelcare.services import AuthService, ComplaintService, StudentService, SwapService

router = APIRouter(prefix="/student", tags=["Student"])


@router.post("/login", response_model=StudentLoginResponse)
def student_login(
    payload: StudentLoginRequest,
    service: AuthService = Depends(deps.get_auth_service),
) -> StudentLoginResponse:
    student = service.authenticate_student(payload.email, payload.password)
    return StudentLoginResponse(student=StudentProfile.model_validate(student))


@router.get("/{student_id}/room", response_model=StudentRoomResponse, response_model_exclude_none=True)
def get_student_room(
    student_id: str,
    service: StudentService = Depends(deps.get_student_service),
) -> StudentRoomResponse:
    return service.get_room(student_id)


@router.get("/{student_id}/swap-targets", response_model=List[SwapTarget])
def list_swap_targets(
    student_id: str,
    service: StudentService = Depends(deps.get_student_service),
) -> List[SwapTarget]:
    return service.list_swap_targets(student_id)


@router.post("/swap-request", response_model=SwapRequestCreated)
def submit_swap_request(
    payload: SwapRequestCreate,
    service: SwapService = Depends(deps.get_swap_service),
) -> SwapRequestCreated:
    swap = service.submit_request(payload.requester_id, payload.target_id, payload.reason)
    return SwapRequestCreated(swap_id=swap.swap_id)


@router.get("/{student_id}/swap-requests", response_model=List[SwapRequestView])
def list_own_swap_requests(
    student_id: str,
    service: StudentService = Depends(deps.get_student_service),
) -> List[SwapRequestView]:
    return service.list_swap_requests(student_id)


@router.post("/complaint", response_model=ComplaintCreated)
def file_complaint(
    payload: ComplaintCreate,
    service: ComplaintService = Depends(deps.get_complaint_service),
) -> ComplaintCreated:
    complaint = service.file_complaint(
        student_id=payload.student_id,
        category=payload.category,
        subject=payload.subject,
        description=payload.description,
        priority=payload.priority,
    )
    return ComplaintCreated(complaint_id=complaint.complaint_id)


@router.get("/{student_id}/complaints", response_model=List[ComplaintRead])
def list_own_complaints(
    student_id: str,
    service: StudentService = Depends(deps.get_student_service),
) -> List[ComplaintRead]:
    return service.list_complaints(student_id)
