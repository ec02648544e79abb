"""
API router - aggregates the student and admin endpoints.
"""

from fastapi import APIRouter

from hostelcare.api.v1 import admin, students
from hostelcare.schemas.common import ErrorResponse

router = APIRouter(
    responses={
        400: {"model": ErrorResponse, "description": "Bad Request"},
        401: {"model": ErrorResponse, "description": "Unauthorized"},
        404: {"model": ErrorResponse, "description": "Not Found"},
        409: {"model": ErrorResponse, "description": "Conflict"},
        500: {"model": ErrorResponse, "description": "Internal Server Error"},
    }
)

router.include_router(students.router)
router.include_router(admin.router)
