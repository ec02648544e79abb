# hostelcare/api/deps.py
"""
Dependency providers for route handlers.

Every handler receives its services through Depends, and every service
receives its session from get_db, which in turn comes from
get_session_factory. Tests override get_session_factory to point the whole
API at another database.

Example usage in a router:
    @router.post("/allocate-room")
    def allocate(service: AllocationService = Depends(deps.get_allocation_service)):
        ...
"""

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session, sessionmaker

from hostelcare.config.database import SessionLocal
from hostelcare.services import (
    AllocationService,
    AuthService,
    ComplaintService,
    ReportingService,
    StudentService,
    SwapService,
)


def get_session_factory() -> sessionmaker:
    return SessionLocal


def get_db(session_factory: sessionmaker = Depends(get_session_factory)) -> Generator[Session, None, None]:
    """Yield one session per request and close it afterwards."""
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(db)


def get_allocation_service(db: Session = Depends(get_db)) -> AllocationService:
    return AllocationService(db)


def get_swap_service(db: Session = Depends(get_db)) -> SwapService:
    return SwapService(db)


def get_complaint_service(db: Session = Depends(get_db)) -> ComplaintService:
    return ComplaintService(db)


def get_student_service(db: Session = Depends(get_db)) -> StudentService:
    return StudentService(db)


def get_reporting_service(
    db: Session = Depends(get_db),
    session_factory: sessionmaker = Depends(get_session_factory),
) -> ReportingService:
    return ReportingService(db, session_factory)


__all__ = [
    "get_session_factory",
    "get_db",
    "get_auth_service",
    "get_allocation_service",
    "get_swap_service",
    "get_complaint_service",
    "get_student_service",
    "get_reporting_service",
]
