"""
Read-only admin views and the dashboard statistics fan-out.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Dict, List, Optional

from sqlalchemy.orm import Session, sessionmaker

from hostelcare.config.settings import settings
from hostelcare.repositories import (
    AllocationRepository,
    ComplaintRepository,
    HostelRepository,
    RoomRepository,
    StudentRepository,
    SwapRequestRepository,
)
from hostelcare.schemas.complaint import AdminComplaintView
from hostelcare.schemas.dashboard import DashboardStats
from hostelcare.schemas.hostel import HostelSummary, RoomView
from hostelcare.schemas.student import StudentListItem
from hostelcare.schemas.swap import SwapRequestView
from hostelcare.services.base_service import BaseService

CountQuery = Callable[[Session], int]

# Dashboard field name -> count query. Each runs on its own session.
DASHBOARD_COUNTS: Dict[str, CountQuery] = {
    "total_students": lambda db: StudentRepository(db).count(),
    "allocated_students": lambda db: AllocationRepository(db).count_allocated_students(),
    "total_rooms": lambda db: RoomRepository(db).count(),
    "occupied_rooms": lambda db: AllocationRepository(db).count_occupied_rooms(),
    "pending_swaps": lambda db: SwapRequestRepository(db).count_pending(),
    "pending_complaints": lambda db: ComplaintRepository(db).count_open(),
}


class ReportingService(BaseService):
    """
    Admin listings plus the dashboard.

    The dashboard needs a session factory rather than the request session
    because each count runs concurrently on its own connection.
    """

    def __init__(self, db_session: Session, session_factory: sessionmaker):
        super().__init__(db_session)
        self.session_factory = session_factory
        self.students = StudentRepository(db_session)
        self.hostels = HostelRepository(db_session)
        self.rooms = RoomRepository(db_session)
        self.complaints = ComplaintRepository(db_session)
        self.swaps = SwapRequestRepository(db_session)

    # -------------------------------------------------------------------------
    # Listings
    # -------------------------------------------------------------------------

    def list_students(self) -> List[StudentListItem]:
        return [StudentListItem.model_validate(r) for r in self.students.list_with_active_allocation()]

    def list_hostels(self) -> List[HostelSummary]:
        return [HostelSummary.model_validate(r) for r in self.hostels.list_with_room_totals()]

    def list_hostel_rooms(self, hostel_id: int) -> List[RoomView]:
        return [RoomView.model_validate(r) for r in self.rooms.list_for_hostel(hostel_id)]

    def list_available_rooms(self) -> List[RoomView]:
        return [RoomView.model_validate(r) for r in self.rooms.list_available()]

    def list_complaints(self) -> List[AdminComplaintView]:
        return [AdminComplaintView.model_validate(r) for r in self.complaints.list_all_with_student()]

    def list_swap_requests(self) -> List[SwapRequestView]:
        return [SwapRequestView.model_validate(r) for r in self.swaps.list_all()]

    # -------------------------------------------------------------------------
    # Dashboard
    # -------------------------------------------------------------------------

    def dashboard_stats(self, queries: Optional[Dict[str, CountQuery]] = None) -> DashboardStats:
        """
        Run every count concurrently and return once all have finished.

        A count that fails is logged and left out of the result; the others
        are still returned.
        """
        queries = queries if queries is not None else DASHBOARD_COUNTS
        counts: Dict[str, int] = {}

        with ThreadPoolExecutor(max_workers=settings.DASHBOARD_MAX_WORKERS) as executor:
            future_to_name = {
                executor.submit(self._run_count, query): name
                for name, query in queries.items()
            }
            for future in as_completed(future_to_name):
                name = future_to_name[future]
                try:
                    counts[name] = future.result()
                except Exception as e:
                    self._logger.error(f"Dashboard count '{name}' failed: {e}", exc_info=e)

        omitted = sorted(set(queries) - set(counts))
        if omitted:
            self._logger.warning(f"Dashboard stats returned without: {', '.join(omitted)}")
        return DashboardStats(**counts)

    def _run_count(self, query: CountQuery) -> int:
        session = self.session_factory()
        try:
            return query(session)
        finally:
            session.close()
