"""
Tests for the admin listings and the dashboard fan-out.
"""

from __future__ import annotations

from hostelcare.models import ComplaintStatus, SwapStatus
from hostelcare.services import ComplaintService, ReportingService, SwapService
from hostelcare.services.reporting_service import DASHBOARD_COUNTS


def test_dashboard_counts(db_session, session_factory, campus):
    SwapService(db_session).submit_request("S1", "S2", None)
    complaints = ComplaintService(db_session)
    first = complaints.file_complaint("S1", "Electrical", "Fan")
    complaints.file_complaint("S2", "Plumbing", "Tap")
    third = complaints.file_complaint("S3", "Internet", "Wifi")
    complaints.update_status(first.complaint_id, ComplaintStatus.IN_PROGRESS)
    complaints.update_status(third.complaint_id, ComplaintStatus.RESOLVED)

    stats = ReportingService(db_session, session_factory).dashboard_stats()

    assert stats.total_students == 5
    assert stats.allocated_students == 4
    assert stats.total_rooms == 4
    assert stats.occupied_rooms == 3
    assert stats.pending_swaps == 1
    assert stats.pending_complaints == 2


def test_failed_count_is_omitted_and_others_still_returned(db_session, session_factory, campus):
    def broken(db):
        raise RuntimeError("connection reset")

    queries = dict(DASHBOARD_COUNTS, occupied_rooms=broken)

    stats = ReportingService(db_session, session_factory).dashboard_stats(queries)

    body = stats.model_dump(by_alias=True, exclude_none=True)
    assert "occupiedRooms" not in body
    assert body == {
        "totalStudents": 5,
        "allocatedStudents": 4,
        "totalRooms": 4,
        "pendingSwaps": 0,
        "pendingComplaints": 0,
    }


def test_swap_listing_puts_pending_first_then_newest(db_session, session_factory, campus):
    swaps = SwapService(db_session)
    oldest = swaps.submit_request("S1", "S2", None)
    middle = swaps.submit_request("S1", "S3", None)
    newest = swaps.submit_request("S2", "S1", None)
    swaps.reject(newest.swap_id, "warden", None)
    swaps.approve(oldest.swap_id, "warden")

    listing = ReportingService(db_session, session_factory).list_swap_requests()

    assert [s.swap_id for s in listing] == [middle.swap_id, oldest.swap_id, newest.swap_id]
    assert [s.status for s in listing] == [SwapStatus.PENDING, SwapStatus.APPROVED, SwapStatus.REJECTED]
    assert listing[0].requester_name == "Arjun"
    assert listing[0].target_room == "102"
    assert listing[0].requester_dept == "Computer Science"


def test_complaint_listing_orders_by_status_then_newest(db_session, session_factory, campus):
    complaints = ComplaintService(db_session)
    closed = complaints.file_complaint("S1", "Other", "A")
    in_progress = complaints.file_complaint("S2", "Other", "B")
    pending_old = complaints.file_complaint("S3", "Other", "C")
    pending_new = complaints.file_complaint("S1", "Other", "D")
    complaints.update_status(closed.complaint_id, ComplaintStatus.CLOSED)
    complaints.update_status(in_progress.complaint_id, ComplaintStatus.IN_PROGRESS)

    listing = ReportingService(db_session, session_factory).list_complaints()

    assert [c.complaint_id for c in listing] == [
        pending_new.complaint_id,
        pending_old.complaint_id,
        in_progress.complaint_id,
        closed.complaint_id,
    ]
    assert listing[0].student_name == "Arjun"


def test_hostel_totals_and_available_rooms(db_session, session_factory, campus):
    service = ReportingService(db_session, session_factory)

    hostels = {h.hostel_name: h for h in service.list_hostels()}
    assert hostels["Aryabhata Hall"].total_rooms_count == 3
    assert hostels["Aryabhata Hall"].total_capacity == 5
    assert hostels["Aryabhata Hall"].total_occupied == 3
    assert hostels["Bhaskara Hall"].total_occupied == 1

    available = {(r.hostel_name, r.room_number): r.available_beds for r in service.list_available_rooms()}
    assert available == {
        ("Aryabhata Hall", "101"): 1,
        ("Aryabhata Hall", "201"): 1,
        ("Bhaskara Hall", "201"): 2,
    }

    rooms = service.list_hostel_rooms(campus.boys_hostel.hostel_id)
    assert [r.room_number for r in rooms] == ["101", "102", "201"]


def test_student_listing_includes_active_room(db_session, session_factory, campus):
    students = {s.student_id: s for s in ReportingService(db_session, session_factory).list_students()}

    assert students["S1"].room_number == "101"
    assert students["S1"].hostel_name == "Aryabhata Hall"
    assert students["S4"].allocation_id is None
    assert not hasattr(students["S1"], "password_hash")
