"""
Tests for the swap request lifecycle.
"""

from __future__ import annotations

import pytest
from sqlalchemy import select

from hostelcare.core.exceptions import (
    ConflictError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from hostelcare.models import Allocation, AllocationStatus, SwapRequest, SwapStatus
from hostelcare.services import AllocationService, SwapService

from .conftest import assert_occupancy_matches_allocations, occupancy


def active_room(session, student_id: str) -> int:
    return session.execute(
        select(Allocation.room_id).where(
            Allocation.student_id == student_id,
            Allocation.status == AllocationStatus.ACTIVE,
        )
    ).scalar_one()


class TestSubmitRequest:

    def test_snapshots_both_rooms(self, db_session, campus):
        swap = SwapService(db_session).submit_request("S1", "S2", "Closer to my lab partner")

        assert swap.swap_id is not None
        assert swap.status is SwapStatus.PENDING
        assert swap.requester_room_id == campus.rooms["A-101"].room_id
        assert swap.target_room_id == campus.rooms["A-102"].room_id
        assert swap.reason == "Closer to my lab partner"

    def test_target_without_allocation_is_rejected(self, db_session, campus):
        with pytest.raises(ValidationError, match="active allocations"):
            SwapService(db_session).submit_request("S1", "S4", "please")
        assert db_session.execute(select(SwapRequest)).first() is None

    def test_requester_without_allocation_is_rejected(self, db_session, campus):
        with pytest.raises(ValidationError):
            SwapService(db_session).submit_request("S4", "S1", None)

    def test_self_swap_is_rejected(self, db_session, campus):
        with pytest.raises(ValidationError):
            SwapService(db_session).submit_request("S1", "S1", None)

    def test_snapshot_survives_later_reallocation(self, db_session, campus):
        swap = SwapService(db_session).submit_request("S1", "S2", None)
        allocations = AllocationService(db_session)
        allocation_id = db_session.execute(
            select(Allocation.allocation_id).where(Allocation.student_id == "S1")
        ).scalar_one()
        allocations.end_allocation(allocation_id)
        allocations.allocate_room("S1", campus.rooms["A-201"].room_id, "2024-2025")

        db_session.expire_all()
        stored = db_session.get(SwapRequest, swap.swap_id)
        assert stored.requester_room_id == campus.rooms["A-101"].room_id


class TestApprove:

    def test_approval_exchanges_rooms(self, db_session, campus):
        service = SwapService(db_session)
        swap = service.submit_request("S1", "S2", None)

        approved = service.approve(swap.swap_id, "warden")

        assert approved.status is SwapStatus.APPROVED
        assert approved.resolved_by == "warden"
        assert approved.resolved_date is not None
        assert active_room(db_session, "S1") == campus.rooms["A-102"].room_id
        assert active_room(db_session, "S2") == campus.rooms["A-101"].room_id
        assert occupancy(db_session, campus.rooms["A-101"].room_id) == 1
        assert occupancy(db_session, campus.rooms["A-102"].room_id) == 2
        assert_occupancy_matches_allocations(db_session)

    @pytest.mark.parametrize("first", ["approve", "reject"])
    def test_resolved_request_cannot_be_approved_again(self, db_session, campus, first):
        service = SwapService(db_session)
        swap = service.submit_request("S1", "S2", None)
        if first == "approve":
            service.approve(swap.swap_id, "warden")
        else:
            service.reject(swap.swap_id, "warden", "No")
        status_before = db_session.get(SwapRequest, swap.swap_id).status
        rooms_before = (active_room(db_session, "S1"), active_room(db_session, "S2"))

        with pytest.raises(InvalidStateError):
            service.approve(swap.swap_id, "warden")

        db_session.expire_all()
        assert db_session.get(SwapRequest, swap.swap_id).status is status_before
        assert (active_room(db_session, "S1"), active_room(db_session, "S2")) == rooms_before

    def test_missing_request(self, db_session, campus):
        with pytest.raises(NotFoundError):
            SwapService(db_session).approve(999, "warden")

    def test_unknown_admin(self, db_session, campus):
        service = SwapService(db_session)
        swap = service.submit_request("S1", "S2", None)
        with pytest.raises(ValidationError):
            service.approve(swap.swap_id, "intruder")
        db_session.expire_all()
        assert db_session.get(SwapRequest, swap.swap_id).status is SwapStatus.PENDING

    def test_stale_request_conflicts_and_changes_nothing(self, db_session, campus):
        service = SwapService(db_session)
        swap = service.submit_request("S1", "S2", None)
        allocation_id = db_session.execute(
            select(Allocation.allocation_id).where(Allocation.student_id == "S2")
        ).scalar_one()
        AllocationService(db_session).end_allocation(allocation_id)

        with pytest.raises(ConflictError):
            service.approve(swap.swap_id, "warden")

        db_session.expire_all()
        assert db_session.get(SwapRequest, swap.swap_id).status is SwapStatus.PENDING
        assert active_room(db_session, "S1") == campus.rooms["A-101"].room_id


class TestReject:

    def test_rejection_records_remarks_and_leaves_rooms(self, db_session, campus):
        service = SwapService(db_session)
        swap = service.submit_request("S1", "S3", "quieter room")

        rejected = service.reject(swap.swap_id, "warden", "Room change window closed")

        assert rejected.status is SwapStatus.REJECTED
        assert rejected.admin_remarks == "Room change window closed"
        assert rejected.resolved_by == "warden"
        assert active_room(db_session, "S1") == campus.rooms["A-101"].room_id
        assert active_room(db_session, "S3") == campus.rooms["A-102"].room_id

    def test_resolved_request_cannot_be_rejected(self, db_session, campus):
        service = SwapService(db_session)
        swap = service.submit_request("S1", "S3", None)
        service.approve(swap.swap_id, "warden")

        with pytest.raises(InvalidStateError):
            service.reject(swap.swap_id, "warden", "changed my mind")

        db_session.expire_all()
        stored = db_session.get(SwapRequest, swap.swap_id)
        assert stored.status is SwapStatus.APPROVED
        assert stored.admin_remarks is None

    def test_missing_request(self, db_session, campus):
        with pytest.raises(NotFoundError):
            SwapService(db_session).reject(999, "warden", None)
