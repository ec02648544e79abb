"""
Room swap request lifecycle: submit (student), approve or reject (admin).

A request is Pending until an admin resolves it; Approved and Rejected are
terminal. Approval exchanges the rooms on both students' Active allocations
in one transaction; occupancy does not change because each room loses one
student and gains one.
"""

from typing import Optional

from sqlalchemy.orm import Session

from hostelcare.core.exceptions import (
    ConflictError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from hostelcare.models import AdminUser, SwapRequest, SwapStatus
from hostelcare.models.base import utcnow
from hostelcare.repositories import AdminRepository, AllocationRepository, SwapRequestRepository
from hostelcare.services.base_service import BaseService


class SwapService(BaseService):

    def __init__(self, db_session: Session):
        super().__init__(db_session)
        self.swaps = SwapRequestRepository(db_session)
        self.allocations = AllocationRepository(db_session)
        self.admins = AdminRepository(db_session)

    def submit_request(self, requester_id: str, target_id: str, reason: Optional[str]) -> SwapRequest:
        """
        Record a Pending swap request with both students' current rooms.

        Raises:
            ValidationError: the students are the same, or either lacks an
                Active allocation
        """
        if requester_id == target_id:
            raise ValidationError("Cannot request a swap with yourself")

        with self.transaction("submit swap request"):
            allocations = self.allocations.get_active_for_students([requester_id, target_id])
            if len(allocations) != 2:
                raise ValidationError("Both students must have active allocations")

            rooms = {allocation.student_id: allocation.room_id for allocation in allocations}
            swap = self.swaps.add(
                SwapRequest(
                    requester_id=requester_id,
                    target_id=target_id,
                    requester_room_id=rooms[requester_id],
                    target_room_id=rooms[target_id],
                    reason=reason,
                    status=SwapStatus.PENDING,
                )
            )

        self._logger.info(f"Swap request {swap.swap_id} submitted: {requester_id} <-> {target_id}")
        return swap

    def approve(self, swap_id: int, admin_username: str) -> SwapRequest:
        """
        Exchange the two students' rooms and mark the request Approved.

        Raises:
            NotFoundError: no such request
            InvalidStateError: request already resolved
            ValidationError: unknown admin
            ConflictError: either student has moved since the request was made
        """
        with self.transaction("approve swap request"):
            swap = self._get_pending(swap_id)
            admin = self._get_admin(admin_username)

            allocations = {
                allocation.student_id: allocation
                for allocation in self.allocations.get_active_for_students(
                    [swap.requester_id, swap.target_id], for_update=True
                )
            }
            requester_allocation = allocations.get(swap.requester_id)
            target_allocation = allocations.get(swap.target_id)
            if (
                requester_allocation is None
                or target_allocation is None
                or requester_allocation.room_id != swap.requester_room_id
                or target_allocation.room_id != swap.target_room_id
            ):
                raise ConflictError(
                    "Allocations have changed since the swap was requested",
                    details={"swap_id": swap_id},
                )

            requester_allocation.room_id = swap.target_room_id
            target_allocation.room_id = swap.requester_room_id
            self._resolve(swap, SwapStatus.APPROVED, admin)

        self._logger.info(f"Swap request {swap_id} approved by {admin_username}")
        return swap

    def reject(self, swap_id: int, admin_username: str, remarks: Optional[str]) -> SwapRequest:
        """
        Mark the request Rejected with the admin's remarks. Allocations are untouched.

        Raises:
            NotFoundError: no such request
            InvalidStateError: request already resolved
            ValidationError: unknown admin
        """
        with self.transaction("reject swap request"):
            swap = self._get_pending(swap_id)
            admin = self._get_admin(admin_username)
            swap.admin_remarks = remarks
            self._resolve(swap, SwapStatus.REJECTED, admin)

        self._logger.info(f"Swap request {swap_id} rejected by {admin_username}")
        return swap

    def _get_pending(self, swap_id: int) -> SwapRequest:
        swap = self.swaps.get(swap_id, for_update=True)
        if swap is None:
            raise NotFoundError("Swap request", swap_id)
        if swap.status.is_resolved:
            raise InvalidStateError(
                f"Swap request has already been {swap.status.value.lower()}",
                details={"swap_id": swap_id, "status": swap.status.value},
            )
        return swap

    def _get_admin(self, username: str) -> AdminUser:
        admin = self.admins.get_by_username(username)
        if admin is None:
            raise ValidationError(f"Unknown admin: {username}")
        return admin

    def _resolve(self, swap: SwapRequest, status: SwapStatus, admin: AdminUser) -> None:
        swap.status = status
        swap.resolved_date = utcnow()
        swap.resolved_by = admin.username
        self.db.flush()
