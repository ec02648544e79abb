from __future__ import annotations

import pytest

from hostelcare.core.exceptions import NotFoundError
from hostelcare.models import Complaint, ComplaintPriority, ComplaintStatus
from hostelcare.services import ComplaintService


def test_priority_defaults_to_medium(db_session, campus):
    complaint = ComplaintService(db_session).file_complaint(
        student_id="S1",
        category="Electrical",
        subject="Fan not working",
        description="The ceiling fan stopped yesterday",
    )

    assert complaint.complaint_id is not None
    assert complaint.priority is ComplaintPriority.MEDIUM
    assert complaint.status is ComplaintStatus.PENDING
    assert complaint.resolved_date is None


def test_explicit_priority_is_kept(db_session, campus):
    complaint = ComplaintService(db_session).file_complaint(
        "S1", "Plumbing", "Leak", priority=ComplaintPriority.HIGH
    )
    assert complaint.priority is ComplaintPriority.HIGH


def test_unknown_student_cannot_file(db_session, campus):
    with pytest.raises(NotFoundError):
        ComplaintService(db_session).file_complaint("NOPE", "Other", "Hello")


class TestUpdateStatus:

    @pytest.mark.parametrize("status", [ComplaintStatus.RESOLVED, ComplaintStatus.CLOSED])
    def test_resolving_sets_resolved_date(self, db_session, campus, status):
        service = ComplaintService(db_session)
        complaint = service.file_complaint("S1", "Electrical", "Fan")

        updated = service.update_status(complaint.complaint_id, status, "Replaced the regulator")

        assert updated.status is status
        assert updated.admin_response == "Replaced the regulator"
        assert updated.resolved_date is not None

    def test_in_progress_leaves_resolved_date_unset(self, db_session, campus):
        service = ComplaintService(db_session)
        complaint = service.file_complaint("S1", "Electrical", "Fan")

        updated = service.update_status(complaint.complaint_id, ComplaintStatus.IN_PROGRESS, "Looking into it")

        assert updated.status is ComplaintStatus.IN_PROGRESS
        assert updated.resolved_date is None

    def test_reopening_never_clears_resolved_date(self, db_session, campus):
        service = ComplaintService(db_session)
        complaint = service.file_complaint("S1", "Electrical", "Fan")
        resolved_at = service.update_status(complaint.complaint_id, ComplaintStatus.RESOLVED).resolved_date

        service.update_status(complaint.complaint_id, ComplaintStatus.IN_PROGRESS, "Fan failed again")

        db_session.expire_all()
        stored = db_session.get(Complaint, complaint.complaint_id)
        assert stored.status is ComplaintStatus.IN_PROGRESS
        assert stored.resolved_date is not None
        assert stored.resolved_date.replace(tzinfo=None) == resolved_at.replace(tzinfo=None)

    def test_response_is_replaced_on_every_update(self, db_session, campus):
        service = ComplaintService(db_session)
        complaint = service.file_complaint("S1", "Electrical", "Fan")
        service.update_status(complaint.complaint_id, ComplaintStatus.IN_PROGRESS, "Technician assigned")
        service.update_status(complaint.complaint_id, ComplaintStatus.IN_PROGRESS, "Waiting for parts")

        updated = service.update_status(complaint.complaint_id, ComplaintStatus.RESOLVED)

        assert updated.admin_response is None
        db_session.expire_all()
        assert db_session.get(Complaint, complaint.complaint_id).admin_response is None

    def test_missing_complaint(self, db_session, campus):
        with pytest.raises(NotFoundError):
            ComplaintService(db_session).update_status(999, ComplaintStatus.CLOSED)
