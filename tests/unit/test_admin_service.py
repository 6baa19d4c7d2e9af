"""
Unit tests for AdminService: status changes and the registration listing.
"""

from datetime import timedelta
from unittest.mock import Mock

import pytest

from src.adapters.repository.memory import InMemoryRegistrationRepository
from src.domain.admin import AdminService
from src.domain.exceptions import PersistenceError, RegistrationNotFound, ValidationError
from src.domain.notifications import APPROVED_SUBJECT, UPDATE_SUBJECT
from src.domain.registration import RegistrationService
from tests.fakes import BASE_TIME, RecordingEmailSender, TickingClock, make_candidate


@pytest.fixture
def registration_service(
    repository: InMemoryRegistrationRepository, clock: TickingClock
) -> RegistrationService:
    return RegistrationService(repository=repository, email_sender=RecordingEmailSender(), clock=clock)


@pytest.fixture
def admin_service(
    repository: InMemoryRegistrationRepository,
    email_sender: RecordingEmailSender,
    clock: TickingClock,
) -> AdminService:
    return AdminService(repository=repository, email_sender=email_sender, clock=clock)


@pytest.fixture
def registration_id(registration_service: RegistrationService) -> str:
    return registration_service.register(make_candidate()).registration_id


class TestUpdateStatus:
    """Tests for AdminService.update_status."""

    @pytest.mark.parametrize("status", ["approved", "rejected", "pending"])
    def test_status_is_updated(
        self,
        admin_service: AdminService,
        repository: InMemoryRegistrationRepository,
        registration_id: str,
        status: str,
    ) -> None:
        result = admin_service.update_status(registration_id, status)

        assert result.message == "Status updated successfully"
        assert repository.get(registration_id).status == status

    def test_created_at_never_changes(
        self,
        admin_service: AdminService,
        repository: InMemoryRegistrationRepository,
        registration_id: str,
    ) -> None:
        """created_at is fixed while last_updated moves forward on every change."""
        created_at = repository.get(registration_id).created_at
        seen = [repository.get(registration_id).last_updated]

        for status in ["approved", "rejected", "pending", "approved"]:
            admin_service.update_status(registration_id, status)
            record = repository.get(registration_id)
            assert record.created_at == created_at
            assert record.last_updated >= seen[-1]
            assert record.created_at <= record.last_updated
            seen.append(record.last_updated)

        assert seen[-1] > seen[0]

    def test_no_transition_guards(
        self,
        admin_service: AdminService,
        repository: InMemoryRegistrationRepository,
        registration_id: str,
    ) -> None:
        """Approved and rejected registrations can be moved back to pending."""
        admin_service.update_status(registration_id, "approved")
        admin_service.update_status(registration_id, "rejected")
        admin_service.update_status(registration_id, "pending")
        assert repository.get(registration_id).status == "pending"

    def test_invalid_status_leaves_record_unchanged(
        self,
        admin_service: AdminService,
        repository: InMemoryRegistrationRepository,
        registration_id: str,
    ) -> None:
        before = repository.get(registration_id)

        with pytest.raises(ValidationError) as exc_info:
            admin_service.update_status(registration_id, "archived")

        assert exc_info.value.message == "Invalid status value"
        assert repository.get(registration_id) == before

    def test_missing_fields_rejected(self, admin_service: AdminService) -> None:
        with pytest.raises(ValidationError) as exc_info:
            admin_service.update_status(None, "approved")
        assert exc_info.value.message == "Missing required fields"

    def test_unknown_id_fails_loudly(self, admin_service: AdminService) -> None:
        """Updating a missing registration raises instead of silently succeeding."""
        with pytest.raises(RegistrationNotFound) as exc_info:
            admin_service.update_status("does-not-exist", "approved")
        assert isinstance(exc_info.value, PersistenceError)
        assert exc_info.value.registration_id == "does-not-exist"


class TestStatusNotification:
    """Tests for the best-effort status email."""

    def test_approval_emails_registrant(
        self, admin_service: AdminService, email_sender: RecordingEmailSender, registration_id: str
    ) -> None:
        admin_service.update_status(registration_id, "approved")

        assert len(email_sender.sent) == 1
        assert email_sender.sent[0].to == "ada@example.com"
        assert email_sender.sent[0].subject == APPROVED_SUBJECT

    def test_rejection_emails_registrant(
        self, admin_service: AdminService, email_sender: RecordingEmailSender, registration_id: str
    ) -> None:
        admin_service.update_status(registration_id, "rejected")

        assert email_sender.sent[0].subject == UPDATE_SUBJECT
        assert "unable to accommodate" in email_sender.sent[0].html

    def test_status_email_uses_configured_title(
        self,
        repository: InMemoryRegistrationRepository,
        email_sender: RecordingEmailSender,
        registration_id: str,
    ) -> None:
        service = AdminService(
            repository=repository,
            email_sender=email_sender,
            offered_events={"plateau-jan25": "Jos Builders Night"},
        )

        service.update_status(registration_id, "approved")

        assert "Jos Builders Night" in email_sender.sent[0].html

    def test_back_to_pending_sends_nothing(
        self, admin_service: AdminService, email_sender: RecordingEmailSender, registration_id: str
    ) -> None:
        admin_service.update_status(registration_id, "pending")
        assert email_sender.sent == []

    def test_notifier_failure_does_not_fail_update(
        self,
        repository: InMemoryRegistrationRepository,
        failing_email_sender: RecordingEmailSender,
        registration_id: str,
    ) -> None:
        service = AdminService(repository=repository, email_sender=failing_email_sender)

        result = service.update_status(registration_id, "approved")

        assert result.registration.status == "approved"
        assert repository.get(registration_id).status == "approved"


class TestListRegistrations:
    """Tests for AdminService.list_registrations."""

    def test_newest_first(
        self, registration_service: RegistrationService, admin_service: AdminService
    ) -> None:
        """Records created at T1 < T2 < T3 are listed T3, T2, T1."""
        first = registration_service.register(make_candidate(email="t1@example.com")).registration_id
        second = registration_service.register(make_candidate(email="t2@example.com")).registration_id
        third = registration_service.register(make_candidate(email="t3@example.com")).registration_id

        listed = admin_service.list_registrations()

        assert [r.id for r in listed] == [third, second, first]
        assert listed[0].created_at == BASE_TIME + timedelta(seconds=2)

    def test_empty_registry(self, admin_service: AdminService) -> None:
        assert admin_service.list_registrations() == []

    def test_registry_failure_propagates(self) -> None:
        repo = Mock()
        repo.list_all.side_effect = PersistenceError("Registry listing failed")
        service = AdminService(repository=repo, email_sender=Mock())

        with pytest.raises(PersistenceError):
            service.list_registrations()
