from datetime import datetime, UTC

from sqlalchemy.orm import Session

from emlak_crm.config import settings
from emlak_crm.core.exceptions import NotFoundException
from emlak_crm.models.base import as_utc
from emlak_crm.models.meeting import Meeting
from emlak_crm.models.user import User
from emlak_crm.repositories.meeting_repository import MeetingRepository
from emlak_crm.repositories.owner_repository import OwnerRepository
from emlak_crm.repositories.property_repository import PropertyRepository
from emlak_crm.repositories.tenant_repository import TenantRepository
from emlak_crm.schemas.meeting_schemas import MeetingCreate, MeetingUpdate
from emlak_crm.services.meeting_notifier import MeetingNotification, build_notification, select_due_meetings


class MeetingService:
    """Service for meeting calendar business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = MeetingRepository(db)
        self.tenant_repo = TenantRepository(db)
        self.property_repo = PropertyRepository(db)
        self.owner_repo = OwnerRepository(db)

    def _check_links(self, fields: dict, user: User) -> None:
        """Linked tenant/property/owner must belong to the user"""
        if fields.get("tenant_id") is not None and not self.tenant_repo.get_by_id_and_user(fields["tenant_id"], user.id):
            raise NotFoundException(f"Tenant {fields['tenant_id']} not found", code="ERROR_TENANT_NOT_FOUND")
        if fields.get("property_id") is not None and not self.property_repo.get_by_id_and_user(
            fields["property_id"], user.id
        ):
            raise NotFoundException(f"Property {fields['property_id']} not found", code="ERROR_PROPERTY_NOT_FOUND")
        if fields.get("owner_id") is not None and not self.owner_repo.get_by_id_and_user(fields["owner_id"], user.id):
            raise NotFoundException(f"Owner {fields['owner_id']} not found", code="ERROR_OWNER_NOT_FOUND")

    def create_meeting(self, data: MeetingCreate, user: User) -> Meeting:
        fields = data.model_dump()
        self._check_links(fields, user)
        fields["start_time"] = as_utc(fields["start_time"])
        return self.repo.create(Meeting(user_id=user.id, **fields))

    def get_user_meetings(self, user: User) -> list[Meeting]:
        """Get all meetings for user ordered by start time"""
        return self.repo.get_by_user(user.id)

    def get_meeting(self, meeting_id: int, user: User) -> Meeting:
        """
        Get specific meeting ensuring user ownership.

        Raises:
            NotFoundException: If meeting not found or belongs to another user
        """
        meeting = self.repo.get_by_id_and_user(meeting_id, user.id)
        if not meeting:
            raise NotFoundException(f"Meeting {meeting_id} not found", code="ERROR_MEETING_NOT_FOUND")
        return meeting

    def update_meeting(self, meeting_id: int, data: MeetingUpdate, user: User) -> Meeting:
        meeting = self.get_meeting(meeting_id, user)
        fields = data.model_dump(exclude_unset=True)
        self._check_links(fields, user)

        for attr, value in fields.items():
            if attr == "start_time":
                if value is None:
                    continue
                value = as_utc(value)
            setattr(meeting, attr, value)

        return self.repo.update(meeting)

    def delete_meeting(self, meeting_id: int, user: User) -> None:
        meeting = self.get_meeting(meeting_id, user)
        self.repo.delete(meeting)

    def get_meetings_in_range(self, user: User, start: datetime, end: datetime) -> list[Meeting]:
        """Meetings starting between start and end (inclusive)"""
        return self.repo.get_by_range(user.id, as_utc(start), as_utc(end))

    def get_upcoming_meetings(self, user: User, limit: int = 10, now: datetime | None = None) -> list[Meeting]:
        """Next meetings from now on, soonest first"""
        now = as_utc(now) if now else datetime.now(UTC)
        return self.repo.get_upcoming(user.id, now, limit)

    def get_due_reminders(self, user: User, now: datetime | None = None) -> list[MeetingNotification]:
        """Upcoming meetings whose reminder window has opened"""
        now = as_utc(now) if now else datetime.now(UTC)
        upcoming = self.repo.get_upcoming(user.id, now, limit=10)
        due = select_due_meetings(upcoming, now, settings.MEETING_REMINDER_MINUTES)
        return [build_notification(meeting, now) for meeting in due]
