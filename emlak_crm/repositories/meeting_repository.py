from datetime import datetime

from sqlalchemy.orm import Session

from emlak_crm.models.meeting import Meeting


class MeetingRepository:
    """Repository for Meeting data access, scoped by user"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_user(self, user_id: int) -> list[Meeting]:
        """Get all meetings for a user ordered by start time"""
        return (
            self.db.query(Meeting)
            .filter(Meeting.user_id == user_id)
            .order_by(Meeting.start_time.asc())
            .all()
        )

    def get_by_id_and_user(self, meeting_id: int, user_id: int) -> Meeting | None:
        return (
            self.db.query(Meeting)
            .filter(Meeting.id == meeting_id, Meeting.user_id == user_id)
            .first()
        )

    def get_by_range(self, user_id: int, start: datetime, end: datetime) -> list[Meeting]:
        """Meetings starting within [start, end]"""
        return (
            self.db.query(Meeting)
            .filter(
                Meeting.user_id == user_id,
                Meeting.start_time >= start,
                Meeting.start_time <= end,
            )
            .order_by(Meeting.start_time.asc())
            .all()
        )

    def get_upcoming(self, user_id: int, now: datetime, limit: int = 10) -> list[Meeting]:
        """Meetings starting at or after now, soonest first"""
        return (
            self.db.query(Meeting)
            .filter(Meeting.user_id == user_id, Meeting.start_time >= now)
            .order_by(Meeting.start_time.asc())
            .limit(limit)
            .all()
        )

    def create(self, meeting: Meeting) -> Meeting:
        """Create new meeting"""
        self.db.add(meeting)
        self.db.commit()
        self.db.refresh(meeting)
        return meeting

    def update(self, meeting: Meeting) -> Meeting:
        """Update existing meeting"""
        self.db.commit()
        self.db.refresh(meeting)
        return meeting

    def delete(self, meeting: Meeting) -> None:
        self.db.delete(meeting)
        self.db.commit()

    def get_upcoming_all_users(self, now: datetime, limit: int = 100) -> list[Meeting]:
        """Upcoming meetings across every user, for the background reminder poller"""
        return (
            self.db.query(Meeting)
            .filter(Meeting.start_time >= now)
            .order_by(Meeting.start_time.asc())
            .limit(limit)
            .all()
        )
