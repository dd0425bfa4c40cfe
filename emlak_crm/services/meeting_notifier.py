"""
Meeting reminder polling.

Every MEETING_POLL_INTERVAL_SECONDS the notifier fetches upcoming meetings
and emits one notification for each meeting whose start is within its
reminder window. A meeting is notified once while it stays in the upcoming
set. Plain-function fetchers run in a worker thread so blocking database
work never runs on the event loop.
"""

import asyncio
import inspect
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from datetime import datetime, UTC

from sqlalchemy.orm import Session

from emlak_crm.config import settings
from emlak_crm.core.logging import get_logger
from emlak_crm.models.base import as_utc
from emlak_crm.models.meeting import Meeting
from emlak_crm.repositories.meeting_repository import MeetingRepository

logger = get_logger(__name__)


@dataclass
class MeetingNotification:
    tag: str  # meeting id; identical tags replace each other on the client
    meeting_id: int
    title: str
    body: str
    start_time: datetime
    minutes_until: int


def _minutes_until(meeting: Meeting, now: datetime) -> float:
    return (as_utc(meeting.start_time) - now).total_seconds() / 60


def select_due_meetings(
    meetings: Iterable[Meeting], now: datetime, reminder_minutes: int | None = None
) -> list[Meeting]:
    """
    Meetings starting in (now, now + reminder].

    A meeting's own reminder_minutes overrides the default window.
    """
    now = as_utc(now)
    default = settings.MEETING_REMINDER_MINUTES if reminder_minutes is None else reminder_minutes
    due = []
    for meeting in meetings:
        window = default if meeting.reminder_minutes is None else meeting.reminder_minutes
        if 0 < _minutes_until(meeting, now) <= window:
            due.append(meeting)
    return due


def build_notification(meeting: Meeting, now: datetime) -> MeetingNotification:
    minutes = max(1, round(_minutes_until(meeting, as_utc(now))))
    return MeetingNotification(
        tag=str(meeting.id),
        meeting_id=meeting.id,
        title=f"Upcoming Meeting: {meeting.title or 'Meeting'}",
        body=f"Your meeting is in {minutes} minutes. Notes: {meeting.notes or 'None'}",
        start_time=as_utc(meeting.start_time),
        minutes_until=minutes,
    )


FetchUpcoming = Callable[[], Iterable[Meeting] | Awaitable[Iterable[Meeting]]]
Notify = Callable[[MeetingNotification], None]


class MeetingNotifier:
    """
    Polls for meetings that are about to start.

    Args:
        fetch_upcoming: Returns upcoming meetings; a coroutine function is awaited, anything else runs via asyncio.to_thread
        notify: Called once per newly due meeting
        reminder_minutes: Default reminder window
        interval: Seconds between polls
        clock: Returns the current time; defaults to UTC now
    """

    def __init__(
        self,
        fetch_upcoming: FetchUpcoming,
        notify: Notify,
        reminder_minutes: int | None = None,
        interval: float | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.fetch_upcoming = fetch_upcoming
        self.notify = notify
        self.reminder_minutes = settings.MEETING_REMINDER_MINUTES if reminder_minutes is None else reminder_minutes
        self.interval = settings.MEETING_POLL_INTERVAL_SECONDS if interval is None else interval
        self.clock = clock or (lambda: datetime.now(UTC))
        self.notified_ids: set[int] = set()
        self._stopped = asyncio.Event()

    async def poll_once(self) -> list[MeetingNotification]:
        """Fetch upcoming meetings and notify the ones that became due since the last poll"""
        try:
            if inspect.iscoroutinefunction(self.fetch_upcoming):
                result = await self.fetch_upcoming()
            else:
                # sync fetchers do blocking DB work; keep it off the event loop
                result = await asyncio.to_thread(self.fetch_upcoming)
            meetings = list(result)
        except Exception as e:
            logger.error("meeting_reminder_fetch_failed", error=str(e))
            return []

        now = self.clock()
        # forget meetings that have started or were removed
        self.notified_ids &= {meeting.id for meeting in meetings}
        sent = []
        for meeting in select_due_meetings(meetings, now, self.reminder_minutes):
            if meeting.id in self.notified_ids:
                continue
            notification = build_notification(meeting, now)
            self.notify(notification)
            self.notified_ids.add(meeting.id)
            sent.append(notification)
        return sent

    async def run(self) -> None:
        """Poll on a fixed interval until stop() is called"""
        logger.info("meeting_notifier_started", interval=self.interval, reminder_minutes=self.reminder_minutes)
        while not self._stopped.is_set():
            await self.poll_once()
            try:
                await asyncio.wait_for(self._stopped.wait(), timeout=self.interval)
            except asyncio.TimeoutError:
                continue
        logger.info("meeting_notifier_stopped")

    def stop(self) -> None:
        self._stopped.set()


def database_fetcher(session_factory: Callable[[], Session], limit: int = 100) -> Callable[[], list[Meeting]]:
    """Fetch upcoming meetings for all users with a short-lived session"""

    def fetch() -> list[Meeting]:
        db = session_factory()
        try:
            meetings = MeetingRepository(db).get_upcoming_all_users(datetime.now(UTC), limit)
            db.expunge_all()
            return meetings
        finally:
            db.close()

    return fetch


def log_notification(notification: MeetingNotification) -> None:
    logger.info(
        "meeting_reminder",
        tag=notification.tag,
        title=notification.title,
        minutes_until=notification.minutes_until,
    )
