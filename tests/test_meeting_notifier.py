import asyncio
import threading
from datetime import datetime, timedelta, UTC
from types import SimpleNamespace

from emlak_crm.services.meeting_notifier import (
    MeetingNotifier,
    build_notification,
    database_fetcher,
    select_due_meetings,
)
from emlak_crm.models.meeting import Meeting
from tests.conftest import TestingSessionLocal

NOW = datetime(2030, 3, 1, 12, 0, tzinfo=UTC)


def meeting(id, minutes_ahead, reminder_minutes=None, title="Viewing", notes=None):
    return SimpleNamespace(
        id=id,
        title=title,
        notes=notes,
        reminder_minutes=reminder_minutes,
        start_time=NOW + timedelta(minutes=minutes_ahead),
    )


class TestSelection:
    def test_zero_minute_meeting_window_is_kept(self):
        meetings = [meeting(1, 10, reminder_minutes=0), meeting(2, 10)]
        due = select_due_meetings(meetings, NOW, reminder_minutes=30)
        assert [m.id for m in due] == [2]

    def test_window_is_exclusive_of_now_and_inclusive_of_end(self):
        meetings = [meeting(1, 0), meeting(2, 1), meeting(3, 30), meeting(4, 31), meeting(5, -5)]
        due = select_due_meetings(meetings, NOW, reminder_minutes=30)
        assert [m.id for m in due] == [2, 3]

    def test_per_meeting_window_overrides_default(self):
        meetings = [meeting(1, 50, reminder_minutes=60), meeting(2, 50)]
        due = select_due_meetings(meetings, NOW, reminder_minutes=30)
        assert [m.id for m in due] == [1]

    def test_naive_start_time_is_utc(self):
        m = meeting(1, 10)
        m.start_time = m.start_time.replace(tzinfo=None)
        assert select_due_meetings([m], NOW, reminder_minutes=30) == [m]


class TestBuildNotification:
    def test_content(self):
        notification = build_notification(meeting(7, 15, title="Key handover", notes="Bring ID"), NOW)

        assert notification.tag == "7"
        assert notification.title == "Upcoming Meeting: Key handover"
        assert notification.body == "Your meeting is in 15 minutes. Notes: Bring ID"
        assert notification.minutes_until == 15

    def test_fallbacks(self):
        notification = build_notification(meeting(1, 0.2, title=None), NOW)

        assert notification.title == "Upcoming Meeting: Meeting"
        assert notification.body == "Your meeting is in 1 minutes. Notes: None"


class TestNotifier:
    def test_notifies_each_meeting_once(self):
        sent = []
        meetings = [meeting(1, 10), meeting(2, 120)]
        notifier = MeetingNotifier(lambda: meetings, sent.append, reminder_minutes=30, interval=1, clock=lambda: NOW)

        first = asyncio.run(notifier.poll_once())
        second = asyncio.run(notifier.poll_once())

        assert [n.meeting_id for n in first] == [1]
        assert second == []
        assert [n.meeting_id for n in sent] == [1]

    def test_meeting_becomes_due_later(self):
        sent = []
        clock = {"now": NOW}
        notifier = MeetingNotifier(
            lambda: [meeting(1, 45)], sent.append, reminder_minutes=30, interval=1, clock=lambda: clock["now"]
        )

        asyncio.run(notifier.poll_once())
        clock["now"] = NOW + timedelta(minutes=20)
        asyncio.run(notifier.poll_once())

        assert [n.minutes_until for n in sent] == [25]

    def test_async_fetcher(self):
        async def fetch():
            return [meeting(3, 5)]

        sent = []
        notifier = MeetingNotifier(fetch, sent.append, reminder_minutes=30, interval=1, clock=lambda: NOW)

        asyncio.run(notifier.poll_once())

        assert [n.meeting_id for n in sent] == [3]

    def test_fetch_error_is_logged_not_raised(self):
        def broken():
            raise RuntimeError("database unavailable")

        sent = []
        notifier = MeetingNotifier(broken, sent.append, reminder_minutes=30, interval=1, clock=lambda: NOW)

        assert asyncio.run(notifier.poll_once()) == []
        assert sent == []

    def test_sync_fetcher_runs_off_the_event_loop_thread(self):
        fetch_threads = []

        def fetch():
            fetch_threads.append(threading.get_ident())
            return [meeting(1, 10)]

        async def scenario():
            notifier = MeetingNotifier(fetch, lambda n: None, reminder_minutes=30, interval=1, clock=lambda: NOW)
            await notifier.poll_once()
            return threading.get_ident()

        loop_thread = asyncio.run(scenario())

        assert len(fetch_threads) == 1
        assert fetch_threads[0] != loop_thread

    def test_forgets_meetings_that_left_the_upcoming_set(self):
        sent = []
        upcoming = {"meetings": [meeting(1, 10)]}
        notifier = MeetingNotifier(
            lambda: upcoming["meetings"], sent.append, reminder_minutes=30, interval=1, clock=lambda: NOW
        )

        asyncio.run(notifier.poll_once())
        assert notifier.notified_ids == {1}

        upcoming["meetings"] = []
        asyncio.run(notifier.poll_once())
        assert notifier.notified_ids == set()

        # rescheduled back into the window
        upcoming["meetings"] = [meeting(1, 5)]
        asyncio.run(notifier.poll_once())
        assert [n.meeting_id for n in sent] == [1, 1]

    def test_zero_default_window_notifies_nothing(self):
        sent = []
        notifier = MeetingNotifier(
            lambda: [meeting(1, 10)], sent.append, reminder_minutes=0, interval=1, clock=lambda: NOW
        )

        assert notifier.reminder_minutes == 0
        assert asyncio.run(notifier.poll_once()) == []
        assert sent == []

    def test_run_until_stopped(self):
        sent = []
        calls = []

        def fetch():
            calls.append(1)
            return [meeting(1, 10)]

        async def scenario():
            notifier = MeetingNotifier(fetch, sent.append, reminder_minutes=30, interval=0.01, clock=lambda: NOW)
            task = asyncio.create_task(notifier.run())
            await asyncio.sleep(0.05)
            notifier.stop()
            await asyncio.wait_for(task, timeout=1)

        asyncio.run(scenario())

        assert len(calls) >= 2
        assert len(sent) == 1


def test_database_fetcher_reads_all_users(db_session, test_user):
    soon = datetime.now(UTC) + timedelta(minutes=10)
    db_session.add_all(
        [
            Meeting(user_id=test_user.id, title="Soon", start_time=soon),
            Meeting(user_id=test_user.id, title="Past", start_time=soon - timedelta(days=1)),
        ]
    )
    db_session.commit()

    fetched = database_fetcher(TestingSessionLocal)()

    assert [m.title for m in fetched] == ["Soon"]
