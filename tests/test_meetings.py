from datetime import datetime, timedelta, UTC


def _iso(dt: datetime) -> str:
    return dt.isoformat()


class TestMeetingCRUD:
    """Test meeting calendar operations"""

    def test_create_meeting(self, client, auth_headers):
        start = datetime(2030, 5, 1, 9, 30, tzinfo=UTC)
        response = client.post(
            "/api/meetings",
            headers=auth_headers,
            json={"title": "Key handover", "start_time": _iso(start), "notes": "Bring spare keys"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["title"] == "Key handover"
        assert datetime.fromisoformat(data["start_time"]) == start

    def test_offset_is_normalised_to_utc(self, client, auth_headers):
        response = client.post(
            "/api/meetings",
            headers=auth_headers,
            json={"title": "Viewing", "start_time": "2030-05-01T12:00:00+03:00"},
        )
        assert datetime.fromisoformat(response.json()["start_time"]) == datetime(2030, 5, 1, 9, 0, tzinfo=UTC)

    def test_list_ordered_by_start_time(self, client, auth_headers):
        for title, day in [("Later", 20), ("Sooner", 10), ("Middle", 15)]:
            client.post(
                "/api/meetings",
                headers=auth_headers,
                json={"title": title, "start_time": _iso(datetime(2030, 6, day, 10, tzinfo=UTC))},
            )

        data = client.get("/api/meetings", headers=auth_headers).json()

        assert data["total"] == 3
        assert [m["title"] for m in data["meetings"]] == ["Sooner", "Middle", "Later"]

    def test_range(self, client, auth_headers):
        for day in (1, 10, 20):
            client.post(
                "/api/meetings",
                headers=auth_headers,
                json={"title": f"Day {day}", "start_time": _iso(datetime(2030, 7, day, 10, tzinfo=UTC))},
            )

        response = client.get(
            "/api/meetings/range",
            headers=auth_headers,
            params={"start": "2030-07-05T00:00:00Z", "end": "2030-07-15T00:00:00Z"},
        )

        assert response.status_code == 200
        assert [m["title"] for m in response.json()["meetings"]] == ["Day 10"]

    def test_upcoming_excludes_past_and_respects_limit(self, client, auth_headers):
        now = datetime.now(UTC)
        client.post("/api/meetings", headers=auth_headers, json={"title": "Past", "start_time": _iso(now - timedelta(days=1))})
        for hours in (1, 2, 3):
            client.post(
                "/api/meetings",
                headers=auth_headers,
                json={"title": f"In {hours}h", "start_time": _iso(now + timedelta(hours=hours))},
            )

        data = client.get("/api/meetings/upcoming", headers=auth_headers, params={"limit": 2}).json()

        assert [m["title"] for m in data["meetings"]] == ["In 1h", "In 2h"]

    def test_due_reminders(self, client, auth_headers):
        now = datetime.now(UTC)
        client.post(
            "/api/meetings",
            headers=auth_headers,
            json={"title": "Contract signing", "start_time": _iso(now + timedelta(minutes=10)), "notes": "Bring ID"},
        )
        client.post("/api/meetings", headers=auth_headers, json={"title": "Next week", "start_time": _iso(now + timedelta(days=7))})

        data = client.get("/api/meetings/reminders", headers=auth_headers).json()

        assert data["total"] == 1
        reminder = data["reminders"][0]
        assert reminder["title"] == "Upcoming Meeting: Contract signing"
        assert reminder["body"].startswith("Your meeting is in ")
        assert reminder["body"].endswith("Notes: Bring ID")
        assert reminder["tag"] == str(reminder["meeting_id"])

    def test_update_and_delete(self, client, auth_headers):
        meeting = client.post(
            "/api/meetings",
            headers=auth_headers,
            json={"title": "Draft", "start_time": _iso(datetime(2030, 1, 1, 10, tzinfo=UTC))},
        ).json()

        response = client.patch(f"/api/meetings/{meeting['id']}", headers=auth_headers, json={"title": "Final"})
        assert response.json()["title"] == "Final"

        assert client.delete(f"/api/meetings/{meeting['id']}", headers=auth_headers).status_code == 204
        response = client.get(f"/api/meetings/{meeting['id']}", headers=auth_headers)
        assert response.status_code == 404
        assert response.json()["code"] == "ERROR_MEETING_NOT_FOUND"


class TestMeetingLinks:
    def test_link_to_own_tenant(self, client, auth_headers, create_tenant):
        tenant = create_tenant()
        response = client.post(
            "/api/meetings",
            headers=auth_headers,
            json={"title": "Viewing", "start_time": "2030-01-01T10:00:00Z", "tenant_id": tenant["id"]},
        )
        assert response.status_code == 201
        assert response.json()["tenant_id"] == tenant["id"]

    def test_cannot_link_another_users_tenant(self, client, user_a_headers, user_b_headers, create_tenant):
        tenant = create_tenant(headers=user_a_headers)
        response = client.post(
            "/api/meetings",
            headers=user_b_headers,
            json={"title": "Viewing", "start_time": "2030-01-01T10:00:00Z", "tenant_id": tenant["id"]},
        )
        assert response.status_code == 404
        assert response.json()["code"] == "ERROR_TENANT_NOT_FOUND"

    def test_meetings_are_private(self, client, user_a_headers, user_b_headers):
        meeting = client.post(
            "/api/meetings", headers=user_a_headers, json={"title": "Private", "start_time": "2030-01-01T10:00:00Z"}
        ).json()

        assert client.get(f"/api/meetings/{meeting['id']}", headers=user_b_headers).status_code == 404
        assert client.get("/api/meetings", headers=user_b_headers).json()["total"] == 0
