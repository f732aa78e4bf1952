"""Integration tests for /api/events: public reads, display annotation and admin writes."""

import uuid

LORDS_DAY = {
    "title": "Lord's Day Meeting",
    "category": "Service",
    "location": "Komoka Community Centre",
    "time": "10:00 AM - 11:30 AM",
    "isRecurring": True,
    "recurrencePattern": "weekly",
    "recurrenceDayOfWeek": 0,
}

FALL_CONFERENCE = {
    "title": "Fall Conference",
    "category": "Retreat",
    "location": "Komoka Community Centre",
    "startDate": "2026-11-14T18:00:00Z",
}

HARVEST_SUPPER = {
    "title": "Harvest Supper",
    "category": "Outreach",
    "location": "Church Hall",
    "startDate": "2026-09-12T22:00:00Z",
}

MONTH_END_PRAYER = {
    "title": "Month-end Prayer",
    "category": "Prayer",
    "location": "Church Hall",
    "isRecurring": True,
    "recurrencePattern": "monthly",
    "recurrenceDayOfMonth": 31,
}


def _create(client, headers, payload) -> dict:
    resp = client.post("/api/events", json=payload, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["event"]


class TestDisplayAnnotation:
    def test_weekly_event_shows_next_sunday(self, client, admin_headers):
        event = _create(client, admin_headers, LORDS_DAY)
        assert event["displayDate"] == "Next: Sun, Oct 25, 2026"
        assert event["nextOccurrence"] == "2026-10-25"
        assert event["isUpcoming"] is True

    def test_sunday_moves_to_following_week(self, client, admin_headers, clock):
        event = _create(client, admin_headers, LORDS_DAY)
        clock.advance(days=4)  # Sunday 2026-10-25, 11:00 in Komoka
        resp = client.get(f"/api/events/{event['id']}")
        assert resp.status_code == 200
        assert resp.json()["event"]["displayDate"] == "Next: Sun, Nov 1, 2026"

    def test_one_time_event_shows_its_date(self, client, admin_headers):
        event = _create(client, admin_headers, FALL_CONFERENCE)
        assert event["displayDate"] == "Sat, Nov 14, 2026"
        assert event["nextOccurrence"] is None
        assert event["isUpcoming"] is True

    def test_undated_event_is_tbd(self, client, admin_headers):
        event = _create(
            client,
            admin_headers,
            {"title": "Baptisms", "category": "Bible Study", "location": "Lake"},
        )
        assert event["displayDate"] == "Date TBD"
        assert event["isUpcoming"] is False


class TestWallClockDates:
    """Dates sent without an offset are Komoka calendar days."""

    def test_date_only_one_time_event(self, client, admin_headers):
        event = _create(client, admin_headers, {**FALL_CONFERENCE, "startDate": "2026-11-14"})
        assert event["displayDate"] == "Sat, Nov 14, 2026"
        assert event["startDate"].startswith("2026-11-14T05:00:00")

    def test_recurrence_end_date_includes_last_day(self, client, admin_headers):
        event = _create(client, admin_headers, {**LORDS_DAY, "recurrenceEndDate": "2026-10-25"})
        assert event["nextOccurrence"] == "2026-10-25"
        assert event["displayDate"] == "Next: Sun, Oct 25, 2026"
        assert event["isUpcoming"] is True

    def test_naive_yearly_anchor(self, client, admin_headers):
        anniversary = {
            "title": "Christmas Meeting",
            "category": "Service",
            "location": "Church Hall",
            "startDate": "2025-12-25T00:00",
            "isRecurring": True,
            "recurrencePattern": "yearly",
        }
        event = _create(client, admin_headers, anniversary)
        assert event["nextOccurrence"] == "2026-12-25"
        assert event["displayDate"] == "Next: Fri, Dec 25, 2026"

    def test_update_with_date_only_value(self, client, admin_headers):
        event = _create(client, admin_headers, FALL_CONFERENCE)
        resp = client.put(
            f"/api/events/{event['id']}", json={"startDate": "2026-11-21"}, headers=admin_headers
        )
        assert resp.status_code == 200
        assert resp.json()["event"]["displayDate"] == "Sat, Nov 21, 2026"


class TestPublicReads:
    def test_list_returns_active_events(self, client, admin_headers):
        _create(client, admin_headers, LORDS_DAY)
        _create(client, admin_headers, FALL_CONFERENCE)
        resp = client.get("/api/events")
        assert resp.status_code == 200
        titles = {e["title"] for e in resp.json()["events"]}
        assert titles == {"Lord's Day Meeting", "Fall Conference"}

    def test_upcoming_orders_by_next_date(self, client, admin_headers):
        for payload in (FALL_CONFERENCE, HARVEST_SUPPER, MONTH_END_PRAYER, LORDS_DAY):
            _create(client, admin_headers, payload)
        resp = client.get("/api/events/upcoming")
        assert resp.status_code == 200
        events = resp.json()["events"]
        assert [e["title"] for e in events] == [
            "Lord's Day Meeting",
            "Month-end Prayer",
            "Fall Conference",
        ]
        assert events[1]["displayDate"] == "Next: Sat, Oct 31, 2026"

    def test_upcoming_limit(self, client, admin_headers):
        for payload in (FALL_CONFERENCE, MONTH_END_PRAYER, LORDS_DAY):
            _create(client, admin_headers, payload)
        resp = client.get("/api/events/upcoming", params={"limit": 1})
        assert [e["title"] for e in resp.json()["events"]] == ["Lord's Day Meeting"]

    def test_upcoming_limit_must_be_positive(self, client):
        assert client.get("/api/events/upcoming", params={"limit": 0}).status_code == 400

    def test_get_missing_is_404(self, client):
        resp = client.get(f"/api/events/{uuid.uuid4()}")
        assert resp.status_code == 404
        assert resp.json()["error"] == "Event not found"


class TestAdminWrites:
    def test_create_requires_admin(self, client, member_headers):
        resp = client.post("/api/events", json=LORDS_DAY, headers=member_headers)
        assert resp.status_code == 403
        assert resp.json()["error"] == "Unauthorized"

    def test_create_requires_session(self, client):
        assert client.post("/api/events", json=LORDS_DAY).status_code == 403

    def test_create_message(self, client, admin_headers):
        resp = client.post("/api/events", json=FALL_CONFERENCE, headers=admin_headers)
        assert resp.json()["message"] == "Event created successfully"

    def test_unknown_category_rejected(self, client, admin_headers):
        resp = client.post(
            "/api/events", json={**FALL_CONFERENCE, "category": "Concert"}, headers=admin_headers
        )
        assert resp.status_code == 400
        assert resp.json()["field"] == "category"

    def test_weekly_without_weekday_rejected(self, client, admin_headers):
        payload = {k: v for k, v in LORDS_DAY.items() if k != "recurrenceDayOfWeek"}
        resp = client.post("/api/events", json=payload, headers=admin_headers)
        assert resp.status_code == 400
        assert resp.json()["field"] == "recurrenceDayOfWeek"

    def test_weekday_out_of_range_rejected(self, client, admin_headers):
        resp = client.post(
            "/api/events", json={**LORDS_DAY, "recurrenceDayOfWeek": 7}, headers=admin_headers
        )
        assert resp.status_code == 400

    def test_partial_update(self, client, admin_headers):
        event = _create(client, admin_headers, LORDS_DAY)
        resp = client.put(
            f"/api/events/{event['id']}",
            json={"title": "Gospel Meeting", "recurrenceDayOfWeek": 3},
            headers=admin_headers,
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "Event updated successfully"
        assert body["event"]["title"] == "Gospel Meeting"
        assert body["event"]["location"] == "Komoka Community Centre"
        # Wednesday's meeting has already "happened" today, so next week
        assert body["event"]["displayDate"] == "Next: Wed, Oct 28, 2026"

    def test_update_to_monthly_needs_day(self, client, admin_headers):
        event = _create(client, admin_headers, LORDS_DAY)
        resp = client.put(
            f"/api/events/{event['id']}",
            json={"recurrencePattern": "monthly"},
            headers=admin_headers,
        )
        assert resp.status_code == 400
        assert resp.json()["field"] == "recurrenceDayOfMonth"

    def test_update_missing_is_404(self, client, admin_headers):
        resp = client.put(
            f"/api/events/{uuid.uuid4()}", json={"title": "x"}, headers=admin_headers
        )
        assert resp.status_code == 404

    def test_delete_is_soft(self, client, admin_headers):
        event = _create(client, admin_headers, LORDS_DAY)
        resp = client.delete(f"/api/events/{event['id']}", headers=admin_headers)
        assert resp.status_code == 200
        assert resp.json() == {"message": "Event deleted successfully"}

        assert client.get("/api/events").json()["events"] == []
        assert client.get("/api/events/upcoming").json()["events"] == []

        everything = client.get("/api/events/all", headers=admin_headers).json()["events"]
        assert len(everything) == 1
        assert everything[0]["isActive"] is False

    def test_all_requires_admin(self, client, member_headers):
        assert client.get("/api/events/all", headers=member_headers).status_code == 403
