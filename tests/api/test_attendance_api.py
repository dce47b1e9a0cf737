from __future__ import annotations

from datetime import datetime


def _check_in(client, user_id="2", name="John Doe", **extra):
    return client.post("/api/attendance/check-in", json={"userId": user_id, "userName": name, **extra})


def test_check_in_returns_record(client):
    res = _check_in(client, location="Office", notes="on site")

    assert res.status_code == 200
    body = res.get_json()
    assert body["success"] is True
    assert body["record"]["status"] == "present"
    assert body["record"]["checkIn"] == "2026-02-02T08:30:00"
    assert body["record"]["checkOut"] is None
    assert body["record"]["workHours"] == "In Progress"
    assert body["record"]["location"] == "Office"


def test_check_in_twice_same_day_is_400(client):
    assert _check_in(client).status_code == 200

    res = _check_in(client)

    assert res.status_code == 400
    assert res.get_json()["error"] == "Already checked in today"


def test_check_in_at_nine_is_late(client, clock):
    clock.now = datetime(2026, 2, 2, 9, 0, 0)

    assert _check_in(client).get_json()["record"]["status"] == "late"


def test_check_in_requires_user_fields(client):
    res = client.post("/api/attendance/check-in", json={"userId": "2"})

    assert res.status_code == 400
    assert res.get_json()["error"] == "User ID and name are required"


def test_check_in_with_invalid_json_is_400(client):
    res = client.post("/api/attendance/check-in", data="not json", content_type="application/json")

    assert res.status_code == 400


def test_check_out_before_check_in_is_400(client):
    res = client.post("/api/attendance/check-out", json={"userId": "2"})

    assert res.status_code == 400
    assert res.get_json()["error"] == "No check-in record found for today"


def test_check_out_flow(client, clock):
    _check_in(client)
    clock.now = datetime(2026, 2, 2, 17, 30)

    res = client.post("/api/attendance/check-out", json={"userId": "2"})
    assert res.status_code == 200
    record = res.get_json()["record"]
    assert record["checkOut"] == "2026-02-02T17:30:00"
    assert record["workHours"] == "9h 0m"

    again = client.post("/api/attendance/check-out", json={"userId": "2"})
    assert again.status_code == 400
    assert again.get_json()["error"] == "Already checked out today"


def test_check_out_requires_user_id(client):
    assert client.post("/api/attendance/check-out", json={}).status_code == 400


def test_status(client):
    assert client.get("/api/attendance/status").status_code == 400
    assert client.get("/api/attendance/status?userId=2").get_json() == {"record": None}

    _check_in(client)

    record = client.get("/api/attendance/status?userId=2").get_json()["record"]
    assert record["userId"] == "2"


def test_list_all_newest_first(client):
    _check_in(client, user_id="3", name="Jane Smith")

    records = client.get("/api/attendance/all").get_json()["records"]

    assert [r["id"] for r in records] == ["3", "2", "1"]


def test_list_all_date_range_is_inclusive(client):
    _check_in(client)

    res = client.get("/api/attendance/all?startDate=2024-01-15&endDate=2024-01-15")
    assert [r["userName"] for r in res.get_json()["records"]] == ["Jane Smith", "John Doe"]

    res = client.get("/api/attendance/all?startDate=2024-01-15T09:00:00&endDate=2024-01-15T09:15:00")
    assert len(res.get_json()["records"]) == 2

    res = client.get("/api/attendance/all?startDate=2024-01-16&endDate=2026-02-02")
    assert [r["userId"] for r in res.get_json()["records"]] == ["2"]


def test_list_all_ignores_half_open_range(client):
    res = client.get("/api/attendance/all?startDate=2024-01-16")

    assert len(res.get_json()["records"]) == 2


def test_list_all_rejects_bad_dates(client):
    assert client.get("/api/attendance/all?startDate=yesterday&endDate=today").status_code == 400
    assert client.get("/api/attendance/all?startDate=2024-02-01&endDate=2024-01-01").status_code == 400


def test_export_csv(client):
    res = client.get("/api/attendance/export.csv?startDate=2024-01-15&endDate=2024-01-15")

    assert res.status_code == 200
    assert res.mimetype == "text/csv"
    assert "attendance_20240115_20240115.csv" in res.headers["Content-Disposition"]
    lines = res.data.decode("utf-8-sig").strip().splitlines()
    assert lines[0].startswith("date,user_id,user_name")
    assert len(lines) == 3
    assert "8h 30m" in lines[2]


def test_list_all_rejects_compact_dates(client):
    res = client.get("/api/attendance/all?startDate=20240115&endDate=20240115")

    assert res.status_code == 400
    assert res.get_json()["error"] == "Invalid date range"
