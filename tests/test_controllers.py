from __future__ import annotations

from datetime import datetime

import pytest

from worksync.main import create_app


@pytest.fixture
def app(container):
    return create_app(container, settings_module="worksync.config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


def login(client, user_id: int, role: str) -> None:
    with client.session_transaction() as sess:
        sess["user_id"] = user_id
        sess["role"] = role


def test_requires_session(client):
    assert client.post("/attendance/checkin").status_code == 401


def test_checkin_then_checkout(client, clock):
    login(client, 1, "employee")

    resp = client.post("/attendance/checkin")
    assert resp.status_code == 201
    assert resp.get_json()["status"] == "present"

    assert client.post("/attendance/checkin").status_code == 400

    clock.current = datetime(2024, 3, 11, 19, 30)
    resp = client.post("/attendance/checkout")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["workingHours"] == 10.5
    assert body["overtimeHours"] == 1.5


def test_checkout_without_checkin_is_bad_request(client):
    login(client, 1, "employee")

    resp = client.post("/attendance/checkout")

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "You have not checked in today."


def test_employee_cannot_view_summary_or_other_users(client):
    login(client, 1, "employee")

    assert client.get("/attendance/summary").status_code == 403
    assert client.get("/attendance/daily/2").status_code == 403
    assert client.get("/attendance/daily/1").get_json() is None


def test_monthly_requires_month_and_year(client):
    login(client, 1, "employee")

    assert client.get("/attendance/monthly/1").status_code == 400
    assert client.get("/attendance/monthly/1?month=3&year=2024").get_json() == []


def test_admin_summary_and_logs(client):
    login(client, 1, "employee")
    client.post("/attendance/checkin")
    login(client, 9, "sub-admin")

    summary = client.get("/attendance/summary").get_json()
    logs = client.get("/attendance/logs?startDate=2024-03-01&endDate=2024-03-31&status=All").get_json()

    assert summary == {"date": "2024-03-11", "totalEmployees": 2, "present": 1, "absent": 1}
    assert len(logs) == 1
    assert logs[0]["user"]["name"] == "User 1"
    assert client.get("/attendance/logs?startDate=03/01/2024").status_code == 400


def test_settings_read_and_update(client):
    login(client, 1, "employee")
    assert client.get("/settings").get_json()["workingHours"]["checkIn"] == "09:00"
    assert client.put("/settings", json={"workingHours": {"gracePeriod": 0}}).status_code == 403

    login(client, 9, "admin")
    resp = client.put("/settings", json={"workingHours": {"gracePeriod": 0}})
    assert resp.status_code == 200
    assert resp.get_json()["workingHours"]["gracePeriod"] == 0

    assert client.put("/settings", json={"workingHours": {"checkIn": "99:99"}}).status_code == 400


def test_settings_update_rejects_malformed_body(client):
    login(client, 9, "admin")

    assert client.put("/settings", json={"workingHours": "09:00"}).status_code == 400
    assert client.put("/settings", json={"leaveQuotas": 5}).status_code == 400

    resp = client.put("/settings", json={"leaveApprovalRequired": "false"})
    assert resp.status_code == 400
    assert client.get("/settings").get_json()["leaveApprovalRequired"] is False


def test_salary_generation_flow(client):
    login(client, 9, "admin")

    resp = client.post("/salary/generate", json={"userId": 1, "month": 3, "year": 2024})
    assert resp.status_code == 201
    salary = resp.get_json()
    assert salary["month"] == "2024-3"
    assert salary["totalPayable"] == 0.0

    again = client.post("/salary/generate", json={"userId": 1, "month": 3, "year": 2024})
    assert again.status_code == 200
    assert again.get_json()["salary"]["id"] == salary["id"]

    batch = client.post("/salary/generate-batch", json={"month": 3, "year": 2024}).get_json()
    assert batch["count"] == 1
    assert batch["skipped"] == 1

    edited = client.put(f"/salary/{salary['id']}", json={"deductions": 1000}).get_json()
    assert edited["totalPayable"] == 29000.0

    paid = client.post(f"/salary/pay/{salary['id']}").get_json()
    assert paid["status"] == "paid"
    assert paid["paidDate"] == "2024-03-11T09:00:00"

    assert client.post("/salary/pay/999").status_code == 404
    assert client.post("/salary/generate", json={"userId": 404, "month": 3, "year": 2024}).status_code == 404


def test_salary_routes_are_admin_only(client):
    login(client, 8, "sub-admin")
    assert client.post("/salary/generate-batch", json={"month": 3, "year": 2024}).status_code == 403

    login(client, 1, "employee")
    assert client.get("/salary").status_code == 403
    assert client.get("/salary/user/1").get_json() == []
    assert client.get("/salary/user/2").status_code == 403
