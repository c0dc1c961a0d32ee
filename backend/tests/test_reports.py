"""월간 세션 집계 리포트 API 테스트."""

from datetime import date, datetime

import pytest

from app.models.batch import Batch
from app.models.program import Program
from app.models.session import TrainingSession
from tests.conftest import auth_headers


@pytest.fixture
def report_data(db, seed_users, seed_module):
    trainer = seed_users["trainer"]
    program = Program(program_name="Job Ready", duration_months=3)
    db.add(program)
    db.flush()
    batch = Batch(
        batch_name="JR-2026-01",
        start_date=date(2026, 1, 5),
        status="Ongoing",
        program_id=program.id,
        center_id=trainer.center_id,
    )
    db.add(batch)
    db.flush()
    rows = [
        (datetime(2026, 1, 5, 9), "Completed"),
        (datetime(2026, 1, 6, 9), "Published"),
        (datetime(2026, 1, 7, 9), "Missed"),
        (datetime(2026, 1, 8, 9), "Cancelled"),
        (datetime(2026, 1, 20, 9), "Draft"),
        (datetime(2026, 2, 2, 9), "Completed"),
    ]
    for when, status in rows:
        db.add(TrainingSession(
            batch_id=batch.id,
            trainer_id=trainer.id,
            module_id=seed_module.id,
            session_date=when,
            status=status,
            notes=f"{status.lower()} note",
        ))
    db.commit()
    return {"batch": batch, "trainer": trainer, "module": seed_module}


def test_dashboard_summary(client, report_data):
    headers = auth_headers(client, "scheduler@center.org")
    resp = client.get("/api/reports/dashboard-summary", params={"year": 2026, "month": 1}, headers=headers)
    assert resp.status_code == 200
    assert resp.json() == {
        "total_sessions": 5,
        "completed_sessions": 1,
        "missed_sessions": 1,
        "cancelled_sessions": 1,
        "draft_sessions": 1,
        "completion_rate": "20.0",
    }


def test_dashboard_summary_empty_month_and_bad_month(client, report_data):
    headers = auth_headers(client, "scheduler@center.org")
    empty = client.get("/api/reports/dashboard-summary", params={"year": 2025, "month": 6}, headers=headers)
    assert empty.json()["total_sessions"] == 0
    assert empty.json()["completion_rate"] == "0"
    bad = client.get("/api/reports/dashboard-summary", params={"year": 2026, "month": 0}, headers=headers)
    assert bad.status_code == 400


def test_sessions_by_trainer_module_counts_active_statuses(client, report_data):
    headers = auth_headers(client, "asha@center.org")
    resp = client.get("/api/reports/sessions-by-trainer-module", params={"year": 2026, "month": 1}, headers=headers)
    body = resp.json()
    trainer_row = body[str(report_data["trainer"].id)]
    assert trainer_row["trainer_name"] == "Asha"
    module_row = trainer_row["modules"][str(report_data["module"].id)]
    # Completed, Published, Draft
    assert module_row["session_count"] == 3


def test_trainer_sessions_by_location(client, report_data):
    headers = auth_headers(client, "scheduler@center.org")
    resp = client.get("/api/reports/trainer-sessions-by-location", params={"year": 2026, "month": 1}, headers=headers)
    locations = resp.json()[str(report_data["trainer"].id)]["locations"]
    assert list(locations.values()) == [
        {"center_name": "Main Center", "address": "12 MG Road", "session_count": 3},
    ]


def test_cancelled_and_missed_lists(client, report_data):
    headers = auth_headers(client, "scheduler@center.org")
    cancelled = client.get("/api/reports/cancelled-sessions", params={"year": 2026, "month": 1}, headers=headers).json()
    assert cancelled["total"] == 1
    assert cancelled["sessions"][0]["notes"] == "cancelled note"
    assert cancelled["sessions"][0]["trainer"] == "Asha"

    missed = client.get("/api/reports/missed-lessons", params={"year": 2026, "month": 1}, headers=headers).json()
    assert missed["total"] == 1
    assert missed["sessions"][0]["date"] == "2026-01-07T09:00:00"


def test_batch_duration(client, report_data):
    headers = auth_headers(client, "scheduler@center.org")
    resp = client.get("/api/reports/batch-duration", headers=headers)
    assert resp.status_code == 200
    [row] = resp.json()
    assert row["program"] == "Job Ready"
    assert row["total_sessions"] == 6
    assert row["completed_sessions"] == 2
    assert row["start_date"] == "2026-01-05"
    assert row["end_date"] == "2026-02-02"
    assert row["duration_days"] == 28
