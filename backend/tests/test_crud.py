from tests.conftest import auth_headers


def test_trainer_crud_with_modules(client, seed_users, seed_module):
    headers = auth_headers(client, "scheduler@center.org")
    resp = client.post(
        "/api/trainers",
        json={"name": "Meera", "email": "Meera@Center.org", "module_ids": [seed_module.id]},
        headers=headers,
    )
    assert resp.status_code == 201, resp.text
    trainer = resp.json()
    assert trainer["email"] == "meera@center.org"
    assert [m["module_code"] for m in trainer["modules"]] == ["BSC-101"]

    updated = client.put(f"/api/trainers/{trainer['id']}", json={"module_ids": []}, headers=headers)
    assert updated.status_code == 200
    assert updated.json()["modules"] == []

    active = client.get("/api/trainers", params={"status": "active", "role": "trainer"}, headers=headers).json()
    assert {t["name"] for t in active} == {"Asha", "Meera"}

    assert client.delete(f"/api/trainers/{trainer['id']}", headers=headers).status_code == 200
    assert client.get(f"/api/trainers/{trainer['id']}", headers=headers).status_code == 404


def test_trainer_duplicate_email_conflict(client, seed_users):
    headers = auth_headers(client, "scheduler@center.org")
    resp = client.post("/api/trainers", json={"name": "Copy", "email": "asha@center.org"}, headers=headers)
    assert resp.status_code == 409
    assert resp.json()["message"] == "이미 사용 중인 이메일입니다."


def test_trainer_validation(client, seed_users):
    headers = auth_headers(client, "scheduler@center.org")
    bad_role = client.post("/api/trainers", json={"name": "X", "email": "x@center.org", "role": "admin"}, headers=headers)
    assert bad_role.status_code == 400
    bad_module = client.post(
        "/api/trainers", json={"name": "Y", "email": "y@center.org", "module_ids": [4242]}, headers=headers
    )
    assert bad_module.status_code == 404


def test_trainer_writes_require_scheduler(client, seed_users):
    headers = auth_headers(client, "asha@center.org")
    assert client.get("/api/trainers", headers=headers).status_code == 200
    resp = client.post("/api/trainers", json={"name": "Z", "email": "z@center.org"}, headers=headers)
    assert resp.status_code == 403


def test_module_and_program_crud(client, seed_users, seed_module):
    headers = auth_headers(client, "scheduler@center.org")
    excel = client.post(
        "/api/modules",
        json={"name": "Spreadsheets", "module_code": "XLS-201", "category": "Office", "duration": 20},
        headers=headers,
    )
    assert excel.status_code == 201
    office = client.get("/api/modules", params={"category": "Office"}, headers=headers).json()
    assert [m["module_code"] for m in office] == ["XLS-201"]

    program = client.post(
        "/api/programs",
        json={"program_name": "Job Ready", "duration_months": 3, "module_ids": [seed_module.id, excel.json()["id"]]},
        headers=headers,
    )
    assert program.status_code == 201
    assert len(program.json()["modules"]) == 2

    renamed = client.put(
        f"/api/programs/{program.json()['id']}",
        json={"program_name": "Job Ready Plus", "module_ids": [seed_module.id]},
        headers=headers,
    )
    assert renamed.json()["program_name"] == "Job Ready Plus"
    assert [m["id"] for m in renamed.json()["modules"]] == [seed_module.id]

    assert client.put("/api/modules/9999", json={"name": "?"}, headers=headers).status_code == 404
    assert client.delete(f"/api/programs/{program.json()['id']}", headers=headers).status_code == 200
    assert client.get("/api/programs", headers=headers).json() == []


def test_center_crud(client, seed_users):
    headers = auth_headers(client, "scheduler@center.org")
    resp = client.post(
        "/api/centers",
        json={"name": "North Center", "address": "5 Lake Rd", "location_id": "LOC-002", "owner_name": "Devi"},
        headers=headers,
    )
    assert resp.status_code == 201
    center_id = resp.json()["id"]
    updated = client.put(f"/api/centers/{center_id}", json={"owner_contact": "98450"}, headers=headers)
    assert updated.json()["owner_contact"] == "98450"
    assert updated.json()["owner_name"] == "Devi"
    assert client.delete(f"/api/centers/{center_id}", headers=headers).status_code == 200
    assert client.delete(f"/api/centers/{center_id}", headers=headers).status_code == 404


def test_batch_crud_and_validation(client, seed_users):
    headers = auth_headers(client, "scheduler@center.org")
    resp = client.post(
        "/api/batches",
        json={"batch_name": "JR-2026-02", "start_date": "2026-02-02", "end_date": "2026-04-30"},
        headers=headers,
    )
    assert resp.status_code == 201
    batch = resp.json()
    assert batch["status"] == "Upcoming"

    backwards = client.put(f"/api/batches/{batch['id']}", json={"end_date": "2026-01-01"}, headers=headers)
    assert backwards.status_code == 400
    bad_status = client.put(f"/api/batches/{batch['id']}", json={"status": "Paused"}, headers=headers)
    assert bad_status.status_code == 400

    ongoing = client.put(f"/api/batches/{batch['id']}", json={"status": "Ongoing"}, headers=headers)
    assert ongoing.json()["status"] == "Ongoing"
    assert client.get(f"/api/batches/{batch['id']}", headers=headers).status_code == 200


def test_delete_batch_removes_sessions_and_schedule(client, seed_users, seed_batch, seed_module):
    headers = auth_headers(client, "scheduler@center.org")
    client.post(
        "/api/sessions",
        json={
            "session_date": "2026-01-06T10:00:00",
            "batch_id": seed_batch.id,
            "trainer_id": seed_users["trainer"].id,
            "module_id": seed_module.id,
        },
        headers=headers,
    )
    client.post(
        "/api/batch-schedules/bulk-upload",
        json={"batch_id": seed_batch.id, "schedule_data": [{"week": 1, "days": [{"day": 1, "content": "Intro"}]}]},
        headers=headers,
    )

    assert client.delete(f"/api/batches/{seed_batch.id}", headers=headers).status_code == 200
    assert client.get("/api/sessions", headers=headers).json() == []
    assert client.get(f"/api/batch-schedules/{seed_batch.id}", headers=headers).status_code == 404


def test_batch_list_filters_and_batch_sessions(client, seed_users, seed_batch, seed_module):
    headers = auth_headers(client, "scheduler@center.org")
    center_id = seed_users["scheduler"].center_id
    client.post(
        "/api/batches",
        json={"batch_name": "JR-2026-03", "start_date": "2026-03-02", "center_id": center_id},
        headers=headers,
    )
    for when, status in (("2026-01-06T10:00:00", "Published"), ("2026-01-07T10:00:00", "Draft")):
        client.post(
            "/api/sessions",
            json={
                "session_date": when,
                "status": status,
                "batch_id": seed_batch.id,
                "trainer_id": seed_users["trainer"].id,
                "module_id": seed_module.id,
            },
            headers=headers,
        )

    ongoing = client.get("/api/batches", params={"status": "Ongoing"}, headers=headers).json()
    assert [b["batch_name"] for b in ongoing] == ["JR-2026-01"]
    at_center = client.get("/api/batches", params={"center_id": center_id}, headers=headers).json()
    assert [b["batch_name"] for b in at_center] == ["JR-2026-03"]
    assert client.get("/api/batches", params={"status": "Paused"}, headers=headers).status_code == 400

    trainer_headers = auth_headers(client, "asha@center.org")
    sessions = client.get(f"/api/batches/{seed_batch.id}/sessions", headers=trainer_headers)
    assert sessions.status_code == 200
    assert [s["status"] for s in sessions.json()] == ["Published", "Draft"]
    drafts = client.get(
        f"/api/batches/{seed_batch.id}/sessions", params={"status": "Draft"}, headers=trainer_headers
    ).json()
    assert [s["session_date"] for s in drafts] == ["2026-01-07T10:00:00"]
    assert client.get("/api/batches/9999/sessions", headers=trainer_headers).status_code == 404
