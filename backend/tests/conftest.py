import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from app.database import Base, get_db
from app.main import app
from app.models.trainer import Trainer
from app.models.center import Center
from app.models.module import Module
from app.models.batch import Batch
from datetime import date

TEST_DB_URL = "sqlite:///./test_training_scheduler.db"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def seed_users(db):
    center = Center(name="Main Center", address="12 MG Road", location_id="LOC-001")
    db.add(center)
    db.flush()
    users = {
        "scheduler": Trainer(name="Scheduler", email="scheduler@center.org", role="scheduler", center_id=center.id),
        "trainer": Trainer(name="Asha", email="asha@center.org", role="trainer", center_id=center.id),
        "inactive": Trainer(name="Ravi", email="ravi@center.org", role="trainer", status="inactive"),
    }
    for u in users.values():
        db.add(u)
    db.commit()
    for u in users.values():
        db.refresh(u)
    return users


@pytest.fixture
def seed_module(db):
    module = Module(name="Basic Computer Skills", module_code="BSC-101", category="BSC", duration=40)
    db.add(module)
    db.commit()
    db.refresh(module)
    return module


@pytest.fixture
def seed_batch(db, seed_users):
    # 2026-01-05 은 월요일이며, 같은 주 토요일(1/10)은 1월의 둘째 토요일이다.
    batch = Batch(batch_name="JR-2026-01", start_date=date(2026, 1, 5), end_date=date(2026, 3, 6), status="Ongoing")
    db.add(batch)
    db.commit()
    db.refresh(batch)
    return batch


def get_token(client, email: str) -> str:
    resp = client.post("/api/auth/login", json={"email": email})
    assert resp.status_code == 200, resp.text
    return resp.json()["access_token"]


def auth_headers(client, email: str) -> dict:
    return {"Authorization": f"Bearer {get_token(client, email)}"}
