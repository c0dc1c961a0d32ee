"""Seed the database with a scheduler account, reference data and this week's published sessions."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from datetime import date, datetime, time, timedelta
from app.database import SessionLocal, engine, Base
import app.models  # noqa: F401

from app.models.trainer import Trainer
from app.models.center import Center
from app.models.module import Module
from app.models.program import Program
from app.models.batch import Batch
from app.models.session import TrainingSession


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(Trainer).count() > 0:
            print("Database already seeded. Skipping.")
            return

        center = Center(name="Main Training Center", address="12 MG Road", location_id="LOC-001")
        db.add(center)
        db.flush()

        modules = [
            Module(name="Basic Computer Skills", module_code="BSC-101", category="BSC", duration=40),
            Module(name="Business IT", module_code="BIT-201", category="BIT", duration=60),
            Module(name="Communication Skills", module_code="BWOW-110", category="B WOW", duration=30),
        ]
        db.add_all(modules)
        db.flush()

        users = [
            Trainer(name="Scheduler Admin", email="scheduler@center.org", role="scheduler", center_id=center.id),
            Trainer(name="Asha Rao", email="asha@center.org", role="trainer", center_id=center.id, modules=modules[:2]),
            Trainer(name="Vikram Shah", email="vikram@center.org", role="trainer", center_id=center.id, modules=modules[1:]),
        ]
        db.add_all(users)
        db.flush()

        program = Program(program_name="Job Readiness", duration_months=2, modules=modules)
        db.add(program)
        db.flush()

        monday = date.today() - timedelta(days=date.today().weekday())
        batch = Batch(
            batch_name="JR-2026-01",
            start_date=monday,
            end_date=monday + timedelta(weeks=9),
            status="Ongoing",
            program_id=program.id,
            center_id=center.id,
        )
        db.add(batch)
        db.flush()

        # 이번 주 게시 세션 (다음 주 초안 생성의 템플릿)
        for offset, (trainer, module) in enumerate([(users[1], modules[0]), (users[2], modules[1]), (users[1], modules[2])]):
            db.add(TrainingSession(
                batch_id=batch.id,
                trainer_id=trainer.id,
                module_id=module.id,
                session_date=datetime.combine(monday + timedelta(days=offset), time(hour=10)),
                status="Published",
            ))

        db.commit()
        print("Seed data created successfully.")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
