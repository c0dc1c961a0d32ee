"""SQLAlchemy 모델 패키지 초기화 모듈입니다."""

from app.models.trainer import Trainer
from app.models.center import Center
from app.models.module import Module
from app.models.program import Program
from app.models.batch import Batch
from app.models.session import TrainingSession
from app.models.batch_schedule import BatchSchedule
from app.models.schedule_run import ScheduleRun

__all__ = [
    "Trainer",
    "Center",
    "Module",
    "Program",
    "Batch",
    "TrainingSession",
    "BatchSchedule",
    "ScheduleRun",
]
