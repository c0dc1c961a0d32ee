"""Permissions 관련 공용 유틸리티 헬퍼입니다."""

from app.models.trainer import Trainer


SCHEDULER = "scheduler"
TRAINER = "trainer"

ALL_ROLES = (SCHEDULER, TRAINER)

ACTIVE = "active"
INACTIVE = "inactive"


def is_active(user: Trainer) -> bool:
    return user.status == ACTIVE
