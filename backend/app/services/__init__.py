"""서비스 레이어 패키지 초기화 모듈입니다."""

from app.services import (
    auth_service,
    batch_service,
    trainer_service,
    session_service,
    scheduler_service,
    batch_schedule_service,
    report_service,
)
