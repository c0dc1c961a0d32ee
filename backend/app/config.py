"""환경 변수 기반 애플리케이션 설정을 중앙에서 관리합니다."""

from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./training_scheduler.db"
    SECRET_KEY: str = "change-me-to-a-random-secret-key"
    DEBUG: bool = True
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]
    LOG_LEVEL: str = "INFO"

    # JWT
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 1440

    # Working-day calendar
    # 월 기준 n번째 토요일 휴무 정책 (기본: 둘째/넷째 토요일)
    NON_WORKING_SATURDAYS: List[int] = [2, 4]
    CALENDAR_FIRST_SESSION_HOUR: int = 9

    # Draft/publish scheduler
    # True이면 같은 대상 주차에 대한 초안 생성 재요청을 무시한다.
    DRAFT_GENERATION_IDEMPOTENT: bool = False

    class Config:
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()
