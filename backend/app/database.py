"""SQLAlchemy 엔진/세션 팩토리와 트랜잭션 헬퍼를 제공합니다."""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from app.config import settings

connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """블록 안의 쓰기를 하나의 커밋으로 묶고, 예외 시 전부 롤백한다."""
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
