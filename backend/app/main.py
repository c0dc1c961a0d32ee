"""FastAPI 애플리케이션 진입점. 미들웨어, API 라우터, 예외 핸들러를 등록합니다."""

import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from app.config import settings
from app.database import Base, engine
import app.models  # noqa: F401 - 모델 import로 metadata 등록
from app.routers import (
    auth, trainers, modules, programs, centers, batches,
    sessions, scheduler, batch_schedules, reports,
)

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Training Center Scheduler",
    description="트레이닝 센터 트레이너/차수/세션 일정 관리 및 주간 초안·게시 스케줄러",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register all routers
app.include_router(auth.router)
app.include_router(trainers.router)
app.include_router(modules.router)
app.include_router(programs.router)
app.include_router(centers.router)
app.include_router(batches.router)
app.include_router(sessions.router)
app.include_router(scheduler.router)
app.include_router(batch_schedules.router)
app.include_router(reports.router)


@app.exception_handler(IntegrityError)
def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning("[db] integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
    if "email" in str(exc.orig).lower():
        message = "이미 사용 중인 이메일입니다."
    else:
        message = "중복되었거나 참조 무결성을 위반하는 데이터입니다."
    return JSONResponse(status_code=409, content={"success": False, "message": message, "detail": message})


@app.exception_handler(SQLAlchemyError)
def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("[db] unexpected database failure on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "message": "데이터 처리 중 서버 오류가 발생했습니다. 서버 로그를 확인하세요.",
            "error": exc.__class__.__name__,
        },
    )


@app.on_event("startup")
def ensure_schema():
    # 신규 기능 배포 시 누락된 테이블을 자동 생성합니다.
    Base.metadata.create_all(bind=engine)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "service": "Training Center Scheduler"}
