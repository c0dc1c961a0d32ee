"""Bearer 토큰으로 현재 트레이너 계정을 식별하고 역할 기반 접근을 검사하는 의존성 모음입니다."""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from jose import JWTError, jwt
from app.database import get_db
from app.models.trainer import Trainer
from app.config import settings
from app.utils.permissions import ALL_ROLES, SCHEDULER, is_active

security = HTTPBearer()

ALGORITHM = "HS256"


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


def decode_token(token: str) -> dict:
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        raise _unauthorized("토큰이 유효하지 않거나 만료되었습니다.")


def trainer_id_from(payload: dict) -> int:
    # sub 는 create_access_token 에서 문자열로 인코딩한 트레이너 id
    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        raise _unauthorized("토큰에 트레이너 정보가 없습니다.")


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db),
) -> Trainer:
    trainer_id = trainer_id_from(decode_token(credentials.credentials))
    trainer = db.query(Trainer).filter(Trainer.id == trainer_id).first()
    if not trainer or not is_active(trainer):
        raise _unauthorized("존재하지 않거나 비활성화된 계정입니다.")
    return trainer


def require_roles(*roles: str):
    unknown = set(roles) - set(ALL_ROLES)
    if unknown:
        raise ValueError(f"unknown roles: {sorted(unknown)}")

    def checker(current_user: Trainer = Depends(get_current_user)) -> Trainer:
        if current_user.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"{', '.join(roles)} 권한이 필요합니다.",
            )
        return current_user
    return checker


require_scheduler = require_roles(SCHEDULER)
