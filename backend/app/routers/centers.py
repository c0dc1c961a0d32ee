"""Centers 기능 API 라우터입니다."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.schemas.center import CenterCreate, CenterUpdate, CenterOut
from app.models.center import Center
from app.middleware.auth_middleware import get_current_user, require_scheduler
from app.models.trainer import Trainer

router = APIRouter(prefix="/api/centers", tags=["centers"])


def _get_center(db: Session, center_id: int) -> Center:
    c = db.query(Center).filter(Center.id == center_id).first()
    if not c:
        raise HTTPException(status_code=404, detail="센터를 찾을 수 없습니다.")
    return c


@router.get("", response_model=List[CenterOut])
def list_centers(db: Session = Depends(get_db), current_user: Trainer = Depends(get_current_user)):
    return db.query(Center).order_by(Center.name).all()


@router.post("", response_model=CenterOut, status_code=201)
def create_center(
    data: CenterCreate,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(require_scheduler),
):
    c = Center(**data.model_dump())
    db.add(c)
    db.commit()
    db.refresh(c)
    return c


@router.put("/{center_id}", response_model=CenterOut)
def update_center(
    center_id: int,
    data: CenterUpdate,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(require_scheduler),
):
    c = _get_center(db, center_id)
    for k, v in data.model_dump(exclude_none=True).items():
        setattr(c, k, v)
    db.commit()
    db.refresh(c)
    return c


@router.delete("/{center_id}")
def delete_center(
    center_id: int,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(require_scheduler),
):
    c = _get_center(db, center_id)
    db.delete(c)
    db.commit()
    return {"message": "삭제되었습니다."}
