"""Programs 기능 API 라우터입니다."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.schemas.program import ProgramCreate, ProgramUpdate, ProgramOut
from app.models.program import Program
from app.models.module import Module
from app.middleware.auth_middleware import get_current_user, require_scheduler
from app.models.trainer import Trainer

router = APIRouter(prefix="/api/programs", tags=["programs"])


def _get_program(db: Session, program_id: int) -> Program:
    p = db.query(Program).filter(Program.id == program_id).first()
    if not p:
        raise HTTPException(status_code=404, detail="프로그램을 찾을 수 없습니다.")
    return p


def _modules(db: Session, module_ids: List[int]) -> List[Module]:
    if not module_ids:
        return []
    return db.query(Module).filter(Module.id.in_(module_ids)).all()


@router.get("", response_model=List[ProgramOut])
def list_programs(db: Session = Depends(get_db), current_user: Trainer = Depends(get_current_user)):
    return db.query(Program).order_by(Program.program_name).all()


@router.post("", response_model=ProgramOut, status_code=201)
def create_program(
    data: ProgramCreate,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(require_scheduler),
):
    payload = data.model_dump()
    module_ids = payload.pop("module_ids", [])
    p = Program(**payload)
    p.modules = _modules(db, module_ids)
    db.add(p)
    db.commit()
    db.refresh(p)
    return p


@router.put("/{program_id}", response_model=ProgramOut)
def update_program(
    program_id: int,
    data: ProgramUpdate,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(require_scheduler),
):
    p = _get_program(db, program_id)
    payload = data.model_dump(exclude_none=True)
    module_ids = payload.pop("module_ids", None)
    for k, v in payload.items():
        setattr(p, k, v)
    if module_ids is not None:
        p.modules = _modules(db, module_ids)
    db.commit()
    db.refresh(p)
    return p


@router.delete("/{program_id}")
def delete_program(
    program_id: int,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(require_scheduler),
):
    p = _get_program(db, program_id)
    db.delete(p)
    db.commit()
    return {"message": "삭제되었습니다."}
