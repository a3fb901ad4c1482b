from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from treino.db.session import get_db
from treino.models.bloco_horario import BlocoHorario
from treino.schemas.base import MessageOut
from treino.schemas.blocos import BlocoHorarioIn, BlocoHorarioOut, BlocoHorarioUpdateIn

router = APIRouter(prefix="/admin/blocos-horarios", tags=["blocos-horarios"])


def _get_or_404(db: Session, bloco_id: str) -> BlocoHorario:
    bloco = db.get(BlocoHorario, bloco_id)
    if not bloco:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Bloco não encontrado")
    return bloco


@router.get("", response_model=list[BlocoHorarioOut])
def list_blocos(db: Session = Depends(get_db)):
    rows = db.scalars(
        select(BlocoHorario).order_by(
            BlocoHorario.dia_semana.asc(), BlocoHorario.hora_inicio.asc()
        )
    ).all()
    return [BlocoHorarioOut.model_validate(b) for b in rows]


@router.get("/{bloco_id}", response_model=BlocoHorarioOut)
def get_bloco(bloco_id: str, db: Session = Depends(get_db)):
    return BlocoHorarioOut.model_validate(_get_or_404(db, bloco_id))


@router.post("", response_model=BlocoHorarioOut, status_code=201)
def create_bloco(payload: BlocoHorarioIn, db: Session = Depends(get_db)):
    bloco = BlocoHorario(**payload.model_dump())
    db.add(bloco)
    db.commit()
    db.refresh(bloco)
    return BlocoHorarioOut.model_validate(bloco)


@router.put("/{bloco_id}", response_model=BlocoHorarioOut)
def update_bloco(
    bloco_id: str, payload: BlocoHorarioUpdateIn, db: Session = Depends(get_db)
):
    bloco = _get_or_404(db, bloco_id)
    for field, value in payload.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(bloco, field, value)
    if bloco.hora_fim <= bloco.hora_inicio:
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST, "horaFim deve ser maior que horaInicio"
        )
    db.commit()
    db.refresh(bloco)
    return BlocoHorarioOut.model_validate(bloco)


@router.delete("/{bloco_id}", response_model=MessageOut)
def delete_bloco(bloco_id: str, db: Session = Depends(get_db)):
    bloco = _get_or_404(db, bloco_id)
    db.delete(bloco)
    db.commit()
    return MessageOut(message="Bloco deletado com sucesso")
