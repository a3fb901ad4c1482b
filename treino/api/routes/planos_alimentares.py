from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from treino.core.logging import get_logger
from treino.db.session import get_db
from treino.deps import get_current_aluno
from treino.models.aluno import Aluno
from treino.models.plano_alimentar import PlanoAlimentar
from treino.schemas.base import MessageOut
from treino.schemas.planos import (
    PlanoAlimentarIn,
    PlanoAlimentarOut,
    PlanoAlimentarUpdateIn,
)

admin_router = APIRouter(
    prefix="/admin/planos-alimentares", tags=["planos-alimentares"]
)
router = APIRouter(prefix="/planos-alimentares", tags=["planos-alimentares"])
aluno_router = APIRouter(prefix="/aluno/plano-alimentar", tags=["aluno"])


def _get_or_404(db: Session, plano_id: str) -> PlanoAlimentar:
    plano = db.get(PlanoAlimentar, plano_id)
    if not plano:
        raise HTTPException(
            status.HTTP_404_NOT_FOUND, "Plano alimentar não encontrado"
        )
    return plano


def _do_aluno(aluno_id: str):
    return select(PlanoAlimentar).where(PlanoAlimentar.aluno_id == aluno_id)


def _mais_recentes(q):
    return q.order_by(PlanoAlimentar.data_criacao.desc())


@admin_router.post("", response_model=PlanoAlimentarOut, status_code=201)
def create_plano(payload: PlanoAlimentarIn, db: Session = Depends(get_db)):
    if not db.get(Aluno, payload.aluno_id):
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Aluno não encontrado")
    plano = PlanoAlimentar(**payload.model_dump())
    db.add(plano)
    db.commit()
    db.refresh(plano)
    get_logger().info("plano.created", plano_id=plano.id, aluno_id=plano.aluno_id)
    return PlanoAlimentarOut.model_validate(plano)


# declarada antes de /{aluno_id} para não ser capturada como id
@admin_router.get("/all", response_model=list[PlanoAlimentarOut])
def list_todos(db: Session = Depends(get_db)):
    rows = db.scalars(_mais_recentes(select(PlanoAlimentar))).all()
    return [PlanoAlimentarOut.model_validate(p) for p in rows]


@admin_router.get("/{aluno_id}", response_model=list[PlanoAlimentarOut])
def list_do_aluno(aluno_id: str, db: Session = Depends(get_db)):
    rows = db.scalars(_mais_recentes(_do_aluno(aluno_id))).all()
    return [PlanoAlimentarOut.model_validate(p) for p in rows]


@admin_router.put("/{plano_id}", response_model=PlanoAlimentarOut)
def update_plano(
    plano_id: str, payload: PlanoAlimentarUpdateIn, db: Session = Depends(get_db)
):
    plano = _get_or_404(db, plano_id)
    for field, value in payload.model_dump(exclude_unset=True).items():
        # observacoes pode ser limpa; título e conteúdo não
        if field != "observacoes" and value is None:
            continue
        setattr(plano, field, value)
    db.commit()
    db.refresh(plano)
    return PlanoAlimentarOut.model_validate(plano)


@admin_router.delete("/{plano_id}", response_model=MessageOut)
def delete_plano(plano_id: str, db: Session = Depends(get_db)):
    plano = _get_or_404(db, plano_id)
    db.delete(plano)
    db.commit()
    get_logger().info("plano.deleted", plano_id=plano_id)
    return MessageOut(message="Plano alimentar deletado com sucesso")


@router.get("/{plano_id}", response_model=PlanoAlimentarOut)
def get_plano(plano_id: str, db: Session = Depends(get_db)):
    return PlanoAlimentarOut.model_validate(_get_or_404(db, plano_id))


@aluno_router.get("", response_model=PlanoAlimentarOut)
def meu_plano(
    aluno: Aluno = Depends(get_current_aluno), db: Session = Depends(get_db)
):
    """Plano mais recente do aluno logado."""
    plano = db.scalars(_mais_recentes(_do_aluno(aluno.id))).first()
    if not plano:
        raise HTTPException(
            status.HTTP_404_NOT_FOUND, "Nenhum plano alimentar encontrado"
        )
    return PlanoAlimentarOut.model_validate(plano)
