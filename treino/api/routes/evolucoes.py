from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from treino.db.session import get_db
from treino.models.aluno import Aluno
from treino.models.evolucao import Evolucao
from treino.schemas.evolucoes import (
    EvolucaoIn,
    EvolucaoOut,
    EvolucaoStatsOut,
    EvolucaoUpdateIn,
)
from treino.services.evolucoes import compute_stats

router = APIRouter(prefix="/evolucoes", tags=["evolucoes"])


def _get_or_404(db: Session, evolucao_id: str) -> Evolucao:
    evolucao = db.get(Evolucao, evolucao_id)
    if not evolucao:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Evolução não encontrada")
    return evolucao


@router.get("", response_model=list[EvolucaoOut])
def list_evolucoes(
    aluno_id: str | None = Query(None, alias="alunoId"),
    db: Session = Depends(get_db),
):
    q = select(Evolucao)
    if aluno_id:
        q = q.where(Evolucao.aluno_id == aluno_id)
    rows = db.scalars(
        q.order_by(Evolucao.data.desc(), Evolucao.created_at.desc())
    ).all()
    return [EvolucaoOut.model_validate(e) for e in rows]


@router.get("/stats", response_model=EvolucaoStatsOut)
def evolucao_stats(
    aluno_id: str | None = Query(None, alias="alunoId"),
    db: Session = Depends(get_db),
):
    if not aluno_id:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "alunoId é obrigatório")
    rows = db.scalars(select(Evolucao).where(Evolucao.aluno_id == aluno_id)).all()
    return compute_stats(rows)


@router.post("", response_model=EvolucaoOut, status_code=201)
def create_evolucao(payload: EvolucaoIn, db: Session = Depends(get_db)):
    if not db.get(Aluno, payload.aluno_id):
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Aluno não encontrado")
    evolucao = Evolucao(**payload.model_dump())
    db.add(evolucao)
    db.commit()
    db.refresh(evolucao)
    return EvolucaoOut.model_validate(evolucao)


@router.put("/{evolucao_id}", response_model=EvolucaoOut)
def update_evolucao(
    evolucao_id: str, payload: EvolucaoUpdateIn, db: Session = Depends(get_db)
):
    evolucao = _get_or_404(db, evolucao_id)
    data = payload.model_dump(exclude_unset=True)
    if data.get("data") is None:
        data.pop("data", None)
    for field, value in data.items():
        setattr(evolucao, field, value)
    db.commit()
    db.refresh(evolucao)
    return EvolucaoOut.model_validate(evolucao)


@router.delete("/{evolucao_id}", status_code=204)
def delete_evolucao(evolucao_id: str, db: Session = Depends(get_db)):
    db.delete(_get_or_404(db, evolucao_id))
    db.commit()
    return Response(status_code=204)
