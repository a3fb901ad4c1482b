from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from treino.core.logging import get_logger
from treino.db.session import get_db
from treino.deps import get_now
from treino.models.aluno import Aluno
from treino.models.treino_realizado import TreinoRealizado
from treino.schemas.alunos import TreinoRealizadoIn, TreinoRealizadoOut

router = APIRouter(prefix="/treinos-realizados", tags=["treinos-realizados"])


@router.get("", response_model=list[TreinoRealizadoOut])
def list_treinos_realizados(
    aluno_id: str | None = Query(None, alias="alunoId"),
    db: Session = Depends(get_db),
):
    q = select(TreinoRealizado)
    if aluno_id:
        q = q.where(TreinoRealizado.aluno_id == aluno_id)
    rows = db.scalars(q.order_by(TreinoRealizado.data_realizacao.desc())).all()
    return [TreinoRealizadoOut.model_validate(t) for t in rows]


@router.post("", response_model=TreinoRealizadoOut, status_code=201)
def registrar_treino(
    payload: TreinoRealizadoIn,
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    if not db.get(Aluno, payload.aluno_id):
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Aluno não encontrado")
    treino = TreinoRealizado(
        aluno_id=payload.aluno_id,
        data_realizacao=payload.data_realizacao or now,
        duracao_minutos=payload.duracao_minutos,
        observacoes=payload.observacoes,
    )
    db.add(treino)
    db.commit()
    db.refresh(treino)
    get_logger().info("treino.realizado", aluno_id=treino.aluno_id, treino_id=treino.id)
    return TreinoRealizadoOut.model_validate(treino)
