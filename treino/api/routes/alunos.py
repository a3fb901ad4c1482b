from __future__ import annotations

from datetime import UTC, datetime, timedelta

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from treino.db.session import get_db
from treino.deps import get_now
from treino.models.aluno import Aluno
from treino.models.treino_realizado import TreinoRealizado
from treino.schemas.alunos import AlunoCreateIn, AlunoOut, SemanaOut
from treino.services.provisioning import ProvisioningError, provision_student
from treino.utils.week import trained_days, week_bounds

router = APIRouter(prefix="/alunos", tags=["alunos"])

CAMPOS_OBRIGATORIOS = "Dados obrigatórios faltando: nome, email e senha são necessários"


def aluno_out(aluno: Aluno) -> AlunoOut:
    profile = aluno.profile
    return AlunoOut(
        id=aluno.id,
        nome=profile.nome,
        email=profile.email,
        data_nascimento=aluno.data_nascimento,
        altura=aluno.altura,
        genero=aluno.genero,
        status=aluno.status,
        foto_url=profile.foto_url,
        created_at=aluno.created_at,
        updated_at=aluno.updated_at,
    )


@router.post("", response_model=AlunoOut, status_code=201)
def create_aluno(payload: AlunoCreateIn, db: Session = Depends(get_db)):
    if not (payload.nome and payload.nome.strip()) or not payload.email or not payload.senha:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, CAMPOS_OBRIGATORIOS)
    try:
        aluno = provision_student(db, payload)
    except ProvisioningError as e:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, e.message) from e
    return aluno_out(aluno)


@router.get("/{aluno_id}/semana", response_model=SemanaOut)
def semana_do_aluno(
    aluno_id: str,
    incluir_hoje: bool = Query(True, alias="incluirHoje"),
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    if not db.get(Aluno, aluno_id):
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Aluno não encontrado")

    inicio, fim = week_bounds(now)
    # margem de um dia no filtro; o recorte exato fica com trained_days
    desde = inicio.astimezone(UTC).replace(tzinfo=None) - timedelta(days=1)
    timestamps = db.scalars(
        select(TreinoRealizado.data_realizacao).where(
            TreinoRealizado.aluno_id == aluno_id,
            TreinoRealizado.data_realizacao >= desde,
        )
    ).all()
    dias = trained_days(timestamps, now, include_today=incluir_hoje)
    return SemanaOut(
        inicio_semana=inicio, fim_semana=fim, dias_treinados=dias, total_dias=len(dias)
    )
