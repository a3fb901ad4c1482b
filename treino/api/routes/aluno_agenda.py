from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from treino.db.session import get_db
from treino.deps import get_current_aluno, get_now
from treino.models.agendamento import Agendamento, AgendamentoStatus
from treino.models.aluno import Aluno
from treino.schemas.agendamentos import (
    AgendamentoCreateIn,
    AgendamentoOut,
    FaltaIn,
    ReagendamentoIn,
)
from treino.services.agendamentos import book_slot, to_out
from treino.utils.time import fmt_hhmm

router = APIRouter(prefix="/aluno/agendamentos", tags=["aluno"])


def _own_or_403(db: Session, aluno: Aluno, agendamento_id: str) -> Agendamento:
    ag = db.get(Agendamento, agendamento_id)
    if not ag:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Agendamento não encontrado")
    if ag.aluno_id != aluno.id:
        raise HTTPException(status.HTTP_403_FORBIDDEN, "Sem permissão")
    return ag


@router.get("", response_model=list[AgendamentoOut])
def meus_agendamentos(
    aluno: Aluno = Depends(get_current_aluno), db: Session = Depends(get_db)
):
    rows = db.scalars(
        select(Agendamento)
        .where(Agendamento.aluno_id == aluno.id)
        .order_by(Agendamento.data_agendamento.asc(), Agendamento.hora_inicio.asc())
    ).unique().all()
    return [to_out(ag) for ag in rows]


@router.post("", response_model=AgendamentoOut, status_code=201)
def agendar(
    payload: AgendamentoCreateIn,
    aluno: Aluno = Depends(get_current_aluno),
    db: Session = Depends(get_db),
):
    ag = book_slot(
        db,
        aluno_id=aluno.id,
        data_agendamento=payload.data_agendamento,
        hora_inicio=payload.hora_inicio,
        hora_fim=payload.hora_fim,
        bloco_horario_id=payload.bloco_horario_id,
        tipo=payload.tipo,
        observacoes=payload.observacoes,
    )
    return to_out(ag)


@router.post("/{agendamento_id}/reagendamento", response_model=AgendamentoOut)
def solicitar_reagendamento(
    agendamento_id: str,
    payload: ReagendamentoIn,
    aluno: Aluno = Depends(get_current_aluno),
    db: Session = Depends(get_db),
):
    ag = _own_or_403(db, aluno, agendamento_id)
    if ag.status in (AgendamentoStatus.CANCELADO, AgendamentoStatus.CONCLUIDO):
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST,
            f"Agendamento {ag.status.value} não pode ser reagendado",
        )
    ag.observacoes = (
        "SOLICITAÇÃO DE REAGENDAMENTO:\n"
        f"Nova data: {payload.nova_data.isoformat()} às {fmt_hhmm(payload.nova_hora_inicio)}\n"
        f"Motivo: {payload.motivo}"
    )
    # status inalterado até o admin efetivar a troca
    db.commit()
    db.refresh(ag)
    return to_out(ag)


@router.post("/{agendamento_id}/falta", response_model=AgendamentoOut)
def comunicar_falta(
    agendamento_id: str,
    payload: FaltaIn,
    aluno: Aluno = Depends(get_current_aluno),
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    ag = _own_or_403(db, aluno, agendamento_id)
    ag.observacoes = (
        "COMUNICAÇÃO DE FALTA:\n"
        f"Motivo: {payload.motivo}\n"
        f"Data: {now.strftime('%d/%m/%Y %H:%M')}"
    )
    ag.status = AgendamentoStatus.CANCELADO
    db.commit()
    db.refresh(ag)
    return to_out(ag)
