from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from treino.core.logging import get_logger
from treino.db.session import get_db
from treino.models.agendamento import Agendamento, AgendamentoStatus
from treino.schemas.agendamentos import (
    AgendamentoCreateIn,
    AgendamentoOut,
    AgendamentoUpdateIn,
)
from treino.schemas.base import MessageOut
from treino.services.agendamentos import book_slot, commit_slot, to_out

router = APIRouter(prefix="/admin/agendamentos", tags=["agendamentos"])


def _get_or_404(db: Session, agendamento_id: str) -> Agendamento:
    ag = db.get(Agendamento, agendamento_id)
    if not ag:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Agendamento não encontrado")
    return ag


@router.get("", response_model=list[AgendamentoOut])
def list_agendamentos(
    data_inicio: date | None = Query(None, alias="dataInicio"),
    data_fim: date | None = Query(None, alias="dataFim"),
    db: Session = Depends(get_db),
):
    q = select(Agendamento)
    if data_inicio:
        q = q.where(Agendamento.data_agendamento >= data_inicio)
    if data_fim:
        q = q.where(Agendamento.data_agendamento <= data_fim)
    q = q.order_by(
        Agendamento.data_agendamento.asc(), Agendamento.hora_inicio.asc()
    )
    return [to_out(ag) for ag in db.scalars(q).unique().all()]


@router.post("", response_model=AgendamentoOut, status_code=201)
def create_agendamento(payload: AgendamentoCreateIn, db: Session = Depends(get_db)):
    if not payload.aluno_id:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "alunoId é obrigatório")
    ag = book_slot(
        db,
        aluno_id=payload.aluno_id,
        data_agendamento=payload.data_agendamento,
        hora_inicio=payload.hora_inicio,
        hora_fim=payload.hora_fim,
        bloco_horario_id=payload.bloco_horario_id,
        tipo=payload.tipo,
        observacoes=payload.observacoes,
    )
    return to_out(ag)


@router.get("/{agendamento_id}", response_model=AgendamentoOut)
def get_agendamento(agendamento_id: str, db: Session = Depends(get_db)):
    return to_out(_get_or_404(db, agendamento_id))


@router.put("/{agendamento_id}", response_model=AgendamentoOut)
def update_agendamento(
    agendamento_id: str, payload: AgendamentoUpdateIn, db: Session = Depends(get_db)
):
    ag = _get_or_404(db, agendamento_id)
    data = payload.model_dump(exclude_unset=True)
    if data.get("status") is not None:
        ag.status = data["status"]
    if data.get("tipo") is not None:
        ag.tipo = data["tipo"]
    if "observacoes" in data:
        ag.observacoes = data["observacoes"]
    commit_slot(db, ag)
    db.refresh(ag)
    return to_out(ag)


def _transition(db: Session, agendamento_id: str, novo: AgendamentoStatus):
    ag = _get_or_404(db, agendamento_id)
    anterior = ag.status
    ag.status = novo
    # cancelado -> ativo pode colidir com outro agendamento do mesmo slot
    commit_slot(db, ag)
    db.refresh(ag)
    get_logger().info(
        "agendamento.status_changed",
        agendamento_id=ag.id,
        de=anterior.value,
        para=novo.value,
    )
    return to_out(ag)


@router.post("/{agendamento_id}/confirmar", response_model=AgendamentoOut)
def confirmar_agendamento(agendamento_id: str, db: Session = Depends(get_db)):
    return _transition(db, agendamento_id, AgendamentoStatus.CONFIRMADO)


@router.post("/{agendamento_id}/cancelar", response_model=AgendamentoOut)
def cancelar_agendamento(agendamento_id: str, db: Session = Depends(get_db)):
    return _transition(db, agendamento_id, AgendamentoStatus.CANCELADO)


@router.post("/{agendamento_id}/concluir", response_model=AgendamentoOut)
def concluir_agendamento(agendamento_id: str, db: Session = Depends(get_db)):
    return _transition(db, agendamento_id, AgendamentoStatus.CONCLUIDO)


@router.delete("/{agendamento_id}", response_model=MessageOut)
def delete_agendamento(agendamento_id: str, db: Session = Depends(get_db)):
    ag = _get_or_404(db, agendamento_id)
    db.delete(ag)
    db.commit()
    get_logger().info("agendamento.deleted", agendamento_id=agendamento_id)
    return MessageOut(message="Agendamento deletado com sucesso")
