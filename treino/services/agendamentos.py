from __future__ import annotations

from datetime import date, datetime, time

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from treino.core.errors import ConflictError
from treino.core.logging import get_logger
from treino.models.agendamento import (
    SLOT_INDEX_NAME,
    Agendamento,
    AgendamentoStatus,
    AgendamentoTipo,
)
from treino.models.aluno import Aluno
from treino.models.bloco_horario import BlocoHorario
from treino.schemas.agendamentos import AgendamentoOut, AlunoResumo, BlocoResumo
from treino.utils.time import add_minutes
from treino.utils.week import native_weekday

SLOT_TAKEN = "Já existe um agendamento para este horário"

# SQLite não cita o nome do índice, só as colunas
SLOT_COLUMNS = (
    "agendamentos_presenciais.data_agendamento, agendamentos_presenciais.hora_inicio"
)


def is_slot_conflict(exc: IntegrityError) -> bool:
    """Só a violação do índice de slot vira 409."""
    diag = getattr(exc.orig, "diag", None)
    if getattr(diag, "constraint_name", None) == SLOT_INDEX_NAME:
        return True
    msg = str(exc.orig)
    return SLOT_INDEX_NAME in msg or SLOT_COLUMNS in msg


def commit_slot(db: Session, ag: Agendamento) -> None:
    """Commit que traduz violação do índice único de slot em 409."""
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if is_slot_conflict(e):
            get_logger().info(
                "agendamento.slot_conflict",
                data=str(ag.data_agendamento),
                hora_inicio=str(ag.hora_inicio),
            )
            raise ConflictError(SLOT_TAKEN) from e
        raise


def book_slot(
    db: Session,
    *,
    aluno_id: str,
    data_agendamento: date,
    hora_inicio: time,
    hora_fim: time | None = None,
    bloco_horario_id: str | None = None,
    tipo: AgendamentoTipo = AgendamentoTipo.PRESENCIAL,
    observacoes: str | None = None,
) -> Agendamento:
    if not db.get(Aluno, aluno_id):
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Aluno não encontrado")

    if bloco_horario_id:
        bloco = db.get(BlocoHorario, bloco_horario_id)
        if not bloco:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Bloco não encontrado")
        if hora_fim is None:
            hora_fim = add_minutes(hora_inicio, bloco.duracao)
    elif hora_fim is None:
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST,
            "horaFim é obrigatório quando blocoHorarioId não é informado",
        )

    if hora_fim <= hora_inicio:
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST, "horaFim deve ser maior que horaInicio"
        )

    ag = Agendamento(
        aluno_id=aluno_id,
        bloco_horario_id=bloco_horario_id,
        data_agendamento=data_agendamento,
        hora_inicio=hora_inicio,
        hora_fim=hora_fim,
        status=AgendamentoStatus.AGENDADO,
        tipo=tipo,
        observacoes=observacoes,
    )
    db.add(ag)
    commit_slot(db, ag)
    db.refresh(ag)
    get_logger().info("agendamento.created", agendamento_id=ag.id, aluno_id=aluno_id)
    return ag


def _duration_minutes(ag: Agendamento) -> int:
    start = datetime.combine(ag.data_agendamento, ag.hora_inicio)
    end = datetime.combine(ag.data_agendamento, ag.hora_fim)
    return int((end - start).total_seconds() // 60)


def to_out(ag: Agendamento) -> AgendamentoOut:
    aluno = None
    if ag.aluno is not None and ag.aluno.profile is not None:
        aluno = AlunoResumo(
            id=ag.aluno.id, nome=ag.aluno.profile.nome, email=ag.aluno.profile.email
        )

    if ag.bloco_horario is not None:
        bloco = BlocoResumo.model_validate(ag.bloco_horario)
    else:
        # agendamento avulso: bloco derivado da própria data/horário
        bloco = BlocoResumo(
            dia_semana=native_weekday(ag.data_agendamento),
            hora_inicio=ag.hora_inicio,
            hora_fim=ag.hora_fim,
            duracao=_duration_minutes(ag),
        )

    return AgendamentoOut(
        id=ag.id,
        aluno_id=ag.aluno_id,
        bloco_horario_id=ag.bloco_horario_id,
        data_agendamento=ag.data_agendamento,
        hora_inicio=ag.hora_inicio,
        hora_fim=ag.hora_fim,
        status=ag.status,
        tipo=ag.tipo,
        observacoes=ag.observacoes,
        created_at=ag.created_at,
        updated_at=ag.updated_at,
        aluno=aluno,
        bloco_horario=bloco,
    )
