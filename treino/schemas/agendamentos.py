from __future__ import annotations

import datetime as dt

from pydantic import Field

from treino.models.agendamento import AgendamentoStatus, AgendamentoTipo
from treino.schemas.base import CamelModel, Hora


class AgendamentoCreateIn(CamelModel):
    aluno_id: str | None = Field(None, description="Ignorado na rota do aluno")
    data_agendamento: dt.date
    hora_inicio: Hora
    hora_fim: Hora | None = None
    bloco_horario_id: str | None = None
    tipo: AgendamentoTipo = AgendamentoTipo.PRESENCIAL
    observacoes: str | None = None


class AgendamentoUpdateIn(CamelModel):
    status: AgendamentoStatus | None = None
    tipo: AgendamentoTipo | None = None
    observacoes: str | None = None


class AlunoResumo(CamelModel):
    id: str
    nome: str
    email: str


class BlocoResumo(CamelModel):
    id: str | None = None
    dia_semana: int
    hora_inicio: Hora
    hora_fim: Hora
    duracao: int
    ativo: bool = True


class AgendamentoOut(CamelModel):
    id: str
    aluno_id: str
    bloco_horario_id: str | None = None
    data_agendamento: dt.date
    hora_inicio: Hora
    hora_fim: Hora
    status: AgendamentoStatus
    tipo: AgendamentoTipo
    observacoes: str | None = None
    created_at: dt.datetime
    updated_at: dt.datetime
    aluno: AlunoResumo | None = None
    bloco_horario: BlocoResumo | None = None


class SlotOut(CamelModel):
    hora_inicio: Hora
    hora_fim: Hora
    disponivel: bool


class ReagendamentoIn(CamelModel):
    nova_data: dt.date
    nova_hora_inicio: Hora
    motivo: str = Field(..., min_length=1)


class FaltaIn(CamelModel):
    motivo: str = Field(..., min_length=1)
