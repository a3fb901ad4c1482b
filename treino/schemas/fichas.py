from __future__ import annotations

import datetime as dt

from pydantic import Field

from treino.models.ficha_treino import AtribuicaoStatus, FichaNivel
from treino.schemas.agendamentos import AlunoResumo
from treino.schemas.base import CamelModel


class ExercicioIn(CamelModel):
    nome: str = Field(..., min_length=1, max_length=200)
    grupo_muscular: str | None = None
    # ausente: posição na lista (1, 2, 3...)
    ordem: int | None = Field(None, gt=0)
    series: int | None = Field(None, gt=0)
    repeticoes: str | None = Field(None, max_length=40)
    descanso: int | None = Field(None, ge=0)
    observacoes: str | None = None
    tecnica: str | None = None
    video_id: str | None = None


class ExercicioOut(CamelModel):
    id: str
    ficha_id: str
    nome: str
    grupo_muscular: str | None = None
    ordem: int
    series: int | None = None
    repeticoes: str | None = None
    descanso: int | None = None
    observacoes: str | None = None
    tecnica: str | None = None
    video_id: str | None = None


class FichaIn(CamelModel):
    nome: str = Field(..., min_length=1, max_length=200)
    descricao: str | None = None
    objetivo: str | None = None
    nivel: FichaNivel = FichaNivel.INICIANTE
    duracao_semanas: int | None = Field(None, gt=0)
    ativo: bool = True
    exercicios: list[ExercicioIn] = []


class FichaUpdateIn(CamelModel):
    nome: str | None = Field(None, min_length=1, max_length=200)
    descricao: str | None = None
    objetivo: str | None = None
    nivel: FichaNivel | None = None
    duracao_semanas: int | None = Field(None, gt=0)
    ativo: bool | None = None
    # presente: substitui todos os exercícios da ficha
    exercicios: list[ExercicioIn] | None = None


class FichaOut(CamelModel):
    id: str
    nome: str
    descricao: str | None = None
    objetivo: str | None = None
    nivel: FichaNivel
    duracao_semanas: int | None = None
    ativo: bool
    exercicios: list[ExercicioOut] = []
    created_at: dt.datetime
    updated_at: dt.datetime


class AtribuicaoIn(CamelModel):
    aluno_id: str
    data_inicio: dt.date
    data_fim: dt.date | None = None
    status: AtribuicaoStatus = AtribuicaoStatus.ATIVO
    observacoes: str | None = None


class AtribuicaoOut(CamelModel):
    id: str
    ficha_id: str
    aluno_id: str
    data_inicio: dt.date
    data_fim: dt.date | None = None
    status: AtribuicaoStatus
    observacoes: str | None = None
    created_at: dt.datetime
    aluno: AlunoResumo | None = None


class FichaDoAlunoOut(AtribuicaoOut):
    ficha: FichaOut


class FichasStatsOut(CamelModel):
    total_fichas: int
    fichas_ativas: int
    total_exercicios: int
    alunos_com_fichas: int
