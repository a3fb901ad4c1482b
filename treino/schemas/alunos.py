from __future__ import annotations

import datetime as dt

from pydantic import EmailStr, Field

from treino.models.aluno import AlunoStatus, Genero
from treino.schemas.base import CamelModel


class AlunoCreateIn(CamelModel):
    # obrigatórios checados na rota para devolver a mensagem do contrato
    nome: str | None = None
    email: EmailStr | None = None
    senha: str | None = None
    data_nascimento: dt.date | None = None
    altura: int | None = Field(None, gt=0, lt=300)
    genero: Genero | None = None
    status: AlunoStatus | None = None
    foto_url: str | None = None


class AlunoOut(CamelModel):
    id: str
    nome: str
    email: str
    data_nascimento: dt.date | None = None
    altura: int | None = None
    genero: Genero | None = None
    status: AlunoStatus
    foto_url: str | None = None
    created_at: dt.datetime
    updated_at: dt.datetime


class StudentOut(CamelModel):
    """Perfil (users_profile) do aluno, com os atributos da linha em alunos."""

    id: str
    auth_user_id: str
    nome: str
    email: str
    tipo: str
    foto_url: str | None = None
    aluno_id: str | None = None
    data_nascimento: dt.date | None = None
    altura: int | None = None
    genero: Genero | None = None
    status: AlunoStatus | None = None
    created_at: dt.datetime
    updated_at: dt.datetime


class StudentUpdateIn(CamelModel):
    nome: str | None = Field(None, min_length=1, max_length=160)
    email: EmailStr | None = None
    foto_url: str | None = None
    data_nascimento: dt.date | None = None
    altura: int | None = Field(None, gt=0, lt=300)
    genero: Genero | None = None
    status: AlunoStatus | None = None


class TreinoRealizadoIn(CamelModel):
    aluno_id: str
    data_realizacao: dt.datetime | None = None
    duracao_minutos: int | None = Field(None, ge=0)
    observacoes: str | None = None


class TreinoRealizadoOut(CamelModel):
    id: str
    aluno_id: str
    data_realizacao: dt.datetime
    duracao_minutos: int | None = None
    observacoes: str | None = None
    created_at: dt.datetime


class SemanaOut(CamelModel):
    inicio_semana: dt.datetime
    fim_semana: dt.datetime
    dias_treinados: list[int]  # 0=segunda ... 6=domingo
    total_dias: int
