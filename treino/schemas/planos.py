from __future__ import annotations

import datetime as dt

from pydantic import Field

from treino.schemas.base import CamelModel


class PlanoAlimentarIn(CamelModel):
    aluno_id: str
    titulo: str = Field(..., min_length=1, max_length=200)
    conteudo_html: str = Field(..., min_length=1)
    observacoes: str | None = None


class PlanoAlimentarUpdateIn(CamelModel):
    titulo: str | None = Field(None, min_length=1, max_length=200)
    conteudo_html: str | None = Field(None, min_length=1)
    observacoes: str | None = None


class PlanoAlimentarOut(CamelModel):
    id: str
    aluno_id: str
    titulo: str
    conteudo_html: str
    observacoes: str | None = None
    data_criacao: dt.datetime
    created_at: dt.datetime
    updated_at: dt.datetime
