from __future__ import annotations

import datetime as dt

from pydantic import Field

from treino.models.foto_progresso import FotoTipo
from treino.schemas.base import CamelModel


class TreinoPdfIn(CamelModel):
    aluno_id: str
    nome: str = Field(..., min_length=1, max_length=200)
    descricao: str | None = None
    pdf_url: str = Field(..., min_length=1)


class TreinoPdfUpdateIn(CamelModel):
    nome: str | None = Field(None, min_length=1, max_length=200)
    descricao: str | None = None
    pdf_url: str | None = None


class TreinoPdfOut(CamelModel):
    id: str
    aluno_id: str
    nome: str
    descricao: str | None = None
    pdf_url: str
    data_upload: dt.datetime
    created_at: dt.datetime


class FotoProgressoIn(CamelModel):
    aluno_id: str
    data: dt.date
    tipo: FotoTipo
    url_foto: str = Field(..., min_length=1)


class FotoProgressoOut(CamelModel):
    id: str
    aluno_id: str
    data: dt.date
    tipo: FotoTipo
    url_foto: str
    created_at: dt.datetime


class TreinoVideoIn(CamelModel):
    nome: str = Field(..., min_length=1, max_length=200)
    objetivo: str | None = None
    descricao: str | None = None
    url_video: str = Field(..., min_length=1)
    thumbnail_url: str | None = None
    duracao: int | None = Field(None, ge=0)


class TreinoVideoUpdateIn(CamelModel):
    nome: str | None = Field(None, min_length=1, max_length=200)
    objetivo: str | None = None
    descricao: str | None = None
    duracao: int | None = Field(None, ge=0)


class TreinoVideoOut(CamelModel):
    id: str
    nome: str
    objetivo: str | None = None
    descricao: str | None = None
    url_video: str
    thumbnail_url: str | None = None
    duracao: int | None = None
    data_upload: dt.datetime
    created_at: dt.datetime


class StreamOut(CamelModel):
    id: str
    nome: str
    stream_url: str
    duracao: int | None = None
    expires_in: int
