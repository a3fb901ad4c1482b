from __future__ import annotations

import datetime as dt

from treino.schemas.base import CamelModel


class _Medidas(CamelModel):
    peso: float | None = None
    gordura_corporal: float | None = None
    massa_muscular: float | None = None
    peito: float | None = None
    cintura: float | None = None
    quadril: float | None = None
    braco: float | None = None
    coxa: float | None = None
    observacoes: str | None = None


class EvolucaoIn(_Medidas):
    aluno_id: str
    data: dt.date


class EvolucaoUpdateIn(_Medidas):
    data: dt.date | None = None


class EvolucaoOut(_Medidas):
    id: str
    aluno_id: str
    data: dt.date
    created_at: dt.datetime


class EvolucaoStatsOut(CamelModel):
    total_registros: int
    primeiro_registro: dt.date | None = None
    ultimo_registro: dt.date | None = None
    peso_inicial: float | None = None
    peso_atual: float | None = None
    peso_perdido: float | None = None
    gordura_inicial: float | None = None
    gordura_atual: float | None = None
    gordura_reduzida: float | None = None
    musculo_inicial: float | None = None
    musculo_atual: float | None = None
    musculo_ganho: float | None = None
