from __future__ import annotations

import datetime as dt

from pydantic import Field, model_validator

from treino.schemas.base import CamelModel, Hora


class BlocoHorarioIn(CamelModel):
    dia_semana: int = Field(..., ge=0, le=6, description="0=domingo ... 6=sábado")
    hora_inicio: Hora
    hora_fim: Hora
    duracao: int = Field(60, ge=5, le=480)
    ativo: bool = True

    @model_validator(mode="after")
    def _check_times(self):
        if self.hora_fim <= self.hora_inicio:
            raise ValueError("horaFim deve ser maior que horaInicio")
        return self


class BlocoHorarioUpdateIn(CamelModel):
    dia_semana: int | None = Field(None, ge=0, le=6)
    hora_inicio: Hora | None = None
    hora_fim: Hora | None = None
    duracao: int | None = Field(None, ge=5, le=480)
    ativo: bool | None = None


class BlocoHorarioOut(CamelModel):
    id: str
    dia_semana: int
    hora_inicio: Hora
    hora_fim: Hora
    duracao: int
    ativo: bool
    created_at: dt.datetime
    updated_at: dt.datetime
