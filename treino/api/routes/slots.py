from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from treino.core.settings import settings
from treino.db.session import get_db
from treino.schemas.agendamentos import SlotOut
from treino.services.slots import available_slots

router = APIRouter(prefix="/agendamentos", tags=["slots"])


@router.get("/horarios-disponiveis", response_model=list[SlotOut])
def get_horarios_disponiveis(
    dia: date = Query(..., alias="data"),
    db: Session = Depends(get_db),
):
    """
    Slots do dia a partir dos blocos ativos do dia da semana;
    `disponivel=false` quando já existe agendamento não cancelado começando no slot.
    """
    slots = available_slots(db, dia, allow_overrun=settings.SLOT_ALLOW_OVERRUN)
    return [
        SlotOut(hora_inicio=s.hora_inicio, hora_fim=s.hora_fim, disponivel=s.disponivel)
        for s in slots
    ]
