from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from sqlalchemy import select
from sqlalchemy.orm import Session

from treino.models.agendamento import Agendamento, AgendamentoStatus
from treino.models.bloco_horario import BlocoHorario
from treino.utils.week import native_weekday

_REF_DAY = date(2000, 1, 1)


@dataclass(frozen=True)
class Slot:
    hora_inicio: time
    hora_fim: time
    disponivel: bool = True


def generate_block_slots(
    hora_inicio: time, hora_fim: time, duracao: int, allow_overrun: bool = True
) -> list[tuple[time, time]]:
    """
    Percorre [hora_inicio, hora_fim) em passos de `duracao` minutos.

    allow_overrun=True emite o último slot mesmo que ele termine depois de
    hora_fim (basta começar antes); False só emite slots inteiros dentro do bloco.
    """
    if duracao <= 0:
        raise ValueError("duracao deve ser positiva")

    step = timedelta(minutes=duracao)
    cur = datetime.combine(_REF_DAY, hora_inicio)
    end = datetime.combine(_REF_DAY, hora_fim)

    slots: list[tuple[time, time]] = []
    while cur < end:
        nxt = cur + step
        if not allow_overrun and nxt > end:
            break
        slots.append((cur.time(), nxt.time()))
        cur = nxt
    return slots


def available_slots(
    db: Session, dia: date, *, allow_overrun: bool = True
) -> list[Slot]:
    """Slots do dia a partir dos blocos ativos, marcando os já ocupados."""
    blocos = db.scalars(
        select(BlocoHorario)
        .where(
            BlocoHorario.dia_semana == native_weekday(dia),
            BlocoHorario.ativo.is_(True),
        )
        .order_by(BlocoHorario.hora_inicio.asc())
    ).all()

    ocupados = set(
        db.scalars(
            select(Agendamento.hora_inicio).where(
                Agendamento.data_agendamento == dia,
                Agendamento.status != AgendamentoStatus.CANCELADO,
            )
        ).all()
    )

    slots: list[Slot] = []
    for bloco in blocos:
        for inicio, fim in generate_block_slots(
            bloco.hora_inicio, bloco.hora_fim, bloco.duracao, allow_overrun
        ):
            slots.append(Slot(inicio, fim, disponivel=inicio not in ocupados))
    return slots
