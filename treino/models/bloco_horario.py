from __future__ import annotations

import datetime as dt

from sqlalchemy import Boolean, CheckConstraint, Index, Integer, Time
from sqlalchemy.orm import Mapped, mapped_column

from treino.db.base_class import Base, Timestamps, UUIDPk


class BlocoHorario(UUIDPk, Timestamps, Base):
    """
    Janela semanal recorrente de atendimento.
    dia_semana segue a convenção nativa: 0=domingo ... 6=sábado.
    """

    __tablename__ = "blocos_horarios"
    __table_args__ = (
        CheckConstraint(
            "dia_semana >= 0 AND dia_semana <= 6", name="ck_bloco_dia_semana"
        ),
        CheckConstraint("hora_fim > hora_inicio", name="ck_bloco_time_order"),
        CheckConstraint("duracao > 0", name="ck_bloco_duracao"),
        Index("ix_bloco_dia_ativo", "dia_semana", "ativo"),
    )

    dia_semana: Mapped[int] = mapped_column(Integer, nullable=False)
    hora_inicio: Mapped[dt.time] = mapped_column(Time(), nullable=False)
    hora_fim: Mapped[dt.time] = mapped_column(Time(), nullable=False)
    duracao: Mapped[int] = mapped_column(Integer, nullable=False, default=60)
    ativo: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
