from __future__ import annotations

import datetime as dt

from sqlalchemy import Date, Float, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column

from treino.db.base_class import Base, Timestamps, UUIDPk


class Evolucao(UUIDPk, Timestamps, Base):
    __tablename__ = "evolucoes"

    aluno_id: Mapped[str] = mapped_column(
        ForeignKey("alunos.id", ondelete="CASCADE"), index=True, nullable=False
    )
    data: Mapped[dt.date] = mapped_column(Date, nullable=False)
    peso: Mapped[float | None] = mapped_column(Float)
    gordura_corporal: Mapped[float | None] = mapped_column(Float)
    massa_muscular: Mapped[float | None] = mapped_column(Float)
    peito: Mapped[float | None] = mapped_column(Float)
    cintura: Mapped[float | None] = mapped_column(Float)
    quadril: Mapped[float | None] = mapped_column(Float)
    braco: Mapped[float | None] = mapped_column(Float)
    coxa: Mapped[float | None] = mapped_column(Float)
    observacoes: Mapped[str | None] = mapped_column(Text)
