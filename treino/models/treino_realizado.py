from __future__ import annotations

import datetime as dt

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from treino.db.base_class import Base, Timestamps, UUIDPk


class TreinoRealizado(UUIDPk, Timestamps, Base):
    __tablename__ = "treinos_realizados"
    __table_args__ = (Index("ix_treino_aluno_data", "aluno_id", "data_realizacao"),)

    aluno_id: Mapped[str] = mapped_column(
        ForeignKey("alunos.id", ondelete="CASCADE"), nullable=False
    )
    data_realizacao: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    duracao_minutos: Mapped[int | None] = mapped_column(Integer)
    observacoes: Mapped[str | None] = mapped_column(Text)
