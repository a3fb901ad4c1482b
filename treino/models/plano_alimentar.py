from __future__ import annotations

import datetime as dt

from sqlalchemy import DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from treino.db.base_class import Base, Timestamps, UUIDPk, utcnow


class PlanoAlimentar(UUIDPk, Timestamps, Base):
    __tablename__ = "planos_alimentares"
    __table_args__ = (Index("ix_plano_aluno_criacao", "aluno_id", "data_criacao"),)

    aluno_id: Mapped[str] = mapped_column(
        ForeignKey("alunos.id", ondelete="CASCADE"), nullable=False
    )
    titulo: Mapped[str] = mapped_column(String(200), nullable=False)
    # HTML vindo do editor rico do painel, armazenado como veio
    conteudo_html: Mapped[str] = mapped_column(Text, nullable=False)
    observacoes: Mapped[str | None] = mapped_column(Text)
    data_criacao: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
