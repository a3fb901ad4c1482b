from __future__ import annotations

import datetime as dt

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from treino.db.base_class import Base, Timestamps, UUIDPk, utcnow


class TreinoPdf(UUIDPk, Timestamps, Base):
    __tablename__ = "treinos_pdf"

    aluno_id: Mapped[str] = mapped_column(
        ForeignKey("alunos.id", ondelete="CASCADE"), index=True, nullable=False
    )
    nome: Mapped[str] = mapped_column(String(200), nullable=False)
    descricao: Mapped[str | None] = mapped_column(Text)
    pdf_url: Mapped[str] = mapped_column(String(1024), nullable=False)
    data_upload: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
