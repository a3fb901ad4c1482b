from __future__ import annotations

import datetime as dt

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from treino.db.base_class import Base, Timestamps, UUIDPk, utcnow


class TreinoVideo(UUIDPk, Timestamps, Base):
    """Metadados de um vídeo guardado no bucket de vídeos do storage."""

    __tablename__ = "treinos_video"

    nome: Mapped[str] = mapped_column(String(200), nullable=False)
    objetivo: Mapped[str | None] = mapped_column(String(120), index=True)
    descricao: Mapped[str | None] = mapped_column(Text)
    # caminho do objeto no bucket ou URL pública
    url_video: Mapped[str] = mapped_column(String(1024), nullable=False)
    thumbnail_url: Mapped[str | None] = mapped_column(String(1024))
    duracao: Mapped[int | None] = mapped_column(Integer)  # segundos
    data_upload: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
