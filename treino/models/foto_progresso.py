from __future__ import annotations

import datetime as dt
import enum

from sqlalchemy import Date, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from treino.db.base_class import Base, Timestamps, UUIDPk, enum_column


class FotoTipo(str, enum.Enum):
    FRONT = "front"
    SIDE = "side"
    BACK = "back"


class FotoProgresso(UUIDPk, Timestamps, Base):
    __tablename__ = "fotos_progresso"
    __table_args__ = (Index("ix_foto_aluno_data", "aluno_id", "data"),)

    aluno_id: Mapped[str] = mapped_column(
        ForeignKey("alunos.id", ondelete="CASCADE"), nullable=False
    )
    data: Mapped[dt.date] = mapped_column(Date, nullable=False)
    tipo: Mapped[FotoTipo] = mapped_column(
        enum_column(FotoTipo, "foto_tipo_enum"), nullable=False
    )
    url_foto: Mapped[str] = mapped_column(String(1024), nullable=False)
