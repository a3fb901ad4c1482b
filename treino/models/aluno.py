from __future__ import annotations

import datetime as dt
import enum

from sqlalchemy import Date, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from treino.db.base_class import Base, Timestamps, UUIDPk, enum_column


class Genero(str, enum.Enum):
    MASCULINO = "masculino"
    FEMININO = "feminino"
    OUTRO = "outro"


class AlunoStatus(str, enum.Enum):
    ATIVO = "ativo"
    INATIVO = "inativo"
    PENDENTE = "pendente"


class Aluno(UUIDPk, Timestamps, Base):
    __tablename__ = "alunos"

    user_profile_id: Mapped[str] = mapped_column(
        ForeignKey("users_profile.id", ondelete="CASCADE"),
        unique=True,
        index=True,
        nullable=False,
    )
    data_nascimento: Mapped[dt.date | None] = mapped_column(Date)
    altura: Mapped[int | None] = mapped_column(Integer)  # cm
    genero: Mapped[Genero | None] = mapped_column(enum_column(Genero, "genero_enum"))
    status: Mapped[AlunoStatus] = mapped_column(
        enum_column(AlunoStatus, "aluno_status_enum"),
        nullable=False,
        default=AlunoStatus.ATIVO,
    )

    profile = relationship("UserProfile", back_populates="aluno", lazy="joined")
