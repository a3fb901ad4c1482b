from __future__ import annotations

import datetime as dt
import enum

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Date,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from treino.db.base_class import Base, Timestamps, UUIDPk, enum_column


class FichaNivel(str, enum.Enum):
    INICIANTE = "iniciante"
    INTERMEDIARIO = "intermediario"
    AVANCADO = "avancado"


class AtribuicaoStatus(str, enum.Enum):
    ATIVO = "ativo"
    PAUSADO = "pausado"
    CONCLUIDO = "concluido"


class FichaTreino(UUIDPk, Timestamps, Base):
    """Modelo de treino reutilizável; vira plano de um aluno via FichaAtribuicao."""

    __tablename__ = "fichas_treino"

    nome: Mapped[str] = mapped_column(String(200), nullable=False)
    descricao: Mapped[str | None] = mapped_column(Text)
    objetivo: Mapped[str | None] = mapped_column(String(120))
    nivel: Mapped[FichaNivel] = mapped_column(
        enum_column(FichaNivel, "ficha_nivel_enum"),
        nullable=False,
        default=FichaNivel.INICIANTE,
    )
    duracao_semanas: Mapped[int | None] = mapped_column(Integer)
    ativo: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    exercicios = relationship(
        "ExercicioFicha",
        back_populates="ficha",
        order_by="ExercicioFicha.ordem",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    atribuicoes = relationship(
        "FichaAtribuicao", back_populates="ficha", cascade="all, delete-orphan"
    )


class ExercicioFicha(UUIDPk, Timestamps, Base):
    __tablename__ = "exercicios_ficha"
    __table_args__ = (
        CheckConstraint("ordem > 0", name="ck_exercicio_ordem"),
        Index("ix_exercicio_ficha_ordem", "ficha_id", "ordem"),
    )

    ficha_id: Mapped[str] = mapped_column(
        ForeignKey("fichas_treino.id", ondelete="CASCADE"), nullable=False
    )
    nome: Mapped[str] = mapped_column(String(200), nullable=False)
    grupo_muscular: Mapped[str | None] = mapped_column(String(80))
    ordem: Mapped[int] = mapped_column(Integer, nullable=False)
    series: Mapped[int | None] = mapped_column(Integer)
    # "10-12", "até a falha"
    repeticoes: Mapped[str | None] = mapped_column(String(40))
    descanso: Mapped[int | None] = mapped_column(Integer)  # segundos
    observacoes: Mapped[str | None] = mapped_column(Text)
    tecnica: Mapped[str | None] = mapped_column(String(120))
    video_id: Mapped[str | None] = mapped_column(
        ForeignKey("treinos_video.id", ondelete="SET NULL")
    )

    ficha = relationship("FichaTreino", back_populates="exercicios")


class FichaAtribuicao(UUIDPk, Timestamps, Base):
    __tablename__ = "fichas_atribuicoes"
    __table_args__ = (
        Index("ix_atribuicao_ficha_id", "ficha_id"),
        Index("ix_atribuicao_aluno_status", "aluno_id", "status"),
    )

    ficha_id: Mapped[str] = mapped_column(
        ForeignKey("fichas_treino.id", ondelete="CASCADE"), nullable=False
    )
    aluno_id: Mapped[str] = mapped_column(
        ForeignKey("alunos.id", ondelete="CASCADE"), nullable=False
    )
    data_inicio: Mapped[dt.date] = mapped_column(Date, nullable=False)
    data_fim: Mapped[dt.date | None] = mapped_column(Date)
    status: Mapped[AtribuicaoStatus] = mapped_column(
        enum_column(AtribuicaoStatus, "atribuicao_status_enum"),
        nullable=False,
        default=AtribuicaoStatus.ATIVO,
    )
    observacoes: Mapped[str | None] = mapped_column(Text)

    ficha = relationship("FichaTreino", back_populates="atribuicoes")
    aluno = relationship("Aluno", lazy="joined")
