from __future__ import annotations

import datetime as dt
import enum

from sqlalchemy import Date, ForeignKey, Index, Text, Time, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from treino.db.base_class import Base, Timestamps, UUIDPk, enum_column


class AgendamentoStatus(str, enum.Enum):
    AGENDADO = "agendado"
    CONFIRMADO = "confirmado"
    CANCELADO = "cancelado"
    CONCLUIDO = "concluido"


class AgendamentoTipo(str, enum.Enum):
    PRESENCIAL = "presencial"
    ONLINE = "online"


SLOT_INDEX_NAME = "ux_agendamento_slot_ativo"


class Agendamento(UUIDPk, Timestamps, Base):
    __tablename__ = "agendamentos_presenciais"
    __table_args__ = (
        # no máximo um agendamento ativo por (data, hora_inicio)
        Index(
            SLOT_INDEX_NAME,
            "data_agendamento",
            "hora_inicio",
            unique=True,
            postgresql_where=text("status <> 'cancelado'"),
            sqlite_where=text("status <> 'cancelado'"),
        ),
        Index("ix_agendamento_aluno_id", "aluno_id"),
    )

    aluno_id: Mapped[str] = mapped_column(
        ForeignKey("alunos.id", ondelete="CASCADE"), nullable=False
    )
    bloco_horario_id: Mapped[str | None] = mapped_column(
        ForeignKey("blocos_horarios.id", ondelete="SET NULL")
    )
    data_agendamento: Mapped[dt.date] = mapped_column(Date, nullable=False)
    hora_inicio: Mapped[dt.time] = mapped_column(Time(), nullable=False)
    hora_fim: Mapped[dt.time] = mapped_column(Time(), nullable=False)
    status: Mapped[AgendamentoStatus] = mapped_column(
        enum_column(AgendamentoStatus, "agendamento_status_enum"),
        nullable=False,
        default=AgendamentoStatus.AGENDADO,
    )
    tipo: Mapped[AgendamentoTipo] = mapped_column(
        enum_column(AgendamentoTipo, "agendamento_tipo_enum"),
        nullable=False,
        default=AgendamentoTipo.PRESENCIAL,
    )
    observacoes: Mapped[str | None] = mapped_column(Text)

    aluno = relationship("Aluno", lazy="joined")
    bloco_horario = relationship("BlocoHorario")
