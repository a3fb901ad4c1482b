from __future__ import annotations

import datetime as dt
import enum

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from treino.db.base_class import Base, Timestamps, UUIDPk, enum_column


class PlanoTipo(str, enum.Enum):
    MENSAL = "mensal"
    TRIMESTRAL = "trimestral"
    FAMILIA = "familia"


class AssinaturaStatus(str, enum.Enum):
    ATIVA = "ativa"
    CANCELADA = "cancelada"
    VENCIDA = "vencida"


class Assinatura(UUIDPk, Timestamps, Base):
    __tablename__ = "assinaturas"

    aluno_id: Mapped[str] = mapped_column(
        ForeignKey("alunos.id", ondelete="CASCADE"), index=True, nullable=False
    )
    plano_tipo: Mapped[PlanoTipo] = mapped_column(
        enum_column(PlanoTipo, "plano_tipo_enum"), nullable=False
    )
    preco: Mapped[int] = mapped_column(Integer, nullable=False)  # centavos
    data_inicio: Mapped[dt.date] = mapped_column(Date, nullable=False)
    data_fim: Mapped[dt.date] = mapped_column(Date, nullable=False)
    status: Mapped[AssinaturaStatus] = mapped_column(
        enum_column(AssinaturaStatus, "assinatura_status_enum"),
        nullable=False,
        default=AssinaturaStatus.ATIVA,
    )
    mercado_pago_subscription_id: Mapped[str | None] = mapped_column(String(120))

    aluno = relationship("Aluno")
    pagamentos = relationship(
        "Pagamento", back_populates="assinatura", passive_deletes=True
    )
