from __future__ import annotations

import datetime as dt
import enum

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from treino.db.base_class import Base, Timestamps, UUIDPk, enum_column


class PagamentoStatus(str, enum.Enum):
    PENDENTE = "pendente"
    APROVADO = "aprovado"
    RECUSADO = "recusado"
    CANCELADO = "cancelado"
    ESTORNADO = "estornado"


class PagamentoMetodo(str, enum.Enum):
    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    PIX = "pix"
    BOLETO = "boleto"


class Pagamento(UUIDPk, Timestamps, Base):
    __tablename__ = "pagamentos"
    __table_args__ = (CheckConstraint("valor > 0", name="ck_pagamento_valor"),)

    assinatura_id: Mapped[str] = mapped_column(
        ForeignKey("assinaturas.id", ondelete="CASCADE"), index=True, nullable=False
    )
    status: Mapped[PagamentoStatus] = mapped_column(
        enum_column(PagamentoStatus, "pagamento_status_enum"), nullable=False
    )
    valor: Mapped[int] = mapped_column(Integer, nullable=False)  # centavos
    metodo: Mapped[PagamentoMetodo] = mapped_column(
        enum_column(PagamentoMetodo, "pagamento_metodo_enum"), nullable=False
    )
    mercado_pago_payment_id: Mapped[str | None] = mapped_column(
        String(120), index=True
    )
    data_pagamento: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True))

    assinatura = relationship("Assinatura", back_populates="pagamentos")
