from __future__ import annotations

import datetime as dt

from pydantic import ConfigDict, Field

from treino.models.assinatura import AssinaturaStatus, PlanoTipo
from treino.models.pagamento import PagamentoMetodo, PagamentoStatus
from treino.schemas.base import CamelModel


class PagamentoCreateIn(CamelModel):
    assinatura_id: str
    status: PagamentoStatus
    valor: int = Field(..., gt=0, description="Valor em centavos")
    metodo: PagamentoMetodo
    mercado_pago_payment_id: str | None = None
    data_pagamento: dt.datetime | None = None


class PagamentoUpdateIn(CamelModel):
    # valor é imutável: qualquer campo fora desta lista é rejeitado
    model_config = ConfigDict(extra="forbid")

    status: PagamentoStatus | None = None
    data_pagamento: dt.datetime | None = None
    mercado_pago_payment_id: str | None = None


class PagamentoOut(CamelModel):
    id: str
    assinatura_id: str
    status: PagamentoStatus
    valor: int
    metodo: PagamentoMetodo
    mercado_pago_payment_id: str | None = None
    data_pagamento: dt.datetime | None = None
    created_at: dt.datetime
    updated_at: dt.datetime


class PagamentoStatsOut(CamelModel):
    total: int
    aprovados: int
    pendentes: int
    recusados: int
    cancelados: int
    estornados: int
    valor_total: int
    por_metodo: dict[str, int]


class WebhookData(CamelModel):
    id: str | int | None = None


class WebhookIn(CamelModel):
    type: str | None = None
    data: WebhookData | None = None


class AssinaturaCreateIn(CamelModel):
    aluno_id: str
    plano_tipo: PlanoTipo
    preco: int = Field(..., gt=0, description="Preço em centavos")
    data_inicio: dt.date
    data_fim: dt.date
    mercado_pago_subscription_id: str | None = None


class AssinaturaReativarIn(CamelModel):
    data_fim: dt.date | None = None


class AssinaturaOut(CamelModel):
    id: str
    aluno_id: str
    plano_tipo: PlanoTipo
    preco: int
    data_inicio: dt.date
    data_fim: dt.date
    status: AssinaturaStatus
    mercado_pago_subscription_id: str | None = None
    created_at: dt.datetime
    updated_at: dt.datetime
