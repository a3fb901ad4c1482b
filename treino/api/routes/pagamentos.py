from __future__ import annotations

from collections import Counter
from datetime import date, datetime, time

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from treino.core.logging import get_logger
from treino.db.session import get_db
from treino.deps import get_now
from treino.models.assinatura import Assinatura, AssinaturaStatus
from treino.models.pagamento import Pagamento, PagamentoStatus
from treino.schemas.pagamentos import (
    PagamentoCreateIn,
    PagamentoOut,
    PagamentoStatsOut,
    PagamentoUpdateIn,
    WebhookIn,
)

router = APIRouter(prefix="/admin/pagamentos", tags=["pagamentos"])
webhook_router = APIRouter(prefix="/webhook", tags=["webhook"])


def _periodo(q, data_inicio: date | None, data_fim: date | None):
    if data_inicio:
        q = q.where(Pagamento.created_at >= datetime.combine(data_inicio, time.min))
    if data_fim:
        q = q.where(Pagamento.created_at <= datetime.combine(data_fim, time.max))
    return q


@router.get("", response_model=list[PagamentoOut])
def list_pagamentos(
    assinatura_id: str | None = Query(None, alias="assinaturaId"),
    data_inicio: date | None = Query(None, alias="dataInicio"),
    data_fim: date | None = Query(None, alias="dataFim"),
    db: Session = Depends(get_db),
):
    q = select(Pagamento)
    if assinatura_id:
        q = q.where(Pagamento.assinatura_id == assinatura_id)
    q = _periodo(q, data_inicio, data_fim).order_by(Pagamento.created_at.desc())
    return [PagamentoOut.model_validate(p) for p in db.scalars(q).all()]


# declarada antes de /{pagamento_id} para não ser capturada como id
@router.get("/stats", response_model=PagamentoStatsOut)
def pagamentos_stats(
    data_inicio: date | None = Query(None, alias="dataInicio"),
    data_fim: date | None = Query(None, alias="dataFim"),
    db: Session = Depends(get_db),
):
    rows = db.scalars(_periodo(select(Pagamento), data_inicio, data_fim)).all()
    por_status = Counter(p.status for p in rows)
    return PagamentoStatsOut(
        total=len(rows),
        aprovados=por_status[PagamentoStatus.APROVADO],
        pendentes=por_status[PagamentoStatus.PENDENTE],
        recusados=por_status[PagamentoStatus.RECUSADO],
        cancelados=por_status[PagamentoStatus.CANCELADO],
        estornados=por_status[PagamentoStatus.ESTORNADO],
        valor_total=sum(p.valor for p in rows if p.status == PagamentoStatus.APROVADO),
        por_metodo=dict(Counter(p.metodo.value for p in rows)),
    )


@router.post("", response_model=PagamentoOut, status_code=201)
def create_pagamento(payload: PagamentoCreateIn, db: Session = Depends(get_db)):
    if not db.get(Assinatura, payload.assinatura_id):
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Assinatura não encontrada")
    pagamento = Pagamento(**payload.model_dump())
    db.add(pagamento)
    db.commit()
    db.refresh(pagamento)
    get_logger().info(
        "pagamento.created",
        pagamento_id=pagamento.id,
        assinatura_id=pagamento.assinatura_id,
        status=pagamento.status.value,
    )
    return PagamentoOut.model_validate(pagamento)


@router.get("/{pagamento_id}", response_model=PagamentoOut)
def get_pagamento(pagamento_id: str, db: Session = Depends(get_db)):
    pagamento = db.get(Pagamento, pagamento_id)
    if not pagamento:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Pagamento não encontrado")
    return PagamentoOut.model_validate(pagamento)


@router.put("/{pagamento_id}", response_model=PagamentoOut)
def update_pagamento(
    pagamento_id: str,
    payload: PagamentoUpdateIn,
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    pagamento = db.get(Pagamento, pagamento_id)
    if not pagamento:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Pagamento não encontrado")

    data = payload.model_dump(exclude_unset=True)
    if data.get("status") is not None:
        pagamento.status = data["status"]
    if "mercado_pago_payment_id" in data:
        pagamento.mercado_pago_payment_id = data["mercado_pago_payment_id"]
    if data.get("data_pagamento") is not None:
        pagamento.data_pagamento = data["data_pagamento"]
    elif pagamento.status == PagamentoStatus.APROVADO and not pagamento.data_pagamento:
        pagamento.data_pagamento = now

    db.commit()
    db.refresh(pagamento)
    return PagamentoOut.model_validate(pagamento)


@webhook_router.post("/mercadopago")
def mercadopago_webhook(
    payload: WebhookIn,
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    log = get_logger().bind(webhook_type=payload.type)
    if payload.type != "payment" or not payload.data or payload.data.id is None:
        log.info("webhook.ignored")
        return {"received": True}

    payment_id = str(payload.data.id)
    pagamento = db.scalars(
        select(Pagamento).where(Pagamento.mercado_pago_payment_id == payment_id)
    ).first()
    if not pagamento:
        log.warning("webhook.payment_not_found", payment_id=payment_id)
        return {"received": True}

    pagamento.status = PagamentoStatus.APROVADO
    pagamento.data_pagamento = now
    if pagamento.assinatura is not None:
        pagamento.assinatura.status = AssinaturaStatus.ATIVA
    db.commit()
    log.info("webhook.payment_approved", pagamento_id=pagamento.id)
    return {"received": True}
