from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import select, update
from sqlalchemy.orm import Session

from treino.core.logging import get_logger
from treino.db.session import get_db
from treino.deps import get_now
from treino.models.aluno import Aluno
from treino.models.assinatura import Assinatura, AssinaturaStatus, PlanoTipo
from treino.models.pagamento import Pagamento
from treino.schemas.base import MessageOut
from treino.schemas.pagamentos import (
    AssinaturaCreateIn,
    AssinaturaOut,
    AssinaturaReativarIn,
)

router = APIRouter(prefix="/admin/assinaturas", tags=["assinaturas"])


def _get_or_404(db: Session, assinatura_id: str) -> Assinatura:
    assinatura = db.get(Assinatura, assinatura_id)
    if not assinatura:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Assinatura não encontrada")
    return assinatura


@router.get("", response_model=list[AssinaturaOut])
def list_assinaturas(
    status_: AssinaturaStatus | None = Query(None, alias="status"),
    plano_tipo: PlanoTipo | None = Query(None, alias="planoTipo"),
    db: Session = Depends(get_db),
):
    q = select(Assinatura)
    if status_:
        q = q.where(Assinatura.status == status_)
    if plano_tipo:
        q = q.where(Assinatura.plano_tipo == plano_tipo)
    rows = db.scalars(q.order_by(Assinatura.created_at.desc())).all()
    return [AssinaturaOut.model_validate(a) for a in rows]


@router.post("", response_model=AssinaturaOut, status_code=201)
def create_assinatura(payload: AssinaturaCreateIn, db: Session = Depends(get_db)):
    if not db.get(Aluno, payload.aluno_id):
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Aluno não encontrado")
    if payload.data_fim < payload.data_inicio:
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST, "dataFim deve ser posterior a dataInicio"
        )
    assinatura = Assinatura(**payload.model_dump(), status=AssinaturaStatus.ATIVA)
    db.add(assinatura)
    db.commit()
    db.refresh(assinatura)
    return AssinaturaOut.model_validate(assinatura)


@router.post("/verificar-vencidas")
def verificar_vencidas(
    db: Session = Depends(get_db), now: datetime = Depends(get_now)
):
    result = db.execute(
        update(Assinatura)
        .where(
            Assinatura.status == AssinaturaStatus.ATIVA,
            Assinatura.data_fim < now.date(),
        )
        .values(status=AssinaturaStatus.VENCIDA)
    )
    db.commit()
    get_logger().info("assinatura.vencidas", total=result.rowcount)
    return {"vencidas": result.rowcount}


@router.get("/{assinatura_id}", response_model=AssinaturaOut)
def get_assinatura(assinatura_id: str, db: Session = Depends(get_db)):
    return AssinaturaOut.model_validate(_get_or_404(db, assinatura_id))


@router.post("/{assinatura_id}/cancelar", response_model=AssinaturaOut)
def cancelar_assinatura(assinatura_id: str, db: Session = Depends(get_db)):
    assinatura = _get_or_404(db, assinatura_id)
    assinatura.status = AssinaturaStatus.CANCELADA
    db.commit()
    db.refresh(assinatura)
    return AssinaturaOut.model_validate(assinatura)


@router.post("/{assinatura_id}/reativar", response_model=AssinaturaOut)
def reativar_assinatura(
    assinatura_id: str,
    payload: AssinaturaReativarIn | None = None,
    db: Session = Depends(get_db),
):
    assinatura = _get_or_404(db, assinatura_id)
    assinatura.status = AssinaturaStatus.ATIVA
    if payload and payload.data_fim:
        assinatura.data_fim = payload.data_fim
    db.commit()
    db.refresh(assinatura)
    return AssinaturaOut.model_validate(assinatura)


@router.delete("/{assinatura_id}", response_model=MessageOut)
def delete_assinatura(assinatura_id: str, db: Session = Depends(get_db)):
    assinatura = _get_or_404(db, assinatura_id)
    # pagamentos antes da assinatura: nem todo banco aplica ON DELETE CASCADE
    db.query(Pagamento).filter(Pagamento.assinatura_id == assinatura.id).delete()
    db.delete(assinatura)
    db.commit()
    return MessageOut(message="Assinatura deletada com sucesso")
