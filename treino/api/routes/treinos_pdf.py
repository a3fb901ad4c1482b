from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from treino.core.logging import get_logger
from treino.core.settings import settings
from treino.db.session import get_db
from treino.deps import get_storage
from treino.models.aluno import Aluno
from treino.models.treino_pdf import TreinoPdf
from treino.schemas.midia import TreinoPdfIn, TreinoPdfOut, TreinoPdfUpdateIn
from treino.services.storage import StorageClient, file_name_from_url

router = APIRouter(prefix="/treinos-pdf", tags=["treinos-pdf"])


def _get_or_404(db: Session, treino_id: str) -> TreinoPdf:
    treino = db.get(TreinoPdf, treino_id)
    if not treino:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Treino não encontrado")
    return treino


@router.get("", response_model=list[TreinoPdfOut])
def list_treinos(
    aluno_id: str | None = Query(None, alias="alunoId"),
    db: Session = Depends(get_db),
):
    q = select(TreinoPdf)
    if aluno_id:
        q = q.where(TreinoPdf.aluno_id == aluno_id)
    rows = db.scalars(q.order_by(TreinoPdf.data_upload.desc())).all()
    return [TreinoPdfOut.model_validate(t) for t in rows]


@router.post("", response_model=TreinoPdfOut, status_code=201)
def create_treino(payload: TreinoPdfIn, db: Session = Depends(get_db)):
    if not db.get(Aluno, payload.aluno_id):
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Aluno não encontrado")
    treino = TreinoPdf(**payload.model_dump())
    db.add(treino)
    db.commit()
    db.refresh(treino)
    return TreinoPdfOut.model_validate(treino)


@router.put("/{treino_id}", response_model=TreinoPdfOut)
def update_treino(
    treino_id: str, payload: TreinoPdfUpdateIn, db: Session = Depends(get_db)
):
    treino = _get_or_404(db, treino_id)
    for field, value in payload.model_dump(exclude_unset=True).items():
        if field != "descricao" and value is None:
            continue
        setattr(treino, field, value)
    db.commit()
    db.refresh(treino)
    return TreinoPdfOut.model_validate(treino)


@router.delete("/{treino_id}", status_code=204)
def delete_treino(
    treino_id: str,
    db: Session = Depends(get_db),
    storage: StorageClient = Depends(get_storage),
):
    treino = _get_or_404(db, treino_id)
    nome = file_name_from_url(treino.pdf_url)
    if nome:
        storage.remove(settings.STORAGE_BUCKET_TREINOS_PDF, [nome])
    db.delete(treino)
    db.commit()
    get_logger().info("treino_pdf.deleted", treino_id=treino_id, arquivo=nome)
    return Response(status_code=204)
