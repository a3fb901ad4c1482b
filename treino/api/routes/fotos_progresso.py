from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from treino.core.settings import settings
from treino.db.session import get_db
from treino.deps import get_storage
from treino.models.aluno import Aluno
from treino.models.foto_progresso import FotoProgresso
from treino.schemas.midia import FotoProgressoIn, FotoProgressoOut
from treino.services.storage import StorageClient, file_name_from_url

router = APIRouter(prefix="/fotos-progresso", tags=["fotos-progresso"])


@router.get("", response_model=list[FotoProgressoOut])
def list_fotos(
    aluno_id: str | None = Query(None, alias="alunoId"),
    dia: date | None = Query(None, alias="data"),
    db: Session = Depends(get_db),
):
    if not aluno_id:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "alunoId é obrigatório")
    q = select(FotoProgresso).where(FotoProgresso.aluno_id == aluno_id)
    if dia:
        q = q.where(FotoProgresso.data == dia)
    rows = db.scalars(
        q.order_by(FotoProgresso.data.desc(), FotoProgresso.created_at.desc())
    ).all()
    return [FotoProgressoOut.model_validate(f) for f in rows]


@router.post("", response_model=FotoProgressoOut, status_code=201)
def create_foto(payload: FotoProgressoIn, db: Session = Depends(get_db)):
    if not db.get(Aluno, payload.aluno_id):
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Aluno não encontrado")
    foto = FotoProgresso(**payload.model_dump())
    db.add(foto)
    db.commit()
    db.refresh(foto)
    return FotoProgressoOut.model_validate(foto)


@router.delete("/{foto_id}", status_code=204)
def delete_foto(
    foto_id: str,
    db: Session = Depends(get_db),
    storage: StorageClient = Depends(get_storage),
):
    foto = db.get(FotoProgresso, foto_id)
    if not foto:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Foto não encontrada")
    nome = file_name_from_url(foto.url_foto)
    if nome:
        storage.remove(settings.STORAGE_BUCKET_FOTOS, [nome])
    db.delete(foto)
    db.commit()
    return Response(status_code=204)
