from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from treino.core.logging import get_logger
from treino.core.settings import settings
from treino.db.session import get_db
from treino.deps import get_storage
from treino.models.treino_video import TreinoVideo
from treino.schemas.base import MessageOut
from treino.schemas.midia import (
    StreamOut,
    TreinoVideoIn,
    TreinoVideoOut,
    TreinoVideoUpdateIn,
)
from treino.services.storage import StorageClient, file_name_from_url

router = APIRouter(prefix="/treinos-video", tags=["treinos-video"])
admin_router = APIRouter(prefix="/admin/treinos-video", tags=["treinos-video"])


def _get_or_404(db: Session, video_id: str) -> TreinoVideo:
    video = db.get(TreinoVideo, video_id)
    if not video:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Vídeo não encontrado")
    return video


@router.get("", response_model=list[TreinoVideoOut])
@admin_router.get("", response_model=list[TreinoVideoOut])
def list_videos(
    objetivo: str | None = Query(None),
    db: Session = Depends(get_db),
):
    q = select(TreinoVideo)
    if objetivo:
        q = q.where(TreinoVideo.objetivo == objetivo)
    rows = db.scalars(q.order_by(TreinoVideo.data_upload.desc())).all()
    return [TreinoVideoOut.model_validate(v) for v in rows]


@router.get("/{video_id}", response_model=TreinoVideoOut)
def get_video(video_id: str, db: Session = Depends(get_db)):
    return TreinoVideoOut.model_validate(_get_or_404(db, video_id))


@router.get("/{video_id}/stream", response_model=StreamOut)
def stream_video(
    video_id: str,
    db: Session = Depends(get_db),
    storage: StorageClient = Depends(get_storage),
):
    video = _get_or_404(db, video_id)
    expires = settings.VIDEO_STREAM_EXPIRES_SECONDS
    url = storage.create_signed_url(
        settings.STORAGE_BUCKET_VIDEOS, file_name_from_url(video.url_video), expires
    )
    if not url:
        raise HTTPException(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Falha ao gerar URL de streaming"
        )
    return StreamOut(
        id=video.id,
        nome=video.nome,
        stream_url=url,
        duracao=video.duracao,
        expires_in=expires,
    )


@admin_router.post("", response_model=TreinoVideoOut, status_code=201)
def create_video(payload: TreinoVideoIn, db: Session = Depends(get_db)):
    # o arquivo já está no bucket; aqui só os metadados
    video = TreinoVideo(**payload.model_dump())
    db.add(video)
    db.commit()
    db.refresh(video)
    get_logger().info("video.created", video_id=video.id)
    return TreinoVideoOut.model_validate(video)


@admin_router.put("/{video_id}", response_model=TreinoVideoOut)
def update_video(
    video_id: str, payload: TreinoVideoUpdateIn, db: Session = Depends(get_db)
):
    video = _get_or_404(db, video_id)
    for field, value in payload.model_dump(exclude_unset=True).items():
        if field == "nome" and not value:
            continue
        setattr(video, field, value)
    db.commit()
    db.refresh(video)
    return TreinoVideoOut.model_validate(video)


@admin_router.delete("/{video_id}", response_model=MessageOut)
def delete_video(
    video_id: str,
    db: Session = Depends(get_db),
    storage: StorageClient = Depends(get_storage),
):
    video = _get_or_404(db, video_id)
    arquivos = (video.url_video, video.thumbnail_url)
    nomes = [n for n in map(file_name_from_url, arquivos) if n]
    storage.remove(settings.STORAGE_BUCKET_VIDEOS, nomes)
    db.delete(video)
    db.commit()
    get_logger().info("video.deleted", video_id=video_id, arquivos=nomes)
    return MessageOut(message="Vídeo deletado com sucesso")
