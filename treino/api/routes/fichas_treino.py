from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from treino.core.logging import get_logger
from treino.db.session import get_db
from treino.deps import get_current_aluno
from treino.models.aluno import Aluno
from treino.models.ficha_treino import (
    AtribuicaoStatus,
    ExercicioFicha,
    FichaAtribuicao,
    FichaTreino,
)
from treino.models.treino_video import TreinoVideo
from treino.schemas.agendamentos import AlunoResumo
from treino.schemas.fichas import (
    AtribuicaoIn,
    AtribuicaoOut,
    ExercicioIn,
    FichaDoAlunoOut,
    FichaIn,
    FichaOut,
    FichasStatsOut,
    FichaUpdateIn,
)

router = APIRouter(prefix="/fichas-treino", tags=["fichas-treino"])
aluno_router = APIRouter(prefix="/aluno/fichas", tags=["aluno"])


def _get_or_404(db: Session, ficha_id: str) -> FichaTreino:
    ficha = db.get(FichaTreino, ficha_id)
    if not ficha:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Ficha não encontrada")
    return ficha


def _build_exercicios(db: Session, itens: list[ExercicioIn]) -> list[ExercicioFicha]:
    exercicios = []
    for idx, item in enumerate(itens, start=1):
        if item.video_id and not db.get(TreinoVideo, item.video_id):
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Vídeo não encontrado")
        data = item.model_dump()
        data["ordem"] = item.ordem or idx
        exercicios.append(ExercicioFicha(**data))
    return exercicios


def _atribuicao_out(at: FichaAtribuicao) -> AtribuicaoOut:
    aluno = None
    if at.aluno is not None and at.aluno.profile is not None:
        aluno = AlunoResumo(
            id=at.aluno.id, nome=at.aluno.profile.nome, email=at.aluno.profile.email
        )
    return AtribuicaoOut(
        id=at.id,
        ficha_id=at.ficha_id,
        aluno_id=at.aluno_id,
        data_inicio=at.data_inicio,
        data_fim=at.data_fim,
        status=at.status,
        observacoes=at.observacoes,
        created_at=at.created_at,
        aluno=aluno,
    )


@router.get("", response_model=list[FichaOut])
def list_fichas(db: Session = Depends(get_db)):
    rows = db.scalars(
        select(FichaTreino).order_by(FichaTreino.created_at.desc())
    ).all()
    return [FichaOut.model_validate(f) for f in rows]


@router.post("", response_model=FichaOut, status_code=201)
def create_ficha(payload: FichaIn, db: Session = Depends(get_db)):
    ficha = FichaTreino(**payload.model_dump(exclude={"exercicios"}))
    ficha.exercicios = _build_exercicios(db, payload.exercicios)
    db.add(ficha)
    db.commit()
    db.refresh(ficha)
    get_logger().info(
        "ficha.created", ficha_id=ficha.id, exercicios=len(ficha.exercicios)
    )
    return FichaOut.model_validate(ficha)


# declarada antes de /{ficha_id} para não ser capturada como id
@router.get("/stats/geral", response_model=FichasStatsOut)
def fichas_stats(db: Session = Depends(get_db)):
    total = db.scalar(select(func.count()).select_from(FichaTreino)) or 0
    ativas = (
        db.scalar(
            select(func.count())
            .select_from(FichaTreino)
            .where(FichaTreino.ativo.is_(True))
        )
        or 0
    )
    exercicios = db.scalar(select(func.count()).select_from(ExercicioFicha)) or 0
    alunos = (
        db.scalar(
            select(func.count(func.distinct(FichaAtribuicao.aluno_id))).where(
                FichaAtribuicao.status == AtribuicaoStatus.ATIVO
            )
        )
        or 0
    )
    return FichasStatsOut(
        total_fichas=total,
        fichas_ativas=ativas,
        total_exercicios=exercicios,
        alunos_com_fichas=alunos,
    )


@router.get("/{ficha_id}", response_model=FichaOut)
def get_ficha(ficha_id: str, db: Session = Depends(get_db)):
    return FichaOut.model_validate(_get_or_404(db, ficha_id))


@router.put("/{ficha_id}", response_model=FichaOut)
def update_ficha(
    ficha_id: str, payload: FichaUpdateIn, db: Session = Depends(get_db)
):
    ficha = _get_or_404(db, ficha_id)
    data = payload.model_dump(exclude_unset=True, exclude={"exercicios"})
    for field, value in data.items():
        if field not in ("descricao", "objetivo", "duracao_semanas") and value is None:
            continue
        setattr(ficha, field, value)
    if payload.exercicios is not None:
        # lista nova substitui a antiga (delete-orphan remove as linhas)
        ficha.exercicios = _build_exercicios(db, payload.exercicios)
    db.commit()
    db.refresh(ficha)
    return FichaOut.model_validate(ficha)


@router.delete("/{ficha_id}", status_code=204)
def delete_ficha(ficha_id: str, db: Session = Depends(get_db)):
    ficha = _get_or_404(db, ficha_id)
    db.delete(ficha)
    db.commit()
    get_logger().info("ficha.deleted", ficha_id=ficha_id)
    return Response(status_code=204)


@router.post("/{ficha_id}/atribuir", response_model=AtribuicaoOut, status_code=201)
def atribuir_ficha(
    ficha_id: str, payload: AtribuicaoIn, db: Session = Depends(get_db)
):
    _get_or_404(db, ficha_id)
    if not db.get(Aluno, payload.aluno_id):
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Aluno não encontrado")
    if payload.data_fim and payload.data_fim < payload.data_inicio:
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST, "dataFim deve ser posterior a dataInicio"
        )
    at = FichaAtribuicao(ficha_id=ficha_id, **payload.model_dump())
    db.add(at)
    db.commit()
    db.refresh(at)
    get_logger().info(
        "ficha.assigned",
        ficha_id=ficha_id,
        aluno_id=payload.aluno_id,
        atribuicao_id=at.id,
    )
    return _atribuicao_out(at)


@router.get("/{ficha_id}/atribuicoes", response_model=list[AtribuicaoOut])
def list_atribuicoes(ficha_id: str, db: Session = Depends(get_db)):
    _get_or_404(db, ficha_id)
    rows = db.scalars(
        select(FichaAtribuicao)
        .where(FichaAtribuicao.ficha_id == ficha_id)
        .order_by(FichaAtribuicao.created_at.desc())
    ).unique().all()
    return [_atribuicao_out(at) for at in rows]


@router.delete("/{ficha_id}/atribuicoes/{atribuicao_id}", status_code=204)
def remove_atribuicao(
    ficha_id: str, atribuicao_id: str, db: Session = Depends(get_db)
):
    at = db.get(FichaAtribuicao, atribuicao_id)
    if not at or at.ficha_id != ficha_id:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Atribuição não encontrada")
    db.delete(at)
    db.commit()
    return Response(status_code=204)


@aluno_router.get("", response_model=list[FichaDoAlunoOut])
def minhas_fichas(
    aluno: Aluno = Depends(get_current_aluno), db: Session = Depends(get_db)
):
    """Fichas atribuídas ao aluno logado, exceto as concluídas."""
    rows = db.scalars(
        select(FichaAtribuicao)
        .where(
            FichaAtribuicao.aluno_id == aluno.id,
            FichaAtribuicao.status != AtribuicaoStatus.CONCLUIDO,
        )
        .order_by(FichaAtribuicao.data_inicio.desc())
    ).unique().all()
    return [
        FichaDoAlunoOut(
            **_atribuicao_out(at).model_dump(),
            ficha=FichaOut.model_validate(at.ficha),
        )
        for at in rows
    ]
