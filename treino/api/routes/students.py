from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from treino.core.logging import get_logger
from treino.db.session import get_db
from treino.models.aluno import Aluno
from treino.models.user import Role, User
from treino.models.user_profile import UserProfile
from treino.schemas.alunos import StudentOut, StudentUpdateIn

router = APIRouter(prefix="/admin/students", tags=["students"])

_PROFILE_FIELDS = {"nome", "email", "foto_url"}


def _student_out(profile: UserProfile) -> StudentOut:
    aluno = profile.aluno
    return StudentOut(
        id=profile.id,
        auth_user_id=profile.auth_user_id,
        nome=profile.nome,
        email=profile.email,
        tipo=profile.tipo.value,
        foto_url=profile.foto_url,
        aluno_id=aluno.id if aluno else None,
        data_nascimento=aluno.data_nascimento if aluno else None,
        altura=aluno.altura if aluno else None,
        genero=aluno.genero if aluno else None,
        status=aluno.status if aluno else None,
        created_at=profile.created_at,
        updated_at=profile.updated_at,
    )


def _get_or_404(db: Session, profile_id: str) -> UserProfile:
    profile = db.get(UserProfile, profile_id)
    if not profile or profile.tipo != Role.ALUNO:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Aluno não encontrado")
    return profile


@router.get("", response_model=list[StudentOut])
def list_students(db: Session = Depends(get_db)):
    rows = db.scalars(
        select(UserProfile)
        .options(selectinload(UserProfile.aluno))
        .where(UserProfile.tipo == Role.ALUNO)
        .order_by(UserProfile.created_at.desc())
    ).all()
    return [_student_out(p) for p in rows]


@router.get("/{profile_id}", response_model=StudentOut)
def get_student(profile_id: str, db: Session = Depends(get_db)):
    return _student_out(_get_or_404(db, profile_id))


@router.put("/{profile_id}", response_model=StudentOut)
def update_student(
    profile_id: str, payload: StudentUpdateIn, db: Session = Depends(get_db)
):
    profile = _get_or_404(db, profile_id)
    data = payload.model_dump(exclude_unset=True)

    for field in data.keys() & _PROFILE_FIELDS:
        value = data.pop(field)
        if field == "email" and value:
            value = value.lower()
            # e-mail de login acompanha o do perfil
            profile.user.email = value
        if field != "foto_url" and value is None:
            continue
        setattr(profile, field, value)

    if data:
        aluno = profile.aluno
        if aluno is None:
            aluno = Aluno(user_profile_id=profile.id)
            db.add(aluno)
        for field, value in data.items():
            if field == "status" and value is None:
                continue
            setattr(aluno, field, value)

    db.commit()
    db.refresh(profile)
    return _student_out(profile)


@router.delete("/{profile_id}")
def delete_student(profile_id: str, db: Session = Depends(get_db)):
    profile = _get_or_404(db, profile_id)
    log = get_logger().bind(profile_id=profile.id, user_id=profile.auth_user_id)
    try:
        if profile.aluno is not None:
            db.delete(profile.aluno)
        user = db.get(User, profile.auth_user_id)
        db.delete(profile)
        if user is not None:
            db.delete(user)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        log.exception("student.delete_failed")
        raise
    log.info("student.deleted")
    return {"success": True}
