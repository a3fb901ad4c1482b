from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from treino.core.errors import store_message
from treino.core.logging import get_logger
from treino.core.security import hash_password
from treino.models.aluno import Aluno, AlunoStatus
from treino.models.user import Role, User
from treino.models.user_profile import UserProfile
from treino.schemas.alunos import AlunoCreateIn


class ProvisioningError(Exception):
    def __init__(self, step: str, message: str):
        super().__init__(message)
        self.step = step
        self.message = message


def _create_identity(db: Session, payload: AlunoCreateIn) -> User:
    user = User(
        email=payload.email.lower(),
        password_hash=hash_password(payload.senha),
        role=Role.ALUNO,
        is_active=True,
    )
    db.add(user)
    db.flush()
    return user


def _create_profile(db: Session, payload: AlunoCreateIn, user: User) -> UserProfile:
    profile = UserProfile(
        auth_user_id=user.id,
        nome=payload.nome.strip(),
        email=payload.email.lower(),
        tipo=Role.ALUNO,
        foto_url=payload.foto_url,
    )
    db.add(profile)
    db.flush()
    return profile


def _create_aluno(db: Session, payload: AlunoCreateIn, profile: UserProfile) -> Aluno:
    aluno = Aluno(
        user_profile_id=profile.id,
        data_nascimento=payload.data_nascimento,
        altura=payload.altura,
        genero=payload.genero,
        status=payload.status or AlunoStatus.ATIVO,
    )
    db.add(aluno)
    db.flush()
    return aluno


def _rollback(db: Session, log) -> None:
    try:
        db.rollback()
    except SQLAlchemyError as exc:
        # o erro original continua sendo o que sobe para o cliente
        log.error("aluno.provision_rollback_failed", error=store_message(exc))


def provision_student(db: Session, payload: AlunoCreateIn) -> Aluno:
    """
    Cria identidade -> perfil -> aluno numa única transação.
    Qualquer passo que falhe desfaz os anteriores (sem identidade órfã).
    """
    log = get_logger().bind(email=payload.email)
    step = "identity"
    try:
        user = _create_identity(db, payload)
        step = "profile"
        profile = _create_profile(db, payload, user)
        step = "aluno"
        aluno = _create_aluno(db, payload, profile)
        db.commit()
    except SQLAlchemyError as exc:
        log.error("aluno.provision_failed", step=step, error=store_message(exc))
        _rollback(db, log)
        raise ProvisioningError(step, store_message(exc)) from exc
    except Exception:
        log.exception("aluno.provision_failed", step=step)
        _rollback(db, log)
        raise

    db.refresh(aluno)
    log.info("aluno.provisioned", aluno_id=aluno.id, user_id=user.id)
    return aluno
