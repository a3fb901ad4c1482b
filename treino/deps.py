from __future__ import annotations

from collections.abc import Generator
from datetime import datetime
from zoneinfo import ZoneInfo

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from treino.core.errors import ConfigurationError
from treino.core.logging import bind_user
from treino.core.security import decode_token
from treino.core.settings import settings
from treino.db.session import get_db
from treino.models.aluno import Aluno
from treino.models.user import User
from treino.models.user_profile import UserProfile
from treino.services.storage import StorageClient


def _extract_token_from_request(request: Request) -> str | None:
    auth = request.headers.get("Authorization")
    if auth and auth.lower().startswith("bearer "):
        return auth.split(" ", 1)[1]
    return None


def get_current_user(request: Request, db: Session = Depends(get_db)) -> User:  # noqa: B008
    token = _extract_token_from_request(request)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Não autenticado"
        )

    try:
        payload = decode_token(token, expected_type="access")
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token inválido ou expirado",
        ) from e

    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Token malformado"
        )

    user = db.get(User, user_id)
    if not user or not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Usuário inativo ou inexistente",
        )

    bind_user(user.id)
    return user


def get_current_aluno(
    user: User = Depends(get_current_user),  # noqa: B008
    db: Session = Depends(get_db),  # noqa: B008
) -> Aluno:
    aluno = db.scalars(
        select(Aluno)
        .join(UserProfile, Aluno.user_profile_id == UserProfile.id)
        .where(UserProfile.auth_user_id == user.id)
    ).first()
    if not aluno:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Aluno não encontrado")
    return aluno


def get_storage() -> Generator[StorageClient, None, None]:
    if not settings.SUPABASE_URL:
        raise ConfigurationError("Missing SUPABASE_URL environment variable")
    if not settings.SUPABASE_SERVICE_ROLE_KEY:
        raise ConfigurationError(
            "Missing SUPABASE_SERVICE_ROLE_KEY environment variable"
        )
    client = StorageClient(
        settings.SUPABASE_URL,
        settings.SUPABASE_SERVICE_ROLE_KEY,
        timeout=settings.STORAGE_TIMEOUT_SECONDS,
    )
    try:
        yield client
    finally:
        client.close()


def get_now() -> datetime:
    """Relógio da aplicação na TZ local (sobrescrito nos testes)."""
    return datetime.now(ZoneInfo(settings.TZ_LOCAL))
