from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from treino.core.logging import get_logger
from treino.core.security import create_access_token, verify_password
from treino.db.session import get_db
from treino.deps import get_current_user
from treino.models.user import User
from treino.schemas.auth import LoginIn, LoginOut, MeOut

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginOut)
def login(payload: LoginIn, db: Session = Depends(get_db)):
    user = db.scalars(select(User).where(User.email == payload.email.lower())).first()
    if not user or not user.is_active or not verify_password(
        payload.senha, user.password_hash
    ):
        get_logger().info("auth.login_failed", email=payload.email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Credenciais inválidas"
        )

    token = create_access_token(sub=user.id, role=user.role.value)
    get_logger().info("auth.login_ok", user_id=user.id)
    return LoginOut(access_token=token)


@router.get("/me", response_model=MeOut)
def me(current_user: Annotated[User, Depends(get_current_user)]):
    profile = current_user.profile
    return MeOut(
        id=current_user.id,
        email=current_user.email,
        role=current_user.role.value,
        nome=profile.nome if profile else None,
        aluno_id=profile.aluno.id if profile and profile.aluno else None,
    )
