from __future__ import annotations

from pydantic import EmailStr

from treino.schemas.base import CamelModel


class LoginIn(CamelModel):
    email: EmailStr
    senha: str


class LoginOut(CamelModel):
    access_token: str
    token_type: str = "bearer"


class MeOut(CamelModel):
    id: str
    email: str
    role: str
    nome: str | None = None
    aluno_id: str | None = None
