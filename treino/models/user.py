from __future__ import annotations

import enum

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from treino.db.base_class import Base, Timestamps, UUIDPk, enum_column


class Role(str, enum.Enum):
    ADMIN = "admin"
    ALUNO = "aluno"


class User(UUIDPk, Timestamps, Base):
    """Identidade de autenticação (e-mail + hash de senha)."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(320), unique=True, index=True, nullable=False
    )
    password_hash: Mapped[str] = mapped_column(String(512), nullable=False)
    role: Mapped[Role] = mapped_column(enum_column(Role, "role_enum"), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    profile = relationship("UserProfile", back_populates="user", uselist=False)
