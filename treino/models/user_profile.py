from __future__ import annotations

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from treino.db.base_class import Base, Timestamps, UUIDPk, enum_column
from treino.models.user import Role


class UserProfile(UUIDPk, Timestamps, Base):
    __tablename__ = "users_profile"

    auth_user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        index=True,
        nullable=False,
    )
    nome: Mapped[str] = mapped_column(String(160), nullable=False)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    tipo: Mapped[Role] = mapped_column(
        enum_column(Role, "profile_tipo_enum"), nullable=False
    )
    foto_url: Mapped[str | None] = mapped_column(String(1024))

    user = relationship("User", back_populates="profile")
    aluno = relationship("Aluno", back_populates="profile", uselist=False)
