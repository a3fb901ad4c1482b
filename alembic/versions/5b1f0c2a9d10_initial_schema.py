"""initial schema

Revision ID: 5b1f0c2a9d10
Revises:
Create Date: 2026-10-19 10:12:44.120331

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5b1f0c2a9d10"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

SLOT_INDEX_NAME = "ux_agendamento_slot_ativo"

ENUMS = (
    "role_enum",
    "profile_tipo_enum",
    "genero_enum",
    "aluno_status_enum",
    "agendamento_status_enum",
    "agendamento_tipo_enum",
    "plano_tipo_enum",
    "assinatura_status_enum",
    "pagamento_status_enum",
    "pagamento_metodo_enum",
    "foto_tipo_enum",
)


def _pk():
    return sa.Column("id", sa.String(length=36), primary_key=True)


def _timestamps():
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def _aluno_fk():
    return sa.Column(
        "aluno_id",
        sa.String(length=36),
        sa.ForeignKey("alunos.id", ondelete="CASCADE"),
        nullable=False,
    )


def upgrade() -> None:
    # 1) identidade + perfil
    op.create_table(
        "users",
        _pk(),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("password_hash", sa.String(length=512), nullable=False),
        sa.Column("role", sa.Enum("admin", "aluno", name="role_enum"), nullable=False),
        sa.Column(
            "is_active", sa.Boolean(), nullable=False, server_default=sa.text("TRUE")
        ),
        *_timestamps(),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "users_profile",
        _pk(),
        sa.Column(
            "auth_user_id",
            sa.String(length=36),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("nome", sa.String(length=160), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False, unique=True),
        sa.Column(
            "tipo", sa.Enum("admin", "aluno", name="profile_tipo_enum"), nullable=False
        ),
        sa.Column("foto_url", sa.String(length=1024)),
        *_timestamps(),
    )
    op.create_index(
        "ix_users_profile_auth_user_id", "users_profile", ["auth_user_id"], unique=True
    )

    # 2) alunos
    op.create_table(
        "alunos",
        _pk(),
        sa.Column(
            "user_profile_id",
            sa.String(length=36),
            sa.ForeignKey("users_profile.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("data_nascimento", sa.Date()),
        sa.Column("altura", sa.Integer()),
        sa.Column(
            "genero", sa.Enum("masculino", "feminino", "outro", name="genero_enum")
        ),
        sa.Column(
            "status",
            sa.Enum("ativo", "inativo", "pendente", name="aluno_status_enum"),
            nullable=False,
            server_default="ativo",
        ),
        *_timestamps(),
    )
    op.create_index(
        "ix_alunos_user_profile_id", "alunos", ["user_profile_id"], unique=True
    )

    # 3) agenda
    op.create_table(
        "blocos_horarios",
        _pk(),
        sa.Column("dia_semana", sa.Integer(), nullable=False),
        sa.Column("hora_inicio", sa.Time(), nullable=False),
        sa.Column("hora_fim", sa.Time(), nullable=False),
        sa.Column("duracao", sa.Integer(), nullable=False, server_default="60"),
        sa.Column(
            "ativo", sa.Boolean(), nullable=False, server_default=sa.text("TRUE")
        ),
        *_timestamps(),
        sa.CheckConstraint(
            "dia_semana >= 0 AND dia_semana <= 6", name="ck_bloco_dia_semana"
        ),
        sa.CheckConstraint("hora_fim > hora_inicio", name="ck_bloco_time_order"),
        sa.CheckConstraint("duracao > 0", name="ck_bloco_duracao"),
    )
    op.create_index("ix_bloco_dia_ativo", "blocos_horarios", ["dia_semana", "ativo"])

    op.create_table(
        "agendamentos_presenciais",
        _pk(),
        _aluno_fk(),
        sa.Column(
            "bloco_horario_id",
            sa.String(length=36),
            sa.ForeignKey("blocos_horarios.id", ondelete="SET NULL"),
        ),
        sa.Column("data_agendamento", sa.Date(), nullable=False),
        sa.Column("hora_inicio", sa.Time(), nullable=False),
        sa.Column("hora_fim", sa.Time(), nullable=False),
        sa.Column(
            "status",
            sa.Enum(
                "agendado",
                "confirmado",
                "cancelado",
                "concluido",
                name="agendamento_status_enum",
            ),
            nullable=False,
            server_default="agendado",
        ),
        sa.Column(
            "tipo",
            sa.Enum("presencial", "online", name="agendamento_tipo_enum"),
            nullable=False,
            server_default="presencial",
        ),
        sa.Column("observacoes", sa.Text()),
        *_timestamps(),
    )
    op.create_index(
        "ix_agendamento_aluno_id", "agendamentos_presenciais", ["aluno_id"]
    )
    # ÍNDICE ÚNICO PARCIAL: um agendamento ativo por (data, hora_inicio)
    op.create_index(
        SLOT_INDEX_NAME,
        "agendamentos_presenciais",
        ["data_agendamento", "hora_inicio"],
        unique=True,
        postgresql_where=sa.text("status <> 'cancelado'"),
    )

    # 4) financeiro
    op.create_table(
        "assinaturas",
        _pk(),
        _aluno_fk(),
        sa.Column(
            "plano_tipo",
            sa.Enum("mensal", "trimestral", "familia", name="plano_tipo_enum"),
            nullable=False,
        ),
        sa.Column("preco", sa.Integer(), nullable=False),
        sa.Column("data_inicio", sa.Date(), nullable=False),
        sa.Column("data_fim", sa.Date(), nullable=False),
        sa.Column(
            "status",
            sa.Enum("ativa", "cancelada", "vencida", name="assinatura_status_enum"),
            nullable=False,
            server_default="ativa",
        ),
        sa.Column("mercado_pago_subscription_id", sa.String(length=120)),
        *_timestamps(),
    )
    op.create_index("ix_assinaturas_aluno_id", "assinaturas", ["aluno_id"])

    op.create_table(
        "pagamentos",
        _pk(),
        sa.Column(
            "assinatura_id",
            sa.String(length=36),
            sa.ForeignKey("assinaturas.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "status",
            sa.Enum(
                "pendente",
                "aprovado",
                "recusado",
                "cancelado",
                "estornado",
                name="pagamento_status_enum",
            ),
            nullable=False,
        ),
        sa.Column("valor", sa.Integer(), nullable=False),
        sa.Column(
            "metodo",
            sa.Enum(
                "credit_card",
                "debit_card",
                "pix",
                "boleto",
                name="pagamento_metodo_enum",
            ),
            nullable=False,
        ),
        sa.Column("mercado_pago_payment_id", sa.String(length=120)),
        sa.Column("data_pagamento", sa.DateTime(timezone=True)),
        *_timestamps(),
        sa.CheckConstraint("valor > 0", name="ck_pagamento_valor"),
    )
    op.create_index("ix_pagamentos_assinatura_id", "pagamentos", ["assinatura_id"])
    op.create_index(
        "ix_pagamentos_mercado_pago_payment_id",
        "pagamentos",
        ["mercado_pago_payment_id"],
    )

    # 5) progresso
    op.create_table(
        "evolucoes",
        _pk(),
        _aluno_fk(),
        sa.Column("data", sa.Date(), nullable=False),
        sa.Column("peso", sa.Float()),
        sa.Column("gordura_corporal", sa.Float()),
        sa.Column("massa_muscular", sa.Float()),
        sa.Column("peito", sa.Float()),
        sa.Column("cintura", sa.Float()),
        sa.Column("quadril", sa.Float()),
        sa.Column("braco", sa.Float()),
        sa.Column("coxa", sa.Float()),
        sa.Column("observacoes", sa.Text()),
        *_timestamps(),
    )
    op.create_index("ix_evolucoes_aluno_id", "evolucoes", ["aluno_id"])

    op.create_table(
        "fotos_progresso",
        _pk(),
        _aluno_fk(),
        sa.Column("data", sa.Date(), nullable=False),
        sa.Column(
            "tipo",
            sa.Enum("front", "side", "back", name="foto_tipo_enum"),
            nullable=False,
        ),
        sa.Column("url_foto", sa.String(length=1024), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_foto_aluno_data", "fotos_progresso", ["aluno_id", "data"])

    op.create_table(
        "treinos_pdf",
        _pk(),
        _aluno_fk(),
        sa.Column("nome", sa.String(length=200), nullable=False),
        sa.Column("descricao", sa.Text()),
        sa.Column("pdf_url", sa.String(length=1024), nullable=False),
        sa.Column(
            "data_upload",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        *_timestamps(),
    )
    op.create_index("ix_treinos_pdf_aluno_id", "treinos_pdf", ["aluno_id"])

    op.create_table(
        "treinos_realizados",
        _pk(),
        _aluno_fk(),
        sa.Column("data_realizacao", sa.DateTime(timezone=True), nullable=False),
        sa.Column("duracao_minutos", sa.Integer()),
        sa.Column("observacoes", sa.Text()),
        *_timestamps(),
    )
    op.create_index(
        "ix_treino_aluno_data", "treinos_realizados", ["aluno_id", "data_realizacao"]
    )


def downgrade() -> None:
    for table in (
        "treinos_realizados",
        "treinos_pdf",
        "fotos_progresso",
        "evolucoes",
        "pagamentos",
        "assinaturas",
        "agendamentos_presenciais",
        "blocos_horarios",
        "alunos",
        "users_profile",
        "users",
    ):
        op.drop_table(table)

    bind = op.get_bind()
    for name in ENUMS:
        sa.Enum(name=name).drop(bind, checkfirst=True)
