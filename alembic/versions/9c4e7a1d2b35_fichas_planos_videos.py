"""fichas de treino, planos alimentares e vídeos

Revision ID: 9c4e7a1d2b35
Revises: 5b1f0c2a9d10
Create Date: 2026-10-19 16:41:07.502118

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "9c4e7a1d2b35"
down_revision: str | Sequence[str] | None = "5b1f0c2a9d10"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

ENUMS = ("ficha_nivel_enum", "atribuicao_status_enum")


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
    # 1) vídeos (referenciados pelos exercícios)
    op.create_table(
        "treinos_video",
        _pk(),
        sa.Column("nome", sa.String(length=200), nullable=False),
        sa.Column("objetivo", sa.String(length=120)),
        sa.Column("descricao", sa.Text()),
        sa.Column("url_video", sa.String(length=1024), nullable=False),
        sa.Column("thumbnail_url", sa.String(length=1024)),
        sa.Column("duracao", sa.Integer()),
        sa.Column(
            "data_upload",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        *_timestamps(),
    )
    op.create_index("ix_treinos_video_objetivo", "treinos_video", ["objetivo"])

    # 2) fichas + exercícios + atribuições
    op.create_table(
        "fichas_treino",
        _pk(),
        sa.Column("nome", sa.String(length=200), nullable=False),
        sa.Column("descricao", sa.Text()),
        sa.Column("objetivo", sa.String(length=120)),
        sa.Column(
            "nivel",
            sa.Enum(
                "iniciante", "intermediario", "avancado", name="ficha_nivel_enum"
            ),
            nullable=False,
            server_default="iniciante",
        ),
        sa.Column("duracao_semanas", sa.Integer()),
        sa.Column(
            "ativo", sa.Boolean(), nullable=False, server_default=sa.text("TRUE")
        ),
        *_timestamps(),
    )

    op.create_table(
        "exercicios_ficha",
        _pk(),
        sa.Column(
            "ficha_id",
            sa.String(length=36),
            sa.ForeignKey("fichas_treino.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("nome", sa.String(length=200), nullable=False),
        sa.Column("grupo_muscular", sa.String(length=80)),
        sa.Column("ordem", sa.Integer(), nullable=False),
        sa.Column("series", sa.Integer()),
        sa.Column("repeticoes", sa.String(length=40)),
        sa.Column("descanso", sa.Integer()),
        sa.Column("observacoes", sa.Text()),
        sa.Column("tecnica", sa.String(length=120)),
        sa.Column(
            "video_id",
            sa.String(length=36),
            sa.ForeignKey("treinos_video.id", ondelete="SET NULL"),
        ),
        *_timestamps(),
        sa.CheckConstraint("ordem > 0", name="ck_exercicio_ordem"),
    )
    op.create_index(
        "ix_exercicio_ficha_ordem", "exercicios_ficha", ["ficha_id", "ordem"]
    )

    op.create_table(
        "fichas_atribuicoes",
        _pk(),
        sa.Column(
            "ficha_id",
            sa.String(length=36),
            sa.ForeignKey("fichas_treino.id", ondelete="CASCADE"),
            nullable=False,
        ),
        _aluno_fk(),
        sa.Column("data_inicio", sa.Date(), nullable=False),
        sa.Column("data_fim", sa.Date()),
        sa.Column(
            "status",
            sa.Enum("ativo", "pausado", "concluido", name="atribuicao_status_enum"),
            nullable=False,
            server_default="ativo",
        ),
        sa.Column("observacoes", sa.Text()),
        *_timestamps(),
    )
    op.create_index("ix_atribuicao_ficha_id", "fichas_atribuicoes", ["ficha_id"])
    op.create_index(
        "ix_atribuicao_aluno_status", "fichas_atribuicoes", ["aluno_id", "status"]
    )

    # 3) planos alimentares
    op.create_table(
        "planos_alimentares",
        _pk(),
        _aluno_fk(),
        sa.Column("titulo", sa.String(length=200), nullable=False),
        sa.Column("conteudo_html", sa.Text(), nullable=False),
        sa.Column("observacoes", sa.Text()),
        sa.Column(
            "data_criacao",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        *_timestamps(),
    )
    op.create_index(
        "ix_plano_aluno_criacao", "planos_alimentares", ["aluno_id", "data_criacao"]
    )


def downgrade() -> None:
    for table in (
        "planos_alimentares",
        "fichas_atribuicoes",
        "exercicios_ficha",
        "fichas_treino",
        "treinos_video",
    ):
        op.drop_table(table)

    bind = op.get_bind()
    for name in ENUMS:
        sa.Enum(name=name).drop(bind, checkfirst=True)
