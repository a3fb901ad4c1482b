from __future__ import annotations

from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool

import treino.db.base  # noqa: F401
from alembic import context

# Carrega settings do app (inclui .env)
from treino.core.errors import ConfigurationError
from treino.core.settings import settings
from treino.db.base_class import Base

# Config Alembic
config = context.config

if not settings.DATABASE_URL:
    raise ConfigurationError("Missing DATABASE_URL environment variable")

# URL vem do settings (.env / ambiente), nunca do alembic.ini
config.set_main_option("sqlalchemy.url", settings.DATABASE_URL)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
        future=True,
    )
    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
