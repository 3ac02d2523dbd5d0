import sys
import os
from logging.config import fileConfig

# local
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from quiz_builder.core.config import settings  # noqa: E402
from quiz_builder.core.database import Base  # noqa: E402
from quiz_builder.models.quiz_db.quiz_db import Quiz  # noqa: E402,F401
from sqlalchemy import engine_from_config, pool  # noqa: E402
from alembic import context  # noqa: E402

config = context.config
config.set_main_option("sqlalchemy.url", settings.DATABASE_URL)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = engine_from_config(
        config.get_section(config.config_ini_section),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            # SQLite needs batch mode to alter tables
            render_as_batch=connection.dialect.name == "sqlite",
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
