"""
Alembic environment: runs migrations against settings.database_url.
"""
from logging.config import fileConfig

from alembic import context
from dotenv import load_dotenv

load_dotenv()

from vetclinic.config import get_settings
from vetclinic.core import bootstrap  # noqa: F401 - registers every model
from vetclinic.database import Base, get_engine

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    context.configure(
        url=get_settings().database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    with get_engine().connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
