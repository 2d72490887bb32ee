import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from authors_api.core import config

logger = logging.getLogger(__name__)

Base = declarative_base()

# Largest value a signed 64-bit INTEGER/BIGINT column can hold.
MAX_INTEGER = 2**63 - 1


def build_engine(database_url: str) -> Engine:
    url = make_url(database_url)
    if url.get_backend_name() != 'sqlite':
        return create_engine(database_url, pool_pre_ping=True)

    # In-memory SQLite only lives as long as its single connection.
    if url.database in (None, '', ':memory:'):
        return create_engine(
            database_url,
            connect_args={'check_same_thread': False},
            poolclass=StaticPool,
        )
    return create_engine(database_url, connect_args={'check_same_thread': False})


def build_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=bind,
    )


engine = build_engine(config.DATABASE_URL)

SessionLocal = build_session_factory(engine)


def init_database(bind: Engine) -> None:
    # Models register their tables on Base at import time.
    from authors_api.models import author, user  # noqa: F401

    Base.metadata.create_all(bind=bind)


def try_init_database(bind: Engine) -> bool:
    try:
        init_database(bind)
    except SQLAlchemyError:
        logger.exception('Database initialization failed. Check DATABASE_URL and database credentials.')
        return False
    return True
