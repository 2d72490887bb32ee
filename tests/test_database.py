import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError

from authors_api import database


def test_init_database_creates_both_tables() -> None:
    fresh_engine = database.build_engine('sqlite:///:memory:')

    database.init_database(fresh_engine)

    assert {'author', 'users'} <= set(inspect(fresh_engine).get_table_names())
    fresh_engine.dispose()


def test_init_database_is_repeatable(engine) -> None:
    database.init_database(engine)

    assert {'author', 'users'} <= set(inspect(engine).get_table_names())


def test_try_init_database_logs_and_reports_failure(monkeypatch: pytest.MonkeyPatch, caplog) -> None:
    def _fail(*_args, **_kwargs):
        raise OperationalError('CREATE TABLE', {}, Exception('database is locked'))

    monkeypatch.setattr(database.Base.metadata, 'create_all', _fail)

    assert database.try_init_database(database.build_engine('sqlite://')) is False
    assert 'Database initialization failed' in caplog.text
