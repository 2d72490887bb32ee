import os

import pytest

os.environ.setdefault('DATABASE_URL', 'sqlite://')
os.environ.setdefault('JWT_SECRET_KEY', 'test-secret-key-long-enough-for-hs256')

from fastapi.testclient import TestClient  # noqa: E402

from authors_api.auth.security import hash_password  # noqa: E402
from authors_api.database import Base, build_engine, build_session_factory, init_database  # noqa: E402
from authors_api.main import create_app  # noqa: E402
from authors_api.schemas.auth import UserDraft  # noqa: E402
from authors_api.store.author_store import AuthorStore  # noqa: E402
from authors_api.store.user_store import UserStore  # noqa: E402


@pytest.fixture
def engine():
    test_engine = build_engine('sqlite://')
    init_database(test_engine)
    try:
        yield test_engine
    finally:
        Base.metadata.drop_all(bind=test_engine)
        test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def author_store(session_factory) -> AuthorStore:
    return AuthorStore(session_factory)


@pytest.fixture
def user_store(session_factory) -> UserStore:
    return UserStore(session_factory)


@pytest.fixture
def make_user(user_store):
    def _make_user(username: str = 'reader', password: str = 'correct horse battery'):
        result = user_store.create(UserDraft(username=username, password_hash=hash_password(password)))
        assert result.ok, result.error
        return result.value

    return _make_user


@pytest.fixture
def client(engine):
    with TestClient(create_app(bind=engine, require_auth=False)) as test_client:
        yield test_client
