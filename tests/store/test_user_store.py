from authors_api.core.result import ErrorKind
from authors_api.schemas.auth import UserDraft


def test_get_by_username_returns_stored_user(user_store, make_user) -> None:
    created = make_user(username='reader')

    result = user_store.get_by_username('reader')

    assert result.ok
    assert result.value.id == created.id
    assert result.value.password_hash != 'correct horse battery'


def test_get_by_username_returns_not_found_for_unknown_user(user_store) -> None:
    result = user_store.get_by_username('ghost')

    assert result.error.kind is ErrorKind.NOT_FOUND


def test_create_rejects_duplicate_username(user_store, make_user) -> None:
    make_user(username='reader')

    result = user_store.create(UserDraft(username='reader', password_hash='not-a-real-hash'))

    assert result.error.kind is ErrorKind.VALIDATION
    assert result.error.message == 'User conflicts with an existing record.'
