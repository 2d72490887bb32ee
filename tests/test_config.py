import pytest

from authors_api.core import config


def test_validate_runtime_config_rejects_default_secret_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, 'APP_ENV', 'production')
    monkeypatch.setattr(config, 'JWT_SECRET_KEY', 'change-me')

    with pytest.raises(RuntimeError):
        config.validate_runtime_config()


def test_validate_runtime_config_allows_default_secret_in_development(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, 'APP_ENV', 'development')
    monkeypatch.setattr(config, 'JWT_SECRET_KEY', 'change-me')

    config.validate_runtime_config()


@pytest.mark.parametrize(
    ('raw', 'expected'),
    [(None, False), ('1', True), (' TRUE ', True), ('yes', True), ('off', False), ('', False)],
)
def test_get_bool(raw, expected) -> None:
    assert config._get_bool(raw) is expected


def test_get_list_splits_and_strips() -> None:
    assert config._get_list(' http://a.test , ,http://b.test', default=[]) == ['http://a.test', 'http://b.test']
    assert config._get_list(None, default=['x']) == ['x']
