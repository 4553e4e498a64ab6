"""Tests for configuration selection."""
import pytest

from app.config import (
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    get_config_class,
)


def test_testing_config_uses_memory_db(monkeypatch):
    monkeypatch.setenv('APP_ENV', 'testing')
    cfg = get_config_class()
    assert cfg is TestingConfig
    assert cfg.TESTING is True
    assert cfg.SQLALCHEMY_DATABASE_URI.startswith('sqlite://')
    assert cfg.RATELIMIT_ENABLED is False


def test_development_is_default(monkeypatch):
    monkeypatch.delenv('APP_ENV', raising=False)
    assert get_config_class() is DevelopmentConfig
    assert DevelopmentConfig.DEBUG is True


def test_production_requires_secret_and_database(monkeypatch):
    monkeypatch.setenv('APP_ENV', 'production')
    monkeypatch.delenv('SECRET_KEY', raising=False)
    monkeypatch.setenv('DATABASE_URL', 'postgresql://db/storefront')
    with pytest.raises(RuntimeError, match='SECRET_KEY'):
        get_config_class()


def test_production_selected_when_complete(monkeypatch):
    monkeypatch.setenv('APP_ENV', 'production')
    monkeypatch.setenv('SECRET_KEY', 'x')
    monkeypatch.setenv('DATABASE_URL', 'postgresql://db/storefront')
    assert get_config_class() is ProductionConfig


def test_payment_defaults():
    assert TestingConfig.PAYMENT_PROVIDER == 'mock'
    assert TestingConfig.PAYMENT_CURRENCY == 'usd'
