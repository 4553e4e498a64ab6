import os


def _env_flag(name, default="0"):
    return (os.getenv(name, default) or "").lower() in ("1", "true", "yes")


class BaseConfig:
    JSON_SORT_KEYS = False
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    CORS_ALLOWED_ORIGINS = os.getenv("CORS_ALLOWED_ORIGINS", "*")
    RATELIMIT_STORAGE_URL = os.getenv("RATELIMIT_STORAGE_URL", "memory://")
    ORDER_LIMIT_PER_IP = os.getenv("ORDER_LIMIT_PER_IP", "20 per hour")
    PAYMENT_PROVIDER = os.getenv("PAYMENT_PROVIDER", "mock")
    PAYMENT_CURRENCY = os.getenv("PAYMENT_CURRENCY", "usd")
    # Legacy behaviour: let any order status overwrite any other
    ORDER_STATUS_PERMISSIVE = _env_flag("ORDER_STATUS_PERMISSIVE")
    OTEL_SERVICE_NAME = os.getenv("OTEL_SERVICE_NAME", "storefront-backend")
    OTEL_EXPORTER_OTLP_ENDPOINT = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", "http://localhost:4318/v1/traces")

class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-insecure-key")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///dev.db")

class TestingConfig(BaseConfig):
    TESTING = True
    SECRET_KEY = "test-key"
    SQLALCHEMY_DATABASE_URI = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")
    RATELIMIT_ENABLED = False

class ProductionConfig(BaseConfig):
    DEBUG = False
    TESTING = False
    SECRET_KEY = os.getenv("SECRET_KEY")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL")

    @staticmethod
    def validate():
        missing = []
        if not os.getenv("SECRET_KEY"):
            missing.append("SECRET_KEY")
        if not os.getenv("DATABASE_URL"):
            missing.append("DATABASE_URL")
        if missing:
            raise RuntimeError(
                f"Missing required env vars in production: {', '.join(missing)}"
            )

def get_config_class():
    env = os.getenv("APP_ENV", "development").lower()
    if env == "production":
        ProductionConfig.validate()
        return ProductionConfig
    if env == "testing":
        return TestingConfig
    return DevelopmentConfig
