from datetime import datetime, timezone

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import BigInteger, Integer

# Use BigInteger in production but fall back to Integer for SQLite
BIGINT = BigInteger().with_variant(Integer, "sqlite")

db = SQLAlchemy()


def utcnow() -> datetime:
    """Naive UTC timestamp, the representation stored in every DateTime column."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def isoformat(value):
    return value.isoformat() if value else None


# Re-export common models for convenience
from .category import Category  # noqa: E402,F401
from .store import Store  # noqa: E402,F401
from .item import Item  # noqa: E402,F401
from .order import Order, OrderItem, OrderStatus, OrderStatusLog  # noqa: E402,F401
