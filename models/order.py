from enum import Enum

from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Integer, Numeric
from models import db, BIGINT, utcnow, isoformat


class OrderStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class Order(db.Model):
    __tablename__ = "orders"
    __table_args__ = (
        db.Index("ix_orders_created_at", "created_at"),
    )
    id = Column(BIGINT, primary_key=True)

    # Guest contact data; there is no account behind an order
    guest_name = Column(String(200), nullable=False)
    guest_email = Column(String(255), nullable=False)
    guest_address = Column(Text, nullable=False)

    total_amount = Column(Numeric(10, 2), nullable=False)   # fixed at creation
    payment_intent_id = Column(String(255), nullable=True)
    status = Column(String(20), nullable=False, default=OrderStatus.PENDING.value)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    items = db.relationship(
        "OrderItem",
        backref="order",
        cascade="all, delete-orphan",
        lazy=True,
        order_by="OrderItem.id",
    )
    status_log = db.relationship(
        "OrderStatusLog",
        backref="order",
        cascade="all, delete-orphan",
        lazy=True,
        order_by="OrderStatusLog.id",
    )

    def to_dict(self, include_items=False):
        data = {
            "id": self.id,
            "guest_name": self.guest_name,
            "guest_email": self.guest_email,
            "guest_address": self.guest_address,
            "total_amount": float(self.total_amount),
            "payment_intent_id": self.payment_intent_id,
            "status": self.status,
            "created_at": isoformat(self.created_at),
            "updated_at": isoformat(self.updated_at),
        }
        if include_items:
            data["items"] = [oi.to_dict() for oi in self.items]
            data["status_history"] = [log.to_dict() for log in self.status_log]
        return data

    def __repr__(self):
        return f"<Order id={self.id} status={self.status} total={self.total_amount}>"


class OrderItem(db.Model):
    __tablename__ = "order_items"
    __table_args__ = (
        db.Index("ix_order_items_order_id", "order_id"),
    )
    id = db.Column(BIGINT, primary_key=True)
    order_id = db.Column(BIGINT, db.ForeignKey("orders.id"), nullable=False)
    item_id = db.Column(BIGINT, nullable=False)   # historical reference, the item may change later

    quantity = db.Column(Integer, nullable=False)
    price_at_time = db.Column(Numeric(10, 2), nullable=False)
    created_at = db.Column(DateTime, default=utcnow, nullable=False)

    @property
    def line_total(self):
        return self.price_at_time * self.quantity

    def to_dict(self):
        return {
            "id": self.id,
            "order_id": self.order_id,
            "item_id": self.item_id,
            "quantity": self.quantity,
            "price_at_time": float(self.price_at_time),
            "line_total": float(self.line_total),
            "created_at": isoformat(self.created_at),
        }


class OrderStatusLog(db.Model):
    __tablename__ = "order_status_log"
    __table_args__ = (
        db.Index("ix_order_status_log_order_id", "order_id"),
    )
    id = Column(BIGINT, primary_key=True)
    order_id = Column(BIGINT, ForeignKey("orders.id"), nullable=False)
    from_status = Column(String(20), nullable=True)   # NULL for the creation entry
    to_status = Column(String(20), nullable=False)
    payment_intent_id = Column(String(255), nullable=True)
    note = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    def to_dict(self):
        return {
            "from_status": self.from_status,
            "to_status": self.to_status,
            "payment_intent_id": self.payment_intent_id,
            "note": self.note,
            "created_at": isoformat(self.created_at),
        }
