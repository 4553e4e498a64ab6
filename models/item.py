# --- models/item.py ---
from models import db, BIGINT, utcnow, isoformat


class Item(db.Model):
    __tablename__ = "items"
    __table_args__ = (
        db.Index("ix_items_category_id", "category_id"),
        db.Index("ix_items_store_id", "store_id"),
        db.Index("ix_items_created_at", "created_at"),
        db.CheckConstraint("price > 0", name="ck_items_price_positive"),
        db.CheckConstraint("stock_quantity >= 0", name="ck_items_stock_non_negative"),
    )

    id = db.Column(BIGINT, primary_key=True)

    # Core details
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)

    # Pricing & inventory
    price = db.Column(db.Numeric(10, 2), nullable=False)
    stock_quantity = db.Column(db.Integer, nullable=False, default=0)   # informational, never decremented by orders

    # Media, ordered as entered by the admin
    images = db.Column(db.JSON, nullable=False, default=list)

    # Soft references, checked by the catalog service rather than by FKs
    category_id = db.Column(BIGINT, nullable=False)
    store_id = db.Column(BIGINT, nullable=False)

    # Timestamps
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": float(self.price),
            "stock_quantity": self.stock_quantity,
            "images": list(self.images or []),
            "category_id": self.category_id,
            "store_id": self.store_id,
            "created_at": isoformat(self.created_at),
            "updated_at": isoformat(self.updated_at),
        }

    def __repr__(self):
        return f"<Item id={self.id} name={self.name} price={self.price}>"
