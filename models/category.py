from models import db, BIGINT, utcnow, isoformat


class Category(db.Model):
    __tablename__ = "categories"

    id = db.Column(BIGINT, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    description = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "created_at": isoformat(self.created_at),
        }

    def __repr__(self):
        return f"<Category id={self.id} name={self.name}>"
