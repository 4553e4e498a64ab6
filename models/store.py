from models import db, BIGINT, utcnow, isoformat


class Store(db.Model):
    __tablename__ = "stores"

    id = db.Column(BIGINT, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    description = db.Column(db.Text, nullable=True)
    owner_email = db.Column(db.String(255), nullable=False)   # vendor contact, not an account
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "owner_email": self.owner_email,
            "created_at": isoformat(self.created_at),
        }

    def __repr__(self):
        return f"<Store id={self.id} name={self.name}>"
