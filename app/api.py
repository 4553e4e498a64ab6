from werkzeug.routing import IntegerConverter
from app.routes import catalog_bp, admin_bp, orders_bp
from app.schemas.common import MAX_DB_ID


class BoundedIntConverter(IntegerConverter):
    """``<int:...>`` limited to values a BIGINT key can hold; larger ids are a plain 404."""

    def __init__(self, map, *args, **kwargs):
        kwargs.setdefault("max", MAX_DB_ID)
        super().__init__(map, *args, **kwargs)


def register_api_v1(app):
    """Register blueprint routes under the API version prefix."""
    app.url_map.converters["int"] = BoundedIntConverter
    app.register_blueprint(catalog_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(orders_bp)
