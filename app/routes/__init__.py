from .catalog import catalog_bp
from .admin import admin_bp
from .orders import orders_bp


__all__ = [
    'catalog_bp',
    'admin_bp',
    'orders_bp',
]
