from flask import Blueprint
from app.version import API_PREFIX

orders_bp = Blueprint("orders", __name__, url_prefix=f"{API_PREFIX}/orders")

from . import checkout  # noqa: E402
from . import status  # noqa: E402
from . import payments  # noqa: E402
