from flask import Blueprint
from app.version import API_PREFIX

admin_bp = Blueprint("admin", __name__, url_prefix=f"{API_PREFIX}/admin")

from . import catalog  # noqa: E402
