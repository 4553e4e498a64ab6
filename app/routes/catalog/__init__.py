from flask import Blueprint
from app.version import API_PREFIX

catalog_bp = Blueprint("catalog", __name__, url_prefix=API_PREFIX)

from . import items  # noqa: E402
from . import listings  # noqa: E402
