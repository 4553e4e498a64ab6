import logging
from flask import Blueprint
from werkzeug.exceptions import HTTPException
from app.services.errors import DomainError, InvalidInputError
from app.utils.responses import error, internal_error_response

errors_bp = Blueprint("errors_bp", __name__)

@errors_bp.app_errorhandler(HTTPException)
def handle_http_exception(e):
    msg = e.description or getattr(e, "name", "HTTP Error")
    return error(msg, status=e.code, code=e.code)

@errors_bp.app_errorhandler(DomainError)
def handle_domain_error(e):
    errors = e.errors if isinstance(e, InvalidInputError) else None
    logging.getLogger(__name__).info("%s: %s", type(e).__name__, e.message)
    return error(e.message, status=e.status_code, errors=errors)

@errors_bp.app_errorhandler(Exception)
def handle_unexpected_exception(e):
    logging.exception("Unhandled exception")
    return internal_error_response()
