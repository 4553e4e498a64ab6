from .responses import ok, error, internal_error_response
from .validation import parse_input, validate_schema
from .db import transactional
from .money import to_money, to_cents

__all__ = [
    'ok',
    'error',
    'internal_error_response',
    'parse_input',
    'validate_schema',
    'transactional',
    'to_money',
    'to_cents',
]
