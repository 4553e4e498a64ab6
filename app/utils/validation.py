from functools import wraps
from flask import request
from pydantic import ValidationError
from app.services.errors import InvalidInputError


def _simplify(errors):
    return [
        {"loc": [str(part) for part in e.get("loc", ())], "msg": e.get("msg"), "type": e.get("type")}
        for e in errors
    ]


def parse_input(schema, data):
    """Build ``schema`` from ``data``, turning pydantic failures into InvalidInputError."""
    try:
        return schema.model_validate(data or {})
    except ValidationError as ve:
        raise InvalidInputError("Invalid input", errors=_simplify(ve.errors())) from ve


def validate_schema(schema, source="json"):
    """Decorator to validate the request body (or query string) against a Pydantic schema."""

    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            if source == "args":
                data = request.args.to_dict()
            else:
                data = request.get_json(silent=True)
                if data is not None and not isinstance(data, dict):
                    raise InvalidInputError("Request body must be a JSON object")
            request.validated_data = parse_input(schema, data)
            return fn(*args, **kwargs)
        return wrapper

    return decorator
