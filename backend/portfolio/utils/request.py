from flask import request

from portfolio.domain.exceptions import ValidationError


def json_body():
    """Return the request JSON object or raise ValidationError."""
    data = request.get_json(silent=True)
    if data is None:
        raise ValidationError("Invalid JSON in request body")
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
