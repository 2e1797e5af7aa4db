import math
from flask import jsonify, request, current_app
from storefront.models import db
from storefront.utils.errors import ApiError, ValidationError

def success_response(message=None, status_code=200, **payload):
    """
    Create a standardized success response.

    Payload keys ('section', 'sections', 'video', 'data', pagination
    fields, ...) are placed at the top level of the envelope.
    """
    response = {"success": True}
    if message:
        response["message"] = message
    response.update(payload)
    return jsonify(response), status_code

def error_response(error_message, error_code=None, status_code=400):
    """Create a standardized error response"""
    response = {
        "success": False,
        "message": error_message
    }
    if error_code:
        response["code"] = error_code
    return jsonify(response), status_code

def handle_exception(e, context):
    """
    Map an exception raised inside a handler to the JSON envelope.

    Known API errors keep their status; anything else is reported as a 500
    with the raw message. The session is rolled back in both cases.
    """
    db.session.rollback()
    if isinstance(e, ApiError):
        return error_response(e.message, e.code, e.status_code)
    current_app.logger.error(f"{context} Error: {str(e)}")
    return error_response(str(e), "INTERNAL_ERROR", 500)

def get_json_body():
    """Return the request JSON object, or raise a 400"""
    data = request.get_json(force=True, silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data

def get_pagination_args():
    """Read page/limit query parameters"""
    default_limit = current_app.config.get('DEFAULT_PAGE_SIZE', 10)
    page = request.args.get('page', 1)
    limit = request.args.get('limit', default_limit)
    try:
        page = int(page)
        limit = int(limit)
    except (TypeError, ValueError):
        raise ValidationError("page and limit must be integers")

    if page < 1:
        raise ValidationError("page must be at least 1")
    if limit < 1:
        raise ValidationError("limit must be greater than 0")
    return page, limit

def pagination_fields(count, total, page, limit):
    return {
        "count": count,
        "totalPages": math.ceil(total / limit),
        "currentPage": page,
    }
