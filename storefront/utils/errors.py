class ApiError(Exception):
    """Base error carrying the HTTP status and error code for the JSON envelope"""
    status_code = 500
    code = 'INTERNAL_ERROR'

    def __init__(self, message, status_code=None, code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code


class ValidationError(ApiError):
    status_code = 400
    code = 'VALIDATION_ERROR'


class NotFoundError(ApiError):
    status_code = 404
    code = 'NOT_FOUND'


class AuthError(ApiError):
    status_code = 401
    code = 'UNAUTHORIZED'
