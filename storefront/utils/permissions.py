from functools import wraps
from flask import g
from storefront.utils.auth import get_current_user

def _guard(f, admin_only):
    @wraps(f)
    def wrapper(*args, **kwargs):
        # storefront.api imports this module; resolve the envelope helper late
        from storefront.api.utils import error_response

        user = get_current_user()
        if user is None or not user.is_active:
            return error_response('Login first to access this resource', 'UNAUTHORIZED', 401)
        if admin_only and not user.is_admin:
            return error_response(
                f'Role ({user.role_name}) is not allowed to access this resource',
                'FORBIDDEN',
                403
            )

        g.current_user = user
        return f(*args, **kwargs)
    return wrapper

def login_required(f):
    """Any active session user; exposed to the view as g.current_user"""
    return _guard(f, admin_only=False)

def admin_required(f):
    """Super Admin or Admin only"""
    return _guard(f, admin_only=True)
