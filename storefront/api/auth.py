from flask import Blueprint, g

from storefront.api.utils import success_response, handle_exception, get_json_body
from storefront.utils.auth import authenticate, login_user, logout_user
from storefront.utils.errors import AuthError, ValidationError
from storefront.utils.permissions import login_required

auth_bp = Blueprint('auth', __name__, url_prefix='/auth')

def _user_payload(user):
    return dict(user.summary(), role=user.role_name, isAdmin=user.is_admin)

@auth_bp.route('/login', methods=['POST'])
def login():
    """Session login with username (or email) and password"""
    try:
        data = get_json_body()
        identifier = str(data.get('username') or '').strip()
        password = str(data.get('password') or '')
        if not identifier or not password:
            raise ValidationError('Please enter both username and password')

        user = authenticate(identifier, password)
        if user is None:
            raise AuthError('Invalid username or password')

        login_user(user)
        return success_response(message=f'Welcome back, {user.username}!', user=_user_payload(user))
    except Exception as e:
        return handle_exception(e, "Login")

@auth_bp.route('/logout', methods=['POST'])
def logout():
    logout_user()
    return success_response(message='You have been logged out')

@auth_bp.route('/me', methods=['GET'])
@login_required
def me():
    return success_response(user=_user_payload(g.current_user))
