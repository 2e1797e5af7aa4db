"""Session-backed identity: the signed cookie carries only the user id."""
from datetime import datetime
from flask import session
from sqlalchemy import or_

from storefront.models import db
from storefront.models.user import User

SESSION_USER_KEY = 'user_id'

def authenticate(identifier, password):
    """Active user matching username or email and password, else None"""
    user = User.query.filter(
        or_(User.username == identifier, User.email == identifier),
        User.is_active.is_(True)
    ).first()
    if user is None or not user.check_password(password):
        return None
    return user

def login_user(user):
    session.clear()
    session[SESSION_USER_KEY] = user.id

    user.last_login = datetime.utcnow()
    db.session.commit()

def logout_user():
    session.clear()

def get_current_user():
    user_id = session.get(SESSION_USER_KEY)
    if user_id is None:
        return None
    return db.session.get(User, user_id)
