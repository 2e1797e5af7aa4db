from datetime import datetime
from werkzeug.security import generate_password_hash, check_password_hash
from . import db

class Role(db.Model):
    __tablename__ = 'roles'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(50), unique=True, nullable=False)
    permissions = db.Column(db.JSON, default=dict)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    SUPER_ADMIN = 'Super Admin'
    ADMIN = 'Admin'
    CUSTOMER = 'Customer'
    ADMIN_ROLES = (SUPER_ADMIN, ADMIN)

    def __repr__(self):
        return f'<Role {self.name}>'

    def grants(self, permission):
        """True when the role holds `permission` or the catch-all 'all' flag"""
        permissions = self.permissions if isinstance(self.permissions, dict) else {}
        return bool(permissions.get('all') or permissions.get(permission))

class User(db.Model):
    """Acting identity for admin mutations and review authorship"""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False, index=True)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role_id = db.Column(db.Integer, db.ForeignKey('roles.id'), nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)
    last_login = db.Column(db.DateTime, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    role = db.relationship('Role', backref=db.backref('users', lazy=True), lazy='joined')

    def __repr__(self):
        return f'<User {self.username}>'

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    @property
    def role_name(self):
        return self.role.name if self.role else None

    @property
    def is_admin(self):
        if not self.role:
            return False
        return self.role.name in Role.ADMIN_ROLES or self.role.grants('all')

    def summary(self):
        """Identity projection used for createdBy/updatedBy"""
        return {
            'id': self.id,
            'username': self.username,
            'email': self.email,
        }
