import logging
import os

import click
from flask import Flask, current_app
from flask_cors import CORS
from flask_migrate import Migrate, upgrade
from sqlalchemy.exc import ProgrammingError, OperationalError

from storefront.config import Config
from storefront.models import db
from storefront.models.user import User, Role

migrate = Migrate()

MIGRATIONS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'migrations')

def create_app(config_object=Config):
    """Application factory"""
    app = Flask(__name__, static_folder=None)
    app.config.from_object(config_object)

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    CORS(app, resources={r"/api/*": {"origins": "*"}})

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db, directory=MIGRATIONS_DIR)

    if app.config.get('RUN_MIGRATIONS_ON_STARTUP'):
        with app.app_context():
            try:
                upgrade(directory=MIGRATIONS_DIR)
                logging.info("Database migrations applied successfully.")
            except Exception as e:
                logging.error(f"Migration warning: {e}")

    from storefront.api import api_v1
    app.register_blueprint(api_v1)

    register_error_handlers(app)
    register_commands(app)

    with app.app_context():
        create_initial_data()

    return app

def register_error_handlers(app):
    from storefront.api.utils import error_response

    @app.errorhandler(404)
    def not_found(e):
        return error_response('Resource not found', 'NOT_FOUND', 404)

    @app.errorhandler(405)
    def method_not_allowed(e):
        return error_response('Method not allowed', 'METHOD_NOT_ALLOWED', 405)

    @app.errorhandler(500)
    def internal_error(e):
        db.session.rollback()
        return error_response('Internal server error', 'INTERNAL_ERROR', 500)

def register_commands(app):
    @app.cli.command('create-admin')
    @click.option('--username', prompt=True)
    @click.option('--email', prompt=True)
    @click.option('--password', prompt=True, hide_input=True, confirmation_prompt=True)
    def create_admin(username, email, password):
        """Create an admin user."""
        ensure_roles()
        if User.query.filter((User.username == username) | (User.email == email)).first():
            raise click.ClickException('A user with that username or email already exists')

        create_super_admin(username, email, password)
        click.echo(f"Admin user '{username}' created.")

def ensure_roles():
    """Create the Super Admin, Admin and Customer roles when missing"""
    defaults = {
        Role.SUPER_ADMIN: {'all': True},
        Role.ADMIN: {'all': False, 'showcase': True, 'videos': True, 'reviews': True, 'invoices': True},
        Role.CUSTOMER: {'all': False},
    }
    created = False
    for name, permissions in defaults.items():
        if Role.query.filter_by(name=name).first() is None:
            db.session.add(Role(name=name, permissions=permissions))
            created = True
    if created:
        db.session.commit()

def create_super_admin(username, email, password):
    role = Role.query.filter_by(name=Role.SUPER_ADMIN).first()
    user = User(username=username, email=email, role_id=role.id)
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    return user

def create_initial_data():
    """Create initial roles and the bootstrap admin user"""
    try:
        ensure_roles()
    except (ProgrammingError, OperationalError):
        db.session.rollback()
        logging.warning("Database tables not created yet. Skipping initial data creation.")
        return

    config = current_app.config

    password = config.get('ADMIN_PASSWORD')
    username = config.get('ADMIN_USERNAME', 'admin')
    if not password or User.query.filter_by(username=username).first() is not None:
        return

    create_super_admin(username, config.get('ADMIN_EMAIL'), password)
    logging.info(f"Bootstrap admin user created: username='{username}'")
