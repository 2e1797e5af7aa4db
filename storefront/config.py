import os
from dotenv import load_dotenv
from urllib.parse import quote_plus

load_dotenv()

def _env_flag(name, default='False'):
    return os.environ.get(name, default).lower() in ('true', '1', 'yes')

def _secret_key():
    key = os.environ.get('SECRET_KEY')
    if key:
        return key
    if os.environ.get('FLASK_ENV', 'development') == 'production':
        raise ValueError("SECRET_KEY environment variable must be set in production!")
    return 'dev-secret-key-change-in-production'

def _database_uri():
    """DATABASE_URL wins; otherwise a MySQL URL from the DB_* parts"""
    if os.environ.get('DATABASE_URL'):
        return os.environ['DATABASE_URL']
    user = os.environ.get('DB_USER', 'storefront')
    # quote_plus keeps '@' and '#' in passwords from breaking the URL
    password = quote_plus(os.environ.get('DB_PASSWORD', ''))
    host = os.environ.get('DB_HOST', 'localhost')
    port = os.environ.get('DB_PORT', '3306')
    name = os.environ.get('DB_NAME', 'storefront')
    return f"mysql+pymysql://{user}:{password}@{host}:{port}/{name}"

class Config:
    """Settings read from the environment (and .env)"""
    SECRET_KEY = _secret_key()
    FLASK_ENV = os.environ.get('FLASK_ENV', 'development')

    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 3600,
    }
    RUN_MIGRATIONS_ON_STARTUP = _env_flag('RUN_MIGRATIONS_ON_STARTUP')

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    DEFAULT_PAGE_SIZE = int(os.environ.get('DEFAULT_PAGE_SIZE', 10))

    # Invoice PDF header
    STORE_NAME = os.environ.get('STORE_NAME', 'Loke Store')
    STORE_TAGLINE = os.environ.get('STORE_TAGLINE', 'Professional Computer Solutions')

    # Bootstrap admin, created on startup only when ADMIN_PASSWORD is set
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME', 'admin')
    ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL', 'admin@example.com')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD')


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'testing-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    RUN_MIGRATIONS_ON_STARTUP = False
    ADMIN_PASSWORD = None
    LOG_LEVEL = 'WARNING'
