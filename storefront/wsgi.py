"""
WSGI entry point.

    gunicorn storefront.wsgi:app
    flask --app storefront.wsgi run --debug
"""
from storefront.app import create_app

app = create_app()

# Passenger-style hosts look up `application`
application = app
