from decimal import Decimal
from itertools import count

import pytest

from storefront.app import create_app, ensure_roles
from storefront.config import TestingConfig
from storefront.models import db
from storefront.models.product import Product, Brand, Category
from storefront.models.user import User, Role
from storefront.services.showcase_mutation import ShowcaseSectionService

_sequence = count(1)


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        ensure_roles()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _make_user(username, role_name):
    role = Role.query.filter_by(name=role_name).first()
    user = User(
        username=username,
        email=f"{username}@example.com",
        role_id=role.id,
    )
    user.set_password("pass1234")
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def admin_user(app):
    return _make_user("admin", Role.SUPER_ADMIN)


@pytest.fixture
def customer_user(app):
    return _make_user("customer", Role.CUSTOMER)


@pytest.fixture
def login(client):
    def _login(user):
        with client.session_transaction() as sess:
            sess["user_id"] = user.id
    return _login


@pytest.fixture
def make_product(app):
    def _make_product(title=None, is_active=True, status=Product.PUBLISHED, price="100.00", brand=None, categories=()):
        n = next(_sequence)
        product = Product(
            title=title or f"Product {n}",
            slug=f"product-{n}",
            regular_price=Decimal(price),
            stock_quantity=5,
            status=status,
            is_active=is_active,
            brand=brand,
        )
        product.categories = list(categories)
        db.session.add(product)
        db.session.commit()
        return product
    return _make_product


@pytest.fixture
def make_brand(app):
    def _make_brand(name="Acme"):
        n = next(_sequence)
        brand = Brand(name=name, slug=f"brand-{n}")
        db.session.add(brand)
        db.session.commit()
        return brand
    return _make_brand


@pytest.fixture
def make_category(app):
    def _make_category(name="Laptops"):
        n = next(_sequence)
        category = Category(name=name, slug=f"category-{n}")
        db.session.add(category)
        db.session.commit()
        return category
    return _make_category


@pytest.fixture
def make_section(admin_user):
    def _make_section(title="Deals", products=(), **fields):
        data = {"title": title, "products": [p.id for p in products]}
        data.update(fields)
        return ShowcaseSectionService.create(data, admin_user)
    return _make_section
