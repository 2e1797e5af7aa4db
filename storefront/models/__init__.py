from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

from .user import User, Role
from .product import Product, ProductImage, Brand, Category
from .showcase_section import ShowcaseSection, ShowcaseSectionProduct
from .yt_video import YTVideo
from .review import Review

__all__ = [
    'db',
    'User', 'Role',
    'Product', 'ProductImage', 'Brand', 'Category',
    'ShowcaseSection', 'ShowcaseSectionProduct',
    'YTVideo',
    'Review',
]
