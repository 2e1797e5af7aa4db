from datetime import datetime
from . import db

product_categories = db.Table('product_categories',
    db.Column('product_id', db.Integer, db.ForeignKey('products.id'), primary_key=True),
    db.Column('category_id', db.Integer, db.ForeignKey('categories.id'), primary_key=True)
)

class Product(db.Model):
    """Catalog entry as seen by showcase sections and reviews"""
    __tablename__ = 'products'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False, index=True)
    description = db.Column(db.Text, nullable=True)

    regular_price = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    sale_price = db.Column(db.Numeric(10, 2), nullable=True)
    tax_rate = db.Column(db.Numeric(5, 2), nullable=True)  # percent
    stock_quantity = db.Column(db.Integer, default=0, nullable=False)

    # Only published + active products reach the storefront
    status = db.Column(db.String(20), default='draft', nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False, index=True)

    average_rating = db.Column(db.Float, default=0.0, nullable=False)
    total_reviews = db.Column(db.Integer, default=0, nullable=False)

    brand_id = db.Column(db.Integer, db.ForeignKey('brands.id'), nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    images = db.relationship(
        'ProductImage',
        backref='product',
        lazy=True,
        cascade='all, delete-orphan',
        order_by='ProductImage.position'
    )
    categories = db.relationship('Category', secondary=product_categories, lazy='subquery')
    brand = db.relationship('Brand', lazy='joined')

    PUBLISHED = 'published'
    DRAFT = 'draft'
    PRIVATE = 'private'

    def __repr__(self):
        return f'<Product {self.slug}>'

    @property
    def is_public(self):
        return self.is_active and self.status == self.PUBLISHED

    @property
    def primary_image(self):
        """URL of the image flagged primary, else the first one"""
        if not self.images:
            return None
        flagged = [img for img in self.images if img.is_primary]
        return (flagged or self.images)[0].image_url

    def update_review_stats(self):
        """Recompute average rating and review count from approved reviews"""
        from .review import Review

        total, average = db.session.query(
            db.func.count(Review.id),
            db.func.avg(Review.rating)
        ).filter(
            Review.product_id == self.id,
            Review.status == Review.APPROVED
        ).one()

        self.total_reviews = total or 0
        self.average_rating = round(float(average), 1) if average is not None else 0.0

class ProductImage(db.Model):
    __tablename__ = 'product_images'

    id = db.Column(db.Integer, primary_key=True)
    product_id = db.Column(db.Integer, db.ForeignKey('products.id'), nullable=False)
    image_url = db.Column(db.Text, nullable=False)
    position = db.Column(db.Integer, default=0, nullable=False)
    is_primary = db.Column(db.Boolean, default=False, nullable=False)

class Brand(db.Model):
    __tablename__ = 'brands'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    slug = db.Column(db.String(100), unique=True, nullable=False, index=True)

    def summary(self):
        return {'id': self.id, 'name': self.name, 'slug': self.slug}

class Category(db.Model):
    __tablename__ = 'categories'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    slug = db.Column(db.String(100), unique=True, nullable=False, index=True)

    def summary(self):
        return {'id': self.id, 'name': self.name, 'slug': self.slug}
