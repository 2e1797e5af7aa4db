from datetime import datetime
from . import db

class ShowcaseSection(db.Model):
    __tablename__ = 'showcase_sections'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(100), nullable=False)
    subtitle = db.Column(db.String(200), nullable=True)

    # Section Type: 'grid', 'carousel'
    section_type = db.Column(db.String(20), nullable=False, default='grid')

    display_order = db.Column(db.Integer, default=0, nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)

    show_view_all = db.Column(db.Boolean, default=True, nullable=False)
    view_all_link = db.Column(db.String(255), nullable=True)

    # Timer
    timer_has_timer = db.Column(db.Boolean, default=False, nullable=False)
    timer_end_date = db.Column(db.DateTime, nullable=True, index=True)
    timer_text = db.Column(db.String(100), default='Ends in', nullable=False)

    # Style (presentation only)
    style_background_color = db.Column(db.String(20), default='#ffffff', nullable=False)
    style_text_color = db.Column(db.String(20), default='#000000', nullable=False)
    style_accent_color = db.Column(db.String(20), default='#007bff', nullable=False)
    style_card_style = db.Column(db.String(20), default='modern', nullable=False)

    # Visibility window
    visibility_is_public = db.Column(db.Boolean, default=True, nullable=False)
    visibility_start_date = db.Column(db.DateTime, default=datetime.utcnow)
    visibility_end_date = db.Column(db.DateTime, nullable=True, index=True)
    visibility_show_on_homepage = db.Column(db.Boolean, default=True, nullable=False)

    # Meta
    created_by_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    updated_by_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=True)
    clicks = db.Column(db.Integer, default=0, nullable=False)
    impressions = db.Column(db.Integer, default=0, nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    product_links = db.relationship(
        'ShowcaseSectionProduct',
        backref='section',
        lazy=True,
        cascade='all, delete-orphan',
        order_by='ShowcaseSectionProduct.position'
    )
    show_in_categories = db.relationship('Category', secondary='showcase_section_categories', lazy='subquery')
    created_by = db.relationship('User', foreign_keys=[created_by_id], lazy=True)
    updated_by = db.relationship('User', foreign_keys=[updated_by_id], lazy=True)

    __table_args__ = (
        db.Index('ix_showcase_active_order', 'is_active', 'display_order'),
        db.Index('ix_showcase_homepage_active', 'visibility_show_on_homepage', 'is_active'),
    )

    TYPES = ('grid', 'carousel')
    CARD_STYLES = ('modern', 'minimal', 'elegant', 'bold')

    def __repr__(self):
        return f'<ShowcaseSection {self.title}>'

    @property
    def products(self):
        return [link.product for link in self.product_links]

    def set_products(self, products):
        """Replace the product list, keeping the given order"""
        existing = {link.product_id: link for link in self.product_links}
        links = []
        for index, product in enumerate(products):
            link = existing.get(product.id) or ShowcaseSectionProduct(product=product)
            link.position = index
            links.append(link)
        self.product_links = links

    def ensure_view_all_link(self):
        if self.show_view_all and not self.view_all_link and self.id is not None:
            self.view_all_link = f'/section/{self.id}'

    @property
    def timer_status(self):
        if not self.timer_has_timer or not self.timer_end_date:
            return 'no-timer'
        if datetime.utcnow() > self.timer_end_date:
            return 'expired'
        return 'active'

    @property
    def time_remaining(self):
        if not self.timer_has_timer or not self.timer_end_date:
            return None

        diff = int((self.timer_end_date - datetime.utcnow()).total_seconds())
        if diff <= 0:
            return {'days': 0, 'hours': 0, 'minutes': 0, 'seconds': 0}

        return {
            'days': diff // 86400,
            'hours': (diff % 86400) // 3600,
            'minutes': (diff % 3600) // 60,
            'seconds': diff % 60,
        }

    @property
    def timer_config(self):
        return {
            'hasTimer': self.timer_has_timer,
            'endDate': _iso(self.timer_end_date),
            'timerText': self.timer_text,
        }

    @property
    def style_config(self):
        return {
            'backgroundColor': self.style_background_color,
            'textColor': self.style_text_color,
            'accentColor': self.style_accent_color,
            'cardStyle': self.style_card_style,
        }

    def visibility(self, include_categories=True):
        data = {
            'isPublic': self.visibility_is_public,
            'startDate': _iso(self.visibility_start_date),
            'endDate': _iso(self.visibility_end_date),
            'showOnHomepage': self.visibility_show_on_homepage,
        }
        if include_categories:
            data['showInCategory'] = [c.id for c in self.show_in_categories]
        return data

    def to_dict(self, products, include_meta=True, populate_users=False):
        """
        Serialize the section.

        `products` is the already-projected product list, since public and
        admin views expand products differently.
        """
        data = {
            'id': self.id,
            'title': self.title,
            'subtitle': self.subtitle,
            'type': self.section_type,
            'products': products,
            'displayOrder': self.display_order,
            'isActive': self.is_active,
            'showViewAll': self.show_view_all,
            'viewAllLink': self.view_all_link,
            'timerConfig': self.timer_config,
            'timerStatus': self.timer_status,
            'timeRemaining': self.time_remaining,
            'styleConfig': self.style_config,
            'visibility': self.visibility(include_categories=include_meta),
            'createdAt': _iso(self.created_at),
            'updatedAt': _iso(self.updated_at),
        }

        if include_meta:
            if populate_users:
                created_by = self.created_by.summary() if self.created_by else None
                updated_by = self.updated_by.summary() if self.updated_by else None
            else:
                created_by = self.created_by_id
                updated_by = self.updated_by_id
            data['meta'] = {
                'createdBy': created_by,
                'updatedBy': updated_by,
                'clicks': self.clicks,
                'impressions': self.impressions,
            }

        return data


class ShowcaseSectionProduct(db.Model):
    """Ordered link between a section and a catalog product"""
    __tablename__ = 'showcase_section_products'

    section_id = db.Column(db.Integer, db.ForeignKey('showcase_sections.id'), primary_key=True)
    product_id = db.Column(db.Integer, db.ForeignKey('products.id'), primary_key=True)
    position = db.Column(db.Integer, default=0, nullable=False)

    product = db.relationship('Product', lazy='joined')

    def __repr__(self):
        return f'<ShowcaseSectionProduct {self.section_id}:{self.product_id}>'


showcase_section_categories = db.Table('showcase_section_categories',
    db.Column('section_id', db.Integer, db.ForeignKey('showcase_sections.id'), primary_key=True),
    db.Column('category_id', db.Integer, db.ForeignKey('categories.id'), primary_key=True)
)


def _iso(value):
    return value.isoformat() if value else None
