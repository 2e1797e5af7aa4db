from datetime import datetime
from . import db

class Review(db.Model):
    __tablename__ = 'reviews'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    product_id = db.Column(db.Integer, db.ForeignKey('products.id'), nullable=False, index=True)
    rating = db.Column(db.Integer, nullable=False)
    comment = db.Column(db.Text, default='', nullable=False)
    status = db.Column(db.String(20), default='approved', nullable=False, index=True)  # pending, approved, rejected
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = db.relationship('User', backref='reviews', lazy=True)
    product = db.relationship('Product', backref=db.backref('reviews', lazy=True, cascade='all, delete-orphan'), lazy=True)

    __table_args__ = (
        db.UniqueConstraint('user_id', 'product_id', name='uq_review_user_product'),
        db.CheckConstraint('rating >= 1 AND rating <= 5', name='ck_review_rating_range'),
    )

    PENDING = 'pending'
    APPROVED = 'approved'
    REJECTED = 'rejected'
    STATUSES = (PENDING, APPROVED, REJECTED)

    def __repr__(self):
        return f'<Review {self.user_id}:{self.product_id}>'

    def to_dict(self):
        return {
            'id': self.id,
            'user': {
                'id': self.user.id,
                'username': self.user.username,
            } if self.user else None,
            'product': self.product_id,
            'rating': self.rating,
            'comment': self.comment,
            'status': self.status,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'updatedAt': self.updated_at.isoformat() if self.updated_at else None,
        }
