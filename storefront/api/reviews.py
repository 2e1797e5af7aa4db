import logging
from flask import Blueprint, request, g
from sqlalchemy import desc
from sqlalchemy.exc import IntegrityError

from storefront.models import db
from storefront.models.product import Product
from storefront.models.review import Review
from storefront.api.utils import (
    success_response, error_response, handle_exception,
    get_json_body, get_pagination_args, pagination_fields
)
from storefront.utils.errors import ValidationError, NotFoundError
from storefront.utils.permissions import login_required, admin_required

reviews_bp = Blueprint('reviews', __name__)

def _get_product(product_id):
    product = db.session.get(Product, product_id)
    if not product:
        raise NotFoundError('Product not found')
    return product

def _parse_rating(value):
    if isinstance(value, bool):
        raise ValidationError('Rating must be an integer between 1 and 5')
    try:
        rating = int(value)
    except (TypeError, ValueError):
        raise ValidationError('Rating must be an integer between 1 and 5')
    if rating != value and str(rating) != str(value):
        raise ValidationError('Rating must be an integer between 1 and 5')
    if rating < 1 or rating > 5:
        raise ValidationError('Rating must be between 1 and 5')
    return rating

def _parse_comment(value):
    if value is None:
        return ''
    if not isinstance(value, str):
        raise ValidationError('Comment must be a string')
    return value.strip()

def _product_stats(product):
    return {
        'id': product.id,
        'name': product.title,
        'averageRating': product.average_rating,
        'totalReviews': product.total_reviews,
    }

def _own_review(product_id):
    review = Review.query.filter_by(user_id=g.current_user.id, product_id=product_id).first()
    if not review:
        raise NotFoundError('Review not found')
    return review

@reviews_bp.route('/products/<int:product_id>/reviews', methods=['GET'])
def get_product_reviews(product_id):
    """Approved reviews for a product, newest first"""
    try:
        _get_product(product_id)
        reviews = Review.query.filter_by(product_id=product_id, status=Review.APPROVED) \
            .order_by(desc(Review.created_at), desc(Review.id)) \
            .all()
        return success_response(reviews=[r.to_dict() for r in reviews])
    except Exception as e:
        return handle_exception(e, "Product Reviews")

@reviews_bp.route('/products/<int:product_id>/review', methods=['POST'])
@login_required
def add_review(product_id):
    try:
        data = get_json_body()
        if data.get('rating') in (None, ''):
            raise ValidationError('Rating is required')
        rating = _parse_rating(data['rating'])

        product = _get_product(product_id)
        if not product.is_public:
            raise ValidationError('Cannot review an inactive product')

        if Review.query.filter_by(user_id=g.current_user.id, product_id=product_id).first():
            raise ValidationError('You have already reviewed this product')

        review = Review(
            user_id=g.current_user.id,
            product_id=product_id,
            rating=rating,
            comment=_parse_comment(data.get('comment')),
            status=Review.APPROVED
        )
        db.session.add(review)
        db.session.flush()
        product.update_review_stats()
        db.session.commit()

        logging.info(f"Review {review.id} added for product {product_id} by user {g.current_user.id}")
        return success_response(
            message='Review added successfully',
            status_code=201,
            review=review.to_dict(),
            product=_product_stats(product)
        )
    except IntegrityError:
        # A concurrent request inserted the same (user, product) pair first
        db.session.rollback()
        return error_response('You have already reviewed this product', 'VALIDATION_ERROR', 400)
    except Exception as e:
        return handle_exception(e, "Add Review")

@reviews_bp.route('/products/<int:product_id>/review', methods=['PUT'])
@login_required
def update_review(product_id):
    try:
        data = get_json_body()
        product = _get_product(product_id)
        review = _own_review(product_id)

        if data.get('rating') is not None:
            review.rating = _parse_rating(data['rating'])
        if 'comment' in data:
            review.comment = _parse_comment(data['comment'])

        db.session.flush()
        product.update_review_stats()
        db.session.commit()

        return success_response(
            message='Review updated successfully',
            review=review.to_dict(),
            product=_product_stats(product)
        )
    except Exception as e:
        return handle_exception(e, "Update Review")

@reviews_bp.route('/products/<int:product_id>/review', methods=['DELETE'])
@login_required
def delete_review(product_id):
    try:
        product = _get_product(product_id)
        review = _own_review(product_id)

        db.session.delete(review)
        db.session.flush()
        product.update_review_stats()
        db.session.commit()

        return success_response(message='Review deleted successfully', product=_product_stats(product))
    except Exception as e:
        return handle_exception(e, "Delete Review")

@reviews_bp.route('/admin/reviews', methods=['GET'])
@admin_required
def list_admin_reviews():
    """All reviews with rating/status/comment filters"""
    try:
        page, limit = get_pagination_args()
        query = Review.query

        rating = request.args.get('rating', '').strip()
        if rating:
            query = query.filter(Review.rating == _parse_rating(rating))

        status = request.args.get('status', '').strip()
        if status:
            if status not in Review.STATUSES:
                raise ValidationError(f"status must be one of: {', '.join(Review.STATUSES)}")
            query = query.filter(Review.status == status)

        search = request.args.get('search', '').strip()
        if search:
            query = query.filter(Review.comment.icontains(search, autoescape=True))

        total = query.count()
        reviews = query.order_by(desc(Review.created_at), desc(Review.id)) \
            .offset((page - 1) * limit) \
            .limit(limit) \
            .all()

        return success_response(
            totalReviews=total,
            reviews=[r.to_dict() for r in reviews],
            **pagination_fields(len(reviews), total, page, limit)
        )
    except Exception as e:
        return handle_exception(e, "Admin Reviews")

@reviews_bp.route('/admin/reviews/<int:review_id>/status', methods=['PUT'])
@admin_required
def moderate_review(review_id):
    try:
        data = get_json_body()
        status = data.get('status')
        if status not in Review.STATUSES:
            raise ValidationError(f"status must be one of: {', '.join(Review.STATUSES)}")

        review = db.session.get(Review, review_id)
        if not review:
            raise NotFoundError('Review not found')

        review.status = status
        db.session.flush()
        review.product.update_review_stats()
        db.session.commit()

        return success_response(message=f'Review {status}', review=review.to_dict())
    except Exception as e:
        return handle_exception(e, "Moderate Review")

@reviews_bp.route('/admin/reviews/<int:review_id>', methods=['DELETE'])
@admin_required
def admin_delete_review(review_id):
    try:
        review = db.session.get(Review, review_id)
        if not review:
            raise NotFoundError('Review not found')

        product = review.product
        db.session.delete(review)
        db.session.flush()
        product.update_review_stats()
        db.session.commit()

        return success_response(message='Review deleted successfully')
    except Exception as e:
        return handle_exception(e, "Admin Delete Review")
