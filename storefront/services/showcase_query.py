import logging
from datetime import datetime
from sqlalchemy import or_
from sqlalchemy.orm import selectinload

from storefront.models import db
from storefront.models.showcase_section import ShowcaseSection, ShowcaseSectionProduct
from storefront.models.product import Product
from storefront.utils.errors import NotFoundError
from storefront.services.engagement import EngagementCounter


def format_public_product(product):
    """Storefront product card with brand/category summaries"""
    return {
        "id": product.id,
        "name": product.title,
        "slug": product.slug,
        "description": product.description or "",
        "images": [img.image_url for img in product.images],
        "image": product.primary_image,
        "price": float(product.regular_price or 0.0),
        "salePrice": float(product.sale_price) if product.sale_price is not None else None,
        "taxRate": float(product.tax_rate) if product.tax_rate is not None else None,
        "stockQuantity": product.stock_quantity,
        "averageRating": product.average_rating,
        "totalReviews": product.total_reviews,
        "brand": product.brand.summary() if product.brand else None,
        "categories": [c.summary() for c in product.categories],
    }


def format_admin_product(product):
    """Lighter projection for the admin table"""
    return {
        "id": product.id,
        "name": product.title,
        "image": product.primary_image,
        "price": float(product.regular_price or 0.0),
        "stockQuantity": product.stock_quantity,
    }


class ShowcaseQueryService:

    @staticmethod
    def public_filter(now=None):
        """Active sections whose visibility window has not ended"""
        now = now or datetime.utcnow()
        return [
            ShowcaseSection.is_active.is_(True),
            or_(
                ShowcaseSection.visibility_end_date.is_(None),
                ShowcaseSection.visibility_end_date > now,
            ),
        ]

    @staticmethod
    def _default_order(query):
        return query.order_by(ShowcaseSection.display_order.asc(), ShowcaseSection.created_at.desc())

    @staticmethod
    def _eager(query):
        return query.options(
            selectinload(ShowcaseSection.product_links)
            .joinedload(ShowcaseSectionProduct.product)
            .joinedload(Product.brand)
        )

    @staticmethod
    def public_products(section):
        return [format_public_product(p) for p in section.products if p.is_public]

    @staticmethod
    def list_public(page, limit, section_type=None, show_on_homepage=None):
        """
        List sections for the storefront.

        Sections without any active, published product are dropped after
        pagination, so `count` can be lower than the page size even when
        more pages exist. `totalSections` counts before that drop.
        """
        query = ShowcaseSection.query.filter(*ShowcaseQueryService.public_filter())

        if section_type:
            query = query.filter(ShowcaseSection.section_type == section_type)

        if show_on_homepage == 'true':
            query = query.filter(ShowcaseSection.visibility_show_on_homepage.is_(True))

        total_sections = query.count()

        sections = ShowcaseQueryService._eager(ShowcaseQueryService._default_order(query)) \
            .offset((page - 1) * limit) \
            .limit(limit) \
            .all()

        results = []
        for section in sections:
            products = ShowcaseQueryService.public_products(section)
            if products:
                results.append(section.to_dict(products, include_meta=False))

        return results, total_sections

    @staticmethod
    def get_public(section_id):
        """Fetch one active section and count the impression"""
        section = db.session.get(ShowcaseSection, section_id)
        if not section or not section.is_active:
            raise NotFoundError('Showcase section not found')

        EngagementCounter.record_impression(section.id)
        db.session.refresh(section)

        return section.to_dict(ShowcaseQueryService.public_products(section))

    @staticmethod
    def list_admin(page, limit, search=None, status=None, section_type=None):
        query = ShowcaseSection.query

        if search:
            query = query.filter(
                or_(
                    ShowcaseSection.title.icontains(search, autoescape=True),
                    ShowcaseSection.subtitle.icontains(search, autoescape=True)
                )
            )

        if status == 'active':
            query = query.filter(ShowcaseSection.is_active.is_(True))
        elif status == 'inactive':
            query = query.filter(ShowcaseSection.is_active.is_(False))

        if section_type:
            query = query.filter(ShowcaseSection.section_type == section_type)

        total_sections = query.count()

        sections = ShowcaseQueryService._eager(ShowcaseQueryService._default_order(query)) \
            .options(selectinload(ShowcaseSection.created_by), selectinload(ShowcaseSection.updated_by)) \
            .offset((page - 1) * limit) \
            .limit(limit) \
            .all()

        logging.debug("Admin showcase listing: %d of %d sections", len(sections), total_sections)

        results = [
            section.to_dict([format_admin_product(p) for p in section.products], populate_users=True)
            for section in sections
        ]
        return results, total_sections
