import logging
from sqlalchemy import update

from storefront.models import db
from storefront.models.showcase_section import ShowcaseSection
from storefront.models.product import Product, Category
from storefront.utils.errors import ValidationError, NotFoundError
from storefront.utils.validators import (
    parse_bool, parse_non_negative_int, parse_datetime,
    parse_trimmed_string, parse_choice
)


def _check_config(config, name, allowed):
    if not isinstance(config, dict):
        raise ValidationError(f'{name} must be an object')
    unknown = sorted(set(config) - set(allowed))
    if unknown:
        raise ValidationError(f"Unknown {name} field(s): {', '.join(unknown)}")


def merge_timer_config(section, config):
    """Apply only the timerConfig fields present in `config`"""
    _check_config(config, 'timerConfig', ('hasTimer', 'endDate', 'timerText'))

    if 'hasTimer' in config:
        section.timer_has_timer = parse_bool(config['hasTimer'], 'timerConfig.hasTimer')
    if 'endDate' in config:
        section.timer_end_date = parse_datetime(config['endDate'], 'timerConfig.endDate')
    if 'timerText' in config:
        section.timer_text = parse_trimmed_string(config['timerText'], 'timerConfig.timerText', max_length=100) or 'Ends in'


def merge_style_config(section, config):
    """Apply only the styleConfig fields present in `config`"""
    _check_config(config, 'styleConfig', ('backgroundColor', 'textColor', 'accentColor', 'cardStyle'))

    if 'backgroundColor' in config:
        section.style_background_color = parse_trimmed_string(config['backgroundColor'], 'styleConfig.backgroundColor', max_length=20, required=True)
    if 'textColor' in config:
        section.style_text_color = parse_trimmed_string(config['textColor'], 'styleConfig.textColor', max_length=20, required=True)
    if 'accentColor' in config:
        section.style_accent_color = parse_trimmed_string(config['accentColor'], 'styleConfig.accentColor', max_length=20, required=True)
    if 'cardStyle' in config:
        section.style_card_style = parse_choice(config['cardStyle'], 'styleConfig.cardStyle', ShowcaseSection.CARD_STYLES)


def merge_visibility(section, config):
    """Apply only the visibility fields present in `config`"""
    _check_config(config, 'visibility', ('isPublic', 'startDate', 'endDate', 'showOnHomepage', 'showInCategory'))

    if 'isPublic' in config:
        section.visibility_is_public = parse_bool(config['isPublic'], 'visibility.isPublic')
    if 'startDate' in config:
        section.visibility_start_date = parse_datetime(config['startDate'], 'visibility.startDate')
    if 'endDate' in config:
        section.visibility_end_date = parse_datetime(config['endDate'], 'visibility.endDate')
    if 'showOnHomepage' in config:
        section.visibility_show_on_homepage = parse_bool(config['showOnHomepage'], 'visibility.showOnHomepage')
    if 'showInCategory' in config:
        section.show_in_categories = _resolve_categories(config['showInCategory'])


def _resolve_categories(category_ids):
    if not category_ids:
        return []
    if not isinstance(category_ids, list):
        raise ValidationError('visibility.showInCategory must be a list')
    try:
        ids = [int(cid) for cid in category_ids]
    except (TypeError, ValueError):
        raise ValidationError('Some categories are invalid')

    categories = Category.query.filter(Category.id.in_(ids)).all()
    if len(categories) != len(ids):
        raise ValidationError('Some categories are invalid')
    by_id = {c.id: c for c in categories}
    return [by_id[cid] for cid in ids]


def resolve_active_products(product_ids):
    """
    Resolve product ids to active catalog products, preserving request order.

    Any unknown, inactive or repeated id fails the whole request without
    saying which one.
    """
    if not isinstance(product_ids, list):
        raise ValidationError('products must be a list')
    try:
        ids = [int(pid) for pid in product_ids]
    except (TypeError, ValueError):
        raise ValidationError('Some products are invalid or inactive')

    products = Product.query.filter(Product.id.in_(ids), Product.is_active.is_(True)).all()
    if len(products) != len(ids):
        raise ValidationError('Some products are invalid or inactive')

    by_id = {p.id: p for p in products}
    return [by_id[pid] for pid in ids]


class ShowcaseSectionService:

    @staticmethod
    def get_or_404(section_id):
        section = db.session.get(ShowcaseSection, section_id)
        if not section:
            raise NotFoundError('Showcase section not found')
        return section

    @staticmethod
    def _apply_scalars(section, data):
        if 'title' in data:
            section.title = parse_trimmed_string(data['title'], 'title', max_length=100, required=True)
        if 'subtitle' in data:
            section.subtitle = parse_trimmed_string(data['subtitle'], 'subtitle', max_length=200)
        if 'type' in data:
            section.section_type = parse_choice(data['type'], 'type', ShowcaseSection.TYPES)
        if 'displayOrder' in data:
            section.display_order = parse_non_negative_int(data['displayOrder'], 'displayOrder')
        if 'isActive' in data:
            section.is_active = parse_bool(data['isActive'], 'isActive')
        if 'showViewAll' in data:
            section.show_view_all = parse_bool(data['showViewAll'], 'showViewAll')
        if 'viewAllLink' in data:
            section.view_all_link = parse_trimmed_string(data['viewAllLink'], 'viewAllLink', max_length=255) or None

    @staticmethod
    def _apply_configs(section, data):
        if data.get('timerConfig') is not None:
            merge_timer_config(section, data['timerConfig'])
        if data.get('styleConfig') is not None:
            merge_style_config(section, data['styleConfig'])
        if data.get('visibility') is not None:
            merge_visibility(section, data['visibility'])

    @staticmethod
    def create(data, user):
        if data.get('title') is None:
            raise ValidationError('Section title is required')

        products = []
        if data.get('products'):
            products = resolve_active_products(data['products'])

        section = ShowcaseSection(
            section_type='grid',
            display_order=0,
            is_active=True,
            show_view_all=True,
            timer_has_timer=False,
            created_by_id=user.id,
            updated_by_id=user.id,
        )
        ShowcaseSectionService._apply_scalars(section, data)
        ShowcaseSectionService._apply_configs(section, data)
        section.set_products(products)

        db.session.add(section)
        db.session.flush()
        section.ensure_view_all_link()
        db.session.commit()

        logging.info(f"Showcase section {section.id} created by user {user.id}")
        return section

    @staticmethod
    def update(section_id, data, user):
        section = ShowcaseSectionService.get_or_404(section_id)

        # An empty list leaves the current products in place
        if data.get('products'):
            section.set_products(resolve_active_products(data['products']))

        ShowcaseSectionService._apply_scalars(section, data)
        ShowcaseSectionService._apply_configs(section, data)

        section.updated_by_id = user.id
        section.ensure_view_all_link()
        db.session.commit()

        logging.info(f"Showcase section {section.id} updated by user {user.id}")
        return section

    @staticmethod
    def delete(section_id):
        section = ShowcaseSectionService.get_or_404(section_id)
        db.session.delete(section)
        db.session.commit()
        logging.info(f"Showcase section {section_id} deleted")

    @staticmethod
    def bulk_update_display_order(entries, user):
        """
        Apply {id, displayOrder} pairs one by one.

        Each update is committed on its own; a store failure midway leaves
        the earlier ones applied. Unknown ids are skipped.
        """
        if not isinstance(entries, list):
            raise ValidationError('Sections array is required')

        updates = []
        for entry in entries:
            if not isinstance(entry, dict) or entry.get('id') is None:
                raise ValidationError('Each section needs an id and a displayOrder')
            try:
                section_id = int(entry['id'])
            except (TypeError, ValueError):
                raise ValidationError('Each section needs an id and a displayOrder')
            updates.append((section_id, parse_non_negative_int(entry.get('displayOrder'), 'displayOrder')))

        for section_id, display_order in updates:
            db.session.execute(
                update(ShowcaseSection)
                .where(ShowcaseSection.id == section_id)
                .values(display_order=display_order, updated_by_id=user.id)
                .execution_options(synchronize_session=False)
            )
            db.session.commit()

        logging.info(f"Display order updated for {len(updates)} showcase sections by user {user.id}")

    @staticmethod
    def toggle_status(section_id, user):
        section = ShowcaseSectionService.get_or_404(section_id)
        section.is_active = not section.is_active
        section.updated_by_id = user.id
        db.session.commit()
        return section
