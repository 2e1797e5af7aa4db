from sqlalchemy import update

from storefront.models import db
from storefront.models.showcase_section import ShowcaseSection
from storefront.utils.errors import NotFoundError


class EngagementCounter:
    """
    Impression/click counters for showcase sections.

    Increments are issued as a single UPDATE so concurrent hits are not
    lost between a read and a write.
    """

    @staticmethod
    def _increment(section_id, counter):
        db.session.execute(
            update(ShowcaseSection)
            .where(ShowcaseSection.id == section_id)
            .values({
                counter: getattr(ShowcaseSection, counter) + 1,
                # counters are not edits; keep updated_at untouched
                'updated_at': ShowcaseSection.updated_at,
            })
            .execution_options(synchronize_session=False)
        )
        db.session.commit()

    @staticmethod
    def record_impression(section_id):
        EngagementCounter._increment(section_id, 'impressions')

    @staticmethod
    def record_click(section_id):
        """Count a click on an active section; 404 otherwise"""
        section = db.session.get(ShowcaseSection, section_id)
        if not section or not section.is_active:
            raise NotFoundError('Showcase section not found')

        EngagementCounter._increment(section.id, 'clicks')
