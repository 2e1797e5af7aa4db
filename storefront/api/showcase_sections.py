from flask import Blueprint, request, g

from storefront.api.utils import (
    success_response, handle_exception,
    get_json_body, get_pagination_args, pagination_fields
)
from storefront.services.engagement import EngagementCounter
from storefront.services.showcase_mutation import ShowcaseSectionService
from storefront.services.showcase_query import ShowcaseQueryService, format_admin_product
from storefront.utils.permissions import admin_required

showcase_bp = Blueprint('showcase_sections', __name__)


def _section_payload(section):
    return section.to_dict([format_admin_product(p) for p in section.products])


# ---------------------------------------------------------------------------
# Public
# ---------------------------------------------------------------------------

@showcase_bp.route('/showcase-sections', methods=['GET'])
def list_active_sections():
    """List active, in-window sections for the storefront"""
    try:
        page, limit = get_pagination_args()
        sections, total = ShowcaseQueryService.list_public(
            page,
            limit,
            section_type=request.args.get('type') or None,
            show_on_homepage=request.args.get('showOnHomepage'),
        )
        return success_response(
            totalSections=total,
            sections=sections,
            **pagination_fields(len(sections), total, page, limit)
        )
    except Exception as e:
        return handle_exception(e, "Showcase Listing")


@showcase_bp.route('/showcase-sections/<int:section_id>', methods=['GET'])
def get_section(section_id):
    """Get one active section; counts an impression"""
    try:
        return success_response(section=ShowcaseQueryService.get_public(section_id))
    except Exception as e:
        return handle_exception(e, "Showcase Detail")


@showcase_bp.route('/showcase-sections/<int:section_id>/click', methods=['POST'])
def record_click(section_id):
    try:
        EngagementCounter.record_click(section_id)
        return success_response(message='Click recorded successfully')
    except Exception as e:
        return handle_exception(e, "Showcase Click")


# ---------------------------------------------------------------------------
# Admin
# ---------------------------------------------------------------------------

@showcase_bp.route('/admin/showcase-sections', methods=['GET'])
@admin_required
def list_admin_sections():
    try:
        page, limit = get_pagination_args()
        sections, total = ShowcaseQueryService.list_admin(
            page,
            limit,
            search=request.args.get('search', '').strip() or None,
            status=request.args.get('status'),
            section_type=request.args.get('type') or None,
        )
        return success_response(
            totalSections=total,
            sections=sections,
            **pagination_fields(len(sections), total, page, limit)
        )
    except Exception as e:
        return handle_exception(e, "Admin Showcase Listing")


@showcase_bp.route('/admin/showcase-sections', methods=['POST'])
@admin_required
def create_section():
    try:
        section = ShowcaseSectionService.create(get_json_body(), g.current_user)
        return success_response(
            message='Showcase section created successfully',
            status_code=201,
            section=_section_payload(section)
        )
    except Exception as e:
        return handle_exception(e, "Showcase Create")


@showcase_bp.route('/admin/showcase-sections/display-order/bulk', methods=['PUT'])
@admin_required
def bulk_update_display_order():
    try:
        data = get_json_body()
        ShowcaseSectionService.bulk_update_display_order(data.get('sections'), g.current_user)
        return success_response(message='Display order updated successfully')
    except Exception as e:
        return handle_exception(e, "Showcase Reorder")


@showcase_bp.route('/admin/showcase-sections/<int:section_id>', methods=['PUT'])
@admin_required
def update_section(section_id):
    try:
        section = ShowcaseSectionService.update(section_id, get_json_body(), g.current_user)
        return success_response(
            message='Showcase section updated successfully',
            section=_section_payload(section)
        )
    except Exception as e:
        return handle_exception(e, "Showcase Update")


@showcase_bp.route('/admin/showcase-sections/<int:section_id>', methods=['DELETE'])
@admin_required
def delete_section(section_id):
    try:
        ShowcaseSectionService.delete(section_id)
        return success_response(message='Showcase section deleted successfully')
    except Exception as e:
        return handle_exception(e, "Showcase Delete")


@showcase_bp.route('/admin/showcase-sections/<int:section_id>/toggle-status', methods=['PUT'])
@admin_required
def toggle_section_status(section_id):
    try:
        section = ShowcaseSectionService.toggle_status(section_id, g.current_user)
        state = 'activated' if section.is_active else 'deactivated'
        return success_response(
            message=f'Section {state} successfully',
            section=_section_payload(section)
        )
    except Exception as e:
        return handle_exception(e, "Showcase Toggle")

