from io import BytesIO
from flask import Blueprint, current_app, send_file

from storefront.api.utils import success_response, handle_exception, get_json_body
from storefront.services.invoice_calculator import (
    InvoiceCalculator, PRODUCT_CATEGORIES, INVOICE_STATUSES, format_currency
)
from storefront.services.invoice_pdf import render_invoice_pdf, invoice_filename
from storefront.utils.errors import ValidationError
from storefront.utils.permissions import admin_required
from storefront.utils.tax import calculate_tax_breakdown, calculate_gst_totals
from storefront.utils.validators import validate_mobile_number

invoices_bp = Blueprint('invoices', __name__)

def _build_calculator(data):
    """
    Build a calculator from a request body.

    Body:
        customerName (str)
        customerMobile (str, 10 digits)
        status (Generated|Pending|Paid)
        invoiceNo (str, optional; generated when missing)
        items (list): {category, name, price, quantity} for a fixed
            category, or {label, name, price, quantity} for a custom row
    """
    mobile = str(data.get('customerMobile') or '').strip()
    if mobile and not validate_mobile_number(mobile):
        raise ValidationError('Please enter a valid 10-digit mobile number')

    status = data.get('status') or 'Generated'
    if status not in INVOICE_STATUSES:
        raise ValidationError(f"status must be one of: {', '.join(INVOICE_STATUSES)}")

    calculator = InvoiceCalculator(
        customer_name=str(data.get('customerName') or '').strip(),
        customer_mobile=mobile,
        status=status
    )
    if data.get('invoiceNo'):
        calculator.details['invoiceNo'] = str(data['invoiceNo'])

    items = data.get('items')
    if items is None:
        items = []
    if not isinstance(items, list):
        raise ValidationError('items must be an array')

    for item in items:
        if not isinstance(item, dict):
            raise ValidationError('Each item must be an object')
        if item.get('category'):
            calculator.add_category_item(
                item['category'], item.get('name'), item.get('price'), item.get('quantity')
            )
        else:
            calculator.add_custom_item(
                item.get('label'), item.get('name'), item.get('price'), item.get('quantity')
            )
    return calculator

@invoices_bp.route('/admin/invoices/categories', methods=['GET'])
@admin_required
def list_invoice_categories():
    return success_response(categories=PRODUCT_CATEGORIES)

@invoices_bp.route('/admin/invoices/calculate', methods=['POST'])
@admin_required
def calculate_invoice():
    try:
        calculator = _build_calculator(get_json_body())
        payload = calculator.to_dict()
        payload['formattedGrandTotal'] = format_currency(payload['grandTotal'])
        return success_response(**payload)
    except Exception as e:
        return handle_exception(e, "Invoice Calculate")

@invoices_bp.route('/admin/invoices/pdf', methods=['POST'])
@admin_required
def download_invoice_pdf():
    try:
        calculator = _build_calculator(get_json_body())
        if not calculator.items:
            raise ValidationError('Add at least one item before downloading the invoice')

        pdf = render_invoice_pdf(
            calculator.details,
            calculator.items,
            calculator.totals()['grandTotal'],
            current_app.config['STORE_NAME'],
            current_app.config['STORE_TAGLINE']
        )
        return send_file(
            BytesIO(pdf),
            mimetype='application/pdf',
            as_attachment=True,
            download_name=invoice_filename(calculator.details['invoiceNo'])
        )
    except Exception as e:
        return handle_exception(e, "Invoice PDF")

@invoices_bp.route('/admin/invoices/tax-breakdown', methods=['POST'])
@admin_required
def tax_breakdown():
    """
    Tax figures for a cart or an invoice.

    Body:
        subtotal (float), discount (float), taxRate (float), shipping (float)
        items (list, optional): {name, price, quantity}; adds a GST total
    """
    try:
        data = get_json_body()
        try:
            subtotal = float(data.get('subtotal') or 0)
            discount = float(data.get('discount') or 0)
            shipping = float(data.get('shipping') or 0)
        except (TypeError, ValueError):
            raise ValidationError('subtotal, discount and shipping must be numbers')

        payload = {
            'breakdown': calculate_tax_breakdown(subtotal, discount, data.get('taxRate'), shipping)
        }

        items = data.get('items')
        if items is not None:
            if not isinstance(items, list) or not all(isinstance(i, dict) for i in items):
                raise ValidationError('items must be an array of objects')
            payload['gst'] = calculate_gst_totals(items)

        return success_response(**payload)
    except Exception as e:
        return handle_exception(e, "Tax Breakdown")
