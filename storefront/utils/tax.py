"""
Tax helpers.

Rates are percentages (18 means 18%). Tax is computed on the subtotal; a
discount is taken off the gross total afterwards, never off the taxable
amount. Every money value is rounded to 2 decimals, half up.

These helpers are intentionally separate from the invoice calculator,
which applies no tax to its grand total.
"""
from decimal import Decimal, ROUND_HALF_UP

DEFAULT_TAX_RATE = 18
GST_RATE = Decimal('0.18')


def round_money(amount):
    return float(Decimal(str(amount)).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP))


def normalize_tax_rate(rate):
    """0.18 -> 18, 18 -> 18; missing or non-numeric rates fall back to 18"""
    if rate is None:
        return DEFAULT_TAX_RATE
    try:
        numeric_rate = float(rate)
    except (TypeError, ValueError):
        return DEFAULT_TAX_RATE
    if numeric_rate != numeric_rate:  # NaN
        return DEFAULT_TAX_RATE

    if 0 < numeric_rate < 1:
        return numeric_rate * 100
    return numeric_rate


def calculate_tax_amount(amount, tax_rate):
    rate = normalize_tax_rate(tax_rate)
    return round_money(amount * (rate / 100))


def calculate_price_with_tax(amount, tax_rate):
    tax = calculate_tax_amount(amount, tax_rate)
    return round_money(amount + tax)


def calculate_tax_breakdown(subtotal, discount, tax_rate, shipping=0):
    """Subtotal, tax, shipping and a discount capped at the gross total"""
    rate = normalize_tax_rate(tax_rate)

    safe_subtotal = max(0, subtotal)
    safe_shipping = max(0, shipping)

    taxable_amount = safe_subtotal
    tax = calculate_tax_amount(taxable_amount, rate)
    gross_total = taxable_amount + tax + safe_shipping

    safe_discount = round_money(min(gross_total, max(0, discount)))
    total = gross_total - safe_discount

    return {
        'subtotal': round_money(safe_subtotal),
        'discount': safe_discount,
        'taxableAmount': round_money(taxable_amount),
        'taxRate': rate,
        'tax': tax,
        'shipping': round_money(safe_shipping),
        'total': round_money(total),
    }


def _positive_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0


def calculate_gst_totals(items):
    """
    Subtotal plus an 18% GST add-on.

    Items without a name, with a non-positive price or quantity are left
    out of the sum.
    """
    valid = [
        item for item in items
        if str(item.get('name') or '').strip()
        and _positive_number(item.get('price'))
        and _positive_number(item.get('quantity'))
    ]
    subtotal = sum(Decimal(str(item['price'])) * item['quantity'] for item in valid)
    tax = subtotal * GST_RATE

    return {
        'subtotal': round_money(subtotal),
        'tax': round_money(tax),
        'grandTotal': round_money(subtotal + tax),
    }
