import math
import random
import re
import time
import uuid
from datetime import datetime
from decimal import Decimal

from storefront.utils.errors import ValidationError
from storefront.utils.tax import round_money

# Fixed component categories, one input row each on the calculator screen
PRODUCT_CATEGORIES = [
    {'id': 'processor', 'label': 'Processor'},
    {'id': 'motherboard', 'label': 'Motherboard'},
    {'id': 'ram', 'label': 'RAM'},
    {'id': 'gpu', 'label': 'GPU'},
    {'id': 'ssd', 'label': 'SSD'},
    {'id': 'hdd', 'label': 'HDD'},
    {'id': 'cooler', 'label': 'Cooler'},
    {'id': 'smps', 'label': 'SMPS'},
    {'id': 'cabinet', 'label': 'Cabinet'},
    {'id': 'printer', 'label': 'Printer'},
    {'id': 'monitor', 'label': 'Monitor'},
    {'id': 'keyboard_mouse', 'label': 'Keyboard & Mouse'},
    {'id': 'ups', 'label': 'UPS'},
    {'id': 'speaker', 'label': 'Speaker'},
    {'id': 'gaming_pad', 'label': 'Gaming Pad'},
    {'id': 'headphones', 'label': 'Headphones'},
    {'id': 'wifi_dongle', 'label': 'Wi-Fi Dongle'},
    {'id': 'cpu_fan', 'label': 'CPU Fan'},
    {'id': 'external_hdd', 'label': 'External HDD'},
    {'id': 'antivirus', 'label': 'Antivirus'},
    {'id': 'os', 'label': 'Operating System'},
]

CUSTOM_CATEGORY = 'Custom'
MAX_QUANTITY = 1000
INVOICE_STATUSES = ('Generated', 'Pending', 'Paid')


def generate_invoice_number():
    timestamp = str(int(time.time() * 1000))
    return f"INV-{timestamp[-6:]}{random.randint(0, 9999)}"


def format_currency(amount):
    """₹ amount with Indian digit grouping, e.g. ₹1,23,456.50"""
    negative = amount < 0
    whole, fraction = f"{abs(amount):.2f}".split('.')
    if len(whole) > 3:
        head, tail = whole[:-3], whole[-3:]
        head = re.sub(r'(\d)(?=(\d{2})+$)', r'\1,', head)
        whole = f"{head},{tail}"
    return f"{'-' if negative else ''}₹{whole}.{fraction}"


def validate_line_item(item):
    """Name present, price >= 0, integer quantity in [1, 1000]"""
    if not str(item.get('name') or '').strip():
        return False
    price = item.get('price')
    if isinstance(price, bool) or not isinstance(price, (int, float)) or not math.isfinite(price) or price < 0:
        return False
    quantity = item.get('quantity')
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        return False
    return 1 <= quantity <= MAX_QUANTITY


def _parse_price(value, label):
    try:
        price = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f'Please enter a valid price for {label}')
    if not math.isfinite(price) or price < 0:
        raise ValidationError(f'Please enter a valid price for {label}')
    return price


def _parse_quantity(value):
    if value in (None, ''):
        return 1
    try:
        quantity = int(value)
    except (TypeError, ValueError):
        quantity = 1
    if quantity < 1 or quantity > MAX_QUANTITY:
        raise ValidationError(f'Quantity must be between 1 and {MAX_QUANTITY}')
    return quantity


class InvoiceCalculator:
    """
    Line items and totals for a hand-built PC invoice.

    The grand total is the plain sum of price x quantity; no tax is added
    here (see storefront.utils.tax for the GST helpers).
    """

    def __init__(self, customer_name='', customer_mobile='', status='Generated'):
        self.items = []
        self.details = {
            'invoiceNo': generate_invoice_number(),
            'date': datetime.now().strftime('%m/%d/%Y'),
            'status': status,
            'customerName': customer_name,
            'customerMobile': customer_mobile,
        }

    def _append(self, category, name, price, quantity):
        item = {
            'id': uuid.uuid4().hex,
            'category': category,
            'name': name,
            'price': price,
            'quantity': quantity,
        }
        self.items.append(item)
        return item

    def add_category_item(self, category_id, name, price, quantity=1):
        category = next((c for c in PRODUCT_CATEGORIES if c['id'] == category_id), None)
        if category is None:
            raise ValidationError(f'Unknown category: {category_id}')

        name = str(name or '').strip()
        if not name:
            raise ValidationError(f"Please enter product name for {category['label']}")

        return self._append(
            category['label'],
            name,
            _parse_price(price, category['label']),
            _parse_quantity(quantity),
        )

    def add_custom_item(self, label, name, price, quantity=1):
        label = str(label or '').strip()
        name = str(name or '').strip()
        if not label or not name:
            raise ValidationError('Please enter label and name')

        return self._append(
            CUSTOM_CATEGORY,
            f'{label}: {name}',
            _parse_price(price, label),
            _parse_quantity(quantity),
        )

    def update_item(self, item_id, field, value):
        """Edit one field; negative prices and out-of-range quantities are ignored"""
        for item in self.items:
            if item['id'] != item_id:
                continue
            if field == 'price' and isinstance(value, (int, float)) and value < 0:
                return item
            if field == 'quantity' and isinstance(value, (int, float)) and (value < 1 or value > MAX_QUANTITY):
                return item
            item[field] = value
            return item
        return None

    def remove_item(self, item_id):
        self.items = [item for item in self.items if item['id'] != item_id]

    def item_for_category(self, category_label):
        return next((item for item in self.items if item['category'] == category_label), None)

    def reset(self):
        self.items = []
        self.details.update({
            'invoiceNo': generate_invoice_number(),
            'date': datetime.now().strftime('%m/%d/%Y'),
            'status': 'Generated',
            'customerName': '',
            'customerMobile': '',
        })

    def totals(self):
        subtotal = round_money(sum(
            (Decimal(str(item['price'])) * item['quantity'] for item in self.items),
            Decimal('0')
        ))
        return {
            'subtotal': subtotal,
            'grandTotal': subtotal,
        }

    def to_dict(self):
        return {
            'invoice': self.details,
            'items': [dict(item, total=round_money(Decimal(str(item['price'])) * item['quantity'])) for item in self.items],
            **self.totals(),
        }
