import re

import pytest

from storefront.services.invoice_calculator import (
    InvoiceCalculator, PRODUCT_CATEGORIES, format_currency,
    generate_invoice_number, validate_line_item
)
from storefront.utils.errors import ValidationError


def test_totals_are_plain_sum_without_tax():
    calculator = InvoiceCalculator()
    calculator.add_category_item("processor", "Ryzen 5 7600", 100, 2)
    calculator.add_category_item("ram", "DDR5 16GB", 50, 1)

    assert calculator.totals() == {"subtotal": 250.0, "grandTotal": 250.0}


def test_totals_round_to_two_decimals():
    calculator = InvoiceCalculator()
    calculator.add_custom_item("Cable", "HDMI", 0.1, 3)

    assert calculator.totals()["grandTotal"] == 0.3


def test_category_item_uses_category_label():
    calculator = InvoiceCalculator()
    item = calculator.add_category_item("keyboard_mouse", " Logitech combo ", "1499.50", "2")

    assert item["category"] == "Keyboard & Mouse"
    assert item["name"] == "Logitech combo"
    assert item["price"] == 1499.5
    assert item["quantity"] == 2
    assert calculator.item_for_category("Keyboard & Mouse") is item


def test_category_item_validation():
    calculator = InvoiceCalculator()

    with pytest.raises(ValidationError):
        calculator.add_category_item("toaster", "Bread", 10)
    with pytest.raises(ValidationError, match="Please enter product name for GPU"):
        calculator.add_category_item("gpu", "  ", 10)
    with pytest.raises(ValidationError, match="valid price"):
        calculator.add_category_item("gpu", "RTX", -1)
    with pytest.raises(ValidationError, match="valid price"):
        calculator.add_category_item("gpu", "RTX", "1e400")
    with pytest.raises(ValidationError, match="Quantity must be between 1 and 1000"):
        calculator.add_category_item("gpu", "RTX", 10, 1001)

    assert calculator.items == []


def test_custom_item_is_labelled():
    calculator = InvoiceCalculator()
    item = calculator.add_custom_item("Service", "Assembly", 500)

    assert item["category"] == "Custom"
    assert item["name"] == "Service: Assembly"
    assert item["quantity"] == 1

    with pytest.raises(ValidationError, match="Please enter label and name"):
        calculator.add_custom_item("", "Assembly", 500)


def test_update_item_ignores_out_of_range_values():
    calculator = InvoiceCalculator()
    item = calculator.add_category_item("ssd", "NVMe 1TB", 80, 1)

    calculator.update_item(item["id"], "price", -5)
    calculator.update_item(item["id"], "quantity", 0)
    calculator.update_item(item["id"], "quantity", 1001)
    assert (item["price"], item["quantity"]) == (80, 1)

    calculator.update_item(item["id"], "quantity", 3)
    assert calculator.totals()["grandTotal"] == 240.0
    assert calculator.update_item("missing", "price", 1) is None


def test_remove_and_reset():
    calculator = InvoiceCalculator(customer_name="Asha", customer_mobile="9876543210", status="Paid")
    first = calculator.add_category_item("hdd", "2TB", 60)
    calculator.add_category_item("ups", "600VA", 40)
    original_number = calculator.details["invoiceNo"]

    calculator.remove_item(first["id"])
    assert [i["name"] for i in calculator.items] == ["600VA"]

    calculator.reset()
    assert calculator.items == []
    assert calculator.details["customerName"] == ""
    assert calculator.details["status"] == "Generated"
    assert calculator.details["invoiceNo"].startswith("INV-")
    assert original_number.startswith("INV-")


def test_to_dict_includes_line_totals():
    calculator = InvoiceCalculator(customer_name="Ravi")
    calculator.add_category_item("monitor", "27in", 120.25, 2)

    data = calculator.to_dict()

    assert data["invoice"]["customerName"] == "Ravi"
    assert data["items"][0]["total"] == 240.5
    assert data["grandTotal"] == 240.5


def test_invoice_number_format():
    assert re.match(r"^INV-\d{6}\d{1,4}$", generate_invoice_number())


def test_format_currency_uses_indian_grouping():
    assert format_currency(123456.5) == "₹1,23,456.50"
    assert format_currency(999) == "₹999.00"
    assert format_currency(12345678) == "₹1,23,45,678.00"


def test_validate_line_item():
    assert validate_line_item({"name": "CPU", "price": 0, "quantity": 1})
    assert not validate_line_item({"name": "", "price": 10, "quantity": 1})
    assert not validate_line_item({"name": "CPU", "price": -1, "quantity": 1})
    assert not validate_line_item({"name": "CPU", "price": 10, "quantity": 1001})
    assert not validate_line_item({"name": "CPU", "price": 10, "quantity": 1.5})
    assert not validate_line_item({"name": "CPU", "price": float("inf"), "quantity": 1})


def test_fixed_category_list():
    assert len(PRODUCT_CATEGORIES) == 21
    assert PRODUCT_CATEGORIES[0] == {"id": "processor", "label": "Processor"}
