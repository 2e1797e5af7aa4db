from storefront.utils.tax import (
    calculate_gst_totals, calculate_price_with_tax, calculate_tax_amount,
    calculate_tax_breakdown, normalize_tax_rate, round_money
)


def test_normalize_tax_rate():
    assert normalize_tax_rate(18) == 18
    assert normalize_tax_rate(0.18) == 18
    assert normalize_tax_rate(None) == 18
    assert normalize_tax_rate("abc") == 18
    assert normalize_tax_rate(float("nan")) == 18
    assert normalize_tax_rate(0) == 0


def test_round_money_rounds_half_up():
    assert round_money(2.675) == 2.68
    assert round_money(1.005) == 1.01


def test_tax_amount_and_price_with_tax():
    assert calculate_tax_amount(100, 18) == 18.0
    assert calculate_tax_amount(100, 0.05) == 5.0
    assert calculate_price_with_tax(199.99, 18) == 235.99


def test_breakdown_applies_discount_after_tax():
    breakdown = calculate_tax_breakdown(1000, 100, 18, shipping=50)

    assert breakdown == {
        "subtotal": 1000.0,
        "discount": 100.0,
        "taxableAmount": 1000.0,
        "taxRate": 18,
        "tax": 180.0,
        "shipping": 50.0,
        "total": 1130.0,
    }


def test_breakdown_caps_discount_and_clamps_negatives():
    breakdown = calculate_tax_breakdown(-10, 500, 18, shipping=-5)

    assert breakdown["subtotal"] == 0
    assert breakdown["shipping"] == 0
    assert breakdown["discount"] == 0
    assert breakdown["total"] == 0

    capped = calculate_tax_breakdown(100, 1000, 18)
    assert capped["discount"] == 118.0
    assert capped["total"] == 0


def test_gst_totals_add_eighteen_percent_over_valid_items():
    totals = calculate_gst_totals([
        {"name": "CPU", "price": 100, "quantity": 2},
        {"name": "RAM", "price": 50, "quantity": 1},
        {"name": "", "price": 999, "quantity": 1},
        {"name": "Free sticker", "price": 0, "quantity": 1},
        {"name": "Bad qty", "price": 10, "quantity": 0},
    ])

    assert totals == {"subtotal": 250.0, "tax": 45.0, "grandTotal": 295.0}
