import pytest

from storefront.services.invoice_pdf import invoice_filename, render_invoice_pdf

INVOICE_BODY = {
    "invoiceNo": "INV-1234567",
    "customerName": "Asha <Traders>",
    "customerMobile": "9876543210",
    "status": "Pending",
    "items": [
        {"category": "processor", "name": "Ryzen 5", "price": 100, "quantity": 2},
        {"label": "Service", "name": "Assembly", "price": 50},
    ],
}


@pytest.fixture
def admin_client(client, login, admin_user):
    login(admin_user)
    return client


def test_render_invoice_pdf_returns_pdf_bytes():
    pdf = render_invoice_pdf(
        {"invoiceNo": "INV-1", "date": "01/02/2026", "status": "Paid", "customerName": "R & D"},
        [{"name": "GPU <RTX>", "price": 300.0, "quantity": 1}],
        300.0,
        "Loke Store",
        "Professional Computer Solutions",
    )

    assert pdf[:4] == b"%PDF"


def test_invoice_filename():
    assert invoice_filename("INV-42") == "Invoice_INV-42.pdf"


def test_calculate_endpoint_returns_items_and_totals(admin_client):
    res = admin_client.post("/api/v1/admin/invoices/calculate", json=INVOICE_BODY)

    assert res.status_code == 200
    body = res.get_json()
    assert body["invoice"]["invoiceNo"] == "INV-1234567"
    assert body["invoice"]["status"] == "Pending"
    assert [i["name"] for i in body["items"]] == ["Ryzen 5", "Service: Assembly"]
    assert body["subtotal"] == 250.0
    assert body["grandTotal"] == 250.0
    assert body["formattedGrandTotal"] == "₹250.00"


def test_calculate_endpoint_validates_input(admin_client):
    bad_mobile = admin_client.post("/api/v1/admin/invoices/calculate", json={"customerMobile": "12345"})
    bad_status = admin_client.post("/api/v1/admin/invoices/calculate", json={"status": "Lost"})
    bad_item = admin_client.post("/api/v1/admin/invoices/calculate", json={"items": [{"category": "gpu", "name": "RTX", "price": "free"}]})

    assert bad_mobile.status_code == 400
    assert bad_status.status_code == 400
    assert bad_item.status_code == 400
    assert bad_item.get_json()["message"] == "Please enter a valid price for GPU"


def test_calculate_endpoint_rejects_non_finite_prices(admin_client):
    for price in ("1e400", "Infinity", "-inf"):
        res = admin_client.post(
            "/api/v1/admin/invoices/calculate",
            json={"items": [{"category": "gpu", "name": "RTX", "price": price}]},
        )
        assert res.status_code == 400
        assert res.get_json()["message"] == "Please enter a valid price for GPU"


def test_pdf_endpoint_downloads_attachment(admin_client):
    res = admin_client.post("/api/v1/admin/invoices/pdf", json=INVOICE_BODY)

    assert res.status_code == 200
    assert res.mimetype == "application/pdf"
    assert "Invoice_INV-1234567.pdf" in res.headers["Content-Disposition"]
    assert res.data[:4] == b"%PDF"


def test_pdf_endpoint_requires_items(admin_client):
    res = admin_client.post("/api/v1/admin/invoices/pdf", json={"customerName": "Empty"})

    assert res.status_code == 400


def test_tax_breakdown_endpoint(admin_client):
    res = admin_client.post("/api/v1/admin/invoices/tax-breakdown", json={
        "subtotal": 1000,
        "discount": 100,
        "taxRate": 0.18,
        "items": [{"name": "CPU", "price": 100, "quantity": 2}],
    })

    body = res.get_json()
    assert res.status_code == 200
    assert body["breakdown"]["tax"] == 180.0
    assert body["breakdown"]["total"] == 1080.0
    assert body["gst"] == {"subtotal": 200.0, "tax": 36.0, "grandTotal": 236.0}


def test_invoice_routes_are_admin_only(client, login, customer_user):
    assert client.post("/api/v1/admin/invoices/calculate", json=INVOICE_BODY).status_code == 401
    login(customer_user)
    assert client.post("/api/v1/admin/invoices/pdf", json=INVOICE_BODY).status_code == 403
