from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_RIGHT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle


def _amount(value):
    # Standard PDF fonts cannot draw the rupee sign, so amounts carry "Rs." instead
    return f"{value:,.2f}"


def invoice_filename(invoice_no):
    return f"Invoice_{invoice_no}.pdf"


def render_invoice_pdf(details, items, grand_total, store_name, store_tagline):
    """
    Render the fixed invoice layout and return the PDF bytes.

    Layout: centred store header, invoice/customer details side by side,
    itemised table, right-aligned grand total.
    """
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=14 * mm,
        rightMargin=14 * mm,
        topMargin=14 * mm,
        bottomMargin=14 * mm,
        title=invoice_filename(details.get('invoiceNo', '')),
    )

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle('InvoiceTitle', parent=styles['Title'], fontName='Helvetica-Bold', fontSize=22, alignment=TA_CENTER)
    tagline_style = ParagraphStyle('InvoiceTagline', parent=styles['Normal'], fontSize=10, textColor=colors.HexColor('#3c3c3c'), alignment=TA_CENTER)
    heading_style = ParagraphStyle('InvoiceHeading', parent=styles['Normal'], fontName='Helvetica-Bold', fontSize=11)
    field_style = ParagraphStyle('InvoiceField', parent=styles['Normal'], fontSize=10, leading=14)
    total_style = ParagraphStyle('InvoiceTotal', parent=styles['Normal'], fontName='Helvetica-Bold', fontSize=11, alignment=TA_RIGHT)

    def field(label, value):
        return Paragraph(f"<b>{label}</b> {escape(str(value))}", field_style)

    story = [
        Paragraph(escape(store_name), title_style),
        Paragraph(escape(store_tagline), tagline_style),
        Spacer(1, 10 * mm),
    ]

    invoice_column = [
        Paragraph('Invoice Details', heading_style),
        field('Invoice No:', details.get('invoiceNo', '')),
        field('Date:', details.get('date', '')),
        field('Status:', details.get('status', '')),
    ]
    customer_column = [Paragraph('Customer Details', heading_style)]
    if details.get('customerName'):
        customer_column.append(field('Name:', details['customerName']))
    if details.get('customerMobile'):
        customer_column.append(field('Mobile:', details['customerMobile']))

    meta_table = Table([[invoice_column, customer_column]], colWidths=['52%', '48%'])
    meta_table.setStyle(TableStyle([
        ('VALIGN', (0, 0), (-1, -1), 'TOP'),
        ('LEFTPADDING', (0, 0), (-1, -1), 0),
    ]))
    story.extend([meta_table, Spacer(1, 8 * mm)])

    rows = [['Item Description', 'Qty', 'Price (Rs)', 'Total (Rs)']]
    for item in items:
        rows.append([
            item['name'],
            str(item['quantity']),
            _amount(item['price']),
            _amount(item['price'] * item['quantity']),
        ])

    items_table = Table(rows, colWidths=['55%', '10%', '17.5%', '17.5%'], repeatRows=1)
    items_table.setStyle(TableStyle([
        ('FONTSIZE', (0, 0), (-1, -1), 9),
        ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#f5f5f5')),
        ('TEXTCOLOR', (0, 0), (-1, 0), colors.HexColor('#646464')),
        ('GRID', (0, 0), (-1, -1), 0.1, colors.HexColor('#c8c8c8')),
        ('ALIGN', (1, 1), (1, -1), 'CENTER'),
        ('ALIGN', (2, 1), (-1, -1), 'RIGHT'),
        ('TOPPADDING', (0, 0), (-1, -1), 3),
        ('BOTTOMPADDING', (0, 0), (-1, -1), 3),
    ]))
    story.extend([items_table, Spacer(1, 10)])

    story.append(Paragraph(
        f'<font color="#969696">GRAND TOTAL: </font>Rs.{_amount(grand_total)}',
        total_style
    ))

    doc.build(story)
    return buffer.getvalue()
