# /clinic/utils/pdf_util.py
import os
from io import BytesIO
from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

PAGE_WIDTH, PAGE_HEIGHT = A4
MARGIN = 50
TEXT_COLOR = '#444444'
RULE_COLOR = '#aaaaaa'
CUSTOMER_TOP = 200
TABLE_TOP = 330
ROW_HEIGHT = 30
FOOTER_TOP = 780


def mask_name(name):
    """Keeps the first two characters of a name and hides the rest."""
    name = name or ''
    return name[:2] + '*' * max(len(name) - 2, 0)


def format_amount(value):
    return f'{(value or 0):.2f}'


class InvoicePDF:
    """Lays out a single A4 invoice page at fixed positions.

    Positions are given from the top-left corner of the page, the way the
    layout was designed; they are converted to PDF coordinates when drawn.
    """

    def __init__(self, invoice, patient, doctor=None, sender_name='ACME Inc.', logo_path=None):
        self.invoice = invoice
        self.patient = patient
        self.doctor = doctor
        self.sender_name = sender_name
        self.logo_path = logo_path
        self.buffer = BytesIO()
        self.canvas = canvas.Canvas(self.buffer, pagesize=A4)
        self.font_size = 10

    def render(self):
        self.draw_header()
        self.draw_customer_information()
        self.draw_invoice_table()
        self.draw_footer()
        self.canvas.showPage()
        self.canvas.save()
        return self.buffer.getvalue()

    # -- primitives --------------------------------------------------------

    def set_font(self, name='Helvetica', size=None):
        if size is not None:
            self.font_size = size
        self.canvas.setFont(name, self.font_size)

    def text(self, value, x, top, align='left', width=None):
        c = self.canvas
        value = '' if value is None else str(value)
        y = PAGE_HEIGHT - top - self.font_size
        if align == 'right':
            right = x + width if width is not None else PAGE_WIDTH - MARGIN
            c.drawRightString(right, y, value)
        elif align == 'center':
            c.drawCentredString(x + (width or 0) / 2, y, value)
        else:
            c.drawString(x, y, value)

    def rule(self, top):
        c = self.canvas
        c.setStrokeColor(RULE_COLOR)
        c.setLineWidth(1)
        c.line(MARGIN, PAGE_HEIGHT - top, PAGE_WIDTH - MARGIN, PAGE_HEIGHT - top)

    def table_row(self, top, item, description, unit_cost, quantity, line_total):
        self.text(item, 50, top)
        self.text(description, 150, top)
        self.text(unit_cost, 280, top, align='right', width=90)
        self.text(quantity, 370, top, align='right', width=90)
        self.text(line_total, 0, top, align='right')

    # -- sections ----------------------------------------------------------

    def draw_header(self):
        c = self.canvas
        if self.logo_path and os.path.exists(self.logo_path):
            c.drawImage(ImageReader(self.logo_path), 50, PAGE_HEIGHT - 45 - 50, width=50, height=50,
                        preserveAspectRatio=True, mask='auto')

        c.setFillColor(TEXT_COLOR)
        self.set_font(size=20)
        self.text(self.sender_name, 110, 57)

        address = (self.doctor.address if self.doctor else None) or {}
        self.set_font(size=10)
        self.text(self.sender_name, 200, 50, align='right')
        self.text(', '.join(filter(None, [address.get('state'), address.get('street')])), 200, 65, align='right')
        self.text(', '.join(filter(None, [address.get('city'), address.get('country'), address.get('zip_code')])),
                  200, 80, align='right')

    def draw_customer_information(self):
        invoice = self.invoice
        self.canvas.setFillColor(TEXT_COLOR)
        self.set_font(size=20)
        self.text('Invoice', 50, 160)
        self.rule(185)

        self.set_font(size=10)
        self.text('Invoice Number:', 50, CUSTOMER_TOP)
        self.set_font('Helvetica-Bold')
        self.text(invoice.invoice_id, 150, CUSTOMER_TOP)
        self.set_font('Helvetica')
        self.text('Invoice Date:', 50, CUSTOMER_TOP + 15)
        self.text(invoice.invoice_date, 150, CUSTOMER_TOP + 15)
        self.text('Total:', 50, CUSTOMER_TOP + 30)
        self.text(format_amount(invoice.total_price), 150, CUSTOMER_TOP + 30)

        masked = f'{mask_name(self.patient.first_name)} {mask_name(self.patient.last_name)}'
        self.set_font('Helvetica-Bold')
        self.text(masked, 300, CUSTOMER_TOP)
        self.set_font('Helvetica')
        self.rule(252)

    def draw_invoice_table(self):
        invoice = self.invoice
        self.set_font('Helvetica-Bold', 10)
        self.table_row(TABLE_TOP, 'Item', 'Description', 'Unit Cost', 'Quantity', 'Line Total')
        self.rule(TABLE_TOP + 20)
        self.set_font('Helvetica')

        position = TABLE_TOP
        for item in invoice.items:
            position += ROW_HEIGHT
            self.table_row(position, item.item_name, item.description, format_amount(item.unit_cost),
                           f'{item.quantity:g}' if item.quantity is not None else '', format_amount(item.total))
            self.rule(position + 20)

        subtotal_position = position + ROW_HEIGHT
        self.table_row(subtotal_position, '', '', 'Subtotal', '', format_amount(invoice.total_price))

        paid_position = subtotal_position + 20
        self.table_row(paid_position, '', '', 'Paid To Date', '', format_amount(invoice.amount_paid))

        due_position = paid_position + 25
        self.set_font('Helvetica-Bold')
        self.table_row(due_position, '', '', 'Balance Due', '',
                       format_amount((invoice.total_price or 0) - (invoice.amount_paid or 0)))
        self.set_font('Helvetica')

    def draw_footer(self):
        self.set_font(size=10)
        self.text(self.invoice.terms, 50, FOOTER_TOP, align='center', width=500)


def render_invoice_pdf(invoice, patient, doctor=None, sender_name='ACME Inc.', logo_path=None):
    """Returns the invoice as PDF bytes."""
    return InvoicePDF(invoice, patient, doctor, sender_name=sender_name, logo_path=logo_path).render()
