# /clinic/models/invoice_models.py
import secrets
import string
from clinic.extensions import db
from clinic.models.base import DocumentMixin

_INVOICE_ALPHABET = string.ascii_letters + string.digits


def generate_invoice_number(length=9):
    """Short human-facing invoice number, e.g. ``#aZ3k9Qp1x``."""
    return '#' + ''.join(secrets.choice(_INVOICE_ALPHABET) for _ in range(length))


class Invoice(DocumentMixin, db.Model):
    __tablename__ = 'invoices'

    invoice_id = db.Column(db.String(16), nullable=False, default=generate_invoice_number, index=True)
    patient_id = db.Column(db.String(32), db.ForeignKey('patients.id'))
    full_name = db.Column(db.String(255))
    email = db.Column(db.String(255))
    status = db.Column(db.String(32))
    invoice_date = db.Column(db.String(32))
    terms = db.Column(db.Text)
    terms_and_conditions = db.Column(db.Text)
    total_price = db.Column(db.Float, default=0.0)
    amount_paid = db.Column(db.Float, default=0.0)
    due = db.Column(db.Float, default=0.0)

    patient = db.relationship('Patient', back_populates='invoices')
    items = db.relationship('InvoiceItem', back_populates='invoice', order_by='InvoiceItem.position',
                            cascade='all, delete-orphan')

    def compute_totals(self):
        """Total is the sum of the line totals; the due amount is what is left after payment."""
        self.total_price = sum(item.total for item in self.items)
        self.amount_paid = self.amount_paid or 0.0
        self.due = self.total_price - self.amount_paid
        self.status = 'Pending' if self.due > 0 else 'Paid'

    def to_dict(self):
        data = super().to_dict()
        data['items'] = [item.to_dict() for item in self.items]
        return data


class InvoiceItem(DocumentMixin, db.Model):
    __tablename__ = 'invoice_items'

    invoice_id = db.Column(db.String(32), db.ForeignKey('invoices.id'), nullable=False)
    position = db.Column(db.Integer, default=0)
    item_name = db.Column(db.String(255))
    description = db.Column(db.Text)
    unit_cost = db.Column(db.Float, default=0.0)
    quantity = db.Column(db.Float, default=0.0)

    invoice = db.relationship('Invoice', back_populates='items')

    @property
    def total(self):
        return (self.unit_cost or 0.0) * (self.quantity or 0.0)

    def to_dict(self):
        data = super().to_dict()
        data['total'] = self.total
        return data
