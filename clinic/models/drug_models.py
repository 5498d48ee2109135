# /clinic/models/drug_models.py
from clinic.extensions import db
from clinic.models.base import DocumentMixin


class Drug(DocumentMixin, db.Model):
    """A drug in the clinic inventory, keyed by its stock id number."""
    __tablename__ = 'drugs'

    id_number = db.Column(db.String(64), unique=True, index=True)
    drug_name = db.Column(db.String(255))
    category = db.Column(db.String(120))
    company_name = db.Column(db.String(255))
    purchase_date = db.Column(db.Date)
    expired_date = db.Column(db.Date)
    price = db.Column(db.String(32))
    expense = db.Column(db.Float)
    stock = db.Column(db.Float)
    description = db.Column(db.Text)
    employee_name = db.Column(db.String(120))
    # what the purchased quantity cost the clinic: expense per unit x stock
    purchase_cost = db.Column(db.Float)
