# /clinic/models/patient_models.py
from clinic.extensions import db
from clinic.models.base import DocumentMixin
from clinic.models.intake import empty_intake

# Demographic fields that the intake and profile forms post under the same name.
PATIENT_FIELDS = [
    'id_number', 'first_name', 'last_name', 'disease', 'tel', 'age', 'date', 'time',
    'gender', 'email', 'address', 'note', 'status', 'weight', 'height', 'employee_name',
]


class Patient(DocumentMixin, db.Model):
    """A patient record: demographics plus the intake questionnaire."""
    __tablename__ = 'patients'

    id_number = db.Column(db.String(64), index=True)
    first_name = db.Column(db.String(120))
    last_name = db.Column(db.String(120))
    disease = db.Column(db.String(255))
    tel = db.Column(db.String(64))
    date_of_birth = db.Column(db.Date)
    age = db.Column(db.String(16))
    date = db.Column(db.String(32))
    time = db.Column(db.String(16))
    gender = db.Column(db.String(32))
    email = db.Column(db.String(255))
    address = db.Column(db.String(512))
    note = db.Column(db.Text)
    status = db.Column(db.String(64))
    weight = db.Column(db.String(32))
    height = db.Column(db.String(32))
    employee_name = db.Column(db.String(120))
    disease_history = db.Column(db.JSON, default=list)
    intake = db.Column(db.JSON, default=empty_intake)

    invoices = db.relationship('Invoice', back_populates='patient', order_by='Invoice.created_at',
                               cascade='all, delete-orphan')
    last_visits = db.relationship('LastVisit', back_populates='patient', order_by='LastVisit.created_at',
                                  cascade='all, delete-orphan')

    @property
    def full_name(self):
        return ' '.join(part for part in (self.first_name, self.last_name) if part)

    @property
    def last_invoice(self):
        return self.invoices[-1] if self.invoices else None

    def to_dict(self):
        data = super().to_dict()
        data['invoices'] = [invoice.id for invoice in self.invoices]
        data['last_visits'] = [visit.to_dict() for visit in self.last_visits]
        return data


class LastVisit(DocumentMixin, db.Model):
    __tablename__ = 'last_visits'

    patient_id = db.Column(db.String(32), db.ForeignKey('patients.id'), nullable=False)
    date = db.Column(db.String(32))
    time = db.Column(db.String(16))
    note = db.Column(db.Text)
    reason = db.Column(db.String(255))

    patient = db.relationship('Patient', back_populates='last_visits')
