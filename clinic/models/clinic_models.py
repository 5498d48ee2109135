# /clinic/models/clinic_models.py
from clinic.extensions import db
from clinic.models.base import DocumentMixin

ADDRESS_FIELDS = ['street', 'city', 'state', 'zip_code', 'country', 'time_zone']


class Doctor(DocumentMixin, db.Model):
    """The practising doctor. The back office keeps a single doctor record."""
    __tablename__ = 'doctors'

    id_number = db.Column(db.String(64))
    first_name = db.Column(db.String(120))
    last_name = db.Column(db.String(120))
    username = db.Column(db.String(255))
    email = db.Column(db.String(255), unique=True)
    tel = db.Column(db.String(64))
    company = db.Column(db.String(255))
    company_website = db.Column(db.String(255))
    specialty = db.Column(db.String(255))
    experience = db.Column(db.String(255))
    address = db.Column(db.JSON, default=dict)
    schedule = db.Column(db.JSON)
    clinic_id = db.Column(db.String(32), db.ForeignKey('clinics.id'))

    clinic = db.relationship('Clinic', back_populates='doctors')
    appointments = db.relationship('Appointment', back_populates='doctor')


class Clinic(DocumentMixin, db.Model):
    __tablename__ = 'clinics'

    id_number = db.Column(db.String(64))
    name = db.Column(db.String(255))
    address = db.Column(db.String(512))
    email = db.Column(db.String(255))
    phone = db.Column(db.String(64))
    state = db.Column(db.String(120))
    city = db.Column(db.String(120))
    clinic_type = db.Column(db.String(120))
    clinic_message = db.Column(db.Text)
    alt_email = db.Column(db.String(255))
    user_name = db.Column(db.String(120))
    registration_email = db.Column(db.String(255))

    doctors = db.relationship('Doctor', back_populates='clinic')


class SocialMediaSettings(DocumentMixin, db.Model):
    __tablename__ = 'social_media_settings'

    facebook = db.Column(db.String(255))
    twitter = db.Column(db.String(255))
    linked_in = db.Column(db.String(255))


class DoctorPhoto(DocumentMixin, db.Model):
    """Uploaded doctor photos; the most recent upload is the current one."""
    __tablename__ = 'doctor_photos'

    path = db.Column(db.String(1024), nullable=False)


class ClinicPhoto(DocumentMixin, db.Model):
    """Uploaded clinic photos; the most recent upload is the current one."""
    __tablename__ = 'clinic_photos'

    path = db.Column(db.String(1024), nullable=False)
