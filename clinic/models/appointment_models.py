# /clinic/models/appointment_models.py
from clinic.extensions import db
from clinic.models.base import DocumentMixin

# Bookable slots offered on the landing page and the booking calendar
HOURS_LIST = ['09:00', '10:00', '11:00', '12:00', '13:00', '14:00', '15:00', '16:00', '17:00']


class AppointmentRecordMixin(DocumentMixin):
    """Fields kept when an appointment moves to the approved or canceled list."""
    id_number = db.Column(db.String(64), index=True)
    first_name = db.Column(db.String(120))
    last_name = db.Column(db.String(120))
    service = db.Column(db.String(255))
    date = db.Column(db.String(32))
    time = db.Column(db.String(16))
    tel = db.Column(db.String(64))

    @classmethod
    def from_appointment(cls, appointment):
        return cls(
            id_number=appointment.id_number,
            first_name=appointment.first_name,
            last_name=appointment.last_name,
            service=appointment.service,
            date=appointment.date,
            time=appointment.time,
            tel=appointment.tel,
        )


class Appointment(AppointmentRecordMixin, db.Model):
    """A pending appointment request, awaiting approval or cancellation."""
    __tablename__ = 'appointments'

    date_of_birth = db.Column(db.String(32))
    gender = db.Column(db.String(32))
    email = db.Column(db.String(255))
    message = db.Column(db.Text)
    doctor_id = db.Column(db.String(32), db.ForeignKey('doctors.id'))

    doctor = db.relationship('Doctor', back_populates='appointments')


class ApprovedAppointment(AppointmentRecordMixin, db.Model):
    __tablename__ = 'approved_appointments'


class DeletedAppointment(AppointmentRecordMixin, db.Model):
    """A canceled appointment."""
    __tablename__ = 'deleted_appointments'
