from flask import request, jsonify, redirect, url_for, render_template, current_app
from clinic.extensions import db
from clinic.models import Appointment, ApprovedAppointment, DeletedAppointment, Patient, Doctor
from clinic.models.appointment_models import HOURS_LIST
from clinic.utils.forms import get_form_data

# Form fields an appointment request carries, posted under the same name.
APPOINTMENT_FIELDS = ['first_name', 'last_name', 'date_of_birth', 'gender', 'service', 'date', 'time',
                      'email', 'tel', 'message']


def _upsert_appointment(data):
    """Creates or updates the pending appointment for the patient's id number."""
    appointment = Appointment.query.filter_by(id_number=data.get('id_number')).first()
    if appointment is None:
        appointment = Appointment(id_number=data.get('id_number'))
        db.session.add(appointment)

    for field in APPOINTMENT_FIELDS:
        if field in data:
            setattr(appointment, field, data.get(field))

    if appointment.doctor_id is None:
        doctor = Doctor.query.first()
        appointment.doctor_id = doctor.id if doctor else None
    return appointment


def book_appointment_page():
    return render_template(
        'book_appointment.html',
        appointments=Appointment.query.order_by(Appointment.created_at).all(),
        approved_appointments=ApprovedAppointment.query.order_by(ApprovedAppointment.created_at).all(),
        canceled_appointments=DeletedAppointment.query.order_by(DeletedAppointment.created_at).all(),
        hours_list=HOURS_LIST,
    )


def approved_appointments_page():
    appointments = ApprovedAppointment.query.order_by(ApprovedAppointment.created_at).all()
    return render_template('approved_appointments.html', approved_appointments=appointments)


def canceled_appointments_page():
    appointments = DeletedAppointment.query.order_by(DeletedAppointment.created_at).all()
    return render_template('canceled_appointments.html', canceled_appointments=appointments)


def get_appointment(appointment_id):
    appointment = db.session.get(Appointment, appointment_id)
    if not appointment:
        return jsonify({'error': 'Appointment not found'}), 404
    return jsonify(appointment.to_dict()), 200


def book_appointment():
    """Books (or re-books) an appointment from the back-office form."""
    data = request.form.to_dict()
    if not data.get('id_number'):
        return jsonify({'error': 'Missing required id_number'}), 400

    try:
        appointment = _upsert_appointment(data)
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error saving appointment: {e}")
        return 'Internal Server Error', 500

    current_app.logger.info(f"Appointment saved: {appointment.id}")
    return redirect(url_for('api.book_appointment_page'))


def book_online_appointment():
    """Books an appointment from the landing page widget."""
    form_data = get_form_data()
    if not form_data or not form_data.get('id_number'):
        return jsonify({'error': 'Missing required id_number'}), 400

    try:
        appointment = _upsert_appointment(form_data)
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error saving appointment: {e}")
        return jsonify({'error': 'Internal server error'}), 500

    current_app.logger.info(f"Online appointment saved: {appointment.id}")
    return jsonify({'message': 'Appointment saved successfully'}), 200


def update_appointment():
    data = request.form.to_dict()
    appointment = db.session.get(Appointment, data.get('appointment_id', ''))
    if not appointment:
        return jsonify({'success': False, 'message': 'Appointment not found.'}), 404

    for field in ['id_number', 'first_name', 'last_name', 'tel', 'service', 'date', 'time']:
        if field in data:
            setattr(appointment, field, data[field])

    try:
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error updating appointment {appointment.id}: {e}")
        return 'Internal Server Error', 500

    return redirect(url_for('api.book_appointment_page'))


def approve_appointment():
    """
    Approves a pending appointment.

    The patient with the appointment's id number is created or updated with
    status "Pending", an approved record is added and the pending appointment
    is removed, all in one transaction.
    """
    data = request.form.to_dict()
    appointment = db.session.get(Appointment, data.get('appointment_id', ''))
    if not appointment:
        return jsonify({'success': False, 'message': 'Appointment not found.'}), 404

    # The approval form may correct the requested details.
    for field in ['id_number', 'first_name', 'last_name', 'tel', 'service', 'date', 'time', 'gender']:
        if data.get(field):
            setattr(appointment, field, data[field])

    try:
        patient = Patient.query.filter_by(id_number=appointment.id_number).first()
        if patient is None:
            patient = Patient(id_number=appointment.id_number)
            db.session.add(patient)
        patient.first_name = appointment.first_name
        patient.last_name = appointment.last_name
        patient.disease = appointment.service
        patient.date = appointment.date
        patient.time = appointment.time
        patient.tel = appointment.tel
        patient.gender = appointment.gender
        patient.status = 'Pending'

        db.session.add(ApprovedAppointment.from_appointment(appointment))
        db.session.delete(appointment)
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error approving appointment: {e}")
        return 'Internal Server Error', 500

    current_app.logger.info(f"Appointment approved for patient {patient.id}")
    return redirect(url_for('api.book_appointment_page'))


def cancel_appointment(appointment_id):
    """Moves a pending appointment to the canceled list in one transaction."""
    appointment = db.session.get(Appointment, appointment_id)
    if not appointment:
        return jsonify({'success': False, 'message': 'Appointment not found.'}), 200

    try:
        db.session.add(DeletedAppointment.from_appointment(appointment))
        db.session.delete(appointment)
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error canceling appointment {appointment_id}: {e}")
        return jsonify({'success': False, 'message': 'Error deleting appointment.'}), 500

    current_app.logger.info(f"Appointment {appointment_id} moved to canceled appointments")
    return jsonify({'success': True}), 200


def delete_past_appointment(appointment_id):
    """Removes a record from the approved or canceled appointments."""
    deleted = 0
    try:
        for model in (ApprovedAppointment, DeletedAppointment):
            deleted += model.query.filter_by(id=appointment_id).delete()
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error deleting past appointment {appointment_id}: {e}")
        return jsonify({'success': False, 'message': 'Error deleting appointment.'}), 500

    if not deleted:
        return jsonify({'success': False, 'message': 'Appointment not found.'}), 200
    return jsonify({'success': True}), 200
