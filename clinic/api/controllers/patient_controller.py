from flask import request, jsonify, redirect, url_for, render_template, current_app
from clinic.extensions import db
from clinic.models import Patient, LastVisit, Appointment, ApprovedAppointment, DeletedAppointment
from clinic.models.appointment_models import HOURS_LIST
from clinic.models.intake import parse_intake, intake_form_fields
from clinic.models.patient_models import PATIENT_FIELDS
from clinic.utils.forms import get_payload, get_form_data, parse_date


def _apply_demographics(patient, data):
    for field in PATIENT_FIELDS:
        if field in data:
            setattr(patient, field, data[field] or None)
    if 'date_of_birth' in data:
        patient.date_of_birth = parse_date(data['date_of_birth'])


def patients_page():
    patients = Patient.query.order_by(Patient.created_at).all()
    return render_template('patients.html', patients=patients)


def add_patient_page():
    return render_template('add_patient.html')


def patient_profile_page():
    patient = db.session.get(Patient, request.args.get('id', ''))
    if not patient:
        return 'Patient not found', 404

    return render_template(
        'patient_profile.html',
        patient=patient,
        last_invoice=patient.last_invoice,
        intake_fields=list(intake_form_fields(patient.intake)),
        hours_list=HOURS_LIST,
        appointments=Appointment.query.filter_by(id_number=patient.id_number).all(),
        approved_appointments=ApprovedAppointment.query.filter_by(id_number=patient.id_number).all(),
        deleted_appointments=DeletedAppointment.query.filter_by(id_number=patient.id_number).all(),
    )


def get_patient(patient_id):
    patient = db.session.get(Patient, patient_id)
    if not patient:
        return jsonify({'message': 'Patient not found'}), 404
    return jsonify(patient.to_dict()), 200


def add_patient():
    """Registers a patient from the add-patient form."""
    data = get_payload()
    if not data.get('first_name') or not data.get('last_name'):
        return jsonify({'error': 'Missing required first_name or last_name'}), 400

    patient = Patient()
    _apply_demographics(patient, data)
    patient.intake = parse_intake(data)

    db.session.add(patient)
    try:
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error adding patient: {e}")
        return 'Internal Server Error', 500

    current_app.logger.info(f"Patient {patient.id} registered")
    return redirect(url_for('api.patients_page'))


def update_patient_profile():
    """Saves the patient profile: demographics and the full intake questionnaire."""
    data = request.form.to_dict()
    patient = db.session.get(Patient, data.get('patient_id', ''))
    if not patient:
        return jsonify({'error': 'Patient not found'}), 404

    _apply_demographics(patient, data)
    patient.intake = parse_intake(data, current=patient.intake)

    try:
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error updating patient {patient.id}: {e}")
        return 'Internal Server Error', 500

    return redirect(url_for('api.patients_page'))


def delete_patient(patient_id):
    patient = db.session.get(Patient, patient_id)
    if not patient:
        return jsonify({'success': False, 'message': 'Patient not found.'}), 200

    try:
        db.session.delete(patient)
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error deleting patient {patient_id}: {e}")
        return jsonify({'success': False, 'message': 'Error deleting patient.'}), 500

    current_app.logger.info(f"Patient {patient_id} removed")
    return jsonify({'success': True}), 200


def add_last_visit(patient_id):
    patient = db.session.get(Patient, patient_id)
    if not patient:
        return jsonify({'error': 'Patient not found'}), 404

    form_data = get_form_data()
    if form_data is None:
        return jsonify({'error': 'Missing formData'}), 400

    visit = LastVisit(
        date=form_data.get('date'),
        time=form_data.get('time'),
        note=form_data.get('note'),
        reason=form_data.get('reason'),
    )
    patient.last_visits.append(visit)

    try:
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error adding last visit for patient {patient_id}: {e}")
        return jsonify({'error': 'Failed to update last visit'}), 500

    return jsonify({'success': True}), 200


def update_status(patient_id):
    patient = db.session.get(Patient, patient_id)
    if not patient:
        return jsonify({'error': 'Patient not found'}), 404

    patient.status = get_payload().get('status')
    try:
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error updating status of patient {patient_id}: {e}")
        return 'An error occurred', 500

    return 'Patient status updated', 200
