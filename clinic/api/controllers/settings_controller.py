from flask import request, jsonify, redirect, url_for, render_template, current_app, send_from_directory
from clinic.extensions import db
from clinic.models import Clinic, Doctor, SocialMediaSettings, DoctorPhoto, ClinicPhoto
from clinic.models.clinic_models import ADDRESS_FIELDS
from clinic.utils.upload_util import photo_storage

CLINIC_FIELDS = ['name', 'address', 'email', 'phone', 'state', 'city', 'clinic_type', 'clinic_message',
                 'alt_email', 'user_name', 'registration_email']
DOCTOR_FIELDS = ['id_number', 'first_name', 'last_name', 'email', 'tel', 'company', 'company_website',
                 'specialty', 'experience', 'schedule']


def _back_to_settings():
    return redirect(url_for('api.account_settings_page'))


def account_settings_page():
    return render_template('account_settings.html')


def save_clinic_info():
    """Makes the submitted clinic the only clinic on record."""
    data = request.form.to_dict()
    id_number = data.get('id_number')
    if not id_number:
        return jsonify({'error': 'Missing required id_number'}), 400

    try:
        clinic = Clinic.query.filter_by(id_number=id_number).first()
        if clinic is None:
            clinic = Clinic(id_number=id_number)
            db.session.add(clinic)
        for field in CLINIC_FIELDS:
            setattr(clinic, field, data.get(field))

        for stale in Clinic.query.filter(Clinic.id_number != id_number).all():
            for doctor in list(stale.doctors):
                doctor.clinic = clinic
            db.session.delete(stale)
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error saving clinic info: {e}")
        return 'Internal Server Error', 500

    return _back_to_settings()


def save_doctor_info():
    """Overwrites the doctor record with the submitted profile."""
    data = request.form.to_dict()
    doctor = Doctor.query.first()
    if doctor is None:
        doctor = Doctor()
        db.session.add(doctor)

    for field in DOCTOR_FIELDS:
        setattr(doctor, field, data.get(field) or None)
    doctor.username = doctor.email
    doctor.address = {field: data.get(field) for field in ADDRESS_FIELDS}
    clinic = Clinic.query.first()
    doctor.clinic_id = clinic.id if clinic else None

    try:
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error saving doctor info: {e}")
        return 'Internal Server Error', 500

    return _back_to_settings()


def save_social_media():
    data = request.form.to_dict()
    settings = SocialMediaSettings.query.first()
    if settings is None:
        settings = SocialMediaSettings()
        db.session.add(settings)

    settings.facebook = data.get('facebook')
    settings.twitter = data.get('twitter')
    settings.linked_in = data.get('linked_in')

    try:
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error saving social media settings: {e}")
        return 'Internal Server Error', 500

    return _back_to_settings()


def _save_photo(model, field_name):
    result = photo_storage.save_photo(request.files.get(field_name))
    if not result['success']:
        return jsonify({'error': result['error']}), 400

    db.session.add(model(path=result['path']))
    try:
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error saving {field_name}: {e}")
        return 'Internal Server Error', 500

    current_app.logger.info(f"Saved {field_name} to {result['path']}")
    return _back_to_settings()


def upload_doctor_photo():
    return _save_photo(DoctorPhoto, 'doctor_photo')


def upload_clinic_photo():
    return _save_photo(ClinicPhoto, 'clinic_photo')


def uploaded_file(filename):
    return send_from_directory(current_app.config['UPLOAD_FOLDER'], filename)
