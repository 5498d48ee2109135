from unittest.mock import patch
from clinic.extensions import db
from clinic.models import Appointment, ApprovedAppointment, DeletedAppointment, Patient


def test_book_appointment_upserts_by_id_number(client):
    form = {'id_number': 'A-1', 'first_name': 'Lena', 'last_name': 'Ray', 'service': 'Dental',
            'date': '2024-06-01', 'time': '09:00', 'tel': '555'}

    response = client.post('/book-appointment', data=form)
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/book-appointment')

    client.post('/book-appointment', data={**form, 'time': '14:00'})
    appointment = Appointment.query.one()
    assert appointment.time == '14:00'
    assert appointment.first_name == 'Lena'


def test_book_appointment_links_the_doctor(client, doctor):
    client.post('/book-appointment', data={'id_number': 'A-2', 'first_name': 'Ed'})

    assert Appointment.query.one().doctor_id == doctor.id
    assert len(doctor.appointments) == 1


def test_online_booking(client):
    response = client.post('/online-appointment-booking', json={
        'formData': {'id_number': 'A-3', 'first_name': 'Kim', 'last_name': 'Lee', 'date': '2024-06-02',
                     'time': '10:00', 'email': 'kim@example.com'}
    })

    assert response.status_code == 200
    assert response.get_json() == {'message': 'Appointment saved successfully'}
    assert Appointment.query.one().email == 'kim@example.com'


def test_online_booking_requires_form_data(client):
    response = client.post('/online-appointment-booking', json={})

    assert response.status_code == 400
    assert Appointment.query.count() == 0


def test_update_appointment(client, appointment):
    response = client.post('/update-appointment', data={
        'appointment_id': appointment.id, 'id_number': 'A-7', 'first_name': 'John', 'last_name': 'Smith',
        'tel': '555-0123', 'service': 'X-ray', 'date': '2024-05-03', 'time': '15:00',
    })

    assert response.status_code == 302
    appointment = db.session.get(Appointment, appointment.id)
    assert appointment.service == 'X-ray'
    assert appointment.time == '15:00'


def test_approve_appointment_moves_it_and_creates_patient(client, appointment):
    response = client.post('/approve-appointment', data={'appointment_id': appointment.id})

    assert response.status_code == 302
    assert Appointment.query.count() == 0

    approved = ApprovedAppointment.query.one()
    assert approved.id_number == 'A-7'
    assert approved.service == 'Checkup'

    patient = Patient.query.filter_by(id_number='A-7').one()
    assert patient.status == 'Pending'
    assert patient.disease == 'Checkup'
    assert patient.gender == 'Male'


def test_approve_appointment_updates_existing_patient(client, appointment):
    db.session.add(Patient(id_number='A-7', first_name='Johnny', status='Treated'))
    db.session.commit()

    client.post('/approve-appointment', data={'appointment_id': appointment.id})

    patient = Patient.query.filter_by(id_number='A-7').one()
    assert patient.first_name == 'John'
    assert patient.status == 'Pending'


def test_approve_appointment_is_atomic(client, appointment):
    with patch.object(ApprovedAppointment, 'from_appointment', side_effect=RuntimeError('boom')):
        response = client.post('/approve-appointment', data={'appointment_id': appointment.id})

    assert response.status_code == 500
    assert Appointment.query.count() == 1
    assert ApprovedAppointment.query.count() == 0
    assert Patient.query.count() == 0


def test_approve_missing_appointment(client):
    response = client.post('/approve-appointment', data={'appointment_id': 'missing'})

    assert response.status_code == 404
    assert response.get_json()['success'] is False


def test_cancel_appointment(client, appointment):
    response = client.delete(f'/delete-appointment/{appointment.id}')

    assert response.get_json() == {'success': True}
    assert Appointment.query.count() == 0
    canceled = DeletedAppointment.query.one()
    assert canceled.first_name == 'John'
    assert canceled.tel == '555-0123'


def test_cancel_missing_appointment(client):
    response = client.delete('/delete-appointment/missing')

    assert response.status_code == 200
    assert response.get_json()['success'] is False


def test_delete_past_appointment(client, appointment):
    client.delete(f'/delete-appointment/{appointment.id}')
    canceled = DeletedAppointment.query.one()

    response = client.delete(f'/del-past-appointment/{canceled.id}')
    assert response.get_json() == {'success': True}
    assert DeletedAppointment.query.count() == 0

    response = client.delete(f'/del-past-appointment/{canceled.id}')
    assert response.get_json()['success'] is False


def test_get_appointment(client, appointment):
    response = client.get(f'/api/appointments/{appointment.id}')

    assert response.status_code == 200
    assert response.get_json()['first_name'] == 'John'
    assert client.get('/api/appointments/missing').status_code == 404


def test_appointment_pages(client, appointment):
    page = client.get('/book-appointment')
    assert page.status_code == 200
    assert b'John Smith' in page.data
    assert b'17:00' in page.data

    assert client.get('/approved-appointments').status_code == 200
    assert client.get('/canceled-appointments').status_code == 200
