import io
import os
from clinic.extensions import db
from clinic.models import Clinic, Doctor, SocialMediaSettings, DoctorPhoto, ClinicPhoto

CLINIC = {'id_number': 'C-1', 'name': 'Sunrise Clinic', 'address': '1 Elm St', 'email': 'info@sunrise.test',
          'phone': '555-1000', 'city': 'Austin', 'state': 'TX', 'clinic_type': 'Orthopedic'}
DOCTOR = {'id_number': 'D-1', 'first_name': 'Sara', 'last_name': 'Kim', 'email': 'sara@sunrise.test',
          'specialty': 'Orthopedics', 'street': '1 Elm St', 'city': 'Austin', 'zip_code': '73301'}


def test_clinic_info_replaces_other_clinics(client):
    db.session.add(Clinic(id_number='OLD', name='Old Clinic'))
    db.session.commit()

    response = client.post('/clinic-info', data=CLINIC)
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/account-settings')

    clinic = Clinic.query.one()
    assert clinic.id_number == 'C-1'
    assert clinic.name == 'Sunrise Clinic'

    client.post('/clinic-info', data={**CLINIC, 'name': 'Sunrise Bone & Joint'})
    assert Clinic.query.one().name == 'Sunrise Bone & Joint'


def test_doctor_info_overwrites_single_record(client):
    client.post('/doctor-info', data=DOCTOR)
    client.post('/doctor-info', data={'first_name': 'Ben', 'email': 'ben@sunrise.test'})

    doctor = Doctor.query.one()
    assert doctor.first_name == 'Ben'
    assert doctor.username == 'ben@sunrise.test'
    assert doctor.specialty is None
    assert doctor.address['city'] is None


def test_doctor_info_address_and_clinic(client):
    client.post('/clinic-info', data=CLINIC)
    client.post('/doctor-info', data=DOCTOR)

    doctor = Doctor.query.one()
    assert doctor.address['street'] == '1 Elm St'
    assert doctor.address['zip_code'] == '73301'
    assert doctor.clinic.name == 'Sunrise Clinic'
    assert Clinic.query.one().doctors == [doctor]


def test_social_media_upsert(client):
    client.post('/social-media', data={'facebook': 'fb/clinic', 'twitter': 't/clinic', 'linked_in': 'li/clinic'})
    client.post('/social-media', data={'facebook': 'fb/new', 'twitter': '', 'linked_in': 'li/clinic'})

    settings = SocialMediaSettings.query.one()
    assert settings.facebook == 'fb/new'
    assert settings.linked_in == 'li/clinic'


def test_upload_doctor_photo(client, app):
    response = client.post('/doctor-photos', data={'doctor_photo': (io.BytesIO(b'fake-png'), 'me.png')},
                           content_type='multipart/form-data')

    assert response.status_code == 302
    photo = DoctorPhoto.query.one()
    assert os.path.dirname(photo.path) == app.config['UPLOAD_FOLDER']
    assert photo.path.endswith('-me.png')
    assert os.path.exists(photo.path)

    filename = os.path.basename(photo.path)
    served = client.get(f'/uploads/{filename}')
    assert served.data == b'fake-png'
    served.close()

    page = client.get('/account-settings')
    assert filename.encode() in page.data


def test_upload_rejects_non_images(client):
    response = client.post('/clinic-photos', data={'clinic_photo': (io.BytesIO(b'MZ'), 'virus.exe')},
                           content_type='multipart/form-data')

    assert response.status_code == 400
    assert response.get_json() == {'error': 'Only image files are allowed!'}
    assert ClinicPhoto.query.count() == 0


def test_upload_requires_a_file(client):
    response = client.post('/clinic-photos', data={}, content_type='multipart/form-data')

    assert response.status_code == 400


def test_settings_pages_render(client, doctor):
    client.post('/clinic-info', data=CLINIC)

    page = client.get('/account-settings')
    assert page.status_code == 200
    assert b'Sunrise Clinic' in page.data

    profile = client.get('/doctor-profile')
    assert b'Gregory House' in profile.data
    assert b'Princeton' in profile.data
