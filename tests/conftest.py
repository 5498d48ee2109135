import pytest
from clinic import create_app
from clinic.extensions import db
from clinic.models import Patient, Appointment, Invoice, InvoiceItem, Doctor


@pytest.fixture
def app(tmp_path):
    app = create_app('testing')
    app.config['UPLOAD_FOLDER'] = str(tmp_path / 'uploads')

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner(app):
    return app.test_cli_runner()


@pytest.fixture
def patient(app):
    patient = Patient(id_number='P-100', first_name='Maria', last_name='Lopez', email='maria@example.com',
                      tel='555-0100')
    db.session.add(patient)
    db.session.commit()
    return patient


@pytest.fixture
def doctor(app):
    doctor = Doctor(first_name='Gregory', last_name='House', email='house@example.com',
                    address={'street': '221B Main St', 'city': 'Princeton', 'state': 'NJ',
                             'zip_code': '08540', 'country': 'USA', 'time_zone': 'EST'})
    db.session.add(doctor)
    db.session.commit()
    return doctor


@pytest.fixture
def appointment(app):
    appointment = Appointment(id_number='A-7', first_name='John', last_name='Smith', service='Checkup',
                              date='2024-05-02', time='10:00', tel='555-0123', gender='Male')
    db.session.add(appointment)
    db.session.commit()
    return appointment


@pytest.fixture
def invoice(patient):
    invoice = Invoice(invoice_id='#abc123', full_name=patient.full_name, email=patient.email,
                      invoice_date='2024-05-01', terms='Payment due within 30 days', amount_paid=20.0)
    invoice.items.append(InvoiceItem(position=0, item_name='Consultation', description='First visit',
                                     unit_cost=50.0, quantity=2))
    invoice.compute_totals()
    patient.invoices.append(invoice)
    db.session.commit()
    return invoice
