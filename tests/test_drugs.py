from datetime import date
from clinic.models import Drug

DRUG = {'id_number': 'DR-1', 'drug_name': 'Amoxicillin', 'category': 'Antibiotic', 'company_name': 'Pharma',
        'purchase_date': '2024-01-10', 'expired_date': '2026-01-10', 'price': '12', 'expense': '2.5',
        'stock': '40', 'employee_name': 'Jo'}


def test_add_drug_computes_purchase_cost(client):
    response = client.post('/add-drug', data=DRUG)

    assert response.status_code == 302
    assert response.headers['Location'].endswith('/drugs')
    drug = Drug.query.one()
    assert drug.purchase_cost == 100.0
    assert drug.expired_date == date(2026, 1, 10)


def test_add_drug_upserts_by_id_number(client):
    client.post('/add-drug', data=DRUG)
    client.post('/add-drug', data={**DRUG, 'stock': '10'})

    drug = Drug.query.one()
    assert drug.stock == 10.0
    assert drug.purchase_cost == 25.0


def test_add_drug_rejects_non_numeric_values(client):
    response = client.post('/add-drug', data={**DRUG, 'expense': 'cheap'})

    assert response.status_code == 400
    assert Drug.query.count() == 0


def test_get_and_delete_drug(client):
    client.post('/add-drug', data=DRUG)
    drug = Drug.query.one()

    assert client.get(f'/api/drug/{drug.id}').get_json()['drug_name'] == 'Amoxicillin'
    assert client.get('/api/drug/missing').status_code == 404

    assert client.delete(f'/delete-drug/{drug.id}').get_json() == {'success': True}
    assert client.delete(f'/delete-drug/{drug.id}').get_json()['success'] is False


def test_drug_pages(client):
    client.post('/add-drug', data=DRUG)

    assert b'Amoxicillin' in client.get('/drugs').data
    assert client.get('/add-drug').status_code == 200
