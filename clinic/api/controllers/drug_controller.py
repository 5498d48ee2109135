from flask import jsonify, redirect, url_for, render_template, current_app
from clinic.extensions import db
from clinic.models import Drug
from clinic.utils.forms import get_payload, parse_float, parse_date


def drugs_page():
    drugs = Drug.query.order_by(Drug.created_at).all()
    return render_template('drugs.html', drugs=drugs)


def add_drug_page():
    return render_template('add_drug.html')


def get_drug(drug_id):
    drug = db.session.get(Drug, drug_id)
    if not drug:
        return jsonify({'error': 'Drug not found'}), 404
    return jsonify(drug.to_dict()), 200


def add_drug():
    """Adds a drug to the inventory or updates the one with the same id number."""
    data = get_payload()
    if not data.get('id_number'):
        return jsonify({'error': 'Missing required id_number'}), 400

    expense = parse_float(data.get('expense'))
    stock = parse_float(data.get('stock'))
    if expense is None or stock is None:
        return jsonify({'error': 'Invalid expense or stock value'}), 400

    drug = Drug.query.filter_by(id_number=data['id_number']).first()
    if drug is None:
        drug = Drug(id_number=data['id_number'])
        db.session.add(drug)

    drug.drug_name = data.get('drug_name')
    drug.category = data.get('category')
    drug.company_name = data.get('company_name')
    drug.purchase_date = parse_date(data.get('purchase_date'))
    drug.expired_date = parse_date(data.get('expired_date'))
    drug.price = data.get('price')
    drug.expense = expense
    drug.stock = stock
    drug.description = data.get('description')
    drug.employee_name = data.get('employee_name')
    drug.purchase_cost = expense * stock

    try:
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error saving drug {data['id_number']}: {e}")
        return 'Server Error', 500

    return redirect(url_for('api.drugs_page'))


def delete_drug(drug_id):
    drug = db.session.get(Drug, drug_id)
    if not drug:
        return jsonify({'success': False, 'message': 'Drug not found.'}), 200

    try:
        db.session.delete(drug)
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error deleting drug {drug_id}: {e}")
        return jsonify({'success': False, 'message': 'Error deleting drug.'}), 500

    return jsonify({'success': True}), 200
