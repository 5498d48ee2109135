from flask import request, jsonify, redirect, url_for, render_template, current_app, Response
from clinic.extensions import db
from clinic.models import Invoice, InvoiceItem, Patient, Doctor
from clinic.notifications import general_channel
from clinic.utils.email_util import send_invoice_email
from clinic.utils.forms import get_payload, get_items, parse_float
from clinic.utils.pdf_util import render_invoice_pdf


def invoices_page():
    invoices = Invoice.query.order_by(Invoice.created_at.desc()).limit(10).all()
    patients = Patient.query.filter(Patient.invoices.any()).order_by(Patient.created_at).all()
    return render_template('invoices.html', invoices=invoices, patients=patients)


def create_invoice_page():
    return render_template('create_invoice.html')


def get_invoice(invoice_id):
    invoice = db.session.get(Invoice, invoice_id)
    if not invoice:
        return jsonify({'message': 'Invoice not found'}), 404
    return jsonify(invoice.to_dict()), 200


def create_invoice(patient_id):
    """
    Adds an invoice to a patient.

    The total is the sum of unit cost times quantity over the items; the
    invoice is "Pending" while anything is left to pay.
    """
    patient = db.session.get(Patient, patient_id)
    if not patient:
        return jsonify({'error': 'Patient not found'}), 404

    data = get_payload()
    invoice = Invoice(
        full_name=data.get('full_name') or patient.full_name,
        email=data.get('email') or patient.email,
        invoice_date=data.get('invoice_date'),
        terms=data.get('terms'),
        terms_and_conditions=data.get('terms_and_conditions'),
        amount_paid=parse_float(data.get('amount_paid'), 0.0),
    )
    for position, item in enumerate(get_items()):
        invoice.items.append(InvoiceItem(
            position=position,
            item_name=item.get('item_name'),
            description=item.get('description'),
            unit_cost=parse_float(item.get('unit_cost'), 0.0),
            quantity=parse_float(item.get('quantity'), 0.0),
        ))
    invoice.compute_totals()
    patient.invoices.append(invoice)

    try:
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error saving invoice for patient {patient_id}: {e}")
        return 'Error saving invoice', 500

    current_app.logger.info(f"Invoice {invoice.invoice_id} added to patient {patient_id}")
    return redirect(url_for('api.patient_profile_page', id=patient.id))


def delete_invoice(invoice_id):
    invoice = db.session.get(Invoice, invoice_id)
    if not invoice:
        return jsonify({'success': False, 'message': 'Invoice not found.'}), 200

    try:
        db.session.delete(invoice)
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error deleting invoice {invoice_id}: {e}")
        return jsonify({'success': False, 'message': 'Error deleting invoice.'}), 500

    return jsonify({'success': True}), 200


def _render_requested_invoice():
    """Looks up the invoice and patient named in the request and renders the PDF."""
    data = get_payload()
    invoice = db.session.get(Invoice, data.get('invoice_id') or '')
    if not invoice:
        return None, (jsonify({'error': 'Invoice not found'}), 404)
    patient = db.session.get(Patient, data.get('patient_id') or '') or invoice.patient
    if not patient:
        return None, (jsonify({'error': 'Patient not found'}), 404)

    pdf_data = render_invoice_pdf(
        invoice, patient, Doctor.query.first(),
        sender_name=current_app.config['INVOICE_SENDER_NAME'],
        logo_path=current_app.config['INVOICE_LOGO_PATH'],
    )
    return (invoice, patient, pdf_data), None


def generate_pdf():
    """Renders the invoice and mails it to the patient."""
    rendered, error = _render_requested_invoice()
    if error:
        return error
    invoice, patient, pdf_data = rendered

    if not send_invoice_email(patient.email, pdf_data):
        return jsonify({'success': False, 'message': 'Failed to send invoice email'}), 502

    general_channel.publish('Email sent successfully')
    return jsonify({'success': True, 'message': f'Invoice {invoice.invoice_id} sent to {patient.email}'}), 200


def download_pdf():
    rendered, error = _render_requested_invoice()
    if error:
        return error
    _, _, pdf_data = rendered

    return Response(
        pdf_data,
        mimetype='application/pdf',
        headers={'Content-Disposition': 'attachment; filename=invoice.pdf'},
    )


def general_stream():
    return Response(
        general_channel.stream(greeting='Welcome to the SSE endpoint',
                               keepalive=current_app.config['SSE_KEEPALIVE_SECONDS']),
        mimetype='text/event-stream',
        headers={'Cache-Control': 'no-cache'},
    )
