from flask import jsonify, render_template, current_app, Response
from clinic.extensions import db
from clinic.models import Contact
from clinic.notifications import contact_channel
from clinic.utils.forms import get_form_data

REQUIRED_FIELDS = ['name', 'email', 'tel', 'message']


def _unviewed_count():
    return Contact.query.filter_by(viewed=False).count()


def contact_requests_page():
    """Shows contact requests and marks the new ones as seen."""
    try:
        Contact.query.filter_by(viewed=False).update({'viewed': True})
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error marking contacts as viewed: {e}")
    else:
        contact_channel.publish(_unviewed_count(), event='count')

    return render_template(
        'contact.html',
        persons_to_contact=Contact.query.filter_by(contacted=False).order_by(Contact.created_at).all(),
        contacted_persons=Contact.query.filter_by(contacted=True).order_by(Contact.created_at).all(),
    )


def contact_count():
    return jsonify({'count': _unviewed_count()}), 200


def submit_contact():
    form_data = get_form_data()
    if not form_data or any(not form_data.get(field) for field in REQUIRED_FIELDS):
        return jsonify({'error': 'Missing required contact fields'}), 400

    contact = Contact(**{field: form_data[field] for field in REQUIRED_FIELDS})
    db.session.add(contact)
    try:
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error saving contact: {e}")
        return jsonify({'error': 'Internal server error'}), 500

    contact_channel.publish(contact.to_dict())
    contact_channel.publish(_unviewed_count(), event='count')
    return jsonify({'message': 'Contact saved successfully'}), 200


def toggle_contacted(contact_id):
    contact = db.session.get(Contact, contact_id)
    if not contact:
        return jsonify({'success': False, 'message': 'Person not found.'}), 200

    contact.contacted = not contact.contacted
    try:
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error toggling contact {contact_id}: {e}")
        return jsonify({'success': False, 'message': 'Error toggling person connection.'}), 500

    return jsonify({'success': True}), 200


def delete_contact(contact_id):
    contact = db.session.get(Contact, contact_id)
    if not contact:
        return jsonify({'success': False, 'message': 'Contact not found.'}), 200

    try:
        db.session.delete(contact)
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error deleting contact {contact_id}: {e}")
        return jsonify({'success': False, 'message': 'Error deleting contact.'}), 500

    return jsonify({'success': True}), 200


def contact_stream():
    return Response(
        contact_channel.stream(keepalive=current_app.config['SSE_KEEPALIVE_SECONDS']),
        mimetype='text/event-stream',
        headers={'Cache-Control': 'no-cache'},
    )
