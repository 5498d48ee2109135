from flask import jsonify, render_template, current_app, Response
from clinic.extensions import db
from clinic.models import Review
from clinic.notifications import review_channel
from clinic.utils.forms import get_form_data

REQUIRED_FIELDS = ['rating', 'name', 'profession', 'city', 'review']


def _unviewed_count():
    return Review.query.filter_by(viewed=False).count()


def reviews_page():
    """Shows all reviews and marks the new ones as seen."""
    try:
        Review.query.filter_by(viewed=False).update({'viewed': True})
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error marking reviews as viewed: {e}")
    else:
        review_channel.publish(_unviewed_count(), event='count')

    return render_template(
        'reviews.html',
        active_reviews=Review.query.filter_by(active=True).order_by(Review.created_at).all(),
        inactive_reviews=Review.query.filter_by(active=False).order_by(Review.created_at).all(),
    )


def review_count():
    return jsonify({'count': _unviewed_count()}), 200


def submit_review():
    form_data = get_form_data()
    if not form_data or any(not form_data.get(field) for field in REQUIRED_FIELDS):
        return jsonify({'error': 'Missing required review fields'}), 400

    try:
        rating = int(form_data['rating'])
    except (TypeError, ValueError):
        return jsonify({'error': 'Rating must be a number'}), 400
    if not 1 <= rating <= 5:
        return jsonify({'error': 'Rating must be between 1 and 5'}), 400

    review = Review(
        rating=rating,
        name=form_data['name'],
        profession=form_data['profession'],
        city=form_data['city'],
        review=form_data['review'],
    )
    db.session.add(review)
    try:
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error saving review: {e}")
        return jsonify({'error': 'Internal server error'}), 500

    review_channel.publish(review.to_dict())
    review_channel.publish(_unviewed_count(), event='count')
    return jsonify({'message': 'Review saved successfully'}), 200


def toggle_active(review_id):
    review = db.session.get(Review, review_id)
    if not review:
        return jsonify({'success': False, 'message': 'Review not found.'}), 200

    review.active = not review.active
    try:
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error toggling review {review_id}: {e}")
        return jsonify({'success': False, 'message': 'Error toggling review activation.'}), 500

    return jsonify({'success': True}), 200


def delete_review(review_id):
    review = db.session.get(Review, review_id)
    if not review:
        return jsonify({'success': False, 'message': 'Review not found.'}), 200

    try:
        db.session.delete(review)
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error deleting review {review_id}: {e}")
        return jsonify({'success': False, 'message': 'Error deleting review.'}), 500

    return jsonify({'success': True}), 200


def review_stream():
    return Response(
        review_channel.stream(keepalive=current_app.config['SSE_KEEPALIVE_SECONDS']),
        mimetype='text/event-stream',
        headers={'Cache-Control': 'no-cache'},
    )
