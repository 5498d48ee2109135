import queue
import pytest
from unittest.mock import patch
from sqlalchemy.exc import SQLAlchemyError
from clinic.extensions import db
from clinic.models import Review, Contact
from clinic.models.feedback_models import generate_stars
from clinic.notifications import review_channel, contact_channel, format_event

REVIEW = {'rating': 4, 'name': 'Tom', 'profession': 'Chef', 'city': 'Lyon', 'review': 'Great care'}
CONTACT = {'name': 'Eva', 'email': 'eva@example.com', 'tel': '555-0199', 'message': 'Call me back'}


def test_generate_stars():
    assert generate_stars(3) == '★ ★ ★ ☆ ☆ '
    assert generate_stars(0) == '☆ ☆ ☆ ☆ ☆ '
    assert generate_stars(5).count('★') == 5


def test_submit_review_saves_and_broadcasts(client):
    subscriber = review_channel.subscribe()
    try:
        response = client.post('/rate', json={'formData': REVIEW})

        assert response.status_code == 200
        review = Review.query.one()
        assert review.active is False
        assert review.viewed is False

        frame = subscriber.get_nowait()
        assert frame.startswith('data: ')
        assert '"name": "Tom"' in frame
        assert '"stars": "\\u2605' in frame
        assert subscriber.get_nowait() == format_event(1, event='count')
    finally:
        review_channel.unsubscribe(subscriber)


def test_submit_review_validation(client):
    assert client.post('/rate', json={'formData': {**REVIEW, 'review': ''}}).status_code == 400
    assert client.post('/rate', json={'formData': {**REVIEW, 'rating': 9}}).status_code == 400
    assert client.post('/rate', json={}).status_code == 400
    assert Review.query.count() == 0


def test_review_count_and_reviews_page_marks_viewed(client):
    client.post('/rate', json={'formData': REVIEW})
    client.post('/rate', json={'formData': {**REVIEW, 'name': 'Ann'}})
    assert client.get('/reviews/count').get_json() == {'count': 2}

    subscriber = review_channel.subscribe()
    try:
        response = client.get('/reviews')
        assert response.status_code == 200
        assert b'Great care' in response.data
        assert subscriber.get_nowait() == format_event(0, event='count')
    finally:
        review_channel.unsubscribe(subscriber)

    assert client.get('/reviews/count').get_json() == {'count': 0}


def test_reviews_page_still_renders_when_marking_viewed_fails(client):
    client.post('/rate', json={'formData': REVIEW})

    subscriber = review_channel.subscribe()
    try:
        with patch.object(db.session, 'commit', side_effect=SQLAlchemyError('disk full')):
            response = client.get('/reviews')
        assert response.status_code == 200
        assert b'Great care' in response.data
        with pytest.raises(queue.Empty):
            subscriber.get_nowait()
    finally:
        review_channel.unsubscribe(subscriber)

    assert Review.query.one().viewed is False


def test_feedback_forms_reject_json_array_body(client):
    assert client.post('/rate', json=[REVIEW]).status_code == 400
    assert client.post('/contact', json=[CONTACT]).status_code == 400
    assert Review.query.count() == 0
    assert Contact.query.count() == 0


def test_toggle_and_delete_review(client):
    client.post('/rate', json={'formData': REVIEW})
    review = Review.query.one()

    assert client.post(f'/active-review/{review.id}').get_json() == {'success': True}
    assert db.session.get(Review, review.id).active is True

    landing = client.get('/')
    assert b'Great care' in landing.data

    assert client.delete(f'/delete-review/{review.id}').get_json() == {'success': True}
    assert client.post(f'/active-review/{review.id}').get_json()['success'] is False
    assert client.delete(f'/delete-review/{review.id}').get_json()['success'] is False


def test_submit_contact_saves_and_broadcasts(client):
    subscriber = contact_channel.subscribe()
    try:
        response = client.post('/contact', json={'formData': CONTACT})

        assert response.status_code == 200
        assert Contact.query.one().contacted is False
        assert '"email": "eva@example.com"' in subscriber.get_nowait()
        assert subscriber.get_nowait() == format_event(1, event='count')
    finally:
        contact_channel.unsubscribe(subscriber)


def test_submit_contact_requires_all_fields(client):
    response = client.post('/contact', json={'formData': {**CONTACT, 'tel': ''}})

    assert response.status_code == 400
    assert Contact.query.count() == 0


def test_contact_requests_page_and_toggle(client):
    client.post('/contact', json={'formData': CONTACT})
    contact = Contact.query.one()
    assert client.get('/contacts/count').get_json() == {'count': 1}

    assert client.get('/contact-requests').status_code == 200
    assert client.get('/contacts/count').get_json() == {'count': 0}

    assert client.post(f'/contact-person/{contact.id}').get_json() == {'success': True}
    assert db.session.get(Contact, contact.id).contacted is True
    assert client.delete(f'/delete-contact/{contact.id}').get_json() == {'success': True}
    assert client.post(f'/contact-person/{contact.id}').get_json()['success'] is False
