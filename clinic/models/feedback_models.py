# /clinic/models/feedback_models.py
from clinic.extensions import db
from clinic.models.base import DocumentMixin

FILLED_STAR = '★'
EMPTY_STAR = '☆'


def generate_stars(rating, scale=5):
    """Renders a rating as filled and empty stars, e.g. ``★ ★ ★ ☆ ☆ ``."""
    rating = rating or 0
    return ''.join(
        (FILLED_STAR if position <= rating else EMPTY_STAR) + ' '
        for position in range(1, scale + 1)
    )


class Review(DocumentMixin, db.Model):
    """A testimonial left on the landing page; shown publicly once activated."""
    __tablename__ = 'reviews'

    rating = db.Column(db.Integer, nullable=False)
    name = db.Column(db.String(120), nullable=False)
    profession = db.Column(db.String(120), nullable=False)
    city = db.Column(db.String(120), nullable=False)
    review = db.Column(db.Text, nullable=False)
    active = db.Column(db.Boolean, default=False, nullable=False)
    viewed = db.Column(db.Boolean, default=False, nullable=False)

    @property
    def stars(self):
        return generate_stars(self.rating)

    def to_dict(self):
        data = super().to_dict()
        data['stars'] = self.stars
        return data


class Contact(DocumentMixin, db.Model):
    """A contact request submitted from the landing page."""
    __tablename__ = 'contacts'

    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    tel = db.Column(db.String(64), nullable=False)
    message = db.Column(db.Text, nullable=False)
    contacted = db.Column(db.Boolean, default=False, nullable=False)
    viewed = db.Column(db.Boolean, default=False, nullable=False)
