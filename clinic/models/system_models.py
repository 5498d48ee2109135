# /clinic/models/system_models.py
from clinic.extensions import db
from clinic.models.base import DocumentMixin


class UserPreferences(DocumentMixin, db.Model):
    """Dashboard language, theme and layout settings (a single record)."""
    __tablename__ = 'user_preferences'

    language = db.Column(db.String(8), default='en', nullable=False)
    theme = db.Column(db.String(64))
    theme_value = db.Column(db.String(64))
    theme_rtl = db.Column(db.Boolean)
    sidebar_mini = db.Column(db.Boolean)
    font = db.Column(db.String(120))
    h_menu = db.Column(db.Boolean)
    header_fixed = db.Column(db.Boolean)
    header_dark_mode = db.Column(db.Boolean)
    border_radius = db.Column(db.Boolean)
    sidebar_dark = db.Column(db.Boolean)
    check_image = db.Column(db.Boolean)
    pic = db.Column(db.String(255))
    fluid_layout = db.Column(db.Boolean, default=True)
    card_shadow = db.Column(db.Boolean)

    @classmethod
    def get_or_create(cls):
        prefs = cls.query.order_by(cls.created_at).first()
        if prefs is None:
            prefs = cls()
            db.session.add(prefs)
        return prefs


class Todo(DocumentMixin, db.Model):
    __tablename__ = 'todos'

    text = db.Column(db.String(512), nullable=False)
    done = db.Column(db.Boolean, default=False, nullable=False)
