import os
from urllib.parse import quote
from flask import Flask
from clinic.extensions import db, migrate, limiter, cors
from clinic.utils.upload_util import photo_storage
from clinic.utils.error_handlers import register_error_handlers
from clinic.commands import register_commands
from config import config


def create_app(config_name=None):
    app = Flask(__name__)
    config_name = config_name or os.getenv('FLASK_CONFIG', 'default')
    app.config.from_object(config[config_name])

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    limiter.init_app(app)
    cors.init_app(app, origins=app.config['ALLOWED_ORIGINS'])

    # Initialize custom utilities
    photo_storage.init_app(app)

    # Initialize app with config
    config[config_name].init_app(app)

    # Register blueprints
    from clinic.api import api_bp
    app.register_blueprint(api_bp)

    # Register error handlers and commands
    register_error_handlers(app)
    register_commands(app)

    @app.context_processor
    def inject_layout_data():
        """Data every page of the back office shows in its layout."""
        from clinic.models import (Doctor, Clinic, SocialMediaSettings, UserPreferences, DoctorPhoto,
                                   ClinicPhoto, Todo, Review, Contact)

        doctor_photo = DoctorPhoto.query.order_by(DoctorPhoto.created_at.desc()).first()
        clinic_photo = ClinicPhoto.query.order_by(ClinicPhoto.created_at.desc()).first()
        return {
            'doctor': Doctor.query.first(),
            'clinic': Clinic.query.first(),
            'social': SocialMediaSettings.query.first(),
            'prefs': UserPreferences.query.order_by(UserPreferences.created_at).first(),
            'doctor_photo': quote(os.path.basename(doctor_photo.path)) if doctor_photo else None,
            'clinic_photo': quote(os.path.basename(clinic_photo.path)) if clinic_photo else None,
            'todos': Todo.query.order_by(Todo.created_at).all(),
            'review_count': Review.query.filter_by(viewed=False).count(),
            'contact_count': Contact.query.filter_by(viewed=False).count(),
        }

    return app
