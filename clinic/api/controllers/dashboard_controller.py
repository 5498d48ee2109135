from flask import render_template
from clinic.models import Review, Appointment
from clinic.models.appointment_models import HOURS_LIST


def landing_page():
    """Public landing page: booking widget, active testimonials and taken slots."""
    return render_template(
        'landing_page.html',
        hours_list=HOURS_LIST,
        appointments=Appointment.query.all(),
        active_reviews=Review.query.filter_by(active=True).order_by(Review.created_at).all(),
    )


def dashboard_page():
    return render_template('index.html')


def doctor_profile_page():
    return render_template('doctor_profile.html')
