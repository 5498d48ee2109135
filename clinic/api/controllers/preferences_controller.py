from flask import jsonify, redirect, url_for, current_app
from clinic.extensions import db
from clinic.models import UserPreferences
from clinic.utils.forms import get_payload, is_checked

# Switches of the settings panel, stored as booleans.
TOGGLE_FIELDS = ['theme_rtl', 'h_menu', 'header_fixed', 'header_dark_mode', 'border_radius', 'sidebar_dark',
                 'check_image', 'fluid_layout', 'card_shadow']


def get_theme():
    prefs = UserPreferences.query.order_by(UserPreferences.created_at).first()
    return jsonify({'theme': prefs.to_dict() if prefs else None}), 200


def update_theme():
    theme_value = get_payload().get('theme_value')
    prefs = UserPreferences.get_or_create()
    if prefs.theme_value == theme_value:
        return jsonify(prefs.theme_value), 200

    prefs.theme_value = theme_value
    try:
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error updating theme: {e}")
        return jsonify({'message': 'Internal server error'}), 500

    return jsonify(prefs.to_dict()), 200


def update_sidebar():
    prefs = UserPreferences.get_or_create()
    prefs.sidebar_mini = is_checked(get_payload().get('sidebar_mini'))
    try:
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error updating sidebar: {e}")
        return jsonify({'message': 'Internal server error'}), 500

    return jsonify(prefs.to_dict()), 200


def update_preferences():
    """Saves the settings panel. An empty picture or theme value keeps the stored one."""
    data = get_payload()
    prefs = UserPreferences.get_or_create()

    prefs.theme = data.get('theme')
    prefs.font = data.get('font')
    prefs.theme_value = data.get('theme_value') or prefs.theme_value
    prefs.pic = data.get('pic') or prefs.pic
    for field in TOGGLE_FIELDS:
        setattr(prefs, field, is_checked(data.get(field)))

    try:
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error saving user preferences: {e}")
        return jsonify({'message': 'Internal server error'}), 500

    return redirect(url_for('api.dashboard_page'))


def switch_language(lang):
    prefs = UserPreferences.query.order_by(UserPreferences.created_at).first()
    if prefs:
        prefs.language = lang
        try:
            db.session.commit()
        except Exception as e:
            db.session.rollback()
            current_app.logger.error(f"Error updating user language: {e}")

    return redirect(url_for('api.dashboard_page'))
