# /clinic/utils/error_handlers.py
from flask import jsonify, current_app, request
from clinic.extensions import db


def _wants_json():
    return request.path.startswith('/api/') or request.is_json or request.accept_mimetypes.best == 'application/json'


def register_error_handlers(app):
    @app.errorhandler(404)
    def not_found(error):
        if _wants_json():
            return jsonify({'error': 'Resource not found'}), 404
        return 'Not Found', 404

    @app.errorhandler(413)
    def too_large(error):
        return jsonify({'success': False, 'message': 'Uploaded file is too large'}), 413

    @app.errorhandler(429)
    def rate_limited(error):
        return jsonify({'error': 'Too many requests, please try again later'}), 429

    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        current_app.audit_logger.error(f"Internal server error: {str(error)}")
        return jsonify({'success': False, 'message': 'Internal server error'}), 500
