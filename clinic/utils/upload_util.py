# /clinic/utils/upload_util.py
import os
import time
from flask import current_app
from werkzeug.utils import secure_filename

ALLOWED_IMAGE_EXTENSIONS = {'jpg', 'jpeg', 'png', 'gif'}


class PhotoStorage:
    """Saves uploaded doctor and clinic photos to the upload folder on disk."""

    def __init__(self, app=None):
        if app:
            self.init_app(app)

    def init_app(self, app):
        """Creates the upload folder from the app config."""
        os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)

    def save_photo(self, file):
        """
        Store an uploaded image.

        Args:
            file: The uploaded ``FileStorage``.

        Returns:
            dict: ``{'success': True, 'path': ...}`` or ``{'success': False, 'error': ...}``
        """
        if not file or file.filename == '':
            return {'success': False, 'error': 'No file provided'}

        if not self._is_allowed_file(file.filename):
            return {'success': False, 'error': 'Only image files are allowed!'}

        filename = f"{int(time.time() * 1000)}-{secure_filename(file.filename)}"
        upload_folder = current_app.config['UPLOAD_FOLDER']
        path = os.path.join(upload_folder, filename)
        try:
            os.makedirs(upload_folder, exist_ok=True)
            file.save(path)
        except OSError as e:
            current_app.logger.error(f"Photo upload error: {str(e)}")
            return {'success': False, 'error': 'Failed to save image'}

        return {'success': True, 'path': path, 'filename': filename}

    def _is_allowed_file(self, filename):
        return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_IMAGE_EXTENSIONS


photo_storage = PhotoStorage()
