# /clinic/utils/forms.py
import re
from datetime import datetime
from flask import request

TRUTHY = {'on', 'true', '1', 'yes'}

_ITEM_KEY = re.compile(r'^items\[(\d+)\]\[(\w+)\]$')


def is_checked(value):
    """Checkbox semantics: an absent or unticked box is False."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in TRUTHY


def parse_float(value, default=None):
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def parse_date(value):
    """Parses an HTML date input (YYYY-MM-DD); anything else yields None."""
    if not value:
        return None
    try:
        return datetime.strptime(str(value)[:10], '%Y-%m-%d').date()
    except ValueError:
        return None


def get_payload():
    """Returns submitted data from a JSON body or an HTML form."""
    if request.is_json:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}
    return request.form.to_dict()


def get_form_data():
    """The landing page widgets post JSON shaped as {"formData": {...}}."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None
    form_data = data.get('formData')
    return form_data if isinstance(form_data, dict) else None


def get_items():
    """Invoice line items from a JSON list or ``items[N][field]`` form keys."""
    if request.is_json:
        data = request.get_json(silent=True)
        items = data.get('items') if isinstance(data, dict) else None
        if not isinstance(items, list):
            return []
        return [item for item in items if isinstance(item, dict)]

    rows = {}
    for key, value in request.form.items():
        match = _ITEM_KEY.match(key)
        if match:
            index, field = match.groups()
            rows.setdefault(int(index), {})[field] = value
    return [rows[index] for index in sorted(rows)]
