# /clinic/models/base.py
import uuid
from datetime import date, datetime
from clinic.extensions import db


def new_id():
    return uuid.uuid4().hex


class DocumentMixin:
    """Columns shared by every stored record.

    Ids are opaque strings so that a record keeps a unique id across the
    collections it may be moved between (e.g. the appointment lifecycle).
    """
    id = db.Column(db.String(32), primary_key=True, default=new_id)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        data = {}
        for column in self.__table__.columns:
            value = getattr(self, column.name)
            if isinstance(value, (date, datetime)):
                value = value.isoformat()
            data[column.name] = value
        return data

    def __repr__(self):
        return f'<{type(self).__name__} {self.id}>'
