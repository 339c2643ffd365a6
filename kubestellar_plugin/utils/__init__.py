# Utility functions
from .helpers import now_rfc3339, read_json_object
from .rwlock import ReadWriteLock

__all__ = [
    'now_rfc3339', 'read_json_object',
    'ReadWriteLock',
]
