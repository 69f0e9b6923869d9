"""
Utility modules for the binding
"""
from .futures import deliver, rejected
from .normalizers import coerce_int, normalize_date, normalize_notes

__all__ = [
    'deliver',
    'rejected',
    'coerce_int',
    'normalize_date',
    'normalize_notes',
]
