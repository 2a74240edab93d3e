"""
Constants Package

Exports the validation whitelists and calendar constants.
"""

from .validation import TIME_SLOTS, VALID_TIME_SLOTS, DAYS_OF_WEEK, MAX_LENGTHS

__all__ = [
    'TIME_SLOTS',
    'VALID_TIME_SLOTS',
    'DAYS_OF_WEEK',
    'MAX_LENGTHS',
]
