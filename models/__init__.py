"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db

from .user import User
from .meal import Meal

__all__ = [
    'db',
    'User',
    'Meal',
]
