"""
Meal Model

Contains the Meal model: one recorded meal owned by one user.
"""

from .base import db


class Meal(db.Model):
    """A meal tagged with the time of day it is eaten."""
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    ingredients = db.Column(db.Text, default='')  # comma-delimited free text
    time_slot = db.Column(db.String(20), nullable=False, index=True)  # 'Breakfast', 'Lunch', 'Dinner'
    user_id = db.Column(db.Integer, db.ForeignKey('user.id', ondelete='CASCADE'), nullable=False, index=True)
    created_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())

    def __repr__(self):
        return f'<Meal {self.id} {self.name!r} ({self.time_slot})>'
