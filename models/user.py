"""
User Model

Contains the User model backing account signup and login.
"""

from .base import db


class User(db.Model):
    """Account with a hashed password. Emails are stored lower-cased."""
    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(254), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())
    meals = db.relationship('Meal', backref='owner', lazy=True)
