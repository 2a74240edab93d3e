"""
Database Base Module

Holds the SQLAlchemy instance shared by the User and Meal models.
Kept apart from app.py so models and services can import it without a cycle.
"""

from flask_sqlalchemy import SQLAlchemy

# Bound to the Flask app in app.py via db.init_app
db = SQLAlchemy()
