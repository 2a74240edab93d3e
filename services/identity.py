"""
Identity Service

Account creation and credential checks. Callers get back an Identity
value and pass it explicitly to whatever needs to know who is asking.
"""

import logging
import re
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from werkzeug.security import check_password_hash, generate_password_hash

from constants import MAX_LENGTHS
from models import db, User

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')


class IdentityError(Exception):
    """Raised when signup or login fails. The message is safe to show."""
    pass


@dataclass(frozen=True)
class Identity:
    """The authenticated caller."""
    uid: int
    email: str

    def to_session(self):
        return {'uid': self.uid, 'email': self.email}

    @classmethod
    def from_session(cls, data):
        """Rebuild an Identity from session data, or None if it is missing or malformed."""
        if not isinstance(data, dict):
            return None
        try:
            return cls(uid=int(data['uid']), email=str(data['email']))
        except (KeyError, TypeError, ValueError):
            return None


def normalize_email(email):
    return (email or '').strip().lower()


def _validate_email(email):
    if not email:
        raise IdentityError('Email is required.')
    if len(email) > MAX_LENGTHS['email'] or not EMAIL_RE.match(email):
        raise IdentityError('The email address is improperly formatted.')


def create_user(email, password, min_password_length=6):
    """
    Create an account.

    Raises IdentityError for a malformed email, a short password or an
    email that is already registered.
    """
    email = normalize_email(email)
    _validate_email(email)
    if not password or len(password) < min_password_length:
        raise IdentityError(f'The password must be at least {min_password_length} characters long.')

    if User.query.filter_by(email=email).first():
        raise IdentityError('The email address is already in use by another account.')

    user = User(email=email, password_hash=generate_password_hash(password))
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # Lost a race with a concurrent signup for the same email
        db.session.rollback()
        raise IdentityError('The email address is already in use by another account.')

    logger.info('Created user %s', user.id)
    return Identity(uid=user.id, email=user.email)


def authenticate(email, password):
    """Return the Identity for valid credentials, raise IdentityError otherwise."""
    email = normalize_email(email)
    if not email or not password:
        raise IdentityError('Email and password are required.')

    user = User.query.filter_by(email=email).first()
    if user is None:
        raise IdentityError('There is no user record corresponding to this email.')
    if not check_password_hash(user.password_hash, password):
        logger.info('Rejected login for user %s', user.id)
        raise IdentityError('The password is invalid.')

    return Identity(uid=user.id, email=user.email)
