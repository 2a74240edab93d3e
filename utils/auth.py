"""
Session Authentication Helpers

Bridges the Flask session and the explicit Identity value the rest of the
application works with.
"""

from functools import wraps

from flask import redirect, session, url_for

from services.identity import Identity

SESSION_KEY = 'user'


def login_user(identity):
    session.clear()
    session[SESSION_KEY] = identity.to_session()


def logout_user():
    session.clear()


def current_identity():
    """Return the Identity stored in the session, or None."""
    return Identity.from_session(session.get(SESSION_KEY))


def login_required(view):
    """
    Redirect anonymous callers to the login page.

    The wrapped view receives the caller's Identity as its first argument.
    """
    @wraps(view)
    def wrapped(*args, **kwargs):
        identity = current_identity()
        if identity is None:
            return redirect(url_for('login'))
        return view(identity, *args, **kwargs)
    return wrapped
