import os
import sys

import pytest

# Path setup and test config before any project imports
ROOT = os.path.dirname(__file__)
PARENT = os.path.abspath(os.path.join(ROOT, '..'))
if PARENT not in sys.path:
    sys.path.insert(0, PARENT)
os.environ['FLASK_ENV'] = 'testing'

from app import app as flask_app  # noqa: E402
from models import db  # noqa: E402

PASSWORD = 'secret123'


@pytest.fixture
def app():
    with flask_app.app_context():
        db.create_all()
        yield flask_app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def sign_up_and_log_in(client, email, password=PASSWORD):
    client.post('/signup', data={'email': email, 'password': password})
    return client.post('/login', data={'email': email, 'password': password})


@pytest.fixture
def cook_client(client):
    """Test client already logged in as cook@example.com."""
    sign_up_and_log_in(client, 'cook@example.com')
    return client
