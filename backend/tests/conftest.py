import os
import sys
import pytest

# Ensure the backend root (containing the `livebingo` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from livebingo import create_app, db, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    BCRYPT_LOG_ROUNDS = 4
    MAINTENANCE_PASSWORD = 'let-me-in'
    ALLOWED_ORIGINS = []


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import livebingo.models  # noqa: F401
        from livebingo.phrases import seed_phrases
        db.create_all()
        seed_phrases()
    # Requests push their own app context so flask.g never leaks between them
    yield application
    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def app_ctx(flask_app):
    with flask_app.app_context():
        yield flask_app
        db.session.remove()


@pytest.fixture()
def make_user(app_ctx):
    from livebingo.models import User

    def _make(username, password='password'):
        user = User(username=username)
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        return user
    return _make


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def login():
    def _login(test_client, username, password='password'):
        return test_client.post('/auth', json={'username': username, 'password': password})
    return _login


@pytest.fixture()
def alice(flask_app, login):
    test_client = flask_app.test_client()
    res = login(test_client, 'alice')
    assert res.status_code == 201
    return test_client


@pytest.fixture()
def sio_viewer(flask_app):
    """An anonymous viewer subscribed to the board channel."""
    test_client = socketio.test_client(flask_app, namespace='/ws')
    yield test_client
    if test_client.is_connected('/ws'):
        test_client.disconnect(namespace='/ws')
