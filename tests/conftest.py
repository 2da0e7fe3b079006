"""Test configuration and fixtures for blogdesk."""

from typing import Generator

import pytest
from flask import Flask
from flask.testing import FlaskClient
from sqlalchemy.pool import StaticPool

from blogdesk import create_app
from blogdesk.extensions import db
from blogdesk.models import User, Post
from blogdesk.utils.crypto import hash_password


@pytest.fixture
def app() -> Generator[Flask, None, None]:
    """Create and configure a test Flask application."""
    # Use in-memory SQLite for each test
    test_config = {
        'TESTING': True,
        'WTF_CSRF_ENABLED': False,  # Disable CSRF for testing
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
        'SQLALCHEMY_TRACK_MODIFICATIONS': False,
        'SQLALCHEMY_ENGINE_OPTIONS': {
            'poolclass': StaticPool,
            'connect_args': {'check_same_thread': False}
        },
        'SECRET_KEY': 'test-secret-key',
        'SESSION_COOKIE_SECURE': False,
        'RATELIMIT_ENABLED': False,  # Disable rate limiting for tests
        'POST_WRITE_DELAY_SECONDS': 0,
    }

    app = create_app(test_config)

    with app.app_context():
        db.create_all()
        yield app

        # Cleanup
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create a test client."""
    return app.test_client()


@pytest.fixture
def runner(app: Flask):
    """Create a test CLI runner."""
    return app.test_cli_runner()


@pytest.fixture
def test_admin_user(app: Flask):
    """Create the admin account."""
    admin_user = User(
        username='testadmin',
        password_hash=hash_password('adminpassword'),
        is_admin=True,
    )
    db.session.add(admin_user)
    db.session.commit()
    db.session.refresh(admin_user)
    yield admin_user


@pytest.fixture
def test_reader_user(app: Flask):
    """Create a signed-up account without the admin flag."""
    reader = User(
        username='reader',
        password_hash=hash_password('readerpassword'),
        is_admin=False,
    )
    db.session.add(reader)
    db.session.commit()
    db.session.refresh(reader)
    yield reader


@pytest.fixture
def test_post(app: Flask):
    """Create a post stored under the slug 'hello'."""
    post = Post(title='Hello', slug='hello', markdown='# Hi')
    db.session.add(post)
    db.session.commit()
    db.session.refresh(post)
    yield post


def _log_in(client: FlaskClient, user: User) -> FlaskClient:
    with client.session_transaction() as sess:
        sess['_user_id'] = str(user.id)
        sess['_fresh'] = True
    return client


@pytest.fixture
def admin_client(client: FlaskClient, test_admin_user: User) -> FlaskClient:
    """A client with the admin logged in."""
    return _log_in(client, test_admin_user)


@pytest.fixture
def reader_client(client: FlaskClient, test_reader_user: User) -> FlaskClient:
    """A client logged in as a non-admin account."""
    return _log_in(client, test_reader_user)


class AuthActions:
    """Helper class for authentication actions in tests."""

    def __init__(self, client: FlaskClient):
        self._client = client

    def login(self, username: str = 'testadmin', password: str = 'adminpassword', next_url: str | None = None):
        """Log in through the login form."""
        url = '/auth/login' if next_url is None else f'/auth/login?next={next_url}'
        return self._client.post(url, data={
            'username': username,
            'password': password,
        })

    def logout(self):
        """Log out the current user."""
        return self._client.get('/auth/logout')


@pytest.fixture
def auth(client: FlaskClient) -> AuthActions:
    """Authentication helper fixture."""
    return AuthActions(client)
