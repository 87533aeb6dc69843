"""
Pytest Configuration and Fixtures

Provides shared fixtures for testing the Flask application using the
application factory pattern. The remote blog API is replaced by a fake
fetcher injected through the fetch configuration.
"""

import os

import pytest

# Config refuses to import without a secret key
os.environ.setdefault('SECRET_KEY', 'test-secret-key-for-pytest')
os.environ['FLASK_ENV'] = 'testing'


class FakeApi:
    """
    In-memory stand-in for the blog API.

    Register a payload (dict) or an exception per key; calling the instance
    behaves like a fetcher and records every call.
    """

    def __init__(self):
        self.responses = {}
        self.calls = []

    def add(self, key, response):
        self.responses[key] = response

    def __call__(self, key, params=None, token=None):
        self.calls.append({'key': key, 'params': params, 'token': token})
        if key not in self.responses:
            raise RuntimeError(f"No fake response for {key}")
        response = self.responses[key]
        if isinstance(response, Exception):
            raise response
        return response

    def keys_called(self):
        return [call['key'] for call in self.calls]


def make_user(**overrides):
    user = {
        'id': 7,
        'full_name': 'Jane Writer',
        'avatar': 'https://cdn.example.com/avatars/jane.png',
    }
    user.update(overrides)
    return user


def make_article(slug='hello-world', **overrides):
    """Article payload as the API serves it."""
    article = {
        'id': 1,
        'slug': slug,
        'title': 'Hello World',
        'excerpt': 'A first post.',
        'content': '# Heading\n\nSome **bold** text.',
        'image': 'https://cdn.example.com/covers/hello.png',
        'created_at': '2024-01-05T10:00:00.000Z',
        'updated_at': '2024-01-05T10:00:00.000Z',
        'user': make_user(),
        'categories': [{'id': 3, 'slug': 'python', 'title': 'Python'}],
        'tags': [
            {'id': 10, 'slug': 'flask', 'title': 'flask'},
            {'id': 11, 'slug': 'web', 'title': 'web'},
        ],
    }
    article.update(overrides)
    return article


@pytest.fixture(scope='session')
def test_config():
    """Test configuration class."""
    from config import TestingConfig
    return TestingConfig


@pytest.fixture
def fake_api():
    """Fake fetcher with no responses registered."""
    return FakeApi()


@pytest.fixture
def app(test_config, fake_api):
    """
    Create and configure a Flask application instance for testing.

    Uses the application factory pattern to create a clean instance
    for each test function.
    """
    from app import create_app
    app = create_app(test_config, fetcher=fake_api)

    # Push application context
    ctx = app.app_context()
    ctx.push()

    yield app

    # Clean up
    ctx.pop()


@pytest.fixture
def client(app):
    """Flask test client for making HTTP requests."""
    return app.test_client()


@pytest.fixture
def article_payload():
    """Successful single-article envelope."""
    return {'success': True, 'data': make_article()}


@pytest.fixture
def related_payload():
    """Successful related-articles envelope with two entries."""
    return {
        'success': True,
        'data': [
            make_article(slug='second-post', id=2, title='Second Post', content=' '.join(['word'] * 600)),
            make_article(slug='third-post', id=3, title='Third Post', image=None),
        ]
    }


@pytest.fixture
def published_api(fake_api, article_payload, related_payload):
    """Fake API serving the 'hello-world' article and its related list."""
    fake_api.add('/articles/hello-world', article_payload)
    fake_api.add('/articles', related_payload)
    return fake_api


@pytest.fixture
def article_factory():
    """Build article payloads with field overrides."""
    return make_article
