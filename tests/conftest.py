"""
Pytest configuration and shared fixtures.
"""

import pytest

from src.core import RelationMatrix


def matrix_from_strings(*rows):
    """Build a matrix from rows like '0110'."""
    return RelationMatrix.from_rows([[c == '1' for c in row] for row in rows])


@pytest.fixture
def make_matrix():
    """Fixture that provides a builder for matrices written as digit strings"""
    return matrix_from_strings


@pytest.fixture
def chain_matrix():
    """Fixture that provides the relation a -> b -> c on three elements"""
    return matrix_from_strings('010', '001', '000')


@pytest.fixture
def app():
    """
    Create and configure a test Flask app.

    The universe size limit is reset to its default for every test.
    """
    from src.app import app as flask_app
    from src.config import Config

    flask_app.config['TESTING'] = True
    flask_app.config['MAX_UNIVERSE_SIZE'] = Config.MAX_UNIVERSE_SIZE
    flask_app.config['MAX_LINE_LENGTH'] = Config.MAX_LINE_LENGTH

    yield flask_app


@pytest.fixture
def client(app):
    """
    Create a Flask test client.

    This fixture provides a test client for making HTTP requests to the Flask app.
    Automatically depends on the 'app' fixture.
    """
    return app.test_client()
