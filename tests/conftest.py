"""Shared pytest fixtures for the blue image service tests."""

import io

import pytest
from PIL import Image

from app.main import app as flask_app


@pytest.fixture
def client():
    """Flask test client bound to the service app."""
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as test_client:
        yield test_client


@pytest.fixture
def decode_png():
    """Decode PNG bytes into a loaded PIL image."""

    def _decode(data: bytes) -> Image.Image:
        image = Image.open(io.BytesIO(data))
        image.load()
        return image

    return _decode
