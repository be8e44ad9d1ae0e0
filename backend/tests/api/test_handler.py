"""Tests for the Lambda entry point."""

from mangum import Mangum

from api import app
from handler import handler


def test_handler_wraps_app():
    assert isinstance(handler, Mangum)
    assert handler.app is app
