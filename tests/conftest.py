import json
from unittest.mock import MagicMock, Mock

import pytest
import requests


def _http_response(status_code=200, payload=None, body=None):
    response = Mock()
    response.status_code = status_code
    if body is None:
        body = json.dumps(payload if payload is not None else {}).encode()
    response.content = body
    return response


@pytest.fixture
def http_response():
    return _http_response


@pytest.fixture
def session():
    """A requests.Session stand-in; set session.post.return_value per test."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def apple_reply(session):
    def _reply(status, environment="Sandbox", is_retryable=False):
        session.post.return_value = _http_response(
            payload={"environment": environment, "is-retryable": is_retryable, "status": status}
        )
        return session.post.return_value

    return _reply
