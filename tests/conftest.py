"""Shared fixtures: a BitbucketApi whose HTTP session is a mock."""

import json
from unittest import mock

import pytest
import requests

from bitbucket_rest.application.bitbucket_api import BitbucketApi


def make_response(content=None, code=200, reason="OK"):
    """Creates a genuine Response object with fabricated results."""
    response = requests.Response()
    response.status_code = code
    response.reason = reason
    response.request = mock.Mock(spec=requests.Request)
    response.request.method = 'TEST'
    if content is None:
        response._content = b""
    elif isinstance(content, (dict, list)):
        response._content = bytes(json.dumps(content), 'utf-8')
    else:
        response._content = content
    return response


@pytest.fixture
def fake_response():
    return make_response


@pytest.fixture
def api(no_sleep):
    with mock.patch.object(requests, 'Session'):
        bitbucket = BitbucketApi(endpoint="http://nope.nope/", credentials="admin:secret")
    yield bitbucket
    bitbucket.close()


@pytest.fixture
def session(api):
    """The mocked session behind ``api``; set ``request.return_value``."""
    return api.client.session


@pytest.fixture
def no_sleep():
    with mock.patch("bitbucket_rest.infrastructure.http_client.time.sleep") as sleep:
        yield sleep
