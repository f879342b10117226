import json
import os
from unittest import mock

import pytest
import requests

from watson_developer_cloud.common import config

SERVICE_ENVIRONMENT_PREFIXES = (
    'ALCHEMY_LANGUAGE_',
    'LANGUAGE_TRANSLATOR_',
    'NATURAL_LANGUAGE_UNDERSTANDING_',
    'SPEECH_TO_TEXT_',
    'TEXT_TO_SPEECH_',
    'WATSON_VISION_COMBINED_',
    'TEST_SERVICE_',
)


@pytest.fixture(autouse=True)
def isolated_credentials(monkeypatch, tmp_path):
    """Ignore credentials of the machine running the tests."""
    for name in list(os.environ):
        if name.startswith(SERVICE_ENVIRONMENT_PREFIXES):
            monkeypatch.delenv(name)
    monkeypatch.setattr(config, 'CREDENTIALS_FILE', str(tmp_path / 'no-credentials.env'))


def build_response(status_code=200, body=None, headers=None, content_type='application/json'):
    response = requests.Response()
    response.status_code = status_code
    if body is None:
        response._content = b''
    elif isinstance(body, bytes):
        response._content = body
    elif isinstance(body, str):
        response._content = body.encode('utf-8')
    else:
        response._content = json.dumps(body).encode('utf-8')
    response.encoding = 'utf-8'
    response.headers['Content-Type'] = content_type
    response.headers.update(headers or dict())
    response.url = 'https://watson.test/'
    return response


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def session():
    """A ``requests.Session`` that responds 200 with an empty JSON object."""
    session = mock.MagicMock(spec=requests.Session)
    session.send.return_value = build_response(body={})
    return session


@pytest.fixture
def sent_request(session):
    """Get the last ``requests.PreparedRequest`` sent by the session."""
    def get():
        return session.send.call_args[0][0]
    return get
