from unittest import mock

import pytest
import requests

from watson_developer_cloud.common import authentication
from watson_developer_cloud.common import config
from watson_developer_cloud.common.authentication import APIKeyAuthentication
from watson_developer_cloud.common.authentication import BasicAuthentication
from watson_developer_cloud.common.authentication import BearerTokenAuthentication
from watson_developer_cloud.common.authentication import IAMAuthentication
from watson_developer_cloud.common.authentication import IAMToken
from watson_developer_cloud.common.authentication import NoAuthentication
from watson_developer_cloud.common.authentication import WatsonAuthenticationError


def token_response(make_response, access_token, refresh_token='refresh', expires_in=3600, expiration=4600):
    return make_response(200, {
        'access_token': access_token,
        'refresh_token': refresh_token,
        'token_type': 'Bearer',
        'expires_in': expires_in,
        'expiration': expiration,
    })


class FakeClock:
    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now


def test_basic_authentication():
    request = requests.Request('GET', 'https://watson.test/')
    BasicAuthentication('user', 'pass').authenticate(request)
    assert request.prepare().headers['Authorization'] == 'Basic dXNlcjpwYXNz'


def test_basic_authentication_requires_credentials():
    with pytest.raises(WatsonAuthenticationError):
        BasicAuthentication('user', '')


def test_bearer_token_authentication():
    request = requests.Request('GET', 'https://watson.test/', headers={})
    BearerTokenAuthentication('abc').authenticate(request)
    assert request.headers['Authorization'] == 'Bearer abc'


def test_api_key_in_query_replaces_existing_item():
    request = requests.Request('GET', 'https://watson.test/', params=[('apikey', 'old'), ('outputMode', 'json')])
    APIKeyAuthentication('apikey', 'secret', location='query').authenticate(request)
    assert request.prepare().url == 'https://watson.test/?outputMode=json&apikey=secret'


def test_api_key_in_header():
    request = requests.Request('GET', 'https://watson.test/', headers={})
    APIKeyAuthentication('X-Api-Key', 'secret').authenticate(request)
    assert request.headers['X-Api-Key'] == 'secret'


def test_api_key_location_must_be_known():
    with pytest.raises(ValueError):
        APIKeyAuthentication('apikey', 'secret', location='cookie')


def test_websocket_credentials():
    assert NoAuthentication().websocket_credentials() == ({}, None)
    assert BasicAuthentication('u', 'p').websocket_credentials() == ({}, ('u', 'p'))
    assert BearerTokenAuthentication('t').websocket_credentials() == ({'access_token': 't'}, None)


def test_iam_token_expiry():
    token = IAMToken('a', 'r', 'Bearer', expires_in=3600, expiration=10000)
    # Refreshed once 80% of the lifetime has passed: at 10000 - 720.
    assert not token.is_access_token_expired(9279)
    assert token.is_access_token_expired(9280)
    assert not token.is_refresh_token_expired(10000 + config.IAM_REFRESH_TOKEN_LIFETIME_SECONDS - 1)
    assert token.is_refresh_token_expired(10000 + config.IAM_REFRESH_TOKEN_LIFETIME_SECONDS)


def test_iam_requests_token_once_and_caches_it(make_response):
    session = mock.MagicMock(spec=requests.Session)
    session.post.return_value = token_response(make_response, 'first')
    clock = FakeClock(1000)
    authenticator = IAMAuthentication('my-key', session=session, clock=clock)

    assert authenticator.get_access_token() == 'first'
    assert authenticator.get_access_token() == 'first'
    assert session.post.call_count == 1

    args, kwargs = session.post.call_args
    assert args[0] == config.DEFAULT_IAM_URL
    assert kwargs['data'] == {
        'grant_type': 'urn:ibm:params:oauth:grant-type:apikey',
        'apikey': 'my-key',
        'response_type': 'cloud_iam',
    }
    assert kwargs['auth'].username == 'bx'
    assert kwargs['auth'].password == 'bx'


def test_iam_refreshes_token_near_expiration(make_response):
    session = mock.MagicMock(spec=requests.Session)
    session.post.side_effect = [
        token_response(make_response, 'first', expires_in=3600, expiration=4600),
        token_response(make_response, 'second', expires_in=3600, expiration=8200),
    ]
    clock = FakeClock(1000)
    authenticator = IAMAuthentication('my-key', session=session, clock=clock)
    assert authenticator.get_access_token() == 'first'

    clock.now = 4000
    assert authenticator.get_access_token() == 'second'
    assert session.post.call_args[1]['data'] == {'grant_type': 'refresh_token', 'refresh_token': 'refresh'}


def test_iam_requests_new_token_when_refresh_token_expired(make_response):
    session = mock.MagicMock(spec=requests.Session)
    session.post.side_effect = [
        token_response(make_response, 'first', expiration=4600),
        token_response(make_response, 'second', expiration=4600 + 10 ** 7),
    ]
    clock = FakeClock(1000)
    authenticator = IAMAuthentication('my-key', session=session, clock=clock)
    authenticator.get_access_token()

    clock.now = 4600 + config.IAM_REFRESH_TOKEN_LIFETIME_SECONDS
    assert authenticator.get_access_token() == 'second'
    assert session.post.call_args[1]['data']['grant_type'] == 'urn:ibm:params:oauth:grant-type:apikey'


def test_iam_error(make_response):
    session = mock.MagicMock(spec=requests.Session)
    session.post.return_value = make_response(400, {'errorCode': 'BXNIM0415E', 'errorMessage': 'Provided API key could not be found'})
    authenticator = IAMAuthentication('bad-key', session=session)
    with pytest.raises(WatsonAuthenticationError) as exc_info:
        authenticator.get_access_token()
    assert exc_info.value.status_code == 400
    assert exc_info.value.message == 'Provided API key could not be found'


def test_iam_authenticates_request(make_response):
    session = mock.MagicMock(spec=requests.Session)
    session.post.return_value = token_response(make_response, 'token')
    request = requests.Request('GET', 'https://watson.test/', headers={})
    IAMAuthentication('my-key', session=session, clock=FakeClock(1000)).authenticate(request)
    assert request.headers['Authorization'] == 'Bearer token'


def test_read_credentials_from_environment(monkeypatch):
    monkeypatch.setenv('TEST_SERVICE_APIKEY', 'env-key')
    monkeypatch.setenv('TEST_SERVICE_URL', 'https://env.test')
    assert authentication.read_credentials('test-service') == {'apikey': 'env-key', 'url': 'https://env.test'}


def test_read_credentials_from_file(monkeypatch, tmp_path):
    credentials_file = tmp_path / 'ibm-credentials.env'
    credentials_file.write_text(
        'TEST_SERVICE_USERNAME=user\n'
        'TEST_SERVICE_PASSWORD=pass\n'
        'OTHER_SERVICE_APIKEY=other\n'
    )
    monkeypatch.setattr(config, 'CREDENTIALS_FILE', str(credentials_file))
    assert authentication.read_credentials('test_service') == {'username': 'user', 'password': 'pass'}

    authenticator = authentication.get_authenticator_from_environment('test_service')
    assert isinstance(authenticator, BasicAuthentication)


def test_read_credentials_from_working_directory(monkeypatch, tmp_path):
    (tmp_path / config.CREDENTIALS_FILENAME).write_text('TEST_SERVICE_APIKEY=file-key\n')
    monkeypatch.setattr(config, 'CREDENTIALS_FILE', None)
    monkeypatch.chdir(tmp_path)
    assert authentication.read_credentials('test_service') == {'apikey': 'file-key'}


def test_environment_takes_precedence_over_file(monkeypatch, tmp_path):
    credentials_file = tmp_path / 'ibm-credentials.env'
    credentials_file.write_text('TEST_SERVICE_APIKEY=file-key\n')
    monkeypatch.setattr(config, 'CREDENTIALS_FILE', str(credentials_file))
    monkeypatch.setenv('TEST_SERVICE_APIKEY', 'env-key')
    assert authentication.read_credentials('test_service')['apikey'] == 'env-key'


def test_authenticator_from_apikey(monkeypatch):
    monkeypatch.setenv('TEST_SERVICE_APIKEY', 'env-key')
    monkeypatch.setenv('TEST_SERVICE_IAM_URL', 'https://iam.test/token')
    authenticator = authentication.get_authenticator_from_environment('test_service')
    assert isinstance(authenticator, IAMAuthentication)
    assert authenticator.apikey == 'env-key'
    assert authenticator.url == 'https://iam.test/token'


def test_username_apikey_means_iam(monkeypatch):
    monkeypatch.setenv('TEST_SERVICE_USERNAME', 'apikey')
    monkeypatch.setenv('TEST_SERVICE_PASSWORD', 'secret')
    authenticator = authentication.get_authenticator_from_environment('test_service')
    assert isinstance(authenticator, IAMAuthentication)
    assert authenticator.apikey == 'secret'


@pytest.mark.parametrize('auth_type, expected', [
    ('noauth', NoAuthentication),
    ('bearerToken', BearerTokenAuthentication),
])
def test_explicit_auth_type(monkeypatch, auth_type, expected):
    monkeypatch.setenv('TEST_SERVICE_AUTH_TYPE', auth_type)
    monkeypatch.setenv('TEST_SERVICE_BEARER_TOKEN', 'token')
    assert isinstance(authentication.get_authenticator_from_environment('test_service'), expected)


def test_no_credentials():
    with pytest.raises(WatsonAuthenticationError):
        authentication.get_authenticator_from_environment('test_service')


def test_service_url_from_environment(monkeypatch):
    assert authentication.get_service_url_from_environment('test_service') is None
    monkeypatch.setenv('TEST_SERVICE_URL', 'https://env.test')
    assert authentication.get_service_url_from_environment('test_service') == 'https://env.test'
