"""
Authenticators add credentials to requests before they are prepared.
Credentials may also be read from the environment or from an
``ibm-credentials.env`` file.
"""

import logging
import os
import threading
import time

from dotenv import dotenv_values
import requests
from requests.auth import HTTPBasicAuth

from watson_developer_cloud.common import config
from watson_developer_cloud.common.rest import WatsonError
from watson_developer_cloud.common.rest import error_message_from_json


class WatsonAuthenticationError(WatsonError):
    """
    Credentials are missing, or a token could not be obtained.

    Attributes:
        status_code (Union[int, None]):
            HTTP status code of the token endpoint response, if any.
        message (str):
            Description of the failure.
    """

    def __init__(self, message, status_code=None):
        self.message = message
        self.status_code = status_code
        super().__init__(message if status_code is None else f"{message} (Code: {status_code})")


IAM_APIKEY_GRANT_TYPE = 'urn:ibm:params:oauth:grant-type:apikey'
IAM_REFRESH_GRANT_TYPE = 'refresh_token'
IAM_CLIENT_ID = 'bx'
IAM_CLIENT_SECRET = 'bx'

logger = logging.getLogger(__name__)


class Authenticator:
    """Base class; subclasses modify an unprepared ``requests.Request``."""

    def authenticate(self, request):
        raise NotImplementedError

    def websocket_credentials(self):
        """
        Credentials for a WebSocket handshake, which cannot be mutated
        like an HTTP request.

        Returns:
            tuple:
                query (dict[str, str]):
                    Items to add to the WebSocket URI query.
                userinfo (Union[tuple[str, str], None]):
                    Username and password to embed in the WebSocket URI.
        """
        return dict(), None


class NoAuthentication(Authenticator):
    def authenticate(self, request):
        pass


class BasicAuthentication(Authenticator):
    def __init__(self, username, password):
        if not username or not password:
            raise WatsonAuthenticationError('Username and password must be non-empty.')
        self.username = username
        self.password = password

    def authenticate(self, request):
        request.auth = HTTPBasicAuth(self.username, self.password)

    def websocket_credentials(self):
        return dict(), (self.username, self.password)


class BearerTokenAuthentication(Authenticator):
    def __init__(self, access_token):
        if not access_token:
            raise WatsonAuthenticationError('Bearer token must be non-empty.')
        self.access_token = access_token

    def authenticate(self, request):
        request.headers['Authorization'] = f"Bearer {self.access_token}"

    def websocket_credentials(self):
        return {'access_token': self.access_token}, None


class APIKeyAuthentication(Authenticator):
    """
    Send an API key as a header or as a query item.

    Args:
        name (str):
            Name of the header or query item.
        key (str):
            The API key.
        location (str):
            Either ``header`` or ``query``.
    """

    def __init__(self, name, key, location='header'):
        if location not in ('header', 'query'):
            raise ValueError(f"API key location must be 'header' or 'query'; got '{location}'.")
        if not key:
            raise WatsonAuthenticationError('API key must be non-empty.')
        self.name = name
        self.key = key
        self.location = location

    def authenticate(self, request):
        if self.location == 'header':
            request.headers[self.name] = self.key
        else:
            request.params = [(name, value) for name, value in request.params if name != self.name]
            request.params.append((self.name, self.key))

    def websocket_credentials(self):
        if self.location == 'query':
            return {self.name: self.key}, None
        return dict(), None


class IAMToken:
    """
    An access token issued by IBM Cloud IAM, with its refresh token.

    Attributes:
        access_token (str):
            Sent as a bearer token.
        refresh_token (str):
            Used to obtain a new access token without the API key.
        expires_in (int):
            Lifetime of the access token, in seconds.
        expiration (int):
            Unix time at which the access token expires.
    """

    def __init__(self, access_token, refresh_token, token_type, expires_in, expiration):
        self.access_token = access_token
        self.refresh_token = refresh_token
        self.token_type = token_type
        self.expires_in = expires_in
        self.expiration = expiration

    @classmethod
    def from_dict(cls, token_dict):
        try:
            return cls(
                access_token=token_dict['access_token'],
                refresh_token=token_dict.get('refresh_token'),
                token_type=token_dict.get('token_type', 'Bearer'),
                expires_in=int(token_dict['expires_in']),
                expiration=int(token_dict['expiration']),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise WatsonAuthenticationError(f"Unexpected IAM token response: {e}") from e

    def is_access_token_expired(self, now):
        """Access token has less than 20% of its lifetime remaining."""
        buffer_seconds = self.expires_in * (1.0 - config.IAM_TOKEN_REFRESH_FRACTION)
        return now >= self.expiration - buffer_seconds

    def is_refresh_token_expired(self, now):
        return now >= self.expiration + config.IAM_REFRESH_TOKEN_LIFETIME_SECONDS


class IAMAuthentication(Authenticator):
    """
    Authenticate with an IBM Cloud API key exchanged for IAM tokens.

    The token is requested on first use and cached. It is refreshed with
    the refresh token once 80% of its lifetime has passed, and requested
    anew with the API key if the refresh token has also expired.

    Args:
        apikey (str):
            IBM Cloud API key.
        url (str):
            IAM token endpoint.
        session (Union[requests.Session, None]):
            Session used to call the token endpoint.
        clock (Callable[[], float]):
            Returns the current Unix time.
    """

    def __init__(self, apikey, url=None, session=None, clock=time.time):
        if not apikey:
            raise WatsonAuthenticationError('IAM API key must be non-empty.')
        self.apikey = apikey
        self.url = url if url else config.DEFAULT_IAM_URL
        self.session = session if session is not None else requests.Session()
        self.clock = clock
        self.token = None
        self._lock = threading.Lock()

    def _request_token(self, form):
        response = self.session.post(
            self.url,
            data=form,
            headers={
                'Content-Type': 'application/x-www-form-urlencoded',
                'Accept': 'application/json',
            },
            auth=HTTPBasicAuth(IAM_CLIENT_ID, IAM_CLIENT_SECRET),
            timeout=config.HTTP_TIMEOUT_SECONDS,
        )
        if not 200 <= response.status_code < 300:
            try:
                message = error_message_from_json(response.json())
            except ValueError:
                message = None
            if message is None:
                # IAM reports failures as {"errorCode": ..., "errorMessage": ...}.
                try:
                    message = response.json().get('errorMessage')
                except (ValueError, AttributeError):
                    message = None
            raise WatsonAuthenticationError(
                message or response.reason or 'IAM token request failed.',
                status_code=response.status_code,
            )
        try:
            token_dict = response.json()
        except ValueError as e:
            raise WatsonAuthenticationError(f"Could not decode IAM token response: {e}") from e
        return IAMToken.from_dict(token_dict)

    def request_token(self):
        logger.debug('Requesting IAM token from %s.', self.url)
        return self._request_token({
            'grant_type': IAM_APIKEY_GRANT_TYPE,
            'apikey': self.apikey,
            'response_type': 'cloud_iam',
        })

    def refresh_token(self):
        logger.debug('Refreshing IAM token from %s.', self.url)
        return self._request_token({
            'grant_type': IAM_REFRESH_GRANT_TYPE,
            'refresh_token': self.token.refresh_token,
        })

    def get_access_token(self):
        """
        Returns:
            str:
                A current access token, fetched or refreshed if needed.
        """
        with self._lock:
            now = self.clock()
            if self.token is None or self.token.is_refresh_token_expired(now) \
                    or not self.token.refresh_token:
                if self.token is None or self.token.is_access_token_expired(now):
                    self.token = self.request_token()
            elif self.token.is_access_token_expired(now):
                self.token = self.refresh_token()
            return self.token.access_token

    def authenticate(self, request):
        request.headers['Authorization'] = f"Bearer {self.get_access_token()}"

    def websocket_credentials(self):
        return {'access_token': self.get_access_token()}, None


def _environment_prefix(service_name):
    return service_name.upper().replace('-', '_')


def _find_credentials_file():
    """
    Find ``ibm-credentials.env``: given by ``IBM_CREDENTIALS_FILE``, else
    in the current working directory, else in the home directory.
    """
    if config.CREDENTIALS_FILE:
        return config.CREDENTIALS_FILE if os.path.isfile(config.CREDENTIALS_FILE) else None
    for directory in (os.getcwd(), os.path.expanduser('~')):
        path = os.path.join(directory, config.CREDENTIALS_FILENAME)
        if os.path.isfile(path):
            return path
    return None


def read_credentials(service_name):
    """
    Read the credentials of a service from environment variables, or
    else from a credentials file.

    Args:
        service_name (str):
            Service name, e.g. ``text_to_speech``; variables are looked up
            with prefix ``TEXT_TO_SPEECH_``.

    Returns:
        dict[str, str]:
            Lower-case suffixes (e.g. ``apikey``, ``url``) mapped to
            values; empty if none found.
    """

    prefix = _environment_prefix(service_name) + '_'

    def select(variables):
        return {
            name[len(prefix):].lower(): value
            for name, value in variables.items()
            if name.startswith(prefix) and value
        }

    credentials = select(os.environ)
    if credentials:
        return credentials

    credentials_file = _find_credentials_file()
    if credentials_file is None:
        return dict()
    logger.debug('Reading credentials for %s from %s.', service_name, credentials_file)
    return select(dotenv_values(credentials_file))


def get_authenticator_from_environment(service_name):
    """
    Build an authenticator from the credentials of a service.

    Explicit ``<SERVICE>_AUTH_TYPE`` is one of ``iam``, ``basic``,
    ``bearertoken`` or ``noauth``. Otherwise the type is inferred from
    which credentials are present: an API key (or the username
    ``apikey``) means IAM.

    Raises:
        WatsonAuthenticationError:
            No usable credentials were found.
    """

    credentials = read_credentials(service_name)
    auth_type = credentials.get('auth_type', '').lower()
    apikey = credentials.get('apikey') or credentials.get('iam_apikey')
    username = credentials.get('username')
    password = credentials.get('password')
    bearer_token = credentials.get('bearer_token')
    iam_url = credentials.get('iam_url') or credentials.get('auth_url')

    if username == 'apikey' and password and not apikey:
        apikey = password

    if auth_type == 'noauth':
        return NoAuthentication()
    if auth_type in ('', 'iam') and apikey:
        return IAMAuthentication(apikey, url=iam_url)
    if auth_type in ('', 'basic') and username and password:
        return BasicAuthentication(username, password)
    if auth_type in ('', 'bearertoken') and bearer_token:
        return BearerTokenAuthentication(bearer_token)

    raise WatsonAuthenticationError(
        f"No credentials found for {service_name}: set {_environment_prefix(service_name)}_APIKEY"
        f" or provide {config.CREDENTIALS_FILENAME}."
    )


def get_service_url_from_environment(service_name):
    """Returns ``<SERVICE>_URL`` from environment or credentials file, or None."""
    return read_credentials(service_name).get('url')
