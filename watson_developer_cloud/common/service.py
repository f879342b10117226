"""
Base class of the Watson service wrappers.
"""

import logging
import os
import uuid

import requests

from watson_developer_cloud.common import authentication
from watson_developer_cloud.common import config
from watson_developer_cloud.common import rest
from watson_developer_cloud.common import utils


class TransactionLoggerAdapter(logging.LoggerAdapter):
    """
    Add transaction ID and log level to logs.

    The transaction ID is the ``X-Global-Transaction-Id`` of the response
    once it is known, else a locally generated UUID.

    E.g. see:
    https://docs.python.org/3/howto/logging-cookbook.html#using-loggeradapters-to-impart-contextual-information
    """
    def process(self, msg, kwargs):
        """Prepend [{transaction_id}:{level}] to message."""
        transaction_id = self.extra.get('transaction_id') or self.extra.get('local_uuid', str(uuid.UUID(int=0)))[:8]
        level = logging.getLevelName(self.extra.get('level', logging.INFO)).lower()
        # Space before tab to avoid jagged logs for, e.g., INFO vs WARNING.
        return f"[{transaction_id}:{level}] \t{msg}", kwargs

    def log(self, level, msg, *args, **kwargs):
        """Override: pass level as element of ``self.extra`` dict."""
        if self.isEnabledFor(level):
            self.extra['level'] = level
            msg, kwargs = self.process(msg, kwargs)
            self.logger.log(level, msg, *args, **kwargs)


class FileWithMetadata:
    """
    A file to upload in a multipart form.

    Args:
        data (Union[bytes, str, os.PathLike, BinaryIO]):
            File content, a path to a local file, or a binary file object.
        filename (Union[str, None]):
            Name reported to the service; defaults to the base name of
            the path, if given.
        content_type (Union[str, None]):
            MIME type of the file.
    """

    def __init__(self, data, filename=None, content_type=None):
        self.data = data
        if filename is None and isinstance(data, (str, os.PathLike)):
            filename = os.path.basename(os.fspath(data))
        if filename is None and hasattr(data, 'name') and isinstance(data.name, str):
            filename = os.path.basename(data.name)
        self.filename = filename
        self.content_type = content_type

    def read(self):
        if isinstance(self.data, (bytes, bytearray)):
            return bytes(self.data)
        if isinstance(self.data, (str, os.PathLike)):
            with open(utils.get_local_path(os.fspath(self.data)), 'rb') as f:
                return f.read()
        return self.data.read()

    def append_to(self, form, name):
        form.append(name, self.read(), filename=self.filename or name, content_type=self.content_type)


class WatsonService:
    """
    Common behavior of the Watson service wrappers: endpoint and
    credentials resolution, request construction and response decoding.

    Args:
        service_name (str):
            Name used for environment credentials and analytics headers,
            e.g. ``text_to_speech``.
        service_url (Union[str, None]):
            Base URL of the service.
        authenticator (Union[common.authentication.Authenticator, None]):
            If None, read from the environment; see
            ``get_authenticator_from_environment()``.
        version (Union[str, None]):
            API version date, sent as the first query item if given.
        session (Union[requests.Session, None]):
            Session to send requests with.
    """

    service_version = 'V1'

    def __init__(
        self,
        service_name,
        service_url=None,
        authenticator=None,
        version=None,
        session=None,
    ):
        self.service_name = service_name
        self.version = version
        if authenticator is None:
            authenticator = authentication.get_authenticator_from_environment(service_name)
            # A URL next to the credentials takes precedence over the default.
            service_url = authentication.get_service_url_from_environment(service_name) or service_url
        self.authenticator = authenticator
        self.service_url = None
        self.set_service_url(service_url)
        self.session = session if session is not None else requests.Session()
        self.default_headers = dict()
        self.verify = True
        self.http_timeout = config.HTTP_TIMEOUT_SECONDS
        self.logger = logging.getLogger(type(self).__module__)

    def set_service_url(self, service_url):
        self.service_url = service_url.rstrip('/') if service_url else None

    def set_default_headers(self, headers):
        """Headers sent with every request, before operation headers."""
        self.default_headers = dict(headers)

    def disable_ssl_verification(self):
        self.logger.warning('SSL certificate verification disabled for %s.', self.service_name)
        self.verify = False

    def set_http_timeout(self, timeout):
        """Seconds to wait for the service; None waits forever."""
        self.http_timeout = timeout

    def prepare_request(
        self,
        method,
        path,
        operation_id,
        headers=None,
        params=None,
        json_body=None,
        form=None,
        data=None,
        accept=None,
        content_type=None,
        authenticator=None,
    ):
        """
        Build a ``RestRequest`` for an operation of this service.

        Args:
            method (str):
                HTTP method.
            path (str):
                Path under the service URL, already percent-encoded,
                e.g. by ``utils.encode_path()``.
            operation_id (str):
                Operation name reported in the analytics header.
            headers (Union[dict[str, str], None]):
                Per-call headers; these override all others.
            params (Union[list[tuple[str, object]], None]):
                Ordered query items, after ``version``.
            json_body, form, data:
                At most one request body; see ``RestRequest``.
            accept (Union[str, None]):
                Value of the ``Accept`` header.
            content_type (Union[str, None]):
                Value of the ``Content-Type`` header.
            authenticator (Union[common.authentication.Authenticator, None]):
                Override the service's authenticator.

        Returns:
            common.rest.RestRequest

        Raises:
            WatsonNoEndpointError:
                The service URL is not set.
        """

        if not self.service_url:
            raise rest.WatsonNoEndpointError(f"Service URL is not set for {self.service_name}.")

        request_headers = utils.get_sdk_headers(self.service_name, self.service_version, operation_id)
        request_headers.update(self.default_headers)
        if accept is not None:
            request_headers['Accept'] = accept
        if content_type is not None:
            request_headers['Content-Type'] = content_type
        if headers:
            request_headers.update(headers)

        query = []
        if self.version is not None:
            query.append(('version', self.version))
        query.extend(params or [])

        return rest.RestRequest(
            method,
            self.service_url + path,
            headers=request_headers,
            params=query,
            json_body=json_body,
            form=form,
            data=data,
            authenticator=authenticator if authenticator is not None else self.authenticator,
        )

    def send(self, request, decoder=rest.decode_json, check_body=None):
        """
        Send a request and decode its response.

        Args:
            request (common.rest.RestRequest):
                The request, typically from ``prepare_request()``.
            decoder (Callable[[requests.Response], object]):
                Decodes a successful body, e.g. ``rest.model_decoder(Voice)``.
            check_body (Union[Callable, None]):
                Optional service-specific error check of successful bodies.

        Returns:
            common.rest.DetailedResponse
        """

        logger = TransactionLoggerAdapter(self.logger, {'local_uuid': str(uuid.uuid4())})
        prepared = request.prepare()
        logger.debug("Sending %s %s", prepared.method, prepared.url)

        response = self.session.send(prepared, timeout=self.http_timeout, verify=self.verify)

        logger.extra['transaction_id'] = response.headers.get(rest.TRANSACTION_ID_HEADER)
        logger.debug("Received status %d for %s %s", response.status_code, prepared.method, prepared.url)
        return rest.decode_response(response, decoder=decoder, check_body=check_body, logger=logger)
