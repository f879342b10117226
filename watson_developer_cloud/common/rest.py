"""
Construction of HTTP requests to Watson services, and decoding of their
responses into typed results or structured errors.
"""

from http import HTTPStatus
import json
import logging

from google.protobuf import json_format
import proto
import requests

from watson_developer_cloud.common import utils


class WatsonError(Exception):
    pass


class WatsonNoEndpointError(WatsonError):
    pass


class WatsonSerializationError(WatsonError):
    pass


class WatsonApiError(WatsonError):
    """
    A service responded with an error.

    Attributes:
        status_code (int):
            HTTP status code of the response.
        message (str):
            Error message extracted from the response body, or the
            HTTP reason phrase.
        metadata (dict):
            ``response`` holds the decoded JSON body (or raw bytes if the
            body was not JSON); may hold extra service-specific entries.
        transaction_id (Union[str, None]):
            Value of the ``X-Global-Transaction-Id`` response header.
    """

    def __init__(self, status_code, message, metadata=None, transaction_id=None):
        self.status_code = status_code
        self.message = message
        self.metadata = metadata if metadata is not None else dict()
        self.transaction_id = transaction_id
        super().__init__(f"Error: {message}, Code: {status_code}"
                         + (f", X-Global-Transaction-Id: {transaction_id}" if transaction_id else ''))


TRANSACTION_ID_HEADER = 'X-Global-Transaction-Id'


def _render_query_value(value):
    """Booleans as 'true'/'false', lists as comma-separated values."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (list, tuple)):
        return ','.join(_render_query_value(item) for item in value)
    return str(value)


def strip_none_values(dict_in):
    """Recursively remove members whose value is None."""
    if isinstance(dict_in, list):
        return [strip_none_values(item) for item in dict_in]
    if not isinstance(dict_in, dict):
        return dict_in
    return {key: strip_none_values(value) for key, value in dict_in.items() if value is not None}


class MultipartForm:
    """
    Body parts of a ``multipart/form-data`` request. Parts with the same
    name may be repeated.
    """

    def __init__(self):
        self.parts = []

    def append(self, name, content, filename=None, content_type=None):
        """
        Add a body part.

        Args:
            name (str):
                Form field name.
            content (Union[bytes, str, file-like]):
                Content of the part. Numbers and booleans are rendered
                as in a query string.
            filename (Union[str, None]):
                Filename to report in the part's Content-Disposition.
            content_type (Union[str, None]):
                MIME type of the part.
        """
        if not isinstance(content, (bytes, str)) and not hasattr(content, 'read'):
            content = _render_query_value(content)
        if content_type is None:
            self.parts.append((name, (filename, content)))
        else:
            self.parts.append((name, (filename, content, content_type)))

    def __len__(self):
        return len(self.parts)

    def __bool__(self):
        return bool(self.parts)


class RestRequest:
    """
    An HTTP request to a Watson service, prepared lazily so that its
    authenticator may add credentials.

    Args:
        method (str):
            HTTP method.
        url (str):
            Absolute URL, without query string.
        headers (Union[dict[str, str], None]):
            Request headers; ``None`` values are dropped.
        params (Union[list[tuple[str, object]], dict, None]):
            Ordered query items; ``None`` values are dropped.
        json_body (Union[dict, list, None]):
            Body to serialize as JSON; ``None`` members are omitted.
        form (Union[MultipartForm, None]):
            Multipart form body.
        data (Union[bytes, dict, Iterable[bytes], None]):
            Raw body, form-urlencoded mapping, or chunks to stream.
        authenticator (Union[common.authentication.Authenticator, None]):
            Adds credentials at prepare time.
    """

    def __init__(
        self,
        method,
        url,
        headers=None,
        params=None,
        json_body=None,
        form=None,
        data=None,
        authenticator=None,
    ):
        bodies = [body for body in (json_body, form, data) if body is not None]
        if len(bodies) > 1:
            raise ValueError('Only one of json_body, form, or data may be given.')

        self.method = method.upper()
        self.url = url
        self.headers = {key: value for key, value in (headers or dict()).items() if value is not None}
        if isinstance(params, dict):
            params = list(params.items())
        self.params = [
            (name, _render_query_value(value)) for name, value in (params or []) if value is not None
        ]
        self.json_body = json_body
        self.form = form
        self.data = data
        self.authenticator = authenticator

    def to_requests_request(self):
        """Build an unprepared ``requests.Request``; authentication applied."""
        request = requests.Request(
            method=self.method,
            url=self.url,
            headers=dict(self.headers),
            params=list(self.params),
        )
        if self.json_body is not None:
            body = strip_none_values(to_json_compatible(self.json_body))
            request.data = json.dumps(body).encode('utf-8')
            request.headers.setdefault('Content-Type', 'application/json')
        elif self.form is not None:
            # Let requests generate the boundary and Content-Type.
            request.headers.pop('Content-Type', None)
            request.files = list(self.form.parts)
        elif self.data is not None:
            request.data = self.data

        if self.authenticator is not None:
            self.authenticator.authenticate(request)
        return request

    def prepare(self):
        """
        Returns:
            requests.PreparedRequest:
                The request, ready to be sent by a ``requests.Session``.
        """
        return self.to_requests_request().prepare()


class DetailedResponse:
    """
    Result of a successful service call.

    Attributes:
        result (object):
            Decoded body: a model, dict, bytes, str, or None.
        status_code (int):
            HTTP status code.
        headers (requests.structures.CaseInsensitiveDict):
            Response headers.
    """

    def __init__(self, result, status_code, headers):
        self.result = result
        self.status_code = status_code
        self.headers = headers

    def get_result(self):
        return self.result

    @property
    def transaction_id(self):
        return self.headers.get(TRANSACTION_ID_HEADER)

    def __repr__(self):
        return f"DetailedResponse(status_code={self.status_code}, result={self.result!r})"


def error_message_from_json(body_json):
    """
    Extract an error message from a decoded JSON error body, or None.

    Tried in order: ``errors[0].message``, ``error``, ``message``,
    ``statusInfo``.
    """

    if not isinstance(body_json, dict):
        return None
    errors = body_json.get('errors')
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        message = errors[0].get('message')
        if isinstance(message, str):
            return message
    for key in ('error', 'message', 'statusInfo'):
        message = body_json.get(key)
        if isinstance(message, str):
            return message
    return None


def decode_error(response):
    """
    Map an unsuccessful HTTP response to a ``WatsonApiError``.

    Args:
        response (requests.Response):
            Response with a non-2xx status code.

    Returns:
        WatsonApiError:
            The structured error, not raised.
    """

    metadata = dict()
    message = None
    try:
        body_json = json.loads(response.content)
        metadata['response'] = body_json
        message = error_message_from_json(body_json)
    except ValueError:
        metadata['response'] = response.content
    if message is None:
        try:
            message = HTTPStatus(response.status_code).phrase
        except ValueError:
            message = response.reason or 'Unknown error'
    return WatsonApiError(
        response.status_code,
        message,
        metadata=metadata,
        transaction_id=response.headers.get(TRANSACTION_ID_HEADER),
    )


def model_from_dict(model, body_dict):
    """
    Decode a dict into a proto-plus message, ignoring unknown fields.

    Keys that are reserved Python keywords (``class``, ``from``) are
    escaped with a trailing '_' to match the model's field names.

    Args:
        model (Type[proto.Message]):
            Message class to decode into.
        body_dict (dict):
            Decoded JSON object.

    Returns:
        proto.Message:
            The decoded message.
    """

    escaped = utils.recursively_convert_dict_keys_case(body_dict, utils.escape_keyword)
    try:
        return model.from_json(json.dumps(escaped), ignore_unknown_fields=True)
    except Exception as e:
        raise WatsonSerializationError(f"Could not decode response as {model.__name__}: {e}") from e


def model_to_dict(message):
    """
    Encode a proto-plus message into a dict with the service's key names.
    """

    # Unset fields are omitted, unlike with ``proto.Message.to_dict()``.
    message_dict = json_format.MessageToDict(type(message).pb(message), preserving_proto_field_name=True)
    return utils.recursively_convert_dict_keys_case(message_dict, utils.unescape_keyword)


def to_json_compatible(value):
    """Recursively convert proto-plus messages within value to dicts."""
    if isinstance(value, proto.Message):
        return model_to_dict(value)
    if isinstance(value, (list, tuple)):
        return [to_json_compatible(item) for item in value]
    if isinstance(value, dict):
        return {key: to_json_compatible(item) for key, item in value.items()}
    return value


def decode_json(response):
    try:
        return response.json()
    except ValueError as e:
        raise WatsonSerializationError(f"Could not decode response as JSON: {e}") from e


def decode_bytes(response):
    return response.content


def decode_text(response):
    return response.text


def decode_none(response):
    return None


def model_decoder(model, key_converter=None):
    """
    Make a decoder for responses containing a JSON-encoded model.

    Args:
        model (Type[proto.Message]):
            Message class to decode into.
        key_converter (Union[Callable[[str], str], None]):
            Optional conversion applied to keys before decoding, e.g.
            ``utils.camel_case_to_snake_case``.

    Returns:
        Callable[[requests.Response], proto.Message]
    """
    if not (isinstance(model, type) and issubclass(model, proto.Message)):
        raise TypeError(f"Expected a proto.Message subclass; got '{model}'.")

    def decode(response):
        body_dict = decode_json(response)
        if key_converter is not None:
            body_dict = utils.recursively_convert_dict_keys_case(body_dict, key_converter)
        return model_from_dict(model, body_dict)
    return decode


def decode_response(response, decoder=decode_json, check_body=None, logger=None):
    """
    Map an HTTP response to a ``DetailedResponse`` or raise.

    Args:
        response (requests.Response):
            The HTTP response.
        decoder (Callable[[requests.Response], object]):
            Decodes a successful body.
        check_body (Union[Callable[[requests.Response], Union[WatsonApiError, None]], None]):
            Service-specific check of a successful body that may still
            represent an error.

    Returns:
        DetailedResponse

    Raises:
        WatsonApiError:
            Non-2xx status, or ``check_body`` found an error.
        WatsonSerializationError:
            Body could not be decoded as expected.
    """

    if logger is None:
        logger = logging.getLogger(__name__)

    if not 200 <= response.status_code < 300:
        error = decode_error(response)
        logger.error("Request failed with status %d: %s", error.status_code, error.message)
        raise error

    if check_body is not None:
        error = check_body(response)
        if error is not None:
            logger.error("Request failed in response body: %s", error.message)
            raise error

    return DetailedResponse(decoder(response), response.status_code, response.headers)
