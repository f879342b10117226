"""
Utilities shared by the Watson service wrappers.
"""

import datetime
import keyword
import os
import platform
from urllib.parse import quote

from watson_developer_cloud.common import config


def get_local_path(local_path_with_prefix):
    """
    Get absolute path to file, assuming it may begin with 'file://'.

    Args:
        local_path_with_prefix (str):
            Possibly prefixed, possibly non-absolute path to file.

    Returns:
        str:
            Un-prefixed absolute path to file.
    """

    local_path = local_path_with_prefix.replace('file://', '', 1)
    return os.path.abspath(os.path.expanduser(local_path))


def camel_case_to_snake_case(camel_case_string):
    """
    Convert a camelCase string to a snake_case string.

    Args:
        camel_case_string (str):
            A string using lowerCamelCaseConvention.

    Returns:
        str:
            A string using snake_case_convention.
    """

    # https://stackoverflow.com/a/44969381
    return ''.join(['_' + c.lower() if c.isupper() else c for c in camel_case_string]).lstrip('_')


def snake_case_to_camel_case(snake_case_string):
    """
    Convert a snake_case string to a camelCase string. Initial '_' will
    cause capitalization.

    Args:
        snake_case_string (str):
            A string using snake_case_convention.

    Returns:
        str:
            A string using lowerCamelCase or UpperCamelCase convention.
    """

    lower_case_words = snake_case_string.split(sep='_')
    camel_case_string = lower_case_words[0] \
        + ''.join(word.capitalize() for word in lower_case_words[1:])
    return camel_case_string


def escape_keyword(key):
    """
    Append '_' to a key that is a reserved Python keyword, e.g.
    ``class`` -> ``class_``. Other keys are returned unchanged.
    """
    return key + '_' if keyword.iskeyword(key) else key


def unescape_keyword(key):
    """Reverse ``escape_keyword()``."""
    if key.endswith('_') and keyword.iskeyword(key[:-1]):
        return key[:-1]
    return key


def recursively_convert_dict_keys_case(dict_in, convert_key):
    """
    Convert all the keys in a (potentially) recursive dict using
    function convert_key.

    Args:
        dict_in (dict[str, Union[dict, list, str]]):
            Dict of dicts, lists and strs with str keys.
        convert_key (Callable[[str], str]):
            Function to convert str to str, to be applied to keys.

    Returns:
        dict[str, Union[dict, list, str]]:
            Same structure as dict_in, with unchanged values, but with
            keys transformed according to convert_key.
    """
    if isinstance(dict_in, list):
        return [recursively_convert_dict_keys_case(item, convert_key) for item in dict_in]
    if not isinstance(dict_in, dict):
        return dict_in
    dict_out = {convert_key(key): value for key, value in dict_in.items()}
    for key, value in dict_out.items():
        if isinstance(value, (dict, list)):
            dict_out[key] = recursively_convert_dict_keys_case(value, convert_key)
    return dict_out


def encode_path(path_template, *segments):
    """
    Fill a path template with percent-encoded segments.

    Args:
        path_template (str):
            Path with ``{}`` placeholders, e.g. ``/v1/voices/{}``.
        segments (str):
            Values for the placeholders. Every character outside the
            unreserved set is encoded, including '/'.

    Returns:
        str:
            The encoded path.
    """

    for segment in segments:
        if segment is None or segment == '':
            raise ValueError(f"Path parameter for '{path_template}' must be non-empty.")
    return path_template.format(*(quote(str(segment), safe='') for segment in segments))


def get_bucket_key_from_path(bucketed_path_with_prefix, prefix):
    """
    Get bucket and key from path, assuming it begins with given prefix.

    Args:
        bucketed_path_with_prefix (str):
            Prefixed path including bucket and key.
        prefix (str):
            Prefix to look for in bucketed_path_with_prefix.

    Returns:
        tuple:
            bucket_name (str):
                Parsed name of bucket.
            key_name (str):
                Parsed name of key.
    """

    bucket_key = bucketed_path_with_prefix.replace(prefix, '', 1)
    bucket_name, key_name = bucket_key.split(sep='/', maxsplit=1)
    return bucket_name, key_name


def convert_gs_uri_to_http_url(uri):
    """
    Convert URI, assumed to begin with 'gs://', to URL for use with
    Google Resumable Media.

    Args:
        uri (str):
            URI to Google Cloud Storage beginning with ``gs://``.

    Returns:
        str:
            URL to Google Cloud Storage usable with Google Resumable
            Media.
    """

    bucket, key = get_bucket_key_from_path(uri, 'gs://')

    # https://cloud.google.com/storage/docs/request-endpoints#encoding
    key = quote(key, safe='')

    url = f"https://storage.googleapis.com/download/storage/v1/b/{bucket}" \
          f"/o/{key}?alt=media"
    return url


def get_user_agent():
    """
    Build the User-Agent header value, e.g.
    ``watson-apis-python-sdk/1.4.0 Linux/6.1.0 Python/3.11.4``.
    """

    return (
        f"{config.USER_AGENT_NAME}/{config.SDK_VERSION}"
        f" {platform.system() or 'Unknown'}/{platform.release() or 'Unknown'}"
        f" Python/{platform.python_version()}"
    )


def get_sdk_headers(service_name, service_version, operation_id):
    """
    Headers attached to every request for analytics.

    Args:
        service_name (str):
            Name of the service, e.g. ``text_to_speech``.
        service_version (str):
            Major version of the service API, e.g. ``V1``.
        operation_id (str):
            Name of the operation being invoked, e.g. ``synthesize``.

    Returns:
        dict[str, str]:
            The headers.
    """

    return {
        'User-Agent': get_user_agent(),
        'X-IBMCloud-SDK-Analytics':
            f"service_name={service_name};service_version={service_version};"
            f"operation_id={operation_id}",
    }


def format_log_time(self, record, datefmt):
    """
    Helper function to format logging record times in ISO-8601 format.

    Usage is with a ``logging.Formatter``, e.g.,
    ```
    logging.Formatter.formatTime = format_log_time
    ```

    See:
    https://stackoverflow.com/a/58777937

    Args:
        self (logging.Formatter):
            The log formatter calling this function.
        record (logging.LogRecord):
            The log record whose time to format.
        datefmt (Union[str, None]):
            Optional string to specify time format; overriden here.

    Returns:
        str:
            The time, formatted as 2006-01-02T15:04:05.999-07:00.
    """

    log_time = datetime.datetime.fromtimestamp(record.created, datetime.timezone.utc)
    return log_time.astimezone().isoformat(timespec='milliseconds')


def make_logging_config(level='INFO'):
    """
    Logging configuration shared by the command-line tools, for use with
    ``logging.config.dictConfig()``.
    """

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'default': {
                'format': "[%(asctime)s] %(message)s",
            }
        },
        'handlers': {
            'stderr': {
                'class': 'logging.StreamHandler',
                'stream': 'ext://sys.stderr',
                'formatter': 'default'
            }
        },
        'root': {
            'level': level.upper(),
            'handlers': ['stderr']
        }
    }
