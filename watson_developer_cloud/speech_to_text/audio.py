"""
Audio sources for Speech to Text: local files, and files hosted at HTTP(S)
URLs, on Google Cloud Storage or on AWS S3. Each source is read as a
generator of chunks, so that audio is streamed rather than held in memory.
"""

import io
import logging
import os
from urllib.parse import urlparse

import boto3
from botocore.exceptions import ClientError as AWSClientError
import google.auth
import google.auth.transport.requests
import google.cloud.storage
import google.resumable_media.requests
import requests

from watson_developer_cloud.common import config
from watson_developer_cloud.common.rest import WatsonError
from watson_developer_cloud.common.utils import convert_gs_uri_to_http_url
from watson_developer_cloud.common.utils import get_bucket_key_from_path
from watson_developer_cloud.common.utils import get_local_path


class AudioURISchemeNotAllowedError(WatsonError):
    pass


class AudioNotAccessibleError(WatsonError):
    pass


GS_READ_ONLY_SCOPE = 'https://www.googleapis.com/auth/devstorage.read_only'

logger = logging.getLogger(__name__)


def is_audio_uri(audio):
    """Whether audio is a str with one of the supported URI schemes."""
    return isinstance(audio, str) and urlparse(audio).scheme in ('file', 'http', 'https', 's3', 'gs')


def validate_uri_scheme(uri, allowed_uri_schemes=None):
    """
    Check if a URI has scheme in allowed set.

    Args:
        uri (str):
            URI with a scheme that may or may not be allowed.
        allowed_uri_schemes (Union[set[str], None]):
            Set of schemes the URI is allowed to have; defaults to
            ``config.AUDIO_ALLOWED_URI_SCHEMES``.

    Raises:
        AudioURISchemeNotAllowedError:
            The error message indicating which schemes are allowed.
    """

    if allowed_uri_schemes is None:
        allowed_uri_schemes = config.AUDIO_ALLOWED_URI_SCHEMES
    uri_scheme = urlparse(uri).scheme
    if uri_scheme not in allowed_uri_schemes:
        error_message = f"URI scheme '{uri_scheme}' not allowed; configured to allow:" + \
                        f" {', '.join(sorted(allowed_uri_schemes)) if len(allowed_uri_schemes) else None}."
        raise AudioURISchemeNotAllowedError(error_message)


def bytes_chunks(data, chunk_size=config.MAX_CHUNK_SIZE):
    """
    Yield chunks of in-memory audio.

    Args:
        data (bytes):
            Audio data.
        chunk_size (int):
            Maximum size of each chunk.

    Yields:
        bytes
    """

    for i in range(0, len(data), chunk_size):
        yield data[i:i+chunk_size]


def generator_chunks(generator, chunk_size=config.MAX_CHUNK_SIZE):
    """Re-chunk audio from a generator so no chunk exceeds chunk_size."""
    for chunk in generator:
        yield from bytes_chunks(chunk, chunk_size)


def file_chunks(uri, chunk_size=config.MAX_CHUNK_SIZE):
    """
    Yield contents of a local file in chunks.

    Args:
        uri (str):
            Possibly ``file://``-prefixed path to local file.
    """

    with open(get_local_path(uri), 'rb') as fin:
        for chunk in iter(lambda: fin.read(chunk_size), b''):
            yield chunk


def http_chunks(uri, chunk_size=config.MAX_CHUNK_SIZE):
    """
    Yield contents of a file hosted at a public URL in chunks.

    Args:
        uri (str):
            HTTP(S) URL of the file.
    """

    with requests.get(uri, stream=True) as r:
        r.raise_for_status()
        for chunk in r.iter_content(chunk_size=chunk_size):
            yield chunk


def google_cloud_chunks(uri):
    """
    Yield contents of a file hosted on GCS in chunks.

    Args:
        uri (str):
            Prefixed Google Cloud Storage file. Note you must have access
            to the file with currently loaded Google credentials.
    """

    url = convert_gs_uri_to_http_url(uri)

    # https://googleapis.dev/python/google-resumable-media/latest/resumable_media/requests.html#google.resumable_media.requests.ChunkedDownload
    credentials, _ = google.auth.default(scopes=(GS_READ_ONLY_SCOPE,))
    transport = google.auth.transport.requests.AuthorizedSession(credentials)

    chunk_start = 0
    total_bytes = float('inf')
    while chunk_start < total_bytes:
        # ChunkedDownload appends bytes to stream.
        #  Use new stream each chunk to avoid holding entire file in memory.
        with io.BytesIO() as f:
            download = google.resumable_media.requests.ChunkedDownload(
                url,
                config.GS_CHUNK_SIZE,
                f,
                start=chunk_start,
            )
            download.consume_next_chunk(transport)
            yield f.getvalue()

            chunk_start += config.GS_CHUNK_SIZE
            total_bytes = download.total_bytes


def aws_s3_chunks(uri, chunk_size=config.MAX_CHUNK_SIZE):
    """
    Yield contents of a file hosted on AWS S3 in chunks.

    Args:
        uri (str):
            Prefixed AWS S3 file. Note you must have access to the file
            with currently loaded AWS credentials.
    """

    bucket, key = get_bucket_key_from_path(uri, 's3://')
    # https://botocore.amazonaws.com/v1/documentation/api/latest/reference/response.html#botocore.response.StreamingBody.iter_chunks
    s3c = boto3.client('s3')
    yield from s3c.get_object(Bucket=bucket, Key=key)['Body'].iter_chunks(chunk_size=chunk_size)


URI_CHUNKERS = {
    'file': file_chunks,
    'http': http_chunks,
    'https': http_chunks,
    'gs': google_cloud_chunks,
    's3': aws_s3_chunks,
}


def audio_uri_chunks(uri):
    """
    Yield contents of the audio at a URI in chunks.

    Args:
        uri (str):
            URI with scheme ``file``, ``http``, ``https``, ``gs`` or ``s3``.

    Raises:
        AudioURISchemeNotAllowedError:
            The scheme is not in ``config.AUDIO_ALLOWED_URI_SCHEMES``.
    """

    validate_uri_scheme(uri)
    logger.debug("Streaming audio from %s.", uri)
    return URI_CHUNKERS[urlparse(uri).scheme](uri)


def audio_chunks(audio):
    """
    Yield audio from any supported source in chunks.

    Args:
        audio (Union[bytes, str, os.PathLike, BinaryIO, Iterable[bytes]]):
            Audio data, a URI, a local path, a binary file object, or a
            generator of audio data.
    """

    if isinstance(audio, (bytes, bytearray)):
        return bytes_chunks(bytes(audio))
    if is_audio_uri(audio):
        return audio_uri_chunks(audio)
    if isinstance(audio, (str, os.PathLike)):
        return file_chunks(os.fspath(audio))
    if hasattr(audio, 'read'):
        return iter(lambda: audio.read(config.MAX_CHUNK_SIZE), b'')
    return generator_chunks(audio)


def uri_exists(uri):
    """
    Attempt to access audio at given uri.

    Args:
        uri (str):
            URI where the audio resides.

    Raises:
        AudioNotAccessibleError:
            The audio is not reachable.
    """

    parsed_uri = urlparse(uri)
    try:
        if parsed_uri.scheme == 'file':
            if not os.path.exists(get_local_path(uri)):
                raise AudioNotAccessibleError
        elif parsed_uri.scheme == 'gs':
            bucket, key = get_bucket_key_from_path(uri, 'gs://')
            credentials, _ = google.auth.default(scopes=(GS_READ_ONLY_SCOPE,))
            gsc = google.cloud.storage.Client(credentials=credentials)
            blob = google.cloud.storage.Blob(bucket=gsc.bucket(bucket), name=key)
            if not blob.exists(client=gsc):
                raise AudioNotAccessibleError
        elif parsed_uri.scheme in ('http', 'https'):
            with requests.head(uri, allow_redirects=True) as r:
                r.raise_for_status()
        elif parsed_uri.scheme == 's3':
            bucket, key = get_bucket_key_from_path(uri, 's3://')
            s3c = boto3.client('s3')
            s3c.head_object(Bucket=bucket, Key=key)
    except (AWSClientError, requests.HTTPError, AudioNotAccessibleError) as e:
        raise AudioNotAccessibleError(f"Could not access audio at {uri}.") from e
