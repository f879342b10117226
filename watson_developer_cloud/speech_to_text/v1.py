"""
Speech to Text V1: transcribe audio with the HTTP interface, or stream it
with the WebSocket interface to receive interim results.
"""

import asyncio
import itertools
import json
import logging
import uuid
from urllib.parse import quote
from urllib.parse import urlencode

from packaging import version
import websockets
import websockets.exceptions
from websockets.version import version as websockets_version

from watson_developer_cloud.common import config
from watson_developer_cloud.common import utils
from watson_developer_cloud.common import wav
from watson_developer_cloud.common.rest import WatsonError
from watson_developer_cloud.common.rest import WatsonNoEndpointError
from watson_developer_cloud.common.rest import model_decoder
from watson_developer_cloud.common.rest import model_from_dict
from watson_developer_cloud.common.rest import strip_none_values
from watson_developer_cloud.common.service import TransactionLoggerAdapter
from watson_developer_cloud.common.service import WatsonService
from watson_developer_cloud.common.utils import encode_path
from watson_developer_cloud.speech_to_text import audio as audio_sources
from watson_developer_cloud.speech_to_text import models
from watson_developer_cloud.speech_to_text.accumulator import SpeechRecognitionResultsAccumulator


class WatsonWebSocketError(WatsonError):
    pass


DEFAULT_SERVICE_URL = 'https://api.us-south.speech-to-text.watson.cloud.ibm.com'
SERVICE_NAME = 'speech_to_text'

logger = logging.getLogger(__name__)

# Enough of the start of a file to hold a canonical WAV header.
WAV_HEADER_PEEK_SIZE = 44

# Renamed from extra_headers when websockets moved to its new asyncio implementation.
if version.parse(websockets_version) >= version.parse('14.0'):
    WEBSOCKET_HEADERS_KWARG = 'additional_headers'
else:
    WEBSOCKET_HEADERS_KWARG = 'extra_headers'


def infer_content_type(chunks):
    """
    Infer the content type of streamed audio from its header.

    Args:
        chunks (Iterable[bytes]):
            The audio.

    Returns:
        tuple:
            content_type (str):
                ``audio/wav``.
            chunks (Iterator[bytes]):
                The audio, including any chunks consumed to read the header.

    Raises:
        ValueError:
            The audio does not start with a WAV header.
    """

    chunks = iter(chunks)
    header = b''
    for chunk in chunks:
        header += chunk
        if len(header) >= WAV_HEADER_PEEK_SIZE:
            break
    if not wav.is_wav_file(header):
        raise ValueError('Could not infer the content type of the audio; give content_type.')

    encoding, sample_rate, channels = wav.read_wav_header(header)
    if encoding:
        logger.debug("WAV audio: %s, %d Hz, %d channel(s).", encoding, sample_rate, channels)
    return 'audio/wav', itertools.chain([header], chunks)


def make_websocket_uri(service_url, path, query, userinfo=None):
    """
    Build the WebSocket URI of a service path, e.g. ``wss://host/v1/recognize``
    for ``https://host``.
    """

    if service_url.startswith('https://'):
        uri = 'wss://' + service_url[len('https://'):]
    elif service_url.startswith('http://'):
        uri = 'ws://' + service_url[len('http://'):]
    else:
        uri = service_url
    if userinfo is not None:
        scheme, remainder = uri.split('://', 1)
        username, password = userinfo
        uri = f"{scheme}://{quote(username, safe='')}:{quote(password, safe='')}@{remainder}"
    uri += path
    query = [(name, value) for name, value in query if value is not None]
    if query:
        uri += '?' + urlencode(query)
    return uri


class SpeechToTextV1(WatsonService):
    """
    Client of the Speech to Text V1 service.

    Args:
        authenticator (Union[common.authentication.Authenticator, None]):
            If None, credentials are read from ``SPEECH_TO_TEXT_*``
            environment variables or the credentials file.
        service_url (str):
            Base URL of the service instance.
        session (Union[requests.Session, None]):
            Session to send requests with.
    """

    def __init__(self, authenticator=None, service_url=DEFAULT_SERVICE_URL, session=None):
        super().__init__(
            SERVICE_NAME,
            service_url=service_url,
            authenticator=authenticator,
            session=session,
        )

    #########################
    # Models
    #########################

    def list_models(self, headers=None):
        """
        List the models available for speech recognition.

        Returns:
            DetailedResponse:
                With a ``SpeechModels`` result.
        """
        request = self.prepare_request(
            'GET', '/v1/models', 'list_models', headers=headers, accept='application/json',
        )
        return self.send(request, model_decoder(models.SpeechModels))

    def get_model(self, model_id, headers=None):
        request = self.prepare_request(
            'GET',
            encode_path('/v1/models/{}', model_id),
            'get_model',
            headers=headers,
            accept='application/json',
        )
        return self.send(request, model_decoder(models.SpeechModel))

    #########################
    # HTTP recognition
    #########################

    def recognize(
        self,
        audio,
        content_type=None,
        model=None,
        customization_id=None,
        timestamps=None,
        word_confidence=None,
        max_alternatives=None,
        smart_formatting=None,
        speaker_labels=None,
        keywords=None,
        keywords_threshold=None,
        inactivity_timeout=None,
        profanity_filter=None,
        headers=None,
    ):
        """
        Transcribe audio, streamed to the service in chunks.

        Args:
            audio (Union[bytes, str, BinaryIO, Iterable[bytes]]):
                Audio data; a local path; a ``file://``, ``http(s)://``,
                ``s3://`` or ``gs://`` URI; a binary file object; or a
                generator of audio data.
            content_type (Union[str, None]):
                MIME type of the audio, e.g. ``audio/flac``. Inferred from
                the header of WAV audio if not given.
            model (Union[str, None]):
                Model to transcribe with, e.g. ``en-US_BroadbandModel``.
            customization_id (Union[str, None]):
                Custom language model to transcribe with.
            timestamps (Union[bool, None]):
                Whether to return the start and end time of each word.
            word_confidence (Union[bool, None]):
                Whether to return the confidence of each word.
            max_alternatives (Union[int, None]):
                Maximum number of alternative transcripts.
            smart_formatting (Union[bool, None]):
                Whether to format dates, numbers and such.
            speaker_labels (Union[bool, None]):
                Whether to label the speaker of each word.
            keywords (Union[Sequence[str], None]):
                Keywords to spot.
            keywords_threshold (Union[float, None]):
                Minimum confidence of spotted keywords.
            inactivity_timeout (Union[int, None]):
                Seconds of silence after which the request ends.
            profanity_filter (Union[bool, None]):
                Whether to censor profanity.

        Returns:
            DetailedResponse:
                With a ``SpeechRecognitionResults`` result.

        Raises:
            ValueError:
                content_type not given, and not inferred.
            AudioURISchemeNotAllowedError:
                The audio URI scheme is not allowed.
        """

        chunks = audio_sources.audio_chunks(audio)
        if content_type is None:
            content_type, chunks = infer_content_type(chunks)

        params = [
            ('model', model),
            ('customization_id', customization_id),
            ('timestamps', timestamps),
            ('word_confidence', word_confidence),
            ('max_alternatives', max_alternatives),
            ('smart_formatting', smart_formatting),
            ('speaker_labels', speaker_labels),
            ('keywords', keywords),
            ('keywords_threshold', keywords_threshold),
            ('inactivity_timeout', inactivity_timeout),
            ('profanity_filter', profanity_filter),
        ]
        request = self.prepare_request(
            'POST',
            '/v1/recognize',
            'recognize',
            headers=headers,
            params=params,
            data=chunks,
            accept='application/json',
            content_type=content_type,
        )
        return self.send(request, model_decoder(models.SpeechRecognitionResults))

    #########################
    # WebSocket recognition
    #########################

    def get_recognize_websocket_uri(self, model=None, customization_id=None):
        """
        Returns:
            str:
                URI of the WebSocket interface, with credentials that
                cannot be sent as headers.
        """
        query, userinfo = self.authenticator.websocket_credentials()
        items = [('model', model), ('customization_id', customization_id)]
        items.extend(query.items())
        return make_websocket_uri(self.service_url, '/v1/recognize', items, userinfo=userinfo)

    def get_websocket_headers(self):
        websocket_headers = utils.get_sdk_headers(self.service_name, self.service_version, 'recognize_using_websocket')
        websocket_headers.update(self.default_headers)
        return websocket_headers

    async def recognize_using_websocket(
        self,
        audio,
        content_type,
        callback=None,
        model=None,
        customization_id=None,
        interim_results=None,
        timestamps=None,
        word_confidence=None,
        max_alternatives=None,
        smart_formatting=None,
        speaker_labels=None,
        keywords=None,
        keywords_threshold=None,
        inactivity_timeout=None,
        profanity_filter=None,
        message_size=config.WEBSOCKET_AUDIO_MESSAGE_SIZE,
    ):
        """
        Transcribe audio streamed over a WebSocket connection.

        Args:
            audio (Union[bytes, str, BinaryIO, Iterable[bytes], AsyncIterable[bytes]]):
                Audio as accepted by ``recognize()``, or an asynchronous
                generator of audio data, e.g. from a microphone.
            content_type (str):
                MIME type of the audio, e.g. ``audio/l16;rate=16000``.
            callback (Union[Callable[[SpeechRecognitionResults], None], None]):
                Called with each results message, including interim ones.
            interim_results (Union[bool, None]):
                Whether to receive interim results.
            message_size (int):
                Size of audio sent in each WebSocket message.

            Other arguments are as for ``recognize()``.

        Returns:
            SpeechRecognitionResultsAccumulator:
                All results of the request.

        Raises:
            WatsonWebSocketError:
                The service reported an error, or the connection failed.
        """

        if not self.service_url:
            raise WatsonNoEndpointError(f"Service URL is not set for {self.service_name}.")

        start_message = strip_none_values({
            'action': 'start',
            'content-type': content_type,
            'interim_results': interim_results,
            'timestamps': timestamps,
            'word_confidence': word_confidence,
            'max_alternatives': max_alternatives,
            'smart_formatting': smart_formatting,
            'speaker_labels': speaker_labels,
            'keywords': keywords,
            'keywords_threshold': keywords_threshold,
            'inactivity_timeout': inactivity_timeout,
            'profanity_filter': profanity_filter,
        })
        uri = self.get_recognize_websocket_uri(model=model, customization_id=customization_id)
        logger = TransactionLoggerAdapter(self.logger, {'local_uuid': str(uuid.uuid4())})

        try:
            connection = websockets.connect(uri, **{WEBSOCKET_HEADERS_KWARG: self.get_websocket_headers()})
            async with connection as websocket:
                logger.debug("Connected to %s.", uri.split('?')[0])
                await websocket.send(json.dumps(start_message))

                send_audio = asyncio.ensure_future(self._send_audio(websocket, audio, message_size, logger))
                try:
                    accumulator = await self._receive_results(websocket, callback, logger)
                except BaseException:
                    send_audio.cancel()
                    raise
                # Ends once the stop message is sent, or the connection is closed.
                await send_audio
        except websockets.exceptions.InvalidHandshake as e:
            raise WatsonWebSocketError(f"WebSocket handshake failed: {e}") from e
        except websockets.exceptions.ConnectionClosedError as e:
            raise WatsonWebSocketError(f"WebSocket connection closed unexpectedly: {e}") from e

        return accumulator

    async def _send_audio(self, websocket, audio, message_size, logger):
        """Send audio in binary messages, then the stop message."""
        try:
            total_bytes = 0
            async for chunk in _iterate_audio(audio):
                for i in range(0, len(chunk), message_size):
                    await websocket.send(chunk[i:i+message_size])
                total_bytes += len(chunk)
            logger.debug("Sent %d bytes of audio.", total_bytes)
            await websocket.send(json.dumps({'action': 'stop'}))
        except websockets.exceptions.ConnectionClosed:
            logger.debug("Connection closed before all audio was sent.")
        except Exception:
            # Unblock the receiver, then report the error from the task.
            await websocket.close()
            raise

    async def _receive_results(self, websocket, callback, logger):
        """
        Receive messages until the service is listening again after the
        audio was transcribed, or closes the connection.
        """

        accumulator = SpeechRecognitionResultsAccumulator()
        listening_count = 0
        while True:
            try:
                message = await websocket.recv()
            except websockets.exceptions.ConnectionClosedOK:
                break
            if isinstance(message, bytes):
                logger.warning("Ignoring unexpected binary message of %d bytes.", len(message))
                continue

            try:
                message_json = json.loads(message)
            except ValueError as e:
                raise WatsonWebSocketError(f"Received a message that is not JSON: {message!r}") from e
            if 'error' in message_json:
                logger.error("Service reported error: %s", message_json['error'])
                raise WatsonWebSocketError(message_json['error'])
            if message_json.get('state') == 'listening':
                # The first is in response to the start message.
                listening_count += 1
                if listening_count > 1:
                    break
                continue
            if 'results' in message_json or 'speaker_labels' in message_json:
                results = model_from_dict(models.SpeechRecognitionResults, message_json)
                accumulator.add(results)
                if callback is not None:
                    callback(results)
            elif 'warnings' in message_json:
                for warning in message_json['warnings']:
                    logger.warning("Service warning: %s", warning)
        return accumulator


async def _iterate_audio(audio):
    """Iterate audio asynchronously; blocking reads run in an executor."""
    if hasattr(audio, '__aiter__'):
        async for chunk in audio:
            yield chunk
        return

    chunks = audio_sources.audio_chunks(audio)
    loop = asyncio.get_running_loop()
    while True:
        chunk = await loop.run_in_executor(None, next, chunks, None)
        if chunk is None:
            break
        yield chunk
