#!/usr/bin/env python3

"""
Command-line WebSocket client for Watson Speech to Text.

The positional argument is a local path or a URI of audio to transcribe
(``file://``, ``http(s)://``, ``s3://`` or ``gs://``); if omitted, audio is
read from stdin. Results received from the service are printed on stdout
as JSON, one message per line.

Credentials are read from ``SPEECH_TO_TEXT_*`` environment variables or
an ``ibm-credentials.env`` file.

Example usage with a pre-recorded file:
```
watson-speech-to-text hello.wav > results.jsonl
```

Example usage with live streaming audio:
```
sox -dqV1 -traw -r16000 -c1 -b16 -esigned - \
  | watson-speech-to-text --content-type 'audio/l16;rate=16000' --interim-results
```
"""

import argparse
import asyncio
import json
import logging
import logging.config
import os
import stat
import sys

import aiofiles

from watson_developer_cloud.common import config
from watson_developer_cloud.common import utils
from watson_developer_cloud.common.rest import WatsonError
from watson_developer_cloud.common.rest import model_to_dict
from watson_developer_cloud.speech_to_text import audio as audio_sources
from watson_developer_cloud.speech_to_text.v1 import SpeechToTextV1

# Required for use with aiofiles; hopefully this is fairly portable on *nix systems.
STDIN_FILENAME = '/dev/stdin'


async def from_stdin(message_size=config.WEBSOCKET_AUDIO_MESSAGE_SIZE):
    """
    Read chunked audio from stdin until it is closed.

    Args:
        message_size (int):
            Read audio chunks of this size; affects streaming latency.

    Yields:
        bytes
    """
    # https://stackoverflow.com/questions/13442574/how-do-i-determine-if-sys-stdin-is-redirected
    mode = os.fstat(sys.stdin.fileno()).st_mode

    if stat.S_ISFIFO(mode):
        # Async read from piped stdin: https://stackoverflow.com/q/64303607/281536
        # NOTE: this doesn't work with redirected stdin.
        reader = asyncio.StreamReader()
        protocol = asyncio.StreamReaderProtocol(reader)
        await asyncio.get_running_loop().connect_read_pipe(lambda: protocol, sys.stdin.buffer)
    elif stat.S_ISREG(mode):
        # Async read from redirected stdin.
        reader = await aiofiles.open(STDIN_FILENAME, mode='rb')
    else:
        logging.warning('No audio piped or redirected to stdin.')
        return

    try:
        while True:
            audio_chunk = await reader.read(message_size)
            if not audio_chunk:
                break
            yield audio_chunk
    finally:
        # Unlike asyncio.StreamReader(), aiofiles provides a file-like object that should be closed.
        if isinstance(reader, aiofiles.threadpool.binary.AsyncBufferedReader):
            await reader.close()


def print_results(results):
    print(json.dumps(model_to_dict(results)), flush=True)


async def transcribe(service, audio, content_type, model, customization_id, interim_results, message_size):
    accumulator = await service.recognize_using_websocket(
        audio,
        content_type,
        callback=print_results,
        model=model,
        customization_id=customization_id,
        interim_results=interim_results,
        message_size=message_size,
    )
    logging.info("Transcript: %s", accumulator.best_transcript)


def main():
    parser = argparse.ArgumentParser(formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    parser.add_argument(
        'audio',
        metavar='AUDIO',
        nargs='?',
        help="Path or URI of audio to transcribe, or '-' for stdin.",
        default='-',
    )
    parser.add_argument(
        '--content-type',
        help='MIME type of the audio.',
        default='audio/wav',
    )
    parser.add_argument(
        '--model',
        help='Model to transcribe with; the service chooses if not set.',
        default=None,
    )
    parser.add_argument(
        '--customization-id',
        help='Custom language model to transcribe with.',
        default=None,
    )
    parser.add_argument(
        '--interim-results',
        action='store_true',
        help='Print interim results, as well as final ones.',
    )
    parser.add_argument(
        '--service-url',
        help='Base URL of the service; overrides the credentials, if set.',
        default=None,
    )
    parser.add_argument(
        '--message-size',
        help='Size of audio sent in each WebSocket message, affecting streaming latency.',
        default=config.WEBSOCKET_AUDIO_MESSAGE_SIZE,
        type=int,
    )
    parser.add_argument(
        '--log-level',
        metavar='LEVEL',
        help='Verbosity of logging.',
        default='WARNING',
    )
    args = parser.parse_args()

    logging.Formatter.formatTime = utils.format_log_time
    logging.config.dictConfig(utils.make_logging_config(args.log_level))

    try:
        service = SpeechToTextV1()
        if args.service_url:
            service.set_service_url(args.service_url)

        if args.audio == '-':
            audio = from_stdin(args.message_size)
        elif audio_sources.is_audio_uri(args.audio):
            audio_sources.validate_uri_scheme(args.audio)
            audio_sources.uri_exists(args.audio)
            audio = args.audio
        else:
            audio = utils.get_local_path(args.audio)

        asyncio.run(
            transcribe(
                service,
                audio,
                args.content_type,
                args.model,
                args.customization_id,
                args.interim_results,
                args.message_size,
            )
        )
    except KeyboardInterrupt:
        sys.exit(130)  # Don't show Python traceback.
    except (WatsonError, OSError, ValueError) as e:
        logging.error("ERROR: %s", e)
        sys.exit(1)


if __name__ == '__main__':
    main()
