#!/usr/bin/env python3

"""
Command-line tool to synthesize speech with Watson Text to Speech.

Text is taken from the first positional argument, or read from stdin.
Credentials are read from ``TEXT_TO_SPEECH_*`` environment variables or
an ``ibm-credentials.env`` file.

Example usage:
```
watson-text-to-speech 'Hello world' --voice en-US_AllisonV3Voice -o hello.wav
echo 'Hello world' | watson-text-to-speech --accept audio/mp3 -o hello.mp3
watson-text-to-speech --list-voices
```
"""

import argparse
import logging
import logging.config
import sys

from watson_developer_cloud.common import utils
from watson_developer_cloud.common.rest import WatsonError
from watson_developer_cloud.text_to_speech.v1 import TextToSpeechV1


def list_voices(service):
    for voice in service.list_voices().result.voices:
        print(f"{voice.name}\t{voice.language}\t{voice.gender}\t{voice.description}")


def synthesize(service, text, output, accept, voice, customization_id):
    """
    Synthesize text and write the audio to a file, or stdout if '-'.
    """
    audio = service.synthesize(
        text,
        accept=accept,
        voice=voice,
        customization_id=customization_id,
    ).result

    if output == '-':
        sys.stdout.buffer.write(audio)
        sys.stdout.buffer.flush()
    else:
        with open(output, 'wb') as fout:
            fout.write(audio)
    logging.info("Wrote %d bytes of %s audio to %s.", len(audio), accept, output)


def main():
    parser = argparse.ArgumentParser(formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    parser.add_argument(
        'text',
        metavar='TEXT',
        nargs='?',
        help='Text or SSML to synthesize; read from stdin if omitted.',
        default=None,
    )
    parser.add_argument(
        '-o', '--output',
        help="File to write audio to, or '-' for stdout.",
        default='-',
    )
    parser.add_argument(
        '--accept',
        help='Audio format to request.',
        default='audio/wav',
    )
    parser.add_argument(
        '--voice',
        help='Voice to synthesize with; the service chooses if not set.',
        default=None,
    )
    parser.add_argument(
        '--customization-id',
        help='Custom model to synthesize with.',
        default=None,
    )
    parser.add_argument(
        '--service-url',
        help='Base URL of the service; overrides the credentials, if set.',
        default=None,
    )
    parser.add_argument(
        '--list-voices',
        action='store_true',
        help='List the available voices and exit.',
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
        service = TextToSpeechV1()
        if args.service_url:
            service.set_service_url(args.service_url)

        if args.list_voices:
            list_voices(service)
        else:
            text = args.text if args.text is not None else sys.stdin.read()
            synthesize(service, text, args.output, args.accept, args.voice, args.customization_id)
    except KeyboardInterrupt:
        sys.exit(130)  # Don't show Python traceback.
    except (WatsonError, OSError) as e:
        logging.error("ERROR: %s", e)
        sys.exit(1)


if __name__ == '__main__':
    main()
