"""
Python SDK for IBM Watson services: typed request and response wrappers
around the services' REST and WebSocket APIs.

Credentials are read from ``<SERVICE>_*`` environment variables, or from an
``ibm-credentials.env`` file, unless an authenticator is given explicitly.

Within you will find the following modules:

``watson_developer_cloud.common`` implements what the services share:
request construction and response decoding (``common.rest``),
authenticators (``common.authentication``), the service base class
(``common.service``) and WAV header repair (``common.wav``).

One package per service, each with a ``models`` module of typed results:
  - ``watson_developer_cloud.text_to_speech``; run ``watson-text-to-speech``
    from the command line to synthesize speech.
  - ``watson_developer_cloud.speech_to_text``, with HTTP and WebSocket
    recognition; run ``watson-speech-to-text`` from the command line to
    stream audio for transcription.
  - ``watson_developer_cloud.visual_recognition``, V3 with a local cache of
    downloaded Core ML models, and V4.
  - ``watson_developer_cloud.natural_language_understanding``
  - ``watson_developer_cloud.alchemy_language``, the legacy language API.
  - ``watson_developer_cloud.language_translator``
"""

from watson_developer_cloud.common import config

__version__ = config.SDK_VERSION
