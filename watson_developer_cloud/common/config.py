"""
Provides defaults used throughout watson-developer-cloud.
"""

import logging
import os

# Current SDK version. Note that this is not the same as any service API version.
SDK_VERSION = '1.4.0'

# CHANGELOG:
#   1.4.0 (02 Sep 2026):
#   - Add Visual Recognition V4 collection, object and training operations.
#   - Speech to Text accepts audio from s3:// and gs:// URIs, in addition to file:// and http(s)://.
#   - Add ``watson-speech-to-text`` command-line WebSocket client.
#   1.3.1 (14 Jul 2026):
#   - Fix WAV header repair aborting with a partially-written RIFF chunk size on truncated audio.
#   1.3.0 (30 Jun 2026):
#   - Visual Recognition V3 keeps downloaded models in a local cache with freshness checks.
#   - The local model directory may be set by the WATSON_LOCAL_MODEL_DIR environment variable.
#   1.2.0 (12 May 2026):
#   - Add Text to Speech custom prompts and speaker models.
#   - Add ``watson-text-to-speech`` command-line tool.
#   1.1.0 (08 Apr 2026):
#   - IAM access tokens are refreshed when within the last 20% of their lifetime.
#   - Credentials can be read from an ``ibm-credentials.env`` file.
#   1.0.0 (02 Mar 2026):
#   - Initial release: Natural Language Understanding, AlchemyLanguage, Language Translator,
#     Speech to Text, Text to Speech and Visual Recognition.

USER_AGENT_NAME = 'watson-apis-python-sdk'

DEFAULT_IAM_URL = 'https://iam.cloud.ibm.com/identity/token'

# IAM access tokens are refreshed once this fraction of their lifetime has passed.
IAM_TOKEN_REFRESH_FRACTION = 0.8
# IAM refresh tokens expire this long after the access token's expiration.
IAM_REFRESH_TOKEN_LIFETIME_SECONDS = 7 * 24 * 60 * 60

HTTP_TIMEOUT_SECONDS = float(os.getenv('WATSON_HTTP_TIMEOUT_SECONDS', 60.0))

# Credentials may be stored in this file, in the working directory or the home directory.
CREDENTIALS_FILENAME = 'ibm-credentials.env'
CREDENTIALS_FILE = os.getenv('IBM_CREDENTIALS_FILE', None)

# Directory name used for application data, e.g. the local model cache.
APPLICATION_DIRECTORY_NAME = 'watson-developer-cloud'
LOCAL_MODEL_DIRECTORY = os.getenv('WATSON_LOCAL_MODEL_DIR', None)

# Used as chunk size for audio uploads; limits generators.
MAX_CHUNK_SIZE = 128 * 1024
GS_CHUNK_SIZE = 262144  # Google requires chunks be multiples of 262144

# Size of audio sent in each WebSocket message; affects streaming latency.
WEBSOCKET_AUDIO_MESSAGE_SIZE = 8 * 1024

# Audio URI schemes to accept for Speech to Text. Default is to accept all that are supported.
AUDIO_ALLOWED_URI_SCHEMES = os.getenv('WATSON_AUDIO_ALLOWED_URI_SCHEMES', 'file,http,https,s3,gs')
AUDIO_ALLOWED_URI_SCHEMES = set(
    scheme.strip().replace('://', '')
    for scheme in AUDIO_ALLOWED_URI_SCHEMES.lower().split(sep=',')
    if scheme.strip()
)

if 'http' in AUDIO_ALLOWED_URI_SCHEMES and 'https' not in AUDIO_ALLOWED_URI_SCHEMES:
    logging.warning('Speech to Text set to allow http:// but NOT https:// audio URIs.')
