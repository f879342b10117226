from watson_developer_cloud.speech_to_text.accumulator import SpeechRecognitionResultsAccumulator  # noqa: F401
from watson_developer_cloud.speech_to_text.audio import AudioURISchemeNotAllowedError  # noqa: F401
from watson_developer_cloud.speech_to_text.v1 import SpeechToTextV1  # noqa: F401
from watson_developer_cloud.speech_to_text.v1 import WatsonWebSocketError  # noqa: F401
