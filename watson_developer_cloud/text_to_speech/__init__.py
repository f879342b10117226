from watson_developer_cloud.text_to_speech.v1 import TextToSpeechV1  # noqa: F401
