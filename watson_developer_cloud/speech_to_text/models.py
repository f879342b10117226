"""
Typed results of the Speech to Text V1 service.
"""

from google.protobuf import struct_pb2
import proto

# Used to compile protobufs into Python classes.
__protobuf__ = proto.module(package='watson_developer_cloud.speech_to_text')


class SupportedFeatures(proto.Message):
    custom_language_model = proto.Field(proto.BOOL, number=1)
    speaker_labels = proto.Field(proto.BOOL, number=2)


class SpeechModel(proto.Message):
    """
    A model for speech recognition.

    Attributes:
        name (str):
            Name of the model, e.g. ``en-US_BroadbandModel``.
        language (str):
            Language identifier, e.g. ``en-US``.
        rate (int):
            Sampling rate, in Hz, of audio the model is intended for.
        url (str):
            URI of the model.
        supported_features (SupportedFeatures):
            Features the model supports.
        description (str):
            Brief description of the model.
    """

    name = proto.Field(proto.STRING, number=1)
    language = proto.Field(proto.STRING, number=2)
    rate = proto.Field(proto.INT32, number=3)
    url = proto.Field(proto.STRING, number=4)
    supported_features = proto.Field(SupportedFeatures, number=5)
    description = proto.Field(proto.STRING, number=6)
    sessions = proto.Field(proto.STRING, number=7)


class SpeechModels(proto.Message):
    models = proto.RepeatedField(SpeechModel, number=1)


class SpeechRecognitionAlternative(proto.Message):
    """
    A hypothesis of the transcript of an utterance.

    Attributes:
        transcript (str):
            The transcript.
        confidence (float):
            Confidence, from 0 to 1; only reported for final results.
        timestamps (Sequence[Sequence]):
            ``[word, start_time, end_time]`` for each word, if requested.
        word_confidence (Sequence[Sequence]):
            ``[word, confidence]`` for each word, if requested.
    """

    transcript = proto.Field(proto.STRING, number=1)
    confidence = proto.Field(proto.DOUBLE, number=2, optional=True)
    timestamps = proto.RepeatedField(struct_pb2.ListValue, number=3)
    word_confidence = proto.RepeatedField(struct_pb2.ListValue, number=4)


class WordAlternativeResult(proto.Message):
    confidence = proto.Field(proto.DOUBLE, number=1)
    word = proto.Field(proto.STRING, number=2)


class WordAlternativeResults(proto.Message):
    start_time = proto.Field(proto.DOUBLE, number=1)
    end_time = proto.Field(proto.DOUBLE, number=2)
    alternatives = proto.RepeatedField(WordAlternativeResult, number=3)


class SpeechRecognitionResult(proto.Message):
    """
    Attributes:
        final (bool):
            Whether the result is final, or may still change.
        alternatives (Sequence[SpeechRecognitionAlternative]):
            Hypotheses, best first.
        keywords_result (dict):
            Spotted keywords, each mapped to a list of matches.
        word_alternatives (Sequence[WordAlternativeResults]):
            Alternative words over time, if requested.
    """

    final = proto.Field(proto.BOOL, number=1)
    alternatives = proto.RepeatedField(SpeechRecognitionAlternative, number=2)
    keywords_result = proto.Field(struct_pb2.Struct, number=3)
    word_alternatives = proto.RepeatedField(WordAlternativeResults, number=4)


class SpeakerLabelsResult(proto.Message):
    """
    Attributes:
        from_ (float):
            Start time of the word, in seconds.
        to (float):
            End time of the word, in seconds.
        speaker (int):
            Identifier of the speaker, from 0.
        confidence (float):
            Confidence in the speaker, from 0 to 1.
        final (bool):
            Whether the label is final, or may still change.
    """

    from_ = proto.Field(proto.DOUBLE, number=1)
    to = proto.Field(proto.DOUBLE, number=2)
    speaker = proto.Field(proto.INT32, number=3)
    confidence = proto.Field(proto.DOUBLE, number=4)
    final = proto.Field(proto.BOOL, number=5)


class SpeechRecognitionResults(proto.Message):
    """
    Results of a recognition request, or an incremental part of them.

    Attributes:
        results (Sequence[SpeechRecognitionResult]):
            Results of consecutive utterances.
        result_index (int):
            Index of the first result, among all results of the request.
        speaker_labels (Sequence[SpeakerLabelsResult]):
            Speaker of each word, if requested.
        warnings (Sequence[str]):
            Warnings about the request, e.g. unknown parameters.
    """

    results = proto.RepeatedField(SpeechRecognitionResult, number=1)
    result_index = proto.Field(proto.INT32, number=2)
    speaker_labels = proto.RepeatedField(SpeakerLabelsResult, number=3)
    warnings = proto.RepeatedField(proto.STRING, number=4)
