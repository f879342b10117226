"""
Typed results of the Language Translator V3 service.
"""

import proto

# Used to compile protobufs into Python classes.
__protobuf__ = proto.module(package='watson_developer_cloud.language_translator')


class Language(proto.Message):
    language = proto.Field(proto.STRING, number=1)
    language_name = proto.Field(proto.STRING, number=2)
    native_language_name = proto.Field(proto.STRING, number=3)
    country_code = proto.Field(proto.STRING, number=4)
    supported_as_source = proto.Field(proto.BOOL, number=5)
    supported_as_target = proto.Field(proto.BOOL, number=6)
    identifiable = proto.Field(proto.BOOL, number=7)


class Languages(proto.Message):
    languages = proto.RepeatedField(Language, number=1)


class Translation(proto.Message):
    translation = proto.Field(proto.STRING, number=1)


class TranslationResult(proto.Message):
    """
    Attributes:
        word_count (int):
            Number of words in the input text.
        character_count (int):
            Number of characters in the input text.
        detected_language (str):
            Language of the input text, if it was not given.
        detected_language_confidence (float):
            Confidence of the detected language, from 0 to 1.
        translations (Sequence[Translation]):
            One translation per input text, in order.
    """

    word_count = proto.Field(proto.INT32, number=1)
    character_count = proto.Field(proto.INT32, number=2)
    detected_language = proto.Field(proto.STRING, number=3)
    detected_language_confidence = proto.Field(proto.DOUBLE, number=4)
    translations = proto.RepeatedField(Translation, number=5)


class IdentifiableLanguage(proto.Message):
    language = proto.Field(proto.STRING, number=1)
    name = proto.Field(proto.STRING, number=2)


class IdentifiableLanguages(proto.Message):
    languages = proto.RepeatedField(IdentifiableLanguage, number=1)


class IdentifiedLanguage(proto.Message):
    language = proto.Field(proto.STRING, number=1)
    confidence = proto.Field(proto.DOUBLE, number=2)


class IdentifiedLanguages(proto.Message):
    """Candidate languages of a text, most likely first."""

    languages = proto.RepeatedField(IdentifiedLanguage, number=1)


class TranslationModel(proto.Message):
    """
    A translation model, either provided or custom.

    Attributes:
        model_id (str):
            Identifier of the model, e.g. ``en-es``.
        source (str):
            Language code of the source language.
        target (str):
            Language code of the target language.
        base_model_id (str):
            Model a custom model is trained from.
        customizable (bool):
            Whether the model can be used to train custom models.
        default_model (bool):
            Whether the model is the default for its language pair.
        status (str):
            ``available`` once the model can be used; ``training`` and
            such while a custom model is trained.
    """

    model_id = proto.Field(proto.STRING, number=1)
    name = proto.Field(proto.STRING, number=2)
    source = proto.Field(proto.STRING, number=3)
    target = proto.Field(proto.STRING, number=4)
    base_model_id = proto.Field(proto.STRING, number=5)
    domain = proto.Field(proto.STRING, number=6)
    customizable = proto.Field(proto.BOOL, number=7)
    default_model = proto.Field(proto.BOOL, number=8)
    owner = proto.Field(proto.STRING, number=9)
    status = proto.Field(proto.STRING, number=10)


class TranslationModels(proto.Message):
    models = proto.RepeatedField(TranslationModel, number=1)


class DeleteModelResult(proto.Message):
    status = proto.Field(proto.STRING, number=1)
