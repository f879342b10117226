"""
Typed results of the Text to Speech V1 service.
"""

import proto

# Used to compile protobufs into Python classes.
__protobuf__ = proto.module(package='watson_developer_cloud.text_to_speech')


class SupportedFeatures(proto.Message):
    """
    Additional service features that are supported with a voice.

    Attributes:
        custom_pronunciation (bool):
            Whether the voice can be customized with a custom model.
        voice_transformation (bool):
            Whether the voice can be transformed with SSML.
    """

    custom_pronunciation = proto.Field(proto.BOOL, number=1)
    voice_transformation = proto.Field(proto.BOOL, number=2)


class Word(proto.Message):
    """
    A word and its translation in a custom model.

    Attributes:
        word (str):
            The word, as written.
        translation (str):
            Phonetic or sounds-like translation of the word.
        part_of_speech (str):
            Japanese only: the part of speech of the word.
    """

    word = proto.Field(proto.STRING, number=1)
    translation = proto.Field(proto.STRING, number=2)
    part_of_speech = proto.Field(proto.STRING, number=3)


class Words(proto.Message):
    words = proto.RepeatedField(Word, number=1)


class Translation(proto.Message):
    translation = proto.Field(proto.STRING, number=1)
    part_of_speech = proto.Field(proto.STRING, number=2)


class Prompt(proto.Message):
    """
    A custom prompt of a custom model.

    Attributes:
        prompt (str):
            Text of the prompt as it was spoken.
        prompt_id (str):
            User-specified identifier of the prompt.
        status (str):
            One of ``processing``, ``available`` or ``failed``.
        error (str):
            Reason the prompt failed, if ``status`` is ``failed``.
        speaker_id (str):
            Speaker model the prompt is associated with, if any.
    """

    prompt = proto.Field(proto.STRING, number=1)
    prompt_id = proto.Field(proto.STRING, number=2)
    status = proto.Field(proto.STRING, number=3)
    error = proto.Field(proto.STRING, number=4)
    speaker_id = proto.Field(proto.STRING, number=5)


class Prompts(proto.Message):
    prompts = proto.RepeatedField(Prompt, number=1)


class PromptMetadata(proto.Message):
    """
    Information sent with the audio of a new custom prompt.

    Attributes:
        prompt_text (str):
            Required. Text of the prompt as it is spoken in the audio.
        speaker_id (str):
            Speaker model to associate the prompt with.
    """

    prompt_text = proto.Field(proto.STRING, number=1)
    speaker_id = proto.Field(proto.STRING, number=2)


class CustomModel(proto.Message):
    """
    A custom model, which customizes the pronunciation of words.

    Attributes:
        customization_id (str):
            Customization ID (GUID) of the custom model.
        name (str):
            Name of the custom model.
        language (str):
            Language identifier of the custom model, e.g. ``en-US``.
        owner (str):
            GUID of the credentials of the instance that owns the model.
        created (str):
            Creation time, in the service's ISO-8601 format.
        last_modified (str):
            Time of the last modification, in the service's format.
        description (str):
            Description of the custom model.
        words (Sequence[Word]):
            Words of the model; only returned by ``get_custom_model()``.
        prompts (Sequence[Prompt]):
            Prompts of the model; only returned by ``get_custom_model()``.
    """

    customization_id = proto.Field(proto.STRING, number=1)
    name = proto.Field(proto.STRING, number=2)
    language = proto.Field(proto.STRING, number=3)
    owner = proto.Field(proto.STRING, number=4)
    created = proto.Field(proto.STRING, number=5)
    last_modified = proto.Field(proto.STRING, number=6)
    description = proto.Field(proto.STRING, number=7)
    words = proto.RepeatedField(Word, number=8)
    prompts = proto.RepeatedField(Prompt, number=9)


class CustomModels(proto.Message):
    customizations = proto.RepeatedField(CustomModel, number=1)


class Voice(proto.Message):
    """
    A voice that can be used for synthesis.

    Attributes:
        url (str):
            URI of the voice.
        gender (str):
            Gender of the voice: ``male`` or ``female``.
        name (str):
            Name of the voice, e.g. ``en-US_AllisonV3Voice``.
        language (str):
            Language and region of the voice, e.g. ``en-US``.
        description (str):
            Textual description of the voice.
        customizable (bool):
            Whether the voice can be customized with a custom model.
        supported_features (SupportedFeatures):
            Additional features supported with the voice.
        customization (CustomModel):
            The custom model, if requested with ``customization_id``.
    """

    url = proto.Field(proto.STRING, number=1)
    gender = proto.Field(proto.STRING, number=2)
    name = proto.Field(proto.STRING, number=3)
    language = proto.Field(proto.STRING, number=4)
    description = proto.Field(proto.STRING, number=5)
    customizable = proto.Field(proto.BOOL, number=6)
    supported_features = proto.Field(SupportedFeatures, number=7)
    customization = proto.Field(CustomModel, number=8)


class Voices(proto.Message):
    voices = proto.RepeatedField(Voice, number=1)


class Pronunciation(proto.Message):
    pronunciation = proto.Field(proto.STRING, number=1)


class Speaker(proto.Message):
    speaker_id = proto.Field(proto.STRING, number=1)
    name = proto.Field(proto.STRING, number=2)


class Speakers(proto.Message):
    speakers = proto.RepeatedField(Speaker, number=1)


class SpeakerModel(proto.Message):
    speaker_id = proto.Field(proto.STRING, number=1)


class SpeakerPrompt(proto.Message):
    prompt = proto.Field(proto.STRING, number=1)
    prompt_id = proto.Field(proto.STRING, number=2)
    status = proto.Field(proto.STRING, number=3)
    error = proto.Field(proto.STRING, number=4)


class SpeakerCustomModel(proto.Message):
    """
    A custom model with prompts defined for a speaker.

    Attributes:
        customization_id (str):
            Customization ID (GUID) of the custom model.
        prompts (Sequence[SpeakerPrompt]):
            Prompts of the custom model that are associated with the
            speaker.
    """

    customization_id = proto.Field(proto.STRING, number=1)
    prompts = proto.RepeatedField(SpeakerPrompt, number=2)


class SpeakerCustomModels(proto.Message):
    customizations = proto.RepeatedField(SpeakerCustomModel, number=1)
