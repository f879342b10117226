"""
Text to Speech V1: synthesize natural-sounding speech from text, and
customize pronunciation with custom models, prompts and speakers.
"""

import json

import proto

from watson_developer_cloud.common import rest
from watson_developer_cloud.common import wav
from watson_developer_cloud.common.rest import MultipartForm
from watson_developer_cloud.common.rest import model_decoder
from watson_developer_cloud.common.service import FileWithMetadata
from watson_developer_cloud.common.service import WatsonService
from watson_developer_cloud.common.utils import encode_path
from watson_developer_cloud.text_to_speech import models

DEFAULT_SERVICE_URL = 'https://api.us-south.text-to-speech.watson.cloud.ibm.com'
SERVICE_NAME = 'text_to_speech'


def decode_audio(response):
    """
    Return synthesized audio; the header of WAV audio is repaired, since
    the service streams it before its length is known.
    """

    audio = response.content
    if wav.is_wav_file(audio):
        audio = bytearray(audio)
        wav.repair_wav_header(audio)
        audio = bytes(audio)
    return audio


class TextToSpeechV1(WatsonService):
    """
    Client of the Text to Speech V1 service.

    Args:
        authenticator (Union[common.authentication.Authenticator, None]):
            If None, credentials are read from ``TEXT_TO_SPEECH_*``
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
    # Voices
    #########################

    def list_voices(self, headers=None):
        """
        List the voices available for speech synthesis.

        Returns:
            DetailedResponse:
                With a ``Voices`` result.
        """
        request = self.prepare_request(
            'GET', '/v1/voices', 'list_voices', headers=headers, accept='application/json',
        )
        return self.send(request, model_decoder(models.Voices))

    def get_voice(self, voice, customization_id=None, headers=None):
        """
        Get information about a voice, optionally with a custom model.

        Args:
            voice (str):
                Name of the voice, e.g. ``en-US_AllisonV3Voice``.
            customization_id (Union[str, None]):
                Custom model to include in the result.

        Returns:
            DetailedResponse:
                With a ``Voice`` result.
        """
        request = self.prepare_request(
            'GET',
            encode_path('/v1/voices/{}', voice),
            'get_voice',
            headers=headers,
            params=[('customization_id', customization_id)],
            accept='application/json',
        )
        return self.send(request, model_decoder(models.Voice))

    #########################
    # Synthesis
    #########################

    def synthesize(self, text, accept=None, voice=None, customization_id=None, headers=None):
        """
        Synthesize text to audio.

        Args:
            text (str):
                Plain text or SSML to synthesize.
            accept (Union[str, None]):
                Requested audio format, e.g. ``audio/wav``; the service
                default is ``audio/ogg;codecs=opus``.
            voice (Union[str, None]):
                Voice to use for synthesis.
            customization_id (Union[str, None]):
                Custom model to use for synthesis.

        Returns:
            DetailedResponse:
                With the audio as a ``bytes`` result. WAV headers are
                repaired to reflect the actual length of the audio.
        """
        request = self.prepare_request(
            'POST',
            '/v1/synthesize',
            'synthesize',
            headers=headers,
            params=[('voice', voice), ('customization_id', customization_id)],
            json_body={'text': text},
            accept=accept,
            content_type='application/json',
        )
        return self.send(request, decode_audio)

    def get_pronunciation(self, text, voice=None, format=None, customization_id=None, headers=None):
        """
        Get the phonetic pronunciation of a word.

        Args:
            text (str):
                The word to pronounce.
            voice (Union[str, None]):
                Voice whose language determines the pronunciation.
            format (Union[str, None]):
                Phonetic alphabet: ``ibm`` or ``ipa``.
            customization_id (Union[str, None]):
                Custom model whose translation to return.

        Returns:
            DetailedResponse:
                With a ``Pronunciation`` result.
        """
        request = self.prepare_request(
            'GET',
            '/v1/pronunciation',
            'get_pronunciation',
            headers=headers,
            params=[
                ('text', text),
                ('voice', voice),
                ('format', format),
                ('customization_id', customization_id),
            ],
            accept='application/json',
        )
        return self.send(request, model_decoder(models.Pronunciation))

    #########################
    # Custom models
    #########################

    def create_custom_model(self, name, language=None, description=None, headers=None):
        request = self.prepare_request(
            'POST',
            '/v1/customizations',
            'create_custom_model',
            headers=headers,
            json_body={'name': name, 'language': language, 'description': description},
            accept='application/json',
            content_type='application/json',
        )
        return self.send(request, model_decoder(models.CustomModel))

    def list_custom_models(self, language=None, headers=None):
        """
        List custom models owned by the service instance.

        Args:
            language (Union[str, None]):
                Only list models for this language, e.g. ``en-US``.

        Returns:
            DetailedResponse:
                With a ``CustomModels`` result, without words or prompts.
        """
        request = self.prepare_request(
            'GET',
            '/v1/customizations',
            'list_custom_models',
            headers=headers,
            params=[('language', language)],
            accept='application/json',
        )
        return self.send(request, model_decoder(models.CustomModels))

    def update_custom_model(self, customization_id, name=None, description=None, words=None, headers=None):
        """
        Update the name, description or words of a custom model.

        Args:
            customization_id (str):
                The custom model to update.
            name (Union[str, None]):
                New name of the model.
            description (Union[str, None]):
                New description of the model.
            words (Union[Sequence[Union[Word, dict]], None]):
                Words to add or update in the model.

        Returns:
            DetailedResponse:
                With a None result.
        """
        request = self.prepare_request(
            'POST',
            encode_path('/v1/customizations/{}', customization_id),
            'update_custom_model',
            headers=headers,
            json_body={'name': name, 'description': description, 'words': words},
            accept='application/json',
            content_type='application/json',
        )
        return self.send(request, rest.decode_none)

    def get_custom_model(self, customization_id, headers=None):
        request = self.prepare_request(
            'GET',
            encode_path('/v1/customizations/{}', customization_id),
            'get_custom_model',
            headers=headers,
            accept='application/json',
        )
        return self.send(request, model_decoder(models.CustomModel))

    def delete_custom_model(self, customization_id, headers=None):
        request = self.prepare_request(
            'DELETE',
            encode_path('/v1/customizations/{}', customization_id),
            'delete_custom_model',
            headers=headers,
        )
        return self.send(request, rest.decode_none)

    #########################
    # Custom words
    #########################

    def add_words(self, customization_id, words, headers=None):
        """
        Add or update several words of a custom model.

        Args:
            customization_id (str):
                The custom model to add the words to.
            words (Sequence[Union[Word, dict]]):
                Words with their translations.

        Returns:
            DetailedResponse:
                With a None result.
        """
        request = self.prepare_request(
            'POST',
            encode_path('/v1/customizations/{}/words', customization_id),
            'add_words',
            headers=headers,
            json_body={'words': words},
            accept='application/json',
            content_type='application/json',
        )
        return self.send(request, rest.decode_none)

    def list_words(self, customization_id, headers=None):
        request = self.prepare_request(
            'GET',
            encode_path('/v1/customizations/{}/words', customization_id),
            'list_words',
            headers=headers,
            accept='application/json',
        )
        return self.send(request, model_decoder(models.Words))

    def add_word(self, customization_id, word, translation, part_of_speech=None, headers=None):
        """
        Add or update a single word of a custom model.

        Args:
            customization_id (str):
                The custom model to add the word to.
            word (str):
                The word to add or update.
            translation (str):
                Phonetic or sounds-like translation of the word.
            part_of_speech (Union[str, None]):
                Japanese only: part of speech of the word.

        Returns:
            DetailedResponse:
                With a None result.
        """
        request = self.prepare_request(
            'PUT',
            encode_path('/v1/customizations/{}/words/{}', customization_id, word),
            'add_word',
            headers=headers,
            json_body={'translation': translation, 'part_of_speech': part_of_speech},
            content_type='application/json',
        )
        return self.send(request, rest.decode_none)

    def get_word(self, customization_id, word, headers=None):
        request = self.prepare_request(
            'GET',
            encode_path('/v1/customizations/{}/words/{}', customization_id, word),
            'get_word',
            headers=headers,
            accept='application/json',
        )
        return self.send(request, model_decoder(models.Translation))

    def delete_word(self, customization_id, word, headers=None):
        request = self.prepare_request(
            'DELETE',
            encode_path('/v1/customizations/{}/words/{}', customization_id, word),
            'delete_word',
            headers=headers,
        )
        return self.send(request, rest.decode_none)

    #########################
    # Custom prompts
    #########################

    def list_custom_prompts(self, customization_id, headers=None):
        request = self.prepare_request(
            'GET',
            encode_path('/v1/customizations/{}/prompts', customization_id),
            'list_custom_prompts',
            headers=headers,
            accept='application/json',
        )
        return self.send(request, model_decoder(models.Prompts))

    def add_custom_prompt(self, customization_id, prompt_id, metadata, file, headers=None):
        """
        Add a custom prompt to a custom model.

        Args:
            customization_id (str):
                The custom model to add the prompt to.
            prompt_id (str):
                Identifier of the new prompt.
            metadata (Union[PromptMetadata, dict]):
                Text of the prompt, and optional speaker ID.
            file (Union[bytes, str, BinaryIO, FileWithMetadata]):
                WAV audio of the prompt, or a path to it.

        Returns:
            DetailedResponse:
                With a ``Prompt`` result.
        """
        if isinstance(metadata, proto.Message):
            metadata = rest.model_to_dict(metadata)
        if not isinstance(file, FileWithMetadata):
            file = FileWithMetadata(file)

        form = MultipartForm()
        form.append('metadata', json.dumps(metadata), content_type='application/json')
        form.append('file', file.read(), filename=file.filename or 'filename', content_type='audio/wav')

        request = self.prepare_request(
            'POST',
            encode_path('/v1/customizations/{}/prompts/{}', customization_id, prompt_id),
            'add_custom_prompt',
            headers=headers,
            form=form,
            accept='application/json',
        )
        return self.send(request, model_decoder(models.Prompt))

    def get_custom_prompt(self, customization_id, prompt_id, headers=None):
        request = self.prepare_request(
            'GET',
            encode_path('/v1/customizations/{}/prompts/{}', customization_id, prompt_id),
            'get_custom_prompt',
            headers=headers,
            accept='application/json',
        )
        return self.send(request, model_decoder(models.Prompt))

    def delete_custom_prompt(self, customization_id, prompt_id, headers=None):
        request = self.prepare_request(
            'DELETE',
            encode_path('/v1/customizations/{}/prompts/{}', customization_id, prompt_id),
            'delete_custom_prompt',
            headers=headers,
        )
        return self.send(request, rest.decode_none)

    #########################
    # Speaker models
    #########################

    def list_speaker_models(self, headers=None):
        request = self.prepare_request(
            'GET', '/v1/speakers', 'list_speaker_models', headers=headers, accept='application/json',
        )
        return self.send(request, model_decoder(models.Speakers))

    def create_speaker_model(self, speaker_name, audio, headers=None):
        """
        Create a speaker model from WAV audio of the speaker.

        Args:
            speaker_name (str):
                Name of the speaker.
            audio (Union[bytes, str, BinaryIO, FileWithMetadata]):
                WAV audio of the speaker, or a path to it.

        Returns:
            DetailedResponse:
                With a ``SpeakerModel`` result.
        """
        if not isinstance(audio, FileWithMetadata):
            audio = FileWithMetadata(audio)
        request = self.prepare_request(
            'POST',
            '/v1/speakers',
            'create_speaker_model',
            headers=headers,
            params=[('speaker_name', speaker_name)],
            data=audio.read(),
            accept='application/json',
            content_type='audio/wav',
        )
        return self.send(request, model_decoder(models.SpeakerModel))

    def get_speaker_model(self, speaker_id, headers=None):
        request = self.prepare_request(
            'GET',
            encode_path('/v1/speakers/{}', speaker_id),
            'get_speaker_model',
            headers=headers,
            accept='application/json',
        )
        return self.send(request, model_decoder(models.SpeakerCustomModels))

    def delete_speaker_model(self, speaker_id, headers=None):
        request = self.prepare_request(
            'DELETE',
            encode_path('/v1/speakers/{}', speaker_id),
            'delete_speaker_model',
            headers=headers,
        )
        return self.send(request, rest.decode_none)

    #########################
    # User data
    #########################

    def delete_user_data(self, customer_id, headers=None):
        """Delete all data associated with a customer ID."""
        request = self.prepare_request(
            'DELETE',
            '/v1/user_data',
            'delete_user_data',
            headers=headers,
            params=[('customer_id', customer_id)],
        )
        return self.send(request, rest.decode_none)
