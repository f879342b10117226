"""
Language Translator V3: translate text, identify its language, and manage
custom translation models.
"""

from watson_developer_cloud.common.rest import MultipartForm
from watson_developer_cloud.common.rest import model_decoder
from watson_developer_cloud.common.service import FileWithMetadata
from watson_developer_cloud.common.service import WatsonService
from watson_developer_cloud.common.utils import encode_path
from watson_developer_cloud.language_translator import models

DEFAULT_SERVICE_URL = 'https://api.us-south.language-translator.watson.cloud.ibm.com'
SERVICE_NAME = 'language_translator'


class LanguageTranslatorV3(WatsonService):
    """
    Client of the Language Translator V3 service.

    Args:
        version (str):
            API version date, e.g. ``2018-05-01``.
        authenticator (Union[common.authentication.Authenticator, None]):
            If None, credentials are read from ``LANGUAGE_TRANSLATOR_*``
            environment variables or the credentials file.
        service_url (str):
            Base URL of the service instance.
        session (Union[requests.Session, None]):
            Session to send requests with.
    """

    service_version = 'V3'

    def __init__(self, version, authenticator=None, service_url=DEFAULT_SERVICE_URL, session=None):
        super().__init__(
            SERVICE_NAME,
            service_url=service_url,
            authenticator=authenticator,
            version=version,
            session=session,
        )

    def list_languages(self, headers=None):
        request = self.prepare_request(
            'GET', '/v3/languages', 'list_languages', headers=headers, accept='application/json',
        )
        return self.send(request, model_decoder(models.Languages))

    def translate(self, text, model_id=None, source=None, target=None, headers=None):
        """
        Translate text, with a model or a language pair.

        Args:
            text (Union[str, Sequence[str]]):
                Text to translate; several texts are translated in order.
            model_id (Union[str, None]):
                Model to translate with, e.g. ``en-de``.
            source (Union[str, None]):
                Language of the text; identified if not given with target.
            target (Union[str, None]):
                Language to translate to, if model_id is not given.

        Returns:
            DetailedResponse:
                With a ``TranslationResult`` result.
        """
        if isinstance(text, str):
            text = [text]
        if not text:
            raise ValueError('text must be non-empty.')
        if model_id is None and target is None:
            raise ValueError('Either model_id or target must be given.')

        request = self.prepare_request(
            'POST',
            '/v3/translate',
            'translate',
            headers=headers,
            json_body={'text': list(text), 'model_id': model_id, 'source': source, 'target': target},
            accept='application/json',
            content_type='application/json',
        )
        return self.send(request, model_decoder(models.TranslationResult))

    def list_identifiable_languages(self, headers=None):
        request = self.prepare_request(
            'GET',
            '/v3/identifiable_languages',
            'list_identifiable_languages',
            headers=headers,
            accept='application/json',
        )
        return self.send(request, model_decoder(models.IdentifiableLanguages))

    def identify(self, text, headers=None):
        """
        Identify the language of text.

        Returns:
            DetailedResponse:
                With an ``IdentifiedLanguages`` result.
        """
        request = self.prepare_request(
            'POST',
            '/v3/identify',
            'identify',
            headers=headers,
            data=text.encode('utf-8'),
            accept='application/json',
            content_type='text/plain',
        )
        return self.send(request, model_decoder(models.IdentifiedLanguages))

    #########################
    # Models
    #########################

    def list_models(self, source=None, target=None, default=None, headers=None):
        """
        List translation models, optionally filtered.

        Args:
            source (Union[str, None]):
                Only models from this language.
            target (Union[str, None]):
                Only models to this language.
            default (Union[bool, None]):
                Only default models if True, or only non-default if False.

        Returns:
            DetailedResponse:
                With a ``TranslationModels`` result.
        """
        request = self.prepare_request(
            'GET',
            '/v3/models',
            'list_models',
            headers=headers,
            params=[('source', source), ('target', target), ('default', default)],
            accept='application/json',
        )
        return self.send(request, model_decoder(models.TranslationModels))

    def create_model(self, base_model_id, forced_glossary=None, parallel_corpus=None, name=None, headers=None):
        """
        Train a custom model from a base model.

        Args:
            base_model_id (str):
                Customizable model to train from.
            forced_glossary (Union[bytes, str, BinaryIO, FileWithMetadata, None]):
                TMX file of terms to always translate the same way.
            parallel_corpus (Union[bytes, str, BinaryIO, FileWithMetadata, None]):
                TMX file of example translations.
            name (Union[str, None]):
                Name of the custom model.

        Returns:
            DetailedResponse:
                With a ``TranslationModel`` result.
        """
        form = MultipartForm()
        for part_name, part in (('forced_glossary', forced_glossary), ('parallel_corpus', parallel_corpus)):
            if part is None:
                continue
            if not isinstance(part, FileWithMetadata):
                part = FileWithMetadata(part, content_type='application/octet-stream')
            part.append_to(form, part_name)
        if not form:
            raise ValueError('Provide forced_glossary or parallel_corpus to create a model.')

        request = self.prepare_request(
            'POST',
            '/v3/models',
            'create_model',
            headers=headers,
            params=[('base_model_id', base_model_id), ('name', name)],
            form=form,
            accept='application/json',
        )
        return self.send(request, model_decoder(models.TranslationModel))

    def get_model(self, model_id, headers=None):
        request = self.prepare_request(
            'GET',
            encode_path('/v3/models/{}', model_id),
            'get_model',
            headers=headers,
            accept='application/json',
        )
        return self.send(request, model_decoder(models.TranslationModel))

    def delete_model(self, model_id, headers=None):
        request = self.prepare_request(
            'DELETE',
            encode_path('/v3/models/{}', model_id),
            'delete_model',
            headers=headers,
            accept='application/json',
        )
        return self.send(request, model_decoder(models.DeleteModelResult))
