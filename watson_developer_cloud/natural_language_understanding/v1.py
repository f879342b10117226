"""
Natural Language Understanding V1: analyze text, HTML or a web page for
concepts, entities, keywords, categories, sentiment, emotion, relations,
semantic roles and syntax.
"""

from watson_developer_cloud.common.rest import model_decoder
from watson_developer_cloud.common.service import WatsonService
from watson_developer_cloud.common.utils import encode_path
from watson_developer_cloud.natural_language_understanding import models

DEFAULT_SERVICE_URL = 'https://api.us-south.natural-language-understanding.watson.cloud.ibm.com'
SERVICE_NAME = 'natural-language-understanding'


class NaturalLanguageUnderstandingV1(WatsonService):
    """
    Client of the Natural Language Understanding V1 service.

    Args:
        version (str):
            API version date, e.g. ``2022-04-07``.
        authenticator (Union[common.authentication.Authenticator, None]):
            If None, credentials are read from
            ``NATURAL_LANGUAGE_UNDERSTANDING_*`` environment variables or
            the credentials file.
        service_url (str):
            Base URL of the service instance.
        session (Union[requests.Session, None]):
            Session to send requests with.
    """

    def __init__(self, version, authenticator=None, service_url=DEFAULT_SERVICE_URL, session=None):
        super().__init__(
            SERVICE_NAME,
            service_url=service_url,
            authenticator=authenticator,
            version=version,
            session=session,
        )

    def analyze(
        self,
        features,
        text=None,
        html=None,
        url=None,
        clean=None,
        xpath=None,
        fallback_to_raw=None,
        return_analyzed_text=None,
        language=None,
        limit_text_characters=None,
        headers=None,
    ):
        """
        Analyze text, HTML, or a public web page.

        Args:
            features (Union[Features, dict]):
                Features to analyze, with their options.
            text (Union[str, None]):
                Plain text to analyze.
            html (Union[str, None]):
                HTML to analyze.
            url (Union[str, None]):
                Web page to analyze.
            clean (Union[bool, None]):
                Whether to remove ads, navigation and such from web pages.
            xpath (Union[str, None]):
                XPath query to select the content of a web page.
            fallback_to_raw (Union[bool, None]):
                Whether to use raw HTML content if cleaning fails.
            return_analyzed_text (Union[bool, None]):
                Whether to return the analyzed text.
            language (Union[str, None]):
                ISO 639-1 code of the language, if not to be detected.
            limit_text_characters (Union[int, None]):
                Maximum number of characters to process.

        Returns:
            DetailedResponse:
                With an ``AnalysisResults`` result.

        Raises:
            ValueError:
                Not exactly one of text, html or url was given.
        """
        sources = [source for source in (text, html, url) if source is not None]
        if len(sources) != 1:
            raise ValueError('Exactly one of text, html, or url must be given.')
        if features is None:
            raise ValueError('features must be given.')

        body = {
            'text': text,
            'html': html,
            'url': url,
            'features': features,
            'clean': clean,
            'xpath': xpath,
            'fallback_to_raw': fallback_to_raw,
            'return_analyzed_text': return_analyzed_text,
            'language': language,
            'limit_text_characters': limit_text_characters,
        }
        request = self.prepare_request(
            'POST',
            '/v1/analyze',
            'analyze',
            headers=headers,
            json_body=body,
            accept='application/json',
            content_type='application/json',
        )
        return self.send(request, model_decoder(models.AnalysisResults))

    def list_models(self, headers=None):
        """List custom models deployed to the service instance."""
        request = self.prepare_request(
            'GET', '/v1/models', 'list_models', headers=headers, accept='application/json',
        )
        return self.send(request, model_decoder(models.ListModelsResults))

    def delete_model(self, model_id, headers=None):
        request = self.prepare_request(
            'DELETE',
            encode_path('/v1/models/{}', model_id),
            'delete_model',
            headers=headers,
            accept='application/json',
        )
        return self.send(request, model_decoder(models.DeleteModelResults))
