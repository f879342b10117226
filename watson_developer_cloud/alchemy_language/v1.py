"""
AlchemyLanguage V1: the legacy language analysis API, authenticated with an
API key in the query string.

Each operation has three endpoints, one per content source, e.g.
``/url/URLGetRankedKeywords``, ``/html/HTMLGetRankedKeywords`` and
``/text/TextGetRankedKeywords``.
"""

import json

from watson_developer_cloud.alchemy_language import models
from watson_developer_cloud.common.authentication import APIKeyAuthentication
from watson_developer_cloud.common.authentication import WatsonAuthenticationError
from watson_developer_cloud.common.authentication import read_credentials
from watson_developer_cloud.common.rest import TRANSACTION_ID_HEADER
from watson_developer_cloud.common.rest import WatsonApiError
from watson_developer_cloud.common.rest import model_decoder
from watson_developer_cloud.common.service import WatsonService
from watson_developer_cloud.common.utils import camel_case_to_snake_case
from watson_developer_cloud.common.utils import snake_case_to_camel_case

DEFAULT_SERVICE_URL = 'https://gateway-a.watsonplatform.net/calls'
SERVICE_NAME = 'alchemy_language'

SOURCE_PREFIXES = {
    'url': '/url/URL',
    'html': '/html/HTML',
    'text': '/text/Text',
}


def check_status(response):
    """
    AlchemyLanguage reports some failures with status 200 and a body like
    ``{"status": "ERROR", "statusInfo": "invalid-api-key"}``.

    Returns:
        Union[WatsonApiError, None]:
            The error described by the body, if any.
    """
    try:
        body_json = json.loads(response.content)
    except ValueError:
        return None
    if not isinstance(body_json, dict) or body_json.get('status') != 'ERROR':
        return None
    return WatsonApiError(
        400,
        body_json['status'],
        metadata={'statusInfo': body_json.get('statusInfo'), 'response': body_json},
        transaction_id=response.headers.get(TRANSACTION_ID_HEADER),
    )


def _snake_case_key(key):
    # Some keys are hyphenated, e.g. "iso-639-1".
    return camel_case_to_snake_case(key).replace('-', '_')


def _render_option(value):
    # AlchemyLanguage flags are 1 or 0.
    if isinstance(value, bool):
        return int(value)
    return value


class AlchemyLanguageV1(WatsonService):
    """
    Client of the AlchemyLanguage V1 service.

    Args:
        api_key (Union[str, None]):
            AlchemyAPI key. If None, read from ``ALCHEMY_LANGUAGE_APIKEY``
            or the credentials file.
        service_url (str):
            Base URL of the service.
        session (Union[requests.Session, None]):
            Session to send requests with.
    """

    def __init__(self, api_key=None, service_url=DEFAULT_SERVICE_URL, session=None):
        if api_key is None:
            credentials = read_credentials(SERVICE_NAME)
            api_key = credentials.get('apikey')
            service_url = credentials.get('url') or service_url
        if not api_key:
            raise WatsonAuthenticationError(f"No API key found for {SERVICE_NAME}.")
        super().__init__(
            SERVICE_NAME,
            service_url=service_url,
            authenticator=APIKeyAuthentication('apikey', api_key, location='query'),
            session=session,
        )

    def _call(self, operation, operation_id, model, url=None, html=None, text=None,
              options=None, allow_text=True, headers=None):
        """
        Send the content of exactly one source to an operation.

        Args:
            operation (str):
                Name of the operation, e.g. ``GetRankedKeywords``.
            operation_id (str):
                Name reported in the analytics header.
            model (Type[proto.Message]):
                Result type.
            options (Union[dict[str, object], None]):
                Optional query items, with snake_case names.
            allow_text (bool):
                Whether the operation accepts plain text.

        Raises:
            ValueError:
                Not exactly one of url, html or text was given.
        """
        sources = {name: value for name, value in (('url', url), ('html', html), ('text', text))
                   if value is not None}
        if len(sources) != 1:
            raise ValueError('Exactly one of url, html, or text must be given.')
        (source, content), = sources.items()
        if source == 'text' and not allow_text:
            raise ValueError(f"{operation} does not accept text; give url or html.")

        params = [('outputMode', 'json')]
        for name, value in (options or dict()).items():
            params.append((snake_case_to_camel_case(name), _render_option(value)))

        request = self.prepare_request(
            'POST',
            SOURCE_PREFIXES[source] + operation,
            operation_id,
            headers=headers,
            params=params,
            data={source: content},
            accept='application/json',
            content_type='application/x-www-form-urlencoded',
        )
        return self.send(
            request,
            model_decoder(model, key_converter=_snake_case_key),
            check_body=check_status,
        )

    def get_ranked_named_entities(
        self,
        url=None,
        html=None,
        text=None,
        knowledge_graph=None,
        disambiguate=None,
        linked_data=None,
        coreference=None,
        sentiment=None,
        quotations=None,
        structured_entities=None,
        max_retrieve=None,
        headers=None,
    ):
        """
        Extract named entities (people, companies, places, ...) from content.

        Args:
            url, html, text (Union[str, None]):
                Exactly one content source.
            knowledge_graph (Union[bool, None]):
                Whether to include the type hierarchy of each entity.
            disambiguate (Union[bool, None]):
                Whether to disambiguate entities.
            linked_data (Union[bool, None]):
                Whether to include linked-data links.
            coreference (Union[bool, None]):
                Whether to resolve coreferences, e.g. "he" for a person.
            sentiment (Union[bool, None]):
                Whether to analyze sentiment toward each entity.
            quotations (Union[bool, None]):
                Whether to include quotations of each entity.
            structured_entities (Union[bool, None]):
                Whether to extract quantities, dates and such.
            max_retrieve (Union[int, None]):
                Maximum number of entities.

        Returns:
            DetailedResponse:
                With an ``Entities`` result.
        """
        options = {
            'knowledge_graph': knowledge_graph,
            'disambiguate': disambiguate,
            'linked_data': linked_data,
            'coreference': coreference,
            'sentiment': sentiment,
            'quotations': quotations,
            'structured_entities': structured_entities,
            'max_retrieve': max_retrieve,
        }
        return self._call(
            'GetRankedNamedEntities', 'get_ranked_named_entities', models.Entities,
            url=url, html=html, text=text, options=options, headers=headers,
        )

    def get_ranked_keywords(
        self,
        url=None,
        html=None,
        text=None,
        knowledge_graph=None,
        sentiment=None,
        keyword_extract_mode=None,
        max_retrieve=None,
        headers=None,
    ):
        """
        Extract keywords from content.

        Args:
            keyword_extract_mode (Union[str, None]):
                ``normal`` or ``strict``.

        Returns:
            DetailedResponse:
                With a ``Keywords`` result.
        """
        options = {
            'knowledge_graph': knowledge_graph,
            'sentiment': sentiment,
            'keyword_extract_mode': keyword_extract_mode,
            'max_retrieve': max_retrieve,
        }
        return self._call(
            'GetRankedKeywords', 'get_ranked_keywords', models.Keywords,
            url=url, html=html, text=text, options=options, headers=headers,
        )

    def get_ranked_concepts(
        self,
        url=None,
        html=None,
        text=None,
        knowledge_graph=None,
        linked_data=None,
        max_retrieve=None,
        headers=None,
    ):
        """Tag content with concepts, which need not be mentioned in it."""
        options = {
            'knowledge_graph': knowledge_graph,
            'linked_data': linked_data,
            'max_retrieve': max_retrieve,
        }
        return self._call(
            'GetRankedConcepts', 'get_ranked_concepts', models.Concepts,
            url=url, html=html, text=text, options=options, headers=headers,
        )

    def get_text_sentiment(self, url=None, html=None, text=None, headers=None):
        return self._call(
            'GetTextSentiment', 'get_text_sentiment', models.SentimentResponse,
            url=url, html=html, text=text, headers=headers,
        )

    def get_targeted_sentiment(self, targets, url=None, html=None, text=None, headers=None):
        """
        Analyze sentiment toward target phrases in content.

        Args:
            targets (Union[str, Sequence[str]]):
                One target phrase, or several.

        Returns:
            DetailedResponse:
                With a ``SentimentResponse`` result: ``doc_sentiment`` for
                one target, ``results`` for several.
        """
        if isinstance(targets, str):
            options = {'target': targets}
        else:
            options = {'targets': '|'.join(targets)}
        return self._call(
            'GetTargetedSentiment', 'get_targeted_sentiment', models.SentimentResponse,
            url=url, html=html, text=text, options=options, headers=headers,
        )

    def get_language(self, url=None, html=None, text=None, headers=None):
        return self._call(
            'GetLanguage', 'get_language', models.Language,
            url=url, html=html, text=text, headers=headers,
        )

    def get_title(self, url=None, html=None, text=None, use_metadata=None, headers=None):
        """Extract the title of a web page or HTML document."""
        return self._call(
            'GetTitle', 'get_title', models.Title,
            url=url, html=html, text=text, options={'use_metadata': use_metadata},
            allow_text=False, headers=headers,
        )

    def get_text(self, url=None, html=None, text=None, raw=False, use_metadata=None, extract_links=None,
                 headers=None):
        """
        Extract the text of a web page or HTML document.

        Args:
            raw (bool):
                Return all text, including navigation and ads, instead of
                the cleaned main content.
        """
        if raw:
            operation, options = 'GetRawText', None
        else:
            operation, options = 'GetText', {'use_metadata': use_metadata, 'extract_links': extract_links}
        return self._call(
            operation, 'get_text', models.DocumentText,
            url=url, html=html, text=text, options=options, allow_text=False, headers=headers,
        )

    def get_emotion(self, url=None, html=None, text=None, headers=None):
        return self._call(
            'GetEmotion', 'get_emotion', models.DocumentEmotion,
            url=url, html=html, text=text, headers=headers,
        )

    def get_ranked_taxonomy(self, url=None, html=None, text=None, headers=None):
        """Classify content into a hierarchical taxonomy."""
        return self._call(
            'GetRankedTaxonomy', 'get_ranked_taxonomy', models.Taxonomies,
            url=url, html=html, text=text, headers=headers,
        )
