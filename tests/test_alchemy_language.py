import pytest

from watson_developer_cloud.alchemy_language.v1 import AlchemyLanguageV1
from watson_developer_cloud.common import rest
from watson_developer_cloud.common.authentication import WatsonAuthenticationError


@pytest.fixture
def service(session):
    return AlchemyLanguageV1(api_key='alchemy-key', service_url='https://alchemy.test/calls', session=session)


def test_get_ranked_keywords(service, session, sent_request, make_response):
    session.send.return_value = make_response(200, {
        'status': 'OK',
        'usage': 'By accessing AlchemyAPI or using information generated by AlchemyAPI, you are agreeing...',
        'totalTransactions': '2',
        'language': 'english',
        'keywords': [{
            'relevance': '0.903',
            'sentiment': {'score': '0.53', 'type': 'positive', 'mixed': '1'},
            'knowledgeGraph': {'typeHierarchy': '/companies/ibm'},
            'text': 'IBM',
        }],
    })
    result = service.get_ranked_keywords(text='IBM is great.', sentiment=True, knowledge_graph=False, max_retrieve=5).result

    assert result.total_transactions == 2
    keyword = result.keywords[0]
    assert keyword.text == 'IBM'
    assert keyword.relevance == pytest.approx(0.903)
    assert keyword.sentiment.score == pytest.approx(0.53)
    assert keyword.sentiment.mixed == '1'
    assert keyword.knowledge_graph.type_hierarchy == '/companies/ibm'

    request = sent_request()
    assert request.url == ('https://alchemy.test/calls/text/TextGetRankedKeywords'
                           '?outputMode=json&knowledgeGraph=0&sentiment=1&maxRetrieve=5&apikey=alchemy-key')
    assert request.headers['Content-Type'] == 'application/x-www-form-urlencoded'
    assert request.body == 'text=IBM+is+great.'


def test_source_selects_endpoint(service, sent_request):
    service.get_ranked_named_entities(url='https://www.ibm.com', disambiguate=True)
    assert sent_request().url.startswith('https://alchemy.test/calls/url/URLGetRankedNamedEntities?')
    assert sent_request().body == 'url=https%3A%2F%2Fwww.ibm.com'

    service.get_ranked_concepts(html='<p>IBM</p>')
    assert sent_request().url.startswith('https://alchemy.test/calls/html/HTMLGetRankedConcepts?')


@pytest.mark.parametrize('sources', [
    {},
    {'url': 'https://www.ibm.com', 'text': 'IBM'},
])
def test_requires_exactly_one_source(service, sources):
    with pytest.raises(ValueError):
        service.get_text_sentiment(**sources)


@pytest.mark.parametrize('method', ['get_title', 'get_text'])
def test_page_operations_reject_text(service, session, method):
    with pytest.raises(ValueError, match='does not accept text'):
        getattr(service, method)(text='IBM')
    session.send.assert_not_called()


def test_get_raw_text(service, session, sent_request, make_response):
    session.send.return_value = make_response(200, {'status': 'OK', 'url': 'https://www.ibm.com', 'text': 'IBM'})
    assert service.get_text(url='https://www.ibm.com', raw=True).result.text == 'IBM'
    assert sent_request().url.startswith('https://alchemy.test/calls/url/URLGetRawText?outputMode=json&apikey=')


def test_get_language_hyphenated_keys(service, session, make_response):
    session.send.return_value = make_response(200, {
        'status': 'OK',
        'language': 'english',
        'iso-639-1': 'en',
        'iso-639-2': 'eng',
        'iso-639-3': 'eng',
        'native-speakers': '309-400 million',
        'wikipedia': 'http://en.wikipedia.org/wiki/English_language',
    })
    result = service.get_language(text='Hello world').result
    assert result.iso_639_1 == 'en'
    assert result.native_speakers == '309-400 million'


@pytest.mark.parametrize('targets, expected', [
    ('IBM', 'target=IBM'),
    (['IBM', 'Watson'], 'targets=IBM%7CWatson'),
])
def test_get_targeted_sentiment(service, sent_request, targets, expected):
    service.get_targeted_sentiment(targets, text='IBM Watson is great.')
    assert expected in sent_request().url


def test_targeted_sentiment_results(service, session, make_response):
    session.send.return_value = make_response(200, {
        'status': 'OK',
        'results': [
            {'text': 'IBM', 'sentiment': {'type': 'positive', 'score': '0.4'}},
            {'text': 'Watson', 'sentiment': {'type': 'neutral'}},
        ],
    })
    results = service.get_targeted_sentiment(['IBM', 'Watson'], text='IBM Watson.').result.results
    assert [r.sentiment.type for r in results] == ['positive', 'neutral']


def test_status_error_in_successful_response(service, session, make_response):
    session.send.return_value = make_response(200, {'status': 'ERROR', 'statusInfo': 'invalid-api-key'})
    with pytest.raises(rest.WatsonApiError) as exc_info:
        service.get_emotion(text='I am happy.')
    assert exc_info.value.status_code == 400
    assert exc_info.value.message == 'ERROR'
    assert exc_info.value.metadata['statusInfo'] == 'invalid-api-key'


def test_api_key_from_environment(monkeypatch, session, sent_request):
    monkeypatch.setenv('ALCHEMY_LANGUAGE_APIKEY', 'env-key')
    service = AlchemyLanguageV1(session=session)
    service.get_ranked_taxonomy(text='IBM')
    assert sent_request().url.endswith('apikey=env-key')


def test_missing_api_key():
    with pytest.raises(WatsonAuthenticationError):
        AlchemyLanguageV1()
