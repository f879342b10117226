import json

import pytest

from watson_developer_cloud.common import rest
from watson_developer_cloud.common.authentication import NoAuthentication
from watson_developer_cloud.natural_language_understanding import models
from watson_developer_cloud.natural_language_understanding.v1 import NaturalLanguageUnderstandingV1


@pytest.fixture
def service(session):
    return NaturalLanguageUnderstandingV1(
        '2022-04-07', authenticator=NoAuthentication(), service_url='https://nlu.test', session=session,
    )


def test_analyze(service, session, sent_request, make_response):
    session.send.return_value = make_response(200, {
        'language': 'en',
        'usage': {'text_units': 1, 'text_characters': 37, 'features': 2},
        'keywords': [{'text': 'IBM', 'relevance': 0.97, 'count': 2, 'sentiment': {'score': 0.4}}],
        'sentiment': {'document': {'score': 0.62, 'label': 'positive'}},
    })
    features = models.Features(
        keywords=models.KeywordsOptions(limit=2, sentiment=True),
        sentiment=models.SentimentOptions(document=True),
    )
    result = service.analyze(features, text='IBM is an American company.', return_analyzed_text=False).result

    assert result.language == 'en'
    assert result.usage.text_characters == 37
    assert result.keywords[0].sentiment.score == pytest.approx(0.4)
    assert result.sentiment.document.label == 'positive'

    request = sent_request()
    assert request.url == 'https://nlu.test/v1/analyze?version=2022-04-07'
    assert json.loads(request.body) == {
        'text': 'IBM is an American company.',
        'features': {'keywords': {'limit': 2, 'sentiment': True}, 'sentiment': {'document': True}},
        'return_analyzed_text': False,
    }


def test_analyze_explicit_false_option_is_sent(service, sent_request):
    features = models.Features(entities=models.EntitiesOptions(mentions=False), metadata=models.MetadataOptions())
    service.analyze(features, url='https://www.ibm.com')
    assert json.loads(sent_request().body) == {
        'url': 'https://www.ibm.com',
        'features': {'entities': {'mentions': False}, 'metadata': {}},
    }


def test_analyze_accepts_dict_features(service, sent_request):
    service.analyze({'concepts': {'limit': 3}}, html='<p>Hello</p>')
    assert json.loads(sent_request().body)['features'] == {'concepts': {'limit': 3}}


@pytest.mark.parametrize('sources', [
    {},
    {'text': 'a', 'url': 'https://www.ibm.com'},
])
def test_analyze_requires_exactly_one_source(service, sources):
    with pytest.raises(ValueError):
        service.analyze(models.Features(concepts=models.ConceptsOptions()), **sources)


def test_list_models(service, session, sent_request, make_response):
    session.send.return_value = make_response(200, {'models': [{
        'model_id': 'm-1', 'status': 'available', 'language': 'en', 'created': '2026-01-01T00:00:00Z',
    }]})
    listed = service.list_models().result.models
    assert listed[0].model_id == 'm-1'
    assert listed[0].created.year == 2026
    assert sent_request().url == 'https://nlu.test/v1/models?version=2022-04-07'


def test_delete_model(service, session, sent_request, make_response):
    session.send.return_value = make_response(200, {'deleted': 'm-1'})
    assert service.delete_model('m-1').result.deleted == 'm-1'
    assert sent_request().method == 'DELETE'


def test_analyze_error(service, session, make_response):
    session.send.return_value = make_response(400, {'error': 'unsupported text language: xx', 'code': 400})
    with pytest.raises(rest.WatsonApiError) as exc_info:
        service.analyze(models.Features(concepts=models.ConceptsOptions()), text='??')
    assert exc_info.value.status_code == 400
    assert exc_info.value.message == 'unsupported text language: xx'
