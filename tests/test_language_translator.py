import json

import pytest

from watson_developer_cloud.common.authentication import NoAuthentication
from watson_developer_cloud.language_translator.v3 import LanguageTranslatorV3


@pytest.fixture
def service(session):
    return LanguageTranslatorV3(
        '2018-05-01', authenticator=NoAuthentication(), service_url='https://lt.test', session=session,
    )


def test_translate(service, session, sent_request, make_response):
    session.send.return_value = make_response(200, {
        'translations': [{'translation': 'Hallo Welt'}],
        'word_count': 2,
        'character_count': 11,
    })
    result = service.translate('Hello world', model_id='en-de').result
    assert result.translations[0].translation == 'Hallo Welt'
    assert result.word_count == 2

    request = sent_request()
    assert request.url == 'https://lt.test/v3/translate?version=2018-05-01'
    assert json.loads(request.body) == {'text': ['Hello world'], 'model_id': 'en-de'}


def test_translate_several_texts_by_target(service, sent_request):
    service.translate(['Hello', 'world'], source='en', target='es')
    assert json.loads(sent_request().body) == {'text': ['Hello', 'world'], 'source': 'en', 'target': 'es'}


@pytest.mark.parametrize('kwargs', [
    {'text': [], 'target': 'es'},
    {'text': 'Hello'},
])
def test_translate_invalid_arguments(service, kwargs):
    with pytest.raises(ValueError):
        service.translate(**kwargs)


def test_identify(service, session, sent_request, make_response):
    session.send.return_value = make_response(200, {'languages': [
        {'language': 'fr', 'confidence': 0.93},
        {'language': 'it', 'confidence': 0.04},
    ]})
    languages = service.identify('Bonjour le monde').result.languages
    assert languages[0].language == 'fr'
    assert languages[0].confidence == pytest.approx(0.93)

    request = sent_request()
    assert request.headers['Content-Type'] == 'text/plain'
    assert request.body == 'Bonjour le monde'.encode('utf-8')


def test_list_models(service, session, sent_request, make_response):
    session.send.return_value = make_response(200, {'models': [{
        'model_id': 'en-de', 'source': 'en', 'target': 'de', 'base_model_id': '', 'customizable': True,
        'default_model': True, 'status': 'available',
    }]})
    listed = service.list_models(source='en', default=True).result.models
    assert listed[0].model_id == 'en-de'
    assert sent_request().url == 'https://lt.test/v3/models?version=2018-05-01&source=en&default=true'


def test_create_model(service, session, sent_request, make_response):
    session.send.return_value = make_response(200, {'model_id': 'custom-1', 'status': 'dispatching'})
    assert service.create_model('en-de', forced_glossary=b'<tmx/>', name='glossary').result.status == 'dispatching'

    request = sent_request()
    assert request.url == 'https://lt.test/v3/models?version=2018-05-01&base_model_id=en-de&name=glossary'
    assert b'name="forced_glossary"' in request.body
    assert b'name="parallel_corpus"' not in request.body


def test_create_model_requires_a_file(service):
    with pytest.raises(ValueError):
        service.create_model('en-de')


def test_delete_model(service, session, sent_request, make_response):
    session.send.return_value = make_response(200, {'status': 'OK'})
    assert service.delete_model('custom-1').result.status == 'OK'
    assert sent_request().url == 'https://lt.test/v3/models/custom-1?version=2018-05-01'
