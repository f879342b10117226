import json

import pytest

from watson_developer_cloud.common import rest
from watson_developer_cloud.common.authentication import BasicAuthentication
from watson_developer_cloud.natural_language_understanding import models as nlu_models
from watson_developer_cloud.visual_recognition import models_v3


def test_query_items_are_ordered_and_rendered():
    request = rest.RestRequest(
        'get',
        'https://watson.test/v1/items',
        params=[('version', '2020-01-01'), ('verbose', True), ('skip', None), ('ids', ['a', 'b']), ('n', 3)],
    )
    prepared = request.prepare()
    assert prepared.method == 'GET'
    assert prepared.url == 'https://watson.test/v1/items?version=2020-01-01&verbose=true&ids=a%2Cb&n=3'


def test_none_headers_are_dropped():
    request = rest.RestRequest('GET', 'https://watson.test/', headers={'Accept': 'application/json', 'X-A': None})
    assert request.headers == {'Accept': 'application/json'}


def test_only_one_body_allowed():
    with pytest.raises(ValueError):
        rest.RestRequest('POST', 'https://watson.test/', json_body={'a': 1}, data=b'raw')


def test_json_body_omits_none_members():
    request = rest.RestRequest('POST', 'https://watson.test/', json_body={'a': 1, 'b': None, 'c': [{'d': None}]})
    prepared = request.prepare()
    assert json.loads(prepared.body) == {'a': 1, 'c': [{}]}
    assert prepared.headers['Content-Type'] == 'application/json'


def test_json_body_serializes_models():
    features = nlu_models.Features(sentiment=nlu_models.SentimentOptions(document=True))
    request = rest.RestRequest('POST', 'https://watson.test/', json_body={'features': features})
    assert json.loads(request.prepare().body) == {'features': {'sentiment': {'document': True}}}


def test_multipart_form_with_repeated_parts():
    form = rest.MultipartForm()
    form.append('collection_ids', 'c1')
    form.append('collection_ids', 'c2')
    form.append('threshold', 0.5)
    form.append('images_file', b'\xff\xd8', filename='a.jpg', content_type='image/jpeg')
    assert len(form) == 4

    request = rest.RestRequest(
        'POST', 'https://watson.test/', headers={'Content-Type': 'application/json'}, form=form,
    )
    prepared = request.prepare()
    assert prepared.headers['Content-Type'].startswith('multipart/form-data; boundary=')
    assert prepared.body.count(b'name="collection_ids"') == 2
    assert b'0.5' in prepared.body
    assert b'filename="a.jpg"' in prepared.body
    assert b'Content-Type: image/jpeg' in prepared.body


def test_form_urlencoded_data():
    request = rest.RestRequest('POST', 'https://watson.test/', data={'text': 'hello world'})
    assert request.prepare().body == 'text=hello+world'


def test_authenticator_applied_at_prepare_time():
    request = rest.RestRequest('GET', 'https://watson.test/', authenticator=BasicAuthentication('user', 'pass'))
    assert request.prepare().headers['Authorization'].startswith('Basic ')


@pytest.mark.parametrize('body, message', [
    ({'errors': [{'message': 'first'}], 'error': 'second'}, 'first'),
    ({'error': 'second', 'message': 'third'}, 'second'),
    ({'message': 'third', 'statusInfo': 'fourth'}, 'third'),
    ({'statusInfo': 'fourth'}, 'fourth'),
    ({'code': 404}, 'Not Found'),
])
def test_error_message_precedence(make_response, body, message):
    response = make_response(404, body, headers={rest.TRANSACTION_ID_HEADER: 'tx-1'})
    with pytest.raises(rest.WatsonApiError) as exc_info:
        rest.decode_response(response)
    assert exc_info.value.status_code == 404
    assert exc_info.value.message == message
    assert exc_info.value.metadata['response'] == body
    assert exc_info.value.transaction_id == 'tx-1'


def test_error_with_non_json_body(make_response):
    response = make_response(502, b'<html>Bad Gateway</html>', content_type='text/html')
    with pytest.raises(rest.WatsonApiError) as exc_info:
        rest.decode_response(response)
    assert exc_info.value.message == 'Bad Gateway'
    assert exc_info.value.metadata['response'] == b'<html>Bad Gateway</html>'


def test_check_body_can_fail_successful_response(make_response):
    def check_body(response):
        return rest.WatsonApiError(400, 'ERROR')

    with pytest.raises(rest.WatsonApiError) as exc_info:
        rest.decode_response(make_response(200, {}), check_body=check_body)
    assert exc_info.value.status_code == 400


def test_detailed_response(make_response):
    response = make_response(200, {'a': 1}, headers={rest.TRANSACTION_ID_HEADER: 'tx-2'})
    detailed_response = rest.decode_response(response)
    assert detailed_response.get_result() == {'a': 1}
    assert detailed_response.status_code == 200
    assert detailed_response.transaction_id == 'tx-2'


@pytest.mark.parametrize('decoder, expected', [
    (rest.decode_bytes, b'{"a": 1}'),
    (rest.decode_text, '{"a": 1}'),
    (rest.decode_none, None),
])
def test_decoders(make_response, decoder, expected):
    assert rest.decode_response(make_response(200, {'a': 1}), decoder=decoder).result == expected


def test_decode_json_failure(make_response):
    with pytest.raises(rest.WatsonSerializationError):
        rest.decode_response(make_response(200, b'not json'))


def test_model_decoder_escapes_keywords_and_ignores_unknown_fields(make_response):
    body = {
        'classifier_id': 'dogs_1',
        'status': 'ready',
        'classes': [{'class': 'beagle'}],
        'created': '2026-01-02T03:04:05.000Z',
        'unknown_field': {'nested': True},
    }
    classifier = rest.decode_response(
        make_response(200, body),
        decoder=rest.model_decoder(models_v3.Classifier),
    ).result
    assert classifier.classifier_id == 'dogs_1'
    assert classifier.classes[0].class_ == 'beagle'
    assert classifier.created.year == 2026
    assert classifier.retrained is None


def test_model_decoder_serialization_error(make_response):
    with pytest.raises(rest.WatsonSerializationError):
        rest.decode_response(
            make_response(200, {'classifier_id': {'not': 'a string'}}),
            decoder=rest.model_decoder(models_v3.Classifier),
        )


def test_model_decoder_requires_model():
    with pytest.raises(TypeError):
        rest.model_decoder(dict)


def test_model_to_dict_omits_unset_fields_and_unescapes_keywords():
    classifier = models_v3.Classifier(classifier_id='dogs_1', classes=[models_v3.Class(class_='beagle')])
    assert rest.model_to_dict(classifier) == {'classifier_id': 'dogs_1', 'classes': [{'class': 'beagle'}]}
