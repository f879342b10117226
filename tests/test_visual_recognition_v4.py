import datetime
import json

import pytest

from watson_developer_cloud.common.authentication import NoAuthentication
from watson_developer_cloud.common.service import FileWithMetadata
from watson_developer_cloud.visual_recognition import models_v4
from watson_developer_cloud.visual_recognition.v4 import VisualRecognitionV4
from watson_developer_cloud.visual_recognition.v4 import format_date


@pytest.fixture
def service(session):
    return VisualRecognitionV4(
        '2019-02-11', authenticator=NoAuthentication(), service_url='https://vr.test', session=session,
    )


def test_analyze_repeats_form_parts(service, session, sent_request, make_response):
    session.send.return_value = make_response(200, {'images': [{
        'source': {'type': 'url', 'source_url': 'https://example.com/a.jpg'},
        'dimensions': {'height': 480, 'width': 640},
        'objects': {'collections': [{
            'collection_id': 'col-1',
            'objects': [{
                'object': 'giraffe',
                'location': {'top': 10, 'left': 20, 'width': 30, 'height': 40},
                'score': 0.87,
            }],
        }]},
    }]})
    result = service.analyze(
        ['col-1', 'col-2'],
        ['objects'],
        images_file=[FileWithMetadata(b'\xff\xd8', filename='b.jpg', content_type='image/jpeg')],
        image_url=['https://example.com/a.jpg'],
        threshold=0.5,
    ).result

    detected = result.images[0].objects.collections[0].objects[0]
    assert detected.object == 'giraffe'
    assert detected.location.width == 30
    assert result.images[0].source.type == 'url'

    request = sent_request()
    assert request.url == 'https://vr.test/v4/analyze?version=2019-02-11'
    assert request.body.count(b'name="collection_ids"') == 2
    assert request.body.count(b'name="features"') == 1
    assert b'name="images_file"; filename="b.jpg"' in request.body
    assert b'name="image_url"' in request.body


def test_create_collection(service, session, sent_request, make_response):
    session.send.return_value = make_response(201, {
        'collection_id': 'col-1',
        'name': 'giraffes',
        'created': '2026-03-01T12:00:00.000Z',
        'image_count': 0,
        'training_status': {'objects': {'ready': False, 'in_progress': False, 'data_changed': False}},
    })
    collection = service.create_collection(name='giraffes').result
    assert collection.collection_id == 'col-1'
    assert collection.created == datetime.datetime(2026, 3, 1, 12, tzinfo=datetime.timezone.utc)
    assert json.loads(sent_request().body) == {'name': 'giraffes'}


def test_add_images_requires_images(service):
    with pytest.raises(ValueError):
        service.add_images('col-1')


def test_add_images_with_training_data(service, sent_request):
    training_data = json.dumps({'objects': [{'object': 'giraffe', 'location': {'top': 0, 'left': 0, 'width': 1, 'height': 1}}]})
    service.add_images('col-1', image_url=['https://example.com/a.jpg'], training_data=training_data)
    request = sent_request()
    assert request.url == 'https://vr.test/v4/collections/col-1/images?version=2019-02-11'
    assert b'name="training_data"' in request.body


def test_add_image_training_data(service, sent_request):
    objects = [models_v4.TrainingDataObject(
        object='giraffe', location=models_v4.Location(top=1, left=2, width=3, height=4),
    )]
    service.add_image_training_data('col-1', 'img-1', objects=objects)
    request = sent_request()
    assert request.url == 'https://vr.test/v4/collections/col-1/images/img-1/training_data?version=2019-02-11'
    assert json.loads(request.body) == {'objects': [{
        'object': 'giraffe', 'location': {'top': 1, 'left': 2, 'width': 3, 'height': 4},
    }]}


def test_get_jpeg_image(service, session, sent_request, make_response):
    session.send.return_value = make_response(200, b'\xff\xd8\xff', content_type='image/jpeg')
    assert service.get_jpeg_image('col-1', 'img 1', size='thumbnail').result == b'\xff\xd8\xff'
    request = sent_request()
    assert request.url == 'https://vr.test/v4/collections/col-1/images/img%201/jpeg?version=2019-02-11&size=thumbnail'
    assert request.headers['Accept'] == 'image/jpeg'


def test_update_object_metadata(service, session, sent_request, make_response):
    session.send.return_value = make_response(200, {'object': 'giraffe', 'count': 3})
    assert service.update_object_metadata('col-1', 'girafe', 'giraffe').result.count == 3
    request = sent_request()
    assert request.url == 'https://vr.test/v4/collections/col-1/objects/girafe?version=2019-02-11'
    assert json.loads(request.body) == {'object': 'giraffe'}


def test_get_training_usage(service, session, sent_request, make_response):
    session.send.return_value = make_response(200, {
        'start_time': '2026-01-01T00:00:00Z',
        'end_time': '2026-01-31T23:59:59Z',
        'completed_events': 1,
        'trained_images': 12,
        'events': [{'type': 'objects', 'collection_id': 'col-1', 'status': 'succeeded', 'image_count': 12}],
    })
    usage = service.get_training_usage(
        start_time=datetime.date(2026, 1, 1), end_time=datetime.datetime(2026, 1, 31, 8, 30),
    ).result
    assert usage.trained_images == 12
    assert usage.events[0].status == 'succeeded'
    assert sent_request().url \
        == 'https://vr.test/v4/training_usage?version=2019-02-11&start_time=2026-01-01&end_time=2026-01-31'


def test_format_date():
    assert format_date(None) is None
    assert format_date('2026-01-01') == '2026-01-01'
    assert format_date(datetime.date(2026, 1, 2)) == '2026-01-02'
