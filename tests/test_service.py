import logging

import pytest

from watson_developer_cloud.common import config
from watson_developer_cloud.common import rest
from watson_developer_cloud.common.authentication import BearerTokenAuthentication
from watson_developer_cloud.common.authentication import IAMAuthentication
from watson_developer_cloud.common.authentication import NoAuthentication
from watson_developer_cloud.common.authentication import WatsonAuthenticationError
from watson_developer_cloud.common.service import FileWithMetadata
from watson_developer_cloud.common.service import TransactionLoggerAdapter
from watson_developer_cloud.common.service import WatsonService


def make_service(session, **kwargs):
    kwargs.setdefault('service_url', 'https://watson.test/api/')
    kwargs.setdefault('authenticator', NoAuthentication())
    return WatsonService('test_service', session=session, **kwargs)


def test_version_is_first_query_item(session, sent_request):
    service = make_service(session, version='2022-04-07')
    service.send(service.prepare_request('GET', '/v1/things', 'list_things', params=[('limit', 2)]))
    assert sent_request().url == 'https://watson.test/api/v1/things?version=2022-04-07&limit=2'


def test_header_precedence(session, sent_request):
    service = make_service(session)
    service.set_default_headers({'X-Watson-Learning-Opt-Out': 'true', 'Accept': 'text/plain'})
    request = service.prepare_request(
        'GET', '/v1/things', 'list_things', headers={'X-Watson-Learning-Opt-Out': 'false'}, accept='application/json',
    )
    service.send(request)
    headers = sent_request().headers
    assert headers['X-Watson-Learning-Opt-Out'] == 'false'
    assert headers['Accept'] == 'application/json'
    assert headers['User-Agent'].startswith(config.USER_AGENT_NAME)
    assert 'operation_id=list_things' in headers['X-IBMCloud-SDK-Analytics']


def test_missing_service_url(session):
    service = make_service(session, service_url=None)
    with pytest.raises(rest.WatsonNoEndpointError):
        service.prepare_request('GET', '/v1/things', 'list_things')


def test_timeout_and_ssl_verification_passed_to_session(session):
    service = make_service(session)
    service.set_http_timeout(5)
    service.disable_ssl_verification()
    service.send(service.prepare_request('GET', '/v1/things', 'list_things'))
    kwargs = session.send.call_args[1]
    assert kwargs == {'timeout': 5, 'verify': False}


def test_authenticator_and_url_from_environment(monkeypatch, session):
    monkeypatch.setenv('TEST_SERVICE_APIKEY', 'env-key')
    monkeypatch.setenv('TEST_SERVICE_URL', 'https://env.test/')
    service = WatsonService('test_service', service_url='https://default.test', session=session)
    assert isinstance(service.authenticator, IAMAuthentication)
    assert service.service_url == 'https://env.test'


def test_missing_credentials(session):
    with pytest.raises(WatsonAuthenticationError):
        WatsonService('test_service', service_url='https://watson.test', session=session)


def test_error_response_raises(session, make_response):
    session.send.return_value = make_response(
        401, {'error': 'Unauthorized'}, headers={rest.TRANSACTION_ID_HEADER: 'tx-3'},
    )
    service = make_service(session, authenticator=BearerTokenAuthentication('expired'))
    with pytest.raises(rest.WatsonApiError) as exc_info:
        service.send(service.prepare_request('GET', '/v1/things', 'list_things'))
    assert exc_info.value.status_code == 401
    assert exc_info.value.transaction_id == 'tx-3'
    assert 'X-Global-Transaction-Id: tx-3' in str(exc_info.value)


def test_transaction_logger_adapter_prefix(caplog):
    logger = TransactionLoggerAdapter(logging.getLogger('test_service'), {'local_uuid': '0123456789abcdef'})
    with caplog.at_level(logging.INFO, logger='test_service'):
        logger.info('first')
        logger.extra['transaction_id'] = 'tx-4'
        logger.warning('second')
    assert caplog.messages == ['[01234567:info] \tfirst', '[tx-4:warning] \tsecond']


def test_file_with_metadata(tmp_path):
    path = tmp_path / 'corpus.tmx'
    path.write_bytes(b'<tmx/>')
    upload = FileWithMetadata(str(path), content_type='application/octet-stream')
    assert upload.filename == 'corpus.tmx'
    assert upload.read() == b'<tmx/>'

    form = rest.MultipartForm()
    FileWithMetadata(b'raw').append_to(form, 'parallel_corpus')
    assert form.parts == [('parallel_corpus', ('parallel_corpus', b'raw'))]
