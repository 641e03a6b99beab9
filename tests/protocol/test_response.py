import adtp
import pytest


def test_defaults():

    builder = adtp.ResponseBuilder()
    assert builder.version is adtp.Version.ADTP2
    assert builder.status is adtp.Status.OK
    assert builder.headers == {}
    assert builder.content == ''

    decoded = adtp.json.loads(builder.build())
    assert decoded == {'version': 'ADTP/2.0', 'status': 'ok', 'headers': {}, 'content': ''}
    assert tuple(decoded.keys()) == adtp.protocol.fields.RESPONSE_FIELDS


def test_chaining():

    builder = adtp.ResponseBuilder()

    assert builder.set_version(adtp.Version.ADTP2) is builder
    assert builder.set_status(adtp.Status.DENIED) is builder
    assert builder.add_header('X', '1') is builder
    assert builder.set_content('nope') is builder


def test_example():

    built = adtp.ResponseBuilder() \
        .set_status(adtp.Status.OK) \
        .add_header('Content-Type', 'application/json') \
        .set_content('{"key":"value"}') \
        .build()

    decoded = adtp.json.loads(built)
    assert decoded == {
        'version': 'ADTP/2.0',
        'status': 'ok',
        'headers': {'Content-Type': 'application/json'},
        'content': '{"key":"value"}',
    }


def test_header_overwrite_and_idempotence():

    builder = adtp.ResponseBuilder().add_header('X', '1').add_header('X', '2')
    assert builder.headers == {'X': '2'}
    assert builder.build() == builder.build()


@pytest.mark.parametrize('status,tag', [
    (adtp.Status.SWITCH_PROTOCOLS, 'switch-protocols'),
    (adtp.Status.OK, 'ok'),
    (adtp.Status.PENDING, 'pending'),
    (adtp.Status.REDIRECT, 'redirect'),
    (adtp.Status.DENIED, 'denied'),
    (adtp.Status.BAD_REQUEST, 'bad-request'),
    (adtp.Status.UNAUTHORIZED, 'unauthorized'),
    (adtp.Status.NOT_FOUND, 'not-found'),
    (adtp.Status.TOO_MANY_REQUESTS, 'too-many-requests'),
    (adtp.Status.INTERNAL_ERROR, 'internal-error'),
])
def test_status_tags(status, tag):

    decoded = adtp.json.loads(adtp.ResponseBuilder().set_status(status).build())
    assert decoded['status'] == tag


def test_version_tag():

    assert len(adtp.Version) == 1
    decoded = adtp.json.loads(adtp.ResponseBuilder().set_version('ADTP/2.0').build())
    assert decoded['version'] == 'ADTP/2.0'

    with pytest.raises(ValueError):
        adtp.ResponseBuilder().set_version('ADTP/1.0')


def test_unencodable_header():

    builder = adtp.ResponseBuilder().add_header('X-Bad', '\udfff')

    with pytest.raises(adtp.SerializationError):
        builder.build()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
