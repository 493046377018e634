import os
import pytest

import mapscope
from mapscope import config
from mapscope.base import ConfigurationError


def test_directory_override(mapscope_home):

    assert config.directory() == str(mapscope_home)
    assert os.path.isdir(mapscope_home)
    assert os.environ['MAPSCOPE_HOME'] == str(mapscope_home)
    assert mapscope.home() == str(mapscope_home)


def test_directory_must_be_absolute(mapscope_home):

    with pytest.raises(ValueError):
        config.directory('relative/path')


def test_directory_from_environment(tmp_path, monkeypatch):

    config.directory.found = None
    monkeypatch.setenv('MAPSCOPE_HOME', str(tmp_path))

    try:
        assert config.directory() == str(tmp_path)
    finally:
        config.directory.found = None


def test_directory_from_home(tmp_path, monkeypatch):

    config.directory.found = None
    monkeypatch.delenv('MAPSCOPE_HOME', raising=False)
    monkeypatch.setenv('HOME', str(tmp_path))

    try:
        assert config.directory() == os.path.join(str(tmp_path), '.mapscope')
    finally:
        config.directory.found = None


def test_from_json():

    context = config.MappingContext.from_json({
        'mappingEngine': 'JavaScript',
        'options': {'loadBytebufferJS': True, 'incomingScript': 'function mapToDittoProtocolMsg() {}'},
        'incomingConditions': {'sampleCondition': 'fn:filter(header:correlation-id,"ne","")'},
        'contentTypeBlocklist': 'application/vnd.eclipse-hono-empty-notification, application/x-ignored',
    })

    assert context.mapping_engine == 'JavaScript'
    assert context.options['loadBytebufferJS'] is True
    assert context.incoming_conditions == {'sampleCondition': 'fn:filter(header:correlation-id,"ne","")'}
    assert context.outgoing_conditions == {}
    assert context.content_type_blocklist == ('application/vnd.eclipse-hono-empty-notification', 'application/x-ignored')


def test_from_json_requires_engine():

    with pytest.raises(ConfigurationError):
        config.MappingContext.from_json({'options': {}})

    with pytest.raises(ConfigurationError):
        config.MappingContext.from_json({'mappingEngine': ''})

    with pytest.raises(ConfigurationError):
        config.MappingContext.from_json(['mappingEngine'])


def test_from_json_rejects_bad_options():

    with pytest.raises(ConfigurationError):
        config.MappingContext.from_json({'mappingEngine': 'Normalized', 'options': [1, 2]})


def test_to_json_round_trip():

    context = config.MappingContext('Ditto', {'thingId': 'ns:id'}, outgoing_conditions={'c': 'true'},
                                    content_type_blocklist=('text/plain',))

    block = context.to_json()
    assert block['mappingEngine'] == 'Ditto'
    assert 'incomingConditions' not in block
    assert config.MappingContext.from_json(block) == context


def test_is_blocked():

    context = config.MappingContext('Ditto', content_type_blocklist=('application/octet-stream',))

    assert context.is_blocked('application/octet-stream')
    assert context.is_blocked('Application/Octet-Stream; charset=binary')
    assert not context.is_blocked('application/json')
    assert not context.is_blocked(None)
    assert not context.is_blocked('')


def test_save_load_remove(mapscope_home):

    context = config.MappingContext('JavaScript', {'maxScriptSizeBytes': 50000})
    config.save('sensor', context)

    filename = mapscope_home / 'mapping' / 'sensor.json'
    assert filename.exists()

    assert config.load('sensor') == context
    assert config.get('sensor') is context

    config.remove('sensor')
    assert not filename.exists()

    with pytest.raises(ConfigurationError):
        config.get('sensor')

    # Removing twice is harmless.
    config.remove('sensor')


def test_get_caches(mapscope_home):

    directory = mapscope_home / 'mapping'
    directory.mkdir()
    (directory / 'hono.json').write_text('{"mappingEngine": "Normalized"}')

    first = config.get('hono')
    second = config.get('hono')

    assert first.mapping_engine == 'Normalized'
    assert first is second


def test_load_invalid_json(mapscope_home):

    directory = mapscope_home / 'mapping'
    directory.mkdir()
    (directory / 'broken.json').write_text('{"mappingEngine": ')

    with pytest.raises(ConfigurationError):
        config.load('broken')


def test_invalid_names(mapscope_home):

    for name in ('', '.hidden', 'a' + os.sep + 'b'):
        with pytest.raises(ConfigurationError):
            config.load(name)



def test_context_is_hashable_and_read_only():

    options = {'maxScriptSizeBytes': 50000}
    context = config.MappingContext('JavaScript', options, content_type_blocklist=['text/plain'])

    assert hash(context) == hash(config.MappingContext('JavaScript', {}, content_type_blocklist=('text/plain',)))
    assert context.content_type_blocklist == ('text/plain',)

    with pytest.raises(TypeError):
        context.options['maxScriptSizeBytes'] = 1

    options['maxScriptSizeBytes'] = 1
    assert context.options['maxScriptSizeBytes'] == 50000


def test_save_leaves_no_temporary_file(mapscope_home):

    config.save('first', config.MappingContext('Normalized'))
    config.save('first', config.MappingContext('Ditto'))

    directory = mapscope_home / 'mapping'
    assert sorted(path.name for path in directory.iterdir()) == ['first.json']
    assert config.load('first').mapping_engine == 'Ditto'


def test_failed_save_cleans_up(mapscope_home, monkeypatch):

    def refuse(source, target):
        raise OSError('disk full')

    monkeypatch.setattr(os, 'replace', refuse)

    with pytest.raises(OSError):
        config.save('second', config.MappingContext('Ditto'))

    directory = mapscope_home / 'mapping'
    assert list(directory.iterdir()) == []

    with pytest.raises(ConfigurationError):
        config.get('second')

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
