import os
import pytest

import mapscope


@pytest.fixture
def mapscope_home(tmp_path, monkeypatch):
    """ Point the mapping context directory at a fresh temporary location
        for the duration of a single test.
    """

    monkeypatch.delenv('MAPSCOPE_HOME', raising=False)
    mapscope.config.directory.found = None
    mapscope.config.clear_cache()

    home = tmp_path / 'mapscope'
    mapscope.config.directory(str(home))

    yield home

    mapscope.config.directory.found = None
    mapscope.config.clear_cache()
    os.environ.pop('MAPSCOPE_HOME', None)


@pytest.fixture
def headers():
    return {'content-type': 'application/json', 'correlation-id': 'c0ffee'}

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
