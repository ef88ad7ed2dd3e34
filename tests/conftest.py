import io

import pytest

from terminal import Terminal


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.setenv('HOME', str(tmp_path))
    for var in ('NO_COLOR', 'SINGLESELECT_PREFIX', 'SINGLESELECT_ACTIVE_COLOR',
                'SINGLESELECT_HELP_COLOR', 'SINGLESELECT_MARKER'):
        monkeypatch.delenv(var, raising=False)
    return tmp_path


@pytest.fixture
def make_terminal():
    """Build a Terminal writing to a StringIO and reading scripted keys."""
    def _make(keys=(), **kwargs):
        keys = iter(keys)
        kwargs.setdefault('color', False)
        return Terminal(output=io.StringIO(), reader=lambda: next(keys), **kwargs)
    return _make
