import json

from helper import DEFAULT_CONFIG, get_config_file, load_prompt_config


def write_config(data):
    path = get_config_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(data, encoding='utf-8')
    return path


def test_config_file_lives_in_home(isolated_env):
    assert get_config_file() == isolated_env / '.singleselect' / 'config.json'


def test_defaults_without_file():
    assert load_prompt_config() == DEFAULT_CONFIG


def test_file_overrides_defaults_and_env_overrides_file(monkeypatch):
    write_config(json.dumps({'prefix': '>> ', 'marker': '*', 'unknown': 'x'}))
    monkeypatch.setenv('SINGLESELECT_MARKER', '#')

    config = load_prompt_config()

    assert config['prefix'] == '>> '
    assert config['marker'] == '#'
    assert config['active_color'] == DEFAULT_CONFIG['active_color']
    assert 'unknown' not in config


def test_malformed_file_is_ignored():
    write_config('{not json')
    assert load_prompt_config() == DEFAULT_CONFIG


def test_non_object_file_is_ignored():
    write_config('["prefix"]')
    assert load_prompt_config() == DEFAULT_CONFIG
