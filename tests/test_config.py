import pytest

from config_data.config import FilterSettings, load_config

ENV_KEYS = ('BOT_TOKEN', 'TG_IDS_OWNERS', 'LOG_LEVEL', 'FILTER_PLACEHOLDER',
            'FILTER_LANGUAGES', 'FILTER_DEBUG')


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_load_config(tmp_path, clean_env):
    env_file = tmp_path / '.env'
    env_file.write_text(
        'BOT_TOKEN=123:abc\n'
        'TG_IDS_OWNERS=1 2\n'
        'LOG_LEVEL=DEBUG\n'
        'FILTER_PLACEHOLDER=[x]\n'
        'FILTER_LANGUAGES=RU, fi\n'
        'FILTER_DEBUG=true\n',
        encoding='utf-8')
    
    config = load_config(str(env_file))
    
    assert config.tg_bot.token == '123:abc'
    assert config.tg_bot.id_owners == [1, 2]
    assert config.level_log == 'DEBUG'
    assert config.profanity == FilterSettings(
        placeholder='[x]', languages=['ru', 'fi'], debug=True)


def test_load_config_defaults(tmp_path, clean_env):
    env_file = tmp_path / '.env'
    env_file.write_text('BOT_TOKEN=t\nTG_IDS_OWNERS=5\n', encoding='utf-8')
    
    config = load_config(str(env_file))
    
    assert config.level_log == 'INFO'
    assert config.profanity == FilterSettings()
