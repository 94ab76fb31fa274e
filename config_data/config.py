import logging
from dataclasses import dataclass, field

from environs import Env

config_logger = logging.getLogger(__name__)


@dataclass
class TgBot:
    token: str
    id_owners: list[int]


@dataclass
class FilterSettings:
    placeholder: str = '***'
    languages: list[str] = field(default_factory=lambda: ['ru', 'en'])
    debug: bool = False


@dataclass
class Config:
    tg_bot: TgBot
    profanity: FilterSettings
    level_log: str


def load_config(path: str | None = None) -> Config:
    env = Env()
    env.read_env(path)
    level_log = env.str('LOG_LEVEL', 'INFO')
    placeholder = env.str('FILTER_PLACEHOLDER', '***')
    languages = env.list('FILTER_LANGUAGES', ['ru', 'en'])
    debug = env.bool('FILTER_DEBUG', False)
    
    return Config(
        tg_bot=TgBot(
            token=env('BOT_TOKEN'),
            id_owners=[*map(int, env('TG_IDS_OWNERS').split())]),
        profanity=FilterSettings(
            placeholder=placeholder,
            languages=[lang.strip().lower() for lang in languages if lang.strip()],
            debug=debug),
        level_log=level_log)
