import asyncio
import logging
from logging.config import dictConfig

import yaml
from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode

from config_data.config import Config, load_config
from filters.filters import ProfanityFilter
from handlers import group_handlers, other, owners_handlers
from keyboards.set_menu import set_main_menu
from middlewares.outer import ProfanityFilterMiddleware

logger_main = logging.getLogger(__name__)


def setup_logging(config: Config):
    with open('logs/logging_settings/log_conf.yml', 'rt') as file:
        config_str = file.read()
    # вставляем(заменяем шаблоны на) переменные окружения
    config_str = config_str.replace('${LOG_LEVEL}', config.level_log)
    log_config = yaml.safe_load(config_str)
    dictConfig(log_config)
    logger_main.info('=== LOGGING CONFIGURATION IS LOADED SUCCESSFULLY ===')


def setup_profanity_filter(config: Config) -> ProfanityFilter:
    settings = config.profanity
    profanity_filter = ProfanityFilter(
        placeholder=settings.placeholder,
        languages=settings.languages,
        debug=settings.debug)
    logger_main.info(
        f'=== PROFANITY FILTER INITIALIZATION SUCCEEDED: '
        f'{sorted(profanity_filter.languages)} ===')
    return profanity_filter


async def main():
    config: Config = load_config()
    
    setup_logging(config=config)
    
    profanity_filter = setup_profanity_filter(config)
    
    bot = Bot(
        token=config.tg_bot.token,
        default=DefaultBotProperties(parse_mode=ParseMode.HTML))
    logger_main.info('=== BOT INITIALIZATION SUCCEEDED ===')
    
    dp = Dispatcher()
    
    await set_main_menu(bot=bot)
    
    try:
        # routers
        dp.include_router(owners_handlers.owners_router)
        dp.include_router(group_handlers.group_router)
        dp.include_router(other.other_router)
        
        # middlewares
        dp.update.middleware(ProfanityFilterMiddleware(profanity_filter))
        
        await bot.delete_webhook(drop_pending_updates=True)
        logger_main.info('Start bot')
        
        await dp.start_polling(bot, owners=config.tg_bot.id_owners)
    
    except Exception as err:
        logger_main.exception(err)
        raise
    finally:
        await bot.session.close()
        logger_main.info('Stop bot')


if __name__ == "__main__":
    asyncio.run(main())
