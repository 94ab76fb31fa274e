import html
import logging

from aiogram import F, Router
from aiogram.enums import ChatType
from aiogram.filters import Command, CommandObject, CommandStart
from aiogram.types import CallbackQuery, Message

from filters.filters import AccessRightsFilter, ProfanityFilter
from filters.matcher import Language
from keyboards.kb_utils import LanguageCallback, create_languages_kb
from lexicon.lexicon_ru import LEXICON_RU
from utils.utils import get_username

logger_owners = logging.getLogger(__name__)

owners_router = Router()

owners_router.message.filter(
    F.chat.type == ChatType.PRIVATE, AccessRightsFilter())
owners_router.callback_query.filter(AccessRightsFilter())


def format_languages(languages: frozenset[Language]) -> str:
    return ', '.join(lang.value for lang in Language if lang in languages) or '-'


@owners_router.message(CommandStart())
async def cmd_start(msg: Message, profanity_filter: ProfanityFilter) -> None:
    """
    Handler for the /start command.
    Shows the current filter settings.
    """
    logger_owners.debug('Entry')
    
    await msg.answer(
        LEXICON_RU['start'].format(
            username=html.escape(await get_username(msg)),
            placeholder=html.escape(profanity_filter.placeholder),
            languages=format_languages(profanity_filter.languages),
            debug=('OFF', 'ON')[profanity_filter.debug]))
    
    logger_owners.debug('Exit')


@owners_router.message(Command('languages'))
async def cmd_languages(msg: Message, profanity_filter: ProfanityFilter) -> None:
    logger_owners.debug('Entry')
    
    await msg.answer(
        LEXICON_RU['languages'],
        reply_markup=create_languages_kb(profanity_filter.languages))
    
    logger_owners.debug('Exit')


@owners_router.callback_query(LanguageCallback.filter())
async def clbk_toggle_language(clbk: CallbackQuery,
                               callback_data: LanguageCallback,
                               profanity_filter: ProfanityFilter) -> None:
    """
    Switches one language on or off.
    
    Args:
        clbk (CallbackQuery): The callback query from the languages keyboard.
        callback_data (LanguageCallback): The language to toggle.
        profanity_filter (ProfanityFilter): The shared filter instance.
    """
    logger_owners.debug('Entry')
    
    languages = set(profanity_filter.languages)
    languages ^= {Language(callback_data.code)}
    profanity_filter.set_options(languages=languages)
    
    await clbk.message.edit_reply_markup(
        reply_markup=create_languages_kb(profanity_filter.languages))
    await clbk.answer(f'Языки: {format_languages(profanity_filter.languages)}')
    
    logger_owners.info(
        f'{await get_username(clbk)} toggled {callback_data.code}')
    logger_owners.debug('Exit')


@owners_router.callback_query(F.data == '/exit')
async def clbk_exit(clbk: CallbackQuery) -> None:
    logger_owners.debug('Entry')
    await clbk.message.delete()
    await clbk.answer()
    logger_owners.debug('Exit')


@owners_router.message(Command('placeholder'))
async def cmd_placeholder(msg: Message,
                          command: CommandObject,
                          profanity_filter: ProfanityFilter) -> None:
    logger_owners.debug('Entry')
    
    if not command.args:
        await msg.answer(LEXICON_RU['placeholder_usage'])
        return
    
    profanity_filter.set_options(placeholder=command.args.strip())
    await msg.answer(
        LEXICON_RU['placeholder_set'].format(
            placeholder=html.escape(profanity_filter.placeholder)))
    
    logger_owners.debug('Exit')


@owners_router.message(Command('debug'))
async def cmd_debug(msg: Message, profanity_filter: ProfanityFilter) -> None:
    logger_owners.debug('Entry')
    
    profanity_filter.set_options(debug=not profanity_filter.debug)
    await msg.answer(
        LEXICON_RU['debug_set'].format(
            state=('OFF', 'ON')[profanity_filter.debug]))
    
    logger_owners.debug('Exit')


@owners_router.message(Command('check'))
async def cmd_check(msg: Message,
                    command: CommandObject,
                    profanity_filter: ProfanityFilter) -> None:
    logger_owners.debug('Entry')
    
    if not command.args:
        await msg.answer(LEXICON_RU['check_usage'])
        return
    
    if profanity_filter.is_bad(command.args):
        text = LEXICON_RU['check_bad'].format(
            censored=html.escape(profanity_filter.replace(command.args)))
    else:
        text = LEXICON_RU['check_clean']
    await msg.answer(text)
    
    logger_owners.debug('Exit')


@owners_router.message(Command('fix'))
async def cmd_fix(msg: Message,
                  command: CommandObject,
                  profanity_filter: ProfanityFilter) -> None:
    logger_owners.debug('Entry')
    
    if not command.args:
        await msg.answer(LEXICON_RU['fix_usage'])
        return
    
    await msg.answer(
        LEXICON_RU['fix_result'].format(
            fixed=html.escape(profanity_filter.fix(command.args))))
    
    logger_owners.debug('Exit')
