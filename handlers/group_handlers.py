import html
import logging

from aiogram import F, Router
from aiogram.enums import ChatType
from aiogram.exceptions import TelegramBadRequest, TelegramForbiddenError
from aiogram.types import Message

from filters.filters import ProfanityFilter, ProfanityTextFilter
from filters.matcher import MatchResult
from lexicon.lexicon_ru import LEXICON_RU
from utils.utils import get_username, mention_author

logger_group = logging.getLogger(__name__)

group_router = Router()

group_router.message.filter(
    F.chat.type.in_({ChatType.GROUP, ChatType.SUPERGROUP}))


@group_router.message(ProfanityTextFilter())
async def censor_message(msg: Message,
                         profanity_filter: ProfanityFilter,
                         matches: list[MatchResult]) -> None:
    """
    Handler for group messages with abusive words.
    
    Deletes the original message and posts it again with the abusive words
    replaced. When the bot has no right to delete messages, replies to the
    original with the censored text instead.
    
    Args:
        msg (Message): The message that did not pass the filter.
        profanity_filter (ProfanityFilter): The shared filter instance.
        matches (list[MatchResult]): Matches found by ProfanityTextFilter.
    """
    logger_group.debug('Entry')
    
    censored = html.escape(profanity_filter.replace(msg.text or msg.caption))
    logger_group.info(
        f'Censored message from {await get_username(msg)} in '
        f'{msg.chat.id=}: {[m.word for m in matches]}')
    
    try:
        await msg.delete()
    except (TelegramBadRequest, TelegramForbiddenError) as err:
        logger_group.warning(
            f'Failed to delete message with id {msg.message_id=}: {err=}')
        await msg.reply(LEXICON_RU['censored_reply'].format(censored=censored))
        logger_group.debug('Exit')
        return
    
    await msg.answer(
        LEXICON_RU['censored'].format(
            author=await mention_author(msg), censored=censored))
    
    logger_group.debug('Exit')
