import logging

from aiogram import F, Router
from aiogram.enums import ChatType
from aiogram.types import Message

from filters.filters import AccessRightsFilter
from lexicon.lexicon_ru import LEXICON_RU
from utils.utils import deletes_msg_a_delay

logger = logging.getLogger(__name__)

other_router = Router()
other_router.message.filter(
    F.chat.type == ChatType.PRIVATE, ~AccessRightsFilter())


@other_router.message()
async def other_handler(msg: Message, owners: list[int]) -> None:
    
    logger.debug('Entry')
    
    owners_links = '\n'.join(
        f'👑 <a href="tg://user?id={own_id}">{own_id}</a>' for own_id in owners)
    
    value = await msg.answer(
        LEXICON_RU['other'].format(owners_links=owners_links))
    await deletes_msg_a_delay(value, delay=20)
    
    logger.debug('Exit')
