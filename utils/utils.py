import asyncio
import html
import logging

from aiogram.types import CallbackQuery, Message

logger_utils = logging.getLogger(__name__)


async def get_username(_type_update: Message | CallbackQuery) -> str:
    user = _type_update.from_user
    if user is None:
        return 'Anonymous'
    
    if username := user.username:
        return f'@{username}'
    elif first_name := user.first_name:
        return first_name
    return 'Anonymous'


async def mention_author(msg: Message) -> str:
    """
    Ссылка на автора сообщения для HTML-разметки.
    Args:
        msg (Message): Сообщение.
    Returns:
        str: `<a href="tg://user?id=...">имя</a>` или просто имя, если
        автор неизвестен (например, сообщение от имени канала).
    """
    name = html.escape(await get_username(msg))
    if msg.from_user is None:
        return name
    return f'<a href="tg://user?id={msg.from_user.id}">{name}</a>'


async def deletes_msg_a_delay(type_update: Message, delay: int = 2) -> None:
    """
    Удаляет сообщение с задержкой, показывая обратный отсчет в его тексте.
    
    Args:
        type_update (Message): Объект апдейта.
        delay (int): Задержка в секундах.
    Returns:
        None
    """
    logger_utils.debug('Entry')
    
    original_text = type_update.html_text
    try:
        for remaining in range(delay, 0, -1):
            await type_update.edit_text(
                f"{original_text}\n\n"
                f"Удалится через: {remaining} сек...")
            await asyncio.sleep(1)
    except Exception as e:
        logger_utils.error(
            f"Ошибка при обновлении сообщения: {e}", exc_info=True)
    finally:
        await type_update.delete()
        logger_utils.debug('Exit')
