import logging
from typing import Any, Awaitable, Callable, Dict

from aiogram import BaseMiddleware
from aiogram.types import TelegramObject

from filters.filters import ProfanityFilter

logger_middl_outer = logging.getLogger(__name__)


class ProfanityFilterMiddleware(BaseMiddleware):
    """
    Middleware для всех апдейтов.
    Добавляет общий экземпляр ProfanityFilter в контекст (в данные (data)),
    откуда его получают фильтры и обработчики.
    """
    
    def __init__(self, profanity_filter: ProfanityFilter):
        self.profanity_filter = profanity_filter
    
    async def __call__(self,
                       handler: Callable[
                           [TelegramObject, Dict[str, Any]], Awaitable[Any]],
                       event: TelegramObject,
                       data: Dict[str, Any]) -> Any:
        """
        Обрабатывает event(входящее событие).
        Args:
            handler: Обработчик, который будет вызван после middleware.
            event(TelegramObject): Входящее событие
            data: Словарь с данными, которые передаются между middleware и
            обработчиками.
        Returns:
            handler.
        """
        data['profanity_filter'] = self.profanity_filter
        return await handler(event, data)
