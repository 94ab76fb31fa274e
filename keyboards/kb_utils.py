import logging
from typing import Iterable

from aiogram.filters.callback_data import CallbackData
from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup
from aiogram.utils.keyboard import InlineKeyboardBuilder

from filters.matcher import Language

logger_kb_utils = logging.getLogger(__name__)

LANGUAGE_TITLES: dict[Language, str] = {
    Language.RU: 'Русский',
    Language.EN: 'English',
    Language.FI: 'Suomi',
    Language.SV: 'Svenska',
    Language.ZH: '中文'}


class LanguageCallback(CallbackData, prefix='lang'):
    code: str


def create_static_kb(width: int = 1,
                     *args: InlineKeyboardButton,
                     exit_=False,
                     **kwargs: str) -> InlineKeyboardMarkup:
    """
    Генерация инлайн-клавиатур
    Args:
        width (int): Количество кнопок в строке
        *args (InlineKeyboardButton): Готовые кнопки
        exit_ (bool): Добавить кнопку "Выйти"
        **kwargs : Кнопки в формате {callback_data: текст}

    Returns: InlineKeyboardMarkup
    """
    BUTT_EXIT: dict[str, str] = {'exit': 'Выйти'}
    
    kb_builder = InlineKeyboardBuilder()
    buttons: list[InlineKeyboardButton] = list(args)
    
    for data, text in kwargs.items():
        buttons.append(InlineKeyboardButton(text=text, callback_data=data))
    
    kb_builder.row(*buttons, width=width)
    
    if exit_:
        kb_builder.row(
            InlineKeyboardButton(text=BUTT_EXIT['exit'], callback_data='/exit'))
    return kb_builder.as_markup()


def create_languages_kb(active: Iterable[Language]) -> InlineKeyboardMarkup:
    active = set(active)
    buttons: list[InlineKeyboardButton] = []
    for lang in Language:
        mark = ('🔴', '🟢')[lang in active]
        buttons.append(InlineKeyboardButton(
            text=f'{mark} {LANGUAGE_TITLES[lang]}',
            callback_data=LanguageCallback(code=lang.value).pack()))
    
    return create_static_kb(2, *buttons, exit_=True)
