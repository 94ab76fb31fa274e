import logging
from enum import Enum

import regex

logger_scripts = logging.getLogger(__name__)


class ScriptFamily(Enum):
    LATIN = 'Latin'
    CYRILLIC = 'Cyrillic'
    HAN = 'Han'
    NONE = 'None'


# Порядок проверки важен: первая найденная письменность побеждает
_PRESENCE: dict[ScriptFamily, regex.Pattern] = {
    family: regex.compile(rf'\p{{Script={family.value}}}', regex.IGNORECASE)
    for family in (ScriptFamily.LATIN, ScriptFamily.CYRILLIC, ScriptFamily.HAN)}

_FOREIGN: dict[ScriptFamily, regex.Pattern] = {
    family: regex.compile(rf'[^\p{{Script={family.value}}}]')
    for family in _PRESENCE}


def has_latin(string: str) -> bool:
    return bool(_PRESENCE[ScriptFamily.LATIN].search(string))


def has_cyrillic(string: str) -> bool:
    return bool(_PRESENCE[ScriptFamily.CYRILLIC].search(string))


def has_han(string: str) -> bool:
    return bool(_PRESENCE[ScriptFamily.HAN].search(string))


def classify_script(string: str) -> ScriptFamily:
    """
    Определяет письменность строки.
    Строка относится к первой письменности (Latin → Cyrillic → Han), в которой
    есть хотя бы один символ, а не к той, которой больше.
    :param string: Исходная строка
    :return ScriptFamily:
    """
    for family, pattern in _PRESENCE.items():
        if pattern.search(string):
            return family
    return ScriptFamily.NONE


def segment_word(token: str, family: ScriptFamily | None = None) -> list[str]:
    """
    Разбивает токен на под-слова одной письменности.
    Все символы чужой письменности заменяются пробелом, затем строка
    режется по пробельным последовательностям.
    :param token: Токен, полученный разбиением текста по пробелу
    :param family: Письменность токена (определяется, если не передана)
    :return list[str]: Под-слова в исходном порядке, возможно пустой список
    """
    if family is None:
        family = classify_script(token)

    if family is not ScriptFamily.NONE:
        token = _FOREIGN[family].sub(' ', token)
    return token.split()
