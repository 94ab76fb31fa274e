import logging
from dataclasses import dataclass
from enum import StrEnum
from functools import lru_cache
from typing import Callable, Iterable, Mapping, Sequence

import regex

from filters.scripts import has_cyrillic, has_han, has_latin

logger_matcher = logging.getLogger(__name__)

TraceSink = Callable[[str, str], None]

ANCHOR = '^'


class Language(StrEnum):
    RU = 'ru'
    EN = 'en'
    FI = 'fi'
    SV = 'sv'
    ZH = 'zh'


PatternTable = Mapping[Language, Sequence[str]]

# Языки латиницы перебираются строго в этом порядке
LATIN_LANGUAGES: tuple[Language, ...] = (Language.EN, Language.FI, Language.SV)


@dataclass(frozen=True)
class MatchResult:
    """
    Результат поиска по одному слову.
    Поле word нужно replace: в токене заменяется все под-слово, а не
    только совпавшая подстрока.

    Attributes:
        word (str): Слово, в котором велся поиск.
        matched (str): Совпавшая подстрока.
        pattern (str): Шаблон, на котором сработал поиск.
    """
    word: str
    matched: str
    pattern: str


@lru_cache(maxsize=None)
def compile_pattern(pattern: str) -> regex.Pattern:
    return regex.compile(pattern, regex.IGNORECASE | regex.UNICODE)


def parse_languages(languages: Iterable[str]) -> frozenset[Language]:
    """Приводит коды языков к Language, неизвестный код - ValueError."""
    return frozenset(Language(lang) for lang in languages)


def select_patterns(subword: str,
                    languages: Iterable[Language],
                    table: PatternTable) -> list[str]:
    """
    Возвращает шаблоны-кандидаты для под-слова.
    Кириллица отдается целиком таблице `ru`, латиница собирается из
    en → fi → sv, иероглифы - из `zh`.
    :param subword: Под-слово одной письменности
    :param languages: Активные языки фильтра
    :param table: Таблица шаблонов по языкам
    :return list[str]:
    """
    active = set(languages)
    patterns: list[str] = []

    # https://en.wikipedia.org/wiki/ISO_15924
    if Language.RU in active and has_cyrillic(subword):
        patterns.extend(table.get(Language.RU, ()))
    elif has_latin(subword):
        for lang in LATIN_LANGUAGES:
            if lang in active:
                patterns.extend(table.get(lang, ()))
    elif has_han(subword):
        if Language.ZH in active:
            patterns.extend(table.get(Language.ZH, ()))
    return patterns


def is_anchored(pattern: str) -> bool:
    return pattern.startswith(ANCHOR)


def anchor_allows(pattern: str, first_letter: str) -> bool:
    if not is_anchored(pattern):
        return True
    return pattern.replace(ANCHOR, '', 1)[:1].lower() == first_letter


def search(word: str,
           candidates: Sequence[str],
           debug: bool = False,
           trace: TraceSink | None = None) -> MatchResult | None:
    """
    Ищет первый сработавший шаблон для слова.
    Привязанные шаблоны (`^x...`) отбрасываются, если слово начинается не
    с буквы привязки. Порядок кандидатов не меняется: побеждает первое
    совпадение, а не самое длинное.
    :param word: Исходное слово
    :param candidates: Шаблоны в порядке таблицы
    :param debug: Сообщать в trace слово и сработавший шаблон
    :param trace: Приемник отладочных сообщений
    :return MatchResult | None:
    """
    first_letter = word[:1].lower()
    filtered = [p for p in candidates if anchor_allows(p, first_letter)]

    for pattern in filtered:
        match = compile_pattern(pattern).search(word)
        if match:
            if debug and trace is not None:
                trace(word, pattern)
            return MatchResult(word=word, matched=match.group(0), pattern=pattern)
    return None
