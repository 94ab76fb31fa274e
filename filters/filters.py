import logging
from dataclasses import dataclass, replace as replace_config
from typing import Any, Iterable, Mapping

import regex
from aiogram.filters import BaseFilter
from aiogram.types import CallbackQuery, Message

from filters.matcher import (Language,
                             MatchResult,
                             PatternTable,
                             TraceSink,
                             compile_pattern,
                             parse_languages,
                             search,
                             select_patterns)
from filters.patterns import PATTERNS
from filters.replaces import REPLACE_RU
from filters.scripts import segment_word

logger_filters = logging.getLogger(__name__)

DEFAULT_PLACEHOLDER = '***'
DEFAULT_LANGUAGES: frozenset[Language] = frozenset({Language.RU, Language.EN})


@dataclass(frozen=True)
class FilterConfig:
    placeholder: str = DEFAULT_PLACEHOLDER
    languages: frozenset[Language] = DEFAULT_LANGUAGES
    debug: bool = False


def log_trace(word: str, pattern: str) -> None:
    logger_filters.info(f'DEBUG: {word} {pattern}', extra={'trace': True})


class ProfanityFilter:
    """
    Поиск и замена нецензурных слов в тексте.
    Текст режется по пробелу, каждый токен очищается от символов чужой
    письменности, под-слова проверяются шаблонами активных языков.

    Attributes:
        placeholder (str): Строка, которой заменяются найденные слова.
        languages (frozenset[Language]): Активные языки.
        debug (bool): Сообщать, какое слово и какой шаблон сработали.

    Methods:
        is_bad(text): Есть ли в тексте нецензурные слова.
        replace(text): Заменяет нецензурные слова на placeholder.
        find(text): Все совпадения, на которые сработает replace.
        fix(text): Заменяет грубые слова по таблице замен.
        set_options(**options): Меняет настройки фильтра.

    Note:
        Настройки хранятся внутри экземпляра. Вызов set_options во время
        проверки из другого потока не синхронизируется.
    """

    OPTIONS: frozenset[str] = frozenset({'placeholder', 'languages', 'debug'})

    def __init__(self,
                 placeholder: str | None = None,
                 languages: Iterable[str] | None = None,
                 debug: bool | None = None,
                 *,
                 patterns: PatternTable | None = None,
                 replaces: Mapping[str, str] | None = None,
                 trace: TraceSink | None = None):
        self._config = FilterConfig(
            placeholder=placeholder or DEFAULT_PLACEHOLDER,
            languages=(
                DEFAULT_LANGUAGES if languages is None
                else parse_languages(languages)),
            debug=debug or False)

        self._patterns: PatternTable = PATTERNS if patterns is None else patterns
        self._replaces: Mapping[str, str] = (
            REPLACE_RU if replaces is None else replaces)
        self._trace: TraceSink = trace or log_trace

        self._compile_tables()
        logger_filters.debug(f'{self._config=}')

    def _compile_tables(self) -> None:
        sources = [p for table in self._patterns.values() for p in table]
        sources.extend(self._replaces)

        for pattern in sources:
            try:
                compile_pattern(pattern)
            except regex.error as err:
                logger_filters.error(
                    f'🟢Ошибка компиляции шаблона {pattern!r}: {err}',
                    exc_info=True)
                raise

    @property
    def config(self) -> FilterConfig:
        return self._config

    @property
    def placeholder(self) -> str:
        return self._config.placeholder

    @property
    def languages(self) -> frozenset[Language]:
        return self._config.languages

    @property
    def debug(self) -> bool:
        return self._config.debug

    def set_options(self, **options: Any) -> None:
        """
        Меняет настройки фильтра. Не переданные поля сохраняют значения.
        :param options: placeholder, languages, debug
        :return None:
        """
        unknown = set(options) - self.OPTIONS
        if unknown:
            raise TypeError(f'Unknown filter options: {sorted(unknown)}')

        if 'languages' in options:
            options['languages'] = parse_languages(options['languages'])

        self._config = replace_config(self._config, **options)
        logger_filters.info(f'Filter options updated: {self._config}')

    def is_bad(self, text: str) -> bool:
        """
        Проверяет, есть ли в тексте нецензурные слова.
        :param text: Исходный текст
        :return bool:
        """
        for token in text.split(' '):
            for word in segment_word(token):
                if self._search(word):
                    return True
        return False

    def replace(self, text: str) -> str:
        """
        Заменяет нецензурные слова на placeholder.
        Замена делается в исходном токене, поэтому знаки препинания вокруг
        слова сохраняются.
        :param text: Исходный текст
        :return str: Текст с замененными словами
        """
        tokens = text.split(' ')

        for i, token in enumerate(tokens):
            for word in segment_word(token):
                match = self._search(word)
                if match:
                    # Заменяется все под-слово, а не только совпавшая часть:
                    # "^motherf" скрывает "motherfucking" целиком
                    tokens[i] = tokens[i].replace(match.word, self.placeholder)
        return ' '.join(tokens)

    def find(self, text: str) -> list[MatchResult]:
        matches: list[MatchResult] = []
        for token in text.split(' '):
            for word in segment_word(token):
                if match := self._search(word):
                    matches.append(match)
        return matches

    def fix(self, text: str) -> str:
        """
        Заменяет грубые слова по таблице замен.
        Таблица перебирается с конца, каждое совпадение перезаписывает
        результат: в итоге остается замена самой ранней записи таблицы.
        Если текст начинался с заглавной буквы, она восстанавливается.
        :param text: Исходный текст
        :return str: Исправленный текст или исходный, если замен нет
        """
        result = text

        for pattern in reversed(list(self._replaces)):
            compiled = compile_pattern(pattern)
            if compiled.search(text):
                result = compiled.sub(self._replaces[pattern], text, count=1)

                if self._starts_upper(text):
                    result = self._up_first_char(result)
        return result

    def _search(self, word: str) -> MatchResult | None:
        candidates = select_patterns(word, self.languages, self._patterns)
        return search(word, candidates, debug=self.debug, trace=self._trace)

    @staticmethod
    def _starts_upper(string: str) -> bool:
        first = string[:1]
        return first.lower() != first

    @staticmethod
    def _up_first_char(string: str) -> str:
        return string[:1].upper() + string[1:]


class AccessRightsFilter(BaseFilter):
    """Пропускает только владельцев бота."""

    async def __call__(self,
                       event: Message | CallbackQuery,
                       owners: list[int]) -> bool:
        return event.from_user.id in owners


class ProfanityTextFilter(BaseFilter):
    """
    Фильтр для сообщений с нецензурными словами.
    Проверяет текст или подпись к медиа. Найденные совпадения передаются в
    хендлер под ключом `matches`.
    """

    async def __call__(self,
                       msg: Message,
                       profanity_filter: ProfanityFilter) -> bool | dict:
        text = msg.text or msg.caption or ''
        if not text:
            return False

        matches = profanity_filter.find(text)
        if not matches:
            return False

        logger_filters.warning(
            f'🟢Заблокировано: {[m.pattern for m in matches]}')
        return {'matches': matches}
