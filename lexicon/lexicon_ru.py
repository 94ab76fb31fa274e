from dataclasses import dataclass


@dataclass
class LexiconCommandsRu:
    start: str = 'Текущие настройки фильтра'
    languages: str = 'Включить / выключить языки'
    placeholder: str = 'Задать строку замены'
    debug: str = 'Вкл / выкл отладку шаблонов'
    check: str = 'Проверить текст'
    fix: str = 'Смягчить грубые слова в тексте'


LEXICON_RU: dict[str, str] = {
    'start': ('<b>Приветствую, {username}!</b>\n'
              'Я удаляю в группах сообщения с нецензурными словами и '
              'публикую их заново с заменой слов.\n\n'
              '<b>Настройки фильтра:</b>\n'
              '<pre>Замена: {placeholder}\n'
              'Языки: {languages}\n'
              'Отладка: {debug}</pre>'),
    'languages': '<b>Языки фильтра:</b>\n🟢 - включен, 🔴 - выключен',
    'placeholder_usage': 'Использование: <code>/placeholder строка</code>',
    'placeholder_set': 'Строка замены: <code>{placeholder}</code>',
    'debug_set': 'Отладка шаблонов: <b>{state}</b>',
    'check_usage': 'Использование: <code>/check текст</code>',
    'check_bad': '🔴 Найдены нецензурные слова:\n<pre>{censored}</pre>',
    'check_clean': '🟢 Текст чистый',
    'fix_usage': 'Использование: <code>/fix текст</code>',
    'fix_result': '<pre>{fixed}</pre>',
    'censored': '{author}: {censored}',
    'censored_reply': '⚠️ Сообщение содержит нецензурные слова:\n{censored}',
    'other': ('Бот работает в группах. По вопросам настройки обратитесь '
              'к владельцам:\n{owners_links}'),
}
